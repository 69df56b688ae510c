"""Mana smoke test - headless server with two players and an operator console.

Players join, cast spells for ~15 seconds of simulated time, an operator
issues admin commands through the command queue, and everyone leaves.
The saved records are then used to bring one player back.

Run:
    python examples/mana-smoke/smoke.py
"""
from __future__ import annotations

import logging
import uuid

from mana import ManaHelper, ManaServer, Pool, TickContext, make_autosave_system
from mana_command import (
    AddMana,
    CommandQueue,
    DebugInfo,
    ShowMana,
    install_default_handlers,
    make_command_system,
)
from mana_config import ConfigStore, scale_spell_cost
from mana_hud import read_frame

FIREBALL_COST = 40.0
CAST_EVERY = 30  # ticks

logger = logging.getLogger("mana-smoke")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    store = ConfigStore()
    server = ManaServer()
    queue = CommandQueue()
    install_default_handlers(queue, store)
    server.add_system(
        make_command_system(
            queue,
            on_accept=lambda cmd, result: print(result.message),
            on_reject=lambda cmd, result: print(f"[rejected] {result.message}"),
        )
    )
    interval = server.clock.ticks_for(store.auto_save_interval())
    server.add_system(make_autosave_system(server.records, interval))

    names = {uuid.uuid4(): "Ada", uuid.uuid4(): "Brin"}
    for key in names:
        server.join(key)

    def casting_system(registry, ctx: TickContext) -> None:
        if ctx.tick_number % CAST_EVERY != 0:
            return
        cost = scale_spell_cost(store, FIREBALL_COST)
        for key, pool in registry.items():
            if not ManaHelper.try_consume(pool, cost):
                logger.info("%s is out of mana", names[key])

    server.add_system(casting_system)

    server.run(server.clock.ticks_for(15.0))

    ada, brin = list(names)
    queue.enqueue(ShowMana(ada, name=names[ada]))
    queue.enqueue(AddMana(brin, "all", 500.0, name=names[brin]))
    queue.enqueue(ShowMana(brin, "primary", name=names[brin]))
    queue.enqueue(ShowMana(brin, "quaternary", name=names[brin]))
    queue.enqueue(DebugInfo())
    server.step()

    frame = read_frame(server.registry.get_if_exists(ada), store)
    if frame is not None:
        print(f"HUD {names[ada]}: " + "  ".join(s.label for s in frame.slots))

    print(f"Saved {server.shutdown()} players")

    pool = server.join(ada)
    print(f"{names[ada]} back with {ManaHelper.format_pool(pool, Pool.PRIMARY)} primary")


if __name__ == "__main__":
    main()
