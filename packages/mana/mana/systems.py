"""System factories for per-tick pool processing."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Hashable, MutableMapping

from mana.codec import encode
from mana.registry import OwnerRegistry

if TYPE_CHECKING:
    from mana.types import TickContext

logger = logging.getLogger(__name__)


def make_regen_system(
    on_full: Callable[[Hashable, TickContext], None] | None = None,
) -> Callable[[OwnerRegistry, TickContext], None]:
    """Return a system that advances every registered pool by one tick.

    ``on_full(owner_key, ctx)`` fires on the tick a pool becomes completely
    full through regeneration.
    """

    def regen_system(registry: OwnerRegistry, ctx: TickContext) -> None:
        for key, pool in registry.items():
            was_full = pool.is_all_full()
            pool.tick()
            if on_full is not None and not was_full and pool.is_all_full():
                on_full(key, ctx)

    return regen_system


def make_autosave_system(
    records: MutableMapping[Hashable, dict[str, Any]],
    interval_ticks: int,
) -> Callable[[OwnerRegistry, TickContext], None]:
    """Return a system that encodes every online pool into *records*.

    Runs on ticks that are a multiple of *interval_ticks*; an interval of
    0 disables it.
    """
    if interval_ticks < 0:
        raise ValueError(f"interval_ticks must be >= 0, got {interval_ticks}")

    def autosave_system(registry: OwnerRegistry, ctx: TickContext) -> None:
        if interval_ticks == 0 or ctx.tick_number % interval_ticks != 0:
            return
        saved = 0
        for key, pool in registry.items():
            records[key] = encode(pool)
            saved += 1
        logger.debug("Autosaved %d mana pools at tick %d", saved, ctx.tick_number)

    return autosave_system
