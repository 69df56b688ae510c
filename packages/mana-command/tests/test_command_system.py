"""Tests for make_command_system on a running server."""
from __future__ import annotations

import uuid

from mana import ManaServer, Pool, make_regen_system
from mana_command import (
    CommandQueue,
    RemoveMana,
    SetMana,
    ShowMana,
    install_default_handlers,
    make_command_system,
)
from mana_config import ConfigStore


def test_commands_applied_during_tick():
    server = ManaServer(regen=False)
    queue = CommandQueue()
    install_default_handlers(queue, ConfigStore())
    server.add_system(make_command_system(queue))
    key = uuid.uuid4()
    pool = server.join(key)

    queue.enqueue(SetMana(key, "primary", 10.0))
    assert pool.current(Pool.PRIMARY) == 250.0
    server.step()
    assert pool.current(Pool.PRIMARY) == 10.0
    assert queue.pending() == 0


def test_accept_and_reject_callbacks():
    server = ManaServer(regen=False)
    queue = CommandQueue()
    install_default_handlers(queue, ConfigStore())
    accepted, rejected = [], []
    server.add_system(
        make_command_system(
            queue,
            on_accept=lambda cmd, result: accepted.append(cmd),
            on_reject=lambda cmd, result: rejected.append(result.message),
        )
    )
    key = uuid.uuid4()
    server.join(key)

    ok = ShowMana(key)
    queue.enqueue(ok)
    queue.enqueue(RemoveMana(key, "all", 99999.0, name="Alex"))
    server.step()

    assert accepted == [ok]
    assert rejected == ["Alex has only 1750.0 mana"]


def test_command_before_regen_sees_pre_tick_state():
    server = ManaServer(regen=False)
    queue = CommandQueue()
    install_default_handlers(queue, ConfigStore())
    server.add_system(make_command_system(queue))
    server.add_system(make_regen_system())
    key = uuid.uuid4()
    pool = server.join(key)
    queue.enqueue(SetMana(key, "primary", 0.0))
    server.run(20)
    assert pool.current(Pool.PRIMARY) == 1.0
