"""System factory for the command queue."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from mana_command.commands import CommandResult
from mana_command.queue import CommandQueue

if TYPE_CHECKING:
    from mana import OwnerRegistry, TickContext


def make_command_system(
    queue: CommandQueue,
    on_accept: Callable[[Any, CommandResult], None] | None = None,
    on_reject: Callable[[Any, CommandResult], None] | None = None,
) -> Callable[[OwnerRegistry, TickContext], None]:
    """Return a system that drains the command queue each tick.

    ``on_accept(cmd, result)`` fires for results with ``ok`` True,
    ``on_reject(cmd, result)`` for the rest. Feedback to the operator is
    delivered through these callbacks.
    """

    def command_system(registry: OwnerRegistry, ctx: TickContext) -> None:
        for cmd, result in queue.drain(registry, ctx):
            if result.ok:
                if on_accept is not None:
                    on_accept(cmd, result)
            else:
                if on_reject is not None:
                    on_reject(cmd, result)

    return command_system
