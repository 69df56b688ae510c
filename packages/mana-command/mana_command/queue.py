"""CommandQueue - operator commands serialized onto the tick loop."""
from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING, Any, Callable

from mana_command.commands import CommandResult

if TYPE_CHECKING:
    from mana import OwnerRegistry, TickContext

Handler = Callable[[Any, "OwnerRegistry", "TickContext"], CommandResult]


class CommandQueue:
    """Routes operator commands to typed handlers during the tick loop.

    ``enqueue`` may be called from any thread (a console, a network
    listener); handlers only ever run inside ``drain``, on the loop that
    owns the pools. One handler per command class, dispatched by type.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Handler] = {}
        self._pending: deque[Any] = deque()
        self._lock = threading.Lock()

    def handle(self, cmd_type: type[Any], handler: Handler) -> None:
        """Register ``handler(cmd, registry, ctx) -> CommandResult``.

        Only one handler per type; later calls overwrite.
        """
        self._handlers[cmd_type] = handler

    def has_handler(self, cmd_type: type[Any]) -> bool:
        return cmd_type in self._handlers

    def enqueue(self, cmd: Any) -> None:
        with self._lock:
            self._pending.append(cmd)

    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def drain(
        self,
        registry: OwnerRegistry,
        ctx: TickContext,
    ) -> list[tuple[Any, CommandResult]]:
        """Process pending commands in FIFO order until the queue is empty.

        Raises ``TypeError`` if no handler is registered for a command's type.
        Commands are taken one at a time, so whatever is still queued when a
        handler raises stays pending for the next drain.
        """
        results: list[tuple[Any, CommandResult]] = []
        while True:
            with self._lock:
                if not self._pending:
                    break
                cmd = self._pending.popleft()
            cmd_type = type(cmd)
            handler = self._handlers.get(cmd_type)
            if handler is None:
                raise TypeError(f"No handler registered for {cmd_type.__qualname__}")
            results.append((cmd, handler(cmd, registry, ctx)))
        return results
