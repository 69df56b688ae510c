"""ManaServer - authoritative tick loop and owner join/leave lifecycle."""
from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Hashable, Iterable, MutableMapping

from mana.clock import Clock
from mana.codec import decode_into, encode
from mana.pool import ResourcePool
from mana.registry import OwnerRegistry
from mana.systems import make_regen_system
from mana.types import TICKS_PER_SECOND, System, TickContext

logger = logging.getLogger(__name__)

OwnerHook = Callable[[Hashable, ResourcePool], None]
LoopHook = Callable[[OwnerRegistry, TickContext], None]


class ManaServer:
    """Single authoritative timeline for every pool it hosts.

    ``join`` attaches an owner (create, then load its saved record),
    ``leave`` detaches it (save, then evict), and each ``step`` runs the
    registered systems once. The regeneration system is installed first
    unless *regen* is False. Pools never catch up on ticks they missed
    while their owner was offline.

    *records* is the save store, keyed by owner; any mutable mapping works.
    """

    def __init__(
        self,
        tps: int = TICKS_PER_SECOND,
        registry: OwnerRegistry | None = None,
        records: MutableMapping[Hashable, dict[str, Any]] | None = None,
        regen: bool = True,
    ) -> None:
        self._clock = Clock(tps)
        self._registry = registry if registry is not None else OwnerRegistry()
        self._records: MutableMapping[Hashable, dict[str, Any]] = (
            records if records is not None else {}
        )
        self._systems: list[System] = []
        self._join_hooks: list[OwnerHook] = []
        self._leave_hooks: list[OwnerHook] = []
        self._start_hooks: list[LoopHook] = []
        self._stop_hooks: list[LoopHook] = []
        self._stop_requested: bool = False

        if regen:
            self.add_system(make_regen_system())

    @property
    def registry(self) -> OwnerRegistry:
        return self._registry

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def records(self) -> MutableMapping[Hashable, dict[str, Any]]:
        return self._records

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_join(self, hook: OwnerHook) -> None:
        """Register ``hook(owner_key, pool)``, called after the record loads."""
        self._join_hooks.append(hook)

    def on_leave(self, hook: OwnerHook) -> None:
        """Register ``hook(owner_key, pool)``, called after save and eviction."""
        self._leave_hooks.append(hook)

    def on_start(self, hook: LoopHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: LoopHook) -> None:
        self._stop_hooks.append(hook)

    # --- Owner lifecycle ---

    def join(self, key: Hashable) -> ResourcePool:
        existing = self._registry.get_if_exists(key)
        if existing is not None:
            logger.warning("Owner %s joined while already online", key)
            return existing

        pool = self._registry.get_or_create(key)
        record = self._records.get(key)
        if record is not None:
            decode_into(pool, record)
        for hook in self._join_hooks:
            hook(key, pool)
        logger.debug("Owner %s joined (saved record: %s)", key, record is not None)
        return pool

    def leave(self, key: Hashable) -> dict[str, Any] | None:
        """Save and evict *key*. Returns the saved record, None if not online."""
        pool = self._registry.get_if_exists(key)
        if pool is None:
            return None
        record = encode(pool)
        self._records[key] = record
        self._registry.remove(key)
        for hook in self._leave_hooks:
            hook(key, pool)
        logger.debug("Owner %s left", key)
        return record

    def shutdown(self) -> int:
        """Save and evict every online owner. Returns how many were saved."""
        owners = self._registry.owners()
        for key in owners:
            self.leave(key)
        logger.info("Mana server shut down, saved %d owners", len(owners))
        return len(owners)

    # --- Loop ---

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._registry, ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[LoopHook]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._registry, ctx)

    def step(self) -> None:
        """Run one unpaced tick without start or stop hooks."""
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        """Run up to *n* ticks back to back, as fast as the systems allow."""
        self._loop(range(n), paced=False)

    def run_forever(self) -> None:
        """Run ticks paced to the clock until a system requests a stop."""
        logger.info("Mana server running at %d tps", self._clock.tps)
        self._loop(itertools.count(), paced=True)

    def _loop(self, ticks: Iterable[int], paced: bool) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)
        for _ in ticks:
            self._tick()
            if self._stop_requested:
                break
            if paced:
                self._clock.wait()
        self._fire(self._stop_hooks)
