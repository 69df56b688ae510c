"""OwnerRegistry - lock-striped map from owner key to ResourcePool."""
from __future__ import annotations

import threading
from typing import Callable, Hashable

from mana.pool import ResourcePool


class _Shard:
    __slots__ = ("lock", "pools")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.pools: dict[Hashable, ResourcePool] = {}


class OwnerRegistry:
    """Owns exactly one ResourcePool per owner key.

    Keys are stable value identities (normally ``uuid.UUID``). Entries are
    created on first ``get_or_create`` and live until ``remove`` is called
    from the owner's leave hook; nothing is evicted automatically.

    Keys are spread over independently locked shards, so callers working on
    different owners rarely contend, while two racing ``get_or_create`` calls
    for the same key always return the same pool.
    """

    def __init__(
        self,
        shards: int = 16,
        factory: Callable[[], ResourcePool] = ResourcePool,
    ) -> None:
        if shards < 1:
            raise ValueError(f"shards must be >= 1, got {shards}")
        self._shards = [_Shard() for _ in range(shards)]
        self._factory = factory

    def _shard(self, key: Hashable) -> _Shard:
        return self._shards[hash(key) % len(self._shards)]

    def get_or_create(self, key: Hashable) -> ResourcePool:
        """Return the owner's pool, creating a full default pool on first use."""
        shard = self._shard(key)
        with shard.lock:
            pool = shard.pools.get(key)
            if pool is None:
                pool = self._factory()
                shard.pools[key] = pool
            return pool

    def get_if_exists(self, key: Hashable) -> ResourcePool | None:
        shard = self._shard(key)
        with shard.lock:
            return shard.pools.get(key)

    def has(self, key: Hashable) -> bool:
        shard = self._shard(key)
        with shard.lock:
            return key in shard.pools

    def remove(self, key: Hashable) -> ResourcePool | None:
        """Evict an owner. Returns the evicted pool, or None if absent."""
        shard = self._shard(key)
        with shard.lock:
            return shard.pools.pop(key, None)

    def count(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.pools)
        return total

    def items(self) -> list[tuple[Hashable, ResourcePool]]:
        """Point-in-time list of ``(key, pool)`` pairs, shard by shard."""
        result: list[tuple[Hashable, ResourcePool]] = []
        for shard in self._shards:
            with shard.lock:
                result.extend(shard.pools.items())
        return result

    def owners(self) -> list[Hashable]:
        return [key for key, _pool in self.items()]

    def clear(self) -> None:
        for shard in self._shards:
            with shard.lock:
                shard.pools.clear()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]
