"""ResourcePool - three-slot mana pool with fixed-step regeneration."""
from __future__ import annotations

import math
from typing import Mapping

from mana.types import MAX_AMOUNT, POOL_DEFS, TICKS_PER_SECOND, Pool, UnknownPoolError

# Amounts are held as integers: one mana is _UNITS units. Regeneration and
# priority arithmetic therefore never accumulate float error, and two pools
# fed the same operations always hold identical state.
_UNITS = 10_000
_MAX_UNITS = round(MAX_AMOUNT * _UNITS)

_REGEN_PER_TICK: dict[Pool, int] = {
    pool: round(defn.regen_rate * _UNITS / TICKS_PER_SECOND)
    for pool, defn in POOL_DEFS.items()
}


def _to_units(amount: float) -> int:
    """Scale to units, saturating at +/-MAX_AMOUNT."""
    return round(max(-MAX_AMOUNT, min(MAX_AMOUNT, amount)) * _UNITS)


def _saturate(units: int) -> int:
    return max(-_MAX_UNITS, min(_MAX_UNITS, units))


def _is_amount(amount: float) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    # ints are exact and may be too large for isfinite
    return isinstance(amount, int) or math.isfinite(amount)


def _check(pool: Pool) -> Pool:
    if not isinstance(pool, Pool):
        raise UnknownPoolError(pool)
    return pool


class ResourcePool:
    """Current amount, permanent pool value and temporary modifier per slot.

    ``effective_max(pool) = max(0, pool_value + max_modifier)`` and every
    mutation keeps ``0 <= current <= effective_max``. Mutations report
    failure through their return value (or silently do nothing) rather than
    raising; only a non-``Pool`` slot argument raises ``UnknownPoolError``.

    A new pool starts full.
    """

    def __init__(
        self,
        pool_values: Mapping[Pool, float] | None = None,
        regenerating: bool = True,
    ) -> None:
        self._value: dict[Pool, int] = {}
        self._modifier: dict[Pool, int] = {}
        for pool, defn in POOL_DEFS.items():
            value = defn.default_value
            if pool_values is not None:
                value = pool_values.get(pool, value)
                if not _is_amount(value):
                    value = defn.default_value
            self._value[pool] = max(0, _to_units(value))
            self._modifier[pool] = 0
        self._current: dict[Pool, int] = {pool: self._cap(pool) for pool in Pool}
        self._regenerating = regenerating

    # --- Internal helpers ---

    def _cap(self, pool: Pool) -> int:
        return max(0, self._value[pool] + self._modifier[pool])

    def _clamp(self, pool: Pool) -> None:
        self._current[pool] = max(0, min(self._current[pool], self._cap(pool)))

    def _total_units(self) -> int:
        return sum(self._current.values())

    # --- Regeneration ---

    def tick(self) -> None:
        """Advance regeneration by one fixed step of 1/TICKS_PER_SECOND."""
        if not self._regenerating:
            return
        for pool in Pool:
            cap = self._cap(pool)
            current = self._current[pool]
            if current < cap:
                self._current[pool] = min(cap, current + _REGEN_PER_TICK[pool])

    def set_regenerating(self, regenerating: bool) -> None:
        self._regenerating = bool(regenerating)

    @property
    def regenerating(self) -> bool:
        return self._regenerating

    # --- Consumption and restoration ---

    def consume(self, amount: float) -> bool:
        """Take *amount* primary-first. All or nothing; returns False if short."""
        if not _is_amount(amount) or amount < 0:
            return False
        if amount > self.total_current():
            return False
        remaining = min(_to_units(amount), self._total_units())
        for pool in Pool:
            if remaining == 0:
                break
            taken = min(remaining, self._current[pool])
            self._current[pool] -= taken
            remaining -= taken
        return True

    def restore(self, amount: float) -> None:
        """Add *amount* primary-first into free space. Overflow is discarded."""
        if not _is_amount(amount) or amount <= 0:
            return
        remaining = _to_units(amount)
        for pool in Pool:
            if remaining <= 0:
                break
            space = self._cap(pool) - self._current[pool]
            if space > 0:
                added = min(remaining, space)
                self._current[pool] += added
                remaining -= added

    def restore_pool(self, pool: Pool) -> None:
        _check(pool)
        self._current[pool] = self._cap(pool)

    def restore_all(self) -> None:
        for pool in Pool:
            self.restore_pool(pool)

    def set_current(self, pool: Pool, amount: float) -> bool:
        """Set one slot's current amount, clamped to its effective max."""
        _check(pool)
        if not _is_amount(amount) or amount < 0:
            return False
        self._current[pool] = min(_to_units(amount), self._cap(pool))
        return True

    def transfer_to(self, other: ResourcePool, amount: float) -> bool:
        """Consume *amount* here and restore it into *other*.

        Nothing moves unless the consume succeeds. Whatever *other* cannot
        hold is lost, as with ``restore``.
        """
        if not _is_amount(amount) or amount <= 0:
            return False
        if self.total_current() < amount:
            return False
        if not self.consume(amount):
            return False
        other.restore(amount)
        return True

    # --- Capacity ---

    def increase_pool_value(self, pool: Pool, amount: float) -> None:
        """Permanently raise capacity and refill current by the same amount."""
        _check(pool)
        if not _is_amount(amount) or amount <= 0:
            return
        units = _to_units(amount)
        self._value[pool] = _saturate(self._value[pool] + units)
        self._current[pool] += units
        self._clamp(pool)

    def set_pool_value(self, pool: Pool, value: float) -> None:
        _check(pool)
        if not _is_amount(value) or value < 0:
            return
        self._value[pool] = _to_units(value)
        self._clamp(pool)

    def expand_all(self, amount: float) -> None:
        for pool in Pool:
            self.increase_pool_value(pool, amount)

    def apply_max_modifier(self, pool: Pool, delta: float) -> None:
        """Adjust the temporary capacity modifier. Current shrinks with it."""
        _check(pool)
        if not _is_amount(delta):
            return
        self._modifier[pool] = _saturate(self._modifier[pool] + _to_units(delta))
        self._clamp(pool)

    def clear_max_modifiers(self) -> None:
        for pool in Pool:
            self._modifier[pool] = 0
            self._clamp(pool)

    # --- Queries ---

    def current(self, pool: Pool) -> float:
        return self._current[_check(pool)] / _UNITS

    def pool_value(self, pool: Pool) -> float:
        return self._value[_check(pool)] / _UNITS

    def max_modifier(self, pool: Pool) -> float:
        return self._modifier[_check(pool)] / _UNITS

    def effective_max(self, pool: Pool) -> float:
        return self._cap(_check(pool)) / _UNITS

    def total_current(self) -> float:
        return self._total_units() / _UNITS

    def total_max(self) -> float:
        return sum(self._cap(pool) for pool in Pool) / _UNITS

    def percent(self, pool: Pool) -> float:
        """Fill ratio in [0, 1]; 0.0 when the slot has no capacity."""
        cap = self._cap(_check(pool))
        if cap == 0:
            return 0.0
        return self._current[pool] / cap

    def total_percent(self) -> float:
        cap = sum(self._cap(pool) for pool in Pool)
        if cap == 0:
            return 0.0
        return self._total_units() / cap

    def is_full(self, pool: Pool) -> bool:
        return self._current[_check(pool)] >= self._cap(pool)

    def is_all_full(self) -> bool:
        return all(self.is_full(pool) for pool in Pool)

    def is_all_empty(self) -> bool:
        return all(self._current[pool] == 0 for pool in Pool)

    @staticmethod
    def regen_rate(pool: Pool) -> float:
        """Static per-second regeneration rate of a slot."""
        return POOL_DEFS[_check(pool)].regen_rate

    def __repr__(self) -> str:
        slots = ", ".join(
            f"{pool.value}={self.current(pool):g}/{self.effective_max(pool):g}"
            for pool in Pool
        )
        return f"ResourcePool({slots}, regenerating={self._regenerating})"
