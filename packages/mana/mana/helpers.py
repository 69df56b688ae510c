"""Gameplay-facing helpers over ResourcePool."""
from __future__ import annotations

from mana.pool import ResourcePool
from mana.types import Pool


def format_amount(current: float, maximum: float) -> str:
    """``"120 / 250"`` with both sides rounded to whole mana."""
    return f"{current:.0f} / {maximum:.0f}"


class ManaHelper:
    """Pure functions that tolerate a missing pool (offline owner)."""

    @staticmethod
    def has_enough(pool: ResourcePool | None, amount: float) -> bool:
        if pool is None or amount < 0:
            return False
        return pool.total_current() >= amount

    @staticmethod
    def try_consume(pool: ResourcePool | None, amount: float) -> bool:
        if pool is None:
            return False
        return pool.consume(amount)

    @staticmethod
    def restore(pool: ResourcePool | None, amount: float) -> None:
        if pool is not None:
            pool.restore(amount)

    @staticmethod
    def total_percent(pool: ResourcePool | None) -> float:
        if pool is None:
            return 0.0
        return pool.total_percent()

    @staticmethod
    def pool_percent(pool: ResourcePool | None, slot: Pool) -> float:
        if pool is None:
            return 0.0
        return pool.percent(slot)

    @staticmethod
    def format_pool(pool: ResourcePool | None, slot: Pool) -> str:
        """Render ``"120 / 250"``; empty string without a pool."""
        if pool is None:
            return ""
        return format_amount(pool.current(slot), pool.effective_max(slot))
