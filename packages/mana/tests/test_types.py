"""Tests for pool slots and static definitions."""
from __future__ import annotations

import pytest
from mana import POOL_DEFS, TICKS_PER_SECOND, Pool, PoolDef, UnknownPoolError


class TestPool:
    def test_priority_order(self) -> None:
        assert list(Pool) == [Pool.PRIMARY, Pool.SECONDARY, Pool.TERTIARY]

    def test_values(self) -> None:
        assert [p.value for p in Pool] == ["primary", "secondary", "tertiary"]


class TestPoolDef:
    def test_defaults(self) -> None:
        assert POOL_DEFS[Pool.PRIMARY] == PoolDef(default_value=250.0, regen_rate=1.0)
        assert POOL_DEFS[Pool.SECONDARY] == PoolDef(default_value=500.0, regen_rate=0.75)
        assert POOL_DEFS[Pool.TERTIARY] == PoolDef(default_value=1000.0, regen_rate=0.5)

    def test_every_slot_defined(self) -> None:
        assert set(POOL_DEFS) == set(Pool)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            POOL_DEFS[Pool.PRIMARY].regen_rate = 2.0  # type: ignore[misc]

    def test_negative_default_rejected(self) -> None:
        with pytest.raises(ValueError):
            PoolDef(default_value=-1.0, regen_rate=1.0)

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ValueError):
            PoolDef(default_value=1.0, regen_rate=-0.5)


def test_ticks_per_second():
    assert TICKS_PER_SECOND == 20


def test_unknown_pool_error_carries_slot():
    err = UnknownPoolError("quaternary")
    assert err.pool == "quaternary"
    assert "quaternary" in str(err)
