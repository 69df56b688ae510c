"""Tests for the persistence record codec."""
from __future__ import annotations

import logging

from mana import MAX_AMOUNT, Pool, ResourcePool, decode, decode_into, encode


def test_encode_keys():
    record = encode(ResourcePool())
    assert record == {
        "primary_mana": 250.0,
        "primary_value": 250.0,
        "secondary_mana": 500.0,
        "secondary_value": 500.0,
        "tertiary_mana": 1000.0,
        "tertiary_value": 1000.0,
        "regenerating": True,
    }


def test_decode_restores_state():
    pool = ResourcePool()
    pool.set_current(Pool.PRIMARY, 120.0)
    pool.increase_pool_value(Pool.SECONDARY, 40.0)
    pool.set_regenerating(False)

    restored = decode(encode(pool))
    for slot in Pool:
        assert restored.current(slot) == pool.current(slot)
        assert restored.pool_value(slot) == pool.pool_value(slot)
    assert restored.regenerating is False


def test_modifier_not_persisted():
    pool = ResourcePool()
    pool.apply_max_modifier(Pool.PRIMARY, 100.0)
    pool.restore_pool(Pool.PRIMARY)
    assert pool.current(Pool.PRIMARY) == 350.0

    record = encode(pool)
    assert "primary_modifier" not in record

    restored = decode(record)
    assert restored.max_modifier(Pool.PRIMARY) == 0.0
    assert restored.effective_max(Pool.PRIMARY) == 250.0
    assert restored.current(Pool.PRIMARY) == 250.0


def test_decode_into_clears_live_modifier():
    pool = ResourcePool()
    pool.apply_max_modifier(Pool.TERTIARY, -300.0)
    decode_into(pool, encode(ResourcePool()))
    assert pool.max_modifier(Pool.TERTIARY) == 0.0
    assert pool.current(Pool.TERTIARY) == 1000.0


def test_empty_record_gives_full_defaults():
    pool = decode({})
    assert pool.is_all_full() is True
    assert pool.pool_value(Pool.PRIMARY) == 250.0
    assert pool.regenerating is True


def test_missing_current_defaults_to_full():
    pool = decode({"primary_value": 300.0})
    assert pool.current(Pool.PRIMARY) == 300.0


def test_missing_value_uses_defaults_mapping():
    pool = decode({}, defaults={Pool.PRIMARY: 80.0})
    assert pool.pool_value(Pool.PRIMARY) == 80.0
    assert pool.current(Pool.PRIMARY) == 80.0
    assert pool.pool_value(Pool.SECONDARY) == 500.0


def test_current_clamped_to_restored_capacity():
    pool = decode({"primary_value": 100.0, "primary_mana": 240.0})
    assert pool.current(Pool.PRIMARY) == 100.0


def test_malformed_fields_fall_back(caplog):
    record = {
        "primary_mana": "lots",
        "secondary_value": -5.0,
        "tertiary_mana": float("nan"),
        "regenerating": "yes",
    }
    with caplog.at_level(logging.WARNING, logger="mana.codec"):
        pool = decode(record)
    assert pool.current(Pool.PRIMARY) == 250.0
    assert pool.pool_value(Pool.SECONDARY) == 500.0
    assert pool.current(Pool.TERTIARY) == 1000.0
    assert pool.regenerating is True
    assert len(caplog.records) == 4


def test_bool_is_not_an_amount():
    pool = decode({"primary_mana": True})
    assert pool.current(Pool.PRIMARY) == 250.0


def test_int_amounts_accepted():
    pool = decode({"primary_mana": 12, "primary_value": 20})
    assert pool.current(Pool.PRIMARY) == 12.0
    assert pool.pool_value(Pool.PRIMARY) == 20.0


def test_non_mapping_record(caplog):
    with caplog.at_level(logging.WARNING, logger="mana.codec"):
        pool = decode(["not", "a", "record"])
    assert pool.is_all_full() is True
    assert "not a mapping" in caplog.text


def test_unknown_keys_ignored():
    pool = decode({"primary_mana": 10.0, "favourite_colour": "blue"})
    assert pool.current(Pool.PRIMARY) == 10.0


def test_decode_into_returns_same_pool():
    pool = ResourcePool()
    assert decode_into(pool, {}) is pool


def test_huge_values_fall_back(caplog):
    record = {
        "primary_value": 10**400,
        "secondary_value": 1e306,
        "tertiary_mana": float("inf"),
        "primary_mana": 2e12,
    }
    with caplog.at_level(logging.WARNING, logger="mana.codec"):
        pool = decode(record)
    assert pool.pool_value(Pool.PRIMARY) == 250.0
    assert pool.current(Pool.PRIMARY) == 250.0
    assert pool.pool_value(Pool.SECONDARY) == 500.0
    assert pool.current(Pool.TERTIARY) == 1000.0
    assert len(caplog.records) == 4


def test_value_at_cap_accepted():
    pool = decode({"primary_value": MAX_AMOUNT, "primary_mana": 5.0})
    assert pool.pool_value(Pool.PRIMARY) == MAX_AMOUNT
    assert pool.current(Pool.PRIMARY) == 5.0
