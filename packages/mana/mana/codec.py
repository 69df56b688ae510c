"""Flat key/value records for saving and loading a ResourcePool.

A record holds, per slot, the current amount (``<slot>_mana``) and the
permanent pool value (``<slot>_value``), plus the ``regenerating`` flag::

    {"primary_mana": 120.0, "primary_value": 250.0, ..., "regenerating": True}

Temporary max modifiers are never written, and are reset on every decode:
equipment and buffs must re-apply them after a load.

Decoding never raises. Missing or malformed fields fall back to defaults
(pool value from ``POOL_DEFS`` or the *defaults* mapping, current = full,
regenerating = True), and a current amount saved under an older, larger
pool value is clamped down to the restored capacity.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from mana.pool import ResourcePool
from mana.types import MAX_AMOUNT, POOL_DEFS, Pool

logger = logging.getLogger(__name__)

REGENERATING_KEY = "regenerating"


def mana_key(pool: Pool) -> str:
    return f"{pool.value}_mana"


def value_key(pool: Pool) -> str:
    return f"{pool.value}_value"


def encode(pool: ResourcePool) -> dict[str, Any]:
    """Serialize *pool* into a JSON/YAML-compatible flat dict."""
    record: dict[str, Any] = {}
    for slot in Pool:
        record[mana_key(slot)] = pool.current(slot)
        record[value_key(slot)] = pool.pool_value(slot)
    record[REGENERATING_KEY] = pool.regenerating
    return record


def decode(
    record: Any,
    defaults: Mapping[Pool, float] | None = None,
) -> ResourcePool:
    """Build a fresh pool from *record*."""
    pool = ResourcePool()
    decode_into(pool, record, defaults)
    return pool


def decode_into(
    pool: ResourcePool,
    record: Any,
    defaults: Mapping[Pool, float] | None = None,
) -> ResourcePool:
    """Overwrite *pool*'s state from *record* and return it."""
    if not isinstance(record, Mapping):
        logger.warning(
            "Mana record is %s, not a mapping; using defaults", type(record).__name__
        )
        record = {}

    pool.clear_max_modifiers()

    for slot in Pool:
        fallback = POOL_DEFS[slot].default_value
        if defaults is not None:
            fallback = defaults.get(slot, fallback)
        value = _read_amount(record, value_key(slot), fallback)
        pool.set_pool_value(slot, value)

    # Current amounts are read after capacities so they clamp to them.
    for slot in Pool:
        current = _read_amount(record, mana_key(slot), pool.effective_max(slot))
        pool.set_current(slot, current)

    regenerating = record.get(REGENERATING_KEY, True)
    if not isinstance(regenerating, bool):
        logger.warning(
            "Malformed %r in mana record: %r; using True", REGENERATING_KEY, regenerating
        )
        regenerating = True
    pool.set_regenerating(regenerating)
    return pool


def _read_amount(record: Mapping[str, Any], key: str, fallback: float) -> float:
    if key not in record:
        return fallback
    raw = record[key]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        logger.warning("Malformed %r in mana record: %r; using %s", key, raw, fallback)
        return fallback
    # NaN fails both comparisons
    if not 0 <= raw <= MAX_AMOUNT:
        logger.warning("Out-of-range %r in mana record: %r; using %s", key, raw, fallback)
        return fallback
    return float(raw)
