"""Cost scaling applied by gameplay code before it touches a pool."""
from __future__ import annotations

from mana_config.store import ConfigStore


def scale_spell_cost(store: ConfigStore, base_cost: float) -> float:
    """*base_cost* times the spell cost multiplier (negative multipliers act as 0)."""
    return base_cost * max(0.0, store.spell_cost_multiplier())


def scale_ritual_cost(store: ConfigStore, base_cost: float) -> float:
    return base_cost * max(0.0, store.ritual_difficulty_multiplier())
