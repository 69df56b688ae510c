"""mana-config - Shared runtime configuration for the mana engine."""
from __future__ import annotations

from mana_config.entries import DEFAULT_ENTRIES, ConfigEntry
from mana_config.env import env_or_default
from mana_config.scaling import scale_ritual_cost, scale_spell_cost
from mana_config.store import ConfigStore

__all__ = [
    "ConfigEntry",
    "ConfigStore",
    "DEFAULT_ENTRIES",
    "env_or_default",
    "scale_ritual_cost",
    "scale_spell_cost",
]
