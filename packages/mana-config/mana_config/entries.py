"""ConfigEntry definitions and the default entry set."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

OVERLAY_ENABLED = "render.hud.overlay.enabled"
OVERLAY_TRANSPARENCY = "render.hud.overlay.transparency"
OVERLAY_SCALE = "render.hud.overlay.scale"
OVERLAY_X_OFFSET = "render.hud.overlay.xOffset"
OVERLAY_Y_OFFSET = "render.hud.overlay.yOffset"
MANA_BAR_ENABLED = "render.hud.manaBar.enabled"
SPELL_COST_MULTIPLIER = "magic.spell.manaCost.multiplier"
RITUAL_DIFFICULTY_MULTIPLIER = "magic.ritual.difficulty.multiplier"
DEBUG_MODE = "debug_mode"
AUTO_SAVE_INTERVAL = "auto_save_interval"


@dataclass(frozen=True)
class ConfigEntry:
    """Immutable default config entry.

    Attributes:
        key: Dotted config key.
        default: Default value; its type is the entry's expected type.
        comment: One-line description shown in listings.
    """

    key: str
    default: Any
    comment: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("ConfigEntry key must be non-empty")
        if not isinstance(self.default, (bool, int, float, str)):
            raise TypeError(
                f"ConfigEntry default must be a scalar, got {type(self.default).__name__}"
            )

    @property
    def type(self) -> type:
        return type(self.default)

    def accepts(self, value: Any) -> bool:
        """True if *value* fits this entry's type (int and float mix freely)."""
        if isinstance(self.default, bool) or isinstance(value, bool):
            return isinstance(value, bool) and isinstance(self.default, bool)
        if isinstance(self.default, (int, float)):
            return isinstance(value, (int, float))
        return isinstance(value, type(self.default))


DEFAULT_ENTRIES: tuple[ConfigEntry, ...] = (
    ConfigEntry(DEBUG_MODE, False, "Enable debug logging"),
    ConfigEntry(AUTO_SAVE_INTERVAL, 300, "Auto-save interval in seconds (0 to disable)"),
    ConfigEntry("particle_multiplier", 1.0, "Particle spawn multiplier (0.0 - 2.0)"),
    ConfigEntry("enable_damage_numbers", True, "Show damage numbers on hit"),
    ConfigEntry("sound_volume_multiplier", 1.0, "Sound volume multiplier (0.0 - 1.0)"),
    ConfigEntry("max_render_distance", 64.0, "Maximum render distance for effects"),
    ConfigEntry(
        "enable_client_optimizations", True, "Enable client-side performance optimizations"
    ),
    ConfigEntry("language", "en_us", "Language code"),
    ConfigEntry("config_version", 1, "Configuration file version"),
    ConfigEntry(OVERLAY_ENABLED, True, "Enable all custom overlays (mana, health, status)"),
    ConfigEntry(OVERLAY_TRANSPARENCY, 1.0, "Overlay transparency (0.0-1.0)"),
    ConfigEntry(OVERLAY_SCALE, 1.0, "Overlay scale (0.5-2.0)"),
    ConfigEntry(OVERLAY_X_OFFSET, 0, "Overlay X offset (pixels)"),
    ConfigEntry(OVERLAY_Y_OFFSET, 0, "Overlay Y offset (pixels)"),
    ConfigEntry(MANA_BAR_ENABLED, True, "Enables/disables the mana bar"),
    ConfigEntry(SPELL_COST_MULTIPLIER, 1.0, "Multiplies mana cost for all spells"),
    ConfigEntry(RITUAL_DIFFICULTY_MULTIPLIER, 1.0, "Multiplies ritual difficulty"),
)
