"""mana-hud - Overlay read model for mana pools."""
from __future__ import annotations

from mana_hud.frame import HudFrame, SlotReadout, format_amount, read_frame

__all__ = ["HudFrame", "SlotReadout", "format_amount", "read_frame"]
