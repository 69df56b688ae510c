"""Per-frame overlay readout of one owner's pools."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mana import Pool, ResourcePool, format_amount

if TYPE_CHECKING:
    from mana_config import ConfigStore

MIN_SCALE = 0.5
MAX_SCALE = 2.0


@dataclass(frozen=True)
class SlotReadout:
    pool: Pool
    current: float
    maximum: float
    percent: float

    @property
    def label(self) -> str:
        return format_amount(self.current, self.maximum)


@dataclass(frozen=True)
class HudFrame:
    """Everything the overlay draws for one frame. Read-only snapshot."""

    slots: tuple[SlotReadout, ...]
    total: float
    total_max: float
    total_percent: float
    regenerating: bool
    transparency: float
    scale: float
    x_offset: int
    y_offset: int

    def slot(self, pool: Pool) -> SlotReadout:
        for readout in self.slots:
            if readout.pool is pool:
                return readout
        raise KeyError(pool)


def read_frame(pool: ResourcePool | None, store: ConfigStore) -> HudFrame | None:
    """Snapshot *pool* for drawing, or None when nothing should be drawn.

    Never mutates the pool. Slots with zero capacity read as 0%.
    """
    if pool is None:
        return None
    if not store.is_overlay_enabled() or not store.is_mana_bar_enabled():
        return None

    slots = tuple(
        SlotReadout(
            pool=slot,
            current=pool.current(slot),
            maximum=pool.effective_max(slot),
            percent=pool.percent(slot),
        )
        for slot in Pool
    )
    return HudFrame(
        slots=slots,
        total=pool.total_current(),
        total_max=pool.total_max(),
        total_percent=pool.total_percent(),
        regenerating=pool.regenerating,
        transparency=min(1.0, max(0.0, store.overlay_transparency())),
        scale=min(MAX_SCALE, max(MIN_SCALE, store.overlay_scale())),
        x_offset=store.overlay_x_offset(),
        y_offset=store.overlay_y_offset(),
    )
