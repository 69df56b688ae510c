"""Pool slots, static pool definitions, and shared types for the mana engine."""
from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

OwnerKey = uuid.UUID

TICKS_PER_SECOND = 20

# Largest amount a pool accepts or stores. Larger inputs saturate to it, and
# saved records holding more are treated as malformed.
MAX_AMOUNT = 1e12


class Pool(enum.Enum):
    """The three fixed mana slots. Declaration order is priority order."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


@dataclass(frozen=True)
class PoolDef:
    """Immutable static definition of one pool slot.

    Attributes:
        default_value: Permanent capacity a fresh pool starts with.
        regen_rate: Mana regenerated per second while regenerating.
    """

    default_value: float
    regen_rate: float

    def __post_init__(self) -> None:
        if self.default_value < 0:
            raise ValueError(f"default_value must be >= 0, got {self.default_value}")
        if self.regen_rate < 0:
            raise ValueError(f"regen_rate must be >= 0, got {self.regen_rate}")


POOL_DEFS: dict[Pool, PoolDef] = {
    Pool.PRIMARY: PoolDef(default_value=250.0, regen_rate=1.0),
    Pool.SECONDARY: PoolDef(default_value=500.0, regen_rate=0.75),
    Pool.TERTIARY: PoolDef(default_value=1000.0, regen_rate=0.5),
}


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class UnknownPoolError(KeyError):
    """Raised when an operation receives something that is not a Pool member."""

    def __init__(self, pool: object) -> None:
        self.pool = pool
        super().__init__(f"Unknown pool slot: {pool!r}")


if TYPE_CHECKING:
    from mana.registry import OwnerRegistry

System = Callable[["OwnerRegistry", TickContext], None]
