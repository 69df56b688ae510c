"""mana - Three-pool player mana engine with fixed-step regeneration."""
from mana.clock import Clock
from mana.codec import decode, decode_into, encode
from mana.helpers import ManaHelper, format_amount
from mana.pool import ResourcePool
from mana.registry import OwnerRegistry
from mana.server import ManaServer
from mana.systems import make_autosave_system, make_regen_system
from mana.types import (
    MAX_AMOUNT,
    POOL_DEFS,
    TICKS_PER_SECOND,
    OwnerKey,
    Pool,
    PoolDef,
    TickContext,
    UnknownPoolError,
)

__all__ = [
    "Clock",
    "MAX_AMOUNT",
    "ManaHelper",
    "ManaServer",
    "OwnerKey",
    "OwnerRegistry",
    "POOL_DEFS",
    "Pool",
    "PoolDef",
    "ResourcePool",
    "TICKS_PER_SECOND",
    "TickContext",
    "UnknownPoolError",
    "decode",
    "decode_into",
    "encode",
    "format_amount",
    "make_autosave_system",
    "make_regen_system",
]
