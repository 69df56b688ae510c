"""Administrative command dataclasses and their result type.

Owner commands carry the owner's key plus an optional display name used in
feedback. Pool names are left as operator strings and parsed by the
handler, so a typo surfaces as a rejected result rather than an exception
at construction time.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    lines: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class ShowMana:
    owner: Hashable
    pool: str = "all"
    name: str = ""


@dataclass(frozen=True)
class SetMana:
    owner: Hashable
    pool: str
    amount: float
    name: str = ""


@dataclass(frozen=True)
class AddMana:
    owner: Hashable
    pool: str
    amount: float
    name: str = ""


@dataclass(frozen=True)
class RemoveMana:
    owner: Hashable
    pool: str
    amount: float
    name: str = ""


@dataclass(frozen=True)
class RestoreMana:
    owner: Hashable
    pool: str = "all"
    name: str = ""


@dataclass(frozen=True)
class SetMaxMana:
    """Set the permanent pool value (not the temporary modifier)."""

    owner: Hashable
    pool: str
    amount: float
    name: str = ""


@dataclass(frozen=True)
class SetRegen:
    owner: Hashable
    enabled: bool
    name: str = ""


@dataclass(frozen=True)
class ReloadConfig:
    preserve_modified: bool = False


@dataclass(frozen=True)
class SaveConfig:
    pass


@dataclass(frozen=True)
class ListConfig:
    pass


@dataclass(frozen=True)
class DebugInfo:
    pass


def display_name(cmd: Any) -> str:
    return cmd.name or str(cmd.owner)
