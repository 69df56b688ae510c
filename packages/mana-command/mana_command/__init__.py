"""mana-command - Administrative command surface for mana pools."""
from mana_command.commands import (
    AddMana,
    CommandResult,
    DebugInfo,
    ListConfig,
    ReloadConfig,
    RemoveMana,
    RestoreMana,
    SaveConfig,
    SetMana,
    SetMaxMana,
    SetRegen,
    ShowMana,
)
from mana_command.handlers import install_default_handlers
from mana_command.queue import CommandQueue
from mana_command.system import make_command_system
from mana_command.targets import ALL, InvalidPoolError, parse_target

__all__ = [
    "ALL",
    "AddMana",
    "CommandQueue",
    "CommandResult",
    "DebugInfo",
    "InvalidPoolError",
    "ListConfig",
    "ReloadConfig",
    "RemoveMana",
    "RestoreMana",
    "SaveConfig",
    "SetMana",
    "SetMaxMana",
    "SetRegen",
    "ShowMana",
    "install_default_handlers",
    "make_command_system",
    "parse_target",
]
