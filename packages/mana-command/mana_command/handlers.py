"""Default handlers for the administrative mana commands."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from mana import MAX_AMOUNT, Pool, ResourcePool
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
    display_name,
)
from mana_command.queue import CommandQueue, Handler
from mana_command.targets import InvalidPoolError, is_all, parse_target

if TYPE_CHECKING:
    from mana import OwnerRegistry, TickContext
    from mana_config import ConfigStore

logger = logging.getLogger(__name__)


def _fail(message: str) -> CommandResult:
    return CommandResult(ok=False, lines=[message])


def _done(message: str) -> CommandResult:
    return CommandResult(ok=True, lines=[message])


def _slot_line(pool: ResourcePool, slot: Pool, label: str) -> str:
    return (
        f"{label}: {pool.current(slot):.1f} / {pool.effective_max(slot):.1f} "
        f"({pool.percent(slot) * 100:.1f}%)"
    )


def _lookup(cmd: Any, registry: OwnerRegistry) -> ResourcePool | CommandResult:
    pool = registry.get_if_exists(cmd.owner)
    if pool is None:
        return _fail(f"No mana data for {display_name(cmd)}")
    return pool


def _resolve(
    cmd: Any, registry: OwnerRegistry, amount: float | None = None
) -> tuple[ResourcePool, tuple[Pool, ...]] | CommandResult:
    """Shared owner/pool/amount validation for owner commands."""
    if amount is not None:
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return _fail(f"Amount must be a number, got {amount!r}")
        if isinstance(amount, float) and not math.isfinite(amount):
            return _fail(f"Amount must be finite, got {amount}")
        if amount < 0:
            return _fail(f"Amount must be >= 0, got {amount}")
        if amount > MAX_AMOUNT:
            return _fail(f"Amount must be at most {MAX_AMOUNT:.0f}")
    try:
        slots = parse_target(cmd.pool)
    except InvalidPoolError as e:
        return _fail(str(e))
    pool = _lookup(cmd, registry)
    if isinstance(pool, CommandResult):
        return pool
    return pool, slots


# --- Owner commands ---


def show_mana(cmd: ShowMana, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    resolved = _resolve(cmd, registry)
    if isinstance(resolved, CommandResult):
        return resolved
    pool, slots = resolved
    name = display_name(cmd)

    if not is_all(cmd.pool):
        slot = slots[0]
        return _done(_slot_line(pool, slot, f"{name}'s {slot.value} mana"))

    lines = [f"=== {name}'s Mana ==="]
    lines.extend(_slot_line(pool, slot, slot.value.capitalize()) for slot in slots)
    lines.append(f"Total: {pool.total_current():.1f} / {pool.total_max():.1f}")
    lines.append(f"Regenerating: {'Yes' if pool.regenerating else 'No'}")
    return CommandResult(ok=True, lines=lines)


def set_mana(cmd: SetMana, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    resolved = _resolve(cmd, registry, cmd.amount)
    if isinstance(resolved, CommandResult):
        return resolved
    pool, slots = resolved
    for slot in slots:
        pool.set_current(slot, cmd.amount)
    return _done(f"Set {display_name(cmd)}'s {cmd.pool} mana to {cmd.amount:.1f}")


def add_mana(cmd: AddMana, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    resolved = _resolve(cmd, registry, cmd.amount)
    if isinstance(resolved, CommandResult):
        return resolved
    pool, slots = resolved
    if is_all(cmd.pool):
        pool.restore(cmd.amount)
    else:
        slot = slots[0]
        pool.set_current(slot, pool.current(slot) + cmd.amount)
    return _done(f"Added {cmd.amount:.1f} mana to {display_name(cmd)}'s {cmd.pool}")


def remove_mana(cmd: RemoveMana, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    resolved = _resolve(cmd, registry, cmd.amount)
    if isinstance(resolved, CommandResult):
        return resolved
    pool, slots = resolved
    name = display_name(cmd)
    if is_all(cmd.pool):
        if not pool.consume(cmd.amount):
            return _fail(f"{name} has only {pool.total_current():.1f} mana")
    else:
        slot = slots[0]
        pool.set_current(slot, max(0.0, pool.current(slot) - cmd.amount))
    return _done(f"Removed {cmd.amount:.1f} mana from {name}'s {cmd.pool}")


def restore_mana(cmd: RestoreMana, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    resolved = _resolve(cmd, registry)
    if isinstance(resolved, CommandResult):
        return resolved
    pool, slots = resolved
    for slot in slots:
        pool.restore_pool(slot)
    return _done(f"Restored {display_name(cmd)}'s {cmd.pool} mana")


def set_max_mana(cmd: SetMaxMana, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    resolved = _resolve(cmd, registry, cmd.amount)
    if isinstance(resolved, CommandResult):
        return resolved
    pool, slots = resolved
    for slot in slots:
        pool.set_pool_value(slot, cmd.amount)
    return _done(f"Set {display_name(cmd)}'s {cmd.pool} pool value to {cmd.amount:.1f}")


def set_regen(cmd: SetRegen, registry: OwnerRegistry, ctx: TickContext) -> CommandResult:
    pool = _lookup(cmd, registry)
    if isinstance(pool, CommandResult):
        return pool
    pool.set_regenerating(cmd.enabled)
    verb = "Enabled" if cmd.enabled else "Disabled"
    return _done(f"{verb} mana regeneration for {display_name(cmd)}")


# --- Config and diagnostics ---


def make_config_handlers(store: ConfigStore) -> dict[type[Any], Handler]:
    """Handlers that need the shared ConfigStore."""

    def reload_config(
        cmd: ReloadConfig, registry: OwnerRegistry, ctx: TickContext
    ) -> CommandResult:
        store.reload(preserve_modified=cmd.preserve_modified)
        return _done("Configuration reloaded")

    def save_config(
        cmd: SaveConfig, registry: OwnerRegistry, ctx: TickContext
    ) -> CommandResult:
        try:
            written = store.save()
        except OSError as e:
            logger.error("Config save requested by command failed: %s", e)
            return _fail(f"Failed to save configuration: {e}")
        if not written:
            return _done("Configuration is memory-only; nothing written")
        return _done(f"Configuration saved to {store.path}")

    def list_config(
        cmd: ListConfig, registry: OwnerRegistry, ctx: TickContext
    ) -> CommandResult:
        return CommandResult(
            ok=True,
            lines=[
                "=== Mana Configuration ===",
                f"Overlay Enabled: {store.is_overlay_enabled()}",
                f"Overlay Scale: {store.overlay_scale():.2f}",
                f"Overlay Position: ({store.overlay_x_offset()}, {store.overlay_y_offset()})",
                f"Overlay Transparency: {store.overlay_transparency():.2f}",
                f"Spell Cost Multiplier: {store.spell_cost_multiplier():.2f}",
                f"Ritual Difficulty Multiplier: {store.ritual_difficulty_multiplier():.2f}",
            ],
        )

    def debug_info(
        cmd: DebugInfo, registry: OwnerRegistry, ctx: TickContext
    ) -> CommandResult:
        issues = store.validate()
        return CommandResult(
            ok=True,
            lines=[
                "=== Mana System Debug Info ===",
                f"Active mana pools: {registry.count()}",
                f"Tick: {ctx.tick_number} ({ctx.elapsed:.2f}s)",
                f"Config file: {store.path if store.path is not None else 'memory-only'}",
                f"Config issues: {len(issues)}",
            ],
        )

    return {
        ReloadConfig: reload_config,
        SaveConfig: save_config,
        ListConfig: list_config,
        DebugInfo: debug_info,
    }


OWNER_HANDLERS: dict[type[Any], Handler] = {
    ShowMana: show_mana,
    SetMana: set_mana,
    AddMana: add_mana,
    RemoveMana: remove_mana,
    RestoreMana: restore_mana,
    SetMaxMana: set_max_mana,
    SetRegen: set_regen,
}


def install_default_handlers(queue: CommandQueue, store: ConfigStore) -> None:
    """Register every built-in command handler on *queue*."""
    for cmd_type, handler in OWNER_HANDLERS.items():
        queue.handle(cmd_type, handler)
    for cmd_type, handler in make_config_handlers(store).items():
        queue.handle(cmd_type, handler)
