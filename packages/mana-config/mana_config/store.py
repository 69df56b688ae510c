"""ConfigStore - concurrent key/value configuration backed by a YAML file."""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml

from mana_config import entries as keys
from mana_config.entries import DEFAULT_ENTRIES, ConfigEntry
from mana_config.env import env_or_default

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]

CONFIG_PATH_ENV = "MANA_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "config/mana.yaml"

_MISSING = object()
_SCALARS = (bool, int, float, str)


def _changed(old: Any, new: Any) -> bool:
    return old is _MISSING or type(old) is not type(new) or old != new


class ConfigStore:
    """Process-wide configuration shared by gameplay, overlay and commands.

    Values are scalars (bool, int, float, str). Every entry in *entries*
    always has a value after ``load``; keys found only in the file are kept
    too. Setters mark the key modified, write the file when auto-save is on,
    then call the key's listeners with the new value if it changed.
    Listeners run outside the store's lock, so they may read or write the
    store themselves.

    With ``path=None`` the store is memory-only and ``save`` is a no-op.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        entries: Iterable[ConfigEntry] = DEFAULT_ENTRIES,
        auto_save: bool = True,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._entries: dict[str, ConfigEntry] = {e.key: e for e in entries}
        self._data: dict[str, Any] = self._defaults()
        self._modified: set[str] = set()
        self._listeners: dict[str, list[Listener]] = {}
        self._auto_save = auto_save
        self._lock = threading.RLock()
        self._io_lock = threading.Lock()

    @classmethod
    def from_env(cls, **kwargs: Any) -> ConfigStore:
        """Store whose path comes from ``$MANA_CONFIG_PATH``, loaded."""
        store = cls(env_or_default(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH), **kwargs)
        store.load()
        return store

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def auto_save(self) -> bool:
        return self._auto_save

    @auto_save.setter
    def auto_save(self, enabled: bool) -> None:
        self._auto_save = enabled

    def _defaults(self) -> dict[str, Any]:
        return {key: entry.default for key, entry in self._entries.items()}

    # --- File I/O ---

    def load(self) -> None:
        """Reset to defaults, then overlay the file's values.

        A missing file is created from defaults. An unreadable or malformed
        file is logged and leaves the defaults in place.
        """
        data = self._defaults()
        data.update(self._read_file())
        self._replace(data, clear_modified=True)

    def reload(self, preserve_modified: bool = False) -> None:
        """Re-read the file, optionally keeping unsaved in-memory changes."""
        with self._lock:
            preserved = {
                key: self._data[key]
                for key in self._modified
                if preserve_modified and key in self._data
            }
        data = self._defaults()
        data.update(self._read_file())
        data.update(preserved)
        self._replace(data, clear_modified=not preserve_modified)
        logger.info("Configuration reloaded")

    def _read_file(self) -> dict[str, Any]:
        if self._path is None:
            return {}
        if not self._path.exists():
            logger.info("No config file at %s, creating with defaults", self._path)
            self._write(self._defaults())
            return {}
        try:
            with self._io_lock, open(self._path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError:
            logger.exception("Failed to read config file %s", self._path)
            return {}
        except yaml.YAMLError:
            logger.exception("Failed to parse config file %s", self._path)
            return {}

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.error("Config file %s does not hold a mapping", self._path)
            return {}

        loaded: dict[str, Any] = {}
        for key, value in raw.items():
            key = str(key)
            if not isinstance(value, _SCALARS):
                logger.warning("Skipping non-scalar config key %r", key)
                continue
            entry = self._entries.get(key)
            if entry is not None and not entry.accepts(value):
                logger.warning(
                    "Type mismatch for key %r (expected %s, got %s), using value anyway",
                    key,
                    entry.type.__name__,
                    type(value).__name__,
                )
            loaded[key] = value
        logger.info("Loaded %d config entries from %s", len(loaded), self._path)
        return loaded

    def save(self) -> bool:
        """Write all values to the file. Returns False for a memory-only store.

        Raises OSError if the file cannot be written.
        """
        if self._path is None:
            return False
        with self._lock:
            snapshot = dict(self._data)
            pending = set(self._modified)
        self._write(snapshot)
        with self._lock:
            for key in pending:
                if self._data.get(key, _MISSING) == snapshot.get(key, _MISSING):
                    self._modified.discard(key)
        logger.debug("Config saved to %s", self._path)
        return True

    def _write(self, data: dict[str, Any]) -> None:
        assert self._path is not None
        with self._io_lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_name(self._path.name + ".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, sort_keys=True, default_flow_style=False)
            os.replace(tmp, self._path)

    def _maybe_save(self) -> None:
        if not self._auto_save or self._path is None:
            return
        try:
            self.save()
        except OSError:
            logger.exception("Auto-save of config file %s failed", self._path)

    def reset_to_defaults(self) -> None:
        self._replace(self._defaults(), clear_modified=True)
        self._maybe_save()
        logger.info("Configuration reset to defaults")

    def _replace(self, data: dict[str, Any], clear_modified: bool) -> None:
        with self._lock:
            previous = self._data
            self._data = data
            if clear_modified:
                self._modified.clear()
        for key, value in data.items():
            if _changed(previous.get(key, _MISSING), value):
                self._notify(key, value)

    # --- Typed getters ---

    def get(self, key: str) -> Any:
        with self._lock:
            return self._data.get(key)

    def get_or_default(self, key: str, default: Any) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def get_str(self, key: str, default: str) -> str:
        value = self.get(key)
        return value if isinstance(value, str) else default

    def get_int(self, key: str, default: int) -> int:
        value = self.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return int(value)

    def get_float(self, key: str, default: float) -> float:
        value = self.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return float(value)

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.get(key)
        return value if isinstance(value, bool) else default

    # --- Setters ---

    def set(self, key: str, value: Any) -> None:
        if not isinstance(value, _SCALARS):
            raise TypeError(
                f"Config values must be bool, int, float or str, got {type(value).__name__}"
            )
        with self._lock:
            old = self._data.get(key, _MISSING)
            self._data[key] = value
            self._modified.add(key)
        self._maybe_save()
        if _changed(old, value):
            self._notify(key, value)

    def set_str(self, key: str, value: str) -> None:
        self.set(key, str(value))

    def set_int(self, key: str, value: int) -> None:
        self.set(key, int(value))

    def set_float(self, key: str, value: float) -> None:
        self.set(key, float(value))

    def set_bool(self, key: str, value: bool) -> None:
        self.set(key, bool(value))

    def remove(self, key: str) -> None:
        with self._lock:
            if key not in self._data:
                return
            del self._data[key]
            self._modified.add(key)
        self._maybe_save()

    # --- Introspection ---

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def keys(self) -> set[str]:
        with self._lock:
            return set(self._data)

    def as_dict(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._data)

    def default(self, key: str) -> Any:
        entry = self._entries.get(key)
        return entry.default if entry is not None else None

    def default_entries(self) -> list[ConfigEntry]:
        return list(self._entries.values())

    def is_modified(self, key: str) -> bool:
        with self._lock:
            return key in self._modified

    def has_unsaved_changes(self) -> bool:
        with self._lock:
            return bool(self._modified)

    # --- Listeners ---

    def add_listener(self, key: str, listener: Listener) -> None:
        with self._lock:
            self._listeners.setdefault(key, []).append(listener)

    def remove_listener(self, key: str, listener: Listener) -> None:
        with self._lock:
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

    def _notify(self, key: str, value: Any) -> None:
        with self._lock:
            listeners = list(self._listeners.get(key, ()))
        for listener in listeners:
            try:
                listener(value)
            except Exception:
                logger.exception("Error in config change listener for key %r", key)

    # --- Validation ---

    def validate(self) -> list[str]:
        """Return human-readable problems with the current values."""
        issues: list[str] = []
        with self._lock:
            data = dict(self._data)
        for key, entry in self._entries.items():
            if key not in data:
                issues.append(f"Missing config key: {key}")
            elif not entry.accepts(data[key]):
                issues.append(
                    f"Type mismatch for key: {key} (expected {entry.type.__name__}, "
                    f"got {type(data[key]).__name__})"
                )
        return issues

    def ensure_defaults(self) -> bool:
        """Re-insert any missing default key. Returns True if none were missing."""
        valid = True
        with self._lock:
            for key, entry in self._entries.items():
                if key not in self._data:
                    logger.warning("Missing config key: %s", key)
                    self._data[key] = entry.default
                    valid = False
        return valid

    def describe(self) -> str:
        lines = ["Config entries:"]
        for entry in self._entries.values():
            lines.append(f"- {entry.key} (Default: {entry.default}) - {entry.comment}")
        return "\n".join(lines)

    # --- Named options ---

    def is_overlay_enabled(self) -> bool:
        return self.get_bool(keys.OVERLAY_ENABLED, True)

    def overlay_transparency(self) -> float:
        return self.get_float(keys.OVERLAY_TRANSPARENCY, 1.0)

    def overlay_scale(self) -> float:
        return self.get_float(keys.OVERLAY_SCALE, 1.0)

    def overlay_x_offset(self) -> int:
        return self.get_int(keys.OVERLAY_X_OFFSET, 0)

    def overlay_y_offset(self) -> int:
        return self.get_int(keys.OVERLAY_Y_OFFSET, 0)

    def is_mana_bar_enabled(self) -> bool:
        return self.get_bool(keys.MANA_BAR_ENABLED, True)

    def spell_cost_multiplier(self) -> float:
        return self.get_float(keys.SPELL_COST_MULTIPLIER, 1.0)

    def ritual_difficulty_multiplier(self) -> float:
        return self.get_float(keys.RITUAL_DIFFICULTY_MULTIPLIER, 1.0)

    def is_debug_mode(self) -> bool:
        return self.get_bool(keys.DEBUG_MODE, False)

    def auto_save_interval(self) -> int:
        """Seconds between pool autosaves; 0 disables."""
        return max(0, self.get_int(keys.AUTO_SAVE_INTERVAL, 300))
