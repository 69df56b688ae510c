"""Typed environment variable lookups with logged fallbacks."""
from __future__ import annotations

import logging
import os
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", str, int, float, bool)

_TRUE = {"1", "true", "yes", "on"}


def env_or_default(name: str, default: T) -> T:
    """Read ``$name`` converted to the type of *default*.

    Unset or empty variables give *default*. Unparsable numbers are logged
    and give *default*. Booleans accept 1/true/yes/on (case-insensitive);
    anything else is False.
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    raw = raw.strip()

    if isinstance(default, bool):
        return raw.lower() in _TRUE  # type: ignore[return-value]
    if isinstance(default, (int, float)):
        try:
            return type(default)(raw)  # type: ignore[return-value]
        except ValueError:
            logger.warning(
                "Invalid %s value for environment variable %r: %r. Using default: %r",
                type(default).__name__,
                name,
                raw,
                default,
            )
            return default
    return raw  # type: ignore[return-value]
