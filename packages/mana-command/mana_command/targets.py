"""Pool-name parsing for operator input."""
from __future__ import annotations

from mana import Pool

ALL = "all"

POOL_NAMES: tuple[str, ...] = tuple(pool.value for pool in Pool) + (ALL,)


class InvalidPoolError(ValueError):
    """Raised when an operator names a pool that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid pool {name!r}; expected one of: {', '.join(POOL_NAMES)}"
        )


def parse_target(name: str) -> tuple[Pool, ...]:
    """Map an operator pool name to slots, in priority order.

    >>> parse_target("Secondary")
    (<Pool.SECONDARY: 'secondary'>,)
    >>> len(parse_target("all"))
    3
    """
    key = name.strip().lower()
    if key == ALL:
        return tuple(Pool)
    try:
        return (Pool(key),)
    except ValueError:
        raise InvalidPoolError(name) from None


def is_all(name: str) -> bool:
    return name.strip().lower() == ALL
