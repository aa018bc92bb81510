"""Error types raised by the colorscheme core."""

from __future__ import annotations

MIN_COLORS = 1
MAX_COLORS = 4


class SchemeError(Exception):
    """Base class for color scheme generation errors."""


class InvalidColorCountError(SchemeError, ValueError):
    """Raised when fewer than 1 or more than 4 seed colors are given."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Please provide {MIN_COLORS}-{MAX_COLORS} colors")


class MalformedHexError(SchemeError, ValueError):
    """Raised when a seed color is not a ``#RRGGBB`` string."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}. Please use format #RRGGBB")


def check_color_count(count: int) -> None:
    if count < MIN_COLORS or count > MAX_COLORS:
        raise InvalidColorCountError(count)


__all__ = [
    "MIN_COLORS",
    "MAX_COLORS",
    "SchemeError",
    "InvalidColorCountError",
    "MalformedHexError",
    "check_color_count",
]
