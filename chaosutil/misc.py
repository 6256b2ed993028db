"""Small helpers: 64-bit word splitting, terminal colour codes, non-copyable base."""

from __future__ import annotations

_LOW_MASK = 0xFFFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF

RED_COLOR_HEAD = "\033[0;31m"
YELLOW_COLOR_HEAD = "\033[1;33m"
GREEN_COLOR_HEAD = "\033[32m"
NONE_COLOR_HEAD = "\033[0m"
COLOR_END = "\033[0m"


def get_long_high_part(value: int) -> int:
    """Return the upper 32 bits of a 64-bit value."""
    return (value & _U64_MASK) >> 32


def get_long_low_part(value: int) -> int:
    """Return the lower 32 bits of a 64-bit value."""
    return value & _LOW_MASK


def parse_to_long(high: int, low: int) -> int:
    """Combine two 32-bit halves into one unsigned 64-bit value."""
    return ((high << 32) | low) & _U64_MASK


class NonCopyable:
    """Base class whose instances refuse to be copied."""

    __slots__ = ()

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")