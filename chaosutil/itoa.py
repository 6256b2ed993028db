"""Integer to string conversion in bases up to ten."""

from __future__ import annotations

_DIGITS = "0123456789"
_MAX_DIGITS = 256


def itoa(num: int, base: int = 10) -> str:
    """Render a non-negative integer in ``base`` (2..10).

    Returns an empty string when the result would need more than 256 digits.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if num < 0:
        raise ValueError("num must not be negative")

    digits = []
    while True:
        num, rem = divmod(num, base)
        digits.append(_DIGITS[rem])
        if len(digits) > _MAX_DIGITS:
            return ""
        if not num:
            break
    return "".join(reversed(digits))