"""Timestamp rounding and a thread-safe broken-down time conversion."""

from __future__ import annotations

import time
from dataclasses import dataclass

TIMEZONE = -28800

_U32 = 0xFFFFFFFF
_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class BrokenDownTime:
    """Calendar fields; ``year`` counts from 1900 and ``mon`` from 0."""

    sec: int
    minute: int
    hour: int
    mday: int
    mon: int
    year: int


def init() -> None:
    """Reload the local time-zone settings from the environment."""
    if hasattr(time, "tzset"):
        time.tzset()


def now() -> int:
    """Current time as an unsigned 32-bit timestamp."""
    return int(time.time()) & _U32


def sharp_day(c: int = 0, cur: int | None = None) -> int:
    """Local midnight of the day holding ``cur``, shifted by ``c`` days."""
    if cur is None:
        cur = now()
    tz = time.timezone
    tmptm = ((cur + tz) // 86400 * 86400 + tz) & _U32
    if tmptm > cur:
        tmptm = (tmptm - 86400) & _U32
    elif tmptm + 86400 <= cur:
        tmptm = (tmptm + 86400) & _U32
    return (tmptm + c * 86400) & _U32


def sharp_hour(c: int, tm: int | None = None) -> int:
    """Start of the hour holding ``tm``, shifted by ``c`` hours."""
    if tm is None:
        tm = now()
    return ((tm + c * 3600) & _U32) // 3600 * 3600


def sharp_minute(c: int, tm: int | None = None) -> int:
    """Start of the minute holding ``tm``, shifted by ``c`` minutes."""
    if tm is None:
        tm = now()
    return ((tm + c * 60) & _U32) // 60 * 60


def localtimes(t: int, tz_offset: int) -> BrokenDownTime:
    """Break ``t`` down into calendar fields for a zone ``tz_offset`` seconds west of UTC.

    Negative results clamp to the epoch; every year divisible by four is a leap year.
    """
    t = int(t) - tz_offset
    if t < 0:
        t = 0
    t, sec = divmod(t, 60)
    t, minute = divmod(t, 60)

    hours_per_4_years = 1461 * 24
    year = (t // hours_per_4_years) * 4 + 70
    t %= hours_per_4_years
    while True:
        hours_per_year = 365 * 24 + (24 if year & 3 == 0 else 0)
        if t < hours_per_year:
            break
        year += 1
        t -= hours_per_year

    t, hour = divmod(t, 24)
    t += 1
    if year & 3 == 0:
        if t > 60:
            t -= 1
        elif t == 60:
            return BrokenDownTime(sec, minute, hour, 29, 1, year)

    mon = 0
    while _DAYS[mon] < t:
        t -= _DAYS[mon]
        mon += 1
    return BrokenDownTime(sec, minute, hour, t, mon, year)


def get_now_tm() -> BrokenDownTime:
    """Current time broken down in the default zone."""
    return localtimes(int(time.time()), TIMEZONE)


def get_tm_by_int(t: int) -> BrokenDownTime:
    """``t`` broken down in the default zone."""
    return localtimes(t, TIMEZONE)