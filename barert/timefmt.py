"""Conversion of Unix time to broken-down Moscow time and its text forms."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MSK_OFFSET", "Tm", "format_local", "format_rfc822", "time_to_tm"]

MSK_OFFSET = 3 * 60 * 60
"""Offset of Moscow time from UTC in seconds."""

_SECS_1601_TO_1970 = 11644473600
_SECS_PER_DAY = 86400
_SECS_400_YEARS = 12622780800
_SECS_100_YEARS = 3155673600
_SECS_4_YEARS = 126230400
_SECS_YEAR = 31536000

_DAYS_SINCE_JAN_1ST = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)

_WDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class Tm:
    """Broken-down time; ``mon`` counts from 0 and ``year`` from 1900."""

    sec: int
    min: int
    hour: int
    mday: int
    mon: int
    year: int
    wday: int
    yday: int
    isdst: int = -1
    gmtoff: int = MSK_OFFSET
    zone: str | None = None


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def time_to_tm(t: int) -> Tm:
    """Break Unix time ``t`` down into Moscow time (UTC+3)."""
    sec = t + MSK_OFFSET + _SECS_1601_TO_1970
    if sec < 0:
        raise ValueError(f"time {t} lies before the year 1601")

    # 1 January 1601 was a Monday.
    wday = (sec // _SECS_PER_DAY + 1) % 7

    quadricentennials, sec = divmod(sec, _SECS_400_YEARS)
    centennials = min(sec // _SECS_100_YEARS, 3)
    sec -= centennials * _SECS_100_YEARS
    quadrennials = min(sec // _SECS_4_YEARS, 24)
    sec -= quadrennials * _SECS_4_YEARS
    annuals = min(sec // _SECS_YEAR, 3)
    sec -= annuals * _SECS_YEAR

    year = 1601 + quadricentennials * 400 + centennials * 100 + quadrennials * 4 + annuals
    table = _DAYS_SINCE_JAN_1ST[_is_leap(year)]

    yday, sec = divmod(sec, _SECS_PER_DAY)
    hour, sec = divmod(sec, 3600)
    minute, sec = divmod(sec, 60)

    month = next(m for m in range(1, 13) if yday < table[m])
    mday = 1 + yday - table[month - 1]

    return Tm(
        sec=sec,
        min=minute,
        hour=hour,
        mday=mday,
        mon=month - 1,
        year=year - 1900,
        wday=wday,
        yday=yday,
    )


def _two(value: int) -> str:
    return ("0" if value < 10 else "") + str(value)


def format_rfc822(tm: Tm) -> str:
    """Render ``tm`` as e.g. ``Sat, 04 Nov 2023 17:47:03 +0300``."""
    return (
        f"{_WDAYS[tm.wday]}, {_two(tm.mday)} {_MONTHS[tm.mon]} {tm.year + 1900} "
        f"{_two(tm.hour)}:{_two(tm.min)}:{_two(tm.sec)} +0300"
    )


def format_local(tm: Tm) -> str:
    """Render ``tm`` as e.g. ``08.10.2023 15:13:54 MSK``."""
    return (
        f"{_two(tm.mday)}.{_two(tm.mon + 1)}.{tm.year + 1900} "
        f"{_two(tm.hour)}:{_two(tm.min)}:{_two(tm.sec)} MSK"
    )