"""Gregorian calendar helpers.

Pure functions over ``Instant`` values. Day arithmetic goes through a
proleptic Gregorian day number (days since 1970-01-01) so it works for
any year, including year 0 and negative years, which ``datetime`` cannot
represent.
"""

from __future__ import annotations

import re
from dataclasses import replace

from ldmlformat.padding import pad_number
from ldmlformat.types import Instant

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

_HOURS_RE = re.compile(r"HH?")


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`, returns ``(year, month, day)``."""
    days += 719468
    era = days // 146097
    doe = days - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    year = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    return year + (month <= 2), month, day


def weekday(instant: Instant, first_day: int = 0) -> int:
    """Day of week counted from the locale's first day of the week.

    Args:
        instant: Date to inspect
        first_day: First day of the week, 0 = Sunday ... 6 = Saturday

    Returns:
        0 for the first day of the week up to 6 for the last
    """
    return (instant.weekday - first_day) % 7


def day_of_year(instant: Instant) -> int:
    """0-based day of the year."""
    return days_from_civil(instant.year, instant.month, instant.day) - days_from_civil(
        instant.year, 1, 1
    )


def start_of(instant: Instant, unit: str) -> Instant:
    """Truncate an instant to the start of ``unit`` (year, month or day)."""
    if unit == "year":
        return replace(instant, month=1, day=1, hour=0, minute=0, second=0, millisecond=0)
    if unit == "month":
        return replace(instant, day=1, hour=0, minute=0, second=0, millisecond=0)
    if unit == "day":
        return replace(instant, hour=0, minute=0, second=0, millisecond=0)
    raise ValueError(f"Unsupported unit: {unit!r}")


def add_days(instant: Instant, days: int) -> Instant:
    """Return a new instant ``days`` calendar days away, same wall time."""
    year, month, day = civil_from_days(
        days_from_civil(instant.year, instant.month, instant.day) + days
    )
    return replace(instant, year=year, month=month, day=day)


def ms_since_midnight(instant: Instant) -> int:
    return (
        instant.hour * MS_PER_HOUR
        + instant.minute * MS_PER_MINUTE
        + instant.second * MS_PER_SECOND
        + instant.millisecond
    )


def format_offset(instant: Instant, template: str, time_separator: str = ":") -> str:
    """Render the UTC offset of ``instant`` with an LDML hour-format template.

    ``template`` holds a positive and a negative sub-pattern separated by
    ``;`` (e.g. ``"+HH:mm;-HH:mm"``). ``H``/``HH`` is replaced with the
    absolute hours, ``mm`` with two-digit minutes and a single ``m`` with
    unpadded minutes.

    Example:
        format_offset(Instant(2024, 1, 1, utc_offset=-330), "+HH:mm;-HH:mm")
        # -> "-05:30"
    """
    offset = instant.utc_offset
    hours, minutes = divmod(abs(offset), 60)
    sides = template.split(";")
    side = sides[1] if offset < 0 and len(sides) > 1 else sides[0]

    side = side.replace(":", time_separator, 1)
    side = _HOURS_RE.sub(lambda m: pad_number(hours, len(m.group(0))), side, count=1)
    side = side.replace("mm", pad_number(minutes, 2), 1)
    side = side.replace("m", str(minutes), 1)
    return side
