"""Core value types for LDML date pattern formatting.

Types:
- Instant: an immutable point in time with local calendar fields
- Literal / Field: elements produced by the pattern tokenizer
- Resolved: the value a field resolver hands back to the formatter
- FormStyle / Width: CLDR name-form selectors
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union


# ==============================================================================
# Enums
# ==============================================================================

class FormStyle(str, Enum):
    """CLDR context for month, day and quarter names."""
    FORMAT = "format"            # used inside running text
    STAND_ALONE = "stand-alone"  # used on its own, e.g. calendar headers


class Width(str, Enum):
    """CLDR name widths."""
    ABBREVIATED = "abbreviated"
    WIDE = "wide"
    NARROW = "narrow"
    SHORT = "short"


# Indexed by (field run length - 3)
WIDTHS: tuple[Width, ...] = (Width.ABBREVIATED, Width.WIDE, Width.NARROW)


def width_for_length(length: int) -> Width:
    """Pick the Width Table entry for a field run of ``length`` letters.

    Lengths below 3 map to abbreviated and lengths past the table map to
    narrow.
    """
    index = min(max(length - 3, 0), len(WIDTHS) - 1)
    return WIDTHS[index]


# ==============================================================================
# Instant
# ==============================================================================

@dataclass(frozen=True)
class Instant:
    """A point in time expressed in local calendar fields.

    Attributes:
        year: Astronomical year (0 is 1 BC, negative years allowed)
        month: Month of year, 1-12
        day: Day of month, 1-31
        hour: Hour of day, 0-23
        minute: Minute, 0-59
        second: Second, 0-59
        millisecond: Millisecond, 0-999
        utc_offset: Signed offset from UTC in minutes (east positive)
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    utc_offset: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        if not 1 <= self.day <= 31:
            raise ValueError(f"day must be in 1..31, got {self.day}")
        from ldmlformat.calendar import civil_from_days, days_from_civil

        days = days_from_civil(self.year, self.month, self.day)
        if civil_from_days(days) != (self.year, self.month, self.day):
            raise ValueError(
                f"day {self.day} is out of range for {self.year:04d}-{self.month:02d}"
            )
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second must be in 0..59, got {self.second}")
        if not 0 <= self.millisecond <= 999:
            raise ValueError(f"millisecond must be in 0..999, got {self.millisecond}")

    @property
    def weekday(self) -> int:
        """Day of week, 0 = Sunday ... 6 = Saturday."""
        from ldmlformat.calendar import days_from_civil

        # 1970-01-01 was a Thursday
        return (days_from_civil(self.year, self.month, self.day) + 4) % 7

    @classmethod
    def from_datetime(cls, value: datetime | date) -> "Instant":
        """Build an Instant from a ``datetime`` or ``date``.

        Naive datetimes and plain dates are taken as UTC offset 0.
        """
        if not isinstance(value, datetime):
            return cls(year=value.year, month=value.month, day=value.day)

        offset = value.utcoffset() or timedelta(0)
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            utc_offset=int(offset.total_seconds() // 60),
        )


# ==============================================================================
# Pattern elements
# ==============================================================================

@dataclass(frozen=True)
class Literal:
    """Text copied verbatim to the output."""
    text: str


@dataclass(frozen=True)
class Field:
    """A maximal run of one pattern letter."""
    letter: str
    length: int

    @property
    def source(self) -> str:
        return self.letter * self.length


PatternElement = Union[Literal, Field]


@dataclass(frozen=True)
class Resolved:
    """Result of resolving one field.

    ``value`` is either an int (zero padded to the run length when ``pad``
    is set), a string used verbatim, or None when the field emits nothing.
    """
    value: int | str | None
    pad: bool = False
