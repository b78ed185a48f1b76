"""Field resolution for LDML date patterns.

Every pattern letter maps to a resolver registered in :data:`RESOLVERS`.
A resolver receives the formatting context and the field run and returns a
:class:`~ldmlformat.types.Resolved` value:

- an int with ``pad=True`` is zero padded to the run length
- an int or str with ``pad=False`` is emitted as is
- ``None`` emits nothing (time zone names that need metazone data)

Reference:
    http://www.unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from ldmlformat.calendar import (
    add_days,
    day_of_year,
    format_offset,
    ms_since_midnight,
    start_of,
    weekday,
)
from ldmlformat.errors import FieldNotImplementedError, MissingLocaleDataError
from ldmlformat.locale_data import DAY_KEYS, LocaleDataAccessor
from ldmlformat.types import Field, FormStyle, Instant, Resolved, Width, width_for_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldContext:
    """Inputs shared by every resolver during one format call."""
    instant: Instant
    data: LocaleDataAccessor


Resolver = Callable[[FieldContext, Field], Resolved]

RESOLVERS: dict[str, Resolver] = {}


def resolver(*letters: str) -> Callable[[Resolver], Resolver]:
    """Register a function as the resolver for ``letters``."""

    def decorator(func: Resolver) -> Resolver:
        for letter in letters:
            RESOLVERS[letter] = func
        return func

    return decorator


# ==============================================================================
# Shared helpers
# ==============================================================================

def _round_half_up(value: int, length: int) -> int:
    """Compute ``round(value * 10 ** (length - 3))`` without float error."""
    if length >= 3:
        return value * 10 ** (length - 3)
    divisor = 10 ** (3 - length)
    return (2 * value + divisor) // (2 * divisor)


def _year_digits(year: int, length: int) -> Resolved:
    if length == 2:
        # Rightmost two digits, not a modulo
        return Resolved(str(abs(year)).zfill(2)[-2:])
    return Resolved(abs(year), pad=True)


def _form(field: Field, stand_alone_letter: str) -> FormStyle:
    return FormStyle.STAND_ALONE if field.letter == stand_alone_letter else FormStyle.FORMAT


def _weeks_in(day: int, first_weekday: int, min_days: int) -> int:
    weeks = math.ceil((day + first_weekday) / 7)
    if 7 - first_weekday < min_days:
        weeks -= 1
    return weeks


def weekday_name(ctx: FieldContext, field: Field) -> Resolved:
    """Resolve a weekday name (``E``, and ``e``/``c`` longer than 2).

    Length 6 asks for the short width and falls back to abbreviated names
    when the locale has no short names.
    """
    form = _form(field, "c")
    key = DAY_KEYS[ctx.instant.weekday]
    if field.length == 6:
        try:
            return Resolved(ctx.data.weekday_name(key, form, Width.SHORT))
        except MissingLocaleDataError:
            logger.debug("No short day names, using abbreviated for %s", key)
            return Resolved(ctx.data.weekday_name(key, form, Width.ABBREVIATED))
    return Resolved(ctx.data.weekday_name(key, form, width_for_length(field.length)))


def iso_offset(ctx: FieldContext, field: Field) -> Resolved:
    """Resolve an ISO 8601 offset (``x``, and ``X`` for non-zero offsets)."""
    if field.length == 1:
        template = "+HH;-HH"
    elif field.length % 2:
        template = "+HH:mm;-HH:mm"
    else:
        template = "+HHmm;-HHmm"
    return Resolved(format_offset(ctx.instant, template))


def emit_nothing(ctx: FieldContext, field: Field) -> Resolved:
    """Time zone names that require metazone data are not rendered."""
    logger.debug("Field %r needs time zone name data, emitting nothing", field.source)
    return Resolved(None)


def not_implemented(ctx: FieldContext, field: Field) -> Resolved:
    raise FieldNotImplementedError(field.letter, field.length)


# ==============================================================================
# Era and year
# ==============================================================================

@resolver("G")
def era(ctx: FieldContext, field: Field) -> Resolved:
    index = 0 if ctx.instant.year < 0 else 1
    return Resolved(ctx.data.era(index, width_for_length(field.length)))


@resolver("y")
def year(ctx: FieldContext, field: Field) -> Resolved:
    return _year_digits(ctx.instant.year, field.length)


@resolver("Y")
def week_year(ctx: FieldContext, field: Field) -> Resolved:
    """Year of the week the date falls in.

    The date is shifted by ``7 - (weekday - firstDay) - minDays`` days, with
    the absolute weekday (0 = Sunday) and no reduction modulo 7, and the year
    of the shifted date is emitted.
    """
    instant = ctx.instant
    shift = 7 - (instant.weekday - ctx.data.first_day()) - ctx.data.min_days()
    return _year_digits(add_days(instant, shift).year, field.length)


resolver("u", "U", "g")(not_implemented)


# ==============================================================================
# Quarter and month
# ==============================================================================

@resolver("Q", "q")
def quarter(ctx: FieldContext, field: Field) -> Resolved:
    number = math.ceil(ctx.instant.month / 3)
    if field.length <= 2:
        return Resolved(number, pad=True)
    return Resolved(
        ctx.data.quarter(number, _form(field, "q"), width_for_length(field.length))
    )


@resolver("M", "L")
def month(ctx: FieldContext, field: Field) -> Resolved:
    number = ctx.instant.month
    if field.length <= 2:
        return Resolved(number, pad=True)
    return Resolved(
        ctx.data.month(number, _form(field, "L"), width_for_length(field.length))
    )


# ==============================================================================
# Week
# ==============================================================================

@resolver("w")
def week_of_year(ctx: FieldContext, field: Field) -> Resolved:
    first_day = ctx.data.first_day()
    first_weekday = weekday(start_of(ctx.instant, "year"), first_day)
    day = day_of_year(ctx.instant)
    return Resolved(_weeks_in(day, first_weekday, ctx.data.min_days()), pad=True)


@resolver("W")
def week_of_month(ctx: FieldContext, field: Field) -> Resolved:
    first_day = ctx.data.first_day()
    first_weekday = weekday(start_of(ctx.instant, "month"), first_day)
    return Resolved(_weeks_in(ctx.instant.day, first_weekday, ctx.data.min_days()))


# ==============================================================================
# Day
# ==============================================================================

@resolver("d")
def day_of_month(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.day, pad=True)


@resolver("D")
def day_of_year_field(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(day_of_year(ctx.instant) + 1, pad=True)


@resolver("F")
def day_of_week_in_month(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.day // 7 + 1)


# ==============================================================================
# Weekday and period
# ==============================================================================

@resolver("e", "c")
def local_weekday(ctx: FieldContext, field: Field) -> Resolved:
    if field.length <= 2:
        # 1-7 counted from the locale's first day of the week
        return Resolved(weekday(ctx.instant, ctx.data.first_day()) + 1, pad=True)
    return weekday_name(ctx, field)


resolver("E")(weekday_name)


@resolver("a")
def day_period(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.data.day_period("am" if ctx.instant.hour < 12 else "pm"))


# ==============================================================================
# Hour, minute, second
# ==============================================================================

@resolver("h")
def hour_1_12(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.hour % 12 or 12, pad=True)


@resolver("H")
def hour_0_23(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.hour, pad=True)


@resolver("K")
def hour_0_11(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.hour % 12, pad=True)


@resolver("k")
def hour_1_24(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.hour or 24, pad=True)


@resolver("m")
def minute(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.minute, pad=True)


@resolver("s")
def second(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(ctx.instant.second, pad=True)


@resolver("S")
def fractional_second(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(_round_half_up(ctx.instant.millisecond, field.length), pad=True)


@resolver("A")
def milliseconds_in_day(ctx: FieldContext, field: Field) -> Resolved:
    return Resolved(_round_half_up(ms_since_midnight(ctx.instant), field.length), pad=True)


# ==============================================================================
# Zone
# ==============================================================================

resolver("z", "v", "V")(emit_nothing)


@resolver("O")
def localized_gmt(ctx: FieldContext, field: Field) -> Resolved:
    if ctx.instant.utc_offset == 0:
        return Resolved(ctx.data.gmt_zero_format())
    template = "+H;-H" if field.length < 4 else ctx.data.hour_format()
    offset = format_offset(ctx.instant, template)
    return Resolved(ctx.data.gmt_format().replace("{0}", offset, 1))


@resolver("X")
def iso_offset_z(ctx: FieldContext, field: Field) -> Resolved:
    if ctx.instant.utc_offset == 0:
        return Resolved("Z")
    return iso_offset(ctx, field)


resolver("x")(iso_offset)


# ==============================================================================
# Dispatch
# ==============================================================================

def normalize(field: Field, data: LocaleDataAccessor) -> Field:
    """Rewrite aliases before dispatch.

    ``j`` becomes the locale's preferred hour letter. ``Z``..``ZZZ`` act as
    ``xxxx``, ``ZZZZ`` as ``OOOO`` and ``ZZZZZ`` as ``XXXXX``.
    """
    if field.letter == "j":
        return Field(data.preferred_hour_cycle(), field.length)
    if field.letter == "Z":
        if field.length < 4:
            return Field("x", 4)
        if field.length == 4:
            return Field("O", 4)
        return Field("X", 5)
    return field


def resolve_field(field: Field, ctx: FieldContext) -> Resolved:
    """Resolve one field run; letters without a resolver stay literal."""
    field = normalize(field, ctx.data)
    func = RESOLVERS.get(field.letter)
    if func is None:
        return Resolved(field.source)
    return func(ctx, field)
