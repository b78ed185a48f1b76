"""LDML date pattern formatter.

Renders an instant into text following a Unicode date pattern and a locale
data source.

Usage:
    from datetime import datetime
    from ldmlformat.formatter import DatePatternFormatter, format_datetime

    format_datetime(datetime(2024, 12, 28, 15, 4), "EEEE, d MMMM y", "de")
    # -> "Samstag, 28 Dezember 2024"

    formatter = DatePatternFormatter(quoting=True)
    formatter.format(instant, "d 'de' MMMM", get_locale_data("fr"))

Formatting is a pure function of its inputs: nothing is cached between
calls and neither the instant nor the locale data is modified, so one
formatter may be shared across threads.
"""

from __future__ import annotations

from datetime import date, datetime

from ldmlformat.fields import FieldContext, resolve_field
from ldmlformat.locale_data import LocaleDataAccessor, LocaleTag
from ldmlformat.locales import get_locale_data
from ldmlformat.padding import pad_number
from ldmlformat.tokenizer import tokenize
from ldmlformat.types import Field, Instant


class DatePatternFormatter:
    """Formats instants with LDML date patterns.

    Args:
        quoting: Treat single-quoted text in patterns as literal
            (see :mod:`ldmlformat.tokenizer`)
    """

    def __init__(self, quoting: bool = False) -> None:
        self.quoting = quoting

    def format(
        self,
        value: Instant | datetime | date,
        pattern: str,
        data: LocaleDataAccessor,
    ) -> str:
        """Format ``value`` with ``pattern``.

        Raises:
            FieldNotImplementedError: The pattern uses ``u``, ``U`` or ``g``
            MissingLocaleDataError: A needed locale entry is absent
            PatternSyntaxError: Malformed quoting (``quoting=True``)
        """
        instant = value if isinstance(value, Instant) else Instant.from_datetime(value)
        ctx = FieldContext(instant=instant, data=data)

        parts: list[str] = []
        for element in tokenize(pattern, quoting=self.quoting):
            if not isinstance(element, Field):
                parts.append(element.text)
                continue

            resolved = resolve_field(element, ctx)
            if resolved.value is None:
                continue
            if resolved.pad and isinstance(resolved.value, int):
                parts.append(pad_number(resolved.value, element.length))
            else:
                parts.append(str(resolved.value))

        return "".join(parts)


# ==============================================================================
# Convenience Functions
# ==============================================================================

_formatter = DatePatternFormatter()


def format_instant(instant: Instant, pattern: str, data: LocaleDataAccessor) -> str:
    """Format an instant with a pattern and locale data.

    Example:
        format_instant(Instant(2023, 7, 4), "yyyy-MM-dd", get_locale_data("en"))
        # -> "2023-07-04"
    """
    return _formatter.format(instant, pattern, data)


def format_datetime(
    value: datetime | date | Instant,
    pattern: str,
    locale: str | LocaleTag | LocaleDataAccessor = "en",
    quoting: bool = False,
) -> str:
    """Format a datetime for a locale.

    Args:
        value: Date or datetime to format
        pattern: LDML date pattern
        locale: Locale tag, parsed locale, or a locale data accessor
        quoting: Treat single-quoted text as literal

    Returns:
        Formatted string

    Example:
        format_datetime(datetime(2024, 3, 1), "MMMM", "fr")  # "mars"
    """
    if isinstance(locale, (str, LocaleTag)):
        locale = get_locale_data(locale)
    formatter = _formatter if not quoting else DatePatternFormatter(quoting=True)
    return formatter.format(value, pattern, locale)
