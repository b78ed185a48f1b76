"""ldmlformat: locale-aware date formatting with Unicode LDML patterns.

Example:
    from datetime import datetime
    from ldmlformat import format_datetime

    format_datetime(datetime(2023, 7, 4, 13, 5), "EEEE, MMMM d, y h:mm a", "en")
    # -> "Tuesday, July 4, 2023 1:05 PM"
"""

from ldmlformat.errors import (
    ConfigError,
    ErrorCategory,
    FieldNotImplementedError,
    LdmlFormatError,
    LocaleDataLoadError,
    MissingLocaleDataError,
    PatternSyntaxError,
    UnknownLocaleError,
)
from ldmlformat.formatter import DatePatternFormatter, format_datetime, format_instant
from ldmlformat.locale_data import CLDRLocaleData, LocaleDataAccessor, LocaleTag
from ldmlformat.locales import get_locale_data, get_supported_locales
from ldmlformat.tokenizer import tokenize
from ldmlformat.types import Field, FormStyle, Instant, Literal, Width

__version__ = "0.1.0"

__all__ = [
    # Formatting
    "DatePatternFormatter",
    "format_datetime",
    "format_instant",
    "tokenize",
    # Types
    "Instant",
    "Field",
    "Literal",
    "FormStyle",
    "Width",
    # Locale data
    "CLDRLocaleData",
    "LocaleDataAccessor",
    "LocaleTag",
    "get_locale_data",
    "get_supported_locales",
    # Errors
    "ErrorCategory",
    "LdmlFormatError",
    "FieldNotImplementedError",
    "MissingLocaleDataError",
    "UnknownLocaleError",
    "LocaleDataLoadError",
    "PatternSyntaxError",
    "ConfigError",
]
