"""Structured error handling for LDML date formatting.

This module provides:
- Typed exception hierarchy
- Error context preservation
- Serialization for logging and CLI output

Each concrete error also derives from the closest built-in exception so
callers can catch ``NotImplementedError``, ``LookupError`` or
``ValueError`` without importing this module.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence


class ErrorCategory(str, Enum):
    """Categories of formatting errors."""

    UNSUPPORTED = "unsupported"   # Pattern letter known but not implemented
    LOCALE_DATA = "locale_data"   # Missing or unloadable locale data
    PATTERN = "pattern"           # Malformed pattern string
    CONFIG = "config"             # Invalid settings
    INTERNAL = "internal"


# =============================================================================
# Exception Hierarchy
# =============================================================================


class LdmlFormatError(Exception):
    """Base exception for all ldmlformat errors."""

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "context": self.context,
        }

    def __str__(self) -> str:
        return self.message


class FieldNotImplementedError(LdmlFormatError, NotImplementedError):
    """A pattern field defined by LDML that this formatter does not support."""

    def __init__(self, letter: str, length: int):
        super().__init__(
            f"Pattern field {letter * length!r} is not implemented",
            category=ErrorCategory.UNSUPPORTED,
            context={"letter": letter, "length": length},
        )
        self.letter = letter
        self.length = length


class MissingLocaleDataError(LdmlFormatError, LookupError):
    """A required locale data path has no entry."""

    def __init__(self, path: Sequence[str | int], locale: str | None = None):
        joined = "/".join(str(part) for part in path)
        where = f" for locale {locale!r}" if locale else ""
        super().__init__(
            f"Missing locale data at {joined!r}{where}",
            category=ErrorCategory.LOCALE_DATA,
            context={"path": joined, "locale": locale},
        )
        self.path = joined
        self.locale = locale


class UnknownLocaleError(LdmlFormatError, LookupError):
    """No locale data is available for the requested tag."""

    def __init__(self, tag: str, available: Sequence[str] = ()):
        super().__init__(
            f"No locale data for {tag!r}",
            category=ErrorCategory.LOCALE_DATA,
            context={"tag": tag, "available": list(available)},
        )
        self.tag = tag


class LocaleDataLoadError(LdmlFormatError):
    """Locale data files could not be read or decoded."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(
            message,
            category=ErrorCategory.LOCALE_DATA,
            context={"path": path},
        )
        self.path = path


class PatternSyntaxError(LdmlFormatError, ValueError):
    """The pattern string is malformed (e.g. an unterminated quote)."""

    def __init__(self, message: str, *, pattern: str, position: int):
        super().__init__(
            message,
            category=ErrorCategory.PATTERN,
            context={"pattern": pattern, "position": position},
        )
        self.pattern = pattern
        self.position = position


class ConfigError(LdmlFormatError, ValueError):
    """Invalid formatter settings."""

    def __init__(self, message: str, *, key: str | None = None):
        super().__init__(message, category=ErrorCategory.CONFIG, context={"key": key})
        self.key = key
