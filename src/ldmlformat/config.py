"""Formatter settings.

Settings are layered, later sources winning:

    defaults  <  TOML file ([ldmlformat] table)  <  environment

Environment variables:
    LDMLFORMAT_LOCALE=de-AT
    LDMLFORMAT_DATA_PATH=/srv/cldr-json
    LDMLFORMAT_QUOTING=true
    LDMLFORMAT_LOG_LEVEL=DEBUG

Usage:
    >>> from ldmlformat.config import load_settings
    >>> settings = load_settings("ldmlformat.toml")
    >>> settings.locale
    'de-AT'
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from ldmlformat.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "LDMLFORMAT_"
DEFAULT_CONFIG_FILE = "ldmlformat.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class FormatterSettings:
    """Settings for the CLI and the convenience helpers.

    Attributes:
        locale: Default locale tag
        data_path: Directory laid out like the cldr-json packages; when unset
            the built-in locale data is used
        quoting: Treat single-quoted pattern text as literal
        log_level: Logging level name
    """
    locale: str = "en"
    data_path: Path | None = None
    quoting: bool = False
    log_level: str = "WARNING"

    def with_overrides(self, values: Mapping[str, Any]) -> "FormatterSettings":
        """Return a copy with ``values`` applied (None values are ignored)."""
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                raise ConfigError(f"Unknown setting: {key!r}", key=key)
            if value is None:
                continue
            updates[key] = _coerce(key, value)
        return replace(self, **updates)


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "yes", "1", "on"):
        return True
    if text in ("false", "no", "0", "off"):
        return False
    raise ConfigError(f"Invalid boolean for {key!r}: {value!r}", key=key)


def _coerce(key: str, value: Any) -> Any:
    if key == "quoting":
        return _parse_bool(key, value)
    if key == "data_path":
        return Path(value)
    if key == "log_level":
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {value!r}", key=key)
        return level
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Invalid value for {key!r}: {value!r}", key=key)
    return value


def _from_env(environ: Mapping[str, str]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in fields(FormatterSettings):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        if env_key in environ and environ[env_key] != "":
            result[f.name] = environ[env_key]
    return result


def _from_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            document = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    section = document.get("ldmlformat", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[ldmlformat] in {path} must be a table", key="ldmlformat")
    return {key.replace("-", "_"): value for key, value in section.items()}


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> FormatterSettings:
    """Load settings from defaults, an optional TOML file and the environment.

    Args:
        path: TOML file; when None, ``ldmlformat.toml`` in the working
            directory is used if present
        environ: Environment mapping (defaults to ``os.environ``)

    Raises:
        ConfigError: Unreadable file or invalid values
    """
    settings = FormatterSettings()

    if path is not None:
        config_file: Path | None = Path(path)
        if not config_file.exists():
            raise ConfigError(f"Config file not found: {config_file}")
    else:
        config_file = Path(DEFAULT_CONFIG_FILE)
        if not config_file.exists():
            config_file = None

    if config_file is not None:
        logger.debug("Loading settings from %s", config_file)
        settings = settings.with_overrides(_from_file(config_file))

    env = os.environ if environ is None else environ
    return settings.with_overrides(_from_env(env))
