"""Command-line interface for ldmlformat."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ldmlformat.config import FormatterSettings, load_settings
from ldmlformat.errors import LdmlFormatError
from ldmlformat.formatter import DatePatternFormatter
from ldmlformat.locale_data import DAY_KEYS, CLDRLocaleData, LocaleDataAccessor
from ldmlformat.locales import get_locale_data, get_supported_locales

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ldmlformat",
    help="Format dates and times with Unicode LDML patterns",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=False)],
        force=True,
    )


def _load_data(settings: FormatterSettings) -> LocaleDataAccessor:
    if settings.data_path is not None:
        return CLDRLocaleData.from_directory(settings.data_path, settings.locale)
    return get_locale_data(settings.locale)


def _parse_instant(value: str | None) -> datetime:
    if value is None:
        return datetime.now().astimezone()
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Not an ISO 8601 date/time: {value!r}") from e


@app.command(name="format")
def format_cmd(
    pattern: Annotated[str, typer.Argument(help="LDML date pattern, e.g. 'yyyy-MM-dd'")],
    at: Annotated[
        Optional[str],
        typer.Option("--at", "-a", help="ISO 8601 date/time to format (default: now)"),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale tag (default from settings)"),
    ] = None,
    data_path: Annotated[
        Optional[Path],
        typer.Option("--data", help="Directory of cldr-json locale data"),
    ] = None,
    quote: Annotated[
        Optional[bool],
        typer.Option("--quote/--no-quote", help="Treat single-quoted text as literal"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Settings file (TOML)"),
    ] = None,
) -> None:
    """Format a date/time with a pattern."""
    value = _parse_instant(at)

    try:
        settings = load_settings(config).with_overrides(
            {"locale": locale, "data_path": data_path, "quoting": quote}
        )
        _configure_logging(settings.log_level)
        data = _load_data(settings)
        result = DatePatternFormatter(quoting=settings.quoting).format(value, pattern, data)
    except LdmlFormatError as e:
        logger.debug("Formatting failed: %s", e.to_dict())
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result)


@app.command(name="locales")
def locales_cmd() -> None:
    """List built-in locales and their week settings."""
    table = Table(title="Built-in locales")
    table.add_column("Locale", style="bold")
    table.add_column("Territory")
    table.add_column("First day")
    table.add_column("Min days", justify="right")
    table.add_column("Hour cycle")

    for tag in get_supported_locales():
        data = get_locale_data(tag)
        table.add_row(
            tag,
            data.territory,
            DAY_KEYS[data.first_day()],
            str(data.min_days()),
            data.preferred_hour_cycle(),
        )

    Console().print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
