"""Polars integration.

Formats Date and Datetime columns with LDML patterns.

Usage:
    import polars as pl
    from ldmlformat.frame import format_column
    from ldmlformat.locales import get_locale_data

    df = pl.DataFrame({"ts": [datetime(2024, 1, 5, 9, 30)]})
    format_column(df, "ts", "EEE d MMM, HH:mm", get_locale_data("en"))
    # adds ts_formatted = "Fri 5 Jan, 09:30"
"""

from __future__ import annotations

from typing import TypeVar

import polars as pl

from ldmlformat.formatter import DatePatternFormatter
from ldmlformat.locale_data import LocaleDataAccessor

FrameT = TypeVar("FrameT", pl.DataFrame, pl.LazyFrame)


def format_series(
    series: pl.Series,
    pattern: str,
    data: LocaleDataAccessor,
    quoting: bool = False,
) -> pl.Series:
    """Format every value of a Date/Datetime series.

    Nulls stay null. Time-zone-aware series are rendered in their zone,
    with that zone's UTC offset for each value.

    Raises:
        TypeError: The series is not a Date or Datetime series
    """
    if not (series.dtype == pl.Date or series.dtype == pl.Datetime):
        raise TypeError(
            f"Expected a Date or Datetime series, got {series.dtype} for {series.name!r}"
        )

    formatter = DatePatternFormatter(quoting=quoting)
    values = [
        None if value is None else formatter.format(value, pattern, data)
        for value in series.to_list()
    ]
    return pl.Series(series.name, values, dtype=pl.Utf8)


def format_expr(
    column: str,
    pattern: str,
    data: LocaleDataAccessor,
    quoting: bool = False,
) -> pl.Expr:
    """Expression formatting ``column``, usable in ``select``/``with_columns``."""
    return pl.col(column).map_batches(
        lambda s: format_series(s, pattern, data, quoting=quoting),
        return_dtype=pl.Utf8,
    )


def format_column(
    frame: FrameT,
    column: str,
    pattern: str,
    data: LocaleDataAccessor,
    alias: str | None = None,
    quoting: bool = False,
) -> FrameT:
    """Append a formatted copy of ``column`` to a DataFrame or LazyFrame.

    The new column is named ``alias`` or ``<column>_formatted``.
    """
    name = alias or f"{column}_formatted"
    return frame.with_columns(
        format_expr(column, pattern, data, quoting=quoting).alias(name)
    )
