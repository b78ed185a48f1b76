"""Numeric zero padding."""

from __future__ import annotations


def pad_number(value: int, width: int) -> str:
    """Left-pad the decimal form of ``value`` with zeros to ``width`` digits.

    Never truncates. The sign of a negative value stays in front of the
    padding.

    Example:
        pad_number(5, 4)      # "0005"
        pad_number(12345, 2)  # "12345"
        pad_number(-5, 3)     # "-005"
    """
    if value < 0:
        return "-" + str(-value).zfill(width)
    return str(value).zfill(width)
