"""Shared fixtures for ldmlformat tests."""

from __future__ import annotations

from typing import Any

import pytest

from ldmlformat.locale_data import CLDRLocaleData
from ldmlformat.locales import get_locale_data
from ldmlformat.types import Instant


@pytest.fixture
def en():
    """English (United States) locale data."""
    return get_locale_data("en")


@pytest.fixture
def de():
    """German (Germany) locale data."""
    return get_locale_data("de")


@pytest.fixture
def instant() -> Instant:
    """Tuesday 2023-07-04 13:05:09.567 UTC."""
    return Instant(2023, 7, 4, 13, 5, 9, 567)


@pytest.fixture
def minimal_tree() -> dict[str, Any]:
    """A sparse CLDR tree: no short day names, no month names."""
    return {
        "dates": {
            "calendars": {
                "gregorian": {
                    "days": {
                        "format": {
                            "abbreviated": {"sun": "Sun.", "tue": "Tue."},
                            "wide": {"tue": "Tuesday"},
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def minimal_data(minimal_tree: dict[str, Any]) -> CLDRLocaleData:
    supplemental = {
        "weekData": {"firstDay": {"001": "sun"}, "minDays": {"001": "1"}},
        "timeData": {"001": {"_preferred": "H"}},
    }
    return CLDRLocaleData("xx", minimal_tree, supplemental)
