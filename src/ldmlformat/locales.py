"""Built-in CLDR locale data.

A compact subset of the CLDR gregorian calendar, time zone name and week
data for a handful of locales, laid out exactly like the cldr-json trees so
it can be served by :class:`~ldmlformat.locale_data.CLDRLocaleData`.

Usage:
    from ldmlformat.locales import get_locale_data

    data = get_locale_data("de-AT")
    data.first_day()  # 1 (Monday)
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ldmlformat.errors import UnknownLocaleError
from ldmlformat.locale_data import DAY_KEYS, CLDRLocaleData, LocaleTag

logger = logging.getLogger(__name__)


def _numbered(values: Sequence[str]) -> dict[str, str]:
    return {str(i): value for i, value in enumerate(values, start=1)}


def _days(values: Sequence[str]) -> dict[str, str]:
    return dict(zip(DAY_KEYS, values))


def _context(**widths: Sequence[str]) -> dict[str, dict[str, str]]:
    return {width: _numbered(values) for width, values in widths.items()}


def _day_context(**widths: Sequence[str]) -> dict[str, dict[str, str]]:
    return {width: _days(values) for width, values in widths.items()}


def _locale_tree(
    *,
    eras: dict[str, Sequence[str]],
    months: dict[str, Any],
    days: dict[str, Any],
    quarters: dict[str, Any],
    am: str,
    pm: str,
    gmt_format: str = "GMT{0}",
    gmt_zero_format: str = "GMT",
    hour_format: str = "+HH:mm;-HH:mm",
) -> dict[str, Any]:
    return {
        "dates": {
            "calendars": {
                "gregorian": {
                    "eras": {
                        key: {str(i): name for i, name in enumerate(names)}
                        for key, names in eras.items()
                    },
                    "months": months,
                    "days": days,
                    "quarters": quarters,
                    "dayPeriods": {"format": {"wide": {"am": am, "pm": pm}}},
                }
            },
            "timeZoneNames": {
                "hourFormat": hour_format,
                "gmtFormat": gmt_format,
                "gmtZeroFormat": gmt_zero_format,
            },
        }
    }


# ==============================================================================
# Locale Data: main trees
# ==============================================================================

_NARROW_MONTHS = ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"]

_EN_MONTHS = _context(
    abbreviated=["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    wide=["January", "February", "March", "April", "May", "June",
          "July", "August", "September", "October", "November", "December"],
    narrow=_NARROW_MONTHS,
)
_EN_DAYS = _day_context(
    abbreviated=["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    wide=["Sunday", "Monday", "Tuesday", "Wednesday",
          "Thursday", "Friday", "Saturday"],
    narrow=["S", "M", "T", "W", "T", "F", "S"],
    short=["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"],
)
_EN_QUARTERS = _context(
    abbreviated=["Q1", "Q2", "Q3", "Q4"],
    wide=["1st quarter", "2nd quarter", "3rd quarter", "4th quarter"],
    narrow=["1", "2", "3", "4"],
)

_DE_DAYS_WIDE = ["Sonntag", "Montag", "Dienstag", "Mittwoch",
                 "Donnerstag", "Freitag", "Samstag"]
_DE_MONTHS_WIDE = ["Januar", "Februar", "März", "April", "Mai", "Juni",
                   "Juli", "August", "September", "Oktober", "November", "Dezember"]
_DE_QUARTERS = _context(
    abbreviated=["Q1", "Q2", "Q3", "Q4"],
    wide=["1. Quartal", "2. Quartal", "3. Quartal", "4. Quartal"],
    narrow=["1", "2", "3", "4"],
)

_FR_MONTHS = _context(
    abbreviated=["janv.", "févr.", "mars", "avr.", "mai", "juin",
                 "juil.", "août", "sept.", "oct.", "nov.", "déc."],
    wide=["janvier", "février", "mars", "avril", "mai", "juin",
          "juillet", "août", "septembre", "octobre", "novembre", "décembre"],
    narrow=_NARROW_MONTHS,
)
_FR_DAYS = _day_context(
    abbreviated=["dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."],
    wide=["dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"],
    narrow=["D", "L", "M", "M", "J", "V", "S"],
    short=["di", "lu", "ma", "me", "je", "ve", "sa"],
)
_FR_QUARTERS = _context(
    abbreviated=["T1", "T2", "T3", "T4"],
    wide=["1er trimestre", "2e trimestre", "3e trimestre", "4e trimestre"],
    narrow=["1", "2", "3", "4"],
)

_KO_MONTHS = _context(
    abbreviated=[f"{n}월" for n in range(1, 13)],
    wide=[f"{n}월" for n in range(1, 13)],
    narrow=[f"{n}월" for n in range(1, 13)],
)
_KO_DAYS = _day_context(
    abbreviated=["일", "월", "화", "수", "목", "금", "토"],
    wide=["일요일", "월요일", "화요일", "수요일", "목요일", "금요일", "토요일"],
    narrow=["일", "월", "화", "수", "목", "금", "토"],
    short=["일", "월", "화", "수", "목", "금", "토"],
)
_KO_QUARTERS = _context(
    abbreviated=["1분기", "2분기", "3분기", "4분기"],
    wide=["제 1/4분기", "제 2/4분기", "제 3/4분기", "제 4/4분기"],
    narrow=["1", "2", "3", "4"],
)

_MAIN: dict[str, dict[str, Any]] = {
    "en": _locale_tree(
        eras={
            "eraAbbr": ["BC", "AD"],
            "eraNames": ["Before Christ", "Anno Domini"],
            "eraNarrow": ["B", "A"],
        },
        months={"format": _EN_MONTHS, "stand-alone": _EN_MONTHS},
        days={"format": _EN_DAYS, "stand-alone": _EN_DAYS},
        quarters={"format": _EN_QUARTERS, "stand-alone": _EN_QUARTERS},
        am="AM",
        pm="PM",
    ),

    "de": _locale_tree(
        eras={
            "eraAbbr": ["v. Chr.", "n. Chr."],
            "eraNames": ["v. Chr.", "n. Chr."],
            "eraNarrow": ["v. Chr.", "n. Chr."],
        },
        months={
            "format": _context(
                abbreviated=["Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
                             "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez."],
                wide=_DE_MONTHS_WIDE,
                narrow=_NARROW_MONTHS,
            ),
            "stand-alone": _context(
                abbreviated=["Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
                             "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"],
                wide=_DE_MONTHS_WIDE,
                narrow=_NARROW_MONTHS,
            ),
        },
        days={
            "format": _day_context(
                abbreviated=["So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."],
                wide=_DE_DAYS_WIDE,
                narrow=["S", "M", "D", "M", "D", "F", "S"],
                short=["So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."],
            ),
            "stand-alone": _day_context(
                abbreviated=["So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"],
                wide=_DE_DAYS_WIDE,
                narrow=["S", "M", "D", "M", "D", "F", "S"],
                short=["So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."],
            ),
        },
        quarters={"format": _DE_QUARTERS, "stand-alone": _DE_QUARTERS},
        am="AM",
        pm="PM",
    ),

    "fr": _locale_tree(
        eras={
            "eraAbbr": ["av. J.-C.", "ap. J.-C."],
            "eraNames": ["avant Jésus-Christ", "après Jésus-Christ"],
            "eraNarrow": ["av. J.-C.", "ap. J.-C."],
        },
        months={"format": _FR_MONTHS, "stand-alone": _FR_MONTHS},
        days={"format": _FR_DAYS, "stand-alone": _FR_DAYS},
        quarters={"format": _FR_QUARTERS, "stand-alone": _FR_QUARTERS},
        am="AM",
        pm="PM",
        gmt_format="UTC{0}",
        gmt_zero_format="UTC",
        hour_format="+HH:mm;−HH:mm",
    ),

    "ko": _locale_tree(
        eras={
            "eraAbbr": ["BC", "AD"],
            "eraNames": ["기원전", "서기"],
            "eraNarrow": ["BC", "AD"],
        },
        months={"format": _KO_MONTHS, "stand-alone": _KO_MONTHS},
        days={"format": _KO_DAYS, "stand-alone": _KO_DAYS},
        quarters={"format": _KO_QUARTERS, "stand-alone": _KO_QUARTERS},
        am="오전",
        pm="오후",
    ),
}


# ==============================================================================
# Locale Data: supplemental
# ==============================================================================

SUPPLEMENTAL: dict[str, Any] = {
    "weekData": {
        "minDays": {
            "001": "1", "AT": "4", "CH": "4", "DE": "4", "FR": "4",
            "BE": "4", "GB": "4", "IE": "4",
        },
        "firstDay": {
            "001": "mon", "US": "sun", "CA": "sun", "KR": "sun", "JP": "sun",
            "GB": "mon", "DE": "mon", "AT": "mon", "CH": "mon", "FR": "mon",
            "BE": "mon",
        },
    },
    "timeData": {
        "001": {"_allowed": "H h", "_preferred": "H"},
        "US": {"_allowed": "h hb H hB", "_preferred": "h"},
        "CA": {"_allowed": "h hb H hB", "_preferred": "h"},
        "KR": {"_allowed": "h H hB hb", "_preferred": "h"},
        "GB": {"_allowed": "H h hb hB", "_preferred": "H"},
        "DE": {"_allowed": "H hB", "_preferred": "H"},
        "AT": {"_allowed": "H hB", "_preferred": "H"},
        "CH": {"_allowed": "H hB", "_preferred": "H"},
        "FR": {"_allowed": "H hB", "_preferred": "H"},
        "BE": {"_allowed": "H hB", "_preferred": "H"},
    },
}

# Territory assumed when a tag carries none
_LIKELY_TERRITORY: dict[str, str] = {
    "en": "US",
    "de": "DE",
    "fr": "FR",
    "ko": "KR",
}


def get_supported_locales() -> list[str]:
    """Languages with built-in data."""
    return sorted(_MAIN)


def get_locale_data(locale: str | LocaleTag) -> CLDRLocaleData:
    """Get built-in locale data for a tag.

    The language selects the name data; the territory, or the language's most
    likely territory, selects week data and the preferred hour cycle.

    Raises:
        UnknownLocaleError: No built-in data for the language
    """
    if isinstance(locale, str):
        locale = LocaleTag.parse(locale)

    main = _MAIN.get(locale.language)
    if main is None:
        raise UnknownLocaleError(locale.tag, available=get_supported_locales())

    territory = locale.territory or _LIKELY_TERRITORY.get(locale.language)
    logger.debug("Using built-in locale data %s (territory %s)", locale.tag, territory)
    return CLDRLocaleData(locale.tag, main, SUPPLEMENTAL, territory=territory)
