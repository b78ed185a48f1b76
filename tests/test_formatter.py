"""Tests for the pattern formatter and convenience functions."""

from __future__ import annotations

import copy
import threading
from datetime import date, datetime, timedelta, timezone

import pytest

from ldmlformat import (
    DatePatternFormatter,
    FieldNotImplementedError,
    MissingLocaleDataError,
    PatternSyntaxError,
    UnknownLocaleError,
    format_datetime,
    format_instant,
)
from ldmlformat.locale_data import DAY_KEYS, LocaleDataAccessor
from ldmlformat.locales import get_locale_data
from ldmlformat.types import FormStyle, Instant, Width


class TestLiteralPatterns:
    """Patterns without field letters come back unchanged."""

    @pytest.mark.parametrize(
        "pattern",
        ["", "-", " :/.,", "T", "'", "@#!", "年月日", "٫ ١٢", "Tbn 123"],
    )
    def test_unchanged(self, en, instant: Instant, pattern: str):
        assert format_instant(instant, pattern, en) == pattern


class TestCompositePatterns:
    def test_iso_timestamp(self, en, instant: Instant):
        result = format_instant(instant, "yyyy-MM-dd HH:mm:ss.SSSXXX", en)
        assert result == "2023-07-04 13:05:09.567Z"

    def test_full_english(self, en, instant: Instant):
        result = format_instant(instant, "EEEE, MMMM d, y h:mm a", en)
        assert result == "Tuesday, July 4, 2023 1:05 PM"

    def test_german(self, de, instant: Instant):
        assert format_instant(instant, "EEEE, d. MMMM y", de) == "Dienstag, 4. Juli 2023"

    def test_korean(self, instant: Instant):
        result = format_datetime(instant, "y년 MMM d일 EEEE a h:mm", "ko")
        assert result == "2023년 7월 4일 화요일 오후 1:05"

    def test_offsets(self, en):
        value = Instant(2023, 7, 4, 13, 5, utc_offset=-330)
        assert format_instant(value, "HH:mm xxx (OOOO)", en) == "13:05 -05:30 (GMT-05:30)"


class TestQuotingOption:
    def test_quoted_text(self, instant: Instant):
        formatter = DatePatternFormatter(quoting=True)
        result = formatter.format(instant, "d 'de' MMMM 'de' y", get_locale_data("fr"))
        assert result == "4 de juillet de 2023"

    def test_quotes_kept_without_quoting(self, en, instant: Instant):
        assert format_instant(instant, "yyyy'T'HH", en) == "2023'T'13"

    def test_format_datetime_quoting(self, instant: Instant):
        assert format_datetime(instant, "h 'o''clock'", "en", quoting=True) == "1 o'clock"

    def test_unterminated_quote(self, en, instant: Instant):
        with pytest.raises(PatternSyntaxError):
            DatePatternFormatter(quoting=True).format(instant, "HH 'h", en)


class TestInputs:
    def test_accepts_datetime(self, en):
        tz = timezone(timedelta(hours=2))
        value = datetime(2024, 5, 1, 9, 30, tzinfo=tz)
        assert format_instant(value, "yyyy-MM-dd'T'HH:mmXXX", en) == "2024-05-01'T'09:30+02:00"

    def test_accepts_date(self):
        assert format_datetime(date(2024, 3, 1), "MMMM d", "fr") == "mars 1"

    def test_accepts_locale_data(self, de):
        assert format_datetime(date(2024, 3, 1), "LLL", de) == "Mär"

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            format_datetime(date(2024, 3, 1), "MMMM", "xx")


class TestFailures:
    """A failing field aborts the whole call."""

    def test_unsupported_field_anywhere(self, en, instant: Instant):
        for pattern in ("u", "yyyy-MM-dd u", "'literal' UUU tail"):
            with pytest.raises(FieldNotImplementedError):
                format_instant(instant, pattern, en)

    def test_missing_locale_data(self, minimal_data, instant: Instant):
        with pytest.raises(MissingLocaleDataError) as exc_info:
            format_instant(instant, "d MMM", minimal_data)
        assert "months" in exc_info.value.path
        assert exc_info.value.to_dict()["category"] == "locale_data"

    def test_numeric_fields_need_no_names(self, minimal_data, instant: Instant):
        assert format_instant(instant, "dd.MM.yyyy HH:mm", minimal_data) == "04.07.2023 13:05"


class DictLocaleData:
    """Locale data backed by a plain mutable dict keyed by tuples."""

    def __init__(self, entries: dict):
        self.entries = entries

    def _get(self, *key):
        try:
            return self.entries[key]
        except KeyError:
            raise MissingLocaleDataError(key, "test") from None

    def era(self, index: int, width: Width) -> str:
        return self._get("era", index, width)

    def month(self, number: int, form: FormStyle, width: Width) -> str:
        return self._get("month", number, form, width)

    def quarter(self, number: int, form: FormStyle, width: Width) -> str:
        return self._get("quarter", number, form, width)

    def weekday_name(self, key: str, form: FormStyle, width: Width) -> str:
        return self._get("day", key, form, width)

    def day_period(self, key: str) -> str:
        return self._get("period", key)

    def gmt_format(self) -> str:
        return self._get("gmtFormat")

    def gmt_zero_format(self) -> str:
        return self._get("gmtZeroFormat")

    def hour_format(self) -> str:
        return self._get("hourFormat")

    def min_days(self) -> int:
        return self._get("minDays")

    def first_day(self) -> int:
        return DAY_KEYS.index(self._get("firstDay"))

    def preferred_hour_cycle(self) -> str:
        return self._get("preferred")


@pytest.fixture
def dict_data() -> DictLocaleData:
    return DictLocaleData(
        {
            ("era", 1, Width.WIDE): "nach Christus",
            ("month", 7, FormStyle.FORMAT, Width.WIDE): "Juli",
            ("day", "tue", FormStyle.FORMAT, Width.WIDE): "Dienstag",
            ("period", "pm"): "nachm.",
            ("gmtFormat",): "GMT{0}",
            ("gmtZeroFormat",): "GMT",
            ("hourFormat",): "+HH:mm;-HH:mm",
            ("minDays",): 4,
            ("firstDay",): "mon",
            ("preferred",): "H",
        }
    )


class TestCustomAccessor:
    """Any object with the accessor methods can drive the formatter."""

    PATTERN = "EEEE, d. MMMM y GGGG, 'KW' w, a, OOOO"

    def test_satisfies_protocol(self, dict_data):
        assert isinstance(dict_data, LocaleDataAccessor)

    def test_same_output_twice(self, dict_data):
        value = Instant(2023, 7, 4, 13, 5, utc_offset=120)
        snapshot = copy.deepcopy(dict_data.entries)

        formatter = DatePatternFormatter(quoting=True)
        first = formatter.format(value, self.PATTERN, dict_data)
        second = formatter.format(value, self.PATTERN, dict_data)

        assert first == second
        assert first == "Dienstag, 4. Juli 2023 nach Christus, KW 27, nachm., GMT+02:00"
        assert dict_data.entries == snapshot

    def test_missing_entry(self, dict_data):
        with pytest.raises(MissingLocaleDataError) as exc_info:
            format_instant(Instant(2023, 7, 4), "QQQQ", dict_data)
        assert exc_info.value.path.startswith("quarter/3/")


class TestPurity:
    def test_repeated_calls_match(self, en, instant: Instant):
        pattern = "GGGG yyyy QQQQ MMMM w W d D F EEEE a h H K k m s SSS A O XXX"
        first = format_instant(instant, pattern, en)
        assert format_instant(instant, pattern, en) == first

    def test_thread_safety(self, en):
        """One formatter shared across threads gives per-thread results."""
        formatter = DatePatternFormatter()
        errors: list[str] = []

        def worker(day: int) -> None:
            value = Instant(2023, 7, day, 13)
            expected = f"2023-07-{day:02d}"
            for _ in range(50):
                result = formatter.format(value, "yyyy-MM-dd", en)
                if result != expected:
                    errors.append(result)

        threads = [threading.Thread(target=worker, args=(day,)) for day in range(1, 29)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
