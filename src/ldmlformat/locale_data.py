"""Locale data access for the date formatter.

The formatter depends on a narrow, read-only capability set described by
:class:`LocaleDataAccessor`: one method per semantic category (eras,
months, quarters, weekdays, day periods, time zone templates, week data,
hour cycle). :class:`CLDRLocaleData` implements it over the CLDR JSON tree
layout published in the ``cldr-json`` packages:

    main:
      dates/calendars/gregorian/{eras,months,days,quarters,dayPeriods}
      dates/timeZoneNames/{gmtFormat,gmtZeroFormat,hourFormat}
    supplemental:
      weekData/{firstDay,minDays}/<territory>
      timeData/<territory>/_preferred

Usage:
    from ldmlformat.locale_data import CLDRLocaleData

    data = CLDRLocaleData.from_json_files(
        "de",
        ["main/de/ca-gregorian.json", "main/de/timeZoneNames.json",
         "supplemental/weekData.json", "supplemental/timeData.json"],
    )
    data.month(3, FormStyle.FORMAT, Width.WIDE)  # "März"
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol, Sequence, runtime_checkable

from ldmlformat.errors import LocaleDataLoadError, MissingLocaleDataError
from ldmlformat.types import FormStyle, Width

logger = logging.getLogger(__name__)

WORLD_TERRITORY = "001"

DAY_KEYS: tuple[str, ...] = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

_ERA_KEYS: dict[Width, str] = {
    Width.ABBREVIATED: "eraAbbr",
    Width.WIDE: "eraNames",
    Width.NARROW: "eraNarrow",
}


# ==============================================================================
# Locale tags
# ==============================================================================

@dataclass(frozen=True)
class LocaleTag:
    """Language and territory of a locale tag.

    The language selects name data; the territory selects week data and the
    preferred hour cycle from the supplemental tables.
    """
    language: str
    territory: str | None = None

    @property
    def tag(self) -> str:
        return f"{self.language}-{self.territory}" if self.territory else self.language

    @classmethod
    def parse(cls, tag: str) -> "LocaleTag":
        """Split "de-AT" or "zh_Hant_TW" into language and territory.

        Script, variant and extension subtags carry no date data and are dropped.
        """
        language, *subtags = tag.replace("_", "-").split("-")
        territory = next(
            (
                part.upper()
                for part in subtags
                if (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())
            ),
            None,
        )
        return cls(language.lower(), territory)


# ==============================================================================
# Accessor protocol
# ==============================================================================

@runtime_checkable
class LocaleDataAccessor(Protocol):
    """Read-only locale data consumed by the formatter.

    Every lookup raises :class:`MissingLocaleDataError` when the entry is
    absent.
    """

    def era(self, index: int, width: Width) -> str:
        """Era name, index 0 = BC and 1 = AD."""
        ...

    def month(self, number: int, form: FormStyle, width: Width) -> str:
        """Month name for month ``number`` (1-12)."""
        ...

    def quarter(self, number: int, form: FormStyle, width: Width) -> str:
        """Quarter name for quarter ``number`` (1-4)."""
        ...

    def weekday_name(self, key: str, form: FormStyle, width: Width) -> str:
        """Day name for ``key`` in ``sun``..``sat``."""
        ...

    def day_period(self, key: str) -> str:
        """Wide format-context day period for ``am`` or ``pm``."""
        ...

    def gmt_format(self) -> str:
        """GMT format template with a ``{0}`` placeholder, e.g. "GMT{0}"."""
        ...

    def gmt_zero_format(self) -> str:
        ...

    def hour_format(self) -> str:
        """Hour format template, e.g. "+HH:mm;-HH:mm"."""
        ...

    def min_days(self) -> int:
        """Minimum days in the first week of the year."""
        ...

    def first_day(self) -> int:
        """First day of the week, 0 = Sunday ... 6 = Saturday."""
        ...

    def preferred_hour_cycle(self) -> str:
        """Preferred hour pattern letter (one of h, H, K, k)."""
        ...


# ==============================================================================
# CLDR JSON implementation
# ==============================================================================

def _merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _merge(target[key], value)
        else:
            target[key] = value


class CLDRLocaleData:
    """Locale data backed by CLDR JSON trees.

    Args:
        locale: Locale tag the data belongs to
        main: The per-locale tree (the object found at ``main/<locale>``)
        supplemental: The supplemental tree (``weekData``, ``timeData``)
        territory: Territory for supplemental lookups; defaults to the
            region of ``locale``, then the world region ``001``
    """

    def __init__(
        self,
        locale: str,
        main: Mapping[str, Any],
        supplemental: Mapping[str, Any] | None = None,
        territory: str | None = None,
    ) -> None:
        self.locale = locale
        self._main = main
        self._supplemental = supplemental or {}
        self.territory = territory or LocaleTag.parse(locale).territory or WORLD_TERRITORY

    def __repr__(self) -> str:
        return f"CLDRLocaleData(locale={self.locale!r}, territory={self.territory!r})"

    # ------------------------------------------------------------------
    # Raw path lookups
    # ------------------------------------------------------------------

    @staticmethod
    def _split(path: Sequence[str | int]) -> list[str]:
        segments: list[str] = []
        for part in path:
            segments.extend(segment for segment in str(part).split("/") if segment)
        return segments

    def _lookup(self, root: Mapping[str, Any], path: Sequence[str | int]) -> Any:
        node: Any = root
        for segment in self._split(path):
            if not isinstance(node, Mapping) or segment not in node:
                raise MissingLocaleDataError(self._split(path), self.locale)
            node = node[segment]
        return node

    def main(self, *path: str | int) -> Any:
        """Look up a path in the per-locale tree.

        Segments may contain ``/`` separators: ``main("dates/timeZoneNames",
        "gmtFormat")`` and ``main("dates", "timeZoneNames", "gmtFormat")``
        are equivalent.
        """
        return self._lookup(self._main, path)

    def supplemental(self, *path: str | int) -> Any:
        """Look up a path in the supplemental tree."""
        return self._lookup(self._supplemental, path)

    def _territory_value(self, *path: str) -> Any:
        table = self.supplemental(*path)
        if isinstance(table, Mapping):
            if self.territory in table:
                return table[self.territory]
            if WORLD_TERRITORY in table:
                return table[WORLD_TERRITORY]
        raise MissingLocaleDataError([*self._split(path), self.territory], self.locale)

    # ------------------------------------------------------------------
    # LocaleDataAccessor
    # ------------------------------------------------------------------

    def era(self, index: int, width: Width) -> str:
        key = _ERA_KEYS.get(width, "eraAbbr")
        return self.main("dates/calendars/gregorian/eras", key, index)

    def month(self, number: int, form: FormStyle, width: Width) -> str:
        return self.main(
            "dates/calendars/gregorian/months", form.value, width.value, number
        )

    def quarter(self, number: int, form: FormStyle, width: Width) -> str:
        return self.main(
            "dates/calendars/gregorian/quarters", form.value, width.value, number
        )

    def weekday_name(self, key: str, form: FormStyle, width: Width) -> str:
        return self.main("dates/calendars/gregorian/days", form.value, width.value, key)

    def day_period(self, key: str) -> str:
        return self.main("dates/calendars/gregorian/dayPeriods/format/wide", key)

    def gmt_format(self) -> str:
        return self.main("dates/timeZoneNames/gmtFormat")

    def gmt_zero_format(self) -> str:
        return self.main("dates/timeZoneNames/gmtZeroFormat")

    def hour_format(self) -> str:
        return self.main("dates/timeZoneNames/hourFormat")

    def min_days(self) -> int:
        return int(self._territory_value("weekData", "minDays"))

    def first_day(self) -> int:
        value = self._territory_value("weekData", "firstDay")
        return DAY_KEYS.index(value)

    def preferred_hour_cycle(self) -> str:
        time_data = self.supplemental("timeData")
        entry = time_data.get(self.territory) or time_data.get(WORLD_TERRITORY)
        if not entry or "_preferred" not in entry:
            raise MissingLocaleDataError(
                ["timeData", self.territory, "_preferred"], self.locale
            )
        return entry["_preferred"]

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_documents(
        cls,
        locale: str,
        documents: Iterable[Mapping[str, Any]],
        territory: str | None = None,
    ) -> "CLDRLocaleData":
        """Merge cldr-json documents into one accessor.

        Documents shaped ``{"main": {<locale>: {...}}}`` feed the per-locale
        tree and ``{"supplemental": {...}}`` feed the supplemental tree.
        """
        main: dict[str, Any] = {}
        supplemental: dict[str, Any] = {}

        for document in documents:
            locales = document.get("main", {})
            if locale in locales:
                _merge(main, locales[locale])
            elif locales:
                logger.debug(
                    "Skipping main data for %s while loading %s",
                    ", ".join(locales), locale,
                )
            _merge(supplemental, document.get("supplemental", {}))

        return cls(locale, main, supplemental, territory=territory)

    @classmethod
    def from_json_files(
        cls,
        locale: str,
        paths: Iterable[Path | str],
        territory: str | None = None,
        encoding: str = "utf-8",
    ) -> "CLDRLocaleData":
        """Load and merge cldr-json files.

        Raises:
            LocaleDataLoadError: A file is missing or is not valid JSON
        """
        documents = []
        for path in paths:
            path = Path(path)
            try:
                with open(path, "r", encoding=encoding) as f:
                    documents.append(json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                raise LocaleDataLoadError(
                    f"Failed to load locale data from {path}: {e}", path=str(path)
                ) from e
            logger.debug("Loaded locale data from %s", path)

        return cls.from_documents(locale, documents, territory=territory)

    @classmethod
    def from_directory(
        cls,
        base_path: Path | str,
        locale: str,
        territory: str | None = None,
    ) -> "CLDRLocaleData":
        """Load every JSON file under ``main/<locale>/`` and ``supplemental/``.

        The directory layout mirrors the cldr-json packages:
        base_path/
          main/
            de/
              ca-gregorian.json
              timeZoneNames.json
          supplemental/
            weekData.json
            timeData.json
        """
        base_path = Path(base_path)
        locale_dir = base_path / "main" / locale
        if not locale_dir.is_dir():
            raise LocaleDataLoadError(
                f"No locale directory at {locale_dir}", path=str(locale_dir)
            )
        paths = sorted(locale_dir.glob("*.json"))
        supplemental_dir = base_path / "supplemental"
        if supplemental_dir.is_dir():
            paths.extend(sorted(supplemental_dir.glob("*.json")))
        return cls.from_json_files(locale, paths, territory=territory)
