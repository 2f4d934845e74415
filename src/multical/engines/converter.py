"""
multical.engines.converter
--------------------------
The Orchestrator. Resolves calendar keys, picks a provider per calendar and
moves civil dates through the UTC-midnight instant pivot. Owns the Chinese
leap-month cache.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional, Union

from multical.calendars import jalali
from multical.calendars.keys import normalize
from multical.core.config import EngineConfig
from multical.core.engine import ProviderRegistry
from multical.core.types import (
    AbsoluteInstant,
    CalendarDate,
    CalendarFields,
    CalendarKey,
    CalendarSystem,
    format_or_tuple,
)
from multical.engines.chinese import LeapCandidate, LeapMonthCache, leap_key, resolve_leap_candidates
from multical.engines.factory import CalendarConverter

logger = logging.getLogger(__name__)

G = CalendarSystem.GREGORIAN
CN = CalendarSystem.CHINESE

DateOrStr = Union[CalendarDate, str]


class DateConverter:
    """
    Converts civil dates between calendar systems.
    Every generic conversion goes: source fields -> instant (ms, UTC midnight) -> target fields.
    """
    def __init__(
        self,
        providers: ProviderRegistry,
        *,
        leap_cache: Optional[LeapMonthCache] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or EngineConfig()
        self.providers = providers
        self.leap_cache = leap_cache if leap_cache is not None else LeapMonthCache(self.config.leap_cache_size)
        self._converters: Dict[CalendarSystem, CalendarConverter] = {}

    # ---------------------------------------------------------
    # Pivot
    # ---------------------------------------------------------

    def to_instant(
        self,
        calendar: CalendarKey,
        year: int,
        month: int,
        day: int,
        *,
        is_leap_month: Optional[bool] = None,
    ) -> AbsoluteInstant:
        """
        Encodes a civil date as its UTC-midnight instant.
        For Chinese dates, is_leap_month=None runs the leap-month disambiguation.
        """
        system = normalize(calendar)
        if system is CN:
            return self._chinese_instant(year, month, day, is_leap_month)
        return self.providers.for_calendar(system).to_instant(system, year, month, day)

    def from_instant(self, calendar: CalendarKey, instant: AbsoluteInstant) -> CalendarFields:
        """
        Decodes an instant in the given calendar.
        Chinese reads record their leap flag in the leap cache.
        """
        system = normalize(calendar)
        fields = self.providers.for_calendar(system).read(system, instant)
        if system is CN:
            self.leap_cache.put(leap_key(*fields.date), fields.is_leap_month)
        return fields

    def convert(
        self,
        from_calendar: CalendarKey,
        year: int,
        month: int,
        day: int,
        to_calendar: CalendarKey,
        sep: str = "",
    ) -> DateOrStr:
        source = normalize(from_calendar)
        target = normalize(to_calendar)
        # Fail on a missing provider before doing any work.
        self.providers.for_calendar(source)
        self.providers.for_calendar(target)

        instant = self.to_instant(source, year, month, day)
        fields = self.from_instant(target, instant)
        logger.debug(
            "convert %s %d-%d-%d -> %s %s (instant=%d)",
            source.value, year, month, day, target.value, fields.date, instant,
        )
        return format_or_tuple(fields.date, sep)

    # ---------------------------------------------------------
    # Chinese leap months
    # ---------------------------------------------------------

    def _candidate(self, year: int, month: int, day: int, is_leap_month: bool) -> LeapCandidate:
        instant = self.providers.for_calendar(CN).to_instant(CN, year, month, day, is_leap_month=is_leap_month)
        gregorian = self.providers.for_calendar(G).read(G, instant).date
        return LeapCandidate(is_leap_month=is_leap_month, instant=instant, gregorian=gregorian)

    def _probe(self, candidate: LeapCandidate) -> bool:
        # Probes must not touch the leap cache.
        return self.providers.for_calendar(CN).read(CN, candidate.instant).is_leap_month

    def _chinese_instant(self, year: int, month: int, day: int, is_leap_month: Optional[bool]) -> AbsoluteInstant:
        provider = self.providers.for_calendar(CN)
        if is_leap_month is not None:
            return provider.to_instant(CN, year, month, day, is_leap_month=is_leap_month)

        regular = self._candidate(year, month, day, False)
        leap = self._candidate(year, month, day, True)
        key = leap_key(year, month, day)
        memo = self.leap_cache.get(key)
        logger.debug("leap cache %s for %s", "hit" if memo is not None else "miss", key)

        winner, rule = resolve_leap_candidates(regular, leap, memo=memo, probe=self._probe)
        logger.debug(
            "chinese %s: regular=%s leap=%s -> %s (rule=%s)",
            key, regular.gregorian, leap.gregorian, winner.gregorian, rule,
        )
        return winner.instant

    def gregorian_to_chinese(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(G, y, m, d, CN, sep)

    def chinese_to_gregorian(
        self, y: int, m: int, d: int, sep: str = "", *, is_leap_month: Optional[bool] = None
    ) -> DateOrStr:
        instant = self._chinese_instant(y, m, d, is_leap_month)
        return format_or_tuple(self.from_instant(G, instant).date, sep)

    def clear_leap_cache(self) -> None:
        self.leap_cache.clear()

    # ---------------------------------------------------------
    # Closed-form Jalali (provider independent)
    # ---------------------------------------------------------

    def gregorian_to_jalali(self, gy: int, gm: int, gd: int, sep: str = "") -> DateOrStr:
        return jalali.gregorian_to_jalali(gy, gm, gd, sep)

    def jalali_to_gregorian(self, jy: int, jm: int, jd: int, sep: str = "") -> DateOrStr:
        return jalali.jalali_to_gregorian(jy, jm, jd, sep)

    # ---------------------------------------------------------
    # Provider-backed shorthands
    # ---------------------------------------------------------

    def gregorian_to_hijri(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(G, y, m, d, CalendarSystem.HIJRI, sep)

    def hijri_to_gregorian(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(CalendarSystem.HIJRI, y, m, d, G, sep)

    def gregorian_to_hebrew(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(G, y, m, d, CalendarSystem.HEBREW, sep)

    def hebrew_to_gregorian(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(CalendarSystem.HEBREW, y, m, d, G, sep)

    def gregorian_to_buddhist(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(G, y, m, d, CalendarSystem.BUDDHIST, sep)

    def buddhist_to_gregorian(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(CalendarSystem.BUDDHIST, y, m, d, G, sep)

    def gregorian_to_coptic(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(G, y, m, d, CalendarSystem.COPTIC, sep)

    def coptic_to_gregorian(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(CalendarSystem.COPTIC, y, m, d, G, sep)

    def gregorian_to_ethiopian(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(G, y, m, d, CalendarSystem.ETHIOPIAN, sep)

    def ethiopian_to_gregorian(self, y: int, m: int, d: int, sep: str = "") -> DateOrStr:
        return self.convert(CalendarSystem.ETHIOPIAN, y, m, d, G, sep)

    # ---------------------------------------------------------
    # Per-calendar converters / introspection
    # ---------------------------------------------------------

    def converter(self, calendar: CalendarKey) -> CalendarConverter:
        system = normalize(calendar)
        if system not in self._converters:
            self._converters[system] = CalendarConverter(system, self)
        return self._converters[system]

    def info(self) -> Dict[str, Any]:
        return {
            "providers": self.providers.list(),
            "coverage": {s.value: p for s, p in self.providers.coverage().items()},
            "config": asdict(self.config),
            "leap_cache_entries": len(self.leap_cache),
        }
