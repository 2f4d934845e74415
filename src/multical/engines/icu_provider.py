"""
multical.engines.icu_provider
-----------------------------
Calendar provider backed by ICU through PyICU (optional).
Install with:
  pip install "multical[icu]"

ICU speaks 0-based months and UDate instants; PyICU exposes UDate as float
seconds since the epoch. This module translates both at its edge so the rest
of the engine only sees 1-based months and integer milliseconds.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..core.errors import ConversionError, MissingCapability
from ..core.types import AbsoluteInstant, CalendarFields, CalendarSystem
from .specs import ALL_SPECS, spec_for

logger = logging.getLogger(__name__)

# ICU's earliest representable date (MIN_MILLIS), as PyICU float seconds.
# Used as the Julian/Gregorian cutover to get a proleptic Gregorian calendar.
ICU_MIN_UDATE = -184303902528000.0


def require_icu():
    """Return the `icu` module or raise a clear error if PyICU isn't installed."""
    try:
        import icu  # noqa: F401
    except ImportError as e:
        raise MissingCapability('ICU calendars require PyICU: pip install "multical[icu]"') from e
    return icu


def icu_available() -> bool:
    try:
        require_icu()
    except MissingCapability:
        return False
    return True


class IcuProvider:
    """CalendarProvider for every calendar in ALL_SPECS, via ICU's calendar service."""

    def __init__(self, locale: str = "en_US", hijri_variant: str = "islamic-civil"):
        self._icu = require_icu()
        self.locale = locale
        self._names: Dict[CalendarSystem, str] = {s: spec.icu_name for s, spec in ALL_SPECS.items()}
        self._names[CalendarSystem.HIJRI] = hijri_variant
        self._utc = self._icu.TimeZone.getGMT()

    @property
    def name(self) -> str:
        return "icu"

    def supports(self, system: CalendarSystem) -> bool:
        return system in self._names

    def icu_name(self, system: CalendarSystem) -> str:
        return self._names[system]

    def _calendar(self, system: CalendarSystem):
        # ICU calendars are not thread-safe; build one per call.
        loc = self._icu.Locale(f"{self.locale}@calendar={self._names[system]}")
        cal = self._icu.Calendar.createInstance(self._utc, loc)
        if spec_for(system).proleptic:
            if not isinstance(cal, self._icu.GregorianCalendar):
                raise ConversionError(f"ICU returned a non-Gregorian calendar for {system.value}")
            cal.setGregorianChange(ICU_MIN_UDATE)
        return cal

    def to_instant(
        self,
        system: CalendarSystem,
        year: int,
        month: int,
        day: int,
        *,
        is_leap_month: bool = False,
    ) -> AbsoluteInstant:
        spec = spec_for(system)
        F = self._icu.UCalendarDateFields
        try:
            cal = self._calendar(system)
            cal.clear()
            cal.set(F.EXTENDED_YEAR if spec.extended_year else F.YEAR, year)
            cal.set(F.MONTH, month - 1)
            cal.set(F.DAY_OF_MONTH, day)
            if spec.leap_months:
                cal.set(F.IS_LEAP_MONTH, 1 if is_leap_month else 0)
            cal.set(F.HOUR_OF_DAY, 0)
            cal.set(F.MINUTE, 0)
            cal.set(F.SECOND, 0)
            cal.set(F.MILLISECOND, 0)
            return int(round(cal.getTime() * 1000))
        except self._icu.ICUError as e:
            raise ConversionError(f"ICU rejected {system.value} date {year}-{month}-{day}: {e}") from e

    def read(self, system: CalendarSystem, instant: AbsoluteInstant) -> CalendarFields:
        spec = spec_for(system)
        F = self._icu.UCalendarDateFields
        try:
            cal = self._calendar(system)
            cal.setTime(instant / 1000.0)
            year = cal.get(F.EXTENDED_YEAR if spec.extended_year else F.YEAR)
            month = cal.get(F.MONTH) + 1
            day = cal.get(F.DAY_OF_MONTH)
            leap = bool(cal.get(F.IS_LEAP_MONTH)) if spec.leap_months else False
        except self._icu.ICUError as e:
            raise ConversionError(f"ICU could not read {system.value} fields at {instant} ms: {e}") from e
        return CalendarFields(year, month, day, is_leap_month=leap)


def build_icu_provider(locale: str = "en_US", hijri_variant: str = "islamic-civil") -> Optional[IcuProvider]:
    """IcuProvider when PyICU is importable, else None."""
    if not icu_available():
        logger.debug("PyICU not importable; ICU calendars unavailable")
        return None
    return IcuProvider(locale=locale, hijri_variant=hijri_variant)
