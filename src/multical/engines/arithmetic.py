"""
multical.engines.arithmetic
---------------------------
Pure integer calendar provider. Every calendar is reduced to a Julian Day
Number (JDN), and the JDN to the UTC-midnight instant.

Covers the calendars with exact arithmetic rules:
  gregorian, jalali (closed form), buddhist (Gregorian + 543),
  coptic and ethiopian (Amete Mihret; 12 x 30 days + 5/6 epagomenal days),
  hijri (tabular civil calendar, 11 leap years per 30).
Hebrew and Chinese are left to ICU.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from ..calendars.jalali import gregorian_to_jalali, jalali_to_gregorian
from ..core.errors import ConversionError
from ..core.time import from_jdn, instant_to_jdn, jdn_to_instant, to_jdn
from ..core.types import AbsoluteInstant, CalendarFields, CalendarSystem
from .specs import spec_for

BUDDHIST_ERA_OFFSET = 543

# JDN of day 1 of month 1 of year 1.
COPTIC_EPOCH_JDN = 1825030     # 284-08-29 (Julian)
ETHIOPIC_EPOCH_JDN = 1724221   # 8-08-29 (Julian), Amete Mihret
HIJRI_CIVIL_EPOCH_JDN = 1948440  # 622-07-16 (Julian), civil/Friday epoch

YMD = Tuple[int, int, int]


# ============================================================
# Per-calendar JDN rules
# ============================================================

def _alexandrian_to_jdn(epoch: int, y: int, m: int, d: int) -> int:
    return epoch - 1 + 365 * (y - 1) + y // 4 + 30 * (m - 1) + d

def _alexandrian_from_jdn(epoch: int, jdn: int) -> YMD:
    y = (4 * (jdn - epoch) + 1463) // 1461
    m = (jdn - _alexandrian_to_jdn(epoch, y, 1, 1)) // 30 + 1
    d = jdn + 1 - _alexandrian_to_jdn(epoch, y, m, 1)
    return y, m, d

def hijri_to_jdn(y: int, m: int, d: int) -> int:
    # ceil(29.5 * (m - 1)) days before the month
    return d + (59 * (m - 1) + 1) // 2 + (y - 1) * 354 + (3 + 11 * y) // 30 + HIJRI_CIVIL_EPOCH_JDN - 1

def hijri_from_jdn(jdn: int) -> YMD:
    y = (30 * (jdn - HIJRI_CIVIL_EPOCH_JDN) + 10646) // 10631
    elapsed = jdn - hijri_to_jdn(y, 1, 1)
    # ceil(elapsed / 29.5) + 1, kept in integers
    m = min(12, -((-2 * (elapsed - 29)) // 59) + 1)
    m = max(1, m)
    d = jdn - hijri_to_jdn(y, m, 1) + 1
    return y, m, d

def _jalali_to_jdn(y: int, m: int, d: int) -> int:
    return to_jdn(*jalali_to_gregorian(y, m, d))

def _jalali_from_jdn(jdn: int) -> YMD:
    return tuple(gregorian_to_jalali(*from_jdn(jdn)))  # type: ignore[return-value]

def _buddhist_to_jdn(y: int, m: int, d: int) -> int:
    return to_jdn(y - BUDDHIST_ERA_OFFSET, m, d)

def _buddhist_from_jdn(jdn: int) -> YMD:
    y, m, d = from_jdn(jdn)
    return y + BUDDHIST_ERA_OFFSET, m, d


_RULES: Dict[CalendarSystem, Tuple[Callable[[int, int, int], int], Callable[[int], YMD]]] = {
    CalendarSystem.GREGORIAN: (to_jdn, from_jdn),
    CalendarSystem.JALALI: (_jalali_to_jdn, _jalali_from_jdn),
    CalendarSystem.BUDDHIST: (_buddhist_to_jdn, _buddhist_from_jdn),
    CalendarSystem.COPTIC: (
        lambda y, m, d: _alexandrian_to_jdn(COPTIC_EPOCH_JDN, y, m, d),
        lambda j: _alexandrian_from_jdn(COPTIC_EPOCH_JDN, j),
    ),
    CalendarSystem.ETHIOPIAN: (
        lambda y, m, d: _alexandrian_to_jdn(ETHIOPIC_EPOCH_JDN, y, m, d),
        lambda j: _alexandrian_from_jdn(ETHIOPIC_EPOCH_JDN, j),
    ),
    CalendarSystem.HIJRI: (hijri_to_jdn, hijri_from_jdn),
}


class ArithmeticProvider:
    """
    Fully implements CalendarProvider for the calendars in _RULES.
    `hijri_variant` other than "islamic-civil" disables Hijri here so that
    an ICU provider further down the chain serves it.
    """
    def __init__(self, hijri_variant: str = "islamic-civil"):
        self.hijri_variant = hijri_variant

    @property
    def name(self) -> str:
        return "arithmetic"

    def supports(self, system: CalendarSystem) -> bool:
        if system is CalendarSystem.HIJRI:
            return self.hijri_variant == "islamic-civil"
        return system in _RULES

    def _rules(self, system: CalendarSystem):
        if not self.supports(system):
            raise ConversionError(f"Provider 'arithmetic' does not implement calendar '{system.value}'")
        return _RULES[system]

    def to_instant(
        self,
        system: CalendarSystem,
        year: int,
        month: int,
        day: int,
        *,
        is_leap_month: bool = False,
    ) -> AbsoluteInstant:
        encode, _ = self._rules(system)
        max_month = spec_for(system).max_month
        if not 1 <= month <= max_month:
            raise ConversionError(f"{system.value}: month {month} outside 1..{max_month}")
        length = self.month_length(system, year, month)
        if not 1 <= day <= length:
            raise ConversionError(f"{system.value}: day {day} outside 1..{length} for {year}-{month}")
        return jdn_to_instant(encode(year, month, day))

    def month_length(self, system: CalendarSystem, year: int, month: int) -> int:
        """Days in (year, month): distance to the first day of the next month."""
        encode, _ = self._rules(system)
        if month < spec_for(system).max_month:
            nxt = encode(year, month + 1, 1)
        else:
            nxt = encode(year + 1, 1, 1)
        return nxt - encode(year, month, 1)

    def read(self, system: CalendarSystem, instant: AbsoluteInstant) -> CalendarFields:
        _, decode = self._rules(system)
        y, m, d = decode(instant_to_jdn(instant))
        return CalendarFields(y, m, d)
