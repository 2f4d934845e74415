from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..core.types import CalendarSystem


@dataclass(frozen=True)
class CalendarSpec:
    """Static facts about one calendar system."""
    system: CalendarSystem
    icu_name: str            # value of the ICU "@calendar=" keyword
    extended_year: bool      # read/write ICU EXTENDED_YEAR instead of YEAR
    max_month: int           # 12, or 13 where an epagomenal/leap month exists
    requires_icu: bool       # no arithmetic implementation
    leap_months: bool = False  # (year, month, day) is ambiguous without a leap flag
    proleptic: bool = False    # Gregorian rules before 1582-10-15 (no Julian cutover)


# ============================================================
# CALENDAR TABLE
# ============================================================

GREGORIAN = CalendarSpec(
    CalendarSystem.GREGORIAN, "gregorian", extended_year=False, max_month=12, requires_icu=False, proleptic=True
)
JALALI = CalendarSpec(CalendarSystem.JALALI, "persian", extended_year=False, max_month=12, requires_icu=False)
# ICU's islamic-civil shares its epoch (JDN 1948440) and leap rule with the arithmetic provider.
HIJRI = CalendarSpec(CalendarSystem.HIJRI, "islamic-civil", extended_year=False, max_month=12, requires_icu=False)
# ICU numbers Hebrew months 1..13 in every year; month 6 (Adar I) only exists in leap years.
HEBREW = CalendarSpec(CalendarSystem.HEBREW, "hebrew", extended_year=False, max_month=13, requires_icu=True)
BUDDHIST = CalendarSpec(
    CalendarSystem.BUDDHIST, "buddhist", extended_year=False, max_month=12, requires_icu=False, proleptic=True
)
COPTIC = CalendarSpec(CalendarSystem.COPTIC, "coptic", extended_year=False, max_month=13, requires_icu=False)
ETHIOPIAN = CalendarSpec(CalendarSystem.ETHIOPIAN, "ethiopic", extended_year=False, max_month=13, requires_icu=False)
CHINESE = CalendarSpec(
    CalendarSystem.CHINESE, "chinese", extended_year=True, max_month=12, requires_icu=True, leap_months=True
)

ALL_SPECS: Dict[CalendarSystem, CalendarSpec] = {
    s.system: s for s in (GREGORIAN, JALALI, HIJRI, HEBREW, BUDDHIST, COPTIC, ETHIOPIAN, CHINESE)
}


def spec_for(system: CalendarSystem) -> CalendarSpec:
    return ALL_SPECS[system]
