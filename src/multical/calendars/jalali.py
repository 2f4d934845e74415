"""
multical.calendars.jalali
-------------------------
Closed-form Jalali (Solar Hijri) <-> Gregorian conversion.

Pure integer arithmetic over day counts: no provider, no tables beyond the
Gregorian cumulative month table. Usable as a reference when ICU is absent.

Cycle constants:
  12053 days = 33 Jalali years (8 leap years per cycle)
  146097 days = 400 Gregorian years, 36524 = 100 years, 1461 = 4 years

Inputs are not validated; out-of-range fields give defined but meaningless results.
"""

from __future__ import annotations

from typing import Tuple, Union

from ..core.time import is_gregorian_leap
from ..core.types import CalendarDate, format_or_tuple

# Days before each Gregorian month in a common year.
G_DAYS_BEFORE_MONTH: Tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

JALALI_CYCLE_DAYS = 12053  # 33 years
FOUR_YEAR_DAYS = 1461
GREGORIAN_400Y_DAYS = 146097
GREGORIAN_100Y_DAYS = 36524

# Day-of-year at which the 30-day months begin (6 * 31).
FIRST_HALF_DAYS = 186


def gregorian_to_jalali(gy: int, gm: int, gd: int, sep: str = "") -> Union[CalendarDate, str]:
    gy2 = gy + 1 if gm > 2 else gy
    days = (
        355666
        + 365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + gd
        + G_DAYS_BEFORE_MONTH[gm - 1]
    )

    jy = -1595 + 33 * (days // JALALI_CYCLE_DAYS)
    days %= JALALI_CYCLE_DAYS
    jy += 4 * (days // FOUR_YEAR_DAYS)
    days %= FOUR_YEAR_DAYS

    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < FIRST_HALF_DAYS:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        jm = 7 + (days - FIRST_HALF_DAYS) // 30
        jd = 1 + (days - FIRST_HALF_DAYS) % 30

    return format_or_tuple(CalendarDate(jy, jm, jd), sep)


def jalali_to_gregorian(jy: int, jm: int, jd: int, sep: str = "") -> Union[CalendarDate, str]:
    jy += 1595
    days = -355668 + 365 * jy + (jy // 33) * 8 + ((jy % 33) + 3) // 4 + jd
    days += (jm - 1) * 31 if jm < 7 else (jm - 7) * 30 + FIRST_HALF_DAYS

    gy = 400 * (days // GREGORIAN_400Y_DAYS)
    days %= GREGORIAN_400Y_DAYS

    if days > GREGORIAN_100Y_DAYS:
        days -= 1
        gy += 100 * (days // GREGORIAN_100Y_DAYS)
        days %= GREGORIAN_100Y_DAYS
        # century years are not leap: restore the day taken above
        if days >= 365:
            days += 1

    gy += 4 * (days // FOUR_YEAR_DAYS)
    days %= FOUR_YEAR_DAYS

    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    gd = days + 1
    months = (31, 29 if is_gregorian_leap(gy) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

    gm = 1
    while gm <= 12 and gd > months[gm - 1]:
        gd -= months[gm - 1]
        gm += 1

    return format_or_tuple(CalendarDate(gy, gm, gd), sep)


def is_jalali_leap(jy: int) -> bool:
    """Leap rule implied by the day count above: 8 leap years per 33-year cycle."""
    r = (jy + 1595) % 33
    return r % 4 == 0 and r != 32


def jalali_month_length(jy: int, jm: int) -> int:
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_jalali_leap(jy) else 29
