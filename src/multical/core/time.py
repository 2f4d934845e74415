from __future__ import annotations
from typing import Tuple

from .types import AbsoluteInstant

MS_PER_DAY = 86_400_000
JDN_UNIX_EPOCH = 2440588  # JDN of 1970-01-01


def is_gregorian_leap(y: int) -> bool:
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


def to_jdn(y: int, m: int, day: int) -> int:
    """Convert a proleptic Gregorian date to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def jdn_to_instant(jdn: int) -> AbsoluteInstant:
    """UTC midnight of the civil day `jdn`, in ms since the Unix epoch."""
    return (jdn - JDN_UNIX_EPOCH) * MS_PER_DAY

def instant_to_jdn(instant: AbsoluteInstant) -> int:
    # floor: anything within the UTC day maps back to it
    return instant // MS_PER_DAY + JDN_UNIX_EPOCH
