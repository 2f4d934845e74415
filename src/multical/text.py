"""
multical.text
-------------
Reading and rendering human date strings in any calendar.

Input side (calendar-first): "Y-M-D", "Y/M/D" or "Y.M.D", optionally followed
by a time, in Latin, Persian or Arabic-Indic digits. Output side: a stored
Gregorian value rendered in the target calendar with a chosen separator and
digit alphabet. Time parts are carried through untouched; no timezone logic.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .calendars.jalali import jalali_month_length
from .calendars.keys import normalize
from .core.errors import DateParseError
from .core.time import is_gregorian_leap
from .core.types import CalendarDate, CalendarKey, CalendarSystem
from .digits import to_latin, translate

if TYPE_CHECKING:
    from .engines.converter import DateConverter

DATE_SEPARATORS = ("-", "/", ".")
MODES = ("date", "datetime")

_DATE_RE = re.compile(r"(\d+)[/\-.](\d+)[/\-.](\d+)", re.ASCII)
_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})(?::(\d{2}))?", re.ASCII)
_ZERO_DATE = "0000-00-00"


def _engine(engine: Optional["DateConverter"]) -> "DateConverter":
    if engine is not None:
        return engine
    from .api import get_engine
    return get_engine()


def _check_mode(mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {mode!r}")


def split_datetime(text: str) -> Tuple[str, Optional[str]]:
    """'1404/05/22 10:30' -> ('1404/05/22', '10:30'). Time is None when absent."""
    parts = text.strip().split(None, 1)
    if not parts:
        return "", None
    return parts[0], (parts[1].strip() if len(parts) > 1 else None)


def parse_date(text: str) -> CalendarDate:
    """Read 'Y-M-D' (any of - / . as separators, any supported digits). Basic range checks only."""
    raw = to_latin(text.strip())
    m = _DATE_RE.fullmatch(raw)
    if m is None:
        raise DateParseError(f"Not a Y-M-D date: {text!r}")
    y, mo, d = (int(g) for g in m.groups())
    if y < 1 or not 1 <= mo <= 13 or not 1 <= d <= 31:
        raise DateParseError(f"Date fields out of range: {text!r}")
    return CalendarDate(y, mo, d)


def parse_time(text: str) -> str:
    """'9:05' -> '09:05:00'."""
    raw = to_latin(text.strip())
    m = _TIME_RE.fullmatch(raw)
    if m is None:
        raise DateParseError(f"Not an H:M[:S] time: {text!r}")
    h, mi, s = int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)
    if h > 23 or mi > 59 or s > 59:
        raise DateParseError(f"Time fields out of range: {text!r}")
    return f"{h:02d}:{mi:02d}:{s:02d}"


def _gregorian_month_length(y: int, m: int) -> int:
    if m == 2:
        return 29 if is_gregorian_leap(y) else 28
    return 30 if m in (4, 6, 9, 11) else 31


def check_date(date_: CalendarDate, system: CalendarSystem) -> CalendarDate:
    """
    Reject days past the end of the month where the month length is known in closed form
    (Gregorian, Jalali). Other calendars are left to their provider.
    """
    y, m, d = date_
    if system in (CalendarSystem.GREGORIAN, CalendarSystem.JALALI):
        if m > 12:
            raise DateParseError(f"{system.value} has no month {m}: {date_.format('-')}")
        if system is CalendarSystem.JALALI:
            length = jalali_month_length(y, m)
        else:
            length = _gregorian_month_length(y, m)
        if d > length:
            raise DateParseError(
                f"{system.value} {y}-{m:02d} has {length} days: {date_.format('-')}"
            )
    return date_


def to_gregorian_iso(
    text: str,
    calendar: CalendarKey,
    *,
    mode: str = "date",
    engine: Optional["DateConverter"] = None,
) -> Optional[str]:
    """
    Human input in `calendar` -> 'YYYY-MM-DD' (date mode) or 'YYYY-MM-DD HH:MM:SS' (datetime mode).
    Blank input and zero dates give None.
    """
    _check_mode(mode)
    raw = text.strip()
    if not raw or to_latin(raw).startswith(_ZERO_DATE):
        return None

    date_part, time_part = split_datetime(raw)
    system = normalize(calendar)
    y, m, d = check_date(parse_date(date_part), system)
    gy, gm, gd = _engine(engine).convert(system, y, m, d, CalendarSystem.GREGORIAN)
    iso = f"{gy:04d}-{gm:02d}-{gd:02d}"
    if mode == "datetime":
        iso += " " + (parse_time(time_part) if time_part else "00:00:00")
    return iso


def from_gregorian_iso(
    value: Union[str, date, datetime],
    calendar: CalendarKey,
    *,
    sep: str = "-",
    digits: str = "en",
    mode: str = "date",
    engine: Optional["DateConverter"] = None,
) -> Optional[str]:
    """
    Stored Gregorian value -> human string in `calendar`.
    Accepts 'YYYY-MM-DD[ HH:MM[:SS]]' strings and date/datetime objects.
    """
    _check_mode(mode)
    if sep not in DATE_SEPARATORS:
        sep = "-"

    time_part: Optional[str]
    if isinstance(value, datetime):
        g = CalendarDate(value.year, value.month, value.day)
        time_part = value.strftime("%H:%M:%S")
    elif isinstance(value, date):
        g = CalendarDate(value.year, value.month, value.day)
        time_part = None
    else:
        raw = value.strip()
        if not raw or raw.startswith(_ZERO_DATE):
            return None
        date_part, time_part = split_datetime(raw.replace("T", " ", 1))
        g = check_date(parse_date(date_part), CalendarSystem.GREGORIAN)

    out = _engine(engine).convert(CalendarSystem.GREGORIAN, *g, normalize(calendar), sep)
    if mode == "datetime":
        out += " " + (parse_time(time_part) if time_part else "00:00:00")
    return translate(out, digits)
