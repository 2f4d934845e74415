from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .calendars import jalali
from .calendars.keys import aliases_of, normalize
from .core.types import CalendarDate, CalendarKey, CalendarSystem
from .engines.converter import DateConverter
from .engines.factory import CalendarConverter
from .engines.specs import spec_for

DateOrStr = Union[CalendarDate, str]

_engine: Optional[DateConverter] = None

def set_engine(engine: DateConverter) -> None:
    global _engine
    _engine = engine

def get_engine() -> DateConverter:
    if _engine is None:
        raise RuntimeError("Default engine not initialized")
    return _engine

def convert(
    from_calendar: CalendarKey, y: int, m: int, d: int, to_calendar: CalendarKey, sep: str = ""
) -> DateOrStr:
    return get_engine().convert(from_calendar, y, m, d, to_calendar, sep)

def make_converter(calendar: CalendarKey) -> CalendarConverter:
    return get_engine().converter(calendar)

def list_calendars() -> List[str]:
    return [s.value for s in CalendarSystem]

def calendar_info(calendar: CalendarKey) -> Dict[str, Any]:
    system = normalize(calendar)
    spec = spec_for(system)
    coverage = get_engine().providers.coverage()
    return {
        "calendar": system.value,
        "aliases": aliases_of(system),
        "icu_name": spec.icu_name,
        "requires_icu": spec.requires_icu,
        "extended_year": spec.extended_year,
        "max_month": spec.max_month,
        "leap_months": spec.leap_months,
        "provider": coverage.get(system),
    }

def clear_leap_cache() -> None:
    get_engine().clear_leap_cache()

# ============================================================
# Closed-form Jalali (no engine involved)
# ============================================================

def gregorian_to_jalali(gy: int, gm: int, gd: int, sep: str = "") -> DateOrStr:
    return jalali.gregorian_to_jalali(gy, gm, gd, sep)

def jalali_to_gregorian(jy: int, jm: int, jd: int, sep: str = "") -> DateOrStr:
    return jalali.jalali_to_gregorian(jy, jm, jd, sep)

# ============================================================
# Provider-backed calendars
# ============================================================

def gregorian_to_hijri(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().gregorian_to_hijri(y, m, d, sep)

def hijri_to_gregorian(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().hijri_to_gregorian(y, m, d, sep)

def gregorian_to_hebrew(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().gregorian_to_hebrew(y, m, d, sep)

def hebrew_to_gregorian(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().hebrew_to_gregorian(y, m, d, sep)

def gregorian_to_buddhist(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().gregorian_to_buddhist(y, m, d, sep)

def buddhist_to_gregorian(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().buddhist_to_gregorian(y, m, d, sep)

def gregorian_to_coptic(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().gregorian_to_coptic(y, m, d, sep)

def coptic_to_gregorian(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().coptic_to_gregorian(y, m, d, sep)

def gregorian_to_ethiopian(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().gregorian_to_ethiopian(y, m, d, sep)

def ethiopian_to_gregorian(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().ethiopian_to_gregorian(y, m, d, sep)

def gregorian_to_chinese(y: int, m: int, d: int, sep: str = "") -> DateOrStr:
    return get_engine().gregorian_to_chinese(y, m, d, sep)

def chinese_to_gregorian(
    y: int, m: int, d: int, sep: str = "", *, is_leap_month: Optional[bool] = None
) -> DateOrStr:
    return get_engine().chinese_to_gregorian(y, m, d, sep, is_leap_month=is_leap_month)
