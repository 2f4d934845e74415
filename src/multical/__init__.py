"""multical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

# Initialize the default engine on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    set_engine,
    get_engine,
    convert,
    make_converter,
    list_calendars,
    calendar_info,
    clear_leap_cache,
    gregorian_to_jalali,
    jalali_to_gregorian,
    gregorian_to_hijri,
    hijri_to_gregorian,
    gregorian_to_hebrew,
    hebrew_to_gregorian,
    gregorian_to_buddhist,
    buddhist_to_gregorian,
    gregorian_to_coptic,
    coptic_to_gregorian,
    gregorian_to_ethiopian,
    ethiopian_to_gregorian,
    gregorian_to_chinese,
    chinese_to_gregorian,
)
from .bootstrap import build_engine
from .calendars.keys import normalize
from .core.config import EngineConfig
from .core.errors import (
    ConversionError,
    DateParseError,
    MissingCapability,
    MulticalError,
    UnsupportedCalendar,
)
from .core.types import CalendarDate, CalendarSystem
from .digits import resolve_digits, to_latin, translate
from .engines.chinese import LeapMonthCache
from .engines.converter import DateConverter
from .engines.factory import CalendarConverter
from .text import from_gregorian_iso, parse_date, to_gregorian_iso

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "set_engine",
    "get_engine",
    "build_engine",
    "convert",
    "make_converter",
    "list_calendars",
    "calendar_info",
    "clear_leap_cache",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "gregorian_to_hebrew",
    "hebrew_to_gregorian",
    "gregorian_to_buddhist",
    "buddhist_to_gregorian",
    "gregorian_to_coptic",
    "coptic_to_gregorian",
    "gregorian_to_ethiopian",
    "ethiopian_to_gregorian",
    "gregorian_to_chinese",
    "chinese_to_gregorian",
    "normalize",
    "translate",
    "to_latin",
    "resolve_digits",
    "parse_date",
    "to_gregorian_iso",
    "from_gregorian_iso",
    "CalendarDate",
    "CalendarSystem",
    "CalendarConverter",
    "DateConverter",
    "EngineConfig",
    "LeapMonthCache",
    "MulticalError",
    "UnsupportedCalendar",
    "MissingCapability",
    "ConversionError",
    "DateParseError",
]
