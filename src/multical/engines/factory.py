"""
multical.engines.factory
------------------------
Per-calendar converter objects: a calendar bound to an engine, exposing the
Gregorian round trip the way form/storage layers consume it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from multical.core.types import CalendarDate, CalendarKey, CalendarSystem

if TYPE_CHECKING:
    from multical.engines.converter import DateConverter


@dataclass(frozen=True)
class CalendarConverter:
    calendar: CalendarSystem
    engine: "DateConverter"

    def from_gregorian(self, y: int, m: int, d: int, sep: str = "") -> Union[CalendarDate, str]:
        return self.engine.convert(CalendarSystem.GREGORIAN, y, m, d, self.calendar, sep)

    def to_gregorian(self, y: int, m: int, d: int, sep: str = "") -> Union[CalendarDate, str]:
        return self.engine.convert(self.calendar, y, m, d, CalendarSystem.GREGORIAN, sep)


def make_converter(calendar: CalendarKey, *, engine: Optional["DateConverter"] = None) -> CalendarConverter:
    """The universal entry point. Uses the process-wide engine unless one is given."""
    if engine is None:
        from multical.api import get_engine
        engine = get_engine()
    return engine.converter(calendar)
