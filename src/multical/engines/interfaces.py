"""
multical.engines.interfaces
---------------------------
Defines the boundary between the conversion engine and the calendar providers
that know how to encode a civil date as an absolute instant and back.

Standard Reference Frame:
Every instant is an integer count of milliseconds since 1970-01-01T00:00:00Z,
taken at 00:00:00.000 UTC of the civil day. Providers never see local time.
"""

from __future__ import annotations

from typing import Protocol

from multical.core.types import AbsoluteInstant, CalendarFields, CalendarSystem


class CalendarProvider(Protocol):
    """
    Encodes/decodes civil dates of the calendars it supports.
    Months are 1-based on this interface; providers that speak 0-based months
    internally (ICU) translate at their edge.
    """
    @property
    def name(self) -> str:
        """Short identifier ("icu", "arithmetic", ...)."""
        ...

    def supports(self, system: CalendarSystem) -> bool:
        ...

    def to_instant(
        self,
        system: CalendarSystem,
        year: int,
        month: int,
        day: int,
        *,
        is_leap_month: bool = False,
    ) -> AbsoluteInstant:
        """
        UTC-midnight instant of (year, month, day) in `system`.
        `year` is the extended year for calendars that use one (Chinese).
        `is_leap_month` is only meaningful for lunisolar calendars with leap months.
        """
        ...

    def read(self, system: CalendarSystem, instant: AbsoluteInstant) -> CalendarFields:
        """Civil fields of `instant` in `system`, including the leap-month flag where defined."""
        ...
