from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Literal, NamedTuple, Union

# Milliseconds since 1970-01-01T00:00:00Z, always at UTC midnight.
AbsoluteInstant = int

DigitAlphabet = Literal["en", "fa", "ar"]

class CalendarSystem(str, Enum):
    GREGORIAN = "gregorian"
    JALALI = "jalali"
    HIJRI = "hijri"
    HEBREW = "hebrew"
    BUDDHIST = "buddhist"
    COPTIC = "coptic"
    ETHIOPIAN = "ethiopian"
    CHINESE = "chinese"

    def __str__(self) -> str:
        return self.value

CalendarKey = Union[str, CalendarSystem]

class CalendarDate(NamedTuple):
    """A civil (year, month, day) triple. Meaningless without its calendar system."""
    year: int
    month: int
    day: int

    def format(self, sep: str) -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

@dataclass(frozen=True)
class CalendarFields:
    """Fields read back from a provider for one instant."""
    year: int
    month: int
    day: int
    is_leap_month: bool = False  # Chinese only

    @property
    def date(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day)

def format_or_tuple(d: CalendarDate, sep: str = "") -> Union[CalendarDate, str]:
    """Empty separator keeps the triple; anything else renders %04d{sep}%02d{sep}%02d."""
    return d if sep == "" else d.format(sep)
