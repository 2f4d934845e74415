from __future__ import annotations

from typing import Dict, List

from ..core.errors import UnsupportedCalendar
from ..core.types import CalendarKey, CalendarSystem

# Every accepted spelling -> canonical system. Canonical values map to themselves.
CALENDAR_ALIASES: Dict[str, CalendarSystem] = {
    **{s.value: s for s in CalendarSystem},
    "persian": CalendarSystem.JALALI,
    "islamic": CalendarSystem.HIJRI,
    "ethiopic": CalendarSystem.ETHIOPIAN,
    "dangi": CalendarSystem.CHINESE,
}


def normalize(raw: CalendarKey) -> CalendarSystem:
    """Resolve a calendar key or alias (case-insensitive) to its canonical system."""
    if isinstance(raw, CalendarSystem):
        return raw
    if not isinstance(raw, str):
        raise UnsupportedCalendar(raw)
    try:
        return CALENDAR_ALIASES[raw.strip().lower()]
    except KeyError:
        raise UnsupportedCalendar(raw) from None


def aliases_of(system: CalendarSystem) -> List[str]:
    return sorted(k for k, v in CALENDAR_ALIASES.items() if v is system and k != system.value)
