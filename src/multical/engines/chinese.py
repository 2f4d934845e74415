"""
multical.engines.chinese
------------------------
Leap-month disambiguation for the Chinese lunisolar calendar.

A leap month carries the same number as the month before it, so a bare
(year, month, day) can name two civil days. Forward conversions record the
leap flag they saw in a LeapMonthCache; the inverse conversion builds both
candidates and picks one with a fixed precedence:

  1. memo:  a flag recorded by an earlier forward conversion of that label;
  2. probe: the single candidate whose own forward conversion is a leap month;
  3. later: otherwise the chronologically later candidate.

Rule 3 is a compatibility heuristic, not a calendrical rule. When the month
has no leap twin, the "leap" candidate resolves to the following month and
wins the tie, so callers without a memo entry should pass is_leap_month.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..core.types import AbsoluteInstant, CalendarDate

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 4096


def leap_key(year: int, month: int, day: int) -> str:
    return f"{year}-{month}-{day}"


class LeapMonthCache:
    """Bounded, thread-safe LRU map: "{year}-{month}-{day}" -> leap flag."""

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE):
        if maxsize <= 0:
            raise ValueError("maxsize must be positive")
        self.maxsize = maxsize
        self._data: "OrderedDict[str, bool]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bool]:
        with self._lock:
            flag = self._data.get(key)
            if flag is not None:
                self._data.move_to_end(key)
            return flag

    def put(self, key: str, flag: bool) -> None:
        with self._lock:
            self._data[key] = bool(flag)
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data


@dataclass(frozen=True)
class LeapCandidate:
    """One reading of an ambiguous Chinese label."""
    is_leap_month: bool        # the assumption used to build it
    instant: AbsoluteInstant
    gregorian: CalendarDate


def resolve_leap_candidates(
    regular: LeapCandidate,
    leap: LeapCandidate,
    *,
    memo: Optional[bool],
    probe: Callable[[LeapCandidate], bool],
) -> Tuple[LeapCandidate, str]:
    """Pick between the two readings. Returns (winner, rule) with rule in {"memo", "probe", "later"}."""
    if memo is not None:
        return (leap if memo else regular), "memo"

    regular_is_leap = probe(regular)
    leap_is_leap = probe(leap)
    if regular_is_leap != leap_is_leap:
        return (leap if leap_is_leap else regular), "probe"

    return (leap if leap.instant > regular.instant else regular), "later"
