# tests/conftest.py

import pytest

from multical.core.config import EngineConfig
from multical.core.engine import ProviderRegistry
from multical.core.time import from_jdn, instant_to_jdn, jdn_to_instant, to_jdn
from multical.core.types import CalendarFields, CalendarSystem
from multical.engines.arithmetic import ArithmeticProvider
from multical.engines.chinese import LeapMonthCache
from multical.engines.converter import DateConverter


@pytest.fixture
def arith_engine():
    """An engine with the pure-integer provider only (no ICU involved)."""
    return DateConverter(ProviderRegistry([ArithmeticProvider()]), config=EngineConfig(prefer="arithmetic"))


class ToyChineseProvider:
    """
    A tiny lunisolar calendar with ICU-like semantics, for leap-month tests.

    Year 1 starts at BASE_JDN. Every month has 30 days. Month 2 is followed by
    a leap month 2. Asking for a leap month that does not exist resolves to the
    following month, which is what ICU's lenient calendars do.
    """
    BASE_JDN = to_jdn(2001, 1, 1)
    MONTHS = [(1, False), (2, False), (2, True), (3, False), (4, False), (5, False), (6, False)]

    @property
    def name(self) -> str:
        return "toy-chinese"

    def supports(self, system):
        return system is CalendarSystem.CHINESE

    def to_instant(self, system, year, month, day, *, is_leap_month=False):
        try:
            idx = self.MONTHS.index((month, is_leap_month))
        except ValueError:
            idx = self.MONTHS.index((month, False)) + 1
        return jdn_to_instant(self.BASE_JDN + 30 * idx + day - 1)

    def read(self, system, instant):
        offset = instant_to_jdn(instant) - self.BASE_JDN
        month, leap = self.MONTHS[offset // 30]
        return CalendarFields(1, month, offset % 30 + 1, is_leap_month=leap)

    @classmethod
    def gregorian(cls, month_index, day):
        return from_jdn(cls.BASE_JDN + 30 * month_index + day - 1)


@pytest.fixture
def toy_engine():
    registry = ProviderRegistry([ToyChineseProvider(), ArithmeticProvider()])
    return DateConverter(registry, leap_cache=LeapMonthCache(16))
