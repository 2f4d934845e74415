# tests/test_chinese.py

import pytest

from multical.core.types import CalendarDate
from multical.engines.chinese import LeapCandidate, leap_key, resolve_leap_candidates

from conftest import ToyChineseProvider as Toy


def _cand(leap, instant):
    return LeapCandidate(is_leap_month=leap, instant=instant, gregorian=CalendarDate(2000, 1, 1))


REGULAR = _cand(False, 100)
LEAP = _cand(True, 200)


def test_leap_key():
    assert leap_key(4660, 2, 1) == "4660-2-1"


@pytest.mark.parametrize("memo, expected", [(True, LEAP), (False, REGULAR)])
def test_memo_wins(memo, expected):
    # The probe would say otherwise; the memo is consulted first.
    winner, rule = resolve_leap_candidates(REGULAR, LEAP, memo=memo, probe=lambda c: not c.is_leap_month)
    assert (winner, rule) == (expected, "memo")


@pytest.mark.parametrize("leap_side, expected", [(True, LEAP), (False, REGULAR)])
def test_single_leap_probe(leap_side, expected):
    winner, rule = resolve_leap_candidates(
        REGULAR, LEAP, memo=None, probe=lambda c: c.is_leap_month == leap_side
    )
    assert (winner, rule) == (expected, "probe")


@pytest.mark.parametrize("flag", [True, False])
def test_later_when_probe_is_inconclusive(flag):
    winner, rule = resolve_leap_candidates(REGULAR, LEAP, memo=None, probe=lambda c: flag)
    assert (winner, rule) == (LEAP, "later")
    winner, _ = resolve_leap_candidates(_cand(False, 300), LEAP, memo=None, probe=lambda c: flag)
    assert winner.instant == 300


# ---------------------------------------------------------
# Through the engine, with a toy lunisolar provider
# ---------------------------------------------------------

def test_forward_records_leap_flag(toy_engine):
    assert toy_engine.gregorian_to_chinese(*Toy.gregorian(2, 5)) == (1, 2, 5)
    assert toy_engine.leap_cache.get("1-2-5") is True
    assert toy_engine.gregorian_to_chinese(*Toy.gregorian(1, 5)) == (1, 2, 5)
    assert toy_engine.leap_cache.get("1-2-5") is False
    assert len(toy_engine.leap_cache) == 1


def test_round_trip_uses_memo(toy_engine):
    for idx in range(len(Toy.MONTHS)):
        for day in (1, 15, 30):
            g = Toy.gregorian(idx, day)
            c = toy_engine.gregorian_to_chinese(*g)
            assert toy_engine.chinese_to_gregorian(*c) == g


def test_probe_picks_the_leap_twin(toy_engine):
    assert toy_engine.chinese_to_gregorian(1, 2, 5) == Toy.gregorian(2, 5)
    # probes do not populate the cache
    assert len(toy_engine.leap_cache) == 0


def test_later_heuristic_without_memo(toy_engine):
    # Month 4 has no leap twin; the "leap" reading spills into month 5 and wins.
    assert toy_engine.chinese_to_gregorian(1, 4, 10) == Toy.gregorian(5, 10)
    assert toy_engine.chinese_to_gregorian(1, 4, 10, is_leap_month=False) == Toy.gregorian(4, 10)


def test_memo_fixes_the_heuristic(toy_engine):
    toy_engine.gregorian_to_chinese(*Toy.gregorian(4, 10))
    assert toy_engine.chinese_to_gregorian(1, 4, 10) == Toy.gregorian(4, 10)
    toy_engine.clear_leap_cache()
    assert toy_engine.chinese_to_gregorian(1, 4, 10) == Toy.gregorian(5, 10)


def test_explicit_flag_overrides_memo(toy_engine):
    toy_engine.gregorian_to_chinese(*Toy.gregorian(2, 5))
    assert toy_engine.chinese_to_gregorian(1, 2, 5, is_leap_month=False) == Toy.gregorian(1, 5)


def test_convert_routes_chinese_source(toy_engine):
    toy_engine.gregorian_to_chinese(*Toy.gregorian(1, 5))
    g = Toy.gregorian(1, 5)
    assert toy_engine.convert("chinese", 1, 2, 5, "gregorian") == g
    assert toy_engine.convert("dangi", 1, 2, 5, "jalali") == toy_engine.gregorian_to_jalali(*g)


def test_formatted_output(toy_engine):
    y, m, d = Toy.gregorian(0, 1)
    assert toy_engine.gregorian_to_chinese(y, m, d, "-") == "0001-01-01"
    assert toy_engine.chinese_to_gregorian(1, 1, 1, "/") == f"{y:04d}/{m:02d}/{d:02d}"
