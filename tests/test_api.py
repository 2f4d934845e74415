# tests/test_api.py

import pytest

import multical
from multical import api


@pytest.fixture
def swapped_engine(arith_engine):
    previous = api.get_engine()
    multical.set_engine(arith_engine)
    yield arith_engine
    multical.set_engine(previous)


def test_default_engine_installed_on_import():
    assert isinstance(multical.get_engine(), multical.DateConverter)


def test_closed_form_jalali():
    assert multical.gregorian_to_jalali(2025, 8, 13, "/") == "1404/05/22"
    assert multical.jalali_to_gregorian(1404, 5, 22) == (2025, 8, 13)


def test_wrappers_use_the_installed_engine(swapped_engine):
    assert multical.convert("ethiopic", 2017, 1, 1, "coptic") == (1741, 1, 1)
    assert multical.gregorian_to_hijri(2000, 1, 1, "-") == "1420-09-24"
    assert multical.buddhist_to_gregorian(2567, 1, 1) == (2024, 1, 1)
    assert multical.make_converter("persian").to_gregorian(1404, 5, 22) == (2025, 8, 13)
    with pytest.raises(multical.MissingCapability):
        multical.gregorian_to_hebrew(2024, 10, 3)


def test_list_calendars():
    assert multical.list_calendars() == [
        "gregorian", "jalali", "hijri", "hebrew", "buddhist", "coptic", "ethiopian", "chinese",
    ]


def test_calendar_info(swapped_engine):
    info = multical.calendar_info("dangi")
    assert info["calendar"] == "chinese"
    assert info["aliases"] == ["dangi"]
    assert info["requires_icu"] and info["extended_year"] and info["leap_months"]
    assert info["provider"] is None
    assert multical.calendar_info("persian")["provider"] == "arithmetic"
    with pytest.raises(multical.UnsupportedCalendar):
        multical.calendar_info("klingon")


def test_clear_leap_cache(swapped_engine):
    swapped_engine.leap_cache.put("4660-2-1", True)
    multical.clear_leap_cache()
    assert len(swapped_engine.leap_cache) == 0


def test_unset_engine(monkeypatch):
    monkeypatch.setattr(api, "_engine", None)
    with pytest.raises(RuntimeError):
        api.get_engine()
