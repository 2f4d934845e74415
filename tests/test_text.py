# tests/test_text.py

from datetime import date, datetime

import pytest

from multical.core.errors import DateParseError
from multical.core.types import CalendarDate, CalendarSystem
from multical.text import (
    check_date,
    from_gregorian_iso,
    parse_date,
    parse_time,
    split_datetime,
    to_gregorian_iso,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1404/05/22", (1404, 5, 22)),
        ("1404-5-22", (1404, 5, 22)),
        ("1404.05.22", (1404, 5, 22)),
        ("۱۴۰۴/۰۵/۲۲", (1404, 5, 22)),
        (" 2017-13-05 ", (2017, 13, 5)),
    ],
)
def test_parse_date(text, expected):
    assert parse_date(text) == expected


@pytest.mark.parametrize("text", ["", "1404/05", "1404/05/22/1", "abc", "1404/00/01", "1404/14/01", "1404/01/32", "0/1/1"])
def test_parse_date_rejects(text):
    with pytest.raises(DateParseError):
        parse_date(text)


def test_split_datetime():
    assert split_datetime("1404/05/22 10:30") == ("1404/05/22", "10:30")
    assert split_datetime("1404/05/22") == ("1404/05/22", None)
    assert split_datetime("   ") == ("", None)


def test_parse_time():
    assert parse_time("9:05") == "09:05:00"
    assert parse_time("۲۳:۵۹:۵۸") == "23:59:58"
    with pytest.raises(DateParseError):
        parse_time("24:00")
    with pytest.raises(DateParseError):
        parse_time("noon")


def test_to_gregorian_iso(arith_engine):
    assert to_gregorian_iso("1404/05/22", "jalali", engine=arith_engine) == "2025-08-13"
    assert to_gregorian_iso("۱۴۰۴/۰۵/۲۲", "persian", engine=arith_engine) == "2025-08-13"
    assert to_gregorian_iso("2017-01-01", "ethiopic", engine=arith_engine) == "2024-09-11"


def test_to_gregorian_iso_datetime(arith_engine):
    assert to_gregorian_iso("1404/05/22 10:30", "jalali", mode="datetime", engine=arith_engine) == "2025-08-13 10:30:00"
    assert to_gregorian_iso("1404/05/22", "jalali", mode="datetime", engine=arith_engine) == "2025-08-13 00:00:00"
    # date mode drops the time
    assert to_gregorian_iso("1404/05/22 10:30", "jalali", engine=arith_engine) == "2025-08-13"


@pytest.mark.parametrize("blank", ["", "   ", "0000-00-00", "0000-00-00 00:00:00"])
def test_blank_and_zero_dates(blank, arith_engine):
    assert to_gregorian_iso(blank, "jalali", engine=arith_engine) is None
    assert from_gregorian_iso(blank, "jalali", engine=arith_engine) is None


def test_zero_date_in_persian_digits(arith_engine):
    assert to_gregorian_iso("۰۰۰۰-۰۰-۰۰", "jalali", engine=arith_engine) is None


def test_from_gregorian_iso(arith_engine):
    assert from_gregorian_iso("2025-08-13", "jalali", engine=arith_engine) == "1404-05-22"
    assert from_gregorian_iso("2025-08-13", "jalali", sep="/", digits="fa", engine=arith_engine) == "۱۴۰۴/۰۵/۲۲"
    assert from_gregorian_iso(date(2025, 8, 13), "persian", sep=".", engine=arith_engine) == "1404.05.22"
    # unknown separators fall back to '-'
    assert from_gregorian_iso("2025-08-13", "jalali", sep="|", engine=arith_engine) == "1404-05-22"


def test_from_gregorian_iso_datetime(arith_engine):
    out = from_gregorian_iso(datetime(2025, 8, 13, 10, 30), "jalali", mode="datetime", engine=arith_engine)
    assert out == "1404-05-22 10:30:00"
    out = from_gregorian_iso("2025-08-13T07:05:09", "jalali", mode="datetime", engine=arith_engine)
    assert out == "1404-05-22 07:05:09"
    out = from_gregorian_iso("2025-08-13", "jalali", mode="datetime", digits="fa", engine=arith_engine)
    assert out == "۱۴۰۴-۰۵-۲۲ ۰۰:۰۰:۰۰"


def test_bad_mode(arith_engine):
    with pytest.raises(ValueError):
        to_gregorian_iso("1404/05/22", "jalali", mode="time", engine=arith_engine)
    with pytest.raises(ValueError):
        from_gregorian_iso("2025-08-13", "jalali", mode="time", engine=arith_engine)


def test_default_engine_is_used():
    import multical  # noqa: F401  (initializes the default engine)
    assert to_gregorian_iso("1404/05/22", "jalali") == "2025-08-13"


@pytest.mark.parametrize("text", ["1402/12/30", "1404/07/31", "1404/13/01"])
def test_nonexistent_jalali_dates_rejected(text, arith_engine):
    with pytest.raises(DateParseError):
        to_gregorian_iso(text, "jalali", engine=arith_engine)


def test_jalali_leap_day_accepted(arith_engine):
    assert to_gregorian_iso("1403/12/30", "jalali", engine=arith_engine) == "2025-03-20"
    assert to_gregorian_iso("1402/12/29", "jalali", engine=arith_engine) == "2024-03-19"


@pytest.mark.parametrize("value", ["2025-02-29", "2025-04-31", "2100-02-29"])
def test_nonexistent_gregorian_dates_rejected(value, arith_engine):
    with pytest.raises(DateParseError):
        from_gregorian_iso(value, "jalali", engine=arith_engine)
    with pytest.raises(DateParseError):
        to_gregorian_iso(value, "gregorian", engine=arith_engine)


def test_check_date_leaves_other_calendars_alone():
    assert check_date(CalendarDate(1739, 13, 6), CalendarSystem.COPTIC) == (1739, 13, 6)
