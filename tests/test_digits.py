# tests/test_digits.py

import pytest

from multical.digits import resolve_digits, to_latin, translate


@pytest.mark.parametrize(
    "text, target, expected",
    [
        ("1404/05/22", "fa", "۱۴۰۴/۰۵/۲۲"),
        ("۱۴۰۴/۰۵/۲۲", "en", "1404/05/22"),
        ("٢٠٢٥-٠٨-١٣", "en", "2025-08-13"),
        ("3.14", "fa", "۳٫۱۴"),
        ("1,234", "fa", "۱٬۲۳۴"),
        ("۳٫۱۴", "en", "3.14"),
        ("۱٬۲۳۴", "en", "1,234"),
        ("١،٢٣٤", "en", "1,234"),
        ("Order #12 on ۱۴۰۴", "en", "Order #12 on 1404"),
        ("Order #12 on ۱۴۰۴", "fa", "Order #۱۲ on ۱۴۰۴"),
        ("no digits here", "fa", "no digits here"),
        ("", "fa", ""),
    ],
)
def test_translate(text, target, expected):
    assert translate(text, target) == expected


def test_arabic_target_is_ascii():
    assert translate("۱۲٣", "ar") == "123"
    assert translate("123", "ar") == "123"


def test_custom_decimal_mark():
    assert translate("3.5", "fa", decimal_mark="/") == "۳/۵"
    assert translate("۳/۵", "en", decimal_mark="/") == "3.5"


@pytest.mark.parametrize("target", ["en", "fa", "ar"])
def test_idempotent(target):
    s = "1,234.5 - ۶۷۸٫۹ - ٠١٢"
    once = translate(s, target)
    assert translate(once, target) == once


def test_to_latin():
    assert to_latin("۰۱۲۳۴۵۶۷۸۹") == "0123456789"
    assert to_latin("٠١٢٣٤٥٦٧٨٩") == "0123456789"


@pytest.mark.parametrize(
    "locale, given, expected",
    [
        ("fa_IR", None, "fa"),
        ("fa-IR", None, "fa"),
        ("ar", None, "ar"),
        ("en_US", None, "en"),
        (None, None, "en"),
        ("fa_IR", "en", "en"),
        ("en_US", "fa", "fa"),
        ("en_US", "xx", "en"),
    ],
)
def test_resolve_digits(locale, given, expected):
    assert resolve_digits(locale, given) == expected


def test_round_trip_through_persian():
    assert translate(translate("123,456.78", "fa"), "en") == "123,456.78"
    assert translate("٠٫٥", "en") == "0.5"


@pytest.mark.parametrize("mark", [",", "٬", "،", "5", "۵", ""])
@pytest.mark.parametrize("target", ["en", "fa"])
def test_decimal_mark_must_not_collide(mark, target):
    with pytest.raises(ValueError):
        translate("1,234.5", target, decimal_mark=mark)


def test_custom_decimal_mark_idempotent():
    once = translate("1,234.5", "fa", decimal_mark="/")
    assert once == "۱٬۲۳۴/۵"
    assert translate(once, "fa", decimal_mark="/") == once
