"""
multical.digits
---------------
Lexical digit transliteration between ASCII, Persian and Arabic-Indic numerals.

Only digits and the decimal/thousands marks are substituted; every other
character passes through untouched. No numeric reinterpretation happens.
"""

from __future__ import annotations

from typing import Dict, Optional

from .core.types import DigitAlphabet

LATIN_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

PERSIAN_DECIMAL = "٫"    # U+066B, shared by Persian and Arabic
PERSIAN_THOUSANDS = "٬"  # U+066C
ARABIC_COMMA = "،"       # U+060C, used as a thousands mark in Arabic text

DIGIT_ALPHABETS = ("en", "fa", "ar")
RESERVED_MARKS = (",", PERSIAN_THOUSANDS, ARABIC_COMMA)

_TO_LATIN: Dict[int, str] = {
    **str.maketrans(PERSIAN_DIGITS, LATIN_DIGITS),
    **str.maketrans(ARABIC_INDIC_DIGITS, LATIN_DIGITS),
    ord(PERSIAN_DECIMAL): ".",
    ord(PERSIAN_THOUSANDS): ",",
    ord(ARABIC_COMMA): ",",
}


def _to_persian_table(decimal_mark: str) -> Dict[int, str]:
    table = str.maketrans(LATIN_DIGITS, PERSIAN_DIGITS)
    table[ord(".")] = decimal_mark
    table[ord(",")] = PERSIAN_THOUSANDS
    return table


_TO_PERSIAN = _to_persian_table(PERSIAN_DECIMAL)


def translate(text: str, target: str = "en", decimal_mark: str = PERSIAN_DECIMAL) -> str:
    """
    target == "fa": ASCII digits and '.'/',' -> Persian digits, `decimal_mark`, '٬'.
    any other target: Persian and Arabic-Indic digits and marks -> ASCII.

    `decimal_mark` also reads back as '.' when converting to ASCII. It must not
    contain a digit or a thousands mark; ValueError otherwise.
    """
    if not decimal_mark or any(c.isdigit() or c in RESERVED_MARKS for c in decimal_mark):
        raise ValueError(f"decimal_mark {decimal_mark!r} collides with digits or the thousands mark")
    if target == "fa":
        table = _TO_PERSIAN if decimal_mark == PERSIAN_DECIMAL else _to_persian_table(decimal_mark)
        return text.translate(table)

    if len(decimal_mark) == 1 and ord(decimal_mark) not in _TO_LATIN:
        table = dict(_TO_LATIN)
        table[ord(decimal_mark)] = "."
        return text.translate(table)
    if len(decimal_mark) > 1:
        return text.translate(_TO_LATIN).replace(decimal_mark, ".")
    return text.translate(_TO_LATIN)


def to_latin(text: str) -> str:
    return translate(text, "en")


def resolve_digits(locale: Optional[str], given: Optional[str] = None) -> DigitAlphabet:
    """Explicit alphabet wins; otherwise follow the locale's language ('fa', 'ar'), defaulting to 'en'."""
    if given in DIGIT_ALPHABETS:
        return given  # type: ignore[return-value]
    lang = (locale or "").replace("-", "_").split("_")[0].lower()
    if lang == "fa":
        return "fa"
    if lang == "ar":
        return "ar"
    return "en"
