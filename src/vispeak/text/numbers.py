"""Vietnamese cardinal number spelling."""

from __future__ import annotations

import re

DIGIT_WORDS = ("không", "một", "hai", "ba", "bốn", "năm", "sáu", "bảy", "tám", "chín")
ZERO_WORD = DIGIT_WORDS[0]
NEGATIVE_WORD = "âm"

_NUMBER_RE = re.compile(r"-?[0-9]+")
_DIGIT_BY_CHAR = {str(index): word for index, word in enumerate(DIGIT_WORDS)}
_TEENS = {
    10: "mười",
    11: "mười một",
    12: "mười hai",
    13: "mười ba",
    14: "mười bốn",
    15: "mười lăm",
    16: "mười sáu",
    17: "mười bảy",
    18: "mười tám",
    19: "mười chín",
}
_TENS = {tens: f"{DIGIT_WORDS[tens]} mươi" for tens in range(2, 10)}
# Unit digits take a different reading after "mươi".
_UNITS_AFTER_TENS = {1: "mốt", 4: "tư", 5: "lăm"}
_MAGNITUDES = ((1_000_000_000, "tỷ"), (1_000_000, "triệu"), (1_000, "nghìn"))
_GROUPED_LIMIT = 1_000_000_000_000


def number_to_words(value: str) -> str:
    """Spell an optionally signed digit string in Vietnamese.

    Leading zeros are ignored, so ``"007"`` reads the same as ``"7"``.
    Values at or beyond one thousand billion are read digit by digit.
    Anything that is not a plain digit string is returned unchanged.
    """
    if not isinstance(value, str) or not _NUMBER_RE.fullmatch(value):
        return value

    if value.startswith("-"):
        return f"{NEGATIVE_WORD} {number_to_words(value[1:])}"

    digits = value.lstrip("0") or "0"
    number = int(digits)
    if number >= _GROUPED_LIMIT:
        return read_digits(digits)
    return _spell(number)


def read_digits(text: str) -> str:
    """Read every ASCII digit in ``text`` individually, skipping other characters."""
    return " ".join(_DIGIT_BY_CHAR[char] for char in text if char in _DIGIT_BY_CHAR)


def _spell(number: int) -> str:
    if number < 10:
        return DIGIT_WORDS[number]
    if number < 20:
        return _TEENS[number]
    if number < 100:
        tens, units = divmod(number, 10)
        if units == 0:
            return _TENS[tens]
        return f"{_TENS[tens]} {_UNITS_AFTER_TENS.get(units, DIGIT_WORDS[units])}"
    if number < 1000:
        hundreds, remainder = divmod(number, 100)
        head = f"{DIGIT_WORDS[hundreds]} trăm"
        if remainder == 0:
            return head
        if remainder < 10:
            return f"{head} lẻ {DIGIT_WORDS[remainder]}"
        return f"{head} {_spell(remainder)}"

    for size, name in _MAGNITUDES:
        if number < size:
            continue
        lead, remainder = divmod(number, size)
        head = f"{_spell(lead)} {name}"
        if remainder == 0:
            return head
        # An empty hundreds slot is still spoken at each group boundary.
        if remainder < 10:
            return f"{head} không trăm lẻ {DIGIT_WORDS[remainder]}"
        if remainder < 100:
            return f"{head} không trăm {_spell(remainder)}"
        return f"{head} {_spell(remainder)}"

    raise AssertionError(f"unreachable: {number}")
