"""Rewrite numeric, temporal, currency and unit expressions as Vietnamese words.

Each converter leaves text it does not recognize untouched, and every
numeric field is range-checked before it is spelled out. The converters run
in the order of `NUMERIC_STAGES`: thousand separators are stripped before
currency and decimals so ``50.000`` is not read as a fraction, and unit
symbols are attached before the remaining bare digits are spelled out.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from vispeak.text.numbers import number_to_words, read_digits

_LETTERS = "a-zà-ỹ"
_GAP = r"[^\S\n]*"
_SPACES = r"[^\S\n]+"
_DASH = rf"{_GAP}[-–—]{_GAP}"
_SEP = rf"{_GAP}[/-]{_GAP}"

_ORDINALS = {
    "1": "nhất",
    "2": "hai",
    "3": "ba",
    "4": "tư",
    "5": "năm",
    "6": "sáu",
    "7": "bảy",
    "8": "tám",
    "9": "chín",
    "10": "mười",
}

UNIT_NAMES: dict[str, str] = {
    # length
    "m": "mét",
    "cm": "xăng-ti-mét",
    "mm": "mi-li-mét",
    "km": "ki-lô-mét",
    "dm": "đề-xi-mét",
    "hm": "héc-tô-mét",
    "dam": "đề-ca-mét",
    "inch": "in",
    # mass
    "kg": "ki-lô-gam",
    "g": "gam",
    "mg": "mi-li-gam",
    "t": "tấn",
    "tấn": "tấn",
    "yến": "yến",
    "lạng": "lạng",
    # volume
    "ml": "mi-li-lít",
    "l": "lít",
    "lít": "lít",
    # area
    "m²": "mét vuông",
    "m2": "mét vuông",
    "km²": "ki-lô-mét vuông",
    "km2": "ki-lô-mét vuông",
    "ha": "héc-ta",
    "cm²": "xăng-ti-mét vuông",
    "cm2": "xăng-ti-mét vuông",
    # cubic volume
    "m³": "mét khối",
    "m3": "mét khối",
    "cm³": "xăng-ti-mét khối",
    "cm3": "xăng-ti-mét khối",
    "km³": "ki-lô-mét khối",
    "km3": "ki-lô-mét khối",
    # time
    "s": "giây",
    "sec": "giây",
    "ms": "mi-li-giây",
    "min": "phút",
    "h": "giờ",
    "hr": "giờ",
    "hrs": "giờ",
    # speed
    "km/h": "ki-lô-mét trên giờ",
    "kmh": "ki-lô-mét trên giờ",
    "m/s": "mét trên giây",
    "mm/h": "mi-li-mét trên giờ",
    "cm/s": "xăng-ti-mét trên giây",
    # temperature
    "°C": "độ xê",
    "°F": "độ ép",
    "°K": "độ ca",
}

_NUMBER_WORDS = (
    "một|hai|ba|bốn|năm|sáu|bảy|tám|chín|mười|mươi|không"
    "|trăm|nghìn|triệu|tỷ|lẻ|mốt|tư|lăm|phẩy"
)
_NUMBER_WORDS_RUN = rf"(?:\b(?:{_NUMBER_WORDS})[^\S\n]+)+"

_YEAR_RANGE_RE = re.compile(rf"(?<!\d)(\d{{4}}){_DASH}(\d{{4}})(?!\d)")

_DAY_RANGE_WITH_PREFIX_RE = re.compile(
    rf"(ngày){_SPACES}(\d{{1,2}}){_DASH}(\d{{1,2}}){_SEP}(\d{{1,2}})(?:{_SEP}(\d{{4}}))?(?!\d)",
    re.IGNORECASE,
)
_DAY_RANGE_RE = re.compile(
    rf"(?<!\d)(\d{{1,2}}){_DASH}(\d{{1,2}}){_SEP}(\d{{1,2}})(?:{_SEP}(\d{{4}}))?(?!\d)"
)
_MONTH_RANGE_RE = re.compile(rf"(?<!\d)(\d{{1,2}}){_DASH}(\d{{1,2}}){_SEP}(\d{{4}})(?!\d)")
_FULL_DATE_RE = re.compile(
    rf"(?:(ngày){_SPACES})?(?<![\d/-])(\d{{1,2}})[/-](\d{{1,2}})[/-](\d{{4}})(?!\d)",
    re.IGNORECASE,
)
_MONTH_YEAR_RE = re.compile(
    rf"(?:(tháng){_SPACES})?(?<![\d/-])(\d{{1,2}}){_SEP}(\d{{4}})(?!\d)", re.IGNORECASE
)
_DAY_MONTH_SLASH_RE = re.compile(
    rf"(?<![\d/-])(\d{{1,2}}){_GAP}/{_GAP}(\d{{1,2}})(?!\d|[/-]\d)"
)
_DAY_MONTH_DASH_RE = re.compile(
    rf"(ngày){_SPACES}(\d{{1,2}})-(\d{{1,2}})(?!\d|[/-]\d)", re.IGNORECASE
)
_DAY_OF_MONTH_RE = re.compile(
    rf"(?:(ngày){_SPACES})?(?<!\d)(\d+){_GAP}tháng{_GAP}(\d+)(?!\d)", re.IGNORECASE
)
_MONTH_RE = re.compile(rf"(tháng){_GAP}(\d+)(?!\d)", re.IGNORECASE)
_DAY_RE = re.compile(rf"(ngày){_GAP}(\d+)(?!\d)", re.IGNORECASE)

_CLOCK_RE = re.compile(r"(?<!\d)(\d{1,2}):(\d{2})(?::(\d{2}))?(?!\d)")
_HOUR_MINUTE_RE = re.compile(rf"(?<!\d)(\d{{1,2}})h(\d{{2}})(?![{_LETTERS}\d])", re.IGNORECASE)
_HOUR_RE = re.compile(rf"(?<!\d)(\d{{1,2}})h(?![{_LETTERS}\d])", re.IGNORECASE)
_SPOKEN_HOUR_MINUTE_RE = re.compile(rf"(?<!\d)(\d+){_GAP}giờ{_GAP}(\d+){_GAP}phút")
_SPOKEN_HOUR_RE = re.compile(rf"(?<!\d)(\d+){_GAP}giờ(?!{_GAP}\d)")

_ORDINAL_RE = re.compile(
    rf"\b(thứ|lần|bước|phần|chương|tập|số){_GAP}(?!0\d)(\d+)(?![\d.,]?\d)", re.IGNORECASE
)

_THOUSANDS_RE = re.compile(r"(?<![\d.])(\d{1,3}(?:\.\d{3})+)(?=\s|$|[^\d.,])")

_AMOUNT = r"(\d+(?:,\d+)?)"
_DONG_WORD_RE = re.compile(rf"{_AMOUNT}{_GAP}(?:đồng|VND|vnđ)\b", re.IGNORECASE)
_DONG_SIGN_RE = re.compile(rf"{_AMOUNT}đ(?![{_LETTERS}])", re.IGNORECASE)
_DOLLAR_PREFIX_RE = re.compile(rf"\${_GAP}{_AMOUNT}")
_DOLLAR_SUFFIX_RE = re.compile(rf"{_AMOUNT}{_GAP}(?:USD\b|\$)", re.IGNORECASE)

_PERCENT_RE = re.compile(rf"{_AMOUNT}{_GAP}%")
_PHONE_RE = re.compile(r"(?<!\d)(?:\+84|0)\d{9,10}(?!\d)")
_DECIMAL_RE = re.compile(r"(\d+),(\d+)(?=\s|$|[^\d,])")
_STANDALONE_RE = re.compile(r"(?:(?<![\w-])-)?\b\d+\b")


def _compile_unit_patterns() -> list[tuple[re.Pattern[str], re.Pattern[str], str]]:
    patterns: list[tuple[re.Pattern[str], re.Pattern[str], str]] = []
    # Longest symbol first so "km/h" is consumed before "km" and "m".
    for unit in sorted(UNIT_NAMES, key=len, reverse=True):
        escaped = re.escape(unit)
        if len(unit) == 1:
            tail = rf"(?!{_GAP}[{_LETTERS}])(?={_GAP}[^{_LETTERS}]|$)"
        else:
            tail = r"(?!\w)"
        digits = re.compile(rf"(\d+){_GAP}{escaped}{tail}", re.IGNORECASE)
        words = re.compile(rf"({_NUMBER_WORDS_RUN}){escaped}{tail}", re.IGNORECASE)
        patterns.append((digits, words, UNIT_NAMES[unit]))
    return patterns


_UNIT_PATTERNS = _compile_unit_patterns()


def _is_day(value: str) -> bool:
    return 1 <= int(value) <= 31


def _is_month(value: str) -> bool:
    return 1 <= int(value) <= 12


def _is_year(value: str) -> bool:
    return 1000 <= int(value) <= 9999


def _is_date(day: str, month: str, year: str | None = None) -> bool:
    if year is not None and not _is_year(year):
        return False
    return _is_day(day) and _is_month(month)


def _read_amount(amount: str) -> str:
    whole, _, fraction = amount.partition(",")
    if not fraction:
        return number_to_words(whole)
    return f"{number_to_words(whole)} phẩy {number_to_words(fraction)}"


def convert_year_ranges(text: str) -> str:
    """``1873-1907`` -> ``... đến ...``."""

    def replace(match: re.Match[str]) -> str:
        return f"{number_to_words(match[1])} đến {number_to_words(match[2])}"

    return _YEAR_RANGE_RE.sub(replace, text)


def convert_dates(text: str) -> str:
    """Spell day ranges, month ranges and day/month[/year] dates.

    Shapes whose day, month or year fall outside their valid ranges are left
    as written, e.g. ``32/13/2023``.
    """

    def day_range(prefix: str, match: re.Match[str], first: int) -> str:
        day1, day2, month, year = match.group(first, first + 1, first + 2, first + 3)
        if not (_is_date(day1, month, year) and _is_date(day2, month, year)):
            return match[0]
        result = (
            f"{prefix}{number_to_words(day1)} đến {number_to_words(day2)} "
            f"tháng {number_to_words(month)}"
        )
        if year:
            result += f" năm {number_to_words(year)}"
        return result

    def prefixed_day_range(match: re.Match[str]) -> str:
        return day_range(f"{match[1]} ", match, 2)

    def bare_day_range(match: re.Match[str]) -> str:
        preceding = match.string[max(0, match.start() - 10) : match.start()]
        if "ngày" in preceding.lower():
            return match[0]
        return day_range("", match, 1)

    def month_range(match: re.Match[str]) -> str:
        month1, month2, year = match.group(1, 2, 3)
        if not (_is_month(month1) and _is_month(month2) and _is_year(year)):
            return match[0]
        return (
            f"tháng {number_to_words(month1)} đến tháng {number_to_words(month2)} "
            f"năm {number_to_words(year)}"
        )

    def full_date(match: re.Match[str]) -> str:
        prefix, day, month, year = match.group(1, 2, 3, 4)
        if not _is_date(day, month, year):
            return match[0]
        return (
            f"{prefix or 'ngày'} {number_to_words(day)} tháng {number_to_words(month)} "
            f"năm {number_to_words(year)}"
        )

    def month_year(match: re.Match[str]) -> str:
        prefix, month, year = match.group(1, 2, 3)
        if not (_is_month(month) and _is_year(year)):
            return match[0]
        return f"{prefix or 'tháng'} {number_to_words(month)} năm {number_to_words(year)}"

    def day_month_slash(match: re.Match[str]) -> str:
        day, month = match.group(1, 2)
        if not _is_date(day, month):
            return match[0]
        return f"{number_to_words(day)} tháng {number_to_words(month)}"

    def day_month_dash(match: re.Match[str]) -> str:
        prefix, day, month = match.group(1, 2, 3)
        if not _is_date(day, month):
            return match[0]
        return f"{prefix} {number_to_words(day)} tháng {number_to_words(month)}"

    def day_of_month(match: re.Match[str]) -> str:
        prefix, day, month = match.group(1, 2, 3)
        if not _is_date(day, month):
            return match[0]
        return f"{prefix or 'ngày'} {number_to_words(day)} tháng {number_to_words(month)}"

    def month_only(match: re.Match[str]) -> str:
        if not _is_month(match[2]):
            return match[0]
        return f"{match[1]} {number_to_words(match[2])}"

    def day_only(match: re.Match[str]) -> str:
        if not _is_day(match[2]):
            return match[0]
        return f"{match[1]} {number_to_words(match[2])}"

    text = _DAY_RANGE_WITH_PREFIX_RE.sub(prefixed_day_range, text)
    text = _DAY_RANGE_RE.sub(bare_day_range, text)
    text = _MONTH_RANGE_RE.sub(month_range, text)
    text = _FULL_DATE_RE.sub(full_date, text)
    text = _MONTH_YEAR_RE.sub(month_year, text)
    text = _DAY_MONTH_SLASH_RE.sub(day_month_slash, text)
    text = _DAY_MONTH_DASH_RE.sub(day_month_dash, text)
    text = _DAY_OF_MONTH_RE.sub(day_of_month, text)
    text = _MONTH_RE.sub(month_only, text)
    return _DAY_RE.sub(day_only, text)


def convert_times(text: str) -> str:
    """Spell ``HH:MM[:SS]``, ``HHhMM``, ``HHh`` and ``X giờ [Y phút]`` times."""

    def valid(hour: str, minute: str | None = None, second: str | None = None) -> bool:
        if int(hour) > 23:
            return False
        return all(part is None or int(part) <= 59 for part in (minute, second))

    def clock(match: re.Match[str]) -> str:
        hour, minute, second = match.group(1, 2, 3)
        if not valid(hour, minute, second):
            return match[0]
        result = f"{number_to_words(hour)} giờ {number_to_words(minute)} phút"
        if second:
            result += f" {number_to_words(second)} giây"
        return result

    def hour_minute(match: re.Match[str]) -> str:
        if not valid(match[1], match[2]):
            return match[0]
        return f"{number_to_words(match[1])} giờ {number_to_words(match[2])}"

    def spoken_hour_minute(match: re.Match[str]) -> str:
        if not valid(match[1], match[2]):
            return match[0]
        return f"{number_to_words(match[1])} giờ {number_to_words(match[2])} phút"

    def hour_only(match: re.Match[str]) -> str:
        if not valid(match[1]):
            return match[0]
        return f"{number_to_words(match[1])} giờ"

    text = _CLOCK_RE.sub(clock, text)
    text = _HOUR_MINUTE_RE.sub(hour_minute, text)
    text = _HOUR_RE.sub(hour_only, text)
    text = _SPOKEN_HOUR_MINUTE_RE.sub(spoken_hour_minute, text)
    return _SPOKEN_HOUR_RE.sub(hour_only, text)


def convert_ordinals(text: str) -> str:
    """``thứ 2`` -> ``thứ hai``, ``thứ 1`` -> ``thứ nhất``."""

    def replace(match: re.Match[str]) -> str:
        prefix, number = match.group(1, 2)
        return f"{prefix} {_ORDINALS.get(number) or number_to_words(number)}"

    return _ORDINAL_RE.sub(replace, text)


def remove_thousand_separators(text: str) -> str:
    """``1.000.000`` -> ``1000000``; dots only group digits in threes."""
    return _THOUSANDS_RE.sub(lambda match: match[0].replace(".", ""), text)


def convert_currency(text: str) -> str:
    """Spell đồng and dollar amounts; a comma inside the amount is a decimal mark."""

    def dong(match: re.Match[str]) -> str:
        return f"{_read_amount(match[1])} đồng"

    def dollar(match: re.Match[str]) -> str:
        return f"{_read_amount(match[1])} đô la"

    text = _DONG_WORD_RE.sub(dong, text)
    text = _DONG_SIGN_RE.sub(dong, text)
    text = _DOLLAR_PREFIX_RE.sub(dollar, text)
    return _DOLLAR_SUFFIX_RE.sub(dollar, text)


def convert_percentages(text: str) -> str:
    """``50%`` -> ``năm mươi phần trăm``."""
    return _PERCENT_RE.sub(lambda match: f"{_read_amount(match[1])} phần trăm", text)


def convert_phone_numbers(text: str) -> str:
    """Read national-format phone numbers one digit at a time."""
    return _PHONE_RE.sub(lambda match: read_digits(match[0]), text)


def convert_decimals(text: str) -> str:
    """``7,27`` -> ``bảy phẩy hai mươi bảy``."""
    return _DECIMAL_RE.sub(
        lambda match: f"{number_to_words(match[1])} phẩy {number_to_words(match[2])}",
        text,
    )


def convert_measurement_units(text: str) -> str:
    """Replace a unit symbol that directly follows a number with its spoken name.

    The number itself is kept as written (digits or words); bare digits are
    spelled out by `convert_standalone_numbers` afterwards.
    """
    for digits_re, words_re, spoken in _UNIT_PATTERNS:
        text = digits_re.sub(lambda match, spoken=spoken: f"{match[1]} {spoken}", text)
        text = words_re.sub(lambda match, spoken=spoken: f"{match[1].strip()} {spoken}", text)
    return text


def convert_standalone_numbers(text: str) -> str:
    """Spell every remaining run of digits, including a leading minus sign."""
    return _STANDALONE_RE.sub(lambda match: number_to_words(match[0]), text)


NUMERIC_STAGES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("year_ranges", convert_year_ranges),
    ("dates", convert_dates),
    ("times", convert_times),
    ("ordinals", convert_ordinals),
    ("thousand_separators", remove_thousand_separators),
    ("currency", convert_currency),
    ("percentages", convert_percentages),
    ("phone_numbers", convert_phone_numbers),
    ("decimals", convert_decimals),
    ("measurement_units", convert_measurement_units),
    ("standalone_numbers", convert_standalone_numbers),
)


def convert_numeric_expressions(text: str) -> str:
    """Run every numeric converter in order."""
    for _, convert in NUMERIC_STAGES:
        text = convert(text)
    return text
