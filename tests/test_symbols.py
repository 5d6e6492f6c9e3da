import unicodedata

from vispeak.text.symbols import (
    clean_whitespace,
    normalize_punctuation,
    normalize_unicode,
    remove_special_chars,
    strip_symbols,
)


def _clean(text: str) -> str:
    return clean_whitespace(strip_symbols(text))


def test_normalize_unicode_composes_decomposed_letters() -> None:
    decomposed = unicodedata.normalize("NFD", "Việt Nam")
    assert decomposed != "Việt Nam"
    assert normalize_unicode(decomposed) == "Việt Nam"


def test_normalize_punctuation() -> None:
    assert normalize_punctuation("“Xin chào”") == '"Xin chào"'
    assert normalize_punctuation("Thật sao???") == "Thật sao?"
    assert normalize_punctuation("Chờ đã…") == "Chờ đã."
    assert normalize_punctuation("a – b") == "a - b"


def test_special_characters_are_spoken_or_dropped() -> None:
    assert clean_whitespace(remove_special_chars("Tom & Jerry")) == "Tom và Jerry"
    assert clean_whitespace(remove_special_chars("#1")) == "thăng 1"
    assert remove_special_chars("*quan trọng*") == "quan trọng"


def test_links_and_emails_are_removed() -> None:
    assert _clean("Xem https://example.com/a?b=1 ngay") == "Xem ngay"
    assert _clean("Vào www.example.vn nhé") == "Vào nhé"
    assert _clean("Liên hệ an.nguyen@mail.com nhé") == "Liên hệ nhé"


def test_emoji_and_non_latin_are_removed() -> None:
    assert _clean("Chào bạn 😀👍") == "Chào bạn"
    assert _clean("Xin chào 你好") == "Xin chào"


def test_hyphens_survive_next_to_digits() -> None:
    assert _clean("1873-1907") == "1873-1907"
    assert _clean("e-mail") == "e mail"
    assert _clean("nhiệt độ -5") == "nhiệt độ -5"


def test_clean_whitespace_keeps_line_breaks() -> None:
    assert clean_whitespace("  một   hai \n\n  ba  ") == "một hai\nba"


def test_spaced_dashes_next_to_digits_are_kept() -> None:
    assert _clean("1873 – 1907") == "1873 - 1907"
    assert _clean("1873 — 1907") == "1873 - 1907"
    assert _clean("ngày 25 – 26/12") == "ngày 25 - 26/12"


def test_spaced_dashes_between_words() -> None:
    assert _clean("a - b") == "a b"
    assert _clean("Anh ấy — bạn tôi") == "Anh ấy. bạn tôi"
