import pytest

from vispeak.text.transliteration import (
    english_to_vietnamese,
    transliterate_text,
    transliterate_word,
)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("yes", "đẹt"),
        ("table", "ta-bồ"),
        ("computer", "com-pu-tơ"),
        ("hello", "he-lo"),
        ("stop", "tóp"),
        ("data", "đa-ta"),
        ("facebook", "pha-ke-bú"),
    ],
)
def test_english_to_vietnamese(word: str, expected: str) -> None:
    assert english_to_vietnamese(word) == expected


def test_uppercase_input_is_lowered() -> None:
    assert english_to_vietnamese("STOP") == "tóp"


def test_vietnamese_words_are_left_alone() -> None:
    assert transliterate_word("tiếng") == "tiếng"
    assert transliterate_word("man") == "man"


def test_empty_input() -> None:
    assert english_to_vietnamese("") == ""
    assert transliterate_word("") == ""
    assert transliterate_text("") == ""


def test_transliterate_text_keeps_punctuation_and_numbers() -> None:
    assert transliterate_text("tôi thích data, 2 lần.") == "tôi thích đa-ta, 2 lần."


def test_transliteration_is_deterministic() -> None:
    first = transliterate_text("computer table stop")
    assert all(transliterate_text("computer table stop") == first for _ in range(5))
