import pytest

from vispeak.text.detector import VietnameseWordDetector, is_vietnamese_word


@pytest.mark.parametrize(
    "word",
    ["việt", "Đường", "man", "hot", "cat", "loa", "thanh", "nghĩ", "gia", "qua"],
)
def test_vietnamese_shaped_words(word: str) -> None:
    assert is_vietnamese_word(word)


@pytest.mark.parametrize(
    "word",
    ["facebook", "zoo", "street", "book", "team", "tree", "computer", "bank", "", "bcd"],
)
def test_foreign_words(word: str) -> None:
    assert not is_vietnamese_word(word)


def test_non_string_input_is_not_vietnamese() -> None:
    assert not is_vietnamese_word(None)  # type: ignore[arg-type]


def test_custom_codas() -> None:
    detector = VietnameseWordDetector(codas=frozenset({"n", "nk"}))
    assert detector.is_vietnamese("bank")
    assert not detector.is_vietnamese("cat")


def test_unmarked_ngh_onset_is_not_recognized() -> None:
    assert not is_vietnamese_word("nghe")
    assert VietnameseWordDetector(
        onsets=VietnameseWordDetector().onsets | {"ngh"}
    ).is_vietnamese("nghe")
