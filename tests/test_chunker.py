import pytest

from vispeak.text.chunker import chunk_text, split_sentences


def test_sentences_become_chunks() -> None:
    assert chunk_text("Xin chào. Tôi là An.") == ["Xin chào.", "Tôi là An."]


def test_short_sentence_is_merged_forward() -> None:
    assert chunk_text("Ừ. Được rồi.") == ["Ừ. Được rồi."]


def test_missing_terminal_punctuation_is_added() -> None:
    assert chunk_text("xin chào") == ["xin chào."]
    assert split_sentences("một, hai") == ["một,", "hai."]


def test_chunks_never_span_lines() -> None:
    assert chunk_text("một\nhai") == ["một.", "hai."]


def test_chunk_grows_until_min_length_without_passing_max() -> None:
    assert chunk_text("Một. Hai. Ba.", 10, 12) == ["Một. Hai.", "Ba."]


def test_long_sentence_is_cut_at_spaces() -> None:
    assert chunk_text("aaaa bbbb cccc", 1, 9) == ["aaaa bbbb", "cccc."]


def test_oversized_word_stands_alone() -> None:
    assert chunk_text("abcdefghijkl ngắn", 1, 5) == ["abcdefghijkl", "ngắn."]


def test_chunks_respect_max_length() -> None:
    text = " ".join(f"câu số {index} khá là dài." for index in range(40))
    chunks = chunk_text(text, 4, 60)
    assert chunks
    assert all(len(chunk) <= 60 for chunk in chunks)
    assert " ".join(chunks) == text


def test_empty_text() -> None:
    assert chunk_text("") == []
    assert chunk_text("  \n ") == []


@pytest.mark.parametrize(("min_length", "max_length"), [(0, 5), (6, 5)])
def test_invalid_bounds(min_length: int, max_length: int) -> None:
    with pytest.raises(ValueError):
        chunk_text("abc", min_length, max_length)
