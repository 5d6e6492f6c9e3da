"""Syllable-shape heuristic deciding whether a token is a Vietnamese word."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_DIACRITIC_RE = re.compile(
    "[àáảãạăằắẳẵặâầấẩẫậèéẻẽẹêềếểễệìíỉĩịòóỏõọôồốổỗộơờớởỡợùúủũụưừứửữựỳýỷỹỵđ]"
)
_FOREIGN_LETTER_RE = re.compile(r"[fwzj]")
_SYLLABLE_RE = re.compile(r"^([^ueoaiy]*)([ueoaiy]+)([^ueoaiy]*)$")
_SUSPECT_VOWELS_RE = re.compile(r"ee|oo|ea|oa|ae|ie")

VIETNAMESE_ONSETS = frozenset(
    {
        "b",
        "c",
        "d",
        "đ",
        "g",
        "h",
        "k",
        "l",
        "m",
        "n",
        "p",
        "q",
        "r",
        "s",
        "t",
        "v",
        "x",
        "ch",
        "gh",
        "gi",
        "kh",
        "ng",
        "nh",
        "ph",
        "qu",
        "th",
        "tr",
    }
)
VIETNAMESE_CODAS = frozenset({"p", "t", "c", "m", "n", "ng", "ch", "nh"})
ALLOWED_VOWEL_CLUSTERS = frozenset({"oa", "oe", "ua", "uy"})


@dataclass(frozen=True)
class VietnameseWordDetector:
    """Classify one token by its onset, vowel cluster and coda.

    Any Vietnamese diacritic settles the answer at once, as does any of the
    letters ``f w z j``. Remaining tokens must look like a single Vietnamese
    syllable. Short foreign words with the same shape (``man``, ``hot``)
    pass as Vietnamese.
    """

    onsets: frozenset[str] = field(default=VIETNAMESE_ONSETS)
    codas: frozenset[str] = field(default=VIETNAMESE_CODAS)
    allowed_vowel_clusters: frozenset[str] = field(default=ALLOWED_VOWEL_CLUSTERS)

    def is_vietnamese(self, word: str) -> bool:
        if not isinstance(word, str) or not word:
            return False
        token = word.lower().strip()

        if _DIACRITIC_RE.search(token):
            return True
        if _FOREIGN_LETTER_RE.search(token):
            return False

        match = _SYLLABLE_RE.match(token)
        if match is None:
            return False
        onset, vowels, coda = match.groups()

        if onset and onset not in self.onsets:
            return False
        if coda and coda not in self.codas:
            return False
        if _SUSPECT_VOWELS_RE.search(vowels) and vowels not in self.allowed_vowel_clusters:
            return False
        return True


DEFAULT_DETECTOR = VietnameseWordDetector()


def is_vietnamese_word(word: str) -> bool:
    """Module-level shortcut for `VietnameseWordDetector.is_vietnamese`."""
    return DEFAULT_DETECTOR.is_vietnamese(word)
