"""Unicode canonicalization and removal of unspeakable symbols."""

from __future__ import annotations

import re
import unicodedata

_EMOJI_RE = re.compile(
    "["
    r"\U0001F600-\U0001F64F"
    r"\U0001F300-\U0001F5FF"
    r"\U0001F680-\U0001F6FF"
    r"\U0001F1E0-\U0001F1FF"
    r"\u2600-\u26FF"
    r"\u2700-\u27BF"
    r"\U0001F900-\U0001F9FF"
    r"\U0001F018-\U0001F270"
    r"\u238C-\u2454"
    r"\u20D0-\u20FF"
    r"\uFE0F"
    r"\u200D"
    "]"
)
_URL_RE = re.compile(r"https?://\S+|www\.\S+")
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_SPACED_EM_DASH_RE = re.compile(r"[^\S\n]+—[^\S\n]*")
_CHARMAP = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "„": '"',
        "‟": '"',
        "‘": "'",
        "’": "'",
        "‚": "'",
        "‛": "'",
        "–": "-",
        "—": "-",
        "−": "-",
        "…": "...",
    }
)
_REPEATED_PUNCT_RE = re.compile(r"([!?.]){2,}")
_SPOKEN_SYMBOLS = (("&", " và "), ("@", " a còng "), ("#", " thăng "), ("_", " "))
_SILENT_SYMBOLS_RE = re.compile(r"[*~`^\\()¯\"]")
_HYPHEN_RE = re.compile(r"[^\S\n]*-[^\S\n]*")
_NON_LATIN_RE = re.compile(r"[^\u0000-\u024F\u1E00-\u1EFF]")
_INLINE_SPACES_RE = re.compile(r"[^\S\n]+")


def normalize_unicode(text: str) -> str:
    """Compose text to NFC so every Vietnamese letter is a single code point."""
    return unicodedata.normalize("NFC", text)


def normalize_punctuation(text: str) -> str:
    """Fold quote, dash and ellipsis variants; a run of ``!?.`` keeps its last mark."""
    text = text.translate(_CHARMAP)
    return _REPEATED_PUNCT_RE.sub(r"\1", text)


def remove_special_chars(text: str) -> str:
    """Speak or drop symbols a synthesizer cannot pronounce."""
    for symbol, spoken in _SPOKEN_SYMBOLS:
        text = text.replace(symbol, spoken)
    return _SILENT_SYMBOLS_RE.sub("", text)


def strip_symbols(text: str) -> str:
    """Remove emoji, links, e-mail addresses and decorative marks.

    Links and addresses go first so their ``@`` and ``_`` are not expanded
    into words. Dashes survive next to a digit, where later stages read
    them as ranges or signs.
    """
    text = _EMOJI_RE.sub("", text)
    text = _URL_RE.sub("", text)
    text = _EMAIL_RE.sub("", text)
    text = _SPACED_EM_DASH_RE.sub(lambda match: _keep_near_digit(match, ". "), text)
    text = normalize_punctuation(text)
    text = remove_special_chars(text)
    text = _HYPHEN_RE.sub(lambda match: _keep_near_digit(match, " "), text)
    return _NON_LATIN_RE.sub("", text)


def clean_whitespace(text: str) -> str:
    """Collapse runs of spaces inside each line and drop blank lines."""
    lines = (_INLINE_SPACES_RE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def _keep_near_digit(match: re.Match[str], replacement: str) -> str:
    # A dash with a digit on either side (spaces allowed) is a range or a sign.
    text = match.string
    before = text[match.start() - 1 : match.start()]
    after = text[match.end() : match.end() + 1]
    if before.isdigit() or after.isdigit():
        return match[0]
    return replacement
