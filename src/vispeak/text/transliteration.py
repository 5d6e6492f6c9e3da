"""Rule-based transliteration of foreign words into Vietnamese spelling.

A word is rewritten by three ordered rule tiers: high-priority clusters,
word-final rhymes, then single letters. The result is split into syllables
and every syllable goes through the same three tiers again, because a rhyme
that used to sit mid-word now ends a syllable. Each syllable is then
repaired into a Vietnamese-looking shape and the syllables are joined with
``-``.
"""

from __future__ import annotations

import re

from vispeak.text.detector import DEFAULT_DETECTOR, VietnameseWordDetector

Rule = tuple[re.Pattern[str], str]

SYLLABLE_SEPARATOR = "-"

_VOWELS = (
    "aeiouăâêôơư"
    "áàảãạắằẳẵặấầẩẫậéèẻẽẹếềểễệíìỉĩịóòỏõọốồổỗộớờởỡợúùủũụứừửữựýỳỷỹỵ"
)
_CONSONANTS = "bcdfghjklmnpqrstvwxz"
_VALID_PAIRS = frozenset({"ch", "th", "ph", "sh", "ng", "tr", "nh", "gh", "kh"})
_VALID_FINALS = frozenset("ptcmngs")
_SOFT_K_VOWELS = frozenset("iey")

_SYLLABLE_RE = re.compile(rf"([^{_VOWELS}]*[{_VOWELS}]+[ptcmngs]?(?![{_VOWELS}]))")
_DOUBLED_CONSONANT_RE = re.compile(r"([brlptdgmnckxsvfzjwqh])\1+")
_Y_AFTER_CONSONANT_RE = re.compile(rf"([{_CONSONANTS}])y")
_FINAL_Y_RE = re.compile(r"y$")
_WORD_RE = re.compile(r"[^\W\d_]+")


def _compile(rules: tuple[tuple[str, str], ...]) -> tuple[Rule, ...]:
    # ASCII word boundaries: "đ" must not count as a word character.
    return tuple((re.compile(pattern, re.ASCII), replacement) for pattern, replacement in rules)


HIGH_PRIORITY_RULES = _compile(
    (
        (r"tion$", "ân"),
        (r"sion$", "ân"),
        (r"age$", "ây"),
        (r"ture$", "chờ"),
        (r"cial$", "xô"),
        (r"tial$", "xô"),
        (r"aught", "ót"),
        (r"ought", "ót"),
        (r"ound", "ao"),
        (r"ight", "ai"),
        (r"eigh", "ây"),
        (r"ough", "ao"),
        (r"\bst(?!r)", "t"),
        (r"\bstr", "tr"),
        (r"\bsch", "c"),
        (r"\bsc(?=h)", "c"),
        (r"\bsc|sk", "c"),
        (r"\bsp", "p"),
        (r"\bbr", "r"),
        (r"\bcr|pr|gr|dr|fr", "r"),
        (r"\bbl|cl|sl|pl", "l"),
        (r"\bfl", "ph"),
        (r"ck", "c"),
        (r"sh", "s"),
        (r"wh", "q"),
        (r"qu", "q"),
        (r"kn", "n"),
        (r"wr", "r"),
    )
)

# Endings that are already Vietnamese rhymes (ang, om, oi, ...) have no rule.
ENDING_RULES = _compile(
    (
        (r"le$", "ồ"),
        (r"ook$", "úc"),
        (r"ood$", "út"),
        (r"ool$", "un"),
        (r"oom$", "um"),
        (r"oon$", "un"),
        (r"oot$", "út"),
        (r"iend$", "en"),
        (r"end$", "en"),
        (r"eau$", "iu"),
        (r"ail$", "ain"),
        (r"ait$", "ât"),
        (r"oat$", "ốt"),
        (r"oad$", "ốt"),
        (r"oal$", "ôn"),
        (r"eep$", "íp"),
        (r"eet$", "ít"),
        (r"eel$", "in"),
        (r"atch$", "át"),
        (r"etch$", "éch"),
        (r"itch$", "ích"),
        (r"otch$", "ốt"),
        (r"utch$", "út"),
        (r"edge$", "ét"),
        (r"idge$", "ít"),
        (r"odge$", "ót"),
        (r"udge$", "út"),
        (r"ack$", "ác"),
        (r"eck$", "éc"),
        (r"ick$", "ích"),
        (r"ock$", "óc"),
        (r"uck$", "úc"),
        (r"ash$", "át"),
        (r"esh$", "ét"),
        (r"ish$", "ít"),
        (r"osh$", "ốt"),
        (r"ush$", "út"),
        (r"ath$", "át"),
        (r"eth$", "ét"),
        (r"ith$", "ít"),
        (r"oth$", "ót"),
        (r"uth$", "út"),
        (r"ate$", "ây"),
        (r"ete$", "ét"),
        (r"ite$", "ai"),
        (r"ote$", "ốt"),
        (r"ute$", "út"),
        (r"ade$", "ây"),
        (r"ede$", "ét"),
        (r"ide$", "ai"),
        (r"ode$", "ốt"),
        (r"ude$", "út"),
        (r"ake$", "ây"),
        (r"ame$", "am"),
        (r"ane$", "an"),
        (r"ape$", "ếp"),
        (r"eke$", "ét"),
        (r"eme$", "êm"),
        (r"ene$", "en"),
        (r"ike$", "íc"),
        (r"ime$", "am"),
        (r"ine$", "ai"),
        (r"oke$", "ốc"),
        (r"ome$", "om"),
        (r"one$", "oăn"),
        (r"uke$", "ấc"),
        (r"ume$", "uym"),
        (r"une$", "uyn"),
        (r"ase$", "ây"),
        (r"ise$", "ai"),
        (r"ose$", "âu"),
        (r"all$", "âu"),
        (r"ell$", "eo"),
        (r"ill$", "iu"),
        (r"oll$", "ôn"),
        (r"ull$", "un"),
        (r"eng$", "ing"),
        (r"ung$", "âng"),
        (r"air$", "e"),
        (r"ear$", "ia"),
        (r"ire$", "ai"),
        (r"ure$", "iu"),
        (r"our$", "ao"),
        (r"ore$", "o"),
        (r"ork$", "ót"),
        (r"ee$", "i"),
        (r"ea$", "i"),
        (r"oo$", "u"),
        (r"aw$", "â"),
        (r"ei$", "ây"),
        (r"ey$", "ây"),
        (r"oy$", "oi"),
        (r"ou$", "u"),
        (r"ow$", "ô"),
        (r"ie$", "ai"),
        (r"eu$", "iu"),
        (r"ar$", "a"),
        (r"er$", "ơ"),
        (r"ir$", "ơ"),
        (r"or$", "o"),
        (r"ur$", "ơ"),
        (r"al$", "an"),
        (r"el$", "eo"),
        (r"il$", "iu"),
        (r"ol$", "ôn"),
        (r"ul$", "un"),
        (r"ab$", "áp"),
        (r"ad$", "át"),
        (r"ag$", "ác"),
        (r"ak$", "át"),
        (r"ap$", "áp"),
        (r"at$", "át"),
        (r"eb$", "ép"),
        (r"ed$", "ét"),
        (r"eg$", "ét"),
        (r"ek$", "éc"),
        (r"ep$", "ép"),
        (r"et$", "ét"),
        (r"ib$", "íp"),
        (r"id$", "ít"),
        (r"ig$", "íc"),
        (r"ik$", "íc"),
        (r"ip$", "íp"),
        (r"it$", "ít"),
        (r"ob$", "óp"),
        (r"od$", "ót"),
        (r"og$", "óc"),
        (r"ok$", "óc"),
        (r"op$", "óp"),
        (r"ot$", "ót"),
        (r"ub$", "úp"),
        (r"ud$", "út"),
        (r"ug$", "úc"),
        (r"uk$", "úc"),
        (r"up$", "úp"),
        (r"ut$", "út"),
        (r"um$", "âm"),
        (r"un$", "ân"),
        (r"as$", "ẹt"),
        (r"es$", "ẹt"),
        (r"is$", "ít"),
        (r"os$", "ọt"),
        (r"us$", "ợt"),
        (r"aa$", "a"),
        (r"ii$", "i"),
        (r"uu$", "u"),
    )
)

GENERAL_RULES = _compile(
    (
        (r"j", "d"),
        (r"z", "d"),
        (r"w", "u"),
        (r"f", "ph"),
        (r"s", "x"),
        (r"c", "k"),
        (r"q", "ku"),
    )
)

RULE_TIERS = (HIGH_PRIORITY_RULES, ENDING_RULES, GENERAL_RULES)


def _rewrite_leading_letters(token: str) -> str:
    if token.startswith("y"):
        token = "d" + token[1:]
    if token.startswith("d"):
        token = "đ" + token[1:]
    return token


def _apply_rule_tiers(token: str) -> str:
    for tier in RULE_TIERS:
        for pattern, replacement in tier:
            token = pattern.sub(replacement, token)
    token = _Y_AFTER_CONSONANT_RE.sub(r"\1i", token)
    return _FINAL_Y_RE.sub("i", token)


def _resolve_consonant_pairs(syllable: str) -> str:
    out: list[str] = []
    index = 0
    while index < len(syllable):
        pair = syllable[index : index + 2]
        if len(pair) == 2 and pair[0] in _CONSONANTS and pair[1] in _CONSONANTS:
            out.append(pair if pair in _VALID_PAIRS else pair[1])
            index += 2
        else:
            out.append(syllable[index])
            index += 1
    return "".join(out)


def _repair_syllable(syllable: str) -> str:
    syllable = syllable.strip()
    if not syllable:
        return ""

    syllable = _DOUBLED_CONSONANT_RE.sub(r"\1", syllable)
    syllable = _resolve_consonant_pairs(syllable)

    if not syllable.startswith(("ch", "th", "ph", "sh")) and syllable.startswith(("k", "c")):
        hard = "k" if syllable[1:2] in _SOFT_K_VOWELS else "c"
        syllable = hard + syllable[1:]

    last = syllable[-1]
    if len(syllable) > 1 and last not in _VOWELS and last not in _VALID_FINALS:
        syllable = syllable[:-1] + ("n" if last == "l" else "")
    return syllable


def english_to_vietnamese(word: str) -> str:
    """Transliterate ``word`` without asking whether it is already Vietnamese."""
    if not word:
        return ""

    token = _apply_rule_tiers(_rewrite_leading_letters(word.lower().strip()))
    syllables = _SYLLABLE_RE.findall(token)
    if not syllables:
        return token

    rewritten = []
    for syllable in syllables:
        syllable = syllable.strip()
        if syllable:
            syllable = _apply_rule_tiers(_rewrite_leading_letters(syllable))
        rewritten.append(_repair_syllable(syllable))
    return SYLLABLE_SEPARATOR.join(part for part in rewritten if part)


def transliterate_word(
    word: str, detector: VietnameseWordDetector = DEFAULT_DETECTOR
) -> str:
    """Return ``word`` unchanged if it reads as Vietnamese, otherwise transliterate it."""
    if not isinstance(word, str) or not word:
        return ""
    if detector.is_vietnamese(word):
        return word
    return english_to_vietnamese(word)


def transliterate_text(
    text: str, detector: VietnameseWordDetector = DEFAULT_DETECTOR
) -> str:
    """Transliterate every alphabetic run in ``text``, leaving everything else in place."""
    if not isinstance(text, str) or not text:
        return ""
    return _WORD_RE.sub(lambda match: transliterate_word(match[0], detector), text)
