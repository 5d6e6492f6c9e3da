"""Text normalization stages."""

from vispeak.text.chunker import chunk_text
from vispeak.text.detector import VietnameseWordDetector, is_vietnamese_word
from vispeak.text.numbers import number_to_words
from vispeak.text.numeric import convert_numeric_expressions
from vispeak.text.replacement import LookupTable, Segment
from vispeak.text.symbols import clean_whitespace, normalize_unicode, strip_symbols
from vispeak.text.transliteration import transliterate_text, transliterate_word

__all__ = [
    "LookupTable",
    "Segment",
    "VietnameseWordDetector",
    "chunk_text",
    "clean_whitespace",
    "convert_numeric_expressions",
    "is_vietnamese_word",
    "normalize_unicode",
    "number_to_words",
    "strip_symbols",
    "transliterate_text",
    "transliterate_word",
]
