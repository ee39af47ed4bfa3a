"""
Supported Languages

Each language carries its ISO 639-1 code and the alphabet whose letters
are kept when its n-gram models are built.
"""

from enum import Enum

from . import alphabet as alphabets
from .alphabet import Alphabet


class Language(Enum):
    """Languages with the alphabet their models are built from."""
    ARABIC = ("ar", alphabets.ARABIC)
    ARMENIAN = ("hy", alphabets.ARMENIAN)
    BENGALI = ("bn", alphabets.BENGALI)
    BULGARIAN = ("bg", alphabets.CYRILLIC)
    CHINESE = ("zh", alphabets.HAN)
    CZECH = ("cs", alphabets.LATIN)
    DANISH = ("da", alphabets.LATIN)
    DUTCH = ("nl", alphabets.LATIN)
    ENGLISH = ("en", alphabets.LATIN)
    FINNISH = ("fi", alphabets.LATIN)
    FRENCH = ("fr", alphabets.LATIN)
    GEORGIAN = ("ka", alphabets.GEORGIAN)
    GERMAN = ("de", alphabets.LATIN)
    GREEK = ("el", alphabets.GREEK)
    GUJARATI = ("gu", alphabets.GUJARATI)
    HEBREW = ("he", alphabets.HEBREW)
    HINDI = ("hi", alphabets.DEVANAGARI)
    HUNGARIAN = ("hu", alphabets.LATIN)
    IRISH = ("ga", alphabets.LATIN)
    ITALIAN = ("it", alphabets.LATIN)
    KOREAN = ("ko", alphabets.HANGUL)
    MARATHI = ("mr", alphabets.DEVANAGARI)
    POLISH = ("pl", alphabets.LATIN)
    PORTUGUESE = ("pt", alphabets.LATIN)
    PUNJABI = ("pa", alphabets.GURMUKHI)
    RUSSIAN = ("ru", alphabets.CYRILLIC)
    SPANISH = ("es", alphabets.LATIN)
    SWEDISH = ("sv", alphabets.LATIN)
    TAMIL = ("ta", alphabets.TAMIL)
    TELUGU = ("te", alphabets.TELUGU)
    THAI = ("th", alphabets.THAI)
    TURKISH = ("tr", alphabets.LATIN)
    UKRAINIAN = ("uk", alphabets.CYRILLIC)

    def __init__(self, iso_code: str, alphabet: Alphabet):
        self.iso_code = iso_code
        self.alphabet = alphabet

    @classmethod
    def from_iso_code(cls, iso_code: str) -> 'Language':
        code = iso_code.strip().lower()
        for language in cls:
            if language.iso_code == code:
                return language
        raise ValueError(f"Unknown ISO 639-1 language code: '{iso_code}'")
