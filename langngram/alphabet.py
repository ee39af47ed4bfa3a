"""
Alphabet Filters

An alphabet filter is any per-character predicate. The model builders only
call it; they never look inside. This module provides script-based filters
built on Unicode script properties of the ``regex`` library.
"""

from typing import Dict, Tuple

import regex


# Letters and the marks (vowel signs, viramas) that combine with them
_LETTER_OR_MARK = regex.compile(r"[\p{L}\p{M}]")


def any_letter(char: str) -> bool:
    """Admit every Unicode letter and combining mark."""
    return _LETTER_OR_MARK.fullmatch(char) is not None


class Alphabet:
    """
    Letters (and combining marks) of one writing system.

    A character belongs to the alphabet when it is a letter or a mark
    (``\\p{L}`` or ``\\p{M}``) whose Unicode Script property is ``script``,
    e.g. ``\\p{Script=Latin}``.

    Attributes:
        name: Human readable script name
        script: Unicode Script property value
    """

    _registry: Dict[str, 'Alphabet'] = {}

    def __init__(self, name: str, script: str = None):
        self.name = name
        self.script = script or name
        self._pattern = regex.compile(
            rf"(?V1)[[\p{{L}}\p{{M}}]&&\p{{Script={self.script}}}]"
        )
        Alphabet._registry[name.lower()] = self

    def __call__(self, char: str) -> bool:
        return self.matches(char)

    def __repr__(self) -> str:
        return f"Alphabet({self.name!r})"

    def __reduce__(self):
        return (Alphabet.by_name, (self.name,))

    def matches(self, char: str) -> bool:
        return self._pattern.fullmatch(char) is not None

    def matches_text(self, text: str) -> bool:
        """Return True if every character of a non-empty text is in this alphabet."""
        return bool(text) and all(self.matches(char) for char in text)

    @classmethod
    def by_name(cls, name: str) -> 'Alphabet':
        try:
            return cls._registry[name.lower()]
        except KeyError:
            available = ", ".join(sorted(cls._registry))
            raise ValueError(f"Unknown alphabet: '{name}'. Available: {available}") from None

    @classmethod
    def all(cls) -> Tuple['Alphabet', ...]:
        return tuple(cls._registry.values())


LATIN = Alphabet("Latin")
CYRILLIC = Alphabet("Cyrillic")
GREEK = Alphabet("Greek")
ARABIC = Alphabet("Arabic")
HEBREW = Alphabet("Hebrew")
ARMENIAN = Alphabet("Armenian")
GEORGIAN = Alphabet("Georgian")
DEVANAGARI = Alphabet("Devanagari")
BENGALI = Alphabet("Bengali")
GUJARATI = Alphabet("Gujarati")
GURMUKHI = Alphabet("Gurmukhi")
TAMIL = Alphabet("Tamil")
TELUGU = Alphabet("Telugu")
THAI = Alphabet("Thai")
HAN = Alphabet("Han")
HIRAGANA = Alphabet("Hiragana")
KATAKANA = Alphabet("Katakana")
HANGUL = Alphabet("Hangul")
