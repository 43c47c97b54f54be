"""Locale-aware ordering for catalog names.

Approximates the root collation used by browsers: whitespace sorts before
punctuation, punctuation before symbols, symbols before digits, digits before
letters. Letters compare without accents or case first, then by accents, then
lowercase before uppercase.
"""

import unicodedata

# Root collation order of common ASCII punctuation and symbols.
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCTUATION_RANK = {char: rank for rank, char in enumerate(_PUNCTUATION_ORDER)}

_WHITESPACE = 0
_PUNCTUATION = 1
_SYMBOL = 2
_DIGIT = 3
_LETTER = 4


def collation_key(value: str) -> tuple[object, ...]:
    """Return a sort key comparing strings the way a browser locale would."""
    primary: list[tuple[int, int, str]] = []
    secondary: list[str] = []
    tertiary: list[int] = []
    for char in value:
        decomposed = unicodedata.normalize("NFD", char)
        base = decomposed[0]
        marks = "".join(c for c in decomposed[1:] if unicodedata.combining(c))
        primary.append(_primary_weight(base))
        secondary.append(marks)
        tertiary.append(1 if base.isupper() else 0)
    return (tuple(primary), tuple(secondary), tuple(tertiary), value)


def _primary_weight(char: str) -> tuple[int, int, str]:
    if char.isspace():
        return (_WHITESPACE, 0, " ")
    if char in _PUNCTUATION_RANK:
        group = _PUNCTUATION if unicodedata.category(char).startswith("P") else _SYMBOL
        return (group, _PUNCTUATION_RANK[char], char)
    if char.isdigit():
        return (_DIGIT, 0, str(unicodedata.digit(char, 0)))
    if char.isalpha():
        return (_LETTER, 0, char.casefold())
    group = _PUNCTUATION if unicodedata.category(char).startswith("P") else _SYMBOL
    return (group, len(_PUNCTUATION_ORDER) + ord(char), char)
