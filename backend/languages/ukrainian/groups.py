"""Declension group identification.

Priority order:
1. Feminine indeclinable surnames (-о endings, lexicon, capitalized
   consonant-final surnames) → INDECLINABLE
2. Neuter -а/-я → FOURTH
3. Any other -а/-я → FIRST
4. Feminine consonant-final (and мати) → THIRD
5. Masculine or neuter → SECOND
6. Anything else raises UnsupportedWordError
"""
from enum import Enum

from languages.types import Gender

from .errors import UnsupportedWordError
from .lexicon import (
    FEMININE_SURNAME_CONSONANT_ENDINGS,
    FEMININE_WORDS,
    INDECLINABLE_FEMININE_ENDINGS,
    INDECLINABLE_FEMININE_SURNAMES,
    THIRD_DECLENSION_VOWEL_WORDS,
)
from .words import is_capitalized, is_vowel, key


class DeclensionGroup(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    INDECLINABLE = 0


class NounSubgroup(Enum):
    HARD = "hard"
    SOFT = "soft"
    MIXED = "mixed"


def is_indeclinable_feminine(word: str) -> bool:
    """Feminine surnames that do not change: Шевченко, Голуб, Пінчук."""
    w = key(word)
    if w.endswith(INDECLINABLE_FEMININE_ENDINGS) or w in INDECLINABLE_FEMININE_SURNAMES:
        return True
    return (
        is_capitalized(word)
        and w not in FEMININE_WORDS
        and w.endswith(FEMININE_SURNAME_CONSONANT_ENDINGS)
    )


def identify_group(word: str, gender: Gender) -> DeclensionGroup:
    """Map (word, gender) to a declension group or raise UnsupportedWordError."""
    w = key(word)
    last = w[-1:]

    if gender is Gender.FEMININE and is_indeclinable_feminine(word):
        return DeclensionGroup.INDECLINABLE
    if gender is Gender.NEUTER and last in ("а", "я"):
        return DeclensionGroup.FOURTH
    if last in ("а", "я"):
        return DeclensionGroup.FIRST
    if gender is Gender.FEMININE:
        if w in THIRD_DECLENSION_VOWEL_WORDS or (last.isalpha() and not is_vowel(last)):
            return DeclensionGroup.THIRD
        raise UnsupportedWordError(word, gender)
    if gender in (Gender.MASCULINE, Gender.NEUTER) and any(c.isalpha() for c in w):
        return DeclensionGroup.SECOND
    raise UnsupportedWordError(word, gender)
