"""Gender and animacy inference for bare words."""
from languages.types import Gender

from .lexicon import (
    ANIMATE_NOUNS,
    FEMININE_WORDS,
    MASCULINE_WORDS,
    MILITARY_RANKS,
    NEUTER_WORDS,
    PATRONYMIC_ENDINGS,
    YAT_INFIX_NOUNS,
)
from .words import is_capitalized, key


def guess_gender(word: str) -> Gender:
    """Guess grammatical gender from lexical exceptions, then the ending.

    -а/-я → feminine, -о/-е → neuter, anything else → masculine. A
    capitalized -о word is taken for a masculine name (Тарасенко).
    """
    w = key(word)
    if w in MASCULINE_WORDS:
        return Gender.MASCULINE
    if w in FEMININE_WORDS:
        return Gender.FEMININE
    if w in NEUTER_WORDS:
        return Gender.NEUTER
    if w.endswith(("а", "я")):
        return Gender.FEMININE
    if w.endswith("о") and is_capitalized(word):
        return Gender.MASCULINE
    if w.endswith(("о", "е")):
        return Gender.NEUTER
    return Gender.MASCULINE


def infer_animacy(word: str) -> bool:
    """Lexicon entries, ranks, patronymics and capitalized names are animate."""
    w = key(word)
    if w in ANIMATE_NOUNS or w in YAT_INFIX_NOUNS or w in MILITARY_RANKS:
        return True
    if w.endswith(PATRONYMIC_ENDINGS):
        return True
    return is_capitalized(word)
