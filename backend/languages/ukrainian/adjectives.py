"""Adjective declension in agreement with a noun's gender, number and animacy."""
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from .declension import ADJECTIVE_PATTERNS
from .lexicon import ADJECTIVE_ENDINGS, KNOWN_ADJECTIVES
from .words import copy_letter_case, is_iotated, key

Case = GrammaticalCase
Number = GrammaticalNumber

_GENDER_BY_ENDING = (
    (("ий", "ій", "їй"), Gender.MASCULINE),
    (("а", "я"), Gender.FEMININE),
    (("е", "є"), Gender.NEUTER),
)


def is_adjective(word: str) -> bool:
    """Adjective-shaped token: known form, adjective ending or lower-case -ній."""
    w = key(word)
    if w in KNOWN_ADJECTIVES:
        return True
    if len(w) > 3 and w.endswith(ADJECTIVE_ENDINGS):
        return True
    return word.islower() and len(w) > 4 and w.endswith("ній")


def adjective_gender(word: str) -> Gender | None:
    """Gender encoded in an adjective's nominative ending, None for plural forms."""
    w = key(word)
    for endings, gender in _GENDER_BY_ENDING:
        if w.endswith(endings):
            return gender
    return None


def split(word: str) -> tuple[str, str]:
    """Stem and stem type ("hard", "soft" or "iotated") of a nominative adjective."""
    w = key(word)
    if w.endswith("ий"):
        return w[:-2], "hard"
    if w.endswith("їй"):
        return w[:-2], "iotated"
    if w.endswith("ій"):
        return w[:-2], "soft"
    if w.endswith(("а", "е", "і")):
        return w[:-1], "hard"
    if w.endswith(("я", "є")):
        stem = w[:-1]
        return stem, "iotated" if is_iotated(stem) else "soft"
    if w.endswith("ї"):
        return w[:-1], "iotated"
    return w, "hard"


def decline(
    word: str,
    case: GrammaticalCase,
    gender: Gender = Gender.MASCULINE,
    number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
    *,
    animate: bool = False,
) -> str:
    """Inflect an adjective given in any nominative form.

    The accusative follows the noun: animate masculine and plural forms take
    the genitive, inanimate ones the nominative. The vocative equals the
    nominative. The result mirrors the letter case of `word`.
    """
    stem, kind = split(word)
    form = "plural" if number is Number.PLURAL else gender.value
    endings = ADJECTIVE_PATTERNS[kind][form]

    if case is Case.ACCUSATIVE:
        if form == "feminine":
            suffix = endings["accusative"]
        elif form == "neuter":
            suffix = endings["nominative"]
        else:
            suffix = endings["genitive"] if animate else endings["nominative"]
    elif case is Case.VOCATIVE:
        suffix = endings["nominative"]
    else:
        suffix = endings[case.value]

    result = stem + suffix
    if result == key(word):
        return word
    return copy_letter_case(word, result)
