"""Fourth declension: neuter nouns in -а/-я.

Three classes share the group: baby-animal nouns with the -ят-/-ат-
infix (теля → теляти), the -ен- nouns (ім'я → імені) and abstract -я
nouns whose singular genitive equals the nominative (життя).
"""
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from ..declension import ending
from ..lexicon import ABSTRACT_YA_NOUNS, EN_INFIX_NOUNS, GENITIVE_PLURAL_OVERRIDES, YAT_INFIX_NOUNS
from ..words import SIBILANTS, key

Case = GrammaticalCase
Number = GrammaticalNumber


def is_abstract(word: str) -> bool:
    """Abstract -я noun: lexicon entry, doubled consonant or apostrophe before -я."""
    w = key(word)
    if w in ABSTRACT_YA_NOUNS:
        return True
    if w in YAT_INFIX_NOUNS or w in EN_INFIX_NOUNS or not w.endswith("я"):
        return False
    stem = w[:-1]
    return stem.endswith("'") or (len(stem) > 1 and stem[-1] == stem[-2])


def decline(
    word: str,
    case: GrammaticalCase,
    number: GrammaticalNumber,
    *,
    gender: Gender = Gender.NEUTER,
    animate: bool = False,
) -> str:
    w = key(word)
    if w in EN_INFIX_NOUNS:
        return _en(w, case, number)
    if is_abstract(w):
        return _abstract(w, case, number, animate)
    return _yat(w, case, number, animate)


def _plural_case(case: GrammaticalCase, animate: bool) -> GrammaticalCase:
    if case is Case.ACCUSATIVE:
        return Case.GENITIVE if animate else Case.NOMINATIVE
    if case is Case.VOCATIVE:
        return Case.NOMINATIVE
    return case


def _yat(w: str, case: GrammaticalCase, number: GrammaticalNumber, animate: bool) -> str:
    stem = w[:-1]
    infix = "ат" if stem[-1:] in SIBILANTS else "ят"
    if number is Number.PLURAL:
        case = _plural_case(case, animate)
        return stem + infix + ending("fourth_yat", case, number)
    if case in (Case.NOMINATIVE, Case.ACCUSATIVE, Case.VOCATIVE):
        return w
    if case is Case.INSTRUMENTAL:
        return w + "м"
    return stem + infix + ending("fourth_yat", case, number)


def _en(w: str, case: GrammaticalCase, number: GrammaticalNumber) -> str:
    stem = w[:-1].rstrip("'")
    if number is Number.PLURAL:
        case = _plural_case(case, False)
        return stem + "ен" + ending("fourth_en", case, number)
    if case in (Case.NOMINATIVE, Case.ACCUSATIVE, Case.VOCATIVE):
        return w
    return stem + "ен" + ending("fourth_en", case, number)


def _abstract(w: str, case: GrammaticalCase, number: GrammaticalNumber, animate: bool) -> str:
    stem = w[:-1]
    if number is Number.SINGULAR:
        if case in (Case.DATIVE, Case.LOCATIVE):
            return stem + "ю"
        if case is Case.INSTRUMENTAL:
            return w + "м"
        return w

    case = _plural_case(case, animate)
    if case is Case.GENITIVE:
        if w in GENITIVE_PLURAL_OVERRIDES:
            return GENITIVE_PLURAL_OVERRIDES[w]
        if stem.endswith("'"):
            return stem + "їв"
        if len(stem) > 1 and stem[-1] == stem[-2]:
            stem = stem[:-1]
        return stem if stem[-1:] in SIBILANTS else stem + "ь"
    if case is Case.NOMINATIVE:
        return w
    return w + {Case.DATIVE: "м", Case.INSTRUMENTAL: "ми", Case.LOCATIVE: "х"}[case]
