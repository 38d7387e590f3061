"""Second declension: masculine nouns in a consonant or -о, neuter in -о/-е.

Masculine nouns in -ий are substantivized adjectives (черговий,
вартовий) and go through the adjective declensioner.
"""
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from .. import adjectives
from ..declension import ending
from ..groups import NounSubgroup
from ..lexicon import (
    GENITIVE_PLURAL_OVERRIDES,
    PATRONYMIC_ENDINGS,
    SOFT_R_NOUNS,
    VOCATIVE_OVERRIDES,
)
from ..words import SIBILANTS, get_stem, is_iotated, is_uppercase, key, palatalize

Case = GrammaticalCase
Number = GrammaticalNumber

_VELARS = ("г", "к", "х")


def subgroup(word: str, gender: Gender) -> NounSubgroup:
    w = key(word)
    last = w[-1:]
    if gender is Gender.NEUTER:
        if last == "е":
            return NounSubgroup.MIXED if w[-2:-1] in SIBILANTS else NounSubgroup.SOFT
        return NounSubgroup.HARD
    if w in SOFT_R_NOUNS:
        return NounSubgroup.SOFT
    if last in SIBILANTS or w.endswith("яр"):
        return NounSubgroup.MIXED
    if last in ("ь", "й"):
        return NounSubgroup.SOFT
    return NounSubgroup.HARD


def stem_of(word: str) -> str:
    w = key(word)
    if w.endswith(("о", "е")):
        return w[:-1]
    return get_stem(w)


def pattern_id(word: str, gender: Gender) -> str:
    sub = subgroup(word, gender)
    if gender is Gender.NEUTER:
        return f"second_neuter_{sub.value}"
    if sub is NounSubgroup.SOFT and is_iotated(stem_of(word)):
        return "second_masculine_soft_iotated"
    return f"second_masculine_{sub.value}"


def decline(
    word: str,
    case: GrammaticalCase,
    number: GrammaticalNumber,
    *,
    gender: Gender = Gender.MASCULINE,
    animate: bool = False,
) -> str:
    w = key(word)
    if gender is not Gender.NEUTER and w.endswith("ий"):
        return adjectives.decline(word, case, Gender.MASCULINE, number, animate=animate)

    base = stem_of(w)
    sub = subgroup(w, gender)
    pattern = pattern_id(w, gender)

    if number is Number.PLURAL:
        return _plural(w, base, pattern, case, animate)
    if gender is Gender.NEUTER:
        return _neuter_singular(w, base, sub, pattern, case)
    return _masculine_singular(word, w, base, sub, pattern, case, animate)


def _plural(w: str, base: str, pattern: str, case: GrammaticalCase, animate: bool) -> str:
    number = Number.PLURAL
    if case is Case.GENITIVE or (case is Case.ACCUSATIVE and animate):
        if w in GENITIVE_PLURAL_OVERRIDES:
            return GENITIVE_PLURAL_OVERRIDES[w]
        return base + ending(pattern, Case.GENITIVE, number)
    if case in (Case.ACCUSATIVE, Case.VOCATIVE):
        case = Case.NOMINATIVE
    return base + ending(pattern, case, number)


def _neuter_singular(
    w: str, base: str, sub: NounSubgroup, pattern: str, case: GrammaticalCase
) -> str:
    if case in (Case.NOMINATIVE, Case.ACCUSATIVE, Case.VOCATIVE):
        return w
    if case is Case.LOCATIVE and sub is NounSubgroup.HARD:
        return palatalize(base) + "і"
    return base + ending(pattern, case, Number.SINGULAR)


def _masculine_singular(
    word: str,
    w: str,
    base: str,
    sub: NounSubgroup,
    pattern: str,
    case: GrammaticalCase,
    animate: bool,
) -> str:
    if case is Case.NOMINATIVE:
        return w
    if case is Case.ACCUSATIVE:
        if not animate:
            return w
        case = Case.GENITIVE
    if case is Case.LOCATIVE:
        return _masculine_locative(word, w, base, sub, pattern, animate)
    if case is Case.VOCATIVE:
        return _masculine_vocative(word, w, base, sub, pattern)
    return base + ending(pattern, case, Number.SINGULAR)


def _masculine_locative(
    word: str, w: str, base: str, sub: NounSubgroup, pattern: str, animate: bool
) -> str:
    if w.endswith(PATRONYMIC_ENDINGS) or w.endswith("енко") or is_uppercase(word):
        return base + ("ю" if sub is NounSubgroup.SOFT else "у")
    if not animate:
        if sub is NounSubgroup.HARD:
            return base + "у" if base.endswith("к") else palatalize(base) + "і"
        if sub is NounSubgroup.SOFT and is_iotated(base):
            return base + "ї"
        return base + "і"
    if sub is NounSubgroup.HARD and base.endswith("ик"):
        return base + "у"
    if sub is NounSubgroup.MIXED and base.endswith("ч"):
        return base + "у"
    return base + ending(pattern, Case.LOCATIVE, Number.SINGULAR)


def _masculine_vocative(
    word: str, w: str, base: str, sub: NounSubgroup, pattern: str
) -> str:
    if w in VOCATIVE_OVERRIDES:
        return VOCATIVE_OVERRIDES[w]
    if is_uppercase(word):
        return w
    if w.endswith(PATRONYMIC_ENDINGS):
        return base + "у"
    if sub is NounSubgroup.HARD:
        return base + ("у" if base.endswith(_VELARS) else "е")
    if sub is NounSubgroup.MIXED and base.endswith("р"):
        return base + "е"
    return base + ending(pattern, Case.VOCATIVE, Number.SINGULAR)
