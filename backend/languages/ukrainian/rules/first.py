"""First declension: nouns in -а/-я of any gender except neuter."""
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from ..declension import ending
from ..groups import NounSubgroup
from ..lexicon import GENITIVE_PLURAL_OVERRIDES, SOFT_VOCATIVE_NAMES
from ..words import SIBILANTS, is_iotated, key, palatalize

Case = GrammaticalCase
Number = GrammaticalNumber


def subgroup(word: str) -> NounSubgroup:
    w = key(word)
    before = w[-2:-1]
    if before in SIBILANTS:
        return NounSubgroup.MIXED
    if w.endswith("я") or before == "ь":
        return NounSubgroup.SOFT
    return NounSubgroup.HARD


def pattern_id(word: str) -> str:
    sub = subgroup(word)
    if sub is NounSubgroup.SOFT:
        return "first_soft_iotated" if is_iotated(key(word)[:-1]) else "first_soft"
    return f"first_{sub.value}"


def decline(
    word: str,
    case: GrammaticalCase,
    number: GrammaticalNumber,
    *,
    gender: Gender = Gender.FEMININE,
    animate: bool = False,
) -> str:
    w = key(word)
    stem = w[:-1]
    pattern = pattern_id(w)

    if number is Number.PLURAL:
        if case is Case.GENITIVE or (case is Case.ACCUSATIVE and animate):
            if w in GENITIVE_PLURAL_OVERRIDES:
                return GENITIVE_PLURAL_OVERRIDES[w]
            return stem + ending(pattern, Case.GENITIVE, number)
        if case in (Case.ACCUSATIVE, Case.VOCATIVE):
            case = Case.NOMINATIVE
        return stem + ending(pattern, case, number)

    if case is Case.NOMINATIVE:
        return w
    if case in (Case.DATIVE, Case.LOCATIVE) and pattern == "first_hard":
        return palatalize(stem) + ending(pattern, case, number)
    if case is Case.VOCATIVE and w in SOFT_VOCATIVE_NAMES:
        return stem + "ю"
    return stem + ending(pattern, case, number)
