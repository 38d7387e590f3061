"""Noun declension rules, one pure function per declension group.

Every rule takes `(word, case, number, *, gender, animate)` and returns the
inflected form in lower case; the engine restores the input's letter case.
"""
from types import MappingProxyType
from typing import Callable

from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from ..groups import DeclensionGroup
from ..words import key
from . import first, fourth, second, third

Rule = Callable[..., str]


def indeclinable(
    word: str,
    case: GrammaticalCase,
    number: GrammaticalNumber,
    *,
    gender: Gender = Gender.FEMININE,
    animate: bool = False,
) -> str:
    return key(word)


RULES: MappingProxyType[DeclensionGroup, Rule] = MappingProxyType({
    DeclensionGroup.FIRST: first.decline,
    DeclensionGroup.SECOND: second.decline,
    DeclensionGroup.THIRD: third.decline,
    DeclensionGroup.FOURTH: fourth.decline,
    DeclensionGroup.INDECLINABLE: indeclinable,
})

__all__ = ["RULES", "Rule", "first", "second", "third", "fourth", "indeclinable"]
