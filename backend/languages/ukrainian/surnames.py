"""Surname and rank exceptions applied before the regular declension rules.

The cascade is first-match-wins:

1. -енко surnames: invariant for women, regular second declension for men
2. Suffix classes with a consonant mutation (-ка, -га, -ха, masculine -ець)
3. Adjectival surnames (-ов/-ев/-єв/-ів, -ова/-ева/-єва, -ський/-ська)
4. Military ranks, including hyphenated compounds (генерал-майор)

`decline_exception` returns None when no exception applies and the word
should go through the regular rules.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from . import adjectives
from .lexicon import ADJECTIVAL_SURNAME_ENDINGS, MILITARY_RANKS, OV_COMMON_WORDS, RANK_PREFIXES
from .words import VOWELS, get_stem, is_capitalized, is_uppercase, key

Case = GrammaticalCase
Number = GrammaticalNumber


@dataclass(frozen=True, slots=True)
class SuffixClass:
    """Surname class: matching suffix, stem derivation and oblique endings."""

    name: str
    suffixes: tuple[str, ...]
    genders: frozenset[Gender]
    stem: Callable[[str], str]
    endings: Mapping[Case, str]
    min_length: int = 0

    def matches(self, w: str, gender: Gender) -> bool:
        return gender in self.genders and len(w) >= self.min_length and w.endswith(self.suffixes)

    def inflect(self, w: str, case: GrammaticalCase) -> str:
        if case is Case.NOMINATIVE:
            return w
        return self.stem(w) + self.endings[case]


def _endings(gen: str, dat: str, acc: str, ins: str, loc: str, voc: str) -> Mapping[Case, str]:
    return MappingProxyType({
        Case.GENITIVE: gen,
        Case.DATIVE: dat,
        Case.ACCUSATIVE: acc,
        Case.INSTRUMENTAL: ins,
        Case.LOCATIVE: loc,
        Case.VOCATIVE: voc,
    })


_ALL = frozenset(Gender)
_MASCULINE = frozenset({Gender.MASCULINE})
_FEMININE = frozenset({Gender.FEMININE})


def _cut(n: int) -> Callable[[str], str]:
    return lambda w: w[:-n]


def _after_vowel(ending: str) -> tuple[str, ...]:
    return tuple(sorted(v + ending for v in VOWELS))


MUTATION_CLASSES = (
    SuffixClass("velar_g", _after_vowel("га"), _ALL, _cut(2), _endings("ги", "зі", "гу", "гою", "зі", "го"), 4),
    SuffixClass("velar_k", _after_vowel("ка"), _ALL, _cut(2), _endings("ки", "ці", "ку", "кою", "ці", "ко"), 4),
    SuffixClass("velar_h", _after_vowel("ха"), _ALL, _cut(2), _endings("хи", "сі", "ху", "хою", "сі", "хо"), 4),
    SuffixClass("ets", ("ець",), _MASCULINE, get_stem, _endings("я", "ю", "я", "ем", "еві", "ю"), 5),
)

ADJECTIVAL_CLASSES = (
    SuffixClass(
        "ov_masculine", ("ов", "ев", "єв", "ів", "їв"), _MASCULINE, _cut(1),
        _endings("ва", "ву", "ва", "вим", "ву", "ве"), 5,
    ),
    SuffixClass(
        "ova_feminine", ("ова", "ева", "єва", "іва"), _FEMININE, _cut(1),
        _endings("ої", "ій", "у", "ою", "ій", "а"), 5,
    ),
)


def is_rank(word: str) -> bool:
    """Rank word or hyphenated rank compound (генерал-майор, штаб-сержант)."""
    w = key(word)
    if w in MILITARY_RANKS:
        return True
    head, _, last = w.rpartition("-")
    return bool(head) and last in MILITARY_RANKS and head.split("-")[0] in RANK_PREFIXES | set(MILITARY_RANKS)


def decline_rank(word: str, case: GrammaticalCase) -> str:
    """Singular form of a rank; hyphenated compounds inflect the last segment."""
    w = key(word)
    head, sep, last = w.rpartition("-")
    cut, endings = MILITARY_RANKS[last]
    if case is Case.NOMINATIVE:
        return w
    base = last[:-cut] if cut else last
    return head + sep + base + endings[case]


def decline_exception(
    word: str,
    case: GrammaticalCase,
    number: GrammaticalNumber,
    gender: Gender,
) -> str | None:
    """Form produced by the surname/rank cascade, or None to use the regular rules."""
    w = key(word)
    singular = number is Number.SINGULAR

    if w.endswith("енко"):
        return w if gender is Gender.FEMININE else None

    if singular and is_capitalized(word):
        for suffix_class in MUTATION_CLASSES + ADJECTIVAL_CLASSES:
            if not suffix_class.matches(w, gender):
                continue
            if w in OV_COMMON_WORDS:
                continue
            if case is Case.VOCATIVE and is_uppercase(word):
                return w
            return suffix_class.inflect(w, case)

    if w.endswith(ADJECTIVAL_SURNAME_ENDINGS):
        adj_gender = Gender.FEMININE if w.endswith("а") else Gender.MASCULINE
        return adjectives.decline(word, case, adj_gender, number, animate=True)

    if singular and is_rank(w):
        return decline_rank(w, case)
    return None
