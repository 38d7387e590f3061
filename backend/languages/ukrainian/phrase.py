"""Multi-word phrase declension.

A phrase is classified into one of four shapes, checked in order:

- position: a duty or position description (командир роти). Only the
  leading title words inflect; the dependent words already stand in an
  oblique case.
- rank_name: a rank followed by SURNAME First-name Patronymic.
- bare_name: two or three name tokens ending in a patronymic.
- generic: everything else; adjectives agree with the following noun
  and words after a preposition are left in the case it governs.
"""
import re
from enum import Enum
from typing import TYPE_CHECKING

from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from . import adjectives
from .gender import guess_gender, infer_animacy
from .lexicon import (
    CONJUNCTIONS,
    FEMININE_PATRONYMIC_ENDINGS,
    MASCULINE_PATRONYMIC_ENDINGS,
    MILITARY_RANKS,
    PATRONYMIC_ENDINGS,
    POSITION_MODIFIERS,
    POSITION_NOUNS,
    POSITION_TITLES,
    PREPOSITIONS,
    RANK_PREFIXES,
    SINGLE_WORD_RANKS,
    TWO_WORD_RANKS,
    UNIT_WORDS_PATTERN,
)
from .words import is_capitalized, is_title_case, is_uppercase, key, split_affixes

if TYPE_CHECKING:
    from .engine import Declensioner

_UNIT_CODE = re.compile(r"^[A-ZА-ЯІЇЄҐ]\d+$")
_UNIT_WORDS = re.compile(UNIT_WORDS_PATTERN, re.IGNORECASE)


class PhraseShape(str, Enum):
    POSITION = "position"
    RANK_NAME = "rank_name"
    BARE_NAME = "bare_name"
    GENERIC = "generic"


def _core(token: str) -> str:
    return split_affixes(token)[1]


def is_patronymic(token: str) -> bool:
    w = key(token)
    return len(w) > 4 and w.endswith(PATRONYMIC_ENDINGS)


def infer_phrase_gender(tokens: list[str]) -> Gender:
    """Gender from a patronymic anywhere in the phrase, else from the last token."""
    for token in tokens:
        w = key(_core(token))
        if len(w) > 4 and w.endswith(MASCULINE_PATRONYMIC_ENDINGS):
            return Gender.MASCULINE
        if len(w) > 4 and w.endswith(FEMININE_PATRONYMIC_ENDINGS):
            return Gender.FEMININE
    last = _core(tokens[-1]) if tokens else ""
    return guess_gender(last) if last else Gender.MASCULINE


def rank_length(words: list[str]) -> int:
    """Number of leading tokens forming a rank: 2, 1 or 0."""
    if len(words) > 1 and (words[0], words[1]) in TWO_WORD_RANKS:
        return 2
    if words and words[0] in SINGLE_WORD_RANKS:
        return 1
    return 0


def has_full_name(tokens: list[str], start: int) -> bool:
    """SURNAME First-name Patronymic occupying tokens[start:] exactly."""
    name = [_core(t) for t in tokens[start:]]
    if len(name) != 3:
        return False
    surname, first, patronymic = name
    return (
        is_uppercase(surname)
        and is_title_case(first)
        and not is_patronymic(first)
        and is_patronymic(patronymic)
    )


def _is_position(tokens: list[str], words: list[str]) -> bool:
    ranks = rank_length(words)
    if ranks:
        return not any(is_capitalized(_core(t)) for t in tokens[ranks:])
    first = words[0]
    if first in POSITION_TITLES:
        return True
    if len(words) > 1:
        second = words[1]
        if first in POSITION_MODIFIERS or adjectives.is_adjective(first):
            if second in POSITION_TITLES or second in POSITION_NOUNS:
                return True
    return bool(_UNIT_WORDS.search(" ".join(words)))


def position_head_length(words: list[str]) -> int:
    """Number of leading tokens that inflect in a position description.

    0 means no inflecting head was found and the phrase is not a position.
    """
    ranks = rank_length(words)
    if ranks:
        return ranks
    first = words[0]
    if first in POSITION_MODIFIERS or adjectives.is_adjective(first):
        if len(words) > 1:
            second = words[1]
            if second in POSITION_TITLES or second in POSITION_NOUNS or second in MILITARY_RANKS:
                return 2
            if first not in POSITION_TITLES:
                return 2
        return 1
    if first in POSITION_TITLES:
        return 1
    for i in range(1, len(words)):
        if _UNIT_WORDS.match(" ".join(words[i:])):
            return i
    return 0


def _is_bare_name(tokens: list[str]) -> bool:
    cores = [_core(t) for t in tokens]
    return 2 <= len(cores) <= 3 and all(is_capitalized(c) for c in cores) and is_patronymic(cores[-1])


def classify_phrase(tokens: list[str]) -> PhraseShape:
    """Shape of a phrase given as whitespace-split tokens."""
    if not tokens:
        return PhraseShape.GENERIC
    words = [key(_core(t)) for t in tokens]
    ranks = rank_length(words)
    if ranks and has_full_name(tokens, ranks):
        return PhraseShape.RANK_NAME
    if _is_position(tokens, words) and position_head_length(words) > 0:
        return PhraseShape.POSITION
    if _is_bare_name(tokens):
        return PhraseShape.BARE_NAME
    return PhraseShape.GENERIC


def _should_skip(core: str) -> bool:
    if len(core) <= 2 or not any(c.isalpha() for c in core):
        return True
    return bool(_UNIT_CODE.match(core)) or key(core) in CONJUNCTIONS


class PhraseDeclensioner:
    """Inflects phrases token by token through a word-level Declensioner."""

    __slots__ = ("_engine",)

    def __init__(self, engine: "Declensioner"):
        self._engine = engine

    def decline(
        self,
        text: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
    ) -> str:
        tokens = text.split()
        shape = classify_phrase(tokens)
        phrase_gender = gender or infer_phrase_gender(tokens)

        if shape is PhraseShape.POSITION:
            out = self._position(tokens, case, number)
        elif shape is PhraseShape.RANK_NAME:
            out = self._rank_name(tokens, case, number, phrase_gender)
        elif shape is PhraseShape.BARE_NAME:
            out = [self._token(t, case, number, phrase_gender, True) for t in tokens]
        else:
            out = self._generic(tokens, case, number, phrase_gender, explicit=gender is not None)
        return " ".join(out)

    def _token(
        self,
        token: str,
        case: GrammaticalCase,
        number: GrammaticalNumber,
        gender: Gender,
        animate: bool,
    ) -> str:
        return self._engine.decline_word(token, case, number, gender, animate)

    def _adjective(
        self,
        token: str,
        case: GrammaticalCase,
        number: GrammaticalNumber,
        gender: Gender,
        animate: bool,
    ) -> str:
        lead, core, trail = split_affixes(token)
        return lead + adjectives.decline(core, case, gender, number, animate=animate) + trail

    def _position(
        self, tokens: list[str], case: GrammaticalCase, number: GrammaticalNumber
    ) -> list[str]:
        words = [key(_core(t)) for t in tokens]
        head = position_head_length(words)

        out = []
        for i, token in enumerate(tokens):
            if i >= head:
                out.append(token)
            elif adjectives.is_adjective(words[i]) or words[i] in POSITION_MODIFIERS:
                agree = adjectives.adjective_gender(words[i]) or Gender.MASCULINE
                out.append(self._adjective(token, case, number, agree, True))
            elif words[i] in MILITARY_RANKS:
                out.append(self._token(token, case, number, Gender.MASCULINE, True))
            elif words[i] in POSITION_TITLES or words[i] in POSITION_NOUNS:
                lead, core, trail = split_affixes(token)
                plain = self._engine.decline_plain(core, case, number, Gender.MASCULINE, True)
                out.append(lead + plain + trail)
            else:
                lead, core, trail = split_affixes(token)
                out.append(lead + self._engine.decline_plain(core, case, number) + trail)
        return out

    def _rank_name(
        self,
        tokens: list[str],
        case: GrammaticalCase,
        number: GrammaticalNumber,
        gender: Gender,
    ) -> list[str]:
        words = [key(_core(t)) for t in tokens]
        ranks = rank_length(words)
        out = []
        for i, token in enumerate(tokens):
            if i >= ranks:
                out.append(self._token(token, case, number, gender, True))
            elif words[i] in RANK_PREFIXES:
                out.append(token)
            elif adjectives.is_adjective(words[i]) or words[i] in POSITION_MODIFIERS:
                out.append(self._adjective(token, case, number, Gender.MASCULINE, True))
            else:
                out.append(self._token(token, case, number, Gender.MASCULINE, True))
        return out

    def _generic(
        self,
        tokens: list[str],
        case: GrammaticalCase,
        number: GrammaticalNumber,
        gender: Gender,
        explicit: bool,
    ) -> list[str]:
        out = []
        for i, token in enumerate(tokens):
            core = _core(token)
            if i and key(core) in PREPOSITIONS:
                out.extend(tokens[i:])
                break
            if _should_skip(core):
                out.append(token)
                continue
            following = _core(tokens[i + 1]) if i + 1 < len(tokens) else ""
            if following and adjectives.is_adjective(core):
                own = adjectives.adjective_gender(core)
                agree = own or (gender if explicit else guess_gender(following))
                out.append(self._adjective(token, case, number, agree, infer_animacy(following)))
                continue
            token_gender = gender if explicit or is_capitalized(core) else guess_gender(core)
            out.append(self._token(token, case, number, token_gender, None))
        return out
