"""Ukrainian Declension Engine

Single entry point for nouns, adjectives, surnames and multi-word
name/title phrases. Every call is a pure function of its arguments; the
only state an engine owns is an optional memo of rule callables keyed by
(declension group, gender).

Single-word path:
    gender classifier → surname/rank cascade → group identifier → rule
Phrase path:
    PhraseDeclensioner, calling back into the single-word path per token
"""
from functools import lru_cache, partial

from core.config import settings
from core.errors import AppError, Ok, Result, unsupported_word
from core.logging import engine_logger
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

from . import adjectives
from .errors import UnsupportedWordError
from .gender import guess_gender, infer_animacy
from .groups import DeclensionGroup, identify_group
from .lexicon import KNOWN_ADJECTIVES
from .phrase import PhraseDeclensioner
from .rules import RULES, Rule
from .surnames import decline_exception, is_rank
from .words import APOSTROPHES, copy_letter_case, key, split_affixes

log = engine_logger()

Case = GrammaticalCase
Number = GrammaticalNumber


def restore_case(source: str, result: str) -> str:
    """Give a lower-case rule result the letter case and apostrophe of `source`."""
    if result == source or result == key(source):
        return source
    restored = copy_letter_case(source, result)
    for mark in APOSTROPHES:
        if mark in source:
            return restored.replace("'", mark)
    return restored


class Declensioner:
    """Declension engine for Ukrainian words and phrases."""

    __slots__ = ("_memo", "_phrases")

    def __init__(self, memo: dict[tuple[DeclensionGroup, Gender], Rule] | None = None):
        self._memo = memo
        self._phrases = PhraseDeclensioner(self)

    def decline(
        self,
        text: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
        animate: bool | None = None,
    ) -> str:
        """Inflect a word or a whitespace-separated phrase.

        Raises UnsupportedWordError when a word cannot be placed in any
        declension group for its gender.
        """
        tokens = text.split() if text else []
        if not tokens:
            raise UnsupportedWordError(text, gender)
        if len(tokens) > 1:
            result = self._phrases.decline(text, case, number, gender)
        else:
            result = self.decline_word(tokens[0], case, number, gender, animate)
        log.debug("text_declined", text=text, case=case.value, number=number.value, result=result)
        return result

    def decline_result(
        self,
        text: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
        animate: bool | None = None,
    ) -> Result[str, AppError]:
        """Decline with Result type for typed error handling."""
        try:
            return Ok(self.decline(text, case, number, gender, animate))
        except UnsupportedWordError as e:
            return unsupported_word(
                e.word, e.gender.value if e.gender else None, origin="declension_engine", cause=e
            )

    def decline_word(
        self,
        word: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
        animate: bool | None = None,
    ) -> str:
        """Inflect one token, running the surname/rank cascade first."""
        return self._inflect(word, case, number, gender, animate, cascade=True)

    def decline_plain(
        self,
        word: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
        animate: bool | None = None,
    ) -> str:
        """Inflect one token with the regular rules only, bypassing the cascade."""
        return self._inflect(word, case, number, gender, animate, cascade=False)

    def paradigm(self, text: str, gender: Gender | None = None) -> dict[str, dict[str, str]]:
        """All 14 forms: {number: {case: form}}."""
        return {
            number.value: {case.value: self.decline(text, case, number, gender) for case in Case}
            for number in Number
        }

    def identify(self, word: str, gender: Gender | None = None) -> DeclensionGroup:
        """Declension group of a bare word."""
        return identify_group(word, gender or guess_gender(word))

    def _inflect(
        self,
        word: str,
        case: GrammaticalCase,
        number: GrammaticalNumber,
        gender: Gender | None,
        animate: bool | None,
        cascade: bool,
    ) -> str:
        lead, core, trail = split_affixes(word)
        if not core:
            return word
        if "-" in core.strip("-") and not is_rank(core):
            parts = [self._inflect(part, case, number, gender, animate, cascade) for part in core.split("-")]
            return lead + "-".join(parts) + trail
        gender = gender or guess_gender(core)
        if animate is None:
            animate = infer_animacy(core)

        result = None
        if key(core) in KNOWN_ADJECTIVES:
            own = adjectives.adjective_gender(core)
            if own is None:
                number = Number.PLURAL
            result = adjectives.decline(core, case, own or gender, number, animate=animate)
        elif cascade:
            result = decline_exception(core, case, number, gender)
        if result is None:
            result = self._regular(core, case, number, gender, animate)
        return lead + restore_case(core, result) + trail

    def _regular(
        self,
        word: str,
        case: GrammaticalCase,
        number: GrammaticalNumber,
        gender: Gender,
        animate: bool,
    ) -> str:
        try:
            group = identify_group(word, gender)
        except UnsupportedWordError:
            log.warning("unsupported_word", word=word, gender=gender.value)
            raise
        return self._rule(group, gender)(word, case, number, animate=animate)

    def _rule(self, group: DeclensionGroup, gender: Gender) -> Rule:
        if self._memo is None:
            return partial(RULES[group], gender=gender)
        rule = self._memo.get((group, gender))
        if rule is None:
            rule = self._memo.setdefault((group, gender), partial(RULES[group], gender=gender))
        return rule


@lru_cache
def get_declensioner() -> Declensioner:
    """Process-wide engine; owns a rule memo when DECLENSION_MEMOIZE_RULES is set."""
    return Declensioner(memo={} if settings.DECLENSION_MEMOIZE_RULES else None)


def decline(
    text: str,
    case: GrammaticalCase,
    number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
    gender: Gender | None = None,
    animate: bool | None = None,
) -> str:
    """Inflect a word or phrase with the process-wide engine."""
    return get_declensioner().decline(text, case, number, gender, animate)
