"""Ukrainian language module implementation."""
from languages.base import LanguageModule, GrammarConfig
from languages.types import Gender, GrammaticalCase, GrammaticalNumber
from .declension import DECLENSION_PATTERNS
from .engine import Declensioner, get_declensioner
from .grammar import UKRAINIAN_GRAMMAR_CONFIG
from .maps import CASES


class UkrainianModule(LanguageModule):
    """Ukrainian language module with rule-based declension."""

    __slots__ = ()

    @property
    def code(self) -> str:
        return "uk"

    @property
    def name(self) -> str:
        return "Ukrainian"

    @property
    def native_name(self) -> str:
        return "Українська"

    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for API clients."""
        return UKRAINIAN_GRAMMAR_CONFIG

    def get_declensioner(self) -> Declensioner:
        """Get the process-wide declension engine."""
        return get_declensioner()

    def get_declension_patterns(self) -> dict:
        """Get declension ending tables."""
        return DECLENSION_PATTERNS

    def decline(
        self,
        text: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
    ) -> str:
        """Inflect a word or phrase."""
        return get_declensioner().decline(text, case, number, gender)

    def get_cases(self) -> list[str]:
        """Get ordered list of grammatical cases."""
        return CASES
