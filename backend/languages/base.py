"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .types import Gender, GrammaticalCase, GrammaticalNumber


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """Configuration for a grammatical case."""
    id: str
    label: str
    native_label: str
    hint: str


@dataclass(frozen=True, slots=True)
class GenderConfig:
    """Configuration for a grammatical gender."""
    id: str
    label: str
    short: str  # Single letter abbreviation


@dataclass(frozen=True, slots=True)
class NumberConfig:
    """Configuration for grammatical number."""
    id: str
    label: str


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration exposed over the API."""
    cases: list[CaseConfig] = field(default_factory=list)
    genders: list[GenderConfig] = field(default_factory=list)
    numbers: list[NumberConfig] = field(default_factory=list)
    has_declension: bool = False

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "cases": [
                {"id": c.id, "label": c.label, "nativeLabel": c.native_label, "hint": c.hint}
                for c in self.cases
            ],
            "genders": [{"id": g.id, "label": g.label, "short": g.short} for g in self.genders],
            "numbers": [{"id": n.id, "label": n.label} for n in self.numbers],
            "hasDeclension": self.has_declension,
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'uk')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration (cases, genders, numbers)."""
        ...

    @abstractmethod
    def decline(
        self,
        text: str,
        case: GrammaticalCase,
        number: GrammaticalNumber = GrammaticalNumber.SINGULAR,
        gender: Gender | None = None,
    ) -> str:
        """Inflect a word or phrase."""
        ...

    def get_declension_patterns(self) -> dict:
        """Get declension ending tables. Override if language has declension."""
        return {}
