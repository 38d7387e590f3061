"""Ukrainian grammar configuration for API clients."""
from languages.base import CaseConfig, GenderConfig, NumberConfig, GrammarConfig

# Case configurations with the school question hints
CASE_CONFIGS = [
    CaseConfig(
        id="nominative",
        label="Nominative",
        native_label="називний",
        hint="хто? що? (who? what?)",
    ),
    CaseConfig(
        id="genitive",
        label="Genitive",
        native_label="родовий",
        hint="кого? чого? (of whom? of what?)",
    ),
    CaseConfig(
        id="dative",
        label="Dative",
        native_label="давальний",
        hint="кому? чому? (to whom? to what?)",
    ),
    CaseConfig(
        id="accusative",
        label="Accusative",
        native_label="знахідний",
        hint="кого? що? (whom? what?)",
    ),
    CaseConfig(
        id="instrumental",
        label="Instrumental",
        native_label="орудний",
        hint="ким? чим? (by whom? with what?)",
    ),
    CaseConfig(
        id="locative",
        label="Locative",
        native_label="місцевий",
        hint="на кому? на чому? (on whom? on what?)",
    ),
    CaseConfig(
        id="vocative",
        label="Vocative",
        native_label="кличний",
        hint="звертання (direct address)",
    ),
]

GENDER_CONFIGS = [
    GenderConfig(id="masculine", label="Masculine", short="m"),
    GenderConfig(id="feminine", label="Feminine", short="f"),
    GenderConfig(id="neuter", label="Neuter", short="n"),
]

NUMBER_CONFIGS = [
    NumberConfig(id="singular", label="Singular"),
    NumberConfig(id="plural", label="Plural"),
]

UKRAINIAN_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    genders=GENDER_CONFIGS,
    numbers=NUMBER_CONFIGS,
    has_declension=True,
)
