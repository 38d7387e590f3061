"""Ukrainian declension ending tables.

One entry per (group, subgroup) pattern. `endings` holds the regular
ending appended to the oblique stem for each case and number; rules apply
stem alternations and lexical overrides on top of these tables. The
accusative and plural vocative follow the animacy policy in the rules and
are listed here with their inanimate value.
"""
from languages.types import GrammaticalCase, GrammaticalNumber


def _table(*rows: tuple[str, str]) -> dict:
    cases = [c.value for c in GrammaticalCase]
    return {case: {"singular": sg, "plural": pl} for case, (sg, pl) in zip(cases, rows)}


DECLENSION_PATTERNS = {
    # ---------------------------------------------------------------- First
    "first_hard": {
        "id": "first_hard",
        "name": "I declension, hard",
        "description": "Nouns in -а after a hard consonant: книга, Микола",
        "group": "first",
        "endings": _table(
            ("а", "и"), ("и", ""), ("і", "ам"), ("у", "и"), ("ою", "ами"), ("і", "ах"), ("о", "и"),
        ),
    },
    "first_soft": {
        "id": "first_soft",
        "name": "I declension, soft",
        "description": "Nouns in -я after a consonant: земля, Перепелиця",
        "group": "first",
        "endings": _table(
            ("я", "і"), ("і", "ь"), ("і", "ям"), ("ю", "і"), ("ею", "ями"), ("і", "ях"), ("е", "і"),
        ),
    },
    "first_soft_iotated": {
        "id": "first_soft_iotated",
        "name": "I declension, soft after a vowel",
        "description": "Nouns in -я after a vowel or apostrophe: Надія, лінія",
        "group": "first",
        "endings": _table(
            ("я", "ї"), ("ї", "й"), ("ї", "ям"), ("ю", "ї"), ("єю", "ями"), ("ї", "ях"), ("є", "ї"),
        ),
    },
    "first_mixed": {
        "id": "first_mixed",
        "name": "I declension, mixed",
        "description": "Nouns in -а after ж, ч, ш, щ: каша, круча",
        "group": "first",
        "endings": _table(
            ("а", "і"), ("і", ""), ("і", "ам"), ("у", "і"), ("ею", "ами"), ("і", "ах"), ("е", "і"),
        ),
    },
    # --------------------------------------------------------------- Second
    "second_masculine_hard": {
        "id": "second_masculine_hard",
        "name": "II declension, masculine hard",
        "description": "Masculine nouns in a hard consonant or -о: стіл, Петро",
        "group": "second",
        "endings": _table(
            ("", "и"), ("а", "ів"), ("у", "ам"), ("", "и"), ("ом", "ами"), ("ові", "ах"), ("е", "и"),
        ),
    },
    "second_masculine_soft": {
        "id": "second_masculine_soft",
        "name": "II declension, masculine soft",
        "description": "Masculine nouns in -ь, -ець or a soft -р: кінь, лікар",
        "group": "second",
        "endings": _table(
            ("ь", "і"), ("я", "ів"), ("ю", "ям"), ("ь", "і"), ("ем", "ями"), ("еві", "ях"), ("ю", "і"),
        ),
    },
    "second_masculine_soft_iotated": {
        "id": "second_masculine_soft_iotated",
        "name": "II declension, masculine in -й",
        "description": "Masculine nouns in -й: край, Сергій",
        "group": "second",
        "endings": _table(
            ("й", "ї"), ("я", "їв"), ("ю", "ям"), ("й", "ї"), ("єм", "ями"), ("єві", "ях"), ("ю", "ї"),
        ),
    },
    "second_masculine_mixed": {
        "id": "second_masculine_mixed",
        "name": "II declension, masculine mixed",
        "description": "Masculine nouns in ж, ч, ш, щ and -яр: Деркач, Іванович",
        "group": "second",
        "endings": _table(
            ("", "і"), ("а", "ів"), ("у", "ам"), ("", "і"), ("ем", "ами"), ("еві", "ах"), ("у", "і"),
        ),
    },
    "second_neuter_hard": {
        "id": "second_neuter_hard",
        "name": "II declension, neuter hard",
        "description": "Neuter nouns in -о: вікно, село",
        "group": "second",
        "endings": _table(
            ("о", "а"), ("а", ""), ("у", "ам"), ("о", "а"), ("ом", "ами"), ("і", "ах"), ("о", "а"),
        ),
    },
    "second_neuter_soft": {
        "id": "second_neuter_soft",
        "name": "II declension, neuter soft",
        "description": "Neuter nouns in -е after a soft consonant: море, поле",
        "group": "second",
        "endings": _table(
            ("е", "я"), ("я", "ів"), ("ю", "ям"), ("е", "я"), ("ем", "ями"), ("і", "ях"), ("е", "я"),
        ),
    },
    "second_neuter_mixed": {
        "id": "second_neuter_mixed",
        "name": "II declension, neuter mixed",
        "description": "Neuter nouns in -е after ж, ч, ш, щ: прізвище, житло",
        "group": "second",
        "endings": _table(
            ("е", "а"), ("а", ""), ("у", "ам"), ("е", "а"), ("ем", "ами"), ("і", "ах"), ("е", "а"),
        ),
    },
    # ---------------------------------------------------------------- Third
    "third": {
        "id": "third",
        "name": "III declension",
        "description": "Feminine nouns in a consonant or -ь: ніч, любов, сіль",
        "group": "third",
        "endings": _table(
            ("", "і"), ("і", "ей"), ("і", "ям"), ("", "і"), ("ю", "ями"), ("і", "ях"), ("е", "і"),
        ),
    },
    # --------------------------------------------------------------- Fourth
    "fourth_yat": {
        "id": "fourth_yat",
        "name": "IV declension, -ят-",
        "description": "Neuter baby-animal nouns: теля, кошеня, курча",
        "group": "fourth",
        "endings": _table(
            ("", "а"), ("и", ""), ("і", "ам"), ("", "а"), ("", "ами"), ("і", "ах"), ("", "а"),
        ),
    },
    "fourth_en": {
        "id": "fourth_en",
        "name": "IV declension, -ен-",
        "description": "Neuter nouns in -м'я: ім'я, плем'я",
        "group": "fourth",
        "endings": _table(
            ("", "а"), ("і", ""), ("і", "ам"), ("", "а"), ("ем", "ами"), ("і", "ах"), ("", "а"),
        ),
    },
}

# Adjective endings per stem type and gender (plural under "plural")
ADJECTIVE_PATTERNS = {
    "hard": {
        "masculine": {"nominative": "ий", "genitive": "ого", "dative": "ому", "instrumental": "им", "locative": "ому"},
        "feminine": {"nominative": "а", "genitive": "ої", "dative": "ій", "accusative": "у", "instrumental": "ою", "locative": "ій"},
        "neuter": {"nominative": "е", "genitive": "ого", "dative": "ому", "instrumental": "им", "locative": "ому"},
        "plural": {"nominative": "і", "genitive": "их", "dative": "им", "instrumental": "ими", "locative": "их"},
    },
    "soft": {
        "masculine": {"nominative": "ій", "genitive": "ього", "dative": "ьому", "instrumental": "ім", "locative": "ьому"},
        "feminine": {"nominative": "я", "genitive": "ьої", "dative": "ій", "accusative": "ю", "instrumental": "ьою", "locative": "ій"},
        "neuter": {"nominative": "є", "genitive": "ього", "dative": "ьому", "instrumental": "ім", "locative": "ьому"},
        "plural": {"nominative": "і", "genitive": "іх", "dative": "ім", "instrumental": "іми", "locative": "іх"},
    },
    "iotated": {
        "masculine": {"nominative": "їй", "genitive": "його", "dative": "йому", "instrumental": "їм", "locative": "йому"},
        "feminine": {"nominative": "я", "genitive": "єї", "dative": "їй", "accusative": "ю", "instrumental": "єю", "locative": "їй"},
        "neuter": {"nominative": "є", "genitive": "його", "dative": "йому", "instrumental": "їм", "locative": "йому"},
        "plural": {"nominative": "ї", "genitive": "їх", "dative": "їм", "instrumental": "їми", "locative": "їх"},
    },
}


def ending(pattern_id: str, case: GrammaticalCase, number: GrammaticalNumber) -> str:
    """Regular ending of `pattern_id` for a case and number."""
    return DECLENSION_PATTERNS[pattern_id]["endings"][case.value][number.value]
