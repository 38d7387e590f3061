"""Ukrainian case, number and gender name mappings.

Accepts the English names, short tags (gen, dat), Ukrainian names
(родовий) and school abbreviations (р.в.).
"""
from core.errors import AppError, Ok, Result, invalid_format
from languages.types import Gender, GrammaticalCase, GrammaticalNumber

# Ukrainian grammatical cases (ordered)
CASES = [c.value for c in GrammaticalCase]

CASE_ALIASES = {
    **{c.value: c for c in GrammaticalCase},
    "nom": GrammaticalCase.NOMINATIVE,
    "gen": GrammaticalCase.GENITIVE,
    "dat": GrammaticalCase.DATIVE,
    "acc": GrammaticalCase.ACCUSATIVE,
    "ins": GrammaticalCase.INSTRUMENTAL,
    "inst": GrammaticalCase.INSTRUMENTAL,
    "loc": GrammaticalCase.LOCATIVE,
    "voc": GrammaticalCase.VOCATIVE,
    "називний": GrammaticalCase.NOMINATIVE,
    "родовий": GrammaticalCase.GENITIVE,
    "давальний": GrammaticalCase.DATIVE,
    "знахідний": GrammaticalCase.ACCUSATIVE,
    "орудний": GrammaticalCase.INSTRUMENTAL,
    "місцевий": GrammaticalCase.LOCATIVE,
    "кличний": GrammaticalCase.VOCATIVE,
    "н.в.": GrammaticalCase.NOMINATIVE,
    "р.в.": GrammaticalCase.GENITIVE,
    "д.в.": GrammaticalCase.DATIVE,
    "з.в.": GrammaticalCase.ACCUSATIVE,
    "о.в.": GrammaticalCase.INSTRUMENTAL,
    "м.в.": GrammaticalCase.LOCATIVE,
    "к.в.": GrammaticalCase.VOCATIVE,
}

NUMBER_ALIASES = {
    **{n.value: n for n in GrammaticalNumber},
    "sg": GrammaticalNumber.SINGULAR,
    "sing": GrammaticalNumber.SINGULAR,
    "pl": GrammaticalNumber.PLURAL,
    "plur": GrammaticalNumber.PLURAL,
    "однина": GrammaticalNumber.SINGULAR,
    "множина": GrammaticalNumber.PLURAL,
}

GENDER_ALIASES = {
    **{g.value: g for g in Gender},
    "m": Gender.MASCULINE,
    "masc": Gender.MASCULINE,
    "f": Gender.FEMININE,
    "fem": Gender.FEMININE,
    "femn": Gender.FEMININE,
    "n": Gender.NEUTER,
    "neut": Gender.NEUTER,
    "чоловічий": Gender.MASCULINE,
    "жіночий": Gender.FEMININE,
    "середній": Gender.NEUTER,
}


def _normalize(value: str) -> str:
    return value.strip().lower()


def parse_case(value: str, origin: str = "") -> Result[GrammaticalCase, AppError]:
    case = CASE_ALIASES.get(_normalize(value))
    if case is None:
        return invalid_format("case", "one of the seven case names", value, origin=origin)
    return Ok(case)


def parse_number(value: str, origin: str = "") -> Result[GrammaticalNumber, AppError]:
    number = NUMBER_ALIASES.get(_normalize(value))
    if number is None:
        return invalid_format("number", "singular or plural", value, origin=origin)
    return Ok(number)


def parse_gender(value: str | None, origin: str = "") -> Result[Gender | None, AppError]:
    """Parse an optional gender; empty input means "infer"."""
    if value is None or not value.strip():
        return Ok(None)
    gender = GENDER_ALIASES.get(_normalize(value))
    if gender is None:
        return invalid_format("gender", "masculine, feminine or neuter", value, origin=origin)
    return Ok(gender)
