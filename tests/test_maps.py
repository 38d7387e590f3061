import pytest

from languages.types import GrammaticalCase, GrammaticalNumber
from languages.ukrainian.maps import parse_case, parse_gender, parse_number


@pytest.mark.parametrize("alias", ["gen", "genitive", "Р.В.", "родовий", " GEN "])
def test_parse_case_aliases(alias: str) -> None:
    assert parse_case(alias).unwrap() is GrammaticalCase.GENITIVE


def test_parse_case_rejects_unknown() -> None:
    result = parse_case("xyz")
    assert result.is_err()
    assert result.unwrap_err().code.name == "E2002_INVALID_FORMAT"


def test_parse_number() -> None:
    assert parse_number("pl").unwrap() is GrammaticalNumber.PLURAL
    assert parse_number("однина").unwrap() is GrammaticalNumber.SINGULAR


@pytest.mark.parametrize("value", [None, "", "  "])
def test_parse_gender_empty_means_infer(value: str | None) -> None:
    assert parse_gender(value).unwrap() is None


def test_parse_gender_rejects_unknown() -> None:
    assert parse_gender("other").is_err()
