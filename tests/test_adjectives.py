import pytest

from languages.types import Gender, GrammaticalCase, GrammaticalNumber
from languages.ukrainian import adjectives, decline

GEN = GrammaticalCase.GENITIVE
ACC = GrammaticalCase.ACCUSATIVE


def test_standalone_adjective_declines_as_masculine() -> None:
    assert decline("оперативний", GEN, gender=Gender.MASCULINE) == "оперативного"


@pytest.mark.parametrize(
    ("word", "case", "gender", "expected"),
    [
        ("оперативна", GEN, Gender.FEMININE, "оперативної"),
        ("синій", GEN, Gender.MASCULINE, "синього"),
        ("синій", GrammaticalCase.DATIVE, Gender.FEMININE, "синій"),
        ("нова", ACC, Gender.FEMININE, "нову"),
        ("безкраїй", GEN, Gender.MASCULINE, "безкрайого"),
    ],
)
def test_adjective_agreement(word: str, case: GrammaticalCase, gender: Gender, expected: str) -> None:
    assert adjectives.decline(word, case, gender) == expected


def test_accusative_follows_animacy() -> None:
    assert adjectives.decline("старший", ACC, Gender.MASCULINE, animate=True) == "старшого"
    assert adjectives.decline("старший", ACC, Gender.MASCULINE, animate=False) == "старший"


def test_plural_instrumental() -> None:
    result = adjectives.decline(
        "оперативний", GrammaticalCase.INSTRUMENTAL, Gender.MASCULINE, GrammaticalNumber.PLURAL
    )
    assert result == "оперативними"


def test_uppercase_adjective_keeps_case() -> None:
    assert adjectives.decline("ОПЕРАТИВНИЙ", GEN) == "ОПЕРАТИВНОГО"


def test_adjective_gender_from_ending() -> None:
    assert adjectives.adjective_gender("нова") is Gender.FEMININE
    assert adjectives.adjective_gender("нове") is Gender.NEUTER
    assert adjectives.adjective_gender("новий") is Gender.MASCULINE
