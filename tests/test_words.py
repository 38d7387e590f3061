import pytest

from languages.types import Gender
from languages.ukrainian.gender import guess_gender, infer_animacy
from languages.ukrainian.groups import DeclensionGroup, identify_group
from languages.ukrainian.words import (
    copy_letter_case,
    get_stem,
    normalize_apostrophe,
    palatalize,
    split_affixes,
)


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        ("ПЕТРЕНКО", "петренка", "ПЕТРЕНКА"),
        ("Іван", "івана", "Івана"),
        ("книга", "КНИГИ", "книги"),
        ("МакДональд", "макдональда", "макдональда"),
    ],
)
def test_copy_letter_case(source: str, target: str, expected: str) -> None:
    assert copy_letter_case(source, target) == expected


@pytest.mark.parametrize(
    ("word", "stem"),
    [
        ("горобець", "горобц"),
        ("стрілець", "стрільц"),
        ("стіл", "стол"),
        ("будинок", "будинк"),
    ],
)
def test_get_stem(word: str, stem: str) -> None:
    assert get_stem(word) == stem


def test_palatalize_velar() -> None:
    assert palatalize("книг") == "книз"


@pytest.mark.parametrize(
    ("token", "parts"),
    [
        ("роти,", ("", "роти", ",")),
        ("«Дніпро»", ("«", "Дніпро", "»")),
    ],
)
def test_split_affixes(token: str, parts: tuple[str, str, str]) -> None:
    assert split_affixes(token) == parts


def test_normalize_apostrophe() -> None:
    assert normalize_apostrophe("ім’я") == "ім'я"


@pytest.mark.parametrize(
    ("word", "gender"),
    [
        ("книга", Gender.FEMININE),
        ("стіл", Gender.MASCULINE),
        ("вікно", Gender.NEUTER),
        ("Петро", Gender.MASCULINE),
        ("життя", Gender.NEUTER),
    ],
)
def test_guess_gender(word: str, gender: Gender) -> None:
    assert guess_gender(word) is gender


def test_infer_animacy() -> None:
    assert infer_animacy("Пінчук")
    assert infer_animacy("Іванович")
    assert not infer_animacy("стіл")


@pytest.mark.parametrize(
    ("word", "gender", "group"),
    [
        ("книга", Gender.FEMININE, DeclensionGroup.FIRST),
        ("Микола", Gender.MASCULINE, DeclensionGroup.FIRST),
        ("стіл", Gender.MASCULINE, DeclensionGroup.SECOND),
        ("ніч", Gender.FEMININE, DeclensionGroup.THIRD),
        ("теля", Gender.NEUTER, DeclensionGroup.FOURTH),
        ("Яценко", Gender.FEMININE, DeclensionGroup.INDECLINABLE),
    ],
)
def test_identify_group(word: str, gender: Gender, group: DeclensionGroup) -> None:
    assert identify_group(word, gender) is group
