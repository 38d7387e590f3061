import pytest

from languages.types import Gender, GrammaticalCase, GrammaticalNumber
from languages.ukrainian import decline

GEN = GrammaticalCase.GENITIVE
DAT = GrammaticalCase.DATIVE
ACC = GrammaticalCase.ACCUSATIVE
INS = GrammaticalCase.INSTRUMENTAL
LOC = GrammaticalCase.LOCATIVE
VOC = GrammaticalCase.VOCATIVE

OBLIQUE = [GEN, DAT, ACC, INS, LOC, VOC]


@pytest.mark.parametrize(
    ("surname", "forms"),
    [
        ("Пінчук", ["Пінчука", "Пінчуку", "Пінчука", "Пінчуком", "Пінчукові", "Пінчуку"]),
        ("Горобець", ["Горобця", "Горобцю", "Горобця", "Горобцем", "Горобцеві", "Горобцю"]),
    ],
)
def test_masculine_surname_paradigm(surname: str, forms: list[str]) -> None:
    assert [decline(surname, case, gender=Gender.MASCULINE) for case in OBLIQUE] == forms


@pytest.mark.parametrize(
    ("word", "case", "expected"),
    [
        ("Деркач", INS, "Деркачем"),
        ("Деркач", LOC, "Деркачу"),
        ("Деркач", VOC, "Деркачу"),
        ("Сергій", GEN, "Сергія"),
        ("Сергій", DAT, "Сергію"),
        ("Сергій", INS, "Сергієм"),
        ("Сергій", LOC, "Сергієві"),
        ("Сергій", VOC, "Сергію"),
        ("Михайло", LOC, "Михайлові"),
        ("Михайло", VOC, "Михайле"),
        ("Пасічник", LOC, "Пасічнику"),
    ],
)
def test_masculine_names(word: str, case: GrammaticalCase, expected: str) -> None:
    assert decline(word, case, gender=Gender.MASCULINE) == expected


def test_enko_surname_takes_u_in_locative_and_vocative() -> None:
    assert decline("Тарасенко", LOC) == "Тарасенку"
    assert decline("Тарасенко", VOC) == "Тарасенку"


@pytest.mark.parametrize("surname", ["Яценко", "Голуб", "Боровик", "Присяжнюк"])
@pytest.mark.parametrize("number", list(GrammaticalNumber))
def test_feminine_surnames_are_invariant(surname: str, number: GrammaticalNumber) -> None:
    for case in GrammaticalCase:
        assert decline(surname, case, number, Gender.FEMININE) == surname


def test_feminine_ova_surname() -> None:
    forms = [decline("Шаповалова", case, gender=Gender.FEMININE) for case in OBLIQUE]
    assert forms == [
        "Шаповалової",
        "Шаповаловій",
        "Шаповалову",
        "Шаповаловою",
        "Шаповаловій",
        "Шаповалова",
    ]


@pytest.mark.parametrize(
    ("word", "case", "expected"),
    [
        ("Перепелиця", VOC, "Перепелице"),
        ("Надія", GEN, "Надії"),
        ("Надія", DAT, "Надії"),
        ("Надія", ACC, "Надію"),
        ("Надія", INS, "Надією"),
        ("Надія", LOC, "Надії"),
        ("Надія", VOC, "Надіє"),
        ("Георгіївна", VOC, "Георгіївно"),
    ],
)
def test_feminine_names(word: str, case: GrammaticalCase, expected: str) -> None:
    assert decline(word, case, gender=Gender.FEMININE) == expected
