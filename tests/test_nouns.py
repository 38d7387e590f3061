import pytest

from languages.types import Gender, GrammaticalCase, GrammaticalNumber
from languages.ukrainian import decline

GEN = GrammaticalCase.GENITIVE
DAT = GrammaticalCase.DATIVE
INS = GrammaticalCase.INSTRUMENTAL
LOC = GrammaticalCase.LOCATIVE
VOC = GrammaticalCase.VOCATIVE
NOM = GrammaticalCase.NOMINATIVE
SG = GrammaticalNumber.SINGULAR
PL = GrammaticalNumber.PLURAL


@pytest.mark.parametrize(
    ("word", "case", "number", "expected"),
    [
        ("книга", GEN, SG, "книги"),
        ("земля", DAT, SG, "землі"),
        ("каша", INS, SG, "кашею"),
        ("книга", NOM, PL, "книги"),
        ("земля", GEN, PL, "земель"),
        ("каша", DAT, PL, "кашам"),
        ("книга", GEN, PL, "книг"),
    ],
)
def test_first_declension(word: str, case: GrammaticalCase, number: GrammaticalNumber, expected: str) -> None:
    assert decline(word, case, number, Gender.FEMININE) == expected


@pytest.mark.parametrize(
    ("word", "gender", "case", "number", "expected"),
    [
        ("стіл", Gender.MASCULINE, GEN, SG, "стола"),
        ("край", Gender.MASCULINE, DAT, SG, "краю"),
        ("вікно", Gender.NEUTER, INS, SG, "вікном"),
        ("море", Gender.NEUTER, LOC, SG, "морі"),
        ("стіл", Gender.MASCULINE, NOM, PL, "столи"),
        ("вікно", Gender.NEUTER, GEN, PL, "вікон"),
    ],
)
def test_second_declension(
    word: str, gender: Gender, case: GrammaticalCase, number: GrammaticalNumber, expected: str
) -> None:
    assert decline(word, case, number, gender) == expected


@pytest.mark.parametrize(
    ("word", "case", "number", "expected"),
    [
        ("ніч", GEN, SG, "ночі"),
        ("мати", INS, SG, "матір'ю"),
        ("ніч", NOM, PL, "ночі"),
        ("мати", GEN, PL, "матерів"),
        ("ніч", GEN, PL, "ночей"),
    ],
)
def test_third_declension(word: str, case: GrammaticalCase, number: GrammaticalNumber, expected: str) -> None:
    assert decline(word, case, number, Gender.FEMININE) == expected


@pytest.mark.parametrize(
    ("word", "case", "number", "expected"),
    [
        ("теля", GEN, SG, "теляти"),
        ("ім'я", INS, SG, "іменем"),
        ("теля", NOM, PL, "телята"),
        ("ім'я", GEN, PL, "імен"),
    ],
)
def test_fourth_declension(word: str, case: GrammaticalCase, number: GrammaticalNumber, expected: str) -> None:
    assert decline(word, case, number, Gender.NEUTER) == expected


@pytest.mark.parametrize(
    ("word", "case", "expected"),
    [
        ("кінь", DAT, "коню"),
        ("трамвай", LOC, "трамваї"),
        ("ніч", INS, "ніччю"),
        ("любов", VOC, "любове"),
        ("життя", GEN, "життя"),
        ("батько", GEN, "батька"),
        ("тато", DAT, "тату"),
        ("дідо", INS, "дідом"),
        ("Петро", VOC, "Петре"),
        ("Микола", GEN, "Миколи"),
        ("мати", GEN, "матері"),
        ("осінь", DAT, "осені"),
        ("сіль", INS, "сіллю"),
        ("кошеня", GEN, "кошеняти"),
        ("ягня", DAT, "ягняті"),
    ],
)
def test_gender_inferred_when_omitted(word: str, case: GrammaticalCase, expected: str) -> None:
    assert decline(word, case) == expected


ACC = GrammaticalCase.ACCUSATIVE


@pytest.mark.parametrize(
    ("word", "number", "animate", "expected"),
    [
        ("стіл", SG, None, "стіл"),
        ("стіл", PL, None, "столи"),
        ("кінь", SG, None, "коня"),
        ("кінь", PL, None, "коней"),
        ("вовк", SG, False, "вовк"),
        ("вовк", SG, True, "вовка"),
    ],
)
def test_accusative_follows_animacy(word: str, number: GrammaticalNumber, animate: bool | None, expected: str) -> None:
    assert decline(word, ACC, number, Gender.MASCULINE, animate) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("обличчя", "облич"),
        ("життя", "життів"),
        ("питання", "питань"),
    ],
)
def test_abstract_neuter_genitive_plural(word: str, expected: str) -> None:
    assert decline(word, GEN, PL, Gender.NEUTER) == expected


@pytest.mark.parametrize(
    ("case", "number", "expected"),
    [
        (GEN, SG, "гостя"),
        (DAT, SG, "гостю"),
        (GEN, PL, "гостей"),
    ],
)
def test_stem_alternation_in_oblique_cases(case: GrammaticalCase, number: GrammaticalNumber, expected: str) -> None:
    assert decline("гість", case, number, Gender.MASCULINE) == expected


@pytest.mark.parametrize(
    ("word", "case", "expected"),
    [
        ("генерал-майор", GEN, "генерал-майора"),
        ("генерал-майор", INS, "генерал-майором"),
        ("генерал-майор", VOC, "генерал-майоре"),
        ("штаб-сержант", DAT, "штаб-сержанту"),
    ],
)
def test_compound_rank_inflects_last_segment(word: str, case: GrammaticalCase, expected: str) -> None:
    assert decline(word, case) == expected
