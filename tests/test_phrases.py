import pytest

from languages.types import GrammaticalCase
from languages.ukrainian import PhraseShape, classify_phrase, decline

GEN = GrammaticalCase.GENITIVE
DAT = GrammaticalCase.DATIVE
INS = GrammaticalCase.INSTRUMENTAL
LOC = GrammaticalCase.LOCATIVE
VOC = GrammaticalCase.VOCATIVE

CAPTAIN = "капітан ПЕТРЕНКО Олександр Іванович"
LIEUTENANT_COLONEL = "підполковник СУЧКОВ Віталій Олександрович"
SENIOR_LIEUTENANT = "старший лейтенант ДЖУРЯК Іван Михайлович"


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (GEN, "капітана ПЕТРЕНКА Олександра Івановича"),
        (DAT, "капітану ПЕТРЕНКУ Олександру Івановичу"),
        (INS, "капітаном ПЕТРЕНКОМ Олександром Івановичем"),
        (LOC, "капітану ПЕТРЕНКУ Олександрові Івановичу"),
        (VOC, "капітане ПЕТРЕНКО Олександре Івановичу"),
    ],
)
def test_rank_with_enko_surname(case: GrammaticalCase, expected: str) -> None:
    assert decline(CAPTAIN, case) == expected


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (INS, "підполковником СУЧКОВИМ Віталієм Олександровичем"),
        (LOC, "підполковнику СУЧКОВУ Віталієві Олександровичу"),
        (VOC, "підполковнику СУЧКОВ Віталію Олександровичу"),
    ],
)
def test_rank_with_ov_surname(case: GrammaticalCase, expected: str) -> None:
    assert decline(LIEUTENANT_COLONEL, case) == expected


def test_two_word_rank() -> None:
    assert decline(SENIOR_LIEUTENANT, GEN) == "старшого лейтенанта ДЖУРЯКА Івана Михайловича"
    assert decline(SENIOR_LIEUTENANT, VOC) == "старший лейтенанте ДЖУРЯК Іване Михайловичу"


def test_two_word_rank_with_adjectival_surname() -> None:
    phrase = "старший лейтенант СЛАБКИЙ Руслан Юрійович"
    assert decline(phrase, GEN) == "старшого лейтенанта СЛАБКОГО Руслана Юрійовича"
    assert decline(phrase, INS) == "старшим лейтенантом СЛАБКИМ Русланом Юрійовичем"


@pytest.mark.parametrize(
    ("phrase", "case", "expected"),
    [
        ("командир роти", GEN, "командира роти"),
        ("оперативний черговий", DAT, "оперативному черговому"),
        ("оперативна група", GEN, "оперативної групи"),
        ("військова частина А1234", GEN, "військової частини А1234"),
        ("Олена Петрівна", GEN, "Олени Петрівни"),
    ],
)
def test_phrases(phrase: str, case: GrammaticalCase, expected: str) -> None:
    assert decline(phrase, case) == expected


@pytest.mark.parametrize(
    ("phrase", "shape"),
    [
        (CAPTAIN, PhraseShape.RANK_NAME),
        ("командир роти", PhraseShape.POSITION),
        ("Олена Петрівна", PhraseShape.BARE_NAME),
        ("оперативна група", PhraseShape.GENERIC),
    ],
)
def test_classify_phrase(phrase: str, shape: PhraseShape) -> None:
    assert classify_phrase(phrase.split()) is shape


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        ("позиція роти", "позиції роти"),
        ("оперативна група роти", "оперативної групи роти"),
        ("боротьба проти корупції", "боротьби проти корупції"),
    ],
)
def test_unit_words_match_whole_tokens_only(phrase: str, expected: str) -> None:
    assert decline(phrase, GEN) == expected


def test_unit_word_inside_another_word_is_not_a_position() -> None:
    assert classify_phrase("боротьба проти корупції".split()) is PhraseShape.GENERIC
    assert classify_phrase("позиція роти".split()) is PhraseShape.POSITION


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (GEN, "капітана ШЕВЧЕНКО Олени Петрівни"),
        (DAT, "капітану ШЕВЧЕНКО Олені Петрівні"),
        (INS, "капітаном ШЕВЧЕНКО Оленою Петрівною"),
    ],
)
def test_rank_stays_masculine_for_a_woman(case: GrammaticalCase, expected: str) -> None:
    assert decline("капітан ШЕВЧЕНКО Олена Петрівна", case) == expected


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        ("кімната 105", "кімнати 105"),
        ("книга для читання", "книги для читання"),
        ("книга та зошит", "книги та зошита"),
    ],
)
def test_generic_skips_numbers_and_prepositional_groups(phrase: str, expected: str) -> None:
    assert decline(phrase, GEN) == expected
