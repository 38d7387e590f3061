import pytest

from languages.types import Gender, GrammaticalCase, GrammaticalNumber
from languages.ukrainian import Declensioner, UnsupportedWordError, decline, get_declensioner

WORDS = [
    "книга", "земля", "стіл", "край", "вікно", "море", "ніч", "мати",
    "теля", "ім'я", "кінь", "батько", "Петро", "Сергій", "Пінчук", "Шаповалова",
]

PHRASES = [
    "капітан ПЕТРЕНКО Олександр Іванович",
    "старший лейтенант ДЖУРЯК Іван Михайлович",
    "командир роти",
    "оперативна група",
    "Олена Петрівна",
]


@pytest.mark.parametrize("text", WORDS + PHRASES)
def test_nominative_singular_is_identity(text: str) -> None:
    assert decline(text, GrammaticalCase.NOMINATIVE) == text


@pytest.mark.parametrize("word", WORDS)
def test_paradigm_covers_every_case_and_number(word: str) -> None:
    forms = get_declensioner().paradigm(word)
    assert set(forms) == {n.value for n in GrammaticalNumber}
    for number in GrammaticalNumber:
        assert set(forms[number.value]) == {c.value for c in GrammaticalCase}
        assert all(forms[number.value].values())


@pytest.mark.parametrize("text", PHRASES)
@pytest.mark.parametrize("case", list(GrammaticalCase))
def test_token_count_is_preserved(text: str, case: GrammaticalCase) -> None:
    assert len(decline(text, case).split()) == len(text.split())


@pytest.mark.parametrize("case", list(GrammaticalCase))
def test_uppercase_input_gives_uppercase_output(case: GrammaticalCase) -> None:
    result = decline("КНИГА", case, gender=Gender.FEMININE)
    assert result == result.upper()


def test_uppercase_surname_vocative_is_unchanged() -> None:
    assert decline("ПЕТРЕНКО", GrammaticalCase.VOCATIVE, gender=Gender.MASCULINE) == "ПЕТРЕНКО"


def test_punctuation_is_kept_around_tokens() -> None:
    assert decline("книга,", GrammaticalCase.GENITIVE) == "книги,"


def test_typographic_apostrophe_is_kept() -> None:
    assert decline("ім’я", GrammaticalCase.INSTRUMENTAL, gender=Gender.NEUTER) == "іменем"


def test_unsupported_word_raises() -> None:
    with pytest.raises(UnsupportedWordError) as excinfo:
        decline("леді", GrammaticalCase.GENITIVE, gender=Gender.FEMININE)
    assert excinfo.value.word == "леді"


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_text_raises(text: str) -> None:
    with pytest.raises(UnsupportedWordError):
        decline(text, GrammaticalCase.GENITIVE)


def test_decline_result_wraps_unsupported_word() -> None:
    result = get_declensioner().decline_result("леді", GrammaticalCase.GENITIVE, gender=Gender.FEMININE)
    assert result.is_err()
    assert result.unwrap_err().code.name == "E2030_UNSUPPORTED_WORD"


def test_memoized_engine_matches_plain_engine() -> None:
    memo = {}
    engine = Declensioner(memo=memo)
    assert engine.decline("книга", GrammaticalCase.GENITIVE) == "книги"
    assert engine.decline("земля", GrammaticalCase.GENITIVE) == "землі"
    assert len(memo) == 1


@pytest.mark.parametrize(
    ("case", "cascade", "plain"),
    [
        (GrammaticalCase.GENITIVE, "Шаповалової", "Шаповалови"),
        (GrammaticalCase.INSTRUMENTAL, "Шаповаловою", "Шаповаловою"),
    ],
)
def test_decline_plain_bypasses_surname_rules(case: GrammaticalCase, cascade: str, plain: str) -> None:
    engine = get_declensioner()
    assert engine.decline_word("Шаповалова", case, gender=Gender.FEMININE) == cascade
    assert engine.decline_plain("Шаповалова", case, gender=Gender.FEMININE) == plain


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (GrammaticalCase.NOMINATIVE, "старші"),
        (GrammaticalCase.GENITIVE, "старших"),
        (GrammaticalCase.INSTRUMENTAL, "старшими"),
    ],
)
def test_plural_adjective_form_declines_as_plural(case: GrammaticalCase, expected: str) -> None:
    assert decline("старші", case) == expected
