import pytest

from scripts.decline import main


def test_prints_declined_form(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["книга", "--case", "gen"]) == 0
    assert capsys.readouterr().out.strip() == "книги"


def test_unknown_case_exits_with_input_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["книга", "--case", "bogus"]) == 2
    assert "E2002_INVALID_FORMAT" in capsys.readouterr().err


def test_unsupported_word_exits_with_input_error() -> None:
    assert main(["леді", "--gender", "f"]) == 2


def test_paradigm_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["ніч", "--paradigm"]) == 0
    assert "ночей" in capsys.readouterr().out
