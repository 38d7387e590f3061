from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_decline_endpoint() -> None:
    response = client.get("/api/declension/decline", params={"text": "книга", "case": "gen"})
    assert response.status_code == 200
    body = response.json()
    assert body["result"] == "книги"
    assert body["case"] == "genitive"
    assert body["number"] == "singular"
    assert body["gender"] is None


def test_decline_accepts_ukrainian_aliases() -> None:
    response = client.get(
        "/api/declension/decline", params={"text": "земля", "case": "родовий", "number": "pl"}
    )
    assert response.status_code == 200
    assert response.json()["result"] == "земель"


def test_decline_phrase() -> None:
    response = client.get(
        "/api/declension/decline",
        params={"text": "капітан ПЕТРЕНКО Олександр Іванович", "case": "dative"},
    )
    assert response.status_code == 200
    assert response.json()["result"] == "капітану ПЕТРЕНКУ Олександру Івановичу"


def test_unknown_case_is_bad_request() -> None:
    response = client.get("/api/declension/decline", params={"text": "книга", "case": "bogus"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2002_INVALID_FORMAT"


def test_unsupported_word_is_bad_request() -> None:
    response = client.get(
        "/api/declension/decline", params={"text": "леді", "case": "gen", "gender": "f"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2030_UNSUPPORTED_WORD"


def test_too_many_tokens() -> None:
    text = " ".join(["книга"] * 33)
    response = client.get("/api/declension/decline", params={"text": text, "case": "gen"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2003_OUT_OF_RANGE"


def test_missing_query_parameter() -> None:
    response = client.get("/api/declension/decline", params={"text": "книга"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2001_REQUIRED_FIELD_MISSING"


def test_paradigm_endpoint() -> None:
    response = client.get("/api/declension/paradigm", params={"text": "книга"})
    assert response.status_code == 200
    forms = response.json()["forms"]
    assert forms["plural"]["genitive"] == "книг"
    assert forms["singular"]["nominative"] == "книга"


def test_batch_endpoint() -> None:
    response = client.post(
        "/api/declension/batch",
        json={"items": [{"text": "книга", "case": "gen"}, {"text": "ніч", "case": "ins"}]},
    )
    assert response.status_code == 200
    assert [item["result"] for item in response.json()] == ["книги", "ніччю"]


def test_batch_fails_on_first_bad_item() -> None:
    response = client.post(
        "/api/declension/batch",
        json={"items": [{"text": "книга", "case": "gen"}, {"text": "леді", "case": "gen", "gender": "f"}]},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2030_UNSUPPORTED_WORD"


def test_list_languages() -> None:
    response = client.get("/api/languages/")
    assert response.status_code == 200
    assert "uk" in [lang["code"] for lang in response.json()]


def test_unknown_language_is_not_found() -> None:
    response = client.get("/api/languages/xx")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "E4010_NOT_FOUND"


def test_grammar_config() -> None:
    response = client.get("/api/languages/uk/grammar")
    assert response.status_code == 200
    body = response.json()
    assert len(body["cases"]) == 7
    assert body["hasDeclension"] is True
    assert body["cases"][1]["nativeLabel"] == "родовий"


def test_declension_patterns() -> None:
    response = client.get("/api/languages/uk/declension-patterns")
    assert response.status_code == 200
    assert "first_hard" in response.json()["patterns"]
