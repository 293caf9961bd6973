from fastapi.testclient import TestClient

from number_trivia.api.app import app, use_cases
from number_trivia.models import TriviaRecord
from number_trivia.outcome import Failure, FailureKind, Success
from number_trivia.usecases.input_converter import InputConverter

client = TestClient(app)


def test_healthz() -> None:
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_concrete_trivia_success(monkeypatch) -> None:
    captured: dict[str, str | None] = {"raw": None}

    async def fake_get_concrete(raw_number: str):
        captured["raw"] = raw_number
        return Success(TriviaRecord(text="42 is the answer.", number=42))

    monkeypatch.setattr(use_cases, "get_concrete", fake_get_concrete)

    resp = client.get("/trivia/42")
    assert resp.status_code == 200
    assert resp.json() == {"text": "42 is the answer.", "number": 42}
    assert captured["raw"] == "42"


def test_random_trivia_success(monkeypatch) -> None:
    async def fake_get_random():
        return Success(TriviaRecord(text="Test", number=123))

    monkeypatch.setattr(use_cases, "get_random", fake_get_random)

    resp = client.get("/trivia/random")
    assert resp.status_code == 200
    assert resp.json() == {"text": "Test", "number": 123}


def test_failures_map_to_status_and_message(monkeypatch) -> None:
    expected = {
        FailureKind.SERVER: (502, "Server Failure"),
        FailureKind.CACHE: (503, "Cache Failure"),
    }
    for kind, (status_code, message) in expected.items():

        async def fake_get_random(kind=kind):
            return Failure(kind)

        monkeypatch.setattr(use_cases, "get_random", fake_get_random)
        resp = client.get("/trivia/random")
        assert resp.status_code == status_code
        assert resp.json() == {"error": kind.value, "message": message}


def test_invalid_number_is_rejected_before_repository(monkeypatch) -> None:
    class _ExplodingRepository:
        async def get_by_number(self, number: int):
            raise AssertionError("repository must not be called")

    monkeypatch.setattr(use_cases.get_concrete, "repository", _ExplodingRepository())
    monkeypatch.setattr(use_cases.get_concrete, "input_converter", InputConverter())

    resp = client.get("/trivia/abc")
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "invalid_input_failure",
        "message": "Invalid Input - The number must be a positive integer or zero.",
    }


def test_oversized_number_is_invalid_input() -> None:
    resp = client.get("/trivia/" + "1" * 5000)
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_input_failure"
