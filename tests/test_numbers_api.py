import asyncio

import httpx
import pytest

from number_trivia.config import Settings
from number_trivia.errors import ServerException
from number_trivia.models import TriviaRecord
from number_trivia.providers.remote.numbers_api import NumbersApiSource


def _source(handler) -> NumbersApiSource:
    settings = Settings(NUMBERS_API_BASE_URL="http://numbers.test/")
    return NumbersApiSource(settings, transport=httpx.MockTransport(handler))


def test_fetch_by_number_hits_number_endpoint_with_json_header() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"text": "1 is the loneliest number.", "number": 1, "found": True})

    record = asyncio.run(_source(handler).fetch_by_number(1))

    assert record == TriviaRecord(text="1 is the loneliest number.", number=1)
    assert str(seen[0].url) == "http://numbers.test/1"
    assert seen[0].headers["Content-Type"] == "application/json"


def test_fetch_random_hits_random_endpoint() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={"text": "Test", "number": 123})

    record = asyncio.run(_source(handler).fetch_random())

    assert record == TriviaRecord(text="Test", number=123)
    assert seen == ["/random"]


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, text="not found"),
        httpx.Response(500, json={"text": "Test", "number": 1}),
        httpx.Response(200, text="<html>oops</html>"),
        httpx.Response(200, json={"text": "", "number": 1}),
        httpx.Response(200, json={"text": "Test"}),
        httpx.Response(200, json={"text": "Test", "number": True}),
        httpx.Response(200, json={"text": "Test", "number": "12"}),
        httpx.Response(200, json={"text": "Test", "number": 1.5}),
    ],
)
def test_bad_responses_raise_server_exception(response: httpx.Response) -> None:
    source = _source(lambda request: response)

    with pytest.raises(ServerException):
        asyncio.run(source.fetch_by_number(1))


def test_transport_error_raises_server_exception() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(ServerException):
        asyncio.run(_source(handler).fetch_random())
