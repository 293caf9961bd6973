import logging
from typing import assert_never

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from number_trivia.api.schemas import FailureResponse, TriviaResponse
from number_trivia.container import build_use_cases
from number_trivia.models import TriviaRecord
from number_trivia.outcome import Failure, FailureKind, Outcome, Success

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

SERVER_FAILURE_MESSAGE = "Server Failure"
CACHE_FAILURE_MESSAGE = "Cache Failure"
INVALID_INPUT_FAILURE_MESSAGE = "Invalid Input - The number must be a positive integer or zero."

FAILURE_RESPONSES: dict[FailureKind, tuple[int, str]] = {
    FailureKind.SERVER: (502, SERVER_FAILURE_MESSAGE),
    FailureKind.CACHE: (503, CACHE_FAILURE_MESSAGE),
    FailureKind.INVALID_INPUT: (400, INVALID_INPUT_FAILURE_MESSAGE),
}

app = FastAPI(title="number-trivia", version="0.1.0")
use_cases = build_use_cases()


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.get(
    "/trivia/random",
    response_model=TriviaResponse,
    responses={code: {"model": FailureResponse} for code, _ in FAILURE_RESPONSES.values()},
)
async def random_trivia():
    return _to_response(await use_cases.get_random())


@app.get(
    "/trivia/{raw_number}",
    response_model=TriviaResponse,
    responses={code: {"model": FailureResponse} for code, _ in FAILURE_RESPONSES.values()},
)
async def concrete_trivia(raw_number: str):
    return _to_response(await use_cases.get_concrete(raw_number))


def _to_response(outcome: Outcome[TriviaRecord]) -> TriviaResponse | JSONResponse:
    match outcome:
        case Success(value=record):
            return TriviaResponse(text=record.text, number=record.number)
        case Failure(kind=kind):
            status_code, message = FAILURE_RESPONSES[kind]
            body = FailureResponse(error=kind, message=message)
            return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
        case _:
            assert_never(outcome)
