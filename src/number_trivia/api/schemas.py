from pydantic import BaseModel, Field

from number_trivia.outcome import FailureKind


class TriviaResponse(BaseModel):
    text: str
    number: int


class FailureResponse(BaseModel):
    error: FailureKind
    message: str = Field(..., description="Human readable explanation of the failure kind.")
