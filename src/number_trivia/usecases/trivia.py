from typing import assert_never

from number_trivia.models import TriviaRecord
from number_trivia.outcome import Failure, Outcome, Success
from number_trivia.repository.trivia import NumberTriviaRepository
from number_trivia.usecases.input_converter import InputConverter


class GetConcreteNumberTrivia:
    def __init__(self, repository: NumberTriviaRepository, input_converter: InputConverter | None = None) -> None:
        self.repository = repository
        self.input_converter = input_converter or InputConverter()

    async def __call__(self, raw_number: str) -> Outcome[TriviaRecord]:
        parsed = self.input_converter.parse(raw_number)
        match parsed:
            case Failure():
                return parsed
            case Success(value=number):
                return await self.repository.get_by_number(number)
            case _:
                assert_never(parsed)


class GetRandomNumberTrivia:
    def __init__(self, repository: NumberTriviaRepository) -> None:
        self.repository = repository

    async def __call__(self) -> Outcome[TriviaRecord]:
        return await self.repository.get_random()
