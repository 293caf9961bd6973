import random

from number_trivia.models import TriviaRecord


class MockTriviaSource:
    """Offline remote source with fixed, deterministic facts."""

    def __init__(self, seed: int | None = 0) -> None:
        self._random = random.Random(seed)

    async def fetch_by_number(self, number: int) -> TriviaRecord:
        return TriviaRecord(text=f"{number} is the number you asked about.", number=number)

    async def fetch_random(self) -> TriviaRecord:
        return await self.fetch_by_number(self._random.randint(0, 1000))
