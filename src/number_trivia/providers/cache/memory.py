from number_trivia.errors import CacheException
from number_trivia.models import TriviaRecord


class MemoryTriviaCache:
    """In-process single-slot cache. Lost on restart."""

    def __init__(self, record: TriviaRecord | None = None) -> None:
        self._record = record

    async def get_last(self) -> TriviaRecord:
        if self._record is None:
            raise CacheException("no trivia cached yet")
        return self._record

    async def save(self, record: TriviaRecord) -> None:
        self._record = record
