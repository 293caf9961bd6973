from typing import Protocol

from number_trivia.models import TriviaRecord


class ConnectivityProbe(Protocol):
    async def is_connected(self) -> bool: ...


class RemoteTriviaSource(Protocol):
    """Raises ServerException when a record cannot be fetched."""

    async def fetch_by_number(self, number: int) -> TriviaRecord: ...

    async def fetch_random(self) -> TriviaRecord: ...


class TriviaCache(Protocol):
    """Single slot holding the last fetched record.

    ``get_last`` raises CacheException when the slot is empty or corrupt.
    """

    async def get_last(self) -> TriviaRecord: ...

    async def save(self, record: TriviaRecord) -> None: ...
