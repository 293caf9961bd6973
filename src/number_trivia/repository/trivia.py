import logging
from collections.abc import Awaitable, Callable

from number_trivia.contracts import ConnectivityProbe, RemoteTriviaSource, TriviaCache
from number_trivia.logfmt import clip
from number_trivia.models import TriviaRecord
from number_trivia.outcome import Failure, FailureKind, Outcome, Success

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 500


class NumberTriviaRepository:
    """Chooses between the remote source and the local cache for each call.

    Online, the remote result is returned and written to the cache; a remote
    fault is a server failure and the cache is left alone. Offline, the last
    cached record is returned whatever number was asked for. Collaborator
    exceptions never leave this class.
    """

    def __init__(
        self,
        remote_source: RemoteTriviaSource,
        cache: TriviaCache,
        probe: ConnectivityProbe,
    ) -> None:
        self.remote_source = remote_source
        self.cache = cache
        self.probe = probe

    async def get_by_number(self, number: int) -> Outcome[TriviaRecord]:
        return await self._get_trivia(lambda: self.remote_source.fetch_by_number(number), query=f"number={number}")

    async def get_random(self) -> Outcome[TriviaRecord]:
        return await self._get_trivia(self.remote_source.fetch_random, query="random")

    async def _get_trivia(
        self,
        fetch: Callable[[], Awaitable[TriviaRecord]],
        query: str,
    ) -> Outcome[TriviaRecord]:
        if not await self._is_connected():
            return await self._read_cache(query)

        try:
            record = await fetch()
        except Exception as exc:
            logger.warning(
                "repository.remote_failed query=%s type=%s detail=%s",
                query,
                exc.__class__.__name__,
                clip(str(exc), ERROR_LOG_LIMIT),
            )
            return Failure(FailureKind.SERVER)

        try:
            await self.cache.save(record)
        except Exception as exc:
            logger.warning(
                "repository.cache_save_failed query=%s type=%s detail=%s",
                query,
                exc.__class__.__name__,
                clip(str(exc), ERROR_LOG_LIMIT),
            )
        logger.info("repository.remote query=%s number=%d", query, record.number)
        return Success(record)

    async def _read_cache(self, query: str) -> Outcome[TriviaRecord]:
        try:
            record = await self.cache.get_last()
        except Exception as exc:
            logger.info(
                "repository.cache_miss query=%s type=%s detail=%s",
                query,
                exc.__class__.__name__,
                clip(str(exc), ERROR_LOG_LIMIT),
            )
            return Failure(FailureKind.CACHE)
        logger.info("repository.cached query=%s number=%d", query, record.number)
        return Success(record)

    async def _is_connected(self) -> bool:
        try:
            return bool(await self.probe.is_connected())
        except Exception as exc:
            logger.warning(
                "repository.probe_failed type=%s detail=%s",
                exc.__class__.__name__,
                clip(str(exc), ERROR_LOG_LIMIT),
            )
            return False
