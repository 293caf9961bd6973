import logging
from dataclasses import dataclass

from number_trivia.config import Settings, get_settings
from number_trivia.contracts import ConnectivityProbe, RemoteTriviaSource, TriviaCache
from number_trivia.network.probe import HttpConnectivityProbe, StaticConnectivityProbe
from number_trivia.providers.cache.json_file import JsonFileTriviaCache
from number_trivia.providers.cache.memory import MemoryTriviaCache
from number_trivia.providers.remote.mock import MockTriviaSource
from number_trivia.providers.remote.numbers_api import NumbersApiSource
from number_trivia.repository.trivia import NumberTriviaRepository
from number_trivia.usecases.input_converter import InputConverter
from number_trivia.usecases.trivia import GetConcreteNumberTrivia, GetRandomNumberTrivia

logger = logging.getLogger(__name__)


@dataclass
class UseCases:
    get_concrete: GetConcreteNumberTrivia
    get_random: GetRandomNumberTrivia


def build_remote_source(settings: Settings) -> RemoteTriviaSource:
    if settings.remote_provider == "mock":
        return MockTriviaSource()
    return NumbersApiSource(settings)


def build_cache(settings: Settings) -> TriviaCache:
    if settings.cache_path:
        return JsonFileTriviaCache(settings.cache_path)
    return MemoryTriviaCache()


def build_probe(settings: Settings) -> ConnectivityProbe:
    if settings.assume_online is not None:
        return StaticConnectivityProbe(settings.assume_online)
    return HttpConnectivityProbe(settings)


def build_repository(settings: Settings | None = None) -> NumberTriviaRepository:
    settings = settings or get_settings()
    logger.info(
        "container.repository remote=%s cache=%s probe=%s",
        settings.remote_provider,
        settings.cache_path or "memory",
        "static" if settings.assume_online is not None else settings.connectivity_probe_url,
    )
    return NumberTriviaRepository(
        remote_source=build_remote_source(settings),
        cache=build_cache(settings),
        probe=build_probe(settings),
    )


def build_use_cases(settings: Settings | None = None) -> UseCases:
    repository = build_repository(settings)
    return UseCases(
        get_concrete=GetConcreteNumberTrivia(repository, InputConverter()),
        get_random=GetRandomNumberTrivia(repository),
    )
