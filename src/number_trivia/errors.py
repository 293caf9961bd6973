class TriviaError(Exception):
    """Base exception raised by trivia data collaborators."""


class ServerException(TriviaError):
    """Raised by a remote source when a fetch cannot produce a record."""


class CacheException(TriviaError):
    """Raised by a cache store when the slot is empty or unreadable."""
