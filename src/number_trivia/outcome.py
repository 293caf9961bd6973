from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    SERVER = "server_failure"
    CACHE = "cache_failure"
    INVALID_INPUT = "invalid_input_failure"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    """Classified failure. Compared by kind only; carries no message."""

    kind: FailureKind


Outcome = Success[T] | Failure
