import re

from number_trivia.outcome import Failure, FailureKind, Outcome, Success

_INTEGER = re.compile(r"[+-]?[0-9]+")


class InputConverter:
    """Turns raw user text into a trivia number.

    Only plain ASCII integers with an optional sign are accepted, and the
    value must be zero or positive.
    """

    def parse(self, raw: str) -> Outcome[int]:
        candidate = raw.strip() if isinstance(raw, str) else ""
        if not _INTEGER.fullmatch(candidate):
            return Failure(FailureKind.INVALID_INPUT)
        try:
            number = int(candidate)
        except ValueError:
            # digit runs past the interpreter's int conversion limit
            return Failure(FailureKind.INVALID_INPUT)
        if number < 0:
            return Failure(FailureKind.INVALID_INPUT)
        return Success(number)
