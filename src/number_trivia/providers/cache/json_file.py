import asyncio
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from number_trivia.errors import CacheException
from number_trivia.models import TriviaRecord

logger = logging.getLogger(__name__)


class JsonFileTriviaCache:
    """Single-slot cache persisted as one JSON document.

    Saves go through a temp file in the same directory followed by
    ``os.replace``, so readers see either the previous record or the new one.
    Concurrent saves are serialized; the last writer wins.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._save_lock = asyncio.Lock()

    async def get_last(self) -> TriviaRecord:
        try:
            raw = await asyncio.to_thread(self.path.read_bytes)
        except FileNotFoundError as exc:
            raise CacheException(f"no trivia cached at {self.path}") from exc
        except OSError as exc:
            logger.warning("cache.read_failed path=%s type=%s detail=%s", self.path, exc.__class__.__name__, str(exc))
            raise CacheException(f"cannot read {self.path}") from exc

        try:
            return TriviaRecord.from_json(raw)
        except ValidationError as exc:
            logger.warning("cache.corrupt path=%s bytes=%d", self.path, len(raw))
            raise CacheException(f"corrupt trivia cache at {self.path}") from exc

    async def save(self, record: TriviaRecord) -> None:
        payload = record.model_dump_json().encode("utf-8")
        async with self._save_lock:
            await asyncio.to_thread(self._write_atomic, payload)
        logger.info("cache.saved path=%s number=%d", self.path, record.number)

    def _write_atomic(self, payload: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
