import logging

import httpx
from pydantic import ValidationError

from number_trivia.config import Settings
from number_trivia.errors import ServerException
from number_trivia.logfmt import clip
from number_trivia.models import TriviaRecord

logger = logging.getLogger(__name__)
BODY_LOG_LIMIT = 500


class NumbersApiSource:
    """Numbers API remote source with compact request/response logs."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = settings.numbers_api_base_url
        self.timeout = settings.numbers_api_timeout_seconds
        self.transport = transport

    async def fetch_by_number(self, number: int) -> TriviaRecord:
        return await self._fetch(f"{self.base_url}/{number}")

    async def fetch_random(self) -> TriviaRecord:
        return await self._fetch(f"{self.base_url}/random")

    async def _fetch(self, url: str) -> TriviaRecord:
        logger.info("numbers_api.request url=%s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                http_response = await client.get(
                    url,
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("numbers_api.transport_failed type=%s detail=%s", exc.__class__.__name__, str(exc))
            raise ServerException(f"request to {url} failed: {exc}") from exc

        if http_response.status_code != 200:
            logger.warning(
                "numbers_api.bad_status status=%d body=%s",
                http_response.status_code,
                clip(http_response.text, BODY_LOG_LIMIT),
            )
            raise ServerException(f"unexpected status {http_response.status_code} from {url}")

        try:
            record = TriviaRecord.from_json(http_response.content)
        except ValidationError as exc:
            logger.warning(
                "numbers_api.malformed_payload body=%s",
                clip(http_response.text, BODY_LOG_LIMIT),
            )
            raise ServerException(f"malformed trivia payload from {url}") from exc

        logger.info("numbers_api.response number=%d text=%s", record.number, clip(record.text, 80))
        return record
