import logging

import httpx

from number_trivia.config import Settings

logger = logging.getLogger(__name__)


class HttpConnectivityProbe:
    """Reports reachability by sending a HEAD request to a known endpoint.

    Any HTTP response, whatever its status, counts as connected: the transport
    worked. Any failure of the check itself, from a timeout to an unparsable
    URL, resolves to ``False`` instead of raising.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.url = settings.connectivity_probe_url
        self.timeout = settings.connectivity_timeout_seconds
        self.transport = transport

    async def is_connected(self) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.head(self.url)
        except Exception as exc:
            logger.info("connectivity.offline url=%s type=%s", self.url, exc.__class__.__name__)
            return False
        logger.debug("connectivity.online url=%s status=%d", self.url, response.status_code)
        return True


class StaticConnectivityProbe:
    """Probe with a fixed answer, for deployments known to be online or offline."""

    def __init__(self, connected: bool) -> None:
        self.connected = connected

    async def is_connected(self) -> bool:
        return self.connected
