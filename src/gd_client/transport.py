"""HTTP transport: the only place the client touches the network."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from gd_client.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "http://www.boomlings.com/database"


@dataclass(frozen=True)
class TransportResult:
    """Raw result of one HTTP exchange."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        """True for a 2xx status."""
        return 200 <= self.status < 300


class Transport(Protocol):
    """Sends one request and returns the raw result."""

    async def send(self, endpoint: str, params: dict[str, str], timeout: float) -> TransportResult:
        """Send form parameters to an endpoint.

        Raises:
            TransportError: The exchange itself failed (connection error, protocol error, timeout).

        """
        ...

    async def close(self) -> None:
        """Release connections."""
        ...


class HttpxTransport:
    """Transport backed by a pooled ``httpx.AsyncClient``."""

    def __init__(self, host: str = DEFAULT_HOST, *, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the transport.

        Args:
            host: Server root URL; endpoints are resolved relative to it.
            client: Pre-built client (tests inject one with a mock transport). Created lazily otherwise.

        """
        self.host = host.rstrip("/")
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Return the httpx client, creating it if necessary."""
        if self._client is None or self._client.is_closed:
            # The server rejects requests carrying common user agents
            self._client = httpx.AsyncClient(base_url=self.host + "/", headers={"User-Agent": ""})
            logger.debug("HTTP client created for %s", self.host)
        return self._client

    async def send(self, endpoint: str, params: dict[str, str], timeout: float) -> TransportResult:
        """POST form parameters to ``{host}/{endpoint}``.

        Raises:
            TransportError: Connection, protocol or timeout failure.

        """
        try:
            response = await self._get_client().post(endpoint.lstrip("/"), data=params, timeout=timeout)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {endpoint} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e
        logger.debug("Response %d from %s", response.status_code, endpoint)
        return TransportResult(status=response.status_code, body=response.text)

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("HTTP client closed")
        self._client = None
