"""Shared fixtures: a recording fake transport and a controllable clock."""

import asyncio
from dataclasses import dataclass, field

import pytest

from gd_client.cache import ResultCache
from gd_client.client import AuthenticatedGDClient, GDClient
from gd_client.session import Session
from gd_client.transport import TransportResult

ACCOUNT_ID = 98006
PLAYER_ID = 4063664
USERNAME = "Alex1304"
PASSWORD = "test-password"


@dataclass
class SentRequest:
    """One request observed by the fake transport."""

    endpoint: str
    params: dict[str, str]
    timeout: float


@dataclass
class FakeTransport:
    """Transport replaying queued results and recording what was sent.

    When the queue is empty, every request is answered with ``default``.
    """

    default: TransportResult = field(default_factory=lambda: TransportResult(status=200, body="1"))
    delay: float = 0.0
    sent: list[SentRequest] = field(default_factory=list)
    closed: bool = False
    _queue: list[TransportResult | Exception] = field(default_factory=list)

    def queue(self, body: str, status: int = 200) -> None:
        """Answer the next request with this body and status."""
        self._queue.append(TransportResult(status=status, body=body))

    def queue_error(self, error: Exception) -> None:
        """Make the next request raise this error."""
        self._queue.append(error)

    async def send(self, endpoint: str, params: dict[str, str], timeout: float) -> TransportResult:
        self.sent.append(SentRequest(endpoint=endpoint, params=params, timeout=timeout))
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self._queue.pop(0) if self._queue else self.default
        if isinstance(result, Exception):
            raise result
        return result

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def transport() -> FakeTransport:
    """Fake transport answering "1" by default."""
    return FakeTransport()


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> ResultCache:
    """Result cache driven by the fake clock."""
    return ResultCache(clock=clock)


@pytest.fixture
def session() -> Session:
    """Session of a test account."""
    return Session.create(ACCOUNT_ID, PLAYER_ID, USERNAME, PASSWORD)


@pytest.fixture
def client(transport: FakeTransport, cache: ResultCache) -> GDClient:
    """Anonymous client over the fake transport."""
    return GDClient(transport, cache=cache, cache_ttl=60.0, request_timeout=5.0)


@pytest.fixture
def auth_client(session: Session, transport: FakeTransport, cache: ResultCache) -> AuthenticatedGDClient:
    """Authenticated client over the fake transport."""
    return AuthenticatedGDClient(session, transport, cache=cache, cache_ttl=60.0, request_timeout=5.0)
