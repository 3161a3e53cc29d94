"""Response classification: assigns exactly one outcome to every exchange.

The order of checks matters. A transport failure is never read as a logical failure, and the
``-1`` sentinel is recognized before decoding, since decoding it would look like corrupted content.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from gd_client.errors import DecodeError
from gd_client.transport import TransportResult

T = TypeVar("T")

# Server answer for "nothing found" and "access denied" alike
SENTINEL = "-1"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Decoded payload."""

    value: T


@dataclass(frozen=True)
class LogicalFailure:
    """The server answered with its sentinel."""


@dataclass(frozen=True)
class TransportFailure:
    """The HTTP exchange failed. ``status`` is None when no response was received."""

    status: int | None
    cause: str


@dataclass(frozen=True)
class MalformedContent:
    """The body did not decode into the expected shape."""

    raw: str
    reason: str


Outcome = Success[T] | LogicalFailure | TransportFailure | MalformedContent


def is_sentinel(body: str) -> bool:
    """Check if a body is the server's not-found-or-denied answer."""
    return body.strip() == SENTINEL


def classify(result: TransportResult, decoder: Callable[[str], T]) -> Outcome[T]:
    """Classify a completed HTTP exchange and decode its body on success."""
    if not result.ok:
        return TransportFailure(status=result.status, cause=f"HTTP {result.status}")
    if is_sentinel(result.body):
        return LogicalFailure()
    try:
        return Success(decoder(result.body))
    except (DecodeError, ValueError, IndexError, KeyError) as e:
        return MalformedContent(raw=result.body, reason=str(e) or type(e).__name__)
