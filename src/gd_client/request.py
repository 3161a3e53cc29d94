"""Request descriptors: one value per logical remote operation.

A descriptor carries only the operation's own parameters. Authentication parameters are added
by the fetch pipeline at dispatch time, so descriptors (and cache keys derived from them) never
contain credentials.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

T = TypeVar("T")

# Parameters every endpoint accepts
GAME_VERSION = "21"
BINARY_VERSION = "35"
COMMON_SECRET = "Wmfd2893gb7"


def common_params(secret: str = COMMON_SECRET) -> dict[str, str]:
    """Client version parameters and secret sent with every request."""
    return {"gameVersion": GAME_VERSION, "binaryVersion": BINARY_VERSION, "gdw": "0", "secret": secret}


def decoder_name(decoder: Callable[[str], object]) -> str:
    """Qualified name of a decoder, telling apart requests that read the same answer differently."""
    module = getattr(decoder, "__module__", None) or type(decoder).__module__
    qualname = getattr(decoder, "__qualname__", None) or type(decoder).__qualname__
    return f"{module}.{qualname}"


@dataclass(frozen=True)
class Request(Generic[T]):
    """Immutable description of one remote operation.

    Attributes:
        endpoint: Path of the endpoint relative to the server root (e.g. ``getGJMessages20.php``).
        params: Operation parameters, in the order they are sent.
        decoder: Turns a raw response body into ``T``. Raises ``DecodeError`` on malformed input.
        cacheable: Whether a successful result may be served from the cache.
        page_param: Name of the page-offset parameter for paginated listings.

    """

    endpoint: str
    params: dict[str, str]
    decoder: Callable[[str], T] = field(compare=False)
    cacheable: bool = True
    page_param: str | None = None

    @property
    def page(self) -> int:
        """Current page number. Zero for non-paginated requests."""
        if self.page_param is None:
            return 0
        return int(self.params.get(self.page_param, "0"))

    def with_params(self, **params: str) -> "Request[T]":
        """Return a copy with the given parameters added or replaced."""
        return replace(self, params={**self.params, **params})

    def with_page(self, page: int) -> "Request[T]":
        """Return a copy targeting the given page.

        Raises:
            TypeError: The request is not paginated.

        """
        if self.page_param is None:
            msg = f"{self.endpoint} is not a paginated request"
            raise TypeError(msg)
        return self.with_params(**{self.page_param: str(page)})

    def cache_key(self, scope: str) -> tuple[str, str, str, tuple[tuple[str, str], ...]]:
        """Identity of this request for caching, qualified by the account scope that sends it.

        The decoder is part of the identity: two operations may send identical parameters and
        still expect different result types.
        """
        return scope, self.endpoint, decoder_name(self.decoder), tuple(self.params.items())
