"""Fetch pipeline: cache lookup, authentication, dispatch, classification, caching."""

import asyncio
import logging
from typing import TypeVar, assert_never

from gd_client.cache import ResultCache
from gd_client.classifier import LogicalFailure, MalformedContent, Success, TransportFailure, classify
from gd_client.errors import BadResponseError, CorruptedResponseError, MissingAccessError, TransportError
from gd_client.request import Request
from gd_client.session import ANONYMOUS_SCOPE, ParamInjector, no_injection
from gd_client.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FetchPipeline:
    """Turns request descriptors into decoded results or errors.

    The pipeline never retries and never swallows errors; every failure reaches the caller.
    Two concurrent fetches of the same uncached request each hit the server.
    """

    def __init__(
        self,
        transport: Transport,
        cache: ResultCache,
        *,
        cache_ttl: float,
        request_timeout: float,
        inject: ParamInjector = no_injection,
        scope: str = ANONYMOUS_SCOPE,
    ) -> None:
        """Initialize the pipeline.

        Args:
            transport: Sends requests over HTTP.
            cache: Shared result cache.
            cache_ttl: Lifetime of cached results in seconds.
            request_timeout: Upper bound on one dispatch in seconds.
            inject: Adds authentication parameters before dispatch.
            scope: Cache scope of the session using this pipeline.

        """
        self.transport = transport
        self.cache = cache
        self.cache_ttl = cache_ttl
        self.request_timeout = request_timeout
        self._inject = inject
        self._scope = scope

    async def fetch(self, request: Request[T]) -> T:
        """Execute a request, serving it from the cache when possible.

        Raises:
            BadResponseError: Non-2xx status, connection failure or timeout.
            MissingAccessError: The server answered ``-1``.
            CorruptedResponseError: The body could not be decoded.

        """
        key = request.cache_key(self._scope)
        if request.cacheable:
            entry = self.cache.get(key)
            if entry is not None:
                logger.debug("Cache hit: %s", request.endpoint)
                return entry.value  # type: ignore[return-value]

        params = self._inject(dict(request.params))
        logger.debug("Dispatch: %s", request.endpoint)
        try:
            async with asyncio.timeout(self.request_timeout):
                result = await self.transport.send(request.endpoint, params, self.request_timeout)
        except TimeoutError:
            outcome = TransportFailure(status=None, cause=f"timed out after {self.request_timeout}s")
        except TransportError as e:
            outcome = TransportFailure(status=None, cause=str(e))
        else:
            outcome = classify(result, request.decoder)

        match outcome:
            case Success(value=value):
                if request.cacheable:
                    self.cache.put(key, value, self.cache_ttl)
                return value
            case LogicalFailure():
                raise MissingAccessError(f"{request.endpoint}: nothing found or access denied")
            case TransportFailure(status=status, cause=cause):
                raise BadResponseError(f"{request.endpoint}: {cause}", status_code=status)
            case MalformedContent(raw=raw, reason=reason):
                raise CorruptedResponseError(f"{request.endpoint}: unexpected response ({reason})", raw=raw)
            case _:
                assert_never(outcome)
