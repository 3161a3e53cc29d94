"""Error taxonomy raised by the client.

Callers see exactly four kinds of failure, plus argument errors raised before any request is sent:

- ``InvalidArgumentError``: a structurally invalid argument, detected synchronously.
- ``BadResponseError``: the HTTP exchange failed (non-2xx status, connection error or timeout).
- ``MissingAccessError``: the server answered ``-1``.
- ``CorruptedResponseError``: the body could not be decoded into the expected shape.
"""


class GDError(Exception):
    """Base class for all client errors."""

    code = "error"

    def __init__(self, message: str) -> None:
        """Initialize with a human-readable message.

        Args:
            message: Human-readable error description.

        """
        super().__init__(message)


class InvalidArgumentError(GDError, ValueError):
    """An operation was called with an invalid argument. Nothing was sent."""

    code = "invalid_argument"


class BadResponseError(GDError):
    """The server returned a non-success HTTP status, or could not be reached in time."""

    code = "bad_response"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize with the HTTP status, if any.

        Args:
            message: Human-readable error description.
            status_code: HTTP status code, or None for timeouts and connection failures.

        """
        super().__init__(message)
        self.status_code = status_code


class MissingAccessError(GDError):
    """The server answered with its ``-1`` sentinel.

    The server uses the same answer when nothing matched the request and when access to the
    resource was denied (e.g. the target user blocked this account). The two cases cannot be
    told apart from the client side. An empty page while paginating looks the same.
    """

    code = "missing_access"


class CorruptedResponseError(GDError):
    """The server answered, but the body does not have the expected structure."""

    code = "corrupted_response"

    def __init__(self, message: str, raw: str) -> None:
        """Initialize with the raw body that failed to decode.

        Args:
            message: Human-readable error description.
            raw: Response body as received.

        """
        super().__init__(message)
        self.raw = raw


class DecodeError(GDError):
    """Raised by response decoders. Converted to ``CorruptedResponseError`` by the pipeline."""

    code = "decode_error"


class TransportError(GDError):
    """Raised by transports when the HTTP exchange itself fails. Converted to ``BadResponseError``."""

    code = "transport_error"
