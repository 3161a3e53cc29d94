"""Client façade: anonymous and authenticated sessions exposing the server's operations.

Every operation validates its arguments before building a request. Invalid arguments raise
``InvalidArgumentError`` immediately, at call time, and nothing is sent. Valid calls return an
awaitable that fails with one of:

- ``BadResponseError``: the server returned an HTTP error or could not be reached in time.
- ``MissingAccessError``: the most common error. Raised when nothing was found (e.g. a search
  with no results) *or* when access was denied (e.g. the target user blocked this account).
  The server answers ``-1`` in both cases; they cannot be distinguished.
- ``CorruptedResponseError``: the response could not be decoded. Rare against the official
  server, more frequent against private servers.
"""

import logging
import secrets
import string
from collections.abc import Coroutine
from typing import Any, TypeVar

from gd_client.cache import ResultCache
from gd_client.config import Config
from gd_client.crypto import LEVEL_RATING_KEY, LEVEL_RATING_SALT, encode_base64, encode_message_body, generate_chk
from gd_client.decoders import (
    decode_ack,
    decode_first_search_result,
    decode_login,
    decode_message,
    decode_message_content,
    decode_user,
    decode_user_search_result,
    list_decoder,
    page_decoder,
)
from gd_client.entities import DemonDifficulty, LeaderboardType, Message, User, UserListType, UserSearchResult
from gd_client.errors import InvalidArgumentError
from gd_client.paginator import Paginator
from gd_client.pipeline import FetchPipeline
from gd_client.request import Request, common_params
from gd_client.session import ANONYMOUS_SCOPE, ParamInjector, Session, no_injection
from gd_client.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")
Call = Coroutine[Any, Any, T]

DEFAULT_UDID = "gd-client"

# Endpoint-specific secrets
DEMON_RATING_SECRET = "Wmfp3879gc3"
ACCOUNT_SECRET = "Wmfv3899gc9"

_decode_user_list = list_decoder(decode_user_search_result)


def _require_registered(account_id: int, what: str) -> None:
    """Raise unless the account id belongs to a registered user."""
    if account_id <= 0:
        raise InvalidArgumentError(f"Cannot {what} an unregistered user (account id {account_id})")


def _require_page(page: int) -> None:
    if page < 0:
        raise InvalidArgumentError(f"Page number must be non-negative, got {page}")


class GDClient:
    """Anonymous client. Use as an async context manager to release connections."""

    def __init__(
        self,
        transport: Transport,
        *,
        cache: ResultCache | None = None,
        cache_ttl: float = 900.0,
        request_timeout: float = 10.0,
        udid: str = DEFAULT_UDID,
        inject: ParamInjector = no_injection,
        scope: str = ANONYMOUS_SCOPE,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Sends requests over HTTP.
            cache: Result cache; a private one is created if omitted. May be shared between clients.
            cache_ttl: Lifetime of cached results in seconds.
            request_timeout: Upper bound on one request in seconds.
            udid: Device identifier sent with ratings.
            inject: Adds session parameters to every request.
            scope: Cache scope separating this session's results from other sessions'.

        """
        self.udid = udid
        self._pipeline = FetchPipeline(
            transport,
            cache if cache is not None else ResultCache(),
            cache_ttl=cache_ttl,
            request_timeout=request_timeout,
            inject=inject,
            scope=scope,
        )

    @staticmethod
    def from_config(config: Config, *, transport: Transport | None = None, cache: ResultCache | None = None) -> "GDClient":
        """Build an anonymous client from configuration."""
        return GDClient(
            transport if transport is not None else HttpxTransport(config.host),
            cache=cache,
            cache_ttl=config.cache_ttl,
            request_timeout=config.request_timeout,
            udid=config.udid,
        )

    @property
    def pipeline(self) -> FetchPipeline:
        """Pipeline executing this client's requests."""
        return self._pipeline

    async def __aenter__(self) -> "GDClient":
        return self

    async def __aexit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Release transport connections."""
        await self._pipeline.transport.close()

    # --- Users ---

    def get_user_by_account_id(self, account_id: int) -> Call[User]:
        """Fetch a user profile.

        Raises:
            InvalidArgumentError: Non-positive account id.

        """
        _require_registered(account_id, "look up")
        return self._pipeline.fetch(
            Request("getGJUserInfo20.php", {**common_params(), "targetAccountID": str(account_id)}, decode_user)
        )

    def search_user(self, query: str) -> Call[UserSearchResult]:
        """Find the first user matching a name or player id.

        Raises:
            InvalidArgumentError: Empty query.

        """
        if not query:
            raise InvalidArgumentError("Search query cannot be empty.")
        return self._pipeline.fetch(
            Request("getGJUsers20.php", {**common_params(), "str": query, "page": "0"}, decode_first_search_result)
        )

    def search_users(self, query: str, page: int = 0) -> Call[Paginator[UserSearchResult]]:
        """Search users by name, one page at a time.

        Raises:
            InvalidArgumentError: Empty query or negative page.

        """
        if not query:
            raise InvalidArgumentError("Search query cannot be empty.")
        _require_page(page)
        request = Request(
            "getGJUsers20.php",
            {**common_params(), "str": query, "page": str(page)},
            page_decoder(decode_user_search_result),
            page_param="page",
        )
        return Paginator.fetch(self._pipeline, request)


class AuthenticatedGDClient(GDClient):
    """Client logged in to an account. Adds private messaging, ratings and social operations."""

    def __init__(
        self,
        session: Session,
        transport: Transport,
        *,
        cache: ResultCache | None = None,
        cache_ttl: float = 900.0,
        request_timeout: float = 10.0,
        udid: str = DEFAULT_UDID,
    ) -> None:
        """Initialize the client for an account.

        Args:
            session: Account identity; its credentials are added to every request.
            transport: Sends requests over HTTP.
            cache: Result cache; entries are scoped to the session's account.
            cache_ttl: Lifetime of cached results in seconds.
            request_timeout: Upper bound on one request in seconds.
            udid: Device identifier sent with ratings.

        """
        super().__init__(
            transport,
            cache=cache,
            cache_ttl=cache_ttl,
            request_timeout=request_timeout,
            udid=udid,
            inject=session.inject,
            scope=session.scope,
        )
        self._session = session

    @property
    def account_id(self) -> int:
        """Account id of the logged-in account."""
        return self._session.account_id

    @property
    def player_id(self) -> int:
        """Player id of the logged-in account."""
        return self._session.player_id

    @property
    def username(self) -> str:
        """Name of the logged-in account."""
        return self._session.username

    @property
    def password(self) -> str:
        """Plaintext password of the logged-in account."""
        return self._session.password

    # --- Messages ---

    def get_private_messages(self, page: int = 0) -> Call[Paginator[Message]]:
        """Fetch a page of the inbox.

        An empty inbox raises ``MissingAccessError`` rather than returning an empty page.

        Raises:
            InvalidArgumentError: Negative page.

        """
        _require_page(page)
        request = Request(
            "getGJMessages20.php",
            {**common_params(), "page": str(page), "total": "0", "getSent": "0"},
            page_decoder(decode_message),
            page_param="page",
        )
        return Paginator.fetch(self._pipeline, request)

    def get_message_body(self, message_id: int) -> Call[str]:
        """Download the body of a private message.

        Raises:
            InvalidArgumentError: Non-positive message id.

        """
        if message_id <= 0:
            raise InvalidArgumentError(f"Invalid message id: {message_id}")
        return self._pipeline.fetch(
            Request("downloadGJMessage20.php", {**common_params(), "messageID": str(message_id)}, decode_message_content)
        )

    def send_private_message(self, recipient_account_id: int, subject: str, body: str) -> Call[None]:
        """Send a private message.

        Raises:
            InvalidArgumentError: Recipient is not a registered user.

        """
        _require_registered(recipient_account_id, "send a private message to")
        params = {
            **common_params(),
            "toAccountID": str(recipient_account_id),
            "subject": encode_base64(subject),
            "body": encode_message_body(body),
        }
        return self._pipeline.fetch(Request("uploadGJMessage20.php", params, decode_ack, cacheable=False))

    # --- Levels ---

    def rate_stars(self, level_id: int, stars: int, udid: str | None = None) -> Call[None]:
        """Suggest a star rating for a level.

        Raises:
            InvalidArgumentError: Stars outside 1..10.

        """
        if not 1 <= stars <= 10:
            raise InvalidArgumentError(f"Star count must be between 1 and 10, got {stars}")
        device = udid or self.udid
        rs = "".join(secrets.choice(string.ascii_letters + string.digits) for _ in range(10))
        chk = generate_chk(
            [str(level_id), str(stars), rs, str(self.account_id), device, str(self.player_id)],
            LEVEL_RATING_KEY,
            LEVEL_RATING_SALT,
        )
        params = {
            **common_params(),
            "levelID": str(level_id),
            "stars": str(stars),
            "udid": device,
            "uuid": str(self.player_id),
            "rs": rs,
            "chk": chk,
        }
        return self._pipeline.fetch(Request("rateGJStars211.php", params, decode_ack, cacheable=False))

    def rate_demon(self, level_id: int, difficulty: DemonDifficulty) -> Call[None]:
        """Suggest a demon difficulty for a level."""
        params = {
            **common_params(DEMON_RATING_SECRET),
            "levelID": str(level_id),
            "rating": str(difficulty.value),
            "mode": "0",
        }
        return self._pipeline.fetch(Request("rateGJDemon21.php", params, decode_ack, cacheable=False))

    # --- Users ---

    def get_leaderboard(self, type_: LeaderboardType, count: int) -> Call[tuple[UserSearchResult, ...]]:
        """Fetch a leaderboard of at most count users.

        Raises:
            InvalidArgumentError: Count below 1.

        """
        if count < 1:
            raise InvalidArgumentError(f"Leaderboard count must be positive, got {count}")
        params = {**common_params(), "type": type_.value, "count": str(count)}
        return self._pipeline.fetch(Request("getGJScores20.php", params, _decode_user_list))

    def get_friends(self) -> Call[tuple[UserSearchResult, ...]]:
        """Fetch the account's friend list."""
        return self._user_list(UserListType.FRIENDS)

    def get_blocked_users(self) -> Call[tuple[UserSearchResult, ...]]:
        """Fetch the users blocked by the account."""
        return self._user_list(UserListType.BLOCKED)

    def block_user(self, target_account_id: int) -> Call[None]:
        """Block a user.

        Raises:
            InvalidArgumentError: Target is not a registered user.

        """
        _require_registered(target_account_id, "block")
        return self._pipeline.fetch(
            Request("blockGJUser20.php", {**common_params(), "targetAccountID": str(target_account_id)}, decode_ack, cacheable=False)
        )

    def unblock_user(self, target_account_id: int) -> Call[None]:
        """Unblock a user.

        Raises:
            InvalidArgumentError: Target is not a registered user.

        """
        _require_registered(target_account_id, "unblock")
        return self._pipeline.fetch(
            Request("unblockGJUser20.php", {**common_params(), "targetAccountID": str(target_account_id)}, decode_ack, cacheable=False)
        )

    def _user_list(self, list_type: UserListType) -> Call[tuple[UserSearchResult, ...]]:
        params = {**common_params(), "type": str(list_type.value)}
        return self._pipeline.fetch(Request("getGJUserList20.php", params, _decode_user_list))


async def login(
    username: str,
    password: str,
    *,
    config: Config | None = None,
    transport: Transport | None = None,
    cache: ResultCache | None = None,
) -> AuthenticatedGDClient:
    """Log in to an account and return a client bound to it.

    Raises:
        InvalidArgumentError: Empty username or password.
        MissingAccessError: Wrong credentials (or unknown account).
        BadResponseError: HTTP failure.
        CorruptedResponseError: Unexpected login answer.

    """
    if not username or not password:
        raise InvalidArgumentError("Username and password are required to log in.")
    cfg = config if config is not None else Config()
    owns_transport = transport is None
    transport = transport if transport is not None else HttpxTransport(cfg.host)
    anonymous = FetchPipeline(transport, ResultCache(), cache_ttl=0, request_timeout=cfg.request_timeout)
    params = {**common_params(ACCOUNT_SECRET), "userName": username, "password": password, "udid": cfg.udid}
    try:
        account_id, player_id = await anonymous.fetch(
            Request("accounts/loginGJAccount.php", params, decode_login, cacheable=False)
        )
        session = Session.create(account_id, player_id, username, password)
    except BaseException:
        if owns_transport:
            await transport.close()
        raise
    logger.info("Logged in as %s (account %d)", username, account_id)
    return AuthenticatedGDClient(
        session,
        transport,
        cache=cache,
        cache_ttl=cfg.cache_ttl,
        request_timeout=cfg.request_timeout,
        udid=cfg.udid,
    )
