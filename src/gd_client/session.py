"""Account identity and the authentication parameters it adds to requests."""

from collections.abc import Callable
from dataclasses import dataclass, field

from gd_client.crypto import encode_account_password
from gd_client.errors import InvalidArgumentError

# Adds session-scoped parameters to an operation's parameters, returning a new mapping
ParamInjector = Callable[[dict[str, str]], dict[str, str]]

ANONYMOUS_SCOPE = "anonymous"


def no_injection(params: dict[str, str]) -> dict[str, str]:
    """Injection hook of anonymous clients."""
    return params


@dataclass(frozen=True)
class Session:
    """Identity of a logged-in account. Immutable for the lifetime of its client."""

    account_id: int
    player_id: int
    username: str
    password: str = field(repr=False)
    gjp: str = field(repr=False)

    @staticmethod
    def create(account_id: int, player_id: int, username: str, password: str | None) -> "Session":
        """Build a session, deriving the GJP token from the password.

        Raises:
            InvalidArgumentError: Missing password or non-positive account id.

        """
        if password is None:
            raise InvalidArgumentError("An authenticated session requires a password.")
        if account_id <= 0:
            raise InvalidArgumentError(f"Invalid account id: {account_id}")
        return Session(
            account_id=account_id,
            player_id=player_id,
            username=username,
            password=password,
            gjp=encode_account_password(password),
        )

    @property
    def scope(self) -> str:
        """Cache scope: results fetched by this account are never served to another."""
        return f"account:{self.account_id}"

    def inject(self, params: dict[str, str]) -> dict[str, str]:
        """Add ``accountID`` and ``gjp`` to the parameters."""
        return {**params, "accountID": str(self.account_id), "gjp": self.gjp}
