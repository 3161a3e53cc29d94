"""Decoders for the server's delimited text format.

Records are ``key:value:key:value`` with integer keys. Lists join records with ``|`` and may be
followed by ``#total:offset:page_size``. Every decoder raises ``DecodeError`` on malformed input.
"""

from collections.abc import Callable
from typing import TypeVar

from gd_client.crypto import decode_base64, decode_message_body
from gd_client.entities import Message, User, UserSearchResult
from gd_client.errors import DecodeError
from gd_client.paginator import Page
from gd_client.request import decoder_name

T = TypeVar("T")


def parse_record(text: str, sep: str = ":") -> dict[int, str]:
    """Split a ``key:value`` record into a dict.

    Raises:
        DecodeError: Odd number of fields or non-integer key.

    """
    tokens = text.strip().split(sep)
    if len(tokens) % 2 != 0:
        raise DecodeError(f"Record has an odd number of fields ({len(tokens)})")
    record: dict[int, str] = {}
    for i in range(0, len(tokens), 2):
        try:
            record[int(tokens[i])] = tokens[i + 1]
        except ValueError:
            raise DecodeError(f"Non-numeric record key: {tokens[i]!r}") from None
    return record


def require_int(record: dict[int, str], key: int) -> int:
    """Read a mandatory integer field.

    Raises:
        DecodeError: Field missing or not an integer.

    """
    if key not in record:
        raise DecodeError(f"Missing field {key}")
    try:
        return int(record[key])
    except ValueError:
        raise DecodeError(f"Field {key} is not an integer: {record[key]!r}") from None


def optional_int(record: dict[int, str], key: int, default: int = 0) -> int:
    """Read an optional integer field. Empty values read as default.

    Raises:
        DecodeError: Field present but not an integer.

    """
    value = record.get(key, "")
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise DecodeError(f"Field {key} is not an integer: {value!r}") from None


def require_str(record: dict[int, str], key: int) -> str:
    """Read a mandatory string field.

    Raises:
        DecodeError: Field missing.

    """
    if key not in record:
        raise DecodeError(f"Missing field {key}")
    return record[key]


def parse_page_info(text: str) -> tuple[int, int, int]:
    """Parse ``total:offset:page_size`` metadata.

    Raises:
        DecodeError: Not exactly three integers.

    """
    parts = text.strip().split(":")
    if len(parts) != 3:
        raise DecodeError(f"Malformed page info: {text!r}")
    try:
        total, offset, page_size = (int(p) for p in parts)
    except ValueError:
        raise DecodeError(f"Malformed page info: {text!r}") from None
    return total, offset, page_size


def split_records(text: str) -> list[str]:
    """Split a ``|``-joined list, ignoring empty trailing entries."""
    return [r for r in text.strip().split("|") if r]


# --- Entities ---


def decode_user_search_result(text: str) -> UserSearchResult:
    """Decode one user list/leaderboard/search record."""
    record = parse_record(text)
    return UserSearchResult(
        account_id=require_int(record, 16),
        player_id=require_int(record, 2),
        name=require_str(record, 1),
        stars=optional_int(record, 3),
        demons=optional_int(record, 4),
        diamonds=optional_int(record, 46),
        creator_points=optional_int(record, 8),
        secret_coins=optional_int(record, 13),
        user_coins=optional_int(record, 17),
        rank=optional_int(record, 6),
        icon=optional_int(record, 9),
        color1=optional_int(record, 10),
        color2=optional_int(record, 11),
    )


def decode_user(text: str) -> User:
    """Decode a user profile."""
    record = parse_record(text)
    return User(
        account_id=require_int(record, 16),
        player_id=require_int(record, 2),
        name=require_str(record, 1),
        stars=require_int(record, 3),
        demons=require_int(record, 4),
        diamonds=optional_int(record, 46),
        creator_points=optional_int(record, 8),
        secret_coins=optional_int(record, 13),
        user_coins=optional_int(record, 17),
        global_rank=optional_int(record, 30),
        youtube=record.get(20, ""),
        twitter=record.get(44, ""),
        twitch=record.get(45, ""),
    )


def decode_message(text: str) -> Message:
    """Decode a message header."""
    record = parse_record(text)
    try:
        subject = decode_base64(record.get(4, ""))
    except ValueError:
        raise DecodeError("Message subject is not valid base64") from None
    return Message(
        message_id=require_int(record, 1),
        sender_account_id=require_int(record, 2),
        sender_player_id=optional_int(record, 3),
        sender_name=require_str(record, 6),
        subject=subject,
        age=record.get(7, ""),
        is_read=record.get(8) == "1",
        is_sent=record.get(9) == "1",
    )


def decode_message_content(text: str) -> str:
    """Decode the body of a downloaded message."""
    record = parse_record(text)
    try:
        return decode_message_body(require_str(record, 5))
    except ValueError:
        raise DecodeError("Message body is not valid encoded text") from None


# --- Lists ---


def list_decoder(item_decoder: Callable[[str], T]) -> Callable[[str], tuple[T, ...]]:
    """Build a decoder for a ``|``-joined list, dropping any trailing ``#`` metadata."""

    def decode(text: str) -> tuple[T, ...]:
        return tuple(item_decoder(r) for r in split_records(text.split("#", 1)[0]))

    decode.__qualname__ = f"list_decoder({decoder_name(item_decoder)})"
    return decode


def page_decoder(item_decoder: Callable[[str], T]) -> Callable[[str], Page[T]]:
    """Build a decoder for a paginated list: ``item|item#total:offset:page_size``."""

    def decode(text: str) -> Page[T]:
        body, _, info = text.partition("#")
        items = tuple(item_decoder(r) for r in split_records(body))
        if not info:
            return Page(items=items)
        total, offset, page_size = parse_page_info(info.split("#", 1)[0])
        return Page(items=items, total=total, offset=offset, page_size=page_size)

    decode.__qualname__ = f"page_decoder({decoder_name(item_decoder)})"
    return decode


def decode_first_search_result(text: str) -> UserSearchResult:
    """Decode the first user of a search listing.

    Raises:
        DecodeError: The listing is empty.

    """
    records = split_records(text.split("#", 1)[0])
    if not records:
        raise DecodeError("Empty search result")
    return decode_user_search_result(records[0])


# --- Acknowledgements ---


def decode_ack(text: str) -> None:
    """Decode the acknowledgement of a state-changing request (a positive integer)."""
    try:
        value = int(text.strip())
    except ValueError:
        raise DecodeError(f"Unexpected acknowledgement: {text!r}") from None
    if value <= 0:
        raise DecodeError(f"Request refused with code {value}")


def decode_login(text: str) -> tuple[int, int]:
    """Decode a login answer: ``accountID,playerID``."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise DecodeError(f"Unexpected login answer: {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise DecodeError(f"Unexpected login answer: {text!r}") from None
