"""Tests for response decoders."""

import pytest

from gd_client.crypto import encode_message_body
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
    parse_record,
)
from gd_client.errors import DecodeError

MESSAGE = "6:RobTop:3:16:2:71:1:12345:4:SGVsbG8=:8:0:9:0:7:2 days"
USER_ENTRY = "1:RobTop:2:16:13:149:17:420:6:1:9:4:10:12:11:9:14:0:15:2:16:71:3:1000:8:150:46:3000:4:20"
PROFILE = "1:RobTop:2:16:13:149:17:420:10:12:11:9:3:1000:46:3000:4:20:8:150:16:71:20:RobTopGames:30:0:44:RobTopGames:45:"


class TestParseRecord:
    """key:value records."""

    def test_pairs(self):
        """Keys are parsed as integers."""
        assert parse_record("1:a:2:b") == {1: "a", 2: "b"}

    def test_odd_field_count(self):
        """A dangling key is malformed."""
        with pytest.raises(DecodeError):
            parse_record("1:a:2")

    def test_non_numeric_key(self):
        """Keys must be integers."""
        with pytest.raises(DecodeError):
            parse_record("x:a")


class TestEntities:
    """Entity decoders."""

    def test_message(self):
        """Message headers decode with a base64 subject."""
        message = decode_message(MESSAGE)
        assert message.message_id == 12345
        assert message.sender_account_id == 71
        assert message.sender_name == "RobTop"
        assert message.subject == "Hello"
        assert message.age == "2 days"
        assert not message.is_read

    def test_message_missing_id(self):
        """A message without id is malformed."""
        with pytest.raises(DecodeError):
            decode_message("6:RobTop:2:71")

    def test_message_content(self):
        """Downloaded bodies are deciphered."""
        assert decode_message_content(f"1:12345:5:{encode_message_body('Hello world!')}") == "Hello world!"

    def test_user_search_result(self):
        """Leaderboard entries decode."""
        user = decode_user_search_result(USER_ENTRY)
        assert user.account_id == 71
        assert user.player_id == 16
        assert user.name == "RobTop"
        assert user.stars == 1000
        assert user.diamonds == 3000
        assert user.rank == 1

    def test_user_profile(self):
        """Profiles decode, empty optional fields included."""
        user = decode_user(PROFILE)
        assert user.account_id == 71
        assert user.demons == 20
        assert user.youtube == "RobTopGames"
        assert user.twitch == ""

    def test_non_numeric_field(self):
        """A non-numeric value where a number is expected is malformed."""
        with pytest.raises(DecodeError):
            decode_user(PROFILE.replace("3:1000", "3:lots"))


class TestLists:
    """List and page decoders."""

    def test_list_ignores_trailing_separator(self):
        """Leaderboards end with a trailing |."""
        users = list_decoder(decode_user_search_result)(USER_ENTRY + "|" + USER_ENTRY + "|")
        assert len(users) == 2
        assert isinstance(users, tuple)

    def test_page_metadata(self):
        """Pages carry total, offset and page size."""
        page = page_decoder(decode_message)(f"{MESSAGE}|{MESSAGE}#25:10:10")
        assert len(page.items) == 2
        assert (page.total, page.offset, page.page_size) == (25, 10, 10)

    def test_malformed_page_metadata(self):
        """Broken metadata is malformed."""
        with pytest.raises(DecodeError):
            page_decoder(decode_message)(f"{MESSAGE}#25:x")

    def test_first_search_result(self):
        """Single-user search takes the first entry."""
        assert decode_first_search_result(f"{USER_ENTRY}#1:0:10").name == "RobTop"

    def test_first_search_result_empty(self):
        """An empty listing is malformed."""
        with pytest.raises(DecodeError):
            decode_first_search_result("#0:0:10")


class TestAcknowledgements:
    """Replies to state-changing requests."""

    def test_ack(self):
        """Positive integers acknowledge."""
        assert decode_ack("1") is None
        assert decode_ack("62152040\n") is None

    @pytest.mark.parametrize("body", ["", "ok", "0", "-3"])
    def test_not_ack(self, body: str):
        """Anything else is malformed."""
        with pytest.raises(DecodeError):
            decode_ack(body)

    def test_login(self):
        """Logins answer accountID,playerID."""
        assert decode_login("98006,4063664") == (98006, 4063664)

    def test_login_malformed(self):
        """Anything else is malformed."""
        with pytest.raises(DecodeError):
            decode_login("98006")
