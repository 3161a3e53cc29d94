"""Tests for response classification."""

from gd_client.classifier import LogicalFailure, MalformedContent, Success, TransportFailure, classify, is_sentinel
from gd_client.decoders import decode_ack, parse_record
from gd_client.errors import DecodeError
from gd_client.transport import TransportResult


def _fail(text: str) -> str:
    raise DecodeError("always fails")


class TestClassify:
    """Decision order: transport, sentinel, decode, success."""

    def test_success(self):
        """A decodable 2xx body is a success."""
        outcome = classify(TransportResult(200, "1:a:2:b"), parse_record)
        assert outcome == Success({1: "a", 2: "b"})

    def test_http_error_wins_over_body(self):
        """A non-2xx status is a transport failure whatever the body says."""
        outcome = classify(TransportResult(500, "-1"), parse_record)
        assert isinstance(outcome, TransportFailure)
        assert outcome.status == 500

    def test_sentinel_before_decode(self):
        """-1 is a logical failure even for a decoder that would accept it."""
        assert classify(TransportResult(200, "-1"), str) == LogicalFailure()

    def test_sentinel_never_malformed(self):
        """-1 is a logical failure even for a decoder that would reject it."""
        assert classify(TransportResult(200, "-1"), _fail) == LogicalFailure()

    def test_sentinel_with_whitespace(self):
        """Surrounding whitespace does not hide the sentinel."""
        assert is_sentinel(" -1\n")
        assert not is_sentinel("-10")

    def test_malformed_carries_raw(self):
        """Decode failures carry the raw body."""
        outcome = classify(TransportResult(200, "1:a:2"), parse_record)
        assert isinstance(outcome, MalformedContent)
        assert outcome.raw == "1:a:2"

    def test_value_error_is_malformed(self):
        """Plain ValueErrors from decoders are treated as malformed content."""
        outcome = classify(TransportResult(200, "abc"), int)
        assert isinstance(outcome, MalformedContent)

    def test_other_negative_codes_are_malformed(self):
        """Only -1 is the sentinel; other refusals do not decode as acknowledgements."""
        outcome = classify(TransportResult(200, "-2"), decode_ack)
        assert isinstance(outcome, MalformedContent)
