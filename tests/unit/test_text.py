"""Unit tests for the text token adapter."""

from __future__ import annotations

import base64
import datetime
import re

import pytest

from ts48 import (
    DecodeError,
    FieldOutOfRange,
    InvalidLength,
    InvalidTextAlphabet,
    InvalidTextLength,
    Timestamp,
    decode_from_text,
    encode,
    encode_to_text,
    generate_timestamp48,
    now,
)

TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{8}$")


class TestEncodeToText:
    """Test encoding to text tokens."""

    def test_canonical_value(self, sample_timestamp: Timestamp, sample_token: str) -> None:
        """Test the canonical fixture token."""
        assert encode_to_text(sample_timestamp) == sample_token

    def test_matches_base64url(self, sample_timestamp: Timestamp, sample_bytes: bytes) -> None:
        """Test the token is the unpadded base64url form of the bytes."""
        token = encode_to_text(sample_timestamp)
        assert base64.urlsafe_b64decode(token) == sample_bytes

    def test_url_safe_characters(self, max_timestamp: Timestamp) -> None:
        """Test tokens that exercise the '-' and '_' characters."""
        token = encode_to_text(max_timestamp)
        assert TOKEN_PATTERN.match(token)
        assert "+" not in token and "/" not in token and "=" not in token

    def test_out_of_range(self) -> None:
        """Test range errors propagate from the encoder."""
        with pytest.raises(FieldOutOfRange):
            encode_to_text(Timestamp(year=4096, month=1, day=1))


class TestDecodeFromText:
    """Test decoding text tokens."""

    def test_canonical_value(self, sample_timestamp: Timestamp, sample_token: str) -> None:
        """Test decoding the canonical fixture token."""
        assert decode_from_text(sample_token) == sample_timestamp

    @pytest.mark.parametrize("token", ["", "fjaEy1l", "fjaEy1lN=", "fjaEy1lNfjaE"])
    def test_invalid_length(self, token: str) -> None:
        """Test tokens that are not 8 characters."""
        with pytest.raises(InvalidTextLength) as exc_info:
            decode_from_text(token)

        assert exc_info.value.actual_length == len(token)
        assert exc_info.value.expected == 8

    def test_invalid_length_is_invalid_length(self) -> None:
        """Test text length errors are also InvalidLength errors."""
        with pytest.raises(InvalidLength):
            decode_from_text("abc")

    @pytest.mark.parametrize("token", ["fjaEy1l=", "fjaE+1lN", "fja/y1lN", "fjaE y1l", "fjaEé1lN"])
    def test_invalid_alphabet(self, token: str) -> None:
        """Test characters outside [A-Za-z0-9_-] are rejected."""
        with pytest.raises(InvalidTextAlphabet):
            decode_from_text(token)

    def test_invalid_chars_reported(self) -> None:
        """Test the offending characters are listed once each."""
        with pytest.raises(InvalidTextAlphabet) as exc_info:
            decode_from_text("a+b+c/d=")

        assert exc_info.value.invalid_chars == "+/="
        assert isinstance(exc_info.value, DecodeError)

    def test_any_valid_token_decodes(self) -> None:
        """Test every well-formed token decodes, even to out-of-range fields."""
        ts = decode_from_text("________")
        assert ts.as_tuple() == (4095, 15, 31, 31, 63, 63, 1023)

        ts = decode_from_text("AAAAAAAA")
        assert ts.as_tuple() == (0, 0, 0, 0, 0, 0, 0)


class TestClock:
    """Test current-time helpers."""

    def test_now_is_utc(self) -> None:
        """Test now() is close to the system UTC time."""
        before = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
        ts = now()
        after = datetime.datetime.now(datetime.timezone.utc)

        assert before - datetime.timedelta(seconds=1) <= ts.to_datetime() <= after

    def test_generate_default(self) -> None:
        """Test generating a token for the current time."""
        token = generate_timestamp48()
        assert isinstance(token, str)
        assert TOKEN_PATTERN.match(token)

    def test_generate_with_value(self, sample_timestamp: Timestamp, sample_token: str) -> None:
        """Test generating a token for an explicit value."""
        assert generate_timestamp48(sample_timestamp) == sample_token
        assert generate_timestamp48(sample_timestamp.to_datetime()) == sample_token

    def test_year_boundary(self) -> None:
        """Test a date at the end of a year."""
        dt = datetime.datetime(2023, 12, 31, 23, 59, 59, 999000, tzinfo=datetime.timezone.utc)
        token = generate_timestamp48(dt)
        assert decode_from_text(token) == Timestamp.from_datetime(dt)
        assert base64.urlsafe_b64decode(token) == encode(dt)

    def test_year_beyond_range(self) -> None:
        """Test a datetime in year 4096 is rejected."""
        with pytest.raises(FieldOutOfRange, match="year"):
            generate_timestamp48(datetime.datetime(4096, 6, 1))
