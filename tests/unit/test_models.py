"""Unit tests for the Timestamp model."""

from __future__ import annotations

import datetime

import pytest
from pydantic import ValidationError

from ts48 import Timestamp


class TestTimestampModel:
    """Test Timestamp construction and validation."""

    def test_defaults(self) -> None:
        """Test time fields default to midnight."""
        ts = Timestamp(year=2024, month=2, day=29)
        assert ts.as_tuple() == (2024, 2, 29, 0, 0, 0, 0)

    def test_strict_integers(self) -> None:
        """Test no coercion from strings, floats or bools."""
        with pytest.raises(ValidationError):
            Timestamp(year="2019", month=6, day=16)  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            Timestamp(year=2019.0, month=6, day=16)  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            Timestamp(year=2019, month=True, day=16)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Timestamp(year=2019, month=6, day=16, microsecond=5)  # type: ignore[call-arg]

    def test_frozen(self, sample_timestamp: Timestamp) -> None:
        """Test instances are immutable."""
        with pytest.raises(ValidationError):
            sample_timestamp.year = 2020  # type: ignore[misc]

    def test_unbounded_fields(self) -> None:
        """Test the model accepts values the encoder would reject."""
        ts = Timestamp(year=4095, month=15, day=31, hour=31, minute=63, second=63, millisecond=1023)
        assert ts.hour == 31


class TestTimestampBehaviour:
    """Test conversion, formatting, hashing and ordering."""

    def test_str(self, sample_timestamp: Timestamp) -> None:
        """Test ISO 8601 rendering."""
        assert str(sample_timestamp) == "2019-06-16T19:11:22.333Z"
        assert Timestamp(year=7, month=1, day=2).isoformat() == "0007-01-02T00:00:00.000Z"

    def test_from_datetime_truncates(self) -> None:
        """Test microseconds are truncated, not rounded."""
        ts = Timestamp.from_datetime(datetime.datetime(2019, 6, 16, 19, 11, 22, 333999))
        assert ts.millisecond == 333

    def test_from_datetime_converts_to_utc(self) -> None:
        """Test aware datetimes are shifted to UTC, crossing a day boundary."""
        tz = datetime.timezone(datetime.timedelta(hours=-5))
        ts = Timestamp.from_datetime(datetime.datetime(2023, 12, 31, 22, 30, tzinfo=tz))
        assert ts.as_tuple() == (2024, 1, 1, 3, 30, 0, 0)

    def test_from_datetime_rejects_other_types(self) -> None:
        """Test non-datetime input is rejected."""
        with pytest.raises(TypeError):
            Timestamp.from_datetime(datetime.date(2019, 6, 16))  # type: ignore[arg-type]

    def test_to_datetime(self, sample_timestamp: Timestamp) -> None:
        """Test conversion to an aware UTC datetime."""
        dt = sample_timestamp.to_datetime()
        assert dt == datetime.datetime(
            2019, 6, 16, 19, 11, 22, 333000, tzinfo=datetime.timezone.utc
        )
        assert Timestamp.from_datetime(dt) == sample_timestamp

    def test_to_datetime_invalid_calendar(self) -> None:
        """Test calendrically invalid values cannot become datetimes."""
        with pytest.raises(ValueError):
            Timestamp(year=2023, month=2, day=31).to_datetime()

        with pytest.raises(ValueError):
            Timestamp(year=0, month=1, day=1).to_datetime()

    def test_hashable(self, sample_timestamp: Timestamp) -> None:
        """Test equal timestamps hash alike."""
        copy = Timestamp(**sample_timestamp.model_dump())
        assert copy == sample_timestamp
        assert len({copy, sample_timestamp}) == 1

    def test_ordering(self) -> None:
        """Test timestamps sort chronologically."""
        earlier = Timestamp(year=2019, month=12, day=31, hour=23, minute=59, second=59, millisecond=999)
        later = Timestamp(year=2020, month=1, day=1)

        assert earlier < later
        assert earlier <= later
        assert later > earlier
        assert later >= earlier
        assert sorted([later, earlier]) == [earlier, later]

    def test_ordering_other_types(self, sample_timestamp: Timestamp) -> None:
        """Test comparing with a non-Timestamp is unsupported."""
        with pytest.raises(TypeError):
            sample_timestamp < 5  # noqa: B015
