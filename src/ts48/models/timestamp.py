"""Timestamp model.

This module provides the Timestamp class, the seven-field UTC calendar value
that the codec encodes to and decodes from 48 bits.
"""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class Timestamp(BaseModel):
    """A UTC calendar timestamp with millisecond resolution.

    The fields are plain integers. The model does not enforce the encoder's
    ranges, because decoding arbitrary bits can legitimately produce values
    such as ``hour=31`` or ``month=0``; :py:func:`ts48.encode` is where
    ranges are checked.

    Instances are immutable and hashable. They compare equal field by field
    and sort chronologically.

    Example:
        >>> ts = Timestamp(year=2019, month=6, day=16,
        ...                hour=19, minute=11, second=22, millisecond=333)
        >>> str(ts)
        '2019-06-16T19:11:22.333Z'
    """

    model_config = ConfigDict(
        # No coercion from str/float/bool
        strict=True,
        frozen=True,
        extra="forbid",
    )

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, value: datetime.datetime) -> Timestamp:
        """Build a Timestamp from a ``datetime.datetime``.

        Aware datetimes are converted to UTC first. Naive datetimes are taken
        to be in UTC already. Microseconds are truncated to milliseconds.

        Raises:
            TypeError: If value is not a datetime
        """
        if not isinstance(value, datetime.datetime):
            raise TypeError(f"expected datetime.datetime, got {type(value).__name__}")

        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)

        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
        )

    def to_datetime(self) -> datetime.datetime:
        """Convert to an aware ``datetime.datetime`` in UTC.

        Since decoded timestamps are not checked against the calendar, this
        fails for values such as February 31 or year 0, which is indicated
        by raising :py:exc:`ValueError`.
        """
        return datetime.datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
            tzinfo=datetime.timezone.utc,
        )

    def as_tuple(self) -> tuple[int, int, int, int, int, int, int]:
        """Return the fields as a tuple, most significant first."""
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
        )

    def isoformat(self) -> str:
        """Render as ISO 8601 with millisecond precision and a ``Z`` suffix."""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.millisecond:03d}Z"
        )

    def __str__(self) -> str:
        return self.isoformat()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()
