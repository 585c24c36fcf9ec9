"""48-bit timestamp encoder.

This module provides the encode() function that packs a UTC timestamp into
six big-endian bytes, and encode_int() which yields the same 48 bits as an
unsigned integer.
"""

from __future__ import annotations

import datetime
from typing import Union

from ..exceptions import EncodeError, FieldOutOfRange
from ..models.timestamp import Timestamp
from .bitpack import BitPacker
from .layout import LAYOUT

TimestampLike = Union[Timestamp, datetime.datetime]


def encode(value: TimestampLike) -> bytes:
    """Encode a timestamp to its 6-byte representation.

    Fields are validated in layout order (year first, millisecond last) and
    the first field outside its legal range is reported. Day is not checked
    against month or year, so e.g. February 31 encodes as-is.

    Args:
        value: Timestamp to encode, or a datetime (converted to UTC first)

    Returns:
        Six bytes, most significant field first

    Raises:
        FieldOutOfRange: If a field is outside its legal range
        EncodeError: If value is not a Timestamp or datetime

    Example:
        >>> encode(Timestamp(year=2019, month=6, day=16,
        ...                  hour=19, minute=11, second=22, millisecond=333)).hex()
        '7e3684cb594d'
    """
    ts = _coerce(value)
    year, month, day, hour, minute, second, millisecond = _validate(ts)

    # Each byte takes bits from at most two adjacent fields
    return bytes(
        (
            (year >> 4) & 0xFF,
            ((year & 0x0F) << 4) | (month & 0x0F),
            ((day & 0x1F) << 3) | ((hour >> 2) & 0x07),
            ((hour & 0x03) << 6) | (minute & 0x3F),
            ((second & 0x3F) << 2) | ((millisecond >> 8) & 0x03),
            millisecond & 0xFF,
        )
    )


def encode_int(value: TimestampLike) -> int:
    """Encode a timestamp to its 48-bit unsigned integer representation.

    The result equals ``int.from_bytes(encode(value), "big")``.

    Raises:
        FieldOutOfRange: If a field is outside its legal range
        EncodeError: If value is not a Timestamp or datetime
    """
    fields = _validate(_coerce(value))

    packer = BitPacker()
    for field, field_value in zip(LAYOUT, fields):
        packer.write_uint(field_value, field.bits)

    return packer.to_int()


def _coerce(value: TimestampLike) -> Timestamp:
    if isinstance(value, Timestamp):
        return value
    if isinstance(value, datetime.datetime):
        return Timestamp.from_datetime(value)
    raise EncodeError(f"Cannot encode {value!r}: expected Timestamp or datetime")


def _validate(ts: Timestamp) -> tuple[int, int, int, int, int, int, int]:
    """Check every field against its legal range, in layout order.

    Returns:
        The field values, most significant first

    Raises:
        FieldOutOfRange: For the first field that does not fit
    """
    values = ts.as_tuple()
    for field, field_value in zip(LAYOUT, values):
        if not field.min_value <= field_value <= field.max_value:
            raise FieldOutOfRange(
                field.name, field_value, field.max_value, min_allowed=field.min_value
            )
    return values
