"""48-bit timestamp decoder.

This module provides the decode() function that turns six big-endian bytes
(or the equivalent 48-bit integer) back into a Timestamp.
"""

from __future__ import annotations

from typing import Iterable, Union

from ..exceptions import DecodeError, InvalidLength
from ..models.timestamp import Timestamp
from .bitpack import BitUnpacker
from .layout import LAYOUT, TOTAL_BITS, TOTAL_BYTES

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int], int]


def decode(data: BytesLike) -> Timestamp:
    """Decode a 48-bit timestamp.

    Every 6-byte input decodes successfully. The fields are not checked
    against the calendar, so arbitrary bits may yield values such as
    ``hour=31`` or ``month=0``; only the size of the input can be wrong.

    Args:
        data: Six bytes (bytes, bytearray, memoryview or a sequence of
            ints 0-255), or an int holding the 48-bit value

    Returns:
        Decoded Timestamp, in UTC

    Raises:
        InvalidLength: If byte input is not exactly 6 bytes long
        DecodeError: If int input is negative or wider than 48 bits, or a
            sequence item is not a byte value

    Example:
        >>> str(decode(bytes.fromhex("7e3684cb594d")))
        '2019-06-16T19:11:22.333Z'
    """
    if isinstance(data, int) and not isinstance(data, bool):
        return _decode_int(data)

    buf = _as_bytes(data)
    if len(buf) != TOTAL_BYTES:
        raise InvalidLength(len(buf), TOTAL_BYTES)

    b0, b1, b2, b3, b4, b5 = buf

    # Walk from the least significant field (millisecond) up to year
    millisecond = ((b4 & 0x03) << 8) | b5
    second = b4 >> 2
    minute = b3 & 0x3F
    hour = ((b2 & 0x07) << 2) | (b3 >> 6)
    day = b2 >> 3
    month = b1 & 0x0F
    year = (b0 << 4) | (b1 >> 4)

    return Timestamp(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
    )


def _decode_int(value: int) -> Timestamp:
    try:
        unpacker = BitUnpacker(value, TOTAL_BITS)
    except ValueError as e:
        raise DecodeError(f"Integer input does not fit in {TOTAL_BITS} bits: {value}") from e

    return Timestamp(**{field.name: unpacker.read_uint(field.bits) for field in LAYOUT})


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data

    try:
        return bytes(data)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Cannot decode {data!r}: expected 6 bytes") from e
