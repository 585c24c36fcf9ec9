"""ts48: 48-bit Sortable Timestamp Codec

A Python library for packing UTC timestamps with millisecond resolution into a
fixed 6-byte (48-bit) form whose byte order matches chronological order.

Layout (most significant first):
    year(12) | month(4) | day(5) | hour(5) | minute(6) | second(6) | millisecond(10)

Key Features:
- Pydantic-based Timestamp model
- Fixed 6-byte binary form, sortable as raw bytes
- 8-character URL-safe text tokens
- Decoding never fails on bit content

Quick Start:
    >>> from ts48 import Timestamp, encode, decode, encode_to_text
    >>>
    >>> ts = Timestamp(year=2019, month=6, day=16,
    ...                hour=19, minute=11, second=22, millisecond=333)
    >>> encode(ts).hex()
    '7e3684cb594d'
    >>> encode_to_text(ts)
    'fjaEy1lN'
    >>> decode(encode(ts)) == ts
    True
"""

from __future__ import annotations

from .clock import generate_timestamp48, now
from .codec import decode, encode, encode_int
from .exceptions import (
    DecodeError,
    EncodeError,
    FieldOutOfRange,
    InvalidLength,
    InvalidTextAlphabet,
    InvalidTextLength,
    Ts48Error,
)
from .models import Timestamp
from .text import decode_from_text, encode_to_text
from .utils import encoded_bits, encoded_size, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Timestamp",
    "encode",
    "encode_int",
    "decode",
    # Text tokens
    "encode_to_text",
    "decode_from_text",
    # Current time
    "now",
    "generate_timestamp48",
    # Exceptions
    "Ts48Error",
    "EncodeError",
    "DecodeError",
    "FieldOutOfRange",
    "InvalidLength",
    "InvalidTextLength",
    "InvalidTextAlphabet",
    # Sizing
    "encoded_size",
    "encoded_bits",
    "field_sizes",
    # Version
    "__version__",
]
