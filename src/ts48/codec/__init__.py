"""48-bit timestamp codec for ts48.

This module provides encoding and decoding between Timestamp values and their
fixed-width, sortable 6-byte representation.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode, encode_int
from .layout import LAYOUT, TOTAL_BITS, TOTAL_BYTES, FieldLayout

__all__ = [
    "encode",
    "encode_int",
    "decode",
    "LAYOUT",
    "TOTAL_BITS",
    "TOTAL_BYTES",
    "FieldLayout",
]
