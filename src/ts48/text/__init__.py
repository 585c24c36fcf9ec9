"""Text token adapter for ts48.

This module maps encoded timestamps to and from 8-character URL-safe tokens.
"""

from __future__ import annotations

from .token import TOKEN_LENGTH, decode_from_text, encode_to_text

__all__ = [
    "encode_to_text",
    "decode_from_text",
    "TOKEN_LENGTH",
]
