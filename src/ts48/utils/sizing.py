"""Layout size utilities.

This module reports the size of the encoded timestamp and of each field,
derived from the layout table rather than hard-coded.
"""

from __future__ import annotations

from ..codec.layout import LAYOUT, TOTAL_BITS, TOTAL_BYTES


def encoded_size() -> int:
    """Return the encoded size of a timestamp in bytes.

    Example:
        >>> encoded_size()
        6
    """
    return TOTAL_BYTES


def encoded_bits() -> int:
    """Return the encoded size of a timestamp in bits.

    Example:
        >>> encoded_bits()
        48
    """
    return TOTAL_BITS


def field_sizes() -> dict[str, int]:
    """Get the size in bits of each field, most significant first.

    Example:
        >>> field_sizes()["year"]
        12
    """
    return {field.name: field.bits for field in LAYOUT}
