"""Bit layout CLI command."""

from __future__ import annotations

from ..codec.layout import LAYOUT
from ..utils.sizing import encoded_bits, encoded_size


def print_layout() -> None:
    """Print the field layout table with bit positions and legal ranges."""
    print("|" * 7, "ts48: 48-bit Sortable Timestamp Codec", "|" * 7)
    print(f"Total: {encoded_bits()} bits = {encoded_size()} bytes (big-endian)")
    print()

    print(f"{'Field':<12} {'Bits':>4} {'Position':>9} {'Range':>10}")
    print("-" * 38)
    for field in LAYOUT:
        high = field.shift + field.bits - 1
        position = f"{high}..{field.shift}"
        value_range = f"{field.min_value}-{field.max_value}"
        print(f"{field.name:<12} {field.bits:>4} {position:>9} {value_range:>10}")
