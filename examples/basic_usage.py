#!/usr/bin/env python3
"""Basic usage example for ts48.

This example demonstrates:
1. Building a Timestamp
2. Encoding to 6 bytes
3. Decoding back to a Timestamp
4. Text tokens and the field layout
"""

from __future__ import annotations

import datetime

from ts48 import (
    FieldOutOfRange,
    Timestamp,
    decode,
    decode_from_text,
    encode,
    encode_to_text,
    encoded_size,
    field_sizes,
    generate_timestamp48,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ts48 Basic Usage Example")
    print("=" * 60)
    print()

    # Create a timestamp
    print("1. Creating a timestamp...")
    ts = Timestamp(year=2019, month=6, day=16, hour=19, minute=11, second=22, millisecond=333)
    print(f"   {ts}")
    print()

    # Analyze field sizes
    print("2. Field layout...")
    for field_name, bits in field_sizes().items():
        print(f"   {field_name}: {bits} bits")
    print(f"   Total: {encoded_size()} bytes")
    print()

    # Encode
    print("3. Encoding to 6 bytes...")
    encoded_data = encode(ts)
    print(f"   Hex: {encoded_data.hex().upper()}")
    print(f"   Binary: {' '.join(format(b, '08b') for b in encoded_data)}")
    print()

    # Decode
    print("4. Decoding from bytes...")
    decoded = decode(bytes.fromhex("7E3684CB594D"))
    print(f"   {decoded}")
    if decoded == ts:
        print("   ✓ Round-trip successful! Timestamps match.")
    else:
        print("   ✗ Round-trip failed! Timestamps don't match.")
    print()

    # Text tokens
    print("5. Text tokens...")
    token = encode_to_text(ts)
    print(f"   Token: {token}")
    print(f"   Decoded: {decode_from_text(token)}")
    print(f"   Now: {generate_timestamp48()}")
    print()

    # Range errors
    print("6. Out-of-range input...")
    try:
        encode(datetime.datetime(4096, 1, 1))
    except FieldOutOfRange as e:
        print(f"   {e.field} rejected: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
