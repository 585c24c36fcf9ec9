"""Bit-level packing and unpacking utilities.

This module provides integer-accumulator bit packing for fixed-width layouts.
Values are written most significant first (big-endian) and read back in the
same order.
"""

from __future__ import annotations


class BitPacker:
    """Packs unsigned fields into a single integer, most significant first.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(2019, 12)
        >>> packer.write_uint(6, 4)
        >>> packer.to_int()
        32310
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._value = 0
        self._num_bits = 0

    def write_uint(self, value: int, num_bits: int) -> None:
        """Append an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (1-64)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        self._value = (self._value << num_bits) | value
        self._num_bits += num_bits

    def bit_length(self) -> int:
        """Return the number of bits written so far."""
        return self._num_bits

    def to_int(self) -> int:
        """Return the packed bits as an unsigned integer."""
        return self._value

    def to_bytes(self) -> bytes:
        """Return the packed bits as big-endian bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).
        """
        if not self._num_bits:
            return b""

        padding = (-self._num_bits) % 8
        num_bytes = (self._num_bits + padding) // 8
        return (self._value << padding).to_bytes(num_bytes, "big")


class BitUnpacker:
    """Reads unsigned fields back out of an integer, most significant first.

    Example:
        >>> unpacker = BitUnpacker(32310, num_bits=16)
        >>> unpacker.read_uint(12)
        2019
        >>> unpacker.read_uint(4)
        6
    """

    def __init__(self, value: int, num_bits: int) -> None:
        """Initialize a bit unpacker over the low num_bits of value.

        Args:
            value: Unsigned integer holding the packed bits
            num_bits: Total number of meaningful bits in value

        Raises:
            ValueError: If value is negative or wider than num_bits
        """
        if value < 0:
            raise ValueError(f"BitUnpacker requires non-negative value, got {value}")
        if value >> num_bits:
            raise ValueError(f"Value {value} is wider than {num_bits} bits")

        self._value = value
        self._remaining = num_bits

    def read_uint(self, num_bits: int) -> int:
        """Read the next unsigned integer of the specified bit width.

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        if num_bits > self._remaining:
            raise IndexError(f"Not enough bits: need {num_bits}, have {self._remaining}")

        self._remaining -= num_bits
        return (self._value >> self._remaining) & ((1 << num_bits) - 1)

    def bits_remaining(self) -> int:
        """Return the number of unread bits."""
        return self._remaining
