"""Bit layout of the 48-bit timestamp.

This module describes where each timestamp field lives inside the 48-bit
value. Fields are listed most significant first; that order is also the
order in which the encoder validates them.

    yyyyyyyy yyyymmmm dddddhhh hhmmmmmm sssssszz zzzzzzzz
    (y=year, m=month, d=day, h=hour, m=minute, s=second, z=millisecond)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldLayout:
    """Placement and legal range of a single timestamp field.

    Attributes:
        name: Field name, matching the Timestamp attribute
        bits: Width of the field in bits
        shift: Position of the field's least significant bit in the 48-bit value
        min_value: Smallest value accepted by the encoder
        max_value: Largest value accepted by the encoder
    """

    name: str
    bits: int
    shift: int
    min_value: int
    max_value: int

    @property
    def mask(self) -> int:
        """Bit mask for the field once shifted down to bit 0."""
        return (1 << self.bits) - 1

    @property
    def capacity(self) -> int:
        """Largest value the field's bits can hold (may exceed max_value)."""
        return self.mask


def _build_layout(*specs: tuple[str, int, int, int]) -> tuple[FieldLayout, ...]:
    shift = sum(bits for _, bits, _, _ in specs)
    fields = []
    for name, bits, min_value, max_value in specs:
        shift -= bits
        fields.append(FieldLayout(name, bits, shift, min_value, max_value))
    return tuple(fields)


LAYOUT: tuple[FieldLayout, ...] = _build_layout(
    ("year", 12, 0, 4095),
    ("month", 4, 1, 12),
    ("day", 5, 1, 31),
    ("hour", 5, 0, 23),
    ("minute", 6, 0, 59),
    ("second", 6, 0, 59),
    ("millisecond", 10, 0, 999),
)

FIELD_NAMES: tuple[str, ...] = tuple(field.name for field in LAYOUT)

TOTAL_BITS = sum(field.bits for field in LAYOUT)
TOTAL_BYTES = TOTAL_BITS // 8
MAX_VALUE = (1 << TOTAL_BITS) - 1


def field_layout(name: str) -> FieldLayout:
    """Look up the layout entry for a field by name.

    Raises:
        KeyError: If no field has that name
    """
    for field in LAYOUT:
        if field.name == name:
            return field
    raise KeyError(name)
