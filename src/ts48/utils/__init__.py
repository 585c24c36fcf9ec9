"""Utility functions for ts48.

This module provides layout size helpers.
"""

from __future__ import annotations

from .sizing import encoded_bits, encoded_size, field_sizes

__all__ = [
    "encoded_size",
    "encoded_bits",
    "field_sizes",
]
