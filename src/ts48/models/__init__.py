"""Data models for ts48."""

from __future__ import annotations

from .timestamp import Timestamp

__all__ = [
    "Timestamp",
]
