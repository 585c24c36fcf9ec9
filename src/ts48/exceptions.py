"""Exception hierarchy for ts48.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Ts48Error for easy catching of any ts48-specific error.
"""

from __future__ import annotations


class Ts48Error(Exception):
    """Base exception for all ts48 errors."""

    pass


class EncodeError(Ts48Error):
    """Raised when encoding a timestamp fails.

    Examples:
        - Value of an unsupported type (not a Timestamp or datetime)
        - Field value outside its legal range (see FieldOutOfRange)
    """

    pass


class DecodeError(Ts48Error):
    """Raised when decoding binary or text data fails.

    Decoding never fails on bit content, only on the shape of the input:
        - Wrong number of bytes
        - Integer input wider than 48 bits
        - Text token with the wrong length or alphabet
    """

    pass


class FieldOutOfRange(EncodeError):
    """Raised when a timestamp field does not fit its legal range.

    Attributes:
        field: Name of the offending field (e.g. "year")
        value: The rejected value
        min_allowed: Smallest legal value for the field
        max_allowed: Largest legal value for the field
    """

    def __init__(self, field: str, value: int, max_allowed: int, min_allowed: int = 0) -> None:
        self.field = field
        self.value = value
        self.min_allowed = min_allowed
        self.max_allowed = max_allowed
        super().__init__(
            f"Field {field}: value {value} out of range [{min_allowed}, {max_allowed}]"
        )


class InvalidLength(DecodeError):
    """Raised when the input to a decoder has the wrong size.

    Attributes:
        actual_length: Length of the rejected input
        expected: Length the decoder requires
    """

    def __init__(self, actual_length: int, expected: int = 6, unit: str = "bytes") -> None:
        self.actual_length = actual_length
        self.expected = expected
        super().__init__(f"Expected exactly {expected} {unit}, got {actual_length}")


class InvalidTextLength(InvalidLength):
    """Raised when a text token is not exactly 8 characters."""

    def __init__(self, actual_length: int, expected: int = 8) -> None:
        super().__init__(actual_length, expected, unit="characters")


class InvalidTextAlphabet(DecodeError):
    """Raised when a text token contains characters outside [A-Za-z0-9_-].

    Attributes:
        invalid_chars: The offending characters, in order of first appearance
    """

    def __init__(self, invalid_chars: str) -> None:
        self.invalid_chars = invalid_chars
        super().__init__(f"Invalid characters in text token: {invalid_chars!r}")
