"""Current-time helpers.

The codec itself never reads the clock; these helpers sit on top of it for
callers that want "now" as a Timestamp or a text token.
"""

from __future__ import annotations

import datetime
from typing import Optional

from .codec.encoder import TimestampLike
from .models.timestamp import Timestamp
from .text.token import encode_to_text


def now() -> Timestamp:
    """Return the current UTC time, truncated to milliseconds."""
    return Timestamp.from_datetime(datetime.datetime.now(datetime.timezone.utc))


def generate_timestamp48(value: Optional[TimestampLike] = None) -> str:
    """Generate an 8-character text token for value, or for the current time.

    Args:
        value: Timestamp or datetime to encode; defaults to :py:func:`now`

    Raises:
        FieldOutOfRange: If a field is outside its legal range
        EncodeError: If value is not a Timestamp or datetime
    """
    return encode_to_text(now() if value is None else value)
