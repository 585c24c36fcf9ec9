"""URL-safe text tokens for 48-bit timestamps.

Six bytes are exactly eight 6-bit groups, so the unpadded base64url form of
an encoded timestamp is always 8 characters from ``[A-Za-z0-9_-]``.
"""

from __future__ import annotations

import base64
import re

from ..codec.decoder import decode
from ..codec.encoder import TimestampLike, encode
from ..exceptions import InvalidTextAlphabet, InvalidTextLength
from ..models.timestamp import Timestamp

TOKEN_LENGTH = 8

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def encode_to_text(value: TimestampLike) -> str:
    """Encode a timestamp to an 8-character URL-safe token.

    Raises:
        FieldOutOfRange: If a field is outside its legal range
        EncodeError: If value is not a Timestamp or datetime

    Example:
        >>> encode_to_text(Timestamp(year=2019, month=6, day=16,
        ...                          hour=19, minute=11, second=22, millisecond=333))
        'fjaEy1lN'
    """
    return base64.urlsafe_b64encode(encode(value)).decode("ascii")


def decode_from_text(token: str) -> Timestamp:
    """Decode an 8-character URL-safe token back into a Timestamp.

    Raises:
        InvalidTextLength: If the token is not exactly 8 characters
        InvalidTextAlphabet: If the token contains characters outside [A-Za-z0-9_-]
    """
    if len(token) != TOKEN_LENGTH:
        raise InvalidTextLength(len(token), TOKEN_LENGTH)

    invalid = _INVALID_CHARS.findall(token)
    if invalid:
        raise InvalidTextAlphabet("".join(dict.fromkeys(invalid)))

    return decode(base64.urlsafe_b64decode(token))
