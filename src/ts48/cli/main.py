"""Main CLI entry point for ts48."""

from __future__ import annotations

import argparse
import datetime
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..clock import now
from ..codec import decode, encode, encode_int
from ..exceptions import Ts48Error
from ..models.timestamp import Timestamp
from ..text import TOKEN_LENGTH, decode_from_text, encode_to_text
from .layout import print_layout

logger = logging.getLogger(__name__)

DESCRIPTION = "ts48: 48-bit Sortable Timestamp Codec"


def parse_datetime(value: str) -> datetime.datetime:
    """Parse an ISO 8601 string; a trailing ``Z`` and a missing offset both mean UTC.

    Raises:
        ValueError: If value is not a valid ISO 8601 date/time
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.datetime.fromisoformat(value)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ts48 command."""
    parser = argparse.ArgumentParser(
        prog="ts48",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ts48 encode 2019-06-16T19:11:22.333Z        Encode as a text token
  ts48 encode --format hex                     Encode the current time as hex
  ts48 decode fjaEy1lN                         Decode a text token
  ts48 decode 7E3684CB594D                     Decode hex bytes
  ts48 layout                                  Show the bit layout
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ts48 {__version__}",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode a UTC date/time")
    encode_parser.add_argument(
        "datetime",
        nargs="?",
        help="ISO 8601 date/time (UTC when no offset is given); defaults to now",
    )
    encode_parser.add_argument(
        "--format",
        choices=["text", "hex", "int"],
        default="text",
        help="Output format (default: text)",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode a text token or hex bytes")
    decode_parser.add_argument("value", help="8-character text token or 12-digit hex string")
    decode_parser.add_argument(
        "--format",
        choices=["text", "hex"],
        default=None,
        help="Input format (default: detect from length)",
    )

    subparsers.add_parser("layout", help="Show the bit layout")

    return parser


def run_encode(args: argparse.Namespace) -> str:
    if args.datetime is None:
        ts = now()
    else:
        ts = Timestamp.from_datetime(parse_datetime(args.datetime))
    logger.debug("Encoding %s", ts)

    if args.format == "hex":
        return encode(ts).hex().upper()
    if args.format == "int":
        return str(encode_int(ts))
    return encode_to_text(ts)


def run_decode(args: argparse.Namespace) -> str:
    fmt = args.format
    if fmt is None:
        fmt = "text" if len(args.value) == TOKEN_LENGTH else "hex"
    logger.debug("Decoding %r as %s", args.value, fmt)

    if fmt == "text":
        ts = decode_from_text(args.value)
    else:
        ts = decode(bytes.fromhex(args.value))
    return ts.isoformat()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the ts48 CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if args.command == "layout":
        print_layout()
        return 0

    if args.command in ("encode", "decode"):
        try:
            if args.command == "encode":
                print(run_encode(args))
            else:
                print(run_decode(args))
            return 0
        except (Ts48Error, ValueError) as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
