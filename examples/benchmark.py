#!/usr/bin/env python3
"""ts48 benchmark: token generation, encode and decode throughput.

Usage:
    python3 examples/benchmark.py --iterations 1000000

Timings are reported, not asserted; pure-Python throughput depends heavily
on the interpreter and machine.
"""

from __future__ import annotations

import argparse
import time
from typing import Callable

from ts48 import Timestamp, decode, encode, encode_int, generate_timestamp48


def _time(label: str, fn: Callable[[], object], iterations: int) -> None:
    t0 = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter() - t0
    per_call_us = elapsed / iterations * 1e6
    print(f"{label:<24} {elapsed * 1000:>10.1f} ms  {per_call_us:>8.3f} us/call")


def main() -> None:
    parser = argparse.ArgumentParser(description="ts48 benchmark")
    parser.add_argument("--iterations", type=int, default=1_000_000)
    args = parser.parse_args()

    ts = Timestamp(year=2019, month=6, day=16, hour=19, minute=11, second=22, millisecond=333)
    data = encode(ts)

    print(f"{args.iterations} iterations")
    _time("generate_timestamp48()", generate_timestamp48, args.iterations)
    _time("encode(ts)", lambda: encode(ts), args.iterations)
    _time("encode_int(ts)", lambda: encode_int(ts), args.iterations)
    _time("decode(data)", lambda: decode(data), args.iterations)


if __name__ == "__main__":
    main()
