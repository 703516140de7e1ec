"""Find the largest number of buckets needed at any one time during milking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from itertools import accumulate


def max_buckets(buckets: Mapping[int, int]) -> int:
    """Return the peak running total of bucket changes, taken in time order.

    ``buckets`` maps a time to the change in buckets in use at that time
    (positive when a cow starts, negative when it finishes). The result is
    never below 0.
    """
    changes = (buckets[time] for time in sorted(buckets))
    return max(accumulate(changes, initial=0))


def _read_buckets(text: str) -> dict[int, int]:
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        buckets: dict[int, int] = {}
        for _ in range(count):
            start, end, amount = (int(next(tokens)) for _ in range(3))
            buckets[start] = amount
            buckets[end] = -amount
    except StopIteration:
        raise ValueError("input ended before all cows were read") from None
    return buckets


def main(argv: Sequence[str] | None = None) -> int:
    """Read N and N lines of ``S T B`` from stdin and print the buckets needed."""
    parser = argparse.ArgumentParser(
        description="Read N, then N lines of start, end and buckets from stdin."
    )
    parser.parse_args(argv)
    buckets = _read_buckets(sys.stdin.read())
    print("Max required buckets:", max_buckets(buckets))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())