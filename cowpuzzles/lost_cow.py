"""Distance walked by a zig-zag search for a lost cow."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def get_steps(x: int, y: int) -> int:
    """Return the distance walked from ``x`` zig-zagging by 1, -2, 4, ... until ``y`` is reached."""
    if y == 0:
        raise ValueError("target position must be non-zero")
    position = x
    delta = 1
    distance = 0
    while True:
        previous = position
        position = x + delta
        if position * position > y * y and position * y > 0:
            return distance + abs(previous - y)
        distance += abs(previous - position)
        delta *= -2


def main(argv: Sequence[str] | None = None) -> int:
    """Read X and Y from stdin and print the number of steps taken."""
    parser = argparse.ArgumentParser(
        description="Read the farmer's position X and the cow's position Y from stdin."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected two integers X and Y")
    x, y = int(tokens[0]), int(tokens[1])
    print("Steps Taken:", get_steps(x, y))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())