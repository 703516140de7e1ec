"""Undo three rounds of a fixed shuffle to recover the original cow order."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

ROUNDS = 3


def _invert(permutation: Sequence[int]) -> list[int]:
    inverse = [0] * len(permutation)
    for source, target in enumerate(permutation):
        inverse[target] = source
    return inverse


def original_positions(shuffle: Sequence[int], ids: Sequence[int]) -> list[int]:
    """Return the ids in their order before three shuffles.

    ``shuffle`` holds 1-based target positions; ``ids`` is the order after
    the shuffles.
    """
    if len(shuffle) != len(ids):
        raise ValueError("shuffle and ids must have the same length")
    permutation = [position - 1 for position in shuffle]
    if sorted(permutation) != list(range(len(permutation))):
        raise ValueError("shuffle must be a permutation of 1..N")
    for _ in range(ROUNDS):
        permutation = _invert(permutation)
    return [ids[source] for source in permutation]


def main(argv: Sequence[str] | None = None) -> int:
    """Read N, the shuffle and the final ids from stdin; print the original ids."""
    parser = argparse.ArgumentParser(
        description="Read N, a shuffle of 1..N and N ids from stdin."
    )
    parser.parse_args(argv)
    tokens = [int(token) for token in sys.stdin.read().split()]
    if not tokens:
        raise ValueError("expected the number of cows N")
    count = tokens[0]
    shuffle = tokens[1 : 1 + count]
    ids = tokens[1 + count : 1 + 2 * count]
    for cow_id in original_positions(shuffle, ids):
        print(cow_id)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())