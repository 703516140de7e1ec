"""Count the letter tiles needed to spell any side of every block."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Block:
    """A block with a word on its front and another on its back."""

    front: str
    back: str


def letter_counts(blocks: Iterable[Block]) -> Counter[str]:
    """Return how many of each letter are needed, whichever side of each block shows.

    Letters shared by a block's two words are counted once for that block.
    """
    total: Counter[str] = Counter()
    for block in blocks:
        total.update(Counter(block.front) | Counter(block.back))
    return total


def _read_blocks(text: str) -> list[Block]:
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        return [Block(next(tokens), next(tokens)) for _ in range(count)]
    except StopIteration:
        raise ValueError("input ended before all blocks were read") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read N blocks from stdin and print the count needed for each letter a-z."""
    parser = argparse.ArgumentParser(
        description="Read N, then N lines of front and back words from stdin."
    )
    parser.parse_args(argv)
    counts = letter_counts(_read_blocks(sys.stdin.read()))
    for letter in string.ascii_lowercase:
        print(counts[letter])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())