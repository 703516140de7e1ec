"""Count the single cows and the pairs of cows that win a tic-tac-toe board."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

SIZE = 3


def _lines(board: Sequence[Sequence[str]]) -> Iterator[list[str]]:
    yield from (list(row) for row in board)
    yield from ([board[r][c] for r in range(SIZE)] for c in range(SIZE))
    yield [board[i][i] for i in range(SIZE)]
    yield [board[SIZE - 1 - i][i] for i in range(SIZE)]


def possible_wins(board: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return ``(single_winners, team_winners)`` for a 3x3 board of cow letters."""
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("board must be 3 rows of 3 cells")
    winners: set[str] = set()
    singles = teams = 0
    for line in _lines(board):
        members = set(line)
        key = "".join(sorted(members))
        if key in winners:
            continue
        if len(members) == 1:
            singles += 1
            winners.add(key)
        elif len(members) == 2:
            teams += 1
            winners.add(key)
    return singles, teams


def main(argv: Sequence[str] | None = None) -> int:
    """Read a 3x3 board from stdin and print the single and team win counts."""
    parser = argparse.ArgumentParser(
        description="Read three lines of three letters from stdin."
    )
    parser.parse_args(argv)
    board = sys.stdin.read().split()[:SIZE]
    singles, teams = possible_wins(board)
    print(singles)
    print(teams)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())