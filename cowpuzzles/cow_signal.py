"""Enlarge a character grid by an integer scale factor."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


def expand(grid: Iterable[str], k: int) -> list[str]:
    """Return the grid with every row and every character repeated ``k`` times."""
    expanded: list[str] = []
    for row in grid:
        wide_row = "".join(char * k for char in row)
        expanded.extend([wide_row] * k)
    return expanded


def _read_grid(text: str) -> tuple[list[str], int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing header line with M N K")
    header = lines[0].split()
    if len(header) < 3:
        raise ValueError("header line must hold M N K")
    rows, _columns, k = (int(token) for token in header[:3])
    grid = [line for line in lines[1:] if line != ""][:rows]
    if len(grid) < rows:
        raise ValueError(f"expected {rows} grid rows, got {len(grid)}")
    return grid, k


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``M N K`` and an M-row grid from stdin and print the enlarged grid."""
    parser = argparse.ArgumentParser(
        description="Read M N K and a grid from stdin; print the grid scaled by K."
    )
    parser.parse_args(argv)
    grid, k = _read_grid(sys.stdin.read())
    for row in expand(grid, k):
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())