"""Find the worst amount by which a cow exceeded a road's speed limits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """A stretch of road of some length travelled at, or limited to, a speed."""

    length: int
    limit: int

    def __str__(self) -> str:
        return f"{{{self.length} {self.limit}}}"


def max_over_speed(
    track_segments: Iterable[Segment], cow_segments: Iterable[Segment]
) -> int:
    """Return the largest excess of the cow's speed over the limit (at least 0)."""
    worst = 0
    tracks = iter(track_segments)
    cows = iter(cow_segments)
    track = next(tracks, None)
    cow = next(cows, None)
    track_end = cow_end = 0
    while track is not None and cow is not None:
        worst = max(cow.limit - track.limit, worst)
        cow_next = cow_end + cow.length
        track_next = track_end + track.length
        if cow_next <= track_next:
            cow_end = cow_next
            cow = next(cows, None)
        if track_next <= cow_next:
            track_end = track_next
            track = next(tracks, None)
    return worst


def _format_segments(segments: Iterable[Segment]) -> str:
    return "[" + " ".join(str(segment) for segment in segments) + "]"


def _read_segments(text: str) -> tuple[list[Segment], list[Segment]]:
    tokens = iter(text.split())
    try:
        track_count = int(next(tokens))
        cow_count = int(next(tokens))
        track = [
            Segment(int(next(tokens)), int(next(tokens))) for _ in range(track_count)
        ]
        cow = [Segment(int(next(tokens)), int(next(tokens))) for _ in range(cow_count)]
    except StopIteration:
        raise ValueError("input ended before all segments were read") from None
    return track, cow


def main(argv: Sequence[str] | None = None) -> int:
    """Read road and cow segments from stdin and print the worst speeding."""
    parser = argparse.ArgumentParser(
        description="Read N M, N road segments and M cow segments from stdin."
    )
    parser.parse_args(argv)
    track, cow = _read_segments(sys.stdin.read())
    print("Track Segments")
    print(_format_segments(track))
    print("Cow Segments")
    print(_format_segments(cow))
    print(max_over_speed(track, cow))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())