"""Estimate traffic flow at both ends of a highway from noisy sensor readings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

UNBOUNDED = 2**63 - 1


@dataclass(frozen=True)
class SensorInfo:
    """A sensor reading: ``loc`` is ``on``, ``off`` or a main-road position."""

    loc: str
    lb: int
    ub: int


def estimate_start_end(sensors: Iterable[SensorInfo]) -> tuple[int, int, int, int]:
    """Return ``(start_lb, start_ub, end_lb, end_ub)`` for the flow at both ends.

    Readings other than ``on`` and ``off`` are taken as main-road sensors.
    """
    ramp_lb = ramp_ub = 0
    start_lb, start_ub = 0, UNBOUNDED
    for sensor in sensors:
        if sensor.loc == "on":
            ramp_lb -= sensor.ub
            ramp_ub -= sensor.lb
        elif sensor.loc == "off":
            start_lb = max(start_lb, sensor.lb + ramp_ub)
            ramp_lb += sensor.lb
            ramp_ub += sensor.ub
        else:
            start_lb = max(start_lb, sensor.lb + ramp_lb)
            start_ub = min(start_ub, sensor.ub + ramp_ub)
    end_lb = max(0, start_lb - ramp_ub)
    end_ub = min(UNBOUNDED, start_ub - ramp_lb)
    return start_lb, start_ub, end_lb, end_ub


def _read_sensors(text: str) -> list[SensorInfo]:
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        return [
            SensorInfo(next(tokens), int(next(tokens)), int(next(tokens)))
            for _ in range(count)
        ]
    except StopIteration:
        raise ValueError("input ended before all sensors were read") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read N sensor readings from stdin and print the start and end ranges."""
    parser = argparse.ArgumentParser(
        description="Read N, then N lines of kind, low and high from stdin."
    )
    parser.parse_args(argv)
    start_lb, start_ub, end_lb, end_ub = estimate_start_end(
        _read_sensors(sys.stdin.read())
    )
    print(start_lb, start_ub)
    print(end_lb, end_ub)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())