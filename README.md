# cowpuzzles

Solutions to eight bronze-level programming puzzles. Each one is a Python
function you can call directly, and a small command that reads the puzzle
input from standard input and prints the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Puzzles

| Command             | Module                          | Function                                       |
|---------------------|---------------------------------|------------------------------------------------|
| `cow-signal`        | `cowpuzzles.cow_signal`         | `expand(grid, k)`                              |
| `speeding-ticket`   | `cowpuzzles.speeding_ticket`    | `max_over_speed(track_segments, cow_segments)` |
| `lost-cow`          | `cowpuzzles.lost_cow`           | `get_steps(x, y)`                              |
| `bovine-shuffle`    | `cowpuzzles.bovine_shuffle`     | `original_positions(shuffle, ids)`             |
| `bucket-list`       | `cowpuzzles.bucket_list`        | `max_buckets(buckets)`                         |
| `measuring-traffic` | `cowpuzzles.measuring_traffic`  | `estimate_start_end(sensors)`                  |
| `block-game`        | `cowpuzzles.block_game`         | `letter_counts(blocks)`                        |
| `team-tic-tac-toe`  | `cowpuzzles.team_tic_tac_toe`   | `possible_wins(board)`                         |

- **Cow signal.** `expand` repeats every character of every row `k` times
  across, and every row `k` times down. The command reads `M N K`, then
  takes the next `M` non-empty lines as the grid and prints the enlarged grid.
- **Speeding ticket.** `max_over_speed` walks the road's segments and the
  cow's segments side by side. Both are lists of `Segment(length, limit)`.
  It returns the largest amount by which the cow's speed went over the limit,
  and never less than 0. The command reads `N M`, then `N` road segments and
  `M` cow segments. It prints both lists under the headings `Track Segments`
  and `Cow Segments`, then the answer.
- **Lost cow.** `get_steps` gives the total distance walked from `x` when
  zig-zagging to `x+1`, `x-2`, `x+4`, `x-8`, ..., until the walk passes `y`.
  It raises `ValueError` when `y` is 0. The command reads `X Y` and prints
  `Steps Taken: <distance>`.
- **Bovine shuffle.** `original_positions` undoes three rounds of a shuffle.
  The shuffle is given as 1-based target positions. It raises `ValueError`
  if the shuffle is not a permutation of `1..N`, or if its length differs
  from that of `ids`. The command reads `N`, then the shuffle, then the ids,
  and prints one id per line.
- **Bucket list.** `max_buckets` takes a mapping from time to a change in
  the number of buckets in use. It returns the peak running total in time
  order, never below 0. The command reads `N` lines of `S T B` and prints
  `Max required buckets: <n>`.
- **Measuring traffic.** `estimate_start_end` takes `SensorInfo(loc, lb, ub)`
  readings. A `loc` of `on` or `off` marks a ramp; anything else is a
  main-road sensor. It returns `(start_lb, start_ub, end_lb, end_ub)`. The
  command reads `N` readings and prints the start range on one line and the
  end range on the next.
- **Block game.** `letter_counts` returns a `Counter` of the letters needed
  so that either word of every `Block(front, back)` can be spelled. Letters
  that a block's two words share count once for that block. The command
  reads `N` blocks and prints the count for each letter `a` to `z`, one per
  line.
- **Team tic-tac-toe.** `possible_wins` takes a 3×3 board of letters. It
  returns `(singles, teams)`: the number of distinct single letters, and of
  distinct pairs of letters, that fill some row, column or diagonal. It
  raises `ValueError` if the board is not 3×3. The command reads three lines
  of three letters and prints the two counts.

## Library use

```python
from cowpuzzles.cow_signal import expand
from cowpuzzles.lost_cow import get_steps
from cowpuzzles.speeding_ticket import Segment, max_over_speed

expand(["X.", ".X"], 2)
# ['XX..', 'XX..', '..XX', '..XX']

get_steps(3, 6)
# 9

max_over_speed(
    [Segment(40, 75), Segment(50, 35), Segment(10, 45)],
    [Segment(40, 76), Segment(20, 30), Segment(40, 40)],
)
# 5
```

## Command-line use

Each command reads the puzzle input from standard input. The only option is
`--help`. For example:

```
printf '3 6\n' | lost-cow
```

prints `Steps Taken: 9`, and

```
printf 'COW\nXXO\nABC\n' | team-tic-tac-toe
```

prints `0` and then `2`.