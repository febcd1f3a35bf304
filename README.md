# adventsolutions

Solutions to the Advent of Code puzzles of 2023 (days 1 to 25) and 2024
(days 1 to 14). Each day lives in its own module, named `y<year>_day<NN>`,
and exposes functions that take the puzzle input as a string and return the
answer.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

The package depends on `networkx`. It is used for the minimum cut in
`y2023_day25`.

## Using the solutions from Python

```python
from adventsolutions import y2023_day01, y2024_day11

with open("input.txt") as handle:
    text = handle.read()

print(y2023_day01.part1(text))
print(y2023_day01.part2(text))

# Some days take extra parameters, such as the number of blinks here.
print(y2024_day11.count_stones("125 17", 25))
```

Most modules expose `part1(text)` and `part2(text)`. There are two exceptions:

- `y2023_day03` exposes `count_parts(text)` and `count_gear_ratio(text)`.
- `y2023_day25` has only `part1(text)`.

A few days take more than the input text. The defaults are the values the
puzzle statement uses:

- `y2023_day11.part2(text, expansion=1_000_000)` sets how much each empty row or column grows.
- `y2023_day14.part2(text, cycles=1_000_000_000)` sets how many spin cycles to run.
- `y2023_day21.part1(text, steps=64)` and `part2(text, steps=26501365)` set how many steps to walk.
- `y2023_day24.part1(text, low, high)` sets the bounds of the test area. They default to 200000000000000 and 400000000000000.
- `y2024_day14.part1(text, wide=101, high=103)` and `part2(text, wide=101, high=103)` set the room size.

Besides the part functions, many modules expose the building blocks they use.
Examples are `y2023_day12.count_arrangements`, `y2023_day15.hash_label`,
`y2023_day17.least_heat_loss`, `y2023_day22.settle`, `y2024_day02.is_safe`
and `y2024_day13.prize_cost`.

Malformed input raises `ValueError`. This covers a missing start tile, an
invalid direction or a line that cannot be parsed.

## The command

Installing the package provides an `adventsolutions` command. It runs the
solutions for one day on an input file and prints each answer as
`Part N: <answer>`:

```
adventsolutions 2023 7 path/to/input.txt
```

The input file argument is optional and defaults to `input.txt` in the
current directory. If there is no solution for the requested year and day,
or the file cannot be read, the command reports an error. To see all
options, run:

```
adventsolutions --help
```

## What it does not do

The package includes no puzzle inputs. You have to supply your own input
file or string. It does not download inputs and does not submit answers.