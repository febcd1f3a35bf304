"""Command line entry point: solve one puzzle from an input file."""

import argparse
from pathlib import Path

from . import (
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2023_day06,
    y2023_day07,
    y2023_day08,
    y2023_day09,
    y2023_day10,
    y2023_day11,
    y2023_day12,
    y2023_day13,
    y2023_day14,
    y2023_day15,
    y2023_day16,
    y2023_day17,
    y2023_day18,
    y2023_day19,
    y2023_day20,
    y2023_day21,
    y2023_day22,
    y2023_day23,
    y2023_day24,
    y2023_day25,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
    y2024_day11,
    y2024_day12,
    y2024_day13,
    y2024_day14,
)


def _parts(module):
    return (module.part1, module.part2)


PUZZLES = {
    (2023, 1): _parts(y2023_day01),
    (2023, 2): _parts(y2023_day02),
    (2023, 3): (y2023_day03.count_parts, y2023_day03.count_gear_ratio),
    (2023, 4): _parts(y2023_day04),
    (2023, 5): _parts(y2023_day05),
    (2023, 6): _parts(y2023_day06),
    (2023, 7): _parts(y2023_day07),
    (2023, 8): _parts(y2023_day08),
    (2023, 9): _parts(y2023_day09),
    (2023, 10): _parts(y2023_day10),
    (2023, 11): _parts(y2023_day11),
    (2023, 12): _parts(y2023_day12),
    (2023, 13): _parts(y2023_day13),
    (2023, 14): _parts(y2023_day14),
    (2023, 15): _parts(y2023_day15),
    (2023, 16): _parts(y2023_day16),
    (2023, 17): _parts(y2023_day17),
    (2023, 18): _parts(y2023_day18),
    (2023, 19): _parts(y2023_day19),
    (2023, 20): _parts(y2023_day20),
    (2023, 21): _parts(y2023_day21),
    (2023, 22): _parts(y2023_day22),
    (2023, 23): _parts(y2023_day23),
    (2023, 24): _parts(y2023_day24),
    (2023, 25): (y2023_day25.part1,),
    (2024, 1): _parts(y2024_day01),
    (2024, 2): _parts(y2024_day02),
    (2024, 3): _parts(y2024_day03),
    (2024, 4): _parts(y2024_day04),
    (2024, 5): _parts(y2024_day05),
    (2024, 6): _parts(y2024_day06),
    (2024, 7): _parts(y2024_day07),
    (2024, 8): _parts(y2024_day08),
    (2024, 9): _parts(y2024_day09),
    (2024, 10): _parts(y2024_day10),
    (2024, 11): _parts(y2024_day11),
    (2024, 12): _parts(y2024_day12),
    (2024, 13): _parts(y2024_day13),
    (2024, 14): _parts(y2024_day14),
}


def main(argv=None):
    """Read a puzzle input and print the answer to each part."""
    parser = argparse.ArgumentParser(
        prog="adventsolutions", description="Solve a puzzle for the given year and day."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    solvers = PUZZLES.get((args.year, args.day))
    if solvers is None:
        parser.error(f"no solution for {args.year} day {args.day}")
    try:
        text = Path(args.input).read_text()
    except OSError as error:
        parser.error(f"cannot read {args.input}: {error.strerror}")

    for number, solve in enumerate(solvers, start=1):
        print(f"Part {number}: {solve(text)}")
    return 0