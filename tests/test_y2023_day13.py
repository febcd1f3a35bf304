import pytest

from adventsolutions.y2023_day13 import (
    find_reflection,
    find_smudged_reflection,
    part1,
    part2,
)

INPUT = """#.##..##.
..#.##.#.
##......#
##......#
..#.##.#.
..##..##.
#.#.##.#.

#...##..#
#....#..#
..##..###
#####.##.
#####.##.
..##..###
#....#..#"""


def test_part1():
    assert part1(INPUT) == 405


def test_part2():
    assert part2(INPUT) == 400


def test_find_reflection_rows_of_second_pattern():
    rows = INPUT.split("\n\n")[1].splitlines()
    assert find_reflection(rows) == 4


def test_find_reflection_none():
    assert find_reflection(["#.", ".#"]) is None


def test_find_smudged_reflection_one_difference():
    assert find_smudged_reflection(["#.", "##"], 1) == 1


def test_find_smudged_reflection_ignores_perfect_mirror():
    assert find_smudged_reflection(["#.", "#."], 1) is None


def test_pattern_without_reflection_raises():
    with pytest.raises(ValueError):
        part1("#.\n.#")