import pytest

from adventsolutions.y2023_day03 import count_gear_ratio, count_parts

INPUT = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_count_parts_example():
    assert count_parts(INPUT) == 4361


def test_count_gear_ratio_example():
    assert count_gear_ratio(INPUT) == 467835


def test_single_gear():
    assert count_gear_ratio("12.\n.*.\n..3") == 36


def test_number_without_symbol_is_ignored():
    assert count_parts("12...\n.....\n...7#") == 7


def test_without_line_break_raises():
    with pytest.raises(ValueError):
        count_parts("467..114..")