import pytest

from adventsolutions.y2024_day12 import part1, part2

INPUT = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""


def test_part1():
    assert part1(INPUT) == 1930


def test_part2():
    assert part2(INPUT) == 1206


@pytest.mark.parametrize(
    ("garden", "expected"),
    [
        ("AAAA\nBBCD\nBBCC\nEEEC", 80),
        ("EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE", 236),
        ("AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA", 368),
    ],
)
def test_part2_examples(garden, expected):
    assert part2(garden) == expected


def test_single_plot():
    assert part1("A") == 4
    assert part2("A") == 4