import pytest

from adventsolutions.y2024_day02 import is_safe, part1, part2

INPUT = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_part1():
    assert part1(INPUT) == 2


def test_part2():
    assert part2(INPUT) == 4


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe(levels, expected):
    assert is_safe(levels) is expected


def test_is_safe_needs_two_levels():
    with pytest.raises(ValueError):
        is_safe([1])