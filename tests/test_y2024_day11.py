from adventsolutions.y2024_day11 import count_stones, part1

INPUT = "125 17"


def test_part1():
    assert count_stones(INPUT, 25) == 55312


def test_part1_uses_25_blinks():
    assert part1(INPUT) == count_stones(INPUT, 25)


def test_no_blinks_keeps_stones():
    assert count_stones(INPUT, 0) == 2


def test_zero_becomes_one():
    assert count_stones("0", 1) == 1