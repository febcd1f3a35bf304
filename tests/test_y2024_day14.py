import pytest

from adventsolutions.y2024_day14 import part1, part2

ROBOTS = (
    (0, 4, 3, -3), (6, 3, -1, -3), (10, 3, -1, 2), (2, 0, 2, -1),
    (0, 0, 1, 3), (3, 0, -2, -2), (7, 6, -1, -3), (3, 0, -1, -2),
    (9, 3, 2, 3), (7, 3, -1, 2), (2, 4, 2, -3), (9, 5, -3, -3),
)

INPUT = "\n".join(f"p={x},{y} v={vx},{vy}" for x, y, vx, vy in ROBOTS)


def test_part1():
    assert part1(INPUT, 11, 7) == 12


def test_part2_is_within_one_period():
    second = part2(INPUT, 11, 7)
    assert 1 <= second < 11 * 7


def test_part2_stationary_robot_picks_first_second():
    assert part2("p=1,1 v=0,0", 11, 7) == 1


def test_invalid_robot_raises():
    with pytest.raises(ValueError):
        part1("p=1,2 v=3", 11, 7)