from adventsolutions.y2023_day16 import Direction, energized, part1, part2

INPUT = r""".|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|...."""


def test_part1():
    assert part1(INPUT) == 46


def test_part2():
    assert part2(INPUT) == 51


def test_energized_matches_part1():
    assert energized(INPUT.splitlines(), 0, 0, Direction.RIGHT) == 46


def test_energized_empty_row():
    assert energized(["..", ".."], 0, 0, Direction.RIGHT) == 2


def test_splitter_sends_beam_both_ways():
    assert energized(["...", ".|.", "..."], 0, 1, Direction.RIGHT) == 4


def test_mirror_turns_beam_down():
    assert energized(["\\.", ".."], 0, 0, Direction.RIGHT) == 2