import pytest

from adventsolutions.y2023_day10 import loop_tiles, part1, part2


def _grid(*rows):
    return "\n".join(rows)


P1_INPUT = _grid(".....", ".S-7.", ".|.|.", ".L-J.", ".....")

P1_INPUT2 = _grid("..F7.", ".FJ|.", "SJ.L7", "|F--J", "LJ...")

P2_INPUT = _grid(
    "...........", ".S-------7.", ".|F-----7|.",
    ".||.....||.", ".||.....||.", ".|L-7.F-J|.",
    ".|..|.|..|.", ".L--J.L--J.", "...........",
)

P2_INPUT2 = _grid(
    "..........", ".S------7.", ".|F----7|.",
    ".||....||.", ".||....||.", ".|L-7F-J|.",
    ".|..||..|.", ".L--JL--J.", "..........",
)

P2_INPUT3 = _grid(
    ".F----7F7F7F7F-7....", ".|F--7||||||||FJ....",
    ".||.FJ||||||||L7....", "FJL7L7LJLJ||LJ.L-7..",
    "L--J.L7...LJS7F-7L7.", "....F-J..F7FJ|L7L7L7",
    "....L7.F7||L7|.L7L7|", ".....|FJLJ|FJ|F7|.LJ",
    "....FJL-7.||.||||...", "....L---J.LJ.LJLJ...",
)

P2_INPUT4 = _grid(
    "FF7FSF7F7F7F7F7F---7", "L|LJ||||||||||||F--J",
    "FL-7LJLJ||||||LJL-77", "F--JF--7||LJLJ7F7FJ-",
    "L---JF-JLJ.||-FJLJJ7", "|F|F-JF---7F7-L7L|7|",
    "|FFJF7L7F-JF7|JL---7", "7-L-JL7||F7|L7F-7F7|",
    "L.L7LFJ|||||FJL7||LJ", "L7JLJL-JLJLJL--JLJ.L",
)


def test_part1_ex1():
    assert part1(P1_INPUT) == 4


def test_part1_ex2():
    assert part1(P1_INPUT2) == 8


@pytest.mark.parametrize(
    "text, expected",
    [(P2_INPUT, 4), (P2_INPUT2, 4), (P2_INPUT3, 8), (P2_INPUT4, 10)],
)
def test_part2_examples(text, expected):
    assert part2(text) == expected


def test_loop_tiles_square():
    tiles = loop_tiles(P1_INPUT)
    assert len(tiles) == 8
    assert P1_INPUT.index("S") in tiles
    assert {P1_INPUT[i] for i in tiles} == set("S-7|LJ")


def test_no_path_raises():
    with pytest.raises(ValueError):
        part1("S.\n..")