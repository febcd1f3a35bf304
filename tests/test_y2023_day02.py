import pytest

from adventsolutions.y2023_day02 import Game, part1, part2

INPUT = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


def test_game():
    game = Game.parse(
        "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red"
    )
    assert game.id == 3
    assert game.red == 20
    assert game.green == 13
    assert game.blue == 6


def test_is_possible():
    game = Game.parse("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game.is_possible(12, 13, 14) is True
    assert game.is_possible(3, 13, 14) is False


def test_example_part1():
    assert part1(INPUT) == 8


def test_example_part2():
    assert part2(INPUT) == 2286


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        Game.parse("3 blue, 4 red")