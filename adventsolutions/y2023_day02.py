"""Cube games: which games fit a bag, and the power of minimal bags."""

import math
import re
from dataclasses import dataclass

_GAME_RE = re.compile(r"Game (\d+)")
_CUBES_RE = re.compile(r"(\d+) (green|blue|red)")


@dataclass
class Game:
    """A game with the largest count of each colour seen in any draw."""

    id: int = 0
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, line):
        """Parse ``Game N: 1 blue, 2 green; 3 red`` into a game."""
        header = _GAME_RE.search(line)
        if header is None:
            raise ValueError(f"not a game line: {line!r}")
        game = cls(id=int(header.group(1)))
        for match in _CUBES_RE.finditer(line, header.end()):
            count, colour = int(match.group(1)), match.group(2)
            setattr(game, colour, max(getattr(game, colour), count))
        return game

    def is_possible(self, red, green, blue):
        return self.red <= red and self.green <= green and self.blue <= blue


def part1(text):
    games = (Game.parse(line) for line in text.splitlines())
    return sum(game.id for game in games if game.is_possible(12, 13, 14))


def part2(text):
    return sum(
        math.prod((game.red, game.green, game.blue))
        for game in map(Game.parse, text.splitlines())
    )