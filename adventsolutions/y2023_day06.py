"""Boat races: how many button-hold times beat the record."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Race:
    time: int
    distance: int

    def press_button(self, hold):
        """Distance travelled when the button is held for ``hold`` ms."""
        return hold * (self.time - hold)

    def distances(self):
        """Distances for every hold time from 0 up to but excluding the race time."""
        return (self.press_button(hold) for hold in range(self.time))

    def _ways_to_win(self):
        wins = lambda hold: self.press_button(hold) > self.distance  # noqa: E731
        disc = self.time * self.time - 4 * self.distance
        if disc < 0 or self.time <= 0:
            return 0
        peak = self.time // 2
        low = max((self.time - math.isqrt(disc)) // 2, 0)
        while low <= peak and not wins(low):
            low += 1
        while low > 0 and wins(low - 1):
            low -= 1
        if low > peak:
            return 0
        high = min(self.time - low, self.time - 1)
        return high - low + 1


def parse_races(text):
    lines = text.splitlines()
    times = (int(n) for n in lines[0].split()[1:])
    distances = (int(n) for n in lines[1].split()[1:])
    return [Race(t, d) for t, d in zip(times, distances)]


def part1(text):
    return math.prod(race._ways_to_win() for race in parse_races(text))


def part2(text):
    time_line, distance_line = text.splitlines()[:2]
    time = int(time_line.split(":", 1)[1].replace(" ", ""))
    distance = int(distance_line.split(":", 1)[1].replace(" ", ""))
    return Race(time, distance)._ways_to_win()