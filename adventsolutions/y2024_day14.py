"""Restroom redoubt: robots wrapping around a room and the quadrant safety factor."""

import math
import re

_NUMBER_RE = re.compile(r"-?\d+")


def _robots(text):
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = [int(n) for n in _NUMBER_RE.findall(line)]
        if len(numbers) != 4:
            raise ValueError(f"invalid robot {line!r}")
        robots.append(tuple(numbers))
    return robots


def _safety_factor(positions, wide, high):
    counts = [0, 0, 0, 0]
    for x, y in positions:
        if x == wide // 2 or y == high // 2:
            continue
        counts[(x > wide // 2) + 2 * (y > high // 2)] += 1
    return math.prod(counts)


def part1(text, wide=101, high=103):
    """Safety factor after 100 seconds in a ``wide`` by ``high`` room."""
    positions = (
        ((x + 100 * vx) % wide, (y + 100 * vy) % high) for x, y, vx, vy in _robots(text)
    )
    return _safety_factor(positions, wide, high)


def part2(text, wide=101, high=103):
    """First second, within one full period, with the lowest safety factor."""
    robots = _robots(text)
    best = None
    for second in range(1, wide * high):
        positions = [
            ((x + second * vx) % wide, (y + second * vy) % high) for x, y, vx, vy in robots
        ]
        factor = _safety_factor(positions, wide, high)
        if best is None or factor < best[1]:
            best = (second, factor)
    if best is None:
        raise ValueError("room too small to simulate")
    return best[0]