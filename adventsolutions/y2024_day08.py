"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from collections import defaultdict
from itertools import combinations


def _parse(text):
    grid = [line for line in text.splitlines() if line]
    if not grid:
        raise ValueError("empty map")
    antennas = defaultdict(list)
    for r, line in enumerate(grid):
        for c, tile in enumerate(line):
            if tile != ".":
                antennas[tile].append((r, c))
    return len(grid), len(grid[0]), antennas


def _in_bounds(position, rows, cols):
    return 0 <= position[0] < rows and 0 <= position[1] < cols


def part1(text):
    """Distinct antinodes at twice the distance on either side of each antenna pair."""
    rows, cols, antennas = _parse(text)
    antinodes = set()
    for positions in antennas.values():
        for (ar, ac), (br, bc) in combinations(positions, 2):
            for node in ((2 * br - ar, 2 * bc - ac), (2 * ar - br, 2 * ac - bc)):
                if _in_bounds(node, rows, cols):
                    antinodes.add(node)
    return len(antinodes)


def part2(text):
    """Distinct grid positions on any line through two same-frequency antennas."""
    rows, cols, antennas = _parse(text)
    antinodes = set()
    for positions in antennas.values():
        for (ar, ac), (br, bc) in combinations(positions, 2):
            dr, dc = br - ar, bc - ac
            for sign in (1, -1):
                r, c = ar, ac
                while _in_bounds((r, c), rows, cols):
                    antinodes.add((r, c))
                    r, c = r + sign * dr, c + sign * dc
    return len(antinodes)