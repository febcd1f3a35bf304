"""Ceres search: finding XMAS in a word search."""

from collections import defaultdict

_DIRECTIONS_8 = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
_DIAGONALS = ((-1, 1), (-1, -1), (1, 1), (1, -1))


def _grid(text):
    return [line for line in text.splitlines() if line]


def _cells(grid):
    return ((r, c) for r, line in enumerate(grid) for c in range(len(line)))


def _spells(grid, row, col, dr, dc, word):
    for k, letter in enumerate(word):
        r, c = row + dr * k, col + dc * k
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])) or grid[r][c] != letter:
            return False
    return True


def part1(text):
    """Occurrences of XMAS in any of the eight directions."""
    grid = _grid(text)
    return sum(
        1
        for r, c in _cells(grid)
        for dr, dc in _DIRECTIONS_8
        if _spells(grid, r, c, dr, dc, "XMAS")
    )


def part2(text):
    """Number of X shapes made of two diagonal MAS sharing the same A."""
    grid = _grid(text)
    firsts_by_middle = defaultdict(set)
    for r, c in _cells(grid):
        for dr, dc in _DIAGONALS:
            if _spells(grid, r, c, dr, dc, "MAS"):
                firsts_by_middle[(r + dr, c + dc)].add((r, c))
    return sum(len(firsts) for firsts in firsts_by_middle.values() if len(firsts) > 1) // 2