"""Hoof it: hiking trails climbing from height 0 to height 9."""

from functools import lru_cache

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _parse(text):
    grid = [[int(c) for c in line] for line in text.splitlines() if line]
    if not grid:
        raise ValueError("empty map")
    return grid


def _uphill(grid, r, c):
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] == grid[r][c] + 1:
            yield nr, nc


def _trailheads(grid):
    return ((r, c) for r, row in enumerate(grid) for c, height in enumerate(row) if height == 0)


def part1(text):
    """Sum over trailheads of the distinct height-9 positions they reach."""
    grid = _parse(text)

    @lru_cache(maxsize=None)
    def summits(r, c):
        if grid[r][c] == 9:
            return frozenset({(r, c)})
        return frozenset().union(*(summits(nr, nc) for nr, nc in _uphill(grid, r, c)))

    return sum(len(summits(r, c)) for r, c in _trailheads(grid))


def part2(text):
    """Sum over trailheads of the distinct trails leading to height 9."""
    grid = _parse(text)

    @lru_cache(maxsize=None)
    def trails(r, c):
        if grid[r][c] == 9:
            return 1
        return sum(trails(nr, nc) for nr, nc in _uphill(grid, r, c))

    return sum(trails(r, c) for r, c in _trailheads(grid))