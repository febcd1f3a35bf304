"""Cosmic expansion: distances between galaxies in an expanding universe."""

from itertools import accumulate, combinations


def galaxies(text, expansion):
    """Galaxy positions as (row, col), with every empty row/column ``expansion`` wide."""
    grid = text.splitlines()
    if not grid:
        return []
    width = len(grid[0])
    empty_rows = [0 if "#" in row else 1 for row in grid]
    empty_cols = [0 if any(row[col] == "#" for row in grid) else 1 for col in range(width)]
    rows_before = [0, *accumulate(empty_rows)]
    cols_before = [0, *accumulate(empty_cols)]
    extra = expansion - 1
    return [
        (row + rows_before[row] * extra, col + cols_before[col] * extra)
        for row, line in enumerate(grid)
        for col in range(width)
        if line[col] == "#"
    ]


def _sum_of_distances(points):
    return sum(
        abs(r1 - r2) + abs(c1 - c2) for (r1, c1), (r2, c2) in combinations(points, 2)
    )


def part1(text):
    return _sum_of_distances(galaxies(text, 2))


def part2(text, expansion=1_000_000):
    return _sum_of_distances(galaxies(text, expansion))