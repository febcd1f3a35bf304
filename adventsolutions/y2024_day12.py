"""Garden groups: fencing prices of regions of plants."""

from collections import deque

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _parse(text):
    grid = [line for line in text.splitlines() if line]
    if not grid:
        raise ValueError("empty garden")
    return grid


def _regions(grid):
    seen = set()
    for r, line in enumerate(grid):
        for c, plant in enumerate(line):
            if (r, c) in seen:
                continue
            region = {(r, c)}
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for dr, dc in _DIRECTIONS:
                    nr, nc = cr + dr, cc + dc
                    if (
                        (nr, nc) not in region
                        and 0 <= nr < len(grid)
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == plant
                    ):
                        region.add((nr, nc))
                        queue.append((nr, nc))
            seen |= region
            yield frozenset(region)


def _perimeter(region):
    return sum(
        1
        for r, c in region
        for dr, dc in _DIRECTIONS
        if (r + dr, c + dc) not in region
    )


def _sides(region):
    total = 0
    for dr, dc in _DIRECTIONS:
        outside = {(r + dr, c + dc) for r, c in region} - region
        # Step along the fence, perpendicular to the facing direction.
        sr, sc = dc, dr
        total += sum(1 for r, c in outside if (r - sr, c - sc) not in outside)
    return total


def part1(text):
    """Total price: area times perimeter, summed over regions."""
    return sum(len(region) * _perimeter(region) for region in _regions(_parse(text)))


def part2(text):
    """Total price with bulk discount: area times number of sides."""
    return sum(len(region) * _sides(region) for region in _regions(_parse(text)))