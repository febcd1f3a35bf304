"""Step counter: garden plots reachable in an exact number of steps."""

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _parse(text):
    grid = [line for line in text.splitlines() if line]
    for row, line in enumerate(grid):
        col = line.find("S")
        if col >= 0:
            return grid, (row, col)
    raise ValueError("map has no start tile")


def part1(text, steps=64):
    """Plots reachable in exactly ``steps`` steps on the bounded map."""
    grid, start = _parse(text)
    rows, cols = len(grid), len(grid[0])
    frontier = {start}
    for _ in range(steps):
        frontier = {
            (r + dr, c + dc)
            for r, c in frontier
            for dr, dc in _NEIGHBOURS
            if 0 <= r + dr < rows
            and 0 <= c + dc < len(grid[r + dr])
            and grid[r + dr][c + dc] in ".S"
        }
    return len(frontier)


def part2(text, steps=26501365):
    """Plots reachable on the infinitely repeated map, extrapolated quadratically."""
    grid, start = _parse(text)
    rows, cols = len(grid), len(grid[0])
    visited = {start}
    values = [0, 0, 0]
    for step in range(1, steps + 1):
        visited = {
            (r + dr, c + dc)
            for r, c in visited
            for dr, dc in _NEIGHBOURS
            if grid[(r + dr) % rows][(c + dc) % cols] != "#"
        }
        if step % cols == steps % cols:
            index = step // cols
            values[index] = len(visited)
            if index == len(values) - 1:
                break
    b0 = values[0]
    b1 = values[1] - values[0]
    b2 = values[2] - values[1]
    n = steps // cols
    return b0 + b1 * n + (n * (n - 1) // 2) * (b2 - b1)