"""Guard gallivant: a guard's patrol route and obstructions that trap her."""

_HEADINGS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_TURN_RIGHT = {(-1, 0): (0, 1), (0, 1): (1, 0), (1, 0): (0, -1), (0, -1): (-1, 0)}


def _parse(text):
    grid = [line for line in text.splitlines() if line]
    for r, line in enumerate(grid):
        for c, tile in enumerate(line):
            if tile in _HEADINGS:
                return grid, (r, c), _HEADINGS[tile]
    raise ValueError("map has no guard")


def _patrol(grid, start, heading, obstruction=None):
    """Walk the guard; return the visited positions and whether she loops."""
    position, direction = start, heading
    visited = {start}
    states = set()
    while True:
        state = (position, direction)
        if state in states:
            return visited, True
        states.add(state)
        r, c = position[0] + direction[0], position[1] + direction[1]
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            return visited, False
        if grid[r][c] == "#" or (r, c) == obstruction:
            direction = _TURN_RIGHT[direction]
        else:
            position = (r, c)
            visited.add(position)


def part1(text):
    """Distinct positions the guard visits before leaving the map."""
    grid, start, heading = _parse(text)
    visited, _ = _patrol(grid, start, heading)
    return len(visited)


def part2(text):
    """Positions where one new obstruction makes the guard loop forever."""
    grid, start, heading = _parse(text)
    route, _ = _patrol(grid, start, heading)
    return sum(
        1
        for tile in route
        if tile != start and _patrol(grid, start, heading, tile)[1]
    )