"""The floor will be lava: light beams bouncing through mirrors and splitters."""

from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


_SLASH = {
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.RIGHT: Direction.UP,
}
_BACKSLASH = {
    Direction.DOWN: Direction.RIGHT,
    Direction.UP: Direction.LEFT,
    Direction.RIGHT: Direction.DOWN,
    Direction.LEFT: Direction.UP,
}
_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)
_VERTICAL = (Direction.UP, Direction.DOWN)


def _outgoing(tile, direction):
    if tile == "|" and direction in _HORIZONTAL:
        return _VERTICAL
    if tile == "-" and direction in _VERTICAL:
        return _HORIZONTAL
    if tile == "/":
        return (_SLASH[direction],)
    if tile == "\\":
        return (_BACKSLASH[direction],)
    return (direction,)


def energized(grid, x=0, y=0, direction=Direction.RIGHT):
    """Number of tiles a beam entering (x, y) heading ``direction`` passes through."""
    seen = set()
    beams = [(x, y, direction)]
    while beams:
        bx, by, heading = beams.pop()
        if not (0 <= by < len(grid) and 0 <= bx < len(grid[by])):
            continue
        if (bx, by, heading) in seen:
            continue
        seen.add((bx, by, heading))
        for new in _outgoing(grid[by][bx], heading):
            beams.append((bx + new.dx, by + new.dy, new))
    return len({(bx, by) for bx, by, _ in seen})


def _parse(text):
    grid = [line for line in text.splitlines() if line]
    if not grid:
        raise ValueError("empty contraption")
    return grid


def part1(text):
    return energized(_parse(text), 0, 0, Direction.RIGHT)


def part2(text):
    """Most tiles energized over the starting beams along the edges."""
    grid = _parse(text)
    rows, cols = len(grid), len(grid[0])
    starts = [
        *((x, 0, Direction.DOWN) for x in range(cols - 1)),
        *((x, cols - 1, Direction.UP) for x in range(cols - 1)),
        *((0, y, Direction.RIGHT) for y in range(rows - 1)),
        *((cols - 1, y, Direction.LEFT) for y in range(rows - 1)),
    ]
    return max(energized(grid, x, y, d) for x, y, d in starts)