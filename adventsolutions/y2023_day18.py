"""Lavaduct lagoon: area of a dug trench loop by the shoelace formula."""

_STEPS = {"R": (1, 0), "D": (0, 1), "L": (-1, 0), "U": (0, -1)}
_HEX_DIRECTIONS = "RDLU"


def lagoon_size(moves):
    """Cubic metres held by the trench dug along ``(direction, steps)`` moves."""
    x = y = 0
    area = 0
    perimeter = 0
    for direction, steps in moves:
        try:
            dx, dy = _STEPS[direction]
        except KeyError:
            raise ValueError(f"invalid direction {direction!r}") from None
        nx, ny = x + dx * steps, y + dy * steps
        area += (y + ny) * (nx - x)
        perimeter += steps
        x, y = nx, ny
    area += y * (0 - x)
    return abs(area) // 2 + 1 + perimeter // 2


def _plain_moves(text):
    for line in text.splitlines():
        direction, steps = line.split()[:2]
        yield direction, int(steps)


def _hex_moves(text):
    for line in text.splitlines():
        code = line[line.index("#") + 1 : len(line) - 1]
        digit = code[-1]
        if digit not in "0123":
            raise ValueError(f"invalid direction digit {digit!r}")
        yield _HEX_DIRECTIONS[int(digit)], int(code[:-1], 16)


def part1(text):
    return lagoon_size(_plain_moves(text))


def part2(text):
    return lagoon_size(_hex_moves(text))