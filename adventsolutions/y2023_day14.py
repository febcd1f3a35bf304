"""Parabolic reflector dish: tilting rounded rocks and measuring the load."""


def _tilt_column(column):
    return "#".join("".join(sorted(segment, reverse=True)) for segment in column.split("#"))


def _tilt_north(rows):
    columns = (_tilt_column("".join(column)) for column in zip(*rows))
    return tuple("".join(row) for row in zip(*columns))


def _rotate_clockwise(rows):
    return tuple("".join(row) for row in zip(*reversed(rows)))


def _spin(rows):
    for _ in range(4):
        rows = _rotate_clockwise(_tilt_north(rows))
    return rows


def _load(rows):
    height = len(rows)
    return sum(height - i for i, row in enumerate(rows) for c in row if c == "O")


def _parse(text):
    rows = tuple(line for line in text.splitlines() if line)
    if not rows:
        raise ValueError("empty platform")
    return rows


def part1(text):
    """Load on the north beams after tilting the platform north."""
    return _load(_tilt_north(_parse(text)))


def part2(text, cycles=1_000_000_000):
    """Load on the north beams after ``cycles`` spin cycles."""
    rows = _parse(text)
    seen = {}
    count = 0
    while count < cycles:
        rows = _spin(rows)
        count += 1
        if rows in seen:
            cycle_len = count - seen[rows]
            for _ in range((cycles - count) % cycle_len):
                rows = _spin(rows)
            break
        seen[rows] = count
    return _load(rows)