"""Oasis readings: extrapolating sequences by repeated differences."""


def _difference_rows(values):
    row = list(values)
    if not row:
        raise ValueError("cannot extrapolate an empty sequence")
    rows = [row]
    while True:
        diffs = [b - a for a, b in zip(row, row[1:])]
        if all(d == 0 for d in diffs):
            return rows
        rows.append(diffs)
        row = diffs


def extrapolate_next(values):
    """The value that would follow ``values``."""
    return sum(row[-1] for row in _difference_rows(values))


def extrapolate_previous(values):
    """The value that would precede ``values``."""
    result = 0
    for row in reversed(_difference_rows(values)):
        result = row[0] - result
    return result


def _readings(text):
    return ([int(n) for n in line.split()] for line in text.splitlines())


def part1(text):
    return sum(extrapolate_next(values) for values in _readings(text))


def part2(text):
    return sum(extrapolate_previous(values) for values in _readings(text))