"""Red-nosed reports: which level sequences are safe."""

from itertools import pairwise


def _sign(value):
    return (value > 0) - (value < 0)


def is_safe(levels):
    """Strictly monotonic, with steps between 1 and 3 inclusive."""
    levels = list(levels)
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    ordering = _sign(levels[0] - levels[1])
    return all(
        _sign(a - b) == ordering and 1 <= abs(a - b) <= 3 for a, b in pairwise(levels)
    )


def _reports(text):
    return ([int(n) for n in line.split()] for line in text.splitlines() if line.strip())


def part1(text):
    return sum(1 for levels in _reports(text) if is_safe(levels))


def _safe_with_dampener(levels):
    return is_safe(levels) or any(
        is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels))
    )


def part2(text):
    """Reports that are safe, or become safe with one level removed."""
    return sum(1 for levels in _reports(text) if _safe_with_dampener(levels))