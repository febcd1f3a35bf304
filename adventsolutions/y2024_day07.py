"""Bridge repair: which equations can be made true with the given operators."""

import operator


def _concat(a, b):
    return int(f"{a}{b}")


def _reachable(values, operators):
    results = {values[0]}
    for value in values[1:]:
        results = {op(acc, value) for acc in results for op in operators}
    return results


def _calibration(text, operators):
    total = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = [int(n.rstrip(":")) for n in line.split()]
        target, values = numbers[0], numbers[1:]
        if len(values) < 2:
            raise ValueError(f"equation needs at least two values: {line!r}")
        if target in _reachable(values, operators):
            total += target
    return total


def part1(text):
    """Sum of the test values reachable with ``+`` and ``*``."""
    return _calibration(text, (operator.add, operator.mul))


def part2(text):
    """Sum of the test values reachable with ``+``, ``*`` and concatenation."""
    return _calibration(text, (operator.add, operator.mul, _concat))