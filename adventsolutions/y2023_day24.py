"""Never tell me the odds: crossing hailstone paths and the rock that hits them all."""

import math
import re
from fractions import Fraction
from itertools import combinations

_SEPARATORS = re.compile(r"[,@]")


def parse_hailstones(text):
    """Hailstones as ((x, y, z), (dx, dy, dz)) pairs, in input order."""
    stones = []
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = [int(n) for n in _SEPARATORS.split(line)]
        if len(numbers) != 6:
            raise ValueError(f"invalid hailstone {line!r}")
        stones.append((tuple(numbers[:3]), tuple(numbers[3:])))
    return stones


def _sign(value):
    return math.copysign(1.0, value)


def part1(text, low=200000000000000, high=400000000000000):
    """Pairs whose future x/y paths cross inside the square from ``low`` to ``high``."""
    count = 0
    for ((x1, y1, _), (dx1, dy1, _)), ((x2, y2, _), (dx2, dy2, _)) in combinations(
        parse_hailstones(text), 2
    ):
        if dx1 == 0 or dx2 == 0:
            continue
        x1, y1, dx1, dy1 = float(x1), float(y1), float(dx1), float(dy1)
        x2, y2, dx2, dy2 = float(x2), float(y2), float(dx2), float(dy2)
        m1 = dy1 / dx1
        m2 = dy2 / dx2
        if m1 == m2:
            continue
        x = (m1 * x1 - m2 * x2 + y2 - y1) / (m1 - m2)
        y = (m1 * m2 * (x2 - x1) + m2 * y1 - m1 * y2) / (m2 - m1)
        if _sign(dx1) != _sign(x - x1) or _sign(dx2) != _sign(x - x2):
            continue
        if low <= x <= high and low <= y <= high:
            count += 1
    return count


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _pair_equations(first, second):
    """Three linear equations in (Px, Py, Pz, Vx, Vy, Vz) from two hailstones.

    From (P - p) x (V - v) = 0 for both stones, the quadratic term cancels:
    P x (v1 - v2) + (p1 - p2) x V = p1 x v1 - p2 x v2.
    """
    (p1, v1), (p2, v2) = first, second
    dvx, dvy, dvz = (a - b for a, b in zip(v1, v2))
    dpx, dpy, dpz = (a - b for a, b in zip(p1, p2))
    constant = tuple(a - b for a, b in zip(_cross(p1, v1), _cross(p2, v2)))
    coefficients = (
        (0, dvz, -dvy, 0, -dpz, dpy),
        (-dvz, 0, dvx, dpz, 0, -dpx),
        (dvy, -dvx, 0, -dpy, dpx, 0),
    )
    return [
        [Fraction(c) for c in row] + [Fraction(rhs)]
        for row, rhs in zip(coefficients, constant)
    ]


def _solve(matrix):
    """Solve an augmented square system exactly; None if it is singular."""
    size = len(matrix)
    matrix = [row[:] for row in matrix]
    for col in range(size):
        pivot = next((r for r in range(col, size) if matrix[r][col] != 0), None)
        if pivot is None:
            return None
        matrix[col], matrix[pivot] = matrix[pivot], matrix[col]
        lead = matrix[col][col]
        matrix[col] = [value / lead for value in matrix[col]]
        for r, row in enumerate(matrix):
            if r != col and row[col] != 0:
                factor = row[col]
                matrix[r] = [a - factor * b for a, b in zip(row, matrix[col])]
    return [row[-1] for row in matrix]


def part2(text):
    """Sum of the starting coordinates of the rock that hits every hailstone."""
    stones = parse_hailstones(text)
    for first, second, third in combinations(stones, 3):
        solution = _solve(_pair_equations(first, second) + _pair_equations(first, third))
        if solution is None:
            continue
        if all(value.denominator == 1 for value in solution):
            return int(sum(solution[:3]))
    raise ValueError("no rock trajectory hits every hailstone")