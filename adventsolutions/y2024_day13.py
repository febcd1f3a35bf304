"""Claw contraption: the cheapest button presses that reach each prize."""

import dataclasses
import re
from dataclasses import dataclass

_MACHINE_RE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\n"
    r"Button B: X\+(\d+), Y\+(\d+)\n"
    r"Prize: X=(\d+), Y=(\d+)"
)
_PRIZE_OFFSET = 10000000000000


@dataclass(frozen=True)
class Machine:
    a: tuple
    b: tuple
    prize: tuple


def parse_machines(text):
    """All machines described in ``text``, in order."""
    return [
        Machine((ax, ay), (bx, by), (px, py))
        for ax, ay, bx, by, px, py in (
            map(int, match.groups()) for match in _MACHINE_RE.finditer(text)
        )
    ]


def _trunc_div(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def prize_cost(machine):
    """Tokens needed to win (3 per A press, 1 per B press), or 0 if unreachable."""
    (ax, ay), (bx, by), (tx, ty) = machine.a, machine.b, machine.prize
    b = _trunc_div(ty * ax - tx * ay, by * ax - bx * ay)
    a = _trunc_div(tx - b * bx, ax)
    if (ax * a + bx * b, ay * a + by * b) != (tx, ty):
        return 0
    return a * 3 + b


def part1(text):
    return sum(prize_cost(machine) for machine in parse_machines(text))


def part2(text):
    """Like part 1 with every prize moved far out along both axes."""
    return sum(
        prize_cost(
            dataclasses.replace(
                machine,
                prize=(machine.prize[0] + _PRIZE_OFFSET, machine.prize[1] + _PRIZE_OFFSET),
            )
        )
        for machine in parse_machines(text)
    )