from adventsolutions.y2024_day13 import Machine, parse_machines, part1, part2, prize_cost

MACHINES = (
    (94, 34, 22, 67, 8400, 5400),
    (26, 66, 67, 21, 12748, 12176),
    (17, 86, 84, 37, 7870, 6450),
    (69, 23, 27, 71, 18641, 10279),
)


def _describe(ax, ay, bx, by, px, py):
    return (
        f"Button A: X+{ax}, Y+{ay}\n"
        f"Button B: X+{bx}, Y+{by}\n"
        f"Prize: X={px}, Y={py}"
    )


INPUT = "\n\n".join(_describe(*machine) for machine in MACHINES)


def test_part1():
    assert part1(INPUT) == 480


def test_part2():
    assert part2(INPUT) == 875318608908


def test_parse_machines():
    machines = parse_machines(INPUT)
    assert len(machines) == 4
    assert machines[0] == Machine((94, 34), (22, 67), (8400, 5400))


def test_unreachable_prize_costs_nothing():
    assert prize_cost(Machine((2, 0), (0, 2), (3, 3))) == 0


def test_reachable_prize_cost():
    assert prize_cost(Machine((2, 0), (0, 2), (4, 6))) == 9