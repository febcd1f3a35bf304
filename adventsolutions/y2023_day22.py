"""Sand slabs: settling falling bricks and finding which ones can go."""

import re


def parse_bricks(text):
    """Bricks as pairs of (x, y, z) end points, in input order."""
    bricks = []
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = [int(n) for n in re.split(r"[~,]", line)]
        if len(numbers) != 6:
            raise ValueError(f"invalid brick {line!r}")
        bricks.append((tuple(numbers[:3]), tuple(numbers[3:])))
    return bricks


def _intersects(first, second):
    (lo1, hi1), (lo2, hi2) = first, second
    return (
        lo1 <= lo2 <= hi1
        or lo1 <= hi2 <= hi1
        or lo2 <= lo1 <= hi2
        or lo2 <= hi1 <= hi2
    )


def settle(bricks, supported_by=None):
    """Let ``bricks`` fall in place and return how many of them moved.

    The list is sorted by lowest z and updated with the settled positions.
    If ``supported_by`` is a dict, it receives, for each resting brick index,
    the indices of the bricks right below it.
    """
    bricks.sort(key=lambda brick: brick[0][2])
    resting = {}
    fallen = set()
    for i, ((x1, y1, z1), (x2, y2, z2)) in enumerate(bricks):
        while z1 > 1:
            below = [
                j
                for j in resting.get(z1 - 1, ())
                if _intersects((x1, x2), (bricks[j][0][0], bricks[j][1][0]))
                and _intersects((y1, y2), (bricks[j][0][1], bricks[j][1][1]))
            ]
            if below:
                if supported_by is not None:
                    supported_by.setdefault(i, []).extend(below)
                break
            z1 -= 1
            z2 -= 1
            fallen.add(i)
        bricks[i] = ((x1, y1, z1), (x2, y2, z2))
        resting.setdefault(max(z1, z2), []).append(i)
    return len(fallen)


def part1(text):
    """Bricks that could be removed without any other brick falling."""
    bricks = parse_bricks(text)
    supported_by = {}
    settle(bricks, supported_by)
    sole_supports = {
        below[0] for below in supported_by.values() if len(below) == 1
    }
    return sum(1 for i in range(len(bricks)) if i not in sole_supports)


def part2(text):
    """Sum over all bricks of how many others fall when it is removed."""
    bricks = parse_bricks(text)
    settle(bricks)
    return sum(
        settle(bricks[:i] + bricks[i + 1 :]) for i in range(len(bricks))
    )