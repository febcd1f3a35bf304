"""Print queue: page ordering rules and the updates that follow them."""

from functools import cmp_to_key
from itertools import pairwise


def _parse(text):
    rules_block, sep, updates_block = text.partition("\n\n")
    if not sep:
        raise ValueError("missing blank line between rules and updates")
    before = {}
    for line in rules_block.splitlines():
        if not line.strip():
            continue
        first, bar, second = line.partition("|")
        if not bar:
            raise ValueError(f"invalid rule {line!r}")
        first, second = int(first), int(second)
        before.setdefault(second, set()).add(first)
        before.setdefault(first, set())
    updates = [
        [int(n) for n in line.split(",")]
        for line in updates_block.splitlines()
        if line.strip()
    ]
    return before, updates


def _in_order(update, before):
    return all(a in before[b] for a, b in pairwise(update))


def part1(text):
    """Sum of the middle pages of the updates already in order."""
    before, updates = _parse(text)
    return sum(
        update[len(update) // 2] for update in updates if _in_order(update, before)
    )


def part2(text):
    """Sum of the middle pages of the out-of-order updates once ordered."""
    before, updates = _parse(text)

    def compare(a, b):
        if a in before[b]:
            return -1
        if b in before[a]:
            return 1
        return 0

    key = cmp_to_key(compare)
    return sum(
        sorted(update, key=key)[len(update) // 2]
        for update in updates
        if not _in_order(update, before)
    )