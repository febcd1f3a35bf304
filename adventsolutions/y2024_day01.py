"""Historian hysteria: comparing two lists of location ids."""

from collections import Counter


def _columns(text):
    pairs = []
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = line.split()
        if len(numbers) < 2:
            raise ValueError(f"expected two numbers in {line!r}")
        pairs.append((int(numbers[0]), int(numbers[1])))
    left = [a for a, _ in pairs]
    right = [b for _, b in pairs]
    return left, right


def part1(text):
    """Total distance between the two lists, paired smallest to smallest."""
    left, right = _columns(text)
    return sum(abs(b - a) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Similarity score: each left number times its count in the right list."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)