"""Plutonian pebbles: stones that change and split each time you blink."""

from collections import Counter


def count_stones(text, blinks):
    """Number of stones after blinking ``blinks`` times."""
    stones = Counter(int(s) for s in text.split())
    for _ in range(blinks):
        changed = Counter()
        for stone, amount in stones.items():
            digits = str(stone)
            if stone == 0:
                changed[1] += amount
            elif len(digits) % 2 == 0:
                half = len(digits) // 2
                changed[int(digits[:half])] += amount
                changed[int(digits[half:])] += amount
            else:
                changed[stone * 2024] += amount
        stones = changed
    return sum(stones.values())


def part1(text):
    return count_stones(text, 25)


def part2(text):
    return count_stones(text, 75)