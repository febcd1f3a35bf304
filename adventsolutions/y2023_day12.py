"""Hot springs: counting arrangements of damaged springs."""


def count_arrangements(pattern, counts):
    """Ways to fill the ``?`` in ``pattern`` so damaged runs match ``counts``."""
    springs = "." + pattern.rstrip(".")
    size = len(springs)
    ways = [0] * (size + 1)
    ways[0] = 1
    for i, c in enumerate(springs):
        if c == "#":
            break
        ways[i + 1] = 1

    for count in counts:
        next_ways = [0] * (size + 1)
        run = 0
        for i, c in enumerate(springs):
            run = 0 if c == "." else run + 1
            if c != "#":
                next_ways[i + 1] += next_ways[i]
            if run >= count and springs[i - count] != "#":
                next_ways[i + 1] += ways[i - count]
        ways = next_ways
    return ways[-1]


def _records(text):
    for line in text.splitlines():
        pattern, counts = line.split(" ", 1)
        yield pattern, [int(c) for c in counts.split(",")]


def part1(text):
    return sum(count_arrangements(p, c) for p, c in _records(text))


def part2(text):
    """Same as part 1 after unfolding each record five times."""
    return sum(
        count_arrangements("?".join([pattern] * 5), counts * 5)
        for pattern, counts in _records(text)
    )