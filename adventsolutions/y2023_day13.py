"""Point of incidence: finding mirror lines in patterns of ash and rock."""


def _columns(rows):
    return ["".join(column) for column in zip(*rows)]


def find_reflection(lines):
    """Number of lines before a perfect mirror line, or None if there is none."""
    lines = list(lines)
    for i in range(1, len(lines)):
        if all(a == b for a, b in zip(reversed(lines[:i]), lines[i:])):
            return i
    return None


def find_smudged_reflection(lines, diff=1):
    """Number of lines before a mirror line that differs in exactly ``diff`` cells."""
    lines = list(lines)
    for i in range(1, len(lines)):
        total = 0
        for a, b in zip(reversed(lines[:i]), lines[i:]):
            if total > diff:
                break
            total += sum(1 for x, y in zip(a, b) if x != y)
        if total == diff:
            return i
    return None


def _summarize(block, finder):
    rows = [line for line in block.splitlines() if line]
    found = finder(rows)
    if found is not None:
        return found * 100
    found = finder(_columns(rows))
    if found is not None:
        return found
    raise ValueError("pattern has no reflection")


def part1(text):
    return sum(_summarize(block, find_reflection) for block in text.split("\n\n"))


def part2(text):
    return sum(
        _summarize(block, lambda lines: find_smudged_reflection(lines, 1))
        for block in text.split("\n\n")
    )