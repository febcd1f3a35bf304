"""Trebuchet calibration values hidden in lines of text."""

_SPELLED_DIGITS = (
    ("one", "on1e"),
    ("two", "tw2o"),
    ("three", "thr3e"),
    ("four", "fo4ur"),
    ("five", "fi5ve"),
    ("six", "si6x"),
    ("seven", "sev7en"),
    ("eight", "eig8ht"),
    ("nine", "ni9ne"),
)


def calibration_value(line):
    """Combine the first and last digit of ``line`` into a two-digit number."""
    digits = [int(c) for c in line if c.isdigit()]
    if not digits:
        raise ValueError(f"no digit in line {line!r}")
    return digits[0] * 10 + digits[-1]


def calibration_value_spelled(line):
    """Like :func:`calibration_value`, but spelled-out digits count as digits too.

    Each word keeps its first and last letters so that overlapping words such
    as ``eightwo`` still yield both digits.
    """
    for word, replacement in _SPELLED_DIGITS:
        line = line.replace(word, replacement)
    return calibration_value(line)


def part1(text):
    return sum(calibration_value(line) for line in text.splitlines())


def part2(text):
    return sum(calibration_value_spelled(line) for line in text.splitlines())