"""Engine schematic: part numbers next to symbols and gear ratios."""

import re
import string

_NUMBER_RE = re.compile(r"\d+")


def _flatten(text):
    width = text.find("\n")
    if width < 0:
        raise ValueError("schematic must contain at least one line break")
    return width, text.replace("\n", "")


def _has_symbol(flat, start, end):
    if start < 0 or start > end or end > len(flat):
        return False
    return any(c in string.punctuation and c != "." for c in flat[start:end])


def count_parts(text):
    """Sum the numbers that touch a symbol, diagonals included."""
    width, flat = _flatten(text)
    total = 0
    for match in _NUMBER_RE.finditer(flat):
        start, end = max(match.start() - 1, 0), match.end() + 1
        if (
            _has_symbol(flat, start, end)
            or _has_symbol(flat, start - width, end - width)
            or _has_symbol(flat, start + width, end + width)
        ):
            total += int(match.group())
    return total


def count_gear_ratio(text):
    """Sum the products of the number pairs around each ``*`` with exactly two."""
    width, flat = _flatten(text)
    numbers = list(_NUMBER_RE.finditer(flat))
    total = 0
    for star in (i for i, c in enumerate(flat) if c == "*"):
        adjacent = {
            star + row + col for row in (-width, 0, width) for col in (-1, 0, 1)
        }
        values = [
            int(m.group())
            for m in numbers
            if m.start() in adjacent or m.end() - 1 in adjacent
        ]
        if len(values) == 2:
            total += values[0] * values[1]
    return total