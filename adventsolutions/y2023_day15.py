"""Lens library: the HASH algorithm and the HASHMAP procedure."""

import re

_STEP_RE = re.compile(r"([^=-]*)([=-])(.*)")


def hash_label(label):
    """HASH value of ``label``: a number from 0 to 255."""
    value = 0
    for c in label:
        value = (value + ord(c)) * 17 % 256
    return value


def part1(text):
    return sum(hash_label(step) for step in text.strip().split(","))


def part2(text):
    """Focusing power of all lenses after running every step."""
    boxes = [{} for _ in range(256)]
    for step in text.strip().split(","):
        match = _STEP_RE.fullmatch(step)
        if match is None:
            raise ValueError(f"invalid step {step!r}")
        label, operation, value = match.groups()
        box = boxes[hash_label(label)]
        if operation == "-":
            box.pop(label, None)
        else:
            box[label] = value
    return sum(
        box_number * slot * int(focal)
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )