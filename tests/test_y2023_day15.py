import pytest

from adventsolutions.y2023_day15 import hash_label, part1, part2

INPUT = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"


def test_part1():
    assert part1(INPUT) == 1320


def test_part2():
    assert part2(INPUT) == 145


@pytest.mark.parametrize(
    "label, expected", [("HASH", 52), ("rn", 0), ("cm", 0), ("qp", 1)]
)
def test_hash_label(label, expected):
    assert hash_label(label) == expected


def test_part1_ignores_trailing_newline():
    assert part1(INPUT + "\n") == 1320


def test_invalid_step_raises():
    with pytest.raises(ValueError):
        part2("abc")