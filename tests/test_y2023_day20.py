import pytest

from adventsolutions.y2023_day20 import (
    Module,
    ModuleKind,
    Pulse,
    parse_modules,
    part1,
    part2,
)

INPUT = """broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a"""

INPUT2 = """broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output"""

CYCLES = """broadcaster -> a, c
%a -> b
%b -> x
&x -> hub
%c -> inv1
&inv1 -> inv2
&inv2 -> y
&y -> hub
&hub -> rx"""


def test_part1():
    assert part1(INPUT) == 8000 * 4000


def test_part1_2():
    assert part1(INPUT2) == 4250 * 2750


def test_part2_cycles():
    assert part2(CYCLES) == 4


def test_part2_without_rx():
    with pytest.raises(ValueError):
        part2(INPUT)


def test_parse_conjunction_inputs():
    modules = parse_modules(INPUT2)
    assert modules["con"].memory == {"a": Pulse.LOW, "b": Pulse.LOW}
    assert modules["inv"].memory == {"a": Pulse.LOW}
    assert modules["a"].outputs == ["inv", "con"]


def test_flip_flop_ignores_high_and_toggles_on_low():
    module = Module("a", ModuleKind.FLIP_FLOP, ["b"])
    assert module.receive("x", Pulse.HIGH) is None
    assert module.receive("x", Pulse.LOW) is Pulse.HIGH
    assert module.receive("x", Pulse.LOW) is Pulse.LOW


def test_conjunction_sends_low_when_all_high():
    module = Module("c", ModuleKind.CONJUNCTION, ["d"], memory={"a": Pulse.LOW, "b": Pulse.LOW})
    assert module.receive("a", Pulse.HIGH) is Pulse.HIGH
    assert module.receive("b", Pulse.HIGH) is Pulse.LOW


def test_missing_broadcaster():
    with pytest.raises(ValueError):
        part1("%a -> b")