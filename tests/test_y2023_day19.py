import pytest

from adventsolutions.y2023_day19 import (
    Part,
    Rule,
    Workflow,
    count_accepted,
    part1,
    part2,
)

WORKFLOWS = (
    "px{a<2006:qkq,m>2090:A,rfg}", "pv{a>1716:R,A}", "lnx{m>1548:A,A}",
    "rfg{s<537:gd,x>2440:R,A}", "qs{s>3448:A,lnx}", "qkq{x<1416:A,crn}",
    "crn{x>2662:A,R}", "in{s<1351:px,qqz}", "qqz{s>2770:qs,m<1801:hdj,R}",
    "gd{a>3333:R,R}", "hdj{m>838:A,pv}",
)

PARTS = (
    (787, 2655, 1222, 2876),
    (1679, 44, 2067, 496),
    (2036, 264, 79, 2244),
    (2461, 1339, 466, 291),
    (2127, 1623, 2188, 1013),
)

INPUT = (
    "\n".join(WORKFLOWS)
    + "\n\n"
    + "\n".join(f"{{x={x},m={m},a={a},s={s}}}" for x, m, a, s in PARTS)
)


def _workflows():
    flows = [Workflow.parse(line) for line in WORKFLOWS]
    return {flow.name: flow for flow in flows}


def test_part1():
    assert part1(INPUT) == 19114


def test_part2():
    assert part2(INPUT) == 167409079868000


def test_rule_parse():
    rule = Rule.parse("a<2006:qkq")
    assert rule == Rule("a", "<", 2006, "qkq")


def test_rule_matches():
    rule = Rule.parse("m>2090:A")
    assert rule.matches(2091)
    assert not rule.matches(2090)


def test_rule_invalid_operator():
    with pytest.raises(ValueError):
        Rule.parse("a=5:A")


def test_workflow_parse():
    flow = Workflow.parse("pv{a>1716:R,A}")
    assert flow.name == "pv"
    assert flow.rules == (Rule("a", ">", 1716, "R"),)
    assert flow.fallback == "A"


def test_part_parse_and_total():
    part = Part.parse("{x=787,m=2655,a=1222,s=2876}")
    assert part == Part(787, 2655, 1222, 2876)
    assert part.total() == 7540


def test_part_missing_rating():
    with pytest.raises(ValueError):
        Part.parse("{x=1,m=2,a=3}")


def test_run_accepts_and_rejects():
    flows = _workflows()
    start = flows["in"]
    assert start.run(Part(787, 2655, 1222, 2876), flows) == "A"
    assert start.run(Part(1679, 44, 2067, 496), flows) == "R"


def test_count_accepted_everything():
    ranges = {c: range(1, 4001) for c in "xmas"}
    assert count_accepted({}, "A", ranges) == 4000**4
    assert count_accepted({}, "R", ranges) == 0