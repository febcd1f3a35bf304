"""Aplenty: sorting machine parts through workflows of rules."""

import math
from dataclasses import dataclass

CATEGORIES = "xmas"
ACCEPTED = "A"
REJECTED = "R"
_RATING_RANGE = range(1, 4001)


@dataclass(frozen=True)
class Rule:
    """A conditional jump: if the part's ``category`` compares with ``value``, go to ``target``."""

    category: str
    op: str
    value: int
    target: str

    @classmethod
    def parse(cls, text):
        """Parse ``a<2006:qkq`` into a rule."""
        condition, sep, target = text.partition(":")
        if not sep or len(condition) < 3 or not target:
            raise ValueError(f"invalid rule {text!r}")
        category, op = condition[0], condition[1]
        if category not in CATEGORIES:
            raise ValueError(f"invalid category {category!r}")
        if op not in "<>":
            raise ValueError(f"invalid operator {op!r}")
        return cls(category, op, int(condition[2:]), target)

    def matches(self, value):
        return value < self.value if self.op == "<" else value > self.value

    def _split(self, values):
        """Split a contiguous range into the part that matches and the rest."""
        if self.op == "<":
            inside = range(values.start, min(values.stop, self.value))
            outside = range(max(values.start, self.value), values.stop)
        else:
            inside = range(max(values.start, self.value + 1), values.stop)
            outside = range(values.start, min(values.stop, self.value + 1))
        return inside, outside


@dataclass(frozen=True)
class Workflow:
    """A named list of rules with a target taken when no rule matches."""

    name: str
    rules: tuple
    fallback: str

    @classmethod
    def parse(cls, text):
        """Parse ``px{a<2006:qkq,m>2090:A,rfg}`` into a workflow."""
        name, sep, body = text.strip().partition("{")
        if not sep or not body.endswith("}"):
            raise ValueError(f"invalid workflow {text!r}")
        *rules, fallback = body[:-1].split(",")
        return cls(name, tuple(Rule.parse(rule) for rule in rules), fallback)

    def run(self, part, workflows):
        """Follow ``part`` through the workflows until it is accepted or rejected."""
        workflow = self
        while True:
            target = next(
                (
                    rule.target
                    for rule in workflow.rules
                    if rule.matches(getattr(part, rule.category))
                ),
                workflow.fallback,
            )
            if target in (ACCEPTED, REJECTED):
                return target
            try:
                workflow = workflows[target]
            except KeyError:
                raise ValueError(f"unknown workflow {target!r}") from None


@dataclass(frozen=True)
class Part:
    x: int
    m: int
    a: int
    s: int

    @classmethod
    def parse(cls, text):
        """Parse ``{x=787,m=2655,a=1222,s=2876}`` into a part."""
        ratings = {}
        for item in text.strip().strip("{}").split(","):
            key, sep, value = item.partition("=")
            if not sep or key not in CATEGORIES:
                raise ValueError(f"invalid rating {item!r}")
            ratings[key] = int(value)
        missing = set(CATEGORIES) - ratings.keys()
        if missing:
            raise ValueError(f"missing ratings {sorted(missing)}")
        return cls(**ratings)

    def total(self):
        return self.x + self.m + self.a + self.s


def _parse_workflows(block):
    workflows = (Workflow.parse(line) for line in block.splitlines() if line.strip())
    return {workflow.name: workflow for workflow in workflows}


def count_accepted(workflows, target, ranges):
    """Number of rating combinations within ``ranges`` that ``target`` accepts.

    ``ranges`` maps each category letter to a contiguous ``range`` of ratings.
    """
    if target == REJECTED:
        return 0
    if target == ACCEPTED:
        return math.prod(len(values) for values in ranges.values())
    try:
        workflow = workflows[target]
    except KeyError:
        raise ValueError(f"unknown workflow {target!r}") from None
    remaining = dict(ranges)
    total = 0
    for rule in workflow.rules:
        inside, outside = rule._split(remaining[rule.category])
        total += count_accepted(
            workflows, rule.target, {**remaining, rule.category: inside}
        )
        remaining[rule.category] = outside
    return total + count_accepted(workflows, workflow.fallback, remaining)


def part1(text):
    """Sum of the ratings of every accepted part."""
    workflow_block, sep, part_block = text.partition("\n\n")
    if not sep:
        raise ValueError("missing blank line between workflows and parts")
    workflows = _parse_workflows(workflow_block)
    start = workflows.get("in")
    if start is None:
        raise ValueError("no workflow named 'in'")
    parts = (Part.parse(line) for line in part_block.splitlines() if line.strip())
    return sum(
        part.total() for part in parts if start.run(part, workflows) == ACCEPTED
    )


def part2(text):
    """Number of rating combinations from 1 to 4000 that end up accepted."""
    workflows = _parse_workflows(text.partition("\n\n")[0])
    return count_accepted(
        workflows, "in", {category: _RATING_RANGE for category in CATEGORIES}
    )