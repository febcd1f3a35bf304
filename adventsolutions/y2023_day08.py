"""Desert map: following left/right instructions through a node network."""

import math
from dataclasses import dataclass, field
from itertools import cycle


@dataclass
class Network:
    directions: str
    nodes: dict = field(default_factory=dict)

    @classmethod
    def parse(cls, text):
        lines = text.splitlines()
        directions = lines[0]
        bad = set(directions) - {"L", "R"}
        if bad:
            raise ValueError(f"invalid direction {sorted(bad)[0]!r}")
        nodes = {}
        for line in lines[2:]:
            name, targets = line.split("=", 1)
            left, right = targets.split(",", 1)
            nodes[name.strip()] = (left.strip(" ("), right.strip(" )"))
        return cls(directions, nodes)

    def steps(self, start, is_end):
        """Count the moves from ``start`` until ``is_end`` holds for the node."""
        current = start
        count = 0
        for direction in cycle(self.directions):
            if is_end(current):
                return count
            left, right = self.nodes[current]
            current = left if direction == "L" else right
            count += 1
        return count


def part1(text):
    return Network.parse(text).steps("AAA", lambda node: node == "ZZZ")


def part2(text):
    network = Network.parse(text)
    counts = [
        network.steps(node, lambda n: n.endswith("Z"))
        for node in network.nodes
        if node.endswith("A")
    ]
    return math.lcm(*counts) if counts else 0