"""Snowverload: cutting the wiring diagram into two groups."""

import networkx as nx


def part1(text):
    """Product of the sizes of the two groups left after the minimum cut."""
    graph = nx.Graph()
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"invalid component line {line!r}")
        for other in rest.split():
            graph.add_edge(name.strip(), other)
    _, (first, second) = nx.stoer_wagner(graph)
    return len(first) * len(second)