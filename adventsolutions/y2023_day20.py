"""Pulse propagation: flip-flops and conjunctions wired into a network."""

import math
from collections import Counter, deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import count


class Pulse(Enum):
    LOW = "low"
    HIGH = "high"


class ModuleKind(Enum):
    BROADCASTER = "broadcaster"
    FLIP_FLOP = "%"
    CONJUNCTION = "&"
    SINK = "sink"


@dataclass
class Module:
    """A module of the network, holding its own state."""

    name: str
    kind: ModuleKind
    outputs: list = field(default_factory=list)
    on: bool = False
    memory: dict = field(default_factory=dict)

    def receive(self, sender, pulse):
        """Handle ``pulse`` from ``sender``; return the pulse sent on, or None."""
        if self.kind is ModuleKind.BROADCASTER:
            return pulse
        if self.kind is ModuleKind.FLIP_FLOP:
            if pulse is Pulse.HIGH:
                return None
            self.on = not self.on
            return Pulse.HIGH if self.on else Pulse.LOW
        if self.kind is ModuleKind.CONJUNCTION:
            self.memory[sender] = pulse
            if all(p is Pulse.HIGH for p in self.memory.values()):
                return Pulse.LOW
            return Pulse.HIGH
        return None


def _split_line(line):
    left, sep, right = line.partition("->")
    if not sep:
        raise ValueError(f"invalid module line {line!r}")
    outputs = [name.strip() for name in right.split(",") if name.strip()]
    return left.strip(), outputs


def parse_modules(text):
    """Build the modules of the network, keyed by name."""
    lines = [_split_line(line) for line in text.splitlines() if line.strip()]
    modules = {}
    for token, outputs in lines:
        if token == "broadcaster":
            module = Module(token, ModuleKind.BROADCASTER, outputs)
        elif token.startswith("%"):
            module = Module(token[1:], ModuleKind.FLIP_FLOP, outputs)
        elif token.startswith("&"):
            module = Module(token[1:], ModuleKind.CONJUNCTION, outputs)
        else:
            module = Module(token, ModuleKind.SINK)
        modules[module.name] = module
    for token, outputs in lines:
        sender = token.lstrip("&%")
        for name in outputs:
            target = modules.get(name)
            if target is not None and target.kind is ModuleKind.CONJUNCTION:
                target.memory[sender] = Pulse.LOW
    return modules


def _press(modules):
    """Push the button once, yielding every (sender, receiver, pulse) in order."""
    if "broadcaster" not in modules:
        raise ValueError("network has no broadcaster")
    queue = deque([("button", "broadcaster", Pulse.LOW)])
    while queue:
        sender, receiver, pulse = queue.popleft()
        yield sender, receiver, pulse
        module = modules.get(receiver)
        if module is None:
            continue
        sent = module.receive(sender, pulse)
        if sent is not None:
            queue.extend((receiver, output, sent) for output in module.outputs)


def part1(text):
    """Product of the low and high pulse counts over 1000 button presses."""
    modules = parse_modules(text)
    pulses = Counter(
        pulse for _ in range(1000) for _, _, pulse in _press(modules)
    )
    return pulses[Pulse.LOW] * pulses[Pulse.HIGH]


def part2(text):
    """Fewest presses before ``rx`` gets a low pulse, from the feeders' cycle lengths."""
    line = next((line for line in text.splitlines() if "rx" in line), None)
    if line is None:
        raise ValueError("no module feeds rx")
    token = line.split()[0]
    if token[:1] not in ("&", "%"):
        raise ValueError(f"module feeding rx has no type prefix: {token!r}")
    feeder = token[1:]
    modules = parse_modules(text)
    first_seen = {}
    for presses in count(1):
        for _, receiver, pulse in _press(modules):
            module = modules.get(receiver)
            if module is None or pulse is not Pulse.LOW or module.outputs != [feeder]:
                continue
            if receiver in first_seen:
                return math.lcm(*first_seen.values())
            first_seen[receiver] = presses