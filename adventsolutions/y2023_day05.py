"""Almanac of seed-to-location mappings."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MapRange:
    dest: int
    src: int
    length: int

    @classmethod
    def parse(cls, line):
        dest, src, length = (int(n) for n in line.split()[:3])
        return cls(dest, src, length)

    def __contains__(self, value):
        return self.src <= value < self.src + self.length


@dataclass
class Mapping:
    ranges: list = field(default_factory=list)

    @classmethod
    def parse(cls, block):
        """Parse a block whose first line is its title."""
        return cls([MapRange.parse(line) for line in block.splitlines()[1:]])

    def convert(self, value):
        """Map ``value`` through the first range that holds it, else unchanged."""
        for r in self.ranges:
            if value in r:
                return value - r.src + r.dest
        return value

    def _convert_intervals(self, intervals):
        pending = list(intervals)
        done = []
        for r in self.ranges:
            r_start, r_end = r.src, r.src + r.length
            remaining = []
            for start, end in pending:
                lo, hi = max(start, r_start), min(end, r_end)
                if lo >= hi:
                    remaining.append((start, end))
                    continue
                done.append((lo - r.src + r.dest, hi - r.src + r.dest))
                if start < lo:
                    remaining.append((start, lo))
                if hi < end:
                    remaining.append((hi, end))
            pending = remaining
        return done + pending


def parse_almanac(text):
    """Return the seed numbers and the list of mappings, in order."""
    seeds_block, *blocks = text.split("\n\n")
    seeds = [int(n) for n in seeds_block.split()[1:]]
    return seeds, [Mapping.parse(block) for block in blocks]


def map_all_seeds(maps, seeds):
    """Run every seed through all mappings and return the final values."""
    result = []
    for seed in seeds:
        for mapping in maps:
            seed = mapping.convert(seed)
        result.append(seed)
    return result


def part1(text):
    seeds, maps = parse_almanac(text)
    return min(map_all_seeds(maps, seeds))


def part2(text):
    """Lowest location when the seed line lists (start, length) pairs."""
    seeds, maps = parse_almanac(text)
    intervals = [
        (start, start + length)
        for start, length in zip(seeds[::2], seeds[1::2])
        if length > 0
    ]
    for mapping in maps:
        intervals = mapping._convert_intervals(intervals)
    return min(start for start, _ in intervals)