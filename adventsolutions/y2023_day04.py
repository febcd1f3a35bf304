"""Scratchcards: points from matches and cascading card copies."""

from dataclasses import dataclass, field


@dataclass
class Card:
    id: int
    winning: list = field(default_factory=list)
    numbers: list = field(default_factory=list)

    @classmethod
    def parse(cls, line):
        """Parse ``Card 1: 41 48 | 83 86 6`` into a card."""
        header, rest = line.split(":", 1)
        winning, numbers = rest.split("|", 1)
        return cls(
            id=int(header.split()[1]),
            winning=[int(n) for n in winning.split()],
            numbers=[int(n) for n in numbers.split()],
        )

    def matching_numbers(self):
        """The card's own numbers that are also winning numbers, in order."""
        return [n for n in self.numbers if n in self.winning]


def part1(text):
    counts = (len(Card.parse(line).matching_numbers()) for line in text.splitlines())
    return sum(2 ** (n - 1) for n in counts if n)


def part2(text):
    cards = [Card.parse(line) for line in text.splitlines()]
    copies = [1] * len(cards)
    for card in cards:
        held = copies[card.id - 1]
        for offset in range(len(card.matching_numbers())):
            copies[card.id + offset] += held
    return sum(copies)