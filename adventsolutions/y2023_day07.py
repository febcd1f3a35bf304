"""Camel Cards: ranking poker-like hands, optionally with jokers."""

from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering

_CARD_ORDER = "23456789TJQKA"
_JOKER_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def _check_cards(cards):
    if len(cards) != 5:
        raise ValueError(f"a hand holds five cards, got {cards!r}")
    for card in cards:
        if card not in _CARD_ORDER:
            raise ValueError(f"invalid card {card!r}")


def hand_type(cards, jokers=False):
    """Classify five cards; with ``jokers`` every J is a wildcard."""
    _check_cards(cards)
    counts = Counter(cards)
    wild = counts.pop("J", 0) if jokers else 0
    values = list(counts.values())
    if wild == 5 or any(v + wild == 5 for v in values):
        return HandType.FIVE_OF_A_KIND
    if any(v + wild == 4 for v in values):
        return HandType.FOUR_OF_A_KIND
    if any(
        v + wild == 3 and any(c2 != c and v2 == 2 for c2, v2 in counts.items())
        for c, v in counts.items()
    ):
        return HandType.FULL_HOUSE
    if any(v + wild == 3 for v in values):
        return HandType.THREE_OF_A_KIND
    if sum(1 for v in values if v == 2) + wild >= 2:
        return HandType.TWO_PAIR
    if any(v + wild == 2 for v in values):
        return HandType.ONE_PAIR
    return HandType.HIGH_CARD


@total_ordering
@dataclass(frozen=True)
class Hand:
    """A hand with its bet; hands order by type, then card by card."""

    cards: str
    bet: int
    jokers: bool = False
    kind: HandType = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "kind", hand_type(self.cards, self.jokers))

    @classmethod
    def parse(cls, line, jokers=False):
        """Parse ``32T3K 765`` into a hand."""
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"not a hand line: {line!r}")
        return cls(parts[0], int(parts[1]), jokers)

    @property
    def strengths(self):
        order = _JOKER_ORDER if self.jokers else _CARD_ORDER
        return tuple(order.index(card) for card in self.cards)

    def __lt__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return (self.kind, self.strengths) < (other.kind, other.strengths)


def _winnings(text, jokers):
    hands = sorted(Hand.parse(line, jokers) for line in text.splitlines())
    return sum(rank * hand.bet for rank, hand in enumerate(hands, start=1))


def part1(text):
    return _winnings(text, jokers=False)


def part2(text):
    return _winnings(text, jokers=True)