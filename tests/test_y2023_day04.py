from adventsolutions.y2023_day04 import Card, part1, part2

INPUT = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def test_part1_example():
    assert part1(INPUT) == 13


def test_part2_example():
    assert part2(INPUT) == 30


def test_parse_card():
    card = Card.parse("Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1")
    assert card.id == 3
    assert card.winning == [1, 21, 53, 59, 44]
    assert card.numbers == [69, 82, 63, 72, 16, 21, 14, 1]


def test_matching_numbers():
    card = Card.parse(INPUT.splitlines()[0])
    assert card.matching_numbers() == [83, 86, 17, 48]


def test_no_matches_scores_nothing():
    assert part1(INPUT.splitlines()[-1]) == 0