"""Solutions to the Advent of Code puzzles of 2023 and 2024, one module per day."""

__version__ = "0.1.0"