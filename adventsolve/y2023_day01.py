"""Trebuchet: recover calibration values from lines of text."""

from collections.abc import Sequence

DIGITS = "123456789"

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

# The digit is wrapped in its own word so that overlapping words
# such as "eightwo" still yield both digits after replacement.
_REPLACEMENTS = {
    word: f"{word}{value}{word}" for value, word in enumerate(_WORDS, start=1)
}


def replace_words(line: str) -> str:
    """Insert the digit into every spelled-out number word."""
    for word, replacement in _REPLACEMENTS.items():
        line = line.replace(word, replacement)
    return line


def calibration_value(line: str) -> int:
    """Two-digit number from the first and last digit of the line."""
    found = [char for char in line if char in DIGITS]
    if not found:
        raise ValueError(f"line holds no digit: {line!r}")
    return int(found[0] + found[-1])


def parse(text: str) -> list[str]:
    """Split puzzle input into its lines."""
    return text.removesuffix("\n").split("\n")


def part1(lines: Sequence[str]) -> int:
    """Sum of the calibration values using digits only."""
    return sum(map(calibration_value, lines))


def part2(lines: Sequence[str]) -> int:
    """Sum of the calibration values counting spelled-out digits too."""
    return sum(calibration_value(replace_words(line)) for line in lines)