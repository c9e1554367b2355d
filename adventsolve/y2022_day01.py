"""Calorie counting: find the elves carrying the most calories."""

from collections.abc import Sequence


def parse(text: str) -> list[int]:
    """Return each elf's total calories, largest first."""
    totals = [0]
    for line in text.removesuffix("\n").split("\n"):
        if line == "":
            totals.append(0)
            continue
        totals[-1] += int(line)
    return sorted(totals, reverse=True)


def part1(calories: Sequence[int]) -> int:
    """Calories carried by the most heavily loaded elf."""
    return calories[0]


def part2(calories: Sequence[int]) -> int:
    """Calories carried by the three most heavily loaded elves."""
    return sum(calories[:3])