"""Rucksack reorganization: find misplaced items and group badges."""

import string
from collections.abc import Sequence
from dataclasses import dataclass

PRIORITY_LIST = string.ascii_lowercase + string.ascii_uppercase


def priority(item: str) -> int:
    """Priority of an item type: a-z are 1-26, A-Z are 27-52."""
    index = PRIORITY_LIST.find(item)
    if len(item) != 1 or index < 0:
        raise ValueError(f"item not in priority list: {item!r}")
    return index + 1


def _single_common(*groups: str) -> str:
    common = set(groups[0]).intersection(*groups[1:])
    if len(common) != 1:
        raise ValueError(f"expected exactly one common item, found {len(common)}")
    return common.pop()


@dataclass(frozen=True)
class Rucksack:
    """A rucksack's items and its two equally sized compartments."""

    items: str
    compartment1: str
    compartment2: str

    def overlap(self) -> str:
        """The one item type present in both compartments."""
        return _single_common(self.compartment1, self.compartment2)


def parse_rucksack(line: str) -> Rucksack:
    half = len(line) // 2
    return Rucksack(line, line[:half], line[half:])


def find_badge(group: Sequence[Rucksack]) -> str:
    """The one item type carried by all three elves of a group."""
    if len(group) != 3:
        raise ValueError("an elf group consists of three rucksacks")
    return _single_common(*(rucksack.items for rucksack in group))


def parse(text: str) -> list[Rucksack]:
    return [parse_rucksack(line) for line in text.removesuffix("\n").split("\n")]


def part1(rucksacks: Sequence[Rucksack]) -> int:
    """Sum of priorities of the items found in both compartments."""
    return sum(priority(rucksack.overlap()) for rucksack in rucksacks)


def part2(rucksacks: Sequence[Rucksack]) -> int:
    """Sum of priorities of each group's badge."""
    return sum(
        priority(find_badge(rucksacks[start:start + 3]))
        for start in range(0, len(rucksacks), 3)
    )