"""Camp cleanup: compare the section ranges of elf pairs."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    """An inclusive range of section IDs."""

    start: int
    end: int

    def fully_contains(self, other: "Section") -> bool:
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: "Section") -> bool:
        return (self.start <= other.start <= self.end) or (other.start <= self.start <= other.end)


@dataclass(frozen=True)
class Pair:
    """The assignments of two elves."""

    first: Section
    second: Section

    def double_assignment(self) -> bool:
        """Whether one assignment fully contains the other."""
        return self.first.fully_contains(self.second) or self.second.fully_contains(self.first)

    def overlap_assignment(self) -> bool:
        """Whether the assignments share at least one section."""
        return self.first.overlaps(self.second)


def parse_section(text: str) -> Section:
    start, end = text.split("-")
    return Section(int(start), int(end))


def parse_pair(line: str) -> Pair:
    first, second = line.split(",")
    return Pair(parse_section(first), parse_section(second))


def parse(text: str) -> list[Pair]:
    return [parse_pair(line) for line in text.removesuffix("\n").split("\n")]


def part1(pairs: Sequence[Pair]) -> int:
    """Number of pairs where one range fully contains the other."""
    return sum(1 for pair in pairs if pair.double_assignment())


def part2(pairs: Sequence[Pair]) -> int:
    """Number of pairs whose ranges overlap."""
    return sum(1 for pair in pairs if pair.overlap_assignment())