"""Sonar sweep: count how often sea-floor depth measurements increase."""

from collections.abc import Sequence


def parse(text: str) -> list[int]:
    """Return the depth measurements, one per input line."""
    return [int(line) for line in text.removesuffix("\n").split("\n")]


def _count_increases(values: Sequence[int]) -> int:
    return sum(1 for previous, current in zip(values, values[1:]) if previous < current)


def part1(depths: Sequence[int]) -> int:
    """Count measurements that are larger than the one before."""
    return _count_increases(depths)


def part2(depths: Sequence[int]) -> int:
    """Count increases between sums of three-measurement sliding windows."""
    window_sums = [sum(window) for window in zip(depths, depths[1:], depths[2:])]
    return _count_increases(window_sums)