"""Tuning trouble: locate start markers in a datastream."""


def parse(text: str) -> str:
    """Return the datastream without its trailing newline."""
    return text.removesuffix("\n")


def find_marker(signal: str, size: int) -> int:
    """Characters processed until the first run of ``size`` distinct ones.

    Returns 0 when the signal holds no such run.
    """
    for start in range(len(signal) - size + 1):
        if len(set(signal[start:start + size])) == size:
            return start + size
    return 0


def part1(signal: str) -> int:
    """Position after the start-of-packet marker."""
    return find_marker(signal, 4)


def part2(signal: str) -> int:
    """Position after the start-of-message marker."""
    return find_marker(signal, 14)