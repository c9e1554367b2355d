"""Distress signal: order nested packets of lists and integers."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Union

Packet = list
Value = Union[int, list]

DIVIDER_PACKETS: tuple[Packet, Packet] = ([[2]], [[6]])


def _validate(value: object, text: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, list)):
        raise ValueError(f"packet could not be parsed: {text!r}")
    if isinstance(value, list):
        for element in value:
            _validate(element, text)


def parse_packet(text: str) -> Packet:
    """Read a packet such as ``[1,[2,3],4]``."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"packet could not be parsed: {text!r}") from error
    if not isinstance(value, list):
        raise ValueError(f"packet is not a list: {text!r}")
    _validate(value, text)
    return value


def compare(left: Value, right: Value) -> int:
    """Negative when ``left`` comes first, positive when ``right`` does, 0 if equal."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for left_item, right_item in zip(left, right):
        outcome = compare(left_item, right_item)
        if outcome:
            return outcome
    return (len(left) > len(right)) - (len(left) < len(right))


@dataclass
class PacketPair:
    """Two packets that should be in the right order."""

    left: Packet
    right: Packet

    def in_right_order(self) -> bool:
        """Whether the left packet comes before the right one."""
        outcome = compare(self.left, self.right)
        if outcome == 0:
            raise ValueError("packets are equal")
        return outcome < 0


def parse(text: str) -> list[PacketPair]:
    """Return the packet pairs, separated by blank lines in the input."""
    pairs = []
    for block in text.strip("\n").split("\n\n"):
        lines = [line for line in block.split("\n") if line]
        if len(lines) < 2:
            raise ValueError(f"a packet pair needs two packets: {block!r}")
        pairs.append(PacketPair(parse_packet(lines[0]), parse_packet(lines[1])))
    return pairs


def part1(pairs: Sequence[PacketPair]) -> int:
    """Sum of the 1-based indices of pairs already in the right order."""
    return sum(index for index, pair in enumerate(pairs, start=1) if pair.in_right_order())


def part2(pairs: Sequence[PacketPair]) -> int:
    """Product of the 1-based positions of the divider packets once sorted."""
    packets = [packet for pair in pairs for packet in (pair.left, pair.right)]
    packets.extend(DIVIDER_PACKETS)
    ordered = sorted(packets, key=cmp_to_key(compare))
    first, second = (ordered.index(divider) + 1 for divider in DIVIDER_PACKETS)
    return first * second