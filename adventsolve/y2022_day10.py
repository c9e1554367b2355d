"""Cathode-ray tube: run a tiny CPU and draw its CRT output."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum

SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)
CRT_WIDTH = 40


class Instruction(IntEnum):
    """A CPU instruction, valued by the number of cycles it takes."""

    NOOP = 1
    ADDX = 2


@dataclass(frozen=True)
class Command:
    """An instruction and the value it adds to the X register."""

    instruction: Instruction
    data: int = 0


def parse_command(line: str) -> Command:
    words = line.split(" ")
    if words[0] == "noop":
        return Command(Instruction.NOOP, 0)
    if words[0] == "addx" and len(words) == 2:
        try:
            return Command(Instruction.ADDX, int(words[1]))
        except ValueError:
            raise ValueError(f"command {line!r} could not be parsed") from None
    raise ValueError(f"command {line!r} could not be parsed")


def parse(text: str) -> list[Command]:
    return [parse_command(line) for line in text.removesuffix("\n").split("\n")]


def _register_during_cycles(commands: Sequence[Command]) -> Iterator[int]:
    """The X register value during each cycle, from cycle 1 on."""
    register = 1
    for command in commands:
        for _ in range(command.instruction):
            yield register
        register += command.data


def part1(commands: Sequence[Command]) -> int:
    """Sum of the signal strengths at the interesting cycles."""
    return sum(
        cycle * register
        for cycle, register in enumerate(_register_during_cycles(commands), start=1)
        if cycle in SIGNAL_CYCLES
    )


def part2(commands: Sequence[Command]) -> str:
    """The image drawn on the CRT, one line per row."""
    pixels = [
        "#" if abs(index % CRT_WIDTH - register) <= 1 else "."
        for index, register in enumerate(_register_during_cycles(commands))
    ]
    return "".join(
        "".join(pixels[start:start + CRT_WIDTH]) + "\n"
        for start in range(0, len(pixels), CRT_WIDTH)
    )