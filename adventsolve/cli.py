"""Command line entry point that solves a puzzle for a given input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import Optional, Union

from adventsolve import (
    y2021_day01,
    y2021_day14,
    y2021_day15,
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day05,
    y2022_day06,
    y2022_day07,
    y2022_day08,
    y2022_day09,
    y2022_day10,
    y2022_day11,
    y2022_day12,
    y2022_day13,
    y2023_day01,
    y2023_day02,
)

Answer = Union[int, str]
Solver = Callable[[str], Answer]


def _parsed(module: ModuleType) -> tuple[Solver, Solver]:
    def runner(part: Callable[..., Answer]) -> Solver:
        def solve_text(text: str) -> Answer:
            prepared = module.parse(text)
            if isinstance(prepared, tuple):
                return part(*prepared)
            return part(prepared)

        return solve_text

    return runner(module.part1), runner(module.part2)


_SOLVERS: dict[tuple[int, int], tuple[Solver, Solver]] = {
    (2021, 1): _parsed(y2021_day01),
    (2021, 14): (y2021_day14.part1, y2021_day14.part2),
    (2021, 15): _parsed(y2021_day15),
    (2022, 1): _parsed(y2022_day01),
    (2022, 2): _parsed(y2022_day02),
    (2022, 3): _parsed(y2022_day03),
    (2022, 4): _parsed(y2022_day04),
    (2022, 5): _parsed(y2022_day05),
    (2022, 6): _parsed(y2022_day06),
    (2022, 7): _parsed(y2022_day07),
    (2022, 8): _parsed(y2022_day08),
    (2022, 9): _parsed(y2022_day09),
    (2022, 10): _parsed(y2022_day10),
    (2022, 11): _parsed(y2022_day11),
    (2022, 12): _parsed(y2022_day12),
    (2022, 13): _parsed(y2022_day13),
    (2023, 1): _parsed(y2023_day01),
    (2023, 2): _parsed(y2023_day02),
}


def solve(year: int, day: int, part: int, text: str) -> Answer:
    """Answer one part of a puzzle for the given input text."""
    try:
        solvers = _SOLVERS[(year, day)]
    except KeyError:
        raise ValueError(f"no solution for {year} day {day:02d}") from None
    if part not in (1, 2):
        raise ValueError("part does not exist")
    return solvers[part - 1](text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adventsolve", description="Solve a puzzle.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="-", help="input file, - for stdin")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
        answer = solve(args.year, args.day, args.part, text)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    output = str(answer)
    print(output, end="" if output.endswith("\n") else "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())