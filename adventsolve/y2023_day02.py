"""Cube conundrum: judge games of cubes drawn from a bag."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum


class Color(Enum):
    BLUE = "blue"
    GREEN = "green"
    RED = "red"


COMPARISON_BAG = {Color.BLUE: 14, Color.GREEN: 13, Color.RED: 12}


@dataclass
class Game:
    """A game and the most cubes of each colour shown at once."""

    id: int
    bag: dict[Color, int] = field(default_factory=dict)

    def possible_with(self, bag: Mapping[Color, int]) -> bool:
        """Whether a bag holding ``bag`` cubes could have produced this game."""
        return all(self.bag.get(color, 0) <= bag.get(color, 0) for color in Color)

    def power(self) -> int:
        """Product of the fewest cubes of each colour the game needs."""
        return math.prod(self.bag.get(color, 0) for color in Color)


def _parse_color(text: str) -> Color:
    try:
        return Color(text)
    except ValueError:
        raise ValueError(f"unknown colour: {text!r}") from None


def parse_game(line: str) -> Game:
    """Read a line like ``Game 1: 3 blue, 4 red; 1 red``."""
    header, _, draws = line.partition(": ")
    if not header.startswith("Game ") or not draws:
        raise ValueError(f"game could not be parsed: {line!r}")
    game = Game(int(header.removeprefix("Game ")))
    for draw in draws.split("; "):
        for entry in draw.split(", "):
            count, _, color_name = entry.partition(" ")
            color = _parse_color(color_name)
            game.bag[color] = max(game.bag.get(color, 0), int(count))
    return game


def parse(text: str) -> list[Game]:
    return [parse_game(line) for line in text.removesuffix("\n").split("\n")]


def part1(games: Sequence[Game]) -> int:
    """Sum of the IDs of games possible with the comparison bag."""
    return sum(game.id for game in games if game.possible_with(COMPARISON_BAG))


def part2(games: Sequence[Game]) -> int:
    """Sum of the powers of all games."""
    return sum(game.power() for game in games)