"""Rock paper scissors: score a strategy guide."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Shape(IntEnum):
    """A hand shape, valued by the score it is worth."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(IntEnum):
    """A round outcome, valued by the score it is worth."""

    LOSS = 0
    DRAW = 3
    VICTORY = 6


# For each outcome, the (opponent, mine) shape pairs that produce it.
_ROUNDS = {
    Outcome.VICTORY: (
        (Shape.ROCK, Shape.PAPER),
        (Shape.PAPER, Shape.SCISSORS),
        (Shape.SCISSORS, Shape.ROCK),
    ),
    Outcome.DRAW: (
        (Shape.ROCK, Shape.ROCK),
        (Shape.PAPER, Shape.PAPER),
        (Shape.SCISSORS, Shape.SCISSORS),
    ),
    Outcome.LOSS: (
        (Shape.ROCK, Shape.SCISSORS),
        (Shape.PAPER, Shape.ROCK),
        (Shape.SCISSORS, Shape.PAPER),
    ),
}

_SHAPE_CODES = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

_OUTCOME_CODES = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.VICTORY}


def parse_shape(text: str) -> Shape:
    """Decode A/B/C or X/Y/Z into a shape."""
    try:
        return _SHAPE_CODES[text]
    except KeyError:
        raise ValueError(f"could not parse shape: {text!r}") from None


def parse_outcome(text: str) -> Outcome:
    """Decode X/Y/Z into a required outcome."""
    try:
        return _OUTCOME_CODES[text]
    except KeyError:
        raise ValueError(f"could not parse outcome: {text!r}") from None


@dataclass
class Round:
    """One round; either my shape or the outcome may be unknown."""

    opponent: Shape
    mine: Optional[Shape] = None
    outcome: Optional[Outcome] = None

    def resolve(self) -> "Round":
        """Fill in whichever of my shape and the outcome is missing."""
        if self.mine is None and self.outcome is None:
            raise ValueError("both my shape and outcome are missing")
        if self.mine is None:
            for opponent, mine in _ROUNDS[self.outcome]:
                if opponent == self.opponent:
                    self.mine = mine
                    break
        elif self.outcome is None:
            self.outcome = next(
                outcome
                for outcome, rounds in _ROUNDS.items()
                if (self.opponent, self.mine) in rounds
            )
        return self

    def score(self) -> int:
        """Score for my shape plus the score for the outcome."""
        self.resolve()
        return int(self.mine) + int(self.outcome)


def parse(text: str) -> list[str]:
    """Return the strategy guide lines."""
    return text.removesuffix("\n").split("\n")


def part1(lines: Sequence[str]) -> int:
    """Total score when the second column is my shape."""
    total = 0
    for line in lines:
        opponent, mine = line.split(" ")
        total += Round(parse_shape(opponent), mine=parse_shape(mine)).score()
    return total


def part2(lines: Sequence[str]) -> int:
    """Total score when the second column is the required outcome."""
    total = 0
    for line in lines:
        opponent, outcome = line.split(" ")
        total += Round(parse_shape(opponent), outcome=parse_outcome(outcome)).score()
    return total