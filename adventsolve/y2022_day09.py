"""Rope bridge: follow the knots of a rope as its head moves."""

from collections.abc import Iterable, Sequence

Vector = tuple[int, int]

_DIRECTIONS: dict[str, Vector] = {
    "U": (0, 1),
    "D": (0, -1),
    "L": (-1, 0),
    "R": (1, 0),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Rope:
    """A rope of knots that records every position its tail visits."""

    def __init__(self, length: int = 2) -> None:
        if length < 1:
            raise ValueError("a rope needs at least one knot")
        self.knots: list[Vector] = [(0, 0)] * length
        self.visited: set[Vector] = {(0, 0)}

    @property
    def tail(self) -> Vector:
        return self.knots[-1]

    def move(self, step: Vector) -> None:
        """Move the head by ``step`` one unit at a time, dragging the rest."""
        dx, dy = step
        unit = (_sign(dx), _sign(dy))
        for _ in range(max(abs(dx), abs(dy))):
            head_x, head_y = self.knots[0]
            self.knots[0] = (head_x + unit[0], head_y + unit[1])
            for index in range(1, len(self.knots)):
                self.knots[index] = _follow(self.knots[index - 1], self.knots[index])
            self.visited.add(self.tail)

    def __repr__(self) -> str:
        return f"Rope({self.knots!r})"


def _follow(leader: Vector, knot: Vector) -> Vector:
    dx = leader[0] - knot[0]
    dy = leader[1] - knot[1]
    if max(abs(dx), abs(dy)) < 2:
        return knot
    return knot[0] + _sign(dx), knot[1] + _sign(dy)


def parse_step(line: str) -> Vector:
    """Read a motion like ``R 4`` as a displacement vector."""
    direction, _, distance = line.partition(" ")
    try:
        dx, dy = _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown direction in {line!r}") from None
    amount = int(distance)
    return dx * amount, dy * amount


def parse(text: str) -> list[Vector]:
    return [parse_step(line) for line in text.removesuffix("\n").split("\n")]


def _tail_positions(steps: Iterable[Vector], length: int) -> int:
    rope = Rope(length)
    for step in steps:
        rope.move(step)
    return len(rope.visited)


def part1(steps: Sequence[Vector]) -> int:
    """Positions visited by the tail of a two-knot rope."""
    return _tail_positions(steps, 2)


def part2(steps: Sequence[Vector]) -> int:
    """Positions visited by the tail of a ten-knot rope."""
    return _tail_positions(steps, 10)