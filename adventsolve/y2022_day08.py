"""Treetop tree house: survey tree visibility and scenic scores."""

from collections.abc import Iterable, Sequence

Forest = list[list[int]]


def parse(text: str) -> Forest:
    """Return tree heights as rows, indexed ``forest[y][x]``."""
    return [[int(char) for char in line] for line in text.removesuffix("\n").split("\n")]


def _lines_of_sight(forest: Sequence[Sequence[int]], x: int, y: int) -> list[list[int]]:
    """Heights seen looking north, south, west and east, nearest first."""
    row = forest[y]
    column = [line[x] for line in forest]
    return [
        column[:y][::-1],
        column[y + 1:],
        list(row[:x][::-1]),
        list(row[x + 1:]),
    ]


def visibility(forest: Sequence[Sequence[int]]) -> list[list[bool]]:
    """Whether each tree can be seen from outside the grid."""
    return [
        [
            any(
                all(other < height for other in sight)
                for sight in _lines_of_sight(forest, x, y)
            )
            for x, height in enumerate(row)
        ]
        for y, row in enumerate(forest)
    ]


def _viewing_distance(height: int, sight: Iterable[int]) -> int:
    distance = 0
    for other in sight:
        distance += 1
        if other >= height:
            break
    return distance


def scenic_score(forest: Sequence[Sequence[int]], x: int, y: int) -> int:
    """Product of the viewing distances in the four directions."""
    height = forest[y][x]
    score = 1
    for sight in _lines_of_sight(forest, x, y):
        score *= _viewing_distance(height, sight)
    return score


def part1(forest: Sequence[Sequence[int]]) -> int:
    """Number of trees visible from outside the grid."""
    return sum(visible for row in visibility(forest) for visible in row)


def part2(forest: Sequence[Sequence[int]]) -> int:
    """Highest scenic score of any tree."""
    return max(
        scenic_score(forest, x, y)
        for y, row in enumerate(forest)
        for x in range(len(row))
    )