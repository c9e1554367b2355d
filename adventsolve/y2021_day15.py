"""Chiton: find the path of lowest total risk through a cave."""

import heapq
from collections.abc import Sequence

Grid = list[list[int]]

_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse(text: str) -> Grid:
    """Return the risk map as rows of single-digit risk levels."""
    return [[int(char) for char in line] for line in text.removesuffix("\n").split("\n") if line]


def expand(grid: Sequence[Sequence[int]]) -> Grid:
    """Tile the map five times in each direction, raising risk per tile."""
    height = len(grid)
    width = len(grid[0])
    return [
        [
            (grid[y % height][x % width] + x // width + y // height - 1) % 9 + 1
            for x in range(width * 5)
        ]
        for y in range(height * 5)
    ]


def lowest_total_risk(grid: Sequence[Sequence[int]]) -> int:
    """Total risk of the safest path from top left to bottom right.

    The risk of the starting position is not counted.
    """
    if not grid or not grid[0]:
        raise ValueError("empty risk map")
    height, width = len(grid), len(grid[0])
    goal = (width - 1, height - 1)
    best = {(0, 0): 0}
    queue = [(0, 0, 0)]
    while queue:
        risk, x, y = heapq.heappop(queue)
        if (x, y) == goal:
            return risk
        if risk > best[(x, y)]:
            continue
        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                candidate = risk + grid[ny][nx]
                if candidate < best.get((nx, ny), candidate + 1):
                    best[(nx, ny)] = candidate
                    heapq.heappush(queue, (candidate, nx, ny))
    raise ValueError("could not find path")


def part1(grid: Sequence[Sequence[int]]) -> int:
    return lowest_total_risk(grid)


def part2(grid: Sequence[Sequence[int]]) -> int:
    return lowest_total_risk(expand(grid))