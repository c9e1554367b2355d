"""Hill climbing: find the fewest steps up a heightmap."""

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Optional

Grid = list[str]
Point = tuple[int, int]

_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse(text: str) -> Grid:
    """Return the heightmap rows, indexed ``grid[y][x]``."""
    return [line for line in text.removesuffix("\n").split("\n") if line]


def _elevation(mark: str) -> int:
    return ord({"S": "a", "E": "z"}.get(mark, mark))


def find(grid: Sequence[str], marker: str) -> Point:
    """Position ``(x, y)`` of the first cell holding ``marker``."""
    for y, row in enumerate(grid):
        x = row.find(marker)
        if x >= 0:
            return x, y
    raise ValueError(f"marker {marker!r} not found")


def _neighbours(grid: Sequence[str], point: Point) -> Iterator[Point]:
    x, y = point
    for dx, dy in _OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            yield nx, ny


def _distances(grid: Sequence[str], start: Point, descending: bool) -> dict[Point, int]:
    """Steps to every reachable cell; climbing at most one level per step."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        point = queue.popleft()
        height = _elevation(grid[point[1]][point[0]])
        for neighbour in _neighbours(grid, point):
            if neighbour in distances:
                continue
            other = _elevation(grid[neighbour[1]][neighbour[0]])
            climb = height - other if descending else other - height
            if climb <= 1:
                distances[neighbour] = distances[point] + 1
                queue.append(neighbour)
    return distances


def shortest_path(grid: Sequence[str], start: Point, end: Point) -> Optional[int]:
    """Fewest steps from ``start`` to ``end``, or None when unreachable."""
    return _distances(grid, start, descending=False).get(end)


def part1(grid: Sequence[str]) -> int:
    """Fewest steps from S to E."""
    steps = shortest_path(grid, find(grid, "S"), find(grid, "E"))
    if steps is None:
        raise ValueError("could not find path")
    return steps


def part2(grid: Sequence[str]) -> int:
    """Fewest steps to E from any cell at the lowest elevation."""
    distances = _distances(grid, find(grid, "E"), descending=True)
    candidates = [
        steps
        for (x, y), steps in distances.items()
        if grid[y][x] in ("a", "S")
    ]
    if not candidates:
        raise ValueError("could not find path")
    return min(candidates)