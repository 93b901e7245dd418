"""Breadth-first shortest escape path from an open cell to the maze boundary."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

import numpy as np

from ..grid import Grid, Path, Point, neighbours_of
from .model import Maze

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of a successful search: the exit found and the cost field.

    ``costs`` holds the BFS distance from ``start`` plus one for every cell
    the search reached; zero means the cell was never visited.
    """

    start: Point
    exit: Point
    costs: Grid[int]

    @property
    def distance(self) -> int:
        """Number of cells on the shortest path, both ends included."""

        return self.costs[self.exit]

    def path(self) -> Path:
        """Walk the cost field downhill from the exit back to the start."""

        costs = self.costs
        current = self.exit
        path = [current]
        while current != self.start:
            for nxt in neighbours_of(current):
                if not costs.in_bounds(nxt):
                    continue
                cost = costs[nxt]
                if cost != 0 and cost < costs[current]:
                    current = nxt
                    path.append(current)
                    break
            else:
                raise RuntimeError(f"Cost field has no downhill step from {current}")
        path.reverse()
        return path


def search(maze: Maze, start: Point) -> Optional[SearchResult]:
    """Run BFS from ``start`` and stop at the first open boundary cell.

    Returns ``None`` when ``start`` is a wall or no exit is reachable.
    """

    start = (int(start[0]), int(start[1]))
    if maze[start]:
        return None

    costs: Grid[int] = Grid(maze.rows, maze.cols, dtype=np.int64)
    costs[start] = 1
    if maze.is_exit(start):
        return SearchResult(start=start, exit=start, costs=costs)

    queue: Deque[Point] = deque([start])
    while queue:
        current = queue.popleft()
        cost = costs[current]
        for nxt in neighbours_of(current):
            if not maze.in_bounds(nxt) or maze[nxt] or costs[nxt] != 0:
                continue
            costs[nxt] = cost + 1
            if maze.is_exit(nxt):
                logger.debug("Exit %s found from %s at distance %d", nxt, start, cost + 1)
                return SearchResult(start=start, exit=nxt, costs=costs)
            queue.append(nxt)

    logger.debug("No exit reachable from %s", start)
    return None


def solve(maze: Maze, start: Point) -> Optional[Path]:
    """Return the shortest path from ``start`` to the nearest exit, if any.

    The path runs from ``start`` to the exit with both ends included. Ties
    between equally short routes are broken by neighbour order (north, east,
    south, west) while walking back from the exit, so results are repeatable.
    """

    result = search(maze, start)
    if result is None:
        return None
    return result.path()


__all__ = ["SearchResult", "search", "solve"]
