"""Maze generator based on randomized Prim's frontier carving."""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Tuple, TypeVar

from ..base import AbstractMazeGenerator
from ..grid import Point, neighbours_of
from .model import OPEN, Maze

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


def remove_random(items: MutableSequence[ItemT], rng: random.Random) -> Optional[ItemT]:
    """Remove and return a uniformly chosen element, or ``None`` if empty.

    The chosen slot is overwritten by the last element, so order is not kept.
    """

    if not items:
        return None
    index = rng.randrange(len(items))
    items[index], items[-1] = items[-1], items[index]
    return items.pop()


def _walled_neighbours(maze: Maze, point: Point) -> List[Point]:
    return [p for p in neighbours_of(point) if maze.in_bounds(p) and maze[p]]


def _carve(maze: Maze, rng: random.Random) -> Point:
    rows, cols = maze.shape

    # Pick the single boundary exit first.
    x = rng.randrange(rows)
    y = rng.randrange(cols)
    if rng.getrandbits(1):
        y = 0
    else:
        x = 0
    entrance = (x, y)
    maze[entrance] = OPEN

    frontier = _walled_neighbours(maze, entrance)
    carved = 1
    while True:
        current = remove_random(frontier, rng)
        if current is None:
            break
        if not maze[current]:
            # Duplicate of a cell carved through another neighbour.
            continue
        explored = sum(1 for p in neighbours_of(current) if maze.in_bounds(p) and not maze[p])
        if explored < 2:
            maze[current] = OPEN
            carved += 1
            frontier.extend(_walled_neighbours(maze, current))

    logger.debug("Carved %d of %d cells in %dx%d maze from %s", carved, rows * cols, rows, cols, entrance)
    return entrance


def generate(rows: int, cols: int, rng: Optional[random.Random] = None) -> Maze:
    """Generate a ``rows`` x ``cols`` maze with a single carved boundary exit.

    The open cells form one connected, loop-free region. Frontier entries
    that were already carved through another neighbour are dropped when
    popped. Without ``rng`` a fresh OS-seeded :class:`random.Random` is used,
    so results differ per call.
    """

    maze = Maze.walled(rows, cols)
    _carve(maze, rng if rng is not None else random.Random())
    return maze


@dataclass
class MazeRecord:
    id: str
    maze: Maze
    entrance: Point

    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.maze.shape

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "grid_size": list(self.grid_size),
            "entrance": list(self.entrance),
            "maze_grid": self.maze.to_rows(),
        }


class MazeGenerator(AbstractMazeGenerator[MazeRecord]):
    """Generate perfect mazes carved outward from a random boundary exit."""

    def __init__(
        self,
        rows: int = 15,
        cols: int = 15,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(seed=seed, rng=rng)
        if rows < 1 or cols < 1:
            raise ValueError("rows and cols must be at least 1")
        self.rows = rows
        self.cols = cols

    def create_maze(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        *,
        maze_id: Optional[str] = None,
    ) -> MazeRecord:
        maze = Maze.walled(
            self.rows if rows is None else rows,
            self.cols if cols is None else cols,
        )
        entrance = _carve(maze, self._rng)
        return MazeRecord(id=maze_id or str(uuid.uuid4()), maze=maze, entrance=entrance)

    def create_random_maze(self) -> MazeRecord:
        return self.create_maze()


__all__ = ["MazeGenerator", "MazeRecord", "generate", "remove_random"]
