"""Maze path evaluator for checking candidate escape routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..base import AbstractPathEvaluator
from ..grid import Point, neighbours_of
from .model import Maze
from .solver import search


@dataclass
class PathEvaluationResult:
    in_bounds: bool
    stray_in_walls: bool
    connected: bool
    starts_at_start: bool
    reaches_exit: bool
    shortest: bool
    length: int
    message: str
    wall_cells: List[Point] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return (
            self.in_bounds
            and not self.stray_in_walls
            and self.connected
            and self.starts_at_start
            and self.reaches_exit
        )

    def to_dict(self) -> dict:
        return {
            "in_bounds": self.in_bounds,
            "stray_in_walls": self.stray_in_walls,
            "connected": self.connected,
            "starts_at_start": self.starts_at_start,
            "reaches_exit": self.reaches_exit,
            "shortest": self.shortest,
            "length": self.length,
            "is_valid": self.is_valid,
            "message": self.message,
            "wall_cells": [list(cell) for cell in self.wall_cells],
        }


class PathEvaluator(AbstractPathEvaluator):
    """Evaluate an escape path by walking it cell by cell through the maze."""

    def evaluate(
        self,
        maze: Maze,
        path: Optional[Sequence[Point]],
        *,
        start: Optional[Point] = None,
    ) -> PathEvaluationResult:
        cells = [tuple(map(int, cell)) for cell in path or ()]
        if not cells:
            return PathEvaluationResult(
                in_bounds=True,
                stray_in_walls=False,
                connected=False,
                starts_at_start=False,
                reaches_exit=False,
                shortest=False,
                length=0,
                message="No path provided.",
            )

        in_bounds = all(maze.in_bounds(cell) for cell in cells)
        wall_cells = [cell for cell in cells if maze.in_bounds(cell) and maze[cell]]
        stray_in_walls = bool(wall_cells)
        connected = self._check_connectivity(cells)
        starts_at_start = start is None or cells[0] == tuple(start)
        last = cells[-1]
        reaches_exit = maze.in_bounds(last) and not maze[last] and maze.is_exit(last)
        shortest = False
        if in_bounds and not stray_in_walls and connected and reaches_exit:
            result = search(maze, cells[0])
            shortest = result is not None and result.distance == len(cells)

        if not in_bounds:
            message = "Path leaves the maze."
        elif stray_in_walls:
            message = "Path overlaps walls."
        elif not starts_at_start:
            message = "Path does not begin at the start cell."
        elif not connected:
            message = "Path is not continuous."
        elif not reaches_exit:
            message = "Path does not reach an exit."
        elif not shortest:
            message = "Path escapes the maze but is not the shortest."
        else:
            message = "Path is a shortest escape route."

        return PathEvaluationResult(
            in_bounds=in_bounds,
            stray_in_walls=stray_in_walls,
            connected=connected,
            starts_at_start=starts_at_start,
            reaches_exit=reaches_exit,
            shortest=shortest,
            length=len(cells),
            message=message,
            wall_cells=wall_cells,
        )

    # ------------------------------------------------------------------

    @staticmethod
    def _check_connectivity(cells: Sequence[Point]) -> bool:
        return all(nxt in neighbours_of(cur) for cur, nxt in zip(cells, cells[1:]))


__all__ = ["PathEvaluator", "PathEvaluationResult"]
