"""Random grid maze generation and shortest escape path solving."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractPathEvaluator",
    "DIRECTION_VECTORS",
    "Grid",
    "Path",
    "Point",
    "neighbours_of",
    "Maze",
    "MazeGenerator",
    "MazeRecord",
    "PathEvaluator",
    "PathEvaluationResult",
    "SearchResult",
    "OPEN",
    "WALL",
    "generate",
    "search",
    "solve",
]

from .base import AbstractMazeGenerator, AbstractPathEvaluator
from .grid import DIRECTION_VECTORS, Grid, Path, Point, neighbours_of
from .maze import (
    Maze,
    MazeGenerator,
    MazeRecord,
    PathEvaluator,
    PathEvaluationResult,
    SearchResult,
    OPEN,
    WALL,
    generate,
    search,
    solve,
)
