"""Maze generation, solving and path evaluation package."""

__all__ = [
    "Maze",
    "MazeGenerator",
    "MazeRecord",
    "PathEvaluator",
    "PathEvaluationResult",
    "SearchResult",
    "OPEN",
    "WALL",
    "generate",
    "remove_random",
    "search",
    "solve",
]

from .model import Maze, OPEN, WALL
from .generator import MazeGenerator, MazeRecord, generate, remove_random
from .solver import SearchResult, search, solve
from .evaluator import PathEvaluator, PathEvaluationResult
