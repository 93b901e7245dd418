"""Abstract interfaces for maze generation and path evaluation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")


class AbstractMazeGenerator(ABC, Generic[RecordT]):
    """Base class for generators that emit maze records.

    Randomness comes from an injectable :class:`random.Random`. Pass ``rng``
    to share a source between generators, or ``seed`` for a private
    reproducible one; with neither, the generator is seeded from the OS.
    """

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    @abstractmethod
    def create_maze(self, *args, **kwargs) -> RecordT:
        """Create a maze from the provided parameters."""

    @abstractmethod
    def create_random_maze(self) -> RecordT:
        """Create a single randomized maze with the configured settings."""

    def generate_batch(self, count: int) -> List[RecordT]:
        """Generate ``count`` randomized mazes."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.create_random_maze() for _ in range(count)]


class AbstractPathEvaluator(ABC):
    """Base class for evaluators that score a candidate path through a maze."""

    @abstractmethod
    def evaluate(self, maze, path, *args, **kwargs):
        """Evaluate a candidate path for the given maze."""


__all__ = [
    "AbstractMazeGenerator",
    "AbstractPathEvaluator",
]
