"""Flat-backed two-dimensional grid and von Neumann neighbourhood helpers."""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, Tuple, TypeVar

import numpy as np

Point = Tuple[int, int]
Path = List[Point]
T = TypeVar("T")

# North, east, south, west as (row, col) deltas.
DIRECTION_VECTORS: Tuple[Point, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def neighbours_of(point: Point) -> Iterator[Point]:
    """Yield the four axis-aligned neighbours of ``point``.

    The order is always north, east, south, west. Nothing is filtered: points
    on the edge produce coordinates that are negative or past the last
    row/column, so callers must check :meth:`Grid.in_bounds` before use.
    """

    row, col = point
    for dr, dc in DIRECTION_VECTORS:
        yield row + dr, col + dc


class Grid(Generic[T]):
    """Rectangular grid stored as one contiguous numpy buffer.

    Cell ``(row, col)`` lives at linear index ``row * cols + col``. Every cell
    starts at the dtype's default value (zero, or ``False`` for booleans).
    Accessing a point outside the grid is a programming error and raises
    :class:`IndexError`.
    """

    def __init__(self, rows: int, cols: int, dtype: Any = np.int64) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self._rows = int(rows)
        self._cols = int(cols)
        self._data = np.zeros(self._rows * self._cols, dtype=dtype)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.size

    def in_bounds(self, point: Point) -> bool:
        """Return whether ``point`` addresses a cell of this grid."""

        row, col = point
        return 0 <= row < self._rows and 0 <= col < self._cols

    def index_of(self, point: Point) -> int:
        if not self.in_bounds(point):
            raise IndexError(f"Point {point} out of range for {self._rows}x{self._cols} grid")
        row, col = point
        return row * self._cols + col

    def __getitem__(self, point: Point) -> T:
        return self._data.item(self.index_of(point))

    def __setitem__(self, point: Point, value: T) -> None:
        self._data[self.index_of(point)] = value

    def get(self, point: Point) -> T:
        return self[point]

    def set(self, point: Point, value: T) -> None:
        self[point] = value

    def fill(self, value: T) -> None:
        self._data.fill(value)

    def points(self) -> Iterator[Point]:
        """Iterate over every point in row-major order."""

        for row in range(self._rows):
            for col in range(self._cols):
                yield row, col

    def to_array(self) -> np.ndarray:
        """Return a ``(rows, cols)`` copy of the grid contents."""

        return self._data.reshape(self._rows, self._cols).copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, dtype={self._data.dtype})"


__all__ = ["DIRECTION_VECTORS", "Grid", "Path", "Point", "neighbours_of"]
