"""Boolean maze grid: ``True`` cells are walls, ``False`` cells are open floor."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Union

from ..grid import Grid, Point

WALL = True
OPEN = False


class Maze(Grid[bool]):
    """A grid of walls and open cells.

    Any open cell on the outer boundary counts as an exit, so a maze built by
    hand can have several of them.
    """

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(rows, cols, dtype=bool)

    @classmethod
    def walled(cls, rows: int, cols: int) -> "Maze":
        maze = cls(rows, cols)
        maze.fill(WALL)
        return maze

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[int, bool]]]) -> "Maze":
        """Build a maze from nested rows where truthy values mark walls."""

        if len(rows) == 0 or len(rows[0]) == 0:
            raise ValueError("Maze rows must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Maze rows must all have the same length")
        maze = cls(len(rows), width)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                maze[r, c] = bool(value)
        return maze

    def is_wall(self, point: Point) -> bool:
        return self[point]

    def is_open(self, point: Point) -> bool:
        return not self[point]

    def is_exit(self, point: Point) -> bool:
        """Return whether ``point`` lies on the outer boundary of the maze."""

        row, col = point
        return row == 0 or row == self.rows - 1 or col == 0 or col == self.cols - 1

    def open_cells(self) -> Iterator[Point]:
        for point in self.points():
            if not self[point]:
                yield point

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.to_array()]

    def format(self) -> str:
        """Render one line per row, ``1`` for walls and ``0`` for open cells."""

        return "".join("".join(str(v) for v in row) + "\n" for row in self.to_rows())

    def __str__(self) -> str:
        return self.format()


__all__ = ["Maze", "OPEN", "WALL"]
