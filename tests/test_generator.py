import random
import unittest
from collections import deque

from labyrinth import Maze, MazeGenerator, generate, neighbours_of
from labyrinth.maze import remove_random


def _open_adjacencies(maze: Maze) -> int:
    count = 0
    for row, col in maze.open_cells():
        for point in ((row + 1, col), (row, col + 1)):
            if maze.in_bounds(point) and maze.is_open(point):
                count += 1
    return count


def _reachable_from(maze: Maze, start) -> set:
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for point in neighbours_of(current):
            if maze.in_bounds(point) and maze.is_open(point) and point not in seen:
                seen.add(point)
                queue.append(point)
    return seen


class RemoveRandomTests(unittest.TestCase):
    def test_empty_sequence_returns_none(self) -> None:
        self.assertIsNone(remove_random([], random.Random(0)))

    def test_drains_every_element_once(self) -> None:
        items = [3, 1, 4, 1, 5, 9]
        rng = random.Random(42)
        drained = []
        while True:
            item = remove_random(items, rng)
            if item is None:
                break
            drained.append(item)
        self.assertEqual(sorted(drained), [1, 1, 3, 4, 5, 9])
        self.assertEqual(items, [])


class MazeGeneratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = MazeGenerator(rows=21, cols=17, seed=123)

    def test_record_dimensions_and_entrance(self) -> None:
        record = self.generator.create_maze(maze_id="maze-test")
        self.assertEqual(record.id, "maze-test")
        self.assertEqual(record.grid_size, (21, 17))
        row, col = record.entrance
        self.assertTrue(row == 0 or col == 0)
        self.assertTrue(record.maze.is_open(record.entrance))

    def test_open_cells_form_a_single_tree(self) -> None:
        for record in self.generator.generate_batch(5):
            maze = record.maze
            open_cells = set(maze.open_cells())
            self.assertGreater(len(open_cells), 1)
            self.assertEqual(_open_adjacencies(maze), len(open_cells) - 1)
            self.assertEqual(_reachable_from(maze, record.entrance), open_cells)

    def test_same_seed_gives_same_maze(self) -> None:
        first = MazeGenerator(rows=12, cols=9, seed=7).create_maze()
        second = MazeGenerator(rows=12, cols=9, seed=7).create_maze()
        self.assertEqual(first.maze.to_rows(), second.maze.to_rows())
        self.assertEqual(first.entrance, second.entrance)

    def test_shared_rng_advances_between_mazes(self) -> None:
        rng = random.Random(11)
        first = generate(15, 15, rng)
        second = generate(15, 15, rng)
        self.assertNotEqual(first.to_rows(), second.to_rows())

    def test_create_maze_overrides_dimensions(self) -> None:
        record = self.generator.create_maze(4, 6)
        self.assertEqual(record.maze.shape, (4, 6))

    def test_single_row_and_column_are_corridors(self) -> None:
        for rows, cols in ((1, 10), (10, 1), (1, 1)):
            with self.subTest(shape=(rows, cols)):
                maze = generate(rows, cols, random.Random(rows * 31 + cols))
                self.assertEqual(len(list(maze.open_cells())), rows * cols)

    def test_zero_dimensions_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate(0, 5)
        with self.assertRaises(ValueError):
            generate(5, 0)
        with self.assertRaises(ValueError):
            MazeGenerator(rows=0)
        with self.assertRaises(ValueError):
            self.generator.create_maze(0, 3)

    def test_seed_and_rng_are_exclusive(self) -> None:
        with self.assertRaises(ValueError):
            MazeGenerator(seed=1, rng=random.Random(1))

    def test_batch_size(self) -> None:
        self.assertEqual(len(self.generator.generate_batch(3)), 3)
        self.assertEqual(self.generator.generate_batch(0), [])
        with self.assertRaises(ValueError):
            self.generator.generate_batch(-1)

    def test_record_to_dict(self) -> None:
        record = MazeGenerator(rows=5, cols=4, seed=2).create_maze(maze_id="abc")
        payload = record.to_dict()
        self.assertEqual(payload["id"], "abc")
        self.assertEqual(payload["grid_size"], [5, 4])
        self.assertEqual(payload["entrance"], list(record.entrance))
        self.assertEqual(payload["maze_grid"], record.maze.to_rows())

    def test_generate_without_rng(self) -> None:
        maze = generate(8, 8)
        self.assertEqual(maze.shape, (8, 8))
        self.assertTrue(any(maze.is_exit(p) for p in maze.open_cells()))


if __name__ == "__main__":
    unittest.main()
