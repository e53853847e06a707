import random
import unittest

from game import (
    Board,
    Direction,
    SPAWN_VALUES,
    TWO_PROBABILITY,
    new_tile,
    new_game,
    shift,
)


class ScriptedRng:
    """Stands in for random.Random: picks a fixed index and returns scripted floats."""

    def __init__(self, pick=0, floats=(0.5,)):
        self.pick = pick
        self.floats = list(floats)
        self.choices = []

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[self.pick]

    def random(self):
        return self.floats.pop(0)


class TestBoard(unittest.TestCase):
    def test_given_size_when_creating_empty_then_all_zero_square_grid(self):
        board = Board.empty(4)
        self.assertEqual(board.size, 4)
        self.assertEqual(len(board.grid), 4)
        self.assertTrue(all(len(row) == 4 for row in board.grid))
        self.assertEqual(board.num_empty(), 16)
        self.assertEqual(board.total(), 0)

    def test_given_nonpositive_size_when_creating_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.empty(0)

    def test_given_rows_when_building_then_copied_and_immutable(self):
        rows = [[2, 0], [0, 4]]
        board = Board.from_rows(rows)
        rows[0][0] = 8
        self.assertEqual(board.at(0, 0), 2)
        with self.assertRaises(Exception):
            board.size = 3  # type: ignore[misc]

    def test_given_bad_grids_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.from_rows([])
        with self.assertRaises(ValueError):
            Board.from_rows([[2, 0, 0], [0, 0]])
        with self.assertRaises(ValueError):
            Board.from_rows([[2, 0], [0, 0], [0, 0]])
        with self.assertRaises(ValueError):
            Board.from_rows([[3, 0], [0, 0]])
        with self.assertRaises(ValueError):
            Board.from_rows([[1, 0], [0, 0]])
        with self.assertRaises(ValueError):
            Board.from_rows([[-2, 0], [0, 0]])

    def test_given_non_integer_cells_when_building_then_value_error_not_coerced(self):
        for bad in (2.9, 4.0, "4", True, None):
            with self.assertRaises(ValueError, msg=repr(bad)):
                Board.from_rows([[2, 0], [0, bad]])

    def test_given_board_when_reading_views_then_consistent(self):
        board = Board.from_rows([
            [2, 0, 0, 0],
            [0, 4, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 2048],
        ])
        cells = board.cells()
        self.assertEqual(len(cells), 16)
        self.assertEqual(cells[5], 4)
        self.assertEqual(board.rows()[3][3], 2048)
        self.assertEqual(board.num_empty() + sum(1 for v in cells if v), 16)
        self.assertEqual(len(board.empty_cells()), 13)
        self.assertNotIn((1, 1), board.empty_cells())
        self.assertEqual(board.max_tile(), 2048)
        self.assertEqual(board.total(), 2054)
        self.assertEqual(list(board.coords())[:2], [(0, 0), (0, 1)])

    def test_given_board_when_pretty_then_dash_for_empty_and_tabs(self):
        board = Board.from_rows([[2, 0], [0, 16]])
        self.assertEqual(board.pretty(), "2\t-\n-\t16")

    def test_given_direction_enum_when_reading_orientation_then_matches_move_axes(self):
        self.assertEqual([d.value for d in Direction], [0, 1, 2, 3])
        self.assertTrue(Direction.UP.vertical and Direction.DOWN.vertical)
        self.assertFalse(Direction.LEFT.vertical or Direction.RIGHT.vertical)
        self.assertTrue(Direction.RIGHT.reverse and Direction.DOWN.reverse)
        self.assertFalse(Direction.UP.reverse or Direction.LEFT.reverse)


class TestSpawn(unittest.TestCase):
    def test_given_full_board_when_spawning_then_false_and_unchanged(self):
        board = Board.from_rows([[2, 4], [4, 2]])
        nb, placed = new_tile(board, random.Random(1))
        self.assertFalse(placed)
        self.assertEqual(nb, board)

    def test_given_low_roll_when_spawning_then_two_in_chosen_cell(self):
        board = Board.from_rows([[2, 0], [0, 0]])
        rng = ScriptedRng(pick=1, floats=[0.0])
        nb, placed = new_tile(board, rng)
        self.assertTrue(placed)
        # Candidates are the empty cells in row-major order
        self.assertEqual(rng.choices[0], [(0, 1), (1, 0), (1, 1)])
        self.assertEqual(nb.at(1, 0), 2)
        self.assertEqual(board.at(1, 0), 0)

    def test_given_high_roll_when_spawning_then_four(self):
        board = Board.empty(2)
        nb, _ = new_tile(board, ScriptedRng(pick=0, floats=[0.95]))
        self.assertEqual(nb.at(0, 0), 4)

    def test_given_roll_at_threshold_when_spawning_then_four(self):
        self.assertEqual(TWO_PROBABILITY, 0.9)
        self.assertEqual(SPAWN_VALUES, (2, 4))
        nb, _ = new_tile(Board.empty(2), ScriptedRng(pick=0, floats=[TWO_PROBABILITY]))
        self.assertEqual(nb.at(0, 0), 4)
        nb2, _ = new_tile(Board.empty(2), ScriptedRng(pick=0, floats=[0.89]))
        self.assertEqual(nb2.at(0, 0), 2)

    def test_given_seeded_rng_when_spawning_then_sum_grows_by_two_or_four(self):
        rng = random.Random(42)
        board = Board.empty(4)
        for _ in range(16):
            before = board.total()
            empties = board.num_empty()
            board, placed = new_tile(board, rng)
            self.assertTrue(placed)
            self.assertIn(board.total() - before, SPAWN_VALUES)
            self.assertEqual(board.num_empty(), empties - 1)
        self.assertFalse(new_tile(board, rng)[1])

    def test_given_many_spawns_when_counting_values_then_mostly_twos(self):
        rng = random.Random(7)
        fours = 0
        for _ in range(2000):
            nb, _ = new_tile(Board.empty(2), rng)
            fours += 1 if nb.total() == 4 else 0
        self.assertGreater(fours, 100)
        self.assertLess(fours, 320)

    def test_given_seed_when_new_game_then_two_tiles_and_reproducible(self):
        b1 = new_game(4, seed=123)
        b2 = new_game(4, seed=123)
        self.assertEqual(b1, b2)
        self.assertEqual(b1.num_empty(), 14)
        self.assertTrue(all(v in (0, 2, 4) for v in b1.cells()))

    def test_given_spawned_board_when_shifted_then_sum_unchanged(self):
        board = new_game(4, seed=9)
        for d in Direction:
            self.assertEqual(shift(board, d).board.total(), board.total())


if __name__ == '__main__':
    unittest.main(verbosity=2)
