"""
Tests for the 2048 grid engine.

Tests cover the engine interface, stochastic tile spawning, move results,
and configuration checks.
"""

from unittest import TestCase, main

import numpy as np

from twentyfortyeight.core.types import ConfigurationError, Direction, MoveResult, Tile
from twentyfortyeight.envs.engine import GridEngine


class TestEngineInterface(TestCase):
    """Test GridEngine API and state management."""

    def setUp(self):
        """Initialize fresh engine before each test."""
        self.engine = GridEngine(size=4, generator=np.random.default_rng(42))

    def test_reset_state_initialization(self):
        """Reset initializes board with exactly 2 tiles and zero score."""
        board = self.engine.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertEqual(self.engine.count_tiles(), 2)

        # ##>: Tiles are only 2 or 4.
        tiles = board[board != 0]
        self.assertTrue(np.all((tiles == 2) | (tiles == 4)))

        # ##>: Score resets to zero.
        self.assertEqual(self.engine.score, 0)
        self.assertEqual(self.engine.merged_cells, [])

    def test_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        first = GridEngine(generator=np.random.default_rng(7))
        second = GridEngine(generator=np.random.default_rng(7))
        np.testing.assert_array_equal(first.board, second.board)

    def test_board_is_a_snapshot(self):
        """Changing the returned board does not change the game."""
        board = self.engine.board
        board[:] = 1024
        self.assertEqual(self.engine.count_tiles(), 2)

    def test_reset_with_new_size(self):
        """Reset can change the size and the winning tile."""
        board = self.engine.reset(size=5, win_value=64)
        self.assertEqual(board.shape, (5, 5))
        self.assertEqual((self.engine.size, self.engine.win_value), (5, 64))

        # ##>: Omitted arguments keep the current configuration.
        self.engine.reset()
        self.assertEqual((self.engine.size, self.engine.win_value), (5, 64))

    def test_render(self):
        engine = GridEngine(size=2)
        engine._board = np.array([[2, 0], [0, 4]])
        self.assertEqual(engine.render(), '2 \t0\n0 \t4')


class TestMoves(TestCase):
    """Test moves and scoring."""

    def setUp(self):
        self.engine = GridEngine(size=4, generator=np.random.default_rng(0))

    def test_move_left_merges(self):
        """Row [2, 2, 4, 4] moved left becomes [4, 8, 0, 0] for 12 points."""
        self.engine._board = np.array([[2, 2, 4, 4], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = self.engine.move(Direction.LEFT)

        self.assertIsInstance(result, MoveResult)
        self.assertTrue(result.changed)
        self.assertEqual(result.score_delta, 12)
        self.assertEqual(result.merged_cells, [Tile(0, 0, 4), Tile(0, 1, 8)])
        self.assertEqual(self.engine.merged_cells, result.merged_cells)
        self.assertEqual(self.engine.score, 12)
        np.testing.assert_array_equal(self.engine.board[0], np.array([4, 8, 0, 0]))

    def test_three_equal_tiles(self):
        """Row [2, 2, 2, 0] moved left becomes [4, 2, 0, 0] for 4 points."""
        self.engine._board = np.array([[2, 2, 2, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = self.engine.move(Direction.LEFT)
        np.testing.assert_array_equal(self.engine.board[0], np.array([4, 2, 0, 0]))
        self.assertEqual(result.score_delta, 4)

    def test_move_does_not_spawn(self):
        """A move only slides and merges; spawning is up to the caller."""
        self.engine._board = np.array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertTrue(self.engine.move(Direction.LEFT).changed)
        self.assertEqual(self.engine.count_tiles(), 1)

    def test_blocked_move(self):
        """A blocked move leaves board and score untouched, however often it is repeated."""
        board = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        self.engine._board = board.copy()
        self.engine._score = 20

        for _ in range(2):
            result = self.engine.move(Direction.LEFT)
            self.assertEqual(result, MoveResult(changed=False, merged_cells=[], score_delta=0))
            np.testing.assert_array_equal(self.engine.board, board)
            self.assertEqual(self.engine.score, 20)

    def test_random_play(self):
        """Score never decreases and every tile stays a power of two."""
        previous = 0
        for step in range(500):
            result = self.engine.move(list(Direction)[step % 4])
            if result.changed:
                self.assertTrue(self.engine.spawn_tile())
            self.assertEqual(self.engine.score, previous + result.score_delta)
            self.assertGreaterEqual(self.engine.score, previous)
            previous = self.engine.score

            tiles = self.engine.board[self.engine.board != 0]
            self.assertTrue(np.all(tiles & (tiles - 1) == 0))

    def test_invalid_direction(self):
        with self.assertRaises(TypeError):
            self.engine.move('left')


class TestSpawn(TestCase):
    """Test tile spawning."""

    def test_spawn_adds_one_tile(self):
        """After a successful spawn the board holds exactly one more tile, a 2 or a 4."""
        engine = GridEngine(generator=np.random.default_rng(1))
        before = engine.board
        self.assertTrue(engine.spawn_tile())
        after = engine.board

        self.assertEqual(np.count_nonzero(after), np.count_nonzero(before) + 1)
        self.assertIn(int((after - before).sum()), (2, 4))

    def test_spawn_on_full_board(self):
        """A full board is not an error: nothing is placed."""
        engine = GridEngine(size=2)
        engine._board = np.array([[2, 4], [4, 2]])
        self.assertFalse(engine.spawn_tile())
        np.testing.assert_array_equal(engine.board, np.array([[2, 4], [4, 2]]))


class TestConfiguration(TestCase):
    """Test rejected configurations."""

    def test_invalid_size(self):
        for size in (0, 1, -4, 2.5, True):
            with self.assertRaises(ConfigurationError):
                GridEngine(size=size)

    def test_invalid_win_value(self):
        for win_value in (0, 2, 1000, 2047, -2048, 2048.0):
            with self.assertRaises(ConfigurationError):
                GridEngine(win_value=win_value)

    def test_configuration_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            GridEngine(size=1)

    def test_failed_reset_keeps_game(self):
        """A rejected reset leaves the current configuration in place."""
        engine = GridEngine(size=3, win_value=256)
        with self.assertRaises(ConfigurationError):
            engine.reset(size=1)
        self.assertEqual((engine.size, engine.win_value), (3, 256))

    def test_smallest_board(self):
        engine = GridEngine(size=2, win_value=4)
        self.assertEqual(engine.board.shape, (2, 2))
        self.assertEqual(engine.count_tiles(), 2)


if __name__ == "__main__":
    main()
