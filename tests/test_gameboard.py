"""
Tests for the tilt algorithm.

Tests cover the three shift cases, the four directions, the events reported to displays, and the
invariants of a tilt on random boards.
"""

from unittest import TestCase, main

import numpy as np

from game2048.core.events import MergeEvent, MoveEvent
from game2048.core.gameboard import board_size, next_number, shift_up, tilt
from game2048.core.sides import Side


def _board(*rows):
    board = np.zeros((4, 4), dtype=np.int64)
    for index, row in enumerate(rows):
        board[index] = row
    return board


def _merge_line(line):
    """Compress and merge a line toward index 0, the usual way."""
    tiles = [value for value in line if value]
    result, score, i = [], 0, 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            result.append(2 * tiles[i])
            score += 2 * tiles[i]
            i += 2
        else:
            result.append(tiles[i])
            i += 1
    return result + [0] * (len(line) - len(result)), score


def _reference(board, side):
    """Tilt with line slicing instead of coordinate remapping."""
    result, total = board.copy(), 0
    for i in range(board.shape[0]):
        if side is Side.NORTH:
            line, total_i = _merge_line(board[:, i].tolist())
            result[:, i] = line
        elif side is Side.SOUTH:
            line, total_i = _merge_line(board[::-1, i].tolist())
            result[::-1, i] = line
        elif side is Side.WEST:
            line, total_i = _merge_line(board[i, :].tolist())
            result[i, :] = line
        else:
            line, total_i = _merge_line(board[i, ::-1].tolist())
            result[i, ::-1] = line
        total += total_i
    return result, total


class TestNextNumber(TestCase):
    def test_finds_first_tile_below(self):
        board = _board([0, 0, 0, 0], [0, 0, 0, 0], [0, 8, 0, 0], [0, 2, 0, 0])
        self.assertEqual(next_number(board, 0, 1), (8, 2))
        self.assertEqual(next_number(board, 2, 1), (2, 3))

    def test_nothing_below(self):
        board = _board([2, 0, 0, 0])
        self.assertEqual(next_number(board, 0, 0), (0, 0))
        self.assertEqual(next_number(board, 3, 0), (0, 3))


class TestShiftUp(TestCase):
    """The NORTH-only algorithm on a single column."""

    def _column(self, values):
        board = np.zeros((4, 4), dtype=np.int64)
        board[:, 0] = values
        score, merges, events = shift_up(board, Side.NORTH)
        return board[:, 0].tolist(), score, merges, events

    def test_slide_into_empty_cell(self):
        column, score, merges, events = self._column([0, 0, 0, 2])
        self.assertEqual(column, [2, 0, 0, 0])
        self.assertEqual((score, merges), (0, 0))
        self.assertEqual(events, [MoveEvent(2, (3, 0), (0, 0))])

    def test_merge_after_empties(self):
        column, score, merges, events = self._column([4, 0, 4, 0])
        self.assertEqual(column, [8, 0, 0, 0])
        self.assertEqual((score, merges), (8, 1))
        self.assertEqual(events, [MergeEvent(4, 8, ((0, 0), (2, 0)), (0, 0))])

    def test_empty_cell_receives_a_pair(self):
        column, score, merges, events = self._column([0, 2, 2, 0])
        self.assertEqual(column, [4, 0, 0, 0])
        self.assertEqual((score, merges), (4, 1))
        self.assertEqual(
            events,
            [MoveEvent(2, (1, 0), (0, 0)), MergeEvent(2, 4, ((1, 0), (2, 0)), (0, 0))],
        )

    def test_each_tile_merges_once(self):
        self.assertEqual(self._column([2, 2, 2, 2])[:3], ([4, 4, 0, 0], 8, 2))
        self.assertEqual(self._column([2, 2, 4, 4])[:3], ([4, 8, 0, 0], 12, 2))
        self.assertEqual(self._column([4, 4, 8, 0])[:3], ([8, 8, 0, 0], 8, 1))
        self.assertEqual(self._column([4, 0, 2, 2])[:3], ([4, 4, 0, 0], 4, 1))

    def test_blocked_column_untouched(self):
        column, score, merges, events = self._column([2, 4, 8, 16])
        self.assertEqual(column, [2, 4, 8, 16])
        self.assertEqual((score, merges, events), (0, 0, []))


class TestTilt(TestCase):
    """Tilting real boards toward each side."""

    def test_row_west_twice(self):
        board = _board([2, 2, 4, 0])

        first = tilt(board, Side.WEST)
        np.testing.assert_array_equal(first.board[0], [4, 4, 0, 0])
        self.assertTrue(first.changed)
        self.assertEqual((first.score, first.merges), (4, 1))

        second = tilt(first.board, Side.WEST)
        np.testing.assert_array_equal(second.board[0], [8, 0, 0, 0])
        self.assertEqual((second.score, second.merges), (8, 1))

    def test_events_in_real_coordinates(self):
        result = tilt(_board([2, 2, 4, 0]), Side.WEST)
        self.assertEqual(
            result.events,
            (MergeEvent(2, 4, ((0, 0), (0, 1)), (0, 0)), MoveEvent(4, (0, 2), (0, 1))),
        )

    def test_single_tile_each_direction(self):
        board = _board([0, 0, 0, 0], [0, 0, 2, 0])
        expected = {Side.NORTH: (0, 2), Side.SOUTH: (3, 2), Side.EAST: (1, 3), Side.WEST: (1, 0)}
        for side, cell in expected.items():
            result = tilt(board, side)
            self.assertTrue(result.changed)
            self.assertEqual(result.board[cell], 2)
            self.assertEqual(np.count_nonzero(result.board), 1)
            self.assertEqual(result.events, (MoveEvent(2, (1, 2), cell),))

    def test_no_legal_move(self):
        board = _board([2, 0, 0, 0])
        for side in (Side.NORTH, Side.WEST):
            result = tilt(board, side)
            self.assertFalse(result.changed)
            self.assertEqual(result.events, ())
            self.assertEqual((result.score, result.merges), (0, 0))
            np.testing.assert_array_equal(result.board, board)
        for side in (Side.SOUTH, Side.EAST):
            self.assertTrue(tilt(board, side).changed)

    def test_input_not_modified(self):
        board = _board([2, 2, 4, 0], [0, 4, 0, 4])
        original = board.copy()
        result = tilt(board, Side.EAST)
        np.testing.assert_array_equal(board, original)
        self.assertIsNot(result.board, board)

    def test_blocked_board(self):
        board = _board([2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2])
        for side in Side:
            result = tilt(board, side)
            self.assertFalse(result.changed)
            np.testing.assert_array_equal(result.board, board)

    def test_unknown_side(self):
        with self.assertRaises(ValueError):
            tilt(_board([2, 0, 0, 0]), "WEST")

    def test_board_must_be_square(self):
        with self.assertRaises(ValueError):
            board_size(np.zeros((3, 4), dtype=np.int64))


class TestTiltProperties(TestCase):
    """Invariants of a tilt on random boards."""

    def setUp(self):
        rng = np.random.default_rng(7)
        self.boards = [rng.choice([0, 0, 2, 4, 8, 16], size=(4, 4)).astype(np.int64) for _ in range(200)]

    def test_matches_line_reference(self):
        for board in self.boards:
            for side in Side:
                result = tilt(board, side)
                expected, score = _reference(board, side)
                np.testing.assert_array_equal(result.board, expected)
                self.assertEqual(result.score, score)
                self.assertEqual(result.changed, not np.array_equal(board, expected))

    def test_mass_and_tile_count(self):
        for board in self.boards:
            for side in Side:
                result = tilt(board, side)

                # ##>: Merging v and v into 2v keeps the sum of the board.
                self.assertEqual(result.board.sum(), board.sum())
                self.assertEqual(np.count_nonzero(result.board), np.count_nonzero(board) - result.merges)

                # ##>: Every tile is still a power of two.
                tiles = result.board[result.board != 0]
                self.assertTrue(np.all((tiles & (tiles - 1)) == 0))

    def test_events_replay_the_tilt(self):
        for board in self.boards:
            for side in Side:
                result = tilt(board, side)
                replay = board.copy()
                for event in result.events:
                    replay[event.source] = 0
                    replay[event.destination] = event.merged if isinstance(event, MergeEvent) else event.value
                np.testing.assert_array_equal(replay, result.board)

    def test_settles(self):
        """Repeated tilts stop changing the board, and a settled board stays settled."""
        for board in self.boards:
            for side in Side:
                current, steps = board, 0
                while True:
                    result = tilt(current, side)
                    if not result.changed:
                        break
                    current, steps = result.board, steps + 1
                self.assertLessEqual(steps, 4)
                self.assertFalse(tilt(current, side).changed)
                self.assertEqual(tilt(current, side).events, ())


if __name__ == '__main__':
    main()
