import unittest

from connect_four_arcade import errors
from connect_four_arcade.board import COLUMNS, ROWS, Board
from connect_four_arcade.piece import Piece

from .boards import DRAWN, board


class TestBoardPlacement(unittest.TestCase):
    def test_new_board_is_empty(self):
        b = Board()
        self.assertEqual((b.rows, b.columns), (ROWS, COLUMNS))
        self.assertTrue(b.is_empty())
        self.assertEqual(b.available_columns(), list(range(COLUMNS)))

    def test_place_fills_lowest_empty_row(self):
        b = Board()
        for col in range(COLUMNS):
            for height in range(ROWS):
                self.assertEqual(b.column_height(col), height)
                self.assertTrue(b.place(col, Piece.PLAYER_ONE if height % 2 == 0 else Piece.PLAYER_TWO))
                self.assertEqual(b.column_height(col), height + 1)
                self.assertIsNot(b.grid[ROWS - 1 - height][col], Piece.EMPTY)
                # Everything above the new piece is still empty.
                for r in range(ROWS - 1 - height):
                    self.assertIs(b.grid[r][col], Piece.EMPTY)

    def test_place_into_full_column_is_rejected(self):
        b = Board()
        for i in range(ROWS):
            b.place(2, Piece.PLAYER_ONE if i % 2 else Piece.PLAYER_TWO)
        before = b.copy()
        self.assertFalse(b.place(2, Piece.PLAYER_ONE))
        self.assertEqual(b, before)
        self.assertEqual(b.first_available_row(2), -1)
        self.assertFalse(b.is_column_empty(2))

    def test_place_out_of_bounds_raises(self):
        b = Board()
        with self.assertRaises(errors.OutOfBoundsError):
            b.place(COLUMNS, Piece.PLAYER_ONE)
        with self.assertRaises(errors.OutOfBoundsError):
            b.place(-1, Piece.PLAYER_ONE)

    def test_place_empty_piece_raises(self):
        with self.assertRaises(errors.InvalidPieceError):
            Board().place(0, Piece.EMPTY)

    def test_is_column_empty_checks_the_given_row(self):
        b = Board()
        for _ in range(ROWS - 1):
            b.place(5, Piece.PLAYER_TWO)
        self.assertTrue(b.is_column_empty(5))
        self.assertFalse(b.is_column_empty(5, top_row=1))

    def test_full_board(self):
        b = board(DRAWN)
        self.assertTrue(b.is_full())
        self.assertEqual(b.available_columns(), [])


class TestBoardReset(unittest.TestCase):
    def test_reset_clears_every_cell(self):
        b = board(DRAWN)
        b.reset()
        self.assertTrue(b.is_empty())

    def test_reset_is_idempotent(self):
        b = Board()
        b.reset()
        once = b.copy()
        b.reset()
        self.assertEqual(b, once)
        self.assertTrue(b.is_empty())


class TestBoardText(unittest.TestCase):
    def test_from_rows_and_repr(self):
        b = Board.from_rows(["..", "12"])
        self.assertEqual(repr(b), "101,112")

    def test_from_rows_rejects_ragged_rows(self):
        with self.assertRaises(errors.ConfigurationError):
            Board.from_rows(["...", ".."])

    def test_highlighted_str_marks_positions(self):
        b = Board()
        b.place(0, Piece.PLAYER_ONE)
        text = b.highlighted_str([(5, 0)])
        lines = text.splitlines()
        self.assertEqual(len(lines), ROWS + 2)
        self.assertTrue(lines[ROWS - 1].startswith("||1|"))
        self.assertIn(" 7 ", lines[-1])


if __name__ == "__main__":
    unittest.main()
