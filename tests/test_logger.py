import io
import unittest
from contextlib import redirect_stdout

from connect_four_arcade import errors
from connect_four_arcade.logger import Logger, LogLevel
from connect_four_arcade.piece import Piece


def captured(func, *args) -> str:
    out = io.StringIO()
    with redirect_stdout(out):
        func(*args)
    return out.getvalue()


class TestLogger(unittest.TestCase):
    def test_parse_level_names(self):
        self.assertIs(LogLevel.parse("debug"), LogLevel.DEBUG)
        self.assertIs(LogLevel.parse(LogLevel.INFO), LogLevel.INFO)
        with self.assertRaises(ValueError):
            LogLevel.parse("loud")

    def test_messages_below_the_level_are_dropped(self):
        log = Logger("INFO")
        self.assertEqual(captured(log.debug, "hidden"), "")
        self.assertEqual(captured(log.info, "shown"), "[INFO] shown\n")

    def test_named_loggers_prefix_their_name(self):
        log = Logger(LogLevel.VERBOSE, name="computer")
        self.assertEqual(captured(log.verbose, "thinking"), "[VERBOSE] computer: thinking\n")
        self.assertEqual(captured(log.normal, "hello"), "computer: hello\n")

    def test_error_without_an_active_exception(self):
        self.assertEqual(captured(Logger().error, "oops"), "[ERROR] oops\n")


class TestErrorsAndPieces(unittest.TestCase):
    def test_error_message(self):
        self.assertEqual(str(errors.OutOfBoundsError("Column 8 is out of bounds.")), "Column 8 is out of bounds.")
        self.assertIn("Unknown", str(errors.Error()))

    def test_opponents(self):
        self.assertIs(Piece.PLAYER_ONE.opponent, Piece.PLAYER_TWO)
        self.assertIs(Piece.PLAYER_TWO.opponent, Piece.PLAYER_ONE)
        with self.assertRaises(errors.InvalidPieceError):
            Piece.EMPTY.opponent

    def test_labels(self):
        self.assertEqual(Piece.PLAYER_ONE.label, "Player 1")
        self.assertEqual(str(Piece.PLAYER_TWO), "Player 2 (2)")


if __name__ == "__main__":
    unittest.main()
