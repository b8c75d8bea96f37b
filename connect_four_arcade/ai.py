"""A naive computer opponent: block the opponent's immediate win, take its own immediate win, otherwise play randomly."""
import random
from typing import Optional, Union

from codetiming import Timer

from .board import Board
from .logger import Logger, LogLevel
from .piece import Piece
from .rules import winning_line


def is_winning_move(board: Board, player: Piece, col: int) -> bool:
    """
    Return True if dropping the player's piece into the column would give that player four in a row.

    The move is only simulated: the cell is always reverted to EMPTY before returning. A full column is never a
    winning move.
    """
    row = board.first_available_row(col)
    if row == -1:
        return False
    board.grid[row][col] = player
    try:
        line = winning_line(board)
        return line is not None and line.player is player
    finally:
        board.clear(row, col)


def random_valid_column(board: Board, rng: Optional[random.Random] = None) -> Optional[int]:
    """Return a uniformly random column whose top row is still empty, or None if every column is full."""
    available = board.available_columns()
    if not available:
        return None
    return (rng or random).choice(available)


class ComputerPlayer:
    """
    ComputerPlayer picks columns for one side of the board.

    Its priorities, each scanned left to right:
        1. block a column where the opponent would win next move,
        2. take a column where it would win this move,
        3. otherwise pick a random column that still has room.
    """

    def __init__(
        self,
        piece: Piece = Piece.PLAYER_TWO,
        rng: Optional[random.Random] = None,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
    ) -> None:
        self.piece: Piece = piece
        self.opponent: Piece = piece.opponent
        self.rng: random.Random = rng or random.Random()
        self.log: Logger = Logger(log_level, name="computer")

    def best_move(self, board: Board) -> Optional[int]:
        """Return the column the computer wants to play, or None if there is no legal column left."""
        t = Timer(name="\tbest_move()", text="{name} took {:.3f}s", logger=self.log.debug)
        t.start()
        try:
            for col in range(board.columns):
                if is_winning_move(board, self.opponent, col):
                    self.log.debug("block move:", col)
                    return col
            for col in range(board.columns):
                if is_winning_move(board, self.piece, col):
                    self.log.debug("winning move:", col)
                    return col
            col = random_valid_column(board, self.rng)
            self.log.debug("random move:", col)
            return col
        finally:
            t.stop()

    def move(self, board: Board) -> Optional[int]:
        """Choose a column and place the computer's piece there. Returns the column, or None if the board is full."""
        col = self.best_move(board)
        if col is None:
            self.log.info("no legal column left; skipping the computer's turn.")
            return None
        board.place(col, self.piece)
        return col


def best_move(board: Board, player: Piece = Piece.PLAYER_TWO, rng: Optional[random.Random] = None) -> Optional[int]:
    """Return the column a computer playing the given piece would choose on this board."""
    return ComputerPlayer(player, rng=rng).best_move(board)
