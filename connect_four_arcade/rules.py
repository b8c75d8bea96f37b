"""Win and draw detection for a connect four board."""
from functools import lru_cache
from typing import NamedTuple, Optional

from .board import Board
from .piece import Piece

Position = tuple[int, int]

CONNECT = 4


class WinningLine(NamedTuple):
    """The owner of a four-in-a-row and the (row, column) positions that make it up."""
    player: Piece
    cells: tuple[Position, ...]

    @property
    def shape(self) -> str:
        """
        Return the shape of the line: vertical (|), horizontal (-), ascending (/) or descending (\\).
        """
        change_r = self.cells[1][0] - self.cells[0][0]
        change_c = self.cells[1][1] - self.cells[0][1]
        shape = "-" if change_r == 0 else "|"
        if change_r != 0 != change_c:
            shape = "/" if change_r < 0 else "\\"
        return shape


@lru_cache(maxsize=None)
def get_slots(rows: int, columns: int) -> tuple[tuple[Position, ...], ...]:
    """Return every group of four adjacent positions on a board of the given size that could make a win."""
    results = []
    for r in range(rows):
        for c in range(columns):
            # Whether there is room to the right of c, below r and above r for a group of four.
            space_right = c + CONNECT - 1 < columns
            space_down = r + CONNECT - 1 < rows
            space_up = r - (CONNECT - 1) >= 0

            # - horizontal
            if space_right:
                results.append(tuple((r, c + j) for j in range(CONNECT)))
            # | vertical
            if space_down:
                results.append(tuple((r + j, c) for j in range(CONNECT)))
            # \ diagonal going down and to the right
            if space_down and space_right:
                results.append(tuple((r + j, c + j) for j in range(CONNECT)))
            # / diagonal going up and to the right
            if space_up and space_right:
                results.append(tuple((r - j, c + j) for j in range(CONNECT)))
    return tuple(results)


def winning_line(board: Board) -> Optional[WinningLine]:
    """Return the first four-in-a-row found on the board along with its owner, or None if there isn't one."""
    grid = board.grid
    for slot in get_slots(board.rows, board.columns):
        r, c = slot[0]
        first = grid[r][c]
        if first is Piece.EMPTY:
            continue
        if all(grid[row][col] is first for row, col in slot[1:]):
            return WinningLine(first, slot)
    return None


def check_win(board: Board) -> bool:
    """Return True if any player has four in a row horizontally, vertically or diagonally."""
    return winning_line(board) is not None


def is_draw(board: Board) -> bool:
    """Return True if the board is full and nobody has won."""
    return board.is_full() and not check_win(board)
