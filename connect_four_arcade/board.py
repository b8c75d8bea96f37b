"""The Board class holds the grid of cells for a game of connect four and applies gravity to every placement."""
from typing import Iterable, Optional

from . import errors
from .piece import Piece

# region Globals
ROWS = 6
COLUMNS = 7
# endregion


class Board:
    """
    Board is a fixed-size grid of pieces. Row 0 is the top of the board and the last row is the bottom.

    Pieces always occupy the lowest empty cell of a column, so the occupied cells of any column are contiguous from
    the bottom row upward.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLUMNS) -> None:
        if rows < 1 or columns < 1:
            raise errors.ConfigurationError(f"A board needs at least one row and one column, got {rows}x{columns}.")
        self.rows: int = rows
        self.columns: int = columns
        self.grid: list[list[Piece]] = [[Piece.EMPTY for c in range(self.columns)] for r in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from strings, one per row, top row first.

        Each character is a cell: "1" or "2" for a player's piece and "." or " " for an empty cell.
        Gravity is not enforced, which makes this handy for constructing positions in tests and debugging sessions.
        """
        lines = [line for line in rows]
        if not lines:
            raise errors.ConfigurationError("from_rows(): at least one row is required.")
        board = cls(rows=len(lines), columns=len(lines[0]))
        for r, line in enumerate(lines):
            if len(line) != board.columns:
                raise errors.ConfigurationError(f"from_rows(): row {r} has {len(line)} cells, expected {board.columns}.")
            for c, char in enumerate(line):
                board.grid[r][c] = Piece.EMPTY if char == "." else Piece(char)
        return board

    def copy(self) -> "Board":
        other = Board(self.rows, self.columns)
        other.grid = [row[:] for row in self.grid]
        return other

    def reset(self) -> None:
        """Set every cell back to EMPTY."""
        for row in self.grid:
            for c in range(self.columns):
                row[c] = Piece.EMPTY

    # region Column and Row Interactions
    def check_column(self, col: int) -> None:
        if col not in range(self.columns):
            raise errors.OutOfBoundsError(f"Column {col + 1} is out of bounds.")

    def first_available_row(self, col: int) -> int:
        """Return the lowest empty row index in the column, or -1 if the column is full."""
        self.check_column(col)
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is Piece.EMPTY:
                return r
        return -1

    def place(self, col: int, player: Piece) -> bool:
        """
        Drop a piece into the column.

        Returns True once the piece occupies the lowest empty cell of the column, or False (leaving the board
        untouched) if the column is already full.
        """
        if not player.is_player:
            raise errors.InvalidPieceError("place(): an EMPTY piece cannot be placed.")
        row = self.first_available_row(col)
        if row == -1:
            return False
        self.grid[row][col] = player
        return True

    def clear(self, row: int, col: int) -> None:
        """Set a single cell back to EMPTY. Used to revert simulated moves."""
        self.check_column(col)
        if row not in range(self.rows):
            raise errors.OutOfBoundsError(f"Row {row + 1} is out of bounds.")
        self.grid[row][col] = Piece.EMPTY

    def is_column_empty(self, col: int, top_row: int = 0) -> bool:
        """Return True if the cell at top_row in the column is empty, which means the column still has room."""
        self.check_column(col)
        return self.grid[top_row][col] is Piece.EMPTY

    def available_columns(self) -> list[int]:
        """Return the column indexes that can still accept a piece, left to right."""
        return [c for c in range(self.columns) if self.is_column_empty(c)]

    def column_height(self, col: int) -> int:
        """Return the number of pieces in the column."""
        return self.rows - 1 - self.first_available_row(col) if self.is_column_empty(col) else self.rows

    def is_full(self) -> bool:
        return len(self.available_columns()) == 0

    def is_empty(self) -> bool:
        return all(cell is Piece.EMPTY for row in self.grid for cell in row)

    # endregion

    # region Printing
    def highlighted_str(self, highlight_positions: Optional[Iterable[tuple[int, int]]] = None) -> str:
        """Return a string representation of the board with an optional set of positions highlighted."""
        highlight = set(highlight_positions or [])
        row_div = "|" + "-" * (4 * self.columns - 1) + "|"
        result = []
        for r in range(self.rows):
            row = []
            for c in range(self.columns):
                piece_str = f" {self.grid[r][c].value} "
                if (r, c) in highlight:
                    piece_str = "|" + piece_str[1] + "|"
                row.append(piece_str)
            result.append("|" + "|".join(row) + "|")

        result.append(row_div)
        result.append("|" + "|".join(f" {i + 1} " for i in range(self.columns)) + "|")
        return "\n".join(result) + "\n"

    def __str__(self) -> str:
        return self.highlighted_str()

    def __repr__(self) -> str:
        """Return a string listing every occupied position as row, column and piece."""
        result = []
        for r in range(self.rows):
            for c in range(self.columns):
                if self.grid[r][c] is not Piece.EMPTY:
                    result.append(f"{r}{c}{self.grid[r][c].value}")
        return ",".join(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    # endregion
