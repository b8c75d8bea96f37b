from enum import Enum
from sys import intern

from . import errors


class Piece(Enum):
    """The state of a single board cell. PLAYER_ONE is drawn red and PLAYER_TWO is drawn blue."""
    EMPTY = intern(" ")
    PLAYER_ONE = intern("1")
    PLAYER_TWO = intern("2")

    @property
    def is_player(self) -> bool:
        return self is not Piece.EMPTY

    @property
    def opponent(self) -> "Piece":
        """Return the other player's piece. EMPTY has no opponent."""
        if self is Piece.PLAYER_ONE:
            return Piece.PLAYER_TWO
        if self is Piece.PLAYER_TWO:
            return Piece.PLAYER_ONE
        raise errors.InvalidPieceError("An empty cell has no opponent.")

    @property
    def label(self) -> str:
        return f"Player {self.value}" if self.is_player else "Nobody"

    def __str__(self) -> str:
        return f'{self.label} ({self.value})'

    def __repr__(self) -> str:
        return self.value
