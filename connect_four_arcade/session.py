"""
The GameSession class owns everything about one game of connect four and advances it one frame at a time.

A session moves through three states: the title screen, play, and the game-over screen, which returns to the title
screen after a short countdown or a click. Input arrives as a FrameInput per tick and the session answers with the
sounds that should be played; drawing is derived separately from the session (see scene.describe).
"""
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from . import errors
from .ai import ComputerPlayer
from .board import Board
from .logger import Logger, LogLevel
from .piece import Piece
from .rules import WinningLine, winning_line

# region Globals
CELL_SIZE = 80
FOOTER_HEIGHT = 100
GAME_OVER_DELAY = 1000  # milliseconds
FPS = 60
COMPUTER_MODE_KEY = "1"
TWO_PLAYER_MODE_KEY = "2"
# endregion


class GameState(Enum):
    TITLE_SCREEN = "title"
    PLAYING = "playing"
    GAME_OVER = "game over"


class Mode(Enum):
    COMPUTER = "computer"
    TWO_PLAYER = "two player"


class Sound(Enum):
    """Fire-and-forget audio triggers emitted by a tick."""
    PLACE = "place"
    START = "start"


@dataclass(frozen=True)
class FrameInput:
    """Everything the player did during one frame."""
    pointer: tuple[float, float] = (0.0, 0.0)
    clicked: bool = False
    keys: frozenset[str] = field(default_factory=frozenset)


@dataclass
class GameOverInfo:
    """The outcome of a finished game. A winner of None means the board filled up without a winner."""
    winner: Optional[Piece]
    line: tuple[tuple[int, int], ...] = ()
    remaining_ms: float = GAME_OVER_DELAY

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def message(self) -> str:
        return "Draw!" if self.is_draw else f"{self.winner.label} Wins!"


class GameSession:
    """
    GameSession is the state machine for one game of connect four.

    It is an explicit object owned by the caller, so several sessions can exist side by side and each can be driven
    directly from tests.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
        game_over_delay: float = GAME_OVER_DELAY,
        cell_size: int = CELL_SIZE,
    ) -> None:
        """
        Initialize a GameSession on the title screen.

        Args:
            board (Board, optional): The board to play on. Defaults to an empty standard board.
            rng (random.Random, optional): Random source for the computer player. Defaults to an unseeded Random.
            log_level (Union[LogLevel, str], optional): The log level for game logging. Defaults to LogLevel.NONE.
            game_over_delay (float, optional): Milliseconds the game-over screen stays up. Defaults to 1000.
            cell_size (int, optional): Width and height of a board cell in pixels. Defaults to 80.
        """
        if game_over_delay < 0:
            raise errors.ConfigurationError(f"game_over_delay must not be negative, got {game_over_delay}.")
        if cell_size < 1:
            raise errors.ConfigurationError(f"cell_size must be positive, got {cell_size}.")
        self.log: Logger = Logger(log_level, name="session")
        self.board: Board = board or Board()
        self.game_over_delay: float = game_over_delay
        self.cell_size: int = cell_size
        self.computer: ComputerPlayer = ComputerPlayer(Piece.PLAYER_TWO, rng=rng, log_level=self.log.level)
        self.state: GameState = GameState.TITLE_SCREEN
        self.current_player: Piece = Piece.PLAYER_ONE
        self.mode: Optional[Mode] = None
        self.game_over: Optional[GameOverInfo] = None

    @classmethod
    def new(cls, seed: Optional[int] = None, **kwargs) -> "GameSession":
        """Instantiate a GameSession, seeding the computer player's random choices when a seed is given."""
        if seed is not None:
            kwargs.setdefault("rng", random.Random(seed))
        return cls(**kwargs)

    @property
    def computer_mode(self) -> bool:
        return self.mode is Mode.COMPUTER

    @property
    def winner(self) -> Optional[Piece]:
        return self.game_over.winner if self.game_over else None

    def reset(self) -> None:
        """Clear the board and the outcome, and hand the first move back to PLAYER_ONE."""
        self.board.reset()
        self.current_player = Piece.PLAYER_ONE
        self.mode = None
        self.game_over = None

    # region Frame Updates
    def update(self, frame: Optional[FrameInput] = None, elapsed: float = 0.0) -> list[Sound]:
        """
        Advance the session by one frame.

        Args:
            frame (FrameInput, optional): The input gathered this frame. Defaults to no input.
            elapsed (float, optional): Seconds since the previous frame. Only the game-over countdown uses it.

        Returns the sounds to play for this frame, in order.
        """
        frame = frame or FrameInput()
        if self.state is GameState.TITLE_SCREEN:
            return self._update_title(frame)
        if self.state is GameState.PLAYING:
            if frame.clicked:
                return self.click(*frame.pointer)
            return []
        return self._update_game_over(frame, elapsed)

    def _update_title(self, frame: FrameInput) -> list[Sound]:
        if COMPUTER_MODE_KEY in frame.keys:
            return self.start(Mode.COMPUTER)
        if TWO_PLAYER_MODE_KEY in frame.keys:
            return self.start(Mode.TWO_PLAYER)
        return []

    def _update_game_over(self, frame: FrameInput, elapsed: float) -> list[Sound]:
        if self.game_over.remaining_ms > 0:
            self.game_over.remaining_ms -= elapsed * 1000
        if frame.clicked or self.game_over.remaining_ms <= 0:
            self.log.info("returning to the title screen.")
            self.reset()
            self.state = GameState.TITLE_SCREEN
        return []

    # endregion

    # region Turn Mechanics
    def start(self, mode: Mode) -> list[Sound]:
        """Leave the title screen and begin a game in the given mode."""
        if not isinstance(mode, Mode):
            raise errors.InvalidModeError(f"start(): unknown mode {mode!r}.")
        if self.state is not GameState.TITLE_SCREEN:
            raise errors.InvalidStateError(f"start(): a game can only start from the title screen, not {self.state.value}.")
        self.mode = mode
        self.state = GameState.PLAYING
        self.log.info(f"starting a {mode.value} game.")
        return [Sound.START]

    def column_from_pointer(self, x: float, y: float) -> Optional[int]:
        """Return the board column under the pointer, or None if the pointer is over the footer or off the board."""
        if y > self.board.rows * self.cell_size:
            return None
        col = math.floor(x / self.cell_size)
        return col if col in range(self.board.columns) else None

    def click(self, x: float, y: float) -> list[Sound]:
        """
        Play the current human player's move at the clicked position.

        Clicks outside the board and clicks on full columns are ignored and leave the turn with the same player.
        In computer mode the computer answers immediately, so the human always has the next move.
        """
        if self.state is not GameState.PLAYING:
            raise errors.InvalidStateError(f"click(): moves can only be made while playing, not {self.state.value}.")
        col = self.column_from_pointer(x, y)
        if col is None:
            self.log.verbose(f"ignoring click at ({x}, {y}) outside the board.")
            return []
        if not self.board.place(col, self.current_player):
            self.log.debug(f"column {col + 1} is full; {self.current_player} tries again.")
            return []
        sounds = [Sound.PLACE]
        self.log.debug(f"{self.current_player} played a piece in column {col + 1}.")
        self.log.verbose(f"\n{self.board}")
        if self._check_game_over():
            return sounds

        self.current_player = self.current_player.opponent
        if self.computer_mode and self.current_player is self.computer.piece:
            sounds.extend(self.computer_move())
        return sounds

    def computer_move(self) -> list[Sound]:
        """Let the computer play for PLAYER_TWO, then hand the turn back to PLAYER_ONE unless the game ended."""
        sounds = []
        col = self.computer.move(self.board)
        if col is not None:
            sounds.append(Sound.PLACE)
            self.log.debug(f"{self.computer.piece} played a piece in column {col + 1}.")
            self.log.verbose(f"\n{self.board}")
            if self._check_game_over():
                return sounds
        self.current_player = self.computer.piece.opponent
        return sounds

    def _check_game_over(self) -> bool:
        line: Optional[WinningLine] = winning_line(self.board)
        if line is not None:
            self.finish(line.player, line.cells)
            return True
        if self.board.is_full():
            self.finish(None)
            return True
        return False

    def finish(self, winner: Optional[Piece], line: tuple[tuple[int, int], ...] = ()) -> None:
        """Move to the game-over screen and start its countdown."""
        self.game_over = GameOverInfo(winner=winner, line=tuple(line), remaining_ms=self.game_over_delay)
        self.state = GameState.GAME_OVER
        self.log.info("game finished:", self.game_over.message())
        self.log.verbose(f"\n{self.board.highlighted_str(line)}")

    # endregion
