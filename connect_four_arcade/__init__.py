"""Connect Four with a title screen, two-player and computer modes, and a game-over screen."""
from .board import Board
from .piece import Piece
from .session import FrameInput, GameSession, GameState, Mode, Sound

__all__ = ["Board", "FrameInput", "GameSession", "GameState", "Mode", "Piece", "Sound"]
