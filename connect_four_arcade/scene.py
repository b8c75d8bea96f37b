"""Build a description of what to draw for a session. The frontend turns a Scene into pixels."""
from dataclasses import dataclass, field

from .piece import Piece
from .session import FOOTER_HEIGHT, GameSession, GameState

Color = tuple[int, int, int]

# region Globals
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
BLACK: Color = (0, 0, 0)

PIECE_COLORS: dict[Piece, Color] = {
    Piece.EMPTY: BLACK,
    Piece.PLAYER_ONE: RED,
    Piece.PLAYER_TWO: BLUE,
}

TITLE = "Connect Four"
LARGE_TEXT = 40
SMALL_TEXT = 20
# endregion


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int
    color: Color
    outline: bool = False


@dataclass(frozen=True)
class Text:
    """A line of text. When centered is True, x is the horizontal center of the text rather than its left edge."""
    content: str
    x: int
    y: int
    size: int
    color: Color = WHITE
    centered: bool = False


@dataclass
class Scene:
    width: int
    height: int
    background: Color = BLACK
    rects: list[Rect] = field(default_factory=list)
    texts: list[Text] = field(default_factory=list)


def window_size(session: GameSession) -> tuple[int, int]:
    """Return the pixel size of the window: the board plus the footer below it."""
    return session.board.columns * session.cell_size, session.board.rows * session.cell_size + FOOTER_HEIGHT


def describe(session: GameSession) -> Scene:
    """Return the Scene to draw for the session's current state."""
    width, height = window_size(session)
    scene = Scene(width=width, height=height)
    if session.state is GameState.TITLE_SCREEN:
        _title_screen(scene)
    elif session.state is GameState.PLAYING:
        _board(scene, session)
    else:
        _game_over_screen(scene, session)
    return scene


def _title_screen(scene: Scene) -> None:
    mid_x, mid_y = scene.width // 2, scene.height // 2
    scene.texts.append(Text(TITLE, mid_x, mid_y - 40, LARGE_TEXT, centered=True))
    scene.texts.append(Text("Press '1' for Computer Mode", mid_x, mid_y + 10, SMALL_TEXT, centered=True))
    scene.texts.append(Text("Press '2' for Two Player Mode", mid_x, mid_y + 40, SMALL_TEXT, centered=True))


def _board(scene: Scene, session: GameSession) -> None:
    size = session.cell_size
    board = session.board
    for r in range(board.rows):
        for c in range(board.columns):
            x, y = c * size, r * size
            scene.rects.append(Rect(x, y, size, size, PIECE_COLORS[board.grid[r][c]]))
            scene.rects.append(Rect(x, y, size, size, WHITE, outline=True))

    # Column numbers in the footer
    for c in range(board.columns):
        scene.texts.append(Text(str(c + 1), c * size + size // 2 - 10, board.rows * size + 10, SMALL_TEXT))


def _game_over_screen(scene: Scene, session: GameSession) -> None:
    scene.texts.append(
        Text(session.game_over.message(), scene.width // 2, scene.height // 2 - 20, LARGE_TEXT, centered=True)
    )
