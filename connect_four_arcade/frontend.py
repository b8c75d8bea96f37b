"""
The pygame frontend: it opens the window, turns pygame events into FrameInput, plays sound triggers and draws Scenes.

Nothing in the game logic imports this module, so the rest of the package can be used and tested without a display.
"""
import math
from array import array
from pathlib import Path
from typing import Iterable, Optional, Union

import pygame

from .logger import Logger, LogLevel
from .scene import TITLE, Scene, describe, window_size
from .session import COMPUTER_MODE_KEY, FPS, TWO_PLAYER_MODE_KEY, FrameInput, GameSession, Sound

# region Globals
RESOURCES_DIR = Path(__file__).parent / "resources"
SOUND_FILES: dict[Sound, tuple[str, float]] = {
    # file name, frequency of the tone used when the file is missing
    Sound.PLACE: ("soundplace.wav", 330.0),
    Sound.START: ("soundstart.wav", 660.0),
}
KEY_NAMES: dict[int, str] = {
    pygame.K_1: COMPUTER_MODE_KEY,
    pygame.K_KP1: COMPUTER_MODE_KEY,
    pygame.K_2: TWO_PLAYER_MODE_KEY,
    pygame.K_KP2: TWO_PLAYER_MODE_KEY,
}
# endregion


def collect_input(events: Iterable[pygame.event.Event], pointer: tuple[int, int]) -> tuple[FrameInput, bool]:
    """
    Fold one frame's pygame events into a FrameInput.

    Returns the FrameInput and whether the player asked to quit (closing the window or pressing Escape).
    """
    clicked, quit_requested = False, False
    keys = set()
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                quit_requested = True
            elif event.key in KEY_NAMES:
                keys.add(KEY_NAMES[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicked = True
            pointer = event.pos
    return FrameInput(pointer=tuple(pointer), clicked=clicked, keys=frozenset(keys)), quit_requested


def make_tone(frequency: float, duration: float = 0.15, volume: float = 0.2) -> Optional[pygame.mixer.Sound]:
    """Generate a sine tone matching the mixer's format. Returns None if the mixer can't take it."""
    settings = pygame.mixer.get_init()
    if settings is None:
        return None
    sample_rate, size, channels = settings
    if abs(size) != 16:
        return None
    amplitude = int(32767 * volume)
    samples = array("h")
    for i in range(int(sample_rate * duration)):
        value = int(amplitude * math.sin(2.0 * math.pi * frequency * i / sample_rate))
        samples.extend([value] * channels)
    return pygame.mixer.Sound(buffer=samples.tobytes())


class SoundBank:
    """SoundBank loads the game's sounds once and plays them on request. It stays silent if audio isn't available."""

    def __init__(
        self,
        directory: Path = RESOURCES_DIR,
        muted: bool = False,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
    ) -> None:
        self.log: Logger = Logger(log_level, name="audio")
        self.sounds: dict[Sound, pygame.mixer.Sound] = {}
        self.enabled: bool = False
        if muted:
            self.log.info("sound is muted.")
            return
        try:
            pygame.mixer.init()
        except pygame.error:
            self.log.warning("the audio device could not be opened; playing without sound.")
            return
        self.enabled = True
        for sound, (filename, frequency) in SOUND_FILES.items():
            loaded = self.load(directory / filename, frequency)
            if loaded is not None:
                self.sounds[sound] = loaded

    def load(self, path: Path, frequency: float) -> Optional[pygame.mixer.Sound]:
        if path.is_file():
            try:
                return pygame.mixer.Sound(str(path))
            except pygame.error:
                self.log.error(f"{path} could not be loaded.")
        self.log.info(f"{path.name} not available; using a generated tone.")
        try:
            return make_tone(frequency)
        except pygame.error:
            self.log.error(f"a tone for {path.name} could not be generated.")
            return None

    def play(self, sound: Sound) -> None:
        loaded = self.sounds.get(sound)
        if loaded is not None:
            loaded.play()

    def close(self) -> None:
        self.sounds.clear()
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False


class Fonts:
    """A cache of pygame's default font at each size a Scene asks for."""

    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]


def draw_scene(surface: pygame.Surface, scene: Scene, fonts: Fonts) -> None:
    surface.fill(scene.background)
    for rect in scene.rects:
        pygame.draw.rect(
            surface, rect.color, pygame.Rect(rect.x, rect.y, rect.width, rect.height), 1 if rect.outline else 0
        )
    for text in scene.texts:
        rendered = fonts.get(text.size).render(text.content, True, text.color)
        x = text.x - rendered.get_width() // 2 if text.centered else text.x
        surface.blit(rendered, (x, text.y))


def run(
    session: GameSession,
    fps: int = FPS,
    muted: bool = False,
    sound_dir: Path = RESOURCES_DIR,
    log_level: Union[LogLevel, str] = LogLevel.NONE,
) -> int:
    """
    Open the window and pump frames into the session until the window is closed.

    Returns the process exit code: 0 after a normal close, 1 if the window could not be opened.
    """
    log = Logger(log_level, name="frontend")
    pygame.init()
    try:
        surface = pygame.display.set_mode(window_size(session))
    except pygame.error:
        log.error("the game window could not be opened.")
        pygame.quit()
        return 1
    pygame.display.set_caption(TITLE)
    sounds = SoundBank(sound_dir, muted=muted, log_level=log_level)
    fonts = Fonts()
    clock = pygame.time.Clock()
    log.info(f"running at {fps} frames per second.")
    try:
        while True:
            elapsed = clock.tick(fps) / 1000.0
            frame, quit_requested = collect_input(pygame.event.get(), pygame.mouse.get_pos())
            if quit_requested:
                break
            for sound in session.update(frame, elapsed):
                sounds.play(sound)
            draw_scene(surface, describe(session), fonts)
            pygame.display.flip()
    finally:
        sounds.close()
        pygame.quit()
    log.info("window closed.")
    return 0
