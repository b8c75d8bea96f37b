import argparse
from typing import Optional, Sequence

from . import errors
from .logger import Logger, LogLevel
from .session import FPS, GAME_OVER_DELAY, GameSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="c4-arcade",
        description="Play Connect Four against a friend or a simple computer opponent.",
    )
    parser.add_argument(
        "--log-level",
        default=LogLevel.NONE.name,
        type=str.upper,
        choices=[level.name for level in LogLevel],
        help="How much to print to the console (default: %(default)s).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer player's random moves.")
    parser.add_argument("--fps", type=int, default=FPS, help="Frames per second (default: %(default)s).")
    parser.add_argument(
        "--delay",
        type=float,
        default=GAME_OVER_DELAY,
        help="Milliseconds the game-over screen stays up (default: %(default)s).",
    )
    parser.add_argument("--mute", action="store_true", help="Play without sound.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse and validate the command line."""
    args = build_parser().parse_args(argv)
    if args.fps < 1:
        raise errors.ConfigurationError(f"--fps must be at least 1, got {args.fps}.")
    if args.delay < 0:
        raise errors.ConfigurationError(f"--delay must not be negative, got {args.delay}.")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the game window. Returns the process exit code."""
    log = Logger(LogLevel.NONE)
    try:
        args = parse_args(argv)
        log = Logger(args.log_level)
        session = GameSession.new(seed=args.seed, log_level=args.log_level, game_over_delay=args.delay)
    except errors.ConfigurationError as e:
        log.normal(f"c4-arcade: {e}")
        return 2

    from .frontend import run

    return run(session, fps=args.fps, muted=args.mute, log_level=log.level)


if __name__ == "__main__":
    raise SystemExit(main())
