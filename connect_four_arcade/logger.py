from enum import IntEnum, auto
from traceback import format_exc
from typing import Union


class LogLevel(IntEnum):
    NONE = auto()
    INFO = auto()
    DEBUG = auto()
    VERBOSE = auto()

    @classmethod
    def parse(cls, level: Union[str, "LogLevel"]) -> "LogLevel":
        """Return the LogLevel for a level or its (case-insensitive) name."""
        if isinstance(level, cls):
            return level
        try:
            return cls[str(level).upper()]
        except KeyError:
            names = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown log level '{level}'. Expected one of: {names}.") from None


class Logger:
    """Logger is a class for logging messages to the console host with consistent formatting."""

    def __init__(self, level: Union[str, LogLevel] = LogLevel.NONE, name: str = ""):
        self.level = LogLevel.parse(level)
        self.name = name

    def _emit(self, tag: str, *message) -> None:
        prefix = [tag] if tag else []
        if self.name:
            prefix.append(f"{self.name}:")
        print(*prefix, *message)

    def normal(self, *message):
        self._emit('', *message)

    def error(self, *message):
        self._emit('[ERROR]', *message)
        trace = format_exc()
        if not trace.startswith('NoneType: None'):
            print(trace)

    def warning(self, *message):
        self._emit('[WARNING]', *message)

    def info(self, *message):
        if self.level >= LogLevel.INFO:
            self._emit('[INFO]', *message)

    def debug(self, *message):
        if self.level >= LogLevel.DEBUG:
            self._emit('[DEBUG]', *message)

    def verbose(self, *message):
        if self.level >= LogLevel.VERBOSE:
            self._emit('[VERBOSE]', *message)
