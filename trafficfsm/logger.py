"""Log sinks for the traffic light controller."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import IO, Any


class LogLevel(Enum):
    """Severity of a log message."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_PREFIXES = {
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
}


def level_prefix(level: Any) -> str:
    """Return the line prefix for a log level, or an UNKNOWN marker."""
    return _PREFIXES.get(level, "[UNKNOWN] ")


class Logger(ABC):
    """Something that accepts log messages."""

    @abstractmethod
    def log(self, level: LogLevel, message: str) -> None:
        """Record one message at the given level."""


class ConsoleLogger(Logger):
    """Writes log lines to a text stream, standard output by default."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    def log(self, level: LogLevel, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{level_prefix(level)}{message}\n")
        stream.flush()


class FileLogger(Logger):
    """Appends log lines to a file."""

    def __init__(self, filename: str) -> None:
        try:
            self._file: IO[str] | None = open(filename, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Could not open log file: {filename}") from exc

    def log(self, level: LogLevel, message: str) -> None:
        if self._file is not None and not self._file.closed:
            self._file.write(f"{level_prefix(level)}{message}\n")
            self._file.flush()

    def close(self) -> None:
        """Close the underlying file; later messages are dropped."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class MultiLogger(Logger):
    """Forwards every message to each of its loggers in order."""

    def __init__(self) -> None:
        self._loggers: list[Logger] = []

    def add_logger(self, logger: Logger) -> None:
        """Add a logger that will receive every later message."""
        self._loggers.append(logger)

    def log(self, level: LogLevel, message: str) -> None:
        for logger in self._loggers:
            logger.log(level, message)