"""Levelled logging to standard output and to a log file."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

GL_LOG_FILE = "gl.log"
DATE_FORMAT = "%y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Message severity; a lower value is more severe."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3

    @property
    def label(self) -> str:
        """Fixed-width label written in front of each message."""
        return _LABELS[self]


_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARNING: "WARN ",
    LogLevel.ERROR: "ERROR",
}


class Logger:
    """Writes each accepted message to a stream and appends it to a file."""

    def __init__(
        self,
        path: Union[str, Path] = GL_LOG_FILE,
        reporting_level: LogLevel = LogLevel.INFO,
        stream: Optional[TextIO] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.path = Path(path)
        self.reporting_level = LogLevel(reporting_level)
        self.stream = stream
        self.clock = clock or datetime.now

    def restart(self) -> None:
        """Empty the log file."""
        self.path.write_text("")

    def _format(self, level: LogLevel, message: str) -> str:
        date = self.clock().strftime(DATE_FORMAT)
        return f"{date} {level.label}: \t{message}"

    def log(self, level: LogLevel, message: str) -> Optional[str]:
        """Log ``message`` at ``level``; return the written line or None if filtered."""
        level = LogLevel(level)
        if level > self.reporting_level:
            return None
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                line = self._format(level, message)
                handle.write(line + "\n")
        except OSError:
            # Without a log file the message still goes to the stream, undecorated.
            line = message
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(line + "\n")
        return line

    def debug(self, message: str) -> Optional[str]:
        """Log at DEBUG level."""
        return self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> Optional[str]:
        """Log at INFO level."""
        return self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> Optional[str]:
        """Log at WARNING level."""
        return self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> Optional[str]:
        """Log at ERROR level."""
        return self.log(LogLevel.ERROR, message)