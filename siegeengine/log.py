"""Tagged logging to the console and to a log file."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogType(Enum):
    """Kinds of log line; the name is written as the line's label."""

    VERBOSE = 0
    DEBUGGING = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def label(self) -> str:
        return self.name


class Logger:
    """Writes labelled lines to a stream and appends them to a file."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.enabled = False
        self.log_verbose = False
        self.file_path: Path = Path("log.txt")
        self._stream = stream

    def configure(
        self,
        enabled: bool = False,
        log_verbose: bool = False,
        file_path: str | Path = "log.txt",
    ) -> None:
        """Set the configuration and empty the log file."""
        self.enabled = enabled
        self.log_verbose = log_verbose
        self.file_path = Path(file_path)
        self.file_path.open("w", encoding="utf-8").close()

    def can_log(self, log_type: LogType) -> bool:
        """Tell whether a line of this type would be written."""
        return self.enabled and (log_type is not LogType.VERBOSE or self.log_verbose)

    def log(self, log_type: LogType, *args: object) -> None:
        """Write one line made of the arguments, prefixed by the type's label."""
        if not self.can_log(log_type):
            return
        line = f"[{log_type.label}] " + "".join(str(arg) for arg in args) + "\n"
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line)
        stream.flush()
        with self.file_path.open("a", encoding="utf-8") as handle:
            handle.write(line)


logger = Logger()