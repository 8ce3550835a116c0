"""Console and file logging with caller file and line information."""

from __future__ import annotations

import enum
import inspect
import os
import sys
import threading
import time
from typing import Any, Optional, TextIO, Tuple, Union

_COLORS = {
    "Log": "\x1b[34m",
    "Warning": "\x1b[33m",
    "Error": "\x1b[31m",
}
_RESET = "\x1b[0m"
_STAMP_FORMAT = "%Y-%m-%d %I:%M:%S"


class Severity(enum.Enum):
    """Severity of a file log entry."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    FATAL_ERROR = 3

    @property
    def label(self) -> str:
        """The fixed-width label written to log files."""
        return _LABELS[self]


_LABELS = {
    Severity.INFO: "Info         ",
    Severity.WARNING: "Warning      ",
    Severity.ERROR: "Error!       ",
    Severity.FATAL_ERROR: "Fatal Error! ",
}


def get_file_name(path: str) -> str:
    """Return the part of ``path`` after its last separator.

    A separator in the very first position is not considered.
    """
    for index in range(len(path) - 1, 0, -1):
        if path[index] in "/\\":
            return path[index + 1:]
    return path


def _caller() -> Tuple[str, int]:
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>", 0
    return frame.f_code.co_filename, frame.f_lineno


def _stamp() -> str:
    return time.strftime(_STAMP_FORMAT, time.localtime())


class Logger:
    """Writes printf-style messages headed by the caller's file and line."""

    _lock = threading.Lock()

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        show_file_name: bool = True,
        colored: bool = False,
    ) -> None:
        self.stream = stream
        self.show_file_name = show_file_name
        self.colored = colored

    def _emit(self, kind: str, message: str, args: Tuple[Any, ...], origin: Tuple[str, int]) -> None:
        text = message % args if args else message
        color, reset = (_COLORS[kind], _RESET) if self.colored else ("", "")
        filename, line = origin
        if self.show_file_name:
            header = f"{get_file_name(filename)} (line {line}) {kind}: "
        else:
            header = f"{kind}: "
        with self._lock:
            stream = self.stream if self.stream is not None else sys.stdout
            stream.write(f"{color}{header}\n{reset}[{_stamp()}]: {text}\n")
            stream.flush()

    def log(self, message: str, *args: Any) -> None:
        """Write an informational message."""
        self._emit("Log", message, args, _caller())

    def warning(self, message: str, *args: Any) -> None:
        """Write a warning."""
        self._emit("Warning", message, args, _caller())

    def error(self, message: str, *args: Any) -> None:
        """Write an error."""
        self._emit("Error", message, args, _caller())

    def file_log(
        self,
        path: Union[str, "os.PathLike[str]"],
        message: str,
        severity: Severity = Severity.INFO,
    ) -> None:
        """Append one timestamped line for ``message`` to the file at ``path``."""
        filename, line = _caller()
        entry = f"[{_stamp()}]{severity.label}{get_file_name(filename)}:{line}: {message}\n"
        with self._lock, open(path, "a", encoding="utf-8") as handle:
            handle.write(entry)