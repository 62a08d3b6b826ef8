"""Engine errors, precondition checks and console logging."""

from __future__ import annotations

import sys
import traceback
from enum import Enum
from typing import Any


class EngineError(RuntimeError):
    """An error raised by the engine, carrying the stack at the point it was made."""

    def __init__(self, message: str, skip: int = 1) -> None:
        super().__init__(message)
        self.message = message
        stack = traceback.extract_stack()
        if skip > 0:
            stack = stack[:-skip]
        self._trace = "".join(traceback.format_list(stack))

    def stack_trace(self) -> str:
        """The formatted stack captured when the error was created."""
        return self._trace

    def __str__(self) -> str:
        return f"{self.message}\n{self._trace}"


def ensure(predicate: Any, msg: str, *args: Any) -> None:
    """Raise :class:`EngineError` with ``msg`` formatted by ``args`` if ``predicate`` is falsy."""
    if not predicate:
        raise EngineError(msg.format(*args), skip=2)


class Level(Enum):
    """Log severity; the value is the letter printed in the log line."""

    DEBUG = "D"
    INFO = "I"
    WARN = "W"
    FATAL = "E"


def _emit(level: Level, msg: str, args: tuple, frame: Any) -> None:
    text = msg.format(*args)
    print(f"[{level.value}] {frame.f_code.co_filename}:{frame.f_lineno} {text}")


def log(level: Level, msg: str, *args: Any) -> None:
    """Print ``msg`` formatted by ``args`` with the level letter and caller location."""
    _emit(level, msg, args, sys._getframe(1))


def debug(msg: str, *args: Any) -> None:
    _emit(Level.DEBUG, msg, args, sys._getframe(1))


def info(msg: str, *args: Any) -> None:
    _emit(Level.INFO, msg, args, sys._getframe(1))


def warn(msg: str, *args: Any) -> None:
    _emit(Level.WARN, msg, args, sys._getframe(1))


def fatal(msg: str, *args: Any) -> None:
    _emit(Level.FATAL, msg, args, sys._getframe(1))