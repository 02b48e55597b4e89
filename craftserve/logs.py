"""A named console logger with levels and chat-colour translation."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum
from typing import Any, Iterable, TextIO

from craftserve.chat import translate_console
from craftserve.funcs import convert_to_string


class LogLevel(IntEnum):
    INFO = 0
    WARN = 1
    FAIL = 2
    DATA = 3


BASIC_LEVEL = (LogLevel.INFO, LogLevel.WARN, LogLevel.FAIL)
EVERY_LEVEL = (LogLevel.INFO, LogLevel.WARN, LogLevel.FAIL, LogLevel.DATA)

_LEVEL_STYLE = {
    LogLevel.INFO: ("INFO", 36),
    LogLevel.WARN: ("WARN", 33),
    LogLevel.FAIL: ("FAIL", 31),
    LogLevel.DATA: ("DATA", 35),
}


def _paint(code: int, text: str) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def _go_format(fmt: str, args: tuple[Any, ...]) -> str:
    fmt = fmt.replace("%v", "%s")
    return fmt % args if args else fmt


class Logging:
    """Writes timestamped, levelled lines for the levels it is set to show."""

    def __init__(
        self,
        name: str,
        writer: TextIO | None = None,
        show: Iterable[LogLevel] = EVERY_LEVEL,
    ) -> None:
        self._name = name
        self._writer = writer
        self._show = tuple(show)

    @property
    def name(self) -> str:
        return self._name

    @property
    def show(self) -> tuple[LogLevel, ...]:
        return self._show

    def _emit(self, level: LogLevel, message: str) -> None:
        label, code = _LEVEL_STYLE[level]
        clock = datetime.now().strftime("%H:%M:%S")
        line = (
            f"[{_paint(92, clock)}] [{_paint(code, label)}] "
            f"[{_paint(37, self._name)}] {translate_console(message)}\n"
        )
        (self._writer or sys.stdout).write(line)

    def _log(self, level: LogLevel, message_factory) -> None:
        if level in self._show:
            self._emit(level, message_factory())

    def info(self, *args: Any) -> None:
        self._log(LogLevel.INFO, lambda: convert_to_string(*args))

    def warn(self, *args: Any) -> None:
        self._log(LogLevel.WARN, lambda: convert_to_string(*args))

    def fail(self, *args: Any) -> None:
        self._log(LogLevel.FAIL, lambda: convert_to_string(*args))

    def data(self, *args: Any) -> None:
        self._log(LogLevel.DATA, lambda: convert_to_string(*args))

    def infof(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.INFO, lambda: _go_format(fmt, args))

    def warnf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.WARN, lambda: _go_format(fmt, args))

    def failf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.FAIL, lambda: _go_format(fmt, args))

    def dataf(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.DATA, lambda: _go_format(fmt, args))