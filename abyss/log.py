"""Coloured, thread-safe logging with optional buffering and callbacks."""

from __future__ import annotations

import sys
import threading
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TextIO


class ELogColor(Enum):
    """ANSI colour codes used for each log level."""

    GREY = 0
    CYAN = 36
    YELLOW = 33
    RED = 91


class ELogLevel(Enum):
    """Severity of a log message; values match their colour codes."""

    LOG = 0
    DEBUG = 36
    WARN = 33
    ERR = 91
    ASSERT = 91


@dataclass(frozen=True)
class LogMsg:
    """A formatted log line together with its level."""

    level: ELogLevel
    text: str

    def color(self) -> ELogColor:
        return ELogColor(self.level.value)


Callback = Callable[[LogMsg], None]


class Logger:
    """Writes log lines to a log stream and an error stream.

    In buffered mode messages are queued until ``flush`` is called.
    """

    def __init__(
        self,
        log_stream: TextIO | None = None,
        err_stream: TextIO | None = None,
        buffered: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._log_stream = log_stream
        self._err_stream = err_stream
        self._buffered = buffered
        self._callbacks: dict[int, Callback] = {}
        self._next_callback = 0
        self._pending: deque[LogMsg] = deque()

    def set_streams(
        self, log_stream: TextIO | None = None, err_stream: TextIO | None = None
    ) -> None:
        with self._lock:
            self._log_stream = log_stream
            self._err_stream = err_stream

    def add_callback(self, callback: Callback) -> int:
        """Register a callback and return an id for ``remove_callback``."""
        with self._lock:
            idx = self._next_callback
            self._next_callback += 1
            self._callbacks[idx] = callback
            return idx

    def remove_callback(self, idx: int) -> None:
        with self._lock:
            try:
                del self._callbacks[idx]
            except KeyError:
                raise KeyError(f"no log callback with id {idx}") from None

    def flush(self) -> None:
        """Write out any queued messages and flush both streams."""
        with self._lock:
            while self._pending:
                self._emit(self._pending.popleft())
            for stream in {id(s): s for s in (self._out(), self._err())}.values():
                stream.flush()

    def log(self, fmt: str, *args: object) -> None:
        self._print("LOG", ELogColor.GREY, fmt, args)

    def warn(self, fmt: str, *args: object) -> None:
        self._print("WRN", ELogColor.YELLOW, fmt, args)

    def error(self, fmt: str, *args: object) -> None:
        self._print("ERR", ELogColor.RED, fmt, args)

    def assert_(self, fmt: str, *args: object) -> None:
        if __debug__:
            self._print("AST", ELogColor.RED, fmt, args)

    def debug(self, fmt: str, *args: object) -> None:
        if __debug__:
            self._print("DBG", ELogColor.CYAN, fmt, args)

    def time_date_now_header(self) -> str:
        return f"[{self.time_date_now()}]"

    def time_date_now(self) -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def _out(self) -> TextIO:
        return sys.stderr if self._log_stream is None else self._log_stream

    def _err(self) -> TextIO:
        return sys.stderr if self._err_stream is None else self._err_stream

    def _print(self, context: str, color: ELogColor, fmt: str, args: tuple) -> None:
        with self._lock:
            text = f"{self.time_date_now_header()}[{context}]   {fmt.format(*args)}"
            msg = LogMsg(ELogLevel(color.value), text)
            if self._buffered:
                self._pending.append(msg)
            else:
                self._emit(msg)

    def _emit(self, msg: LogMsg) -> None:
        if msg.level in (ELogLevel.LOG, ELogLevel.DEBUG):
            stream = self._out()
        else:
            stream = self._err()
        stream.write(f"\033[{msg.color().value}m{msg.text}\033[0m\n")
        for callback in list(self._callbacks.values()):
            callback(msg)


def format_vec(values: Iterable[float | int]) -> str:
    """Format vector components as ``(a, b, ...)``; floats get six decimals."""
    parts = (f"{v:f}" if isinstance(v, float) else str(v) for v in values)
    return "(" + ", ".join(parts) + ")"