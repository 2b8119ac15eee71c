"""Thread-safe logger writing to stdout, a rotating file and a callback.

Each line starts with a header of the form
``[YYYY-MM-DD HH:MM:SS][LEVEL][thread name] `` followed by the message.
When the current log file grows past :data:`FILE_SIZE_LIMIT` it is renamed
to the "previous" path and a fresh current file is started.
"""

from __future__ import annotations

import enum
import os
import sys
import threading
import time
from typing import BinaryIO, Callable

FILE_SIZE_LIMIT = 2 * 1024 * 1024

_MAX_PATH_LEN = 255
_MAX_THREAD_NAME_LEN = 31
_DEFAULT_THREAD_NAME = "Thread"

_local = threading.local()


class LogLevel(enum.IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    OFF = 4


LogCallback = Callable[[LogLevel, str], object]


def set_thread_name(name: str) -> None:
    """Set the name printed in log headers for the calling thread."""
    _local.name = name[:_MAX_THREAD_NAME_LEN]


def _thread_name() -> str:
    return getattr(_local, "name", _DEFAULT_THREAD_NAME)


def _header(level: LogLevel) -> str:
    tm = time.localtime()
    return (
        f"[{tm.tm_year}-{tm.tm_mon:02d}-{tm.tm_mday:02d} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}]"
        f"[{level.name:<5}][{_thread_name()}] "
    )


class Logger:
    """Logger with a level filter and up to three destinations.

    By default the level is INFO and lines go to stdout (ERROR lines to
    stderr). File output and a callback can be added at any time.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._level = LogLevel.INFO
        self._to_stdout = True
        self._file: BinaryIO | None = None
        self._prev: str | None = None
        self._current: str | None = None
        self._file_size = 0
        self._callback: LogCallback | None = None
        self._closed = False

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        if not self._closed:
            self.close()

    @property
    def level(self) -> LogLevel:
        return self._level

    def set_level(self, name: str) -> None:
        """Set the level by name, ignoring case: DEBUG, INFO, WARN, ERROR or OFF."""
        try:
            level = LogLevel[name.upper()]
        except KeyError:
            raise ValueError(f"unknown log level: {name!r}") from None
        self._level = level

    def set_stdout(self, enable: bool) -> None:
        """Turn logging to stdout/stderr on or off."""
        with self._lock:
            self._to_stdout = enable

    def set_file(self, prev: str | os.PathLike | None,
                 current: str | os.PathLike | None) -> None:
        """Log into ``current``, rotating it to ``prev`` when it grows too big.

        Passing ``None`` for either path turns file logging off. Any file
        opened earlier is closed first, so on error file logging stays off.
        """
        with self._lock:
            self._close_file()
            if prev is None or current is None:
                return
            prev_path = os.fspath(prev)
            current_path = os.fspath(current)
            if (len(prev_path) >= _MAX_PATH_LEN
                    or len(current_path) >= _MAX_PATH_LEN):
                raise ValueError("log file path is too long")
            fp = open(current_path, "ab")
            try:
                fp.write(b"\n")
                size = fp.tell()
            except OSError:
                fp.close()
                raise
            self._file = fp
            self._prev = prev_path
            self._current = current_path
            self._file_size = size

    def set_callback(self, callback: LogCallback | None) -> None:
        """Also pass each logged ``(level, message)`` to ``callback``; ``None`` removes it."""
        with self._lock:
            self._callback = callback

    def log(self, level: LogLevel, fmt: str, *args) -> None:
        """Log ``fmt % args`` at ``level`` if the level is enabled."""
        if self._closed:
            raise RuntimeError("logger is closed")
        level = LogLevel(level)
        if level < self._level:
            return
        message = fmt % args if args else fmt
        with self._lock:
            if self._to_stdout:
                dest = sys.stderr if level == LogLevel.ERROR else sys.stdout
                dest.write(_header(level) + message)
            if self._file is not None:
                self._write_file(level, message)
            if self._callback is not None:
                self._callback(level, message)

    def debug(self, fmt: str, *args) -> None:
        self.log(LogLevel.DEBUG, fmt, *args)

    def info(self, fmt: str, *args) -> None:
        self.log(LogLevel.INFO, fmt, *args)

    def warn(self, fmt: str, *args) -> None:
        self.log(LogLevel.WARN, fmt, *args)

    def error(self, fmt: str, *args) -> None:
        self.log(LogLevel.ERROR, fmt, *args)

    def close(self) -> None:
        """Close the log file; the logger cannot be used afterwards."""
        with self._lock:
            if self._closed:
                raise RuntimeError("logger already closed")
            self._closed = True
            self._callback = None
            self._close_file()

    def _close_file(self) -> None:
        if self._file is not None:
            fp, self._file = self._file, None
            fp.close()
        self._prev = None
        self._current = None
        self._file_size = 0

    def _write_file(self, level: LogLevel, message: str) -> None:
        assert self._file is not None
        data = message.encode("utf-8")
        self._file.write(_header(level).encode("utf-8"))
        self._file.write(data)
        self._file_size += len(data)

        if self._file_size > FILE_SIZE_LIMIT:
            self._file.close()
            self._file = None
            try:
                os.replace(self._current, self._prev)
            except OSError:
                pass
            self._file = open(self._current, "wb")
            self._file_size = 0