"""Callback-driven parser for INI-style configuration text.

Each ``key = value`` (or ``key : value``) line is passed to a callback
together with its line number and the current ``[section]``. A line that
starts with whitespace right after a key/value line continues it: the
callback receives the same key again with the new value. Comments start
with ``;`` or ``#`` at the beginning of a line or after a space.
"""

from __future__ import annotations

import os
import re
from typing import Callable, Iterable

MAX_LINE_LEN = 1024
"""Lines longer than ``MAX_LINE_LEN - 1`` characters are silently truncated."""

_MAX_NAME_LEN = 255
_WHITESPACE = " \t\n\v\f\r"
_BOM = "\ufeff"
_COMMENT = re.compile(r" [;#]")
_SEPARATOR = re.compile(r"[=:]")

OnItem = Callable[[int, str, str, str], object]


class IniError(Exception):
    """Base class of parse errors; ``line`` is the 1-based line number."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


class IniSyntaxError(IniError):
    """Raised for a line that is neither a section, a key nor a continuation."""


class IniCallbackError(IniError):
    """Raised when the callback raised; the original error is the cause."""


def _strip_comment(text: str) -> str:
    if not text or text[0] in ";#":
        return ""
    match = _COMMENT.search(text)
    return text[:match.start() + 1] if match else text


def _emit(on_item: OnItem, line: int, section: str, key: str, value: str) -> None:
    try:
        on_item(line, section, key, value)
    except Exception as exc:
        raise IniCallbackError(f"callback failed: {exc}", line) from exc


def parse_lines(lines: Iterable[str], on_item: OnItem) -> None:
    """Parse ``lines`` and call ``on_item(line, section, key, value)`` per item.

    Raises :class:`IniSyntaxError` on a malformed line and
    :class:`IniCallbackError` if ``on_item`` raises; parsing stops there.
    """
    section = ""
    key = ""

    for number, raw in enumerate(lines, start=1):
        if raw.endswith("\n"):
            raw = raw[:-1]
        text = raw.split("\0", 1)[0][:MAX_LINE_LEN - 1]
        if number == 1 and text.startswith(_BOM):
            text = text[len(_BOM):]

        uncommented = _strip_comment(text)
        head = uncommented.strip(_WHITESPACE)
        if not head:
            continue

        indented = uncommented[0] in _WHITESPACE

        if indented and key:
            _emit(on_item, number, section, key, head)
        elif head.startswith("["):
            end = head.find("]")
            if end < 0:
                raise IniSyntaxError("unterminated section header", number)
            key = ""
            section = head[1:end][:_MAX_NAME_LEN]
        else:
            match = _SEPARATOR.search(head)
            if match is None:
                raise IniSyntaxError("expected '=' or ':'", number)
            name = head[:match.start()].strip(_WHITESPACE)
            key = name[:_MAX_NAME_LEN]
            value = head[match.start() + 1:].strip(_WHITESPACE)
            _emit(on_item, number, section, name, value)


def parse_string(text: str | None, on_item: OnItem) -> None:
    """Parse INI text; ``None`` or an empty string produces no items."""
    if not text:
        return
    text = text.split("\0", 1)[0]
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    parse_lines(lines, on_item)


def parse_file(path: str | os.PathLike, on_item: OnItem) -> None:
    """Parse the INI file at ``path``; I/O failures raise :class:`OSError`."""
    with open(path, "rb") as fp:
        parse_lines(
            (raw.decode("utf-8", "surrogateescape") for raw in fp), on_item
        )