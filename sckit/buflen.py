"""Encoded sizes of values written by :class:`sckit.buffer.Buffer`."""

from __future__ import annotations

_LEN_PREFIX = 8
_TERMINATOR = 1


def str_len(value: str | bytes | None) -> int:
    """Bytes that ``Buffer.put_str(value)`` writes.

    A string takes an 8-byte length, its UTF-8 bytes and a NUL byte;
    ``None`` takes the length prefix only.
    """
    if value is None:
        return _LEN_PREFIX
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return _LEN_PREFIX + len(raw) + _TERMINATOR


def blob_len(data) -> int:
    """Bytes that ``Buffer.put_blob(data)`` writes: an 8-byte length and the data."""
    return _LEN_PREFIX + len(bytes(data))