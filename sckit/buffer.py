"""Growable byte buffer with little-endian encoding of integers, floats,
length-prefixed strings and blobs.

Data is written at the write position and read from the read position.
Reading past the written data or writing past the capacity raises
:class:`BufCorruptError`; failing to grow raises :class:`BufFullError`.
"""

from __future__ import annotations

import struct

PAGE_SIZE = 4096
BUF_MAX = (1 << 64) - 1 - PAGE_SIZE
NULL_LEN = BUF_MAX

_U64 = struct.Struct("<Q")
_DOUBLE = struct.Struct("<d")


class BufError(Exception):
    """Base class of buffer errors."""


class BufCorruptError(BufError):
    """Raised on underflow, overflow or an invalid position."""


class BufFullError(BufError):
    """Raised when the buffer cannot grow to hold more data."""


def _round_up(length: int) -> int:
    return (length + PAGE_SIZE - 1) // PAGE_SIZE * PAGE_SIZE


class Buffer:
    """A byte buffer with separate read and write positions.

    While a view returned by :meth:`writable` is alive the buffer cannot
    grow; release the view (or use it in a ``with`` block) before writing.
    """

    __slots__ = ("_mem", "_limit", "_rpos", "_wpos", "_fixed")

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._mem = bytearray(capacity)
        self._limit = BUF_MAX
        self._rpos = 0
        self._wpos = 0
        self._fixed = False

    @classmethod
    def wrap(cls, data, *, fixed: bool = False, filled: bool = False) -> "Buffer":
        """Build a buffer over ``data``.

        A ``bytearray`` is used in place; anything else is copied. With
        ``fixed`` the buffer never grows. With ``filled`` the whole of
        ``data`` counts as written and can be read back.
        """
        buf = cls()
        buf._mem = data if isinstance(data, bytearray) else bytearray(data)
        buf._fixed = fixed
        buf._limit = len(buf._mem) if fixed else BUF_MAX
        buf._wpos = len(buf._mem) if filled else 0
        return buf

    # -- state ---------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._mem)

    @property
    def limit(self) -> int:
        """Largest capacity the buffer may grow to."""
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        self._limit = value

    @property
    def read_pos(self) -> int:
        return self._rpos

    @read_pos.setter
    def read_pos(self, pos: int) -> None:
        if pos < 0 or pos > self._wpos:
            raise BufCorruptError(f"read position {pos} beyond written data")
        self._rpos = pos

    @property
    def write_pos(self) -> int:
        return self._wpos

    @write_pos.setter
    def write_pos(self, pos: int) -> None:
        if pos < 0 or pos > len(self._mem):
            raise BufCorruptError(f"write position {pos} beyond capacity")
        self._wpos = pos

    @property
    def quota(self) -> int:
        """Bytes that can be written without growing."""
        return len(self._mem) - self._wpos

    def __len__(self) -> int:
        return self._wpos - self._rpos

    def __repr__(self) -> str:
        return (
            f"Buffer(capacity={self.capacity}, read_pos={self._rpos}, "
            f"write_pos={self._wpos}, fixed={self._fixed})"
        )

    # -- memory management ----------------------------------------------

    def reserve(self, length: int) -> None:
        """Make room for ``length`` more bytes at the write position."""
        cap = len(self._mem)
        if self._wpos + length <= cap:
            return
        if self._fixed:
            raise BufFullError("fixed buffer has no room")
        size = _round_up(cap + length)
        if size > self._limit or cap >= BUF_MAX - PAGE_SIZE:
            raise BufFullError(f"buffer cannot grow to {size} bytes")
        self._mem.extend(bytes(size - cap))

    def shrink(self, length: int) -> None:
        """Compact, then resize to ``length`` rounded up to a page.

        Nothing changes if ``length`` exceeds the capacity, if the data
        does not fit in ``length`` bytes, or if the buffer is fixed.
        """
        self.compact()
        cap = len(self._mem)
        if self._fixed or length > cap or self._wpos >= length:
            return
        size = _round_up(length)
        if size < cap:
            del self._mem[size:]
        else:
            self._mem.extend(bytes(size - cap))

    def clear(self) -> None:
        """Discard all data, keeping the memory."""
        self._rpos = 0
        self._wpos = 0

    def compact(self) -> None:
        """Move unread data to the start of the buffer."""
        if self._rpos == self._wpos:
            self._rpos = 0
            self._wpos = 0
        if self._rpos:
            count = self._wpos - self._rpos
            self._mem[:count] = self._mem[self._rpos:self._wpos]
            self._rpos = 0
            self._wpos = count

    def mark_read(self, length: int) -> None:
        """Advance the read position by ``length`` bytes."""
        self._check_read(self._rpos, length)
        self._rpos += length

    def mark_write(self, length: int) -> None:
        """Advance the write position after filling :meth:`writable`."""
        self._check_write(self._wpos, length)
        self._wpos += length

    def readable(self) -> bytes:
        """Copy of the unread bytes."""
        return bytes(self._mem[self._rpos:self._wpos])

    def writable(self) -> memoryview:
        """Writable view of the space after the write position."""
        return memoryview(self._mem)[self._wpos:]

    def move_from(self, src: "Buffer") -> None:
        """Copy as many unread bytes of ``src`` as fit without growing."""
        count = min(self.quota, len(src))
        self.put_raw(src._mem[src._rpos:src._rpos + count])
        src._rpos += count

    # -- checks ----------------------------------------------------------

    def _check_read(self, pos: int, length: int) -> None:
        if pos < 0 or length < 0 or pos + length > self._wpos:
            raise BufCorruptError(
                f"cannot read {length} bytes at {pos}, only {self._wpos} written"
            )

    def _check_write(self, pos: int, length: int) -> None:
        if pos < 0 or length < 0 or pos + length > len(self._mem):
            raise BufCorruptError(
                f"cannot write {length} bytes at {pos}, capacity is {len(self._mem)}"
            )

    # -- peek ------------------------------------------------------------

    def _peek_int(self, pos: int | None, size: int) -> int:
        if pos is None:
            pos = self._rpos
        self._check_read(pos, size)
        return int.from_bytes(self._mem[pos:pos + size], "little")

    def peek_8(self, pos: int | None = None) -> int:
        return self._peek_int(pos, 1)

    def peek_16(self, pos: int | None = None) -> int:
        return self._peek_int(pos, 2)

    def peek_32(self, pos: int | None = None) -> int:
        return self._peek_int(pos, 4)

    def peek_64(self, pos: int | None = None) -> int:
        return self._peek_int(pos, 8)

    def peek_data(self, pos: int, length: int) -> bytes:
        """Return ``length`` written bytes at ``pos`` without reading them."""
        self._check_read(pos, length)
        return bytes(self._mem[pos:pos + length])

    # -- set (no growth, positions unchanged) ----------------------------

    def _set_int(self, pos: int, value: int, size: int) -> None:
        raw = value.to_bytes(size, "little")
        self._check_write(pos, size)
        self._mem[pos:pos + size] = raw

    def set_8(self, pos: int, value: int) -> None:
        self._set_int(pos, value, 1)

    def set_16(self, pos: int, value: int) -> None:
        self._set_int(pos, value, 2)

    def set_32(self, pos: int, value: int) -> None:
        self._set_int(pos, value, 4)

    def set_64(self, pos: int, value: int) -> None:
        self._set_int(pos, value, 8)

    def set_data(self, pos: int, data) -> None:
        """Overwrite bytes at ``pos`` within the current capacity."""
        raw = bytes(data)
        self._check_write(pos, len(raw))
        self._mem[pos:pos + len(raw)] = raw

    # -- get (advance read position) -------------------------------------

    def _get_int(self, size: int) -> int:
        value = self._peek_int(self._rpos, size)
        self._rpos += size
        return value

    def get_bool(self) -> bool:
        return bool(self._get_int(1))

    def get_8(self) -> int:
        return self._get_int(1)

    def get_16(self) -> int:
        return self._get_int(2)

    def get_32(self) -> int:
        return self._get_int(4)

    def get_64(self) -> int:
        return self._get_int(8)

    def get_double(self) -> float:
        self._check_read(self._rpos, 8)
        (value,) = _DOUBLE.unpack_from(self._mem, self._rpos)
        self._rpos += 8
        return value

    def get_str(self) -> str | None:
        """Read a string written by :meth:`put_str`; ``None`` if one was put."""
        length = self.peek_64()
        start = self._rpos + 8
        if length == NULL_LEN:
            self._rpos = start
            return None
        self._check_read(start, length + 1)
        try:
            text = self._mem[start:start + length].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BufCorruptError("string is not valid UTF-8") from exc
        self._rpos = start + length + 1
        return text

    def get_blob(self, length: int) -> bytes | None:
        """Read ``length`` raw bytes; ``None`` when ``length`` is zero."""
        if length == 0:
            return None
        return self.get_data(length)

    def get_data(self, length: int) -> bytes:
        """Read exactly ``length`` raw bytes."""
        data = self.peek_data(self._rpos, length)
        self._rpos += length
        return data

    # -- put (grow as needed, advance write position) --------------------

    def _put(self, raw: bytes) -> None:
        self.reserve(len(raw))
        self._mem[self._wpos:self._wpos + len(raw)] = raw
        self._wpos += len(raw)

    def put_raw(self, data) -> None:
        """Append raw bytes."""
        self._put(bytes(data))

    def put_bool(self, value: bool) -> None:
        self._put(b"\x01" if value else b"\x00")

    def put_8(self, value: int) -> None:
        self._put(value.to_bytes(1, "little"))

    def put_16(self, value: int) -> None:
        self._put(value.to_bytes(2, "little"))

    def put_32(self, value: int) -> None:
        self._put(value.to_bytes(4, "little"))

    def put_64(self, value: int) -> None:
        self._put(value.to_bytes(8, "little"))

    def put_double(self, value: float) -> None:
        self._put(_DOUBLE.pack(value))

    def put_str(self, value: str | bytes | None) -> None:
        """Append ``[8-byte length][bytes][NUL]``; ``None`` stores the length only."""
        if value is None:
            self.put_64(NULL_LEN)
            return
        raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        if len(raw) >= BUF_MAX:
            raise BufCorruptError("string too long")
        self._put(_U64.pack(len(raw)) + raw + b"\x00")

    def put_fmt(self, fmt: str, *args) -> None:
        """Append ``fmt % args`` as a length-prefixed string."""
        self.put_str(fmt % args)

    def put_text(self, fmt: str, *args) -> None:
        """Append ``fmt % args`` as NUL-terminated text, joining it to earlier text.

        If the buffer cannot hold the text, the write position is reset to
        zero and :class:`BufFullError` is raised.
        """
        raw = (fmt % args).encode("utf-8")
        overlap = 1 if len(self) > 0 else 0
        if len(raw) >= self.quota:
            try:
                self.reserve(len(raw) + 1)
            except BufError:
                self._wpos = 0
                raise
        start = self._wpos - overlap
        self._mem[start:start + len(raw) + 1] = raw + b"\x00"
        self._wpos += len(raw) - overlap + 1

    def put_blob(self, data) -> None:
        """Append ``[8-byte length][bytes]``."""
        raw = bytes(data)
        self._put(_U64.pack(len(raw)) + raw)