"""CRC-32C (Castagnoli) checksum, computable over several pieces."""

from __future__ import annotations

_POLY = 0x82F63B78
_MASK = 0xFFFFFFFF


def _make_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        crc = n
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


def crc32c(data, crc: int = 0) -> int:
    """Return the CRC-32C of ``data``.

    Pass the result of a previous call as ``crc`` to continue a checksum
    over data supplied in pieces; start with zero.
    """
    if not isinstance(data, (bytes, bytearray)):
        data = bytes(data)
    table = _TABLE
    value = ~crc & _MASK
    for byte in data:
        value = table[(value ^ byte) & 0xFF] ^ (value >> 8)
    return value ^ _MASK