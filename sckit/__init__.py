"""Small building blocks: byte buffer, CRC-32C, heap, INI parser, linked list, logger, condition and array."""

__version__ = "2.0.0"

__all__ = [
    "array",
    "buffer",
    "buflen",
    "cond",
    "crc32",
    "heap",
    "ini",
    "linkedlist",
    "log",
]