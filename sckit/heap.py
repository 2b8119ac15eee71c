"""Binary min-heap of (key, data) pairs ordered by integer key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HeapItem:
    key: int
    data: Any = None


class Heap:
    """Min-heap: :meth:`pop` returns the item with the smallest key.

    For a max-heap, negate keys when adding and after popping.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Heap(size={len(self._items)})"

    def add(self, key: int, data: Any = None) -> None:
        """Insert ``data`` with priority ``key``."""
        items = self._items
        item = HeapItem(key, data)
        items.append(item)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if key >= items[parent].key:
                break
            items[i] = items[parent]
            i = parent
        items[i] = item

    def peek(self) -> HeapItem | None:
        """Return the top item without removing it; ``None`` if empty."""
        return self._items[0] if self._items else None

    def pop(self) -> HeapItem | None:
        """Remove and return the top item; ``None`` if empty."""
        items = self._items
        if not items:
            return None
        top = items[0]
        last = items.pop()
        size = len(items)
        if size:
            i = 0
            child = 1
            while child < size:
                if child + 1 < size and items[child].key > items[child + 1].key:
                    child += 1
                if last.key <= items[child].key:
                    break
                items[i] = items[child]
                i = child
                child = 2 * i + 1
            items[i] = last
        return top

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()