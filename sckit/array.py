"""Dynamic array with ordered and unordered deletion and an optional size cap."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator


class Array:
    """A growable sequence of values.

    With ``max_size`` set, :meth:`add` raises :class:`MemoryError` once the
    array holds that many elements; the array is left unchanged and further
    adds succeed again after elements are deleted.
    """

    __slots__ = ("_items", "_max_size")

    def __init__(self, items: Iterable[Any] = (), max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._items: list[Any] = []
        for item in items:
            self.add(item)

    @property
    def max_size(self) -> int | None:
        return self._max_size

    def add(self, value: Any) -> None:
        """Append ``value``."""
        if self._max_size is not None and len(self._items) >= self._max_size:
            raise MemoryError(f"array is full ({self._max_size} elements)")
        self._items.append(value)

    def _index(self, index: int) -> int:
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("array index out of range")
        return index

    def delete(self, index: int) -> None:
        """Remove the element at ``index``, keeping the order of the rest."""
        position = self._index(index)
        self._items.pop(position)

    def delete_unordered(self, index: int) -> None:
        """Remove the element at ``index`` by moving the last element into its place."""
        index = self._index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def delete_last(self) -> None:
        """Remove the last element."""
        if not self._items:
            raise IndexError("delete from empty array")
        self._items.pop()

    def last(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("empty array has no last element")
        return self._items[-1]

    def sort(self, key: Callable[[Any], Any] | None = None) -> None:
        """Sort the elements in place."""
        self._items.sort(key=key)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._index(index)]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Array({self._items!r})"