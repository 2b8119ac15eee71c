"""Circular doubly linked list of explicit nodes.

A node belongs to at most one list. Adding a node that is already linked
first removes it from wherever it is, so a node is never present twice.
"""

from __future__ import annotations

from typing import Any, Iterator


class ListNode:
    """A list node carrying ``value``; detached until added to a list."""

    __slots__ = ("value", "_next", "_prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: ListNode = self
        self._prev: ListNode = self

    @property
    def linked(self) -> bool:
        """Whether the node is currently in a list."""
        return self._next is not self

    @property
    def next(self) -> "ListNode | None":
        """Following node, or ``None`` at the tail or when detached."""
        node = self._next
        return None if node is self or isinstance(node, _Root) else node

    @property
    def prev(self) -> "ListNode | None":
        """Preceding node, or ``None`` at the head or when detached."""
        node = self._prev
        return None if node is self or isinstance(node, _Root) else node

    def _unlink(self) -> None:
        self._prev._next = self._next
        self._next._prev = self._prev
        self._next = self
        self._prev = self

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class _Root(ListNode):
    __slots__ = ()


def _insert(node: ListNode, prev: ListNode, following: ListNode) -> None:
    node._prev = prev
    node._next = following
    prev._next = node
    following._prev = node


class LinkedList:
    """Doubly linked list of :class:`ListNode` objects.

    Iterating in either direction is safe while removing nodes.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root = _Root()

    def add_head(self, node: ListNode) -> None:
        """Insert ``node`` at the front."""
        node._unlink()
        _insert(node, self._root, self._root._next)

    def add_tail(self, node: ListNode) -> None:
        """Append ``node`` at the back."""
        node._unlink()
        _insert(node, self._root._prev, self._root)

    def pop_head(self) -> ListNode | None:
        """Remove and return the first node; ``None`` if empty."""
        if self.is_empty():
            return None
        node = self._root._next
        node._unlink()
        return node

    def pop_tail(self) -> ListNode | None:
        """Remove and return the last node; ``None`` if empty."""
        if self.is_empty():
            return None
        node = self._root._prev
        node._unlink()
        return node

    def add_after(self, prev: ListNode, node: ListNode) -> None:
        """Insert ``node`` directly after ``prev``."""
        if prev is node:
            raise ValueError("cannot insert a node next to itself")
        node._unlink()
        _insert(node, prev, prev._next)

    def add_before(self, next_node: ListNode, node: ListNode) -> None:
        """Insert ``node`` directly before ``next_node``."""
        if next_node is node:
            raise ValueError("cannot insert a node next to itself")
        node._unlink()
        _insert(node, next_node._prev, next_node)

    def remove(self, node: ListNode) -> None:
        """Unlink ``node``; a detached node is left as it is."""
        node._unlink()

    def clear(self) -> None:
        """Detach every node."""
        root = self._root
        while root._next is not root:
            root._next._unlink()

    def head(self) -> ListNode | None:
        return None if self.is_empty() else self._root._next

    def tail(self) -> ListNode | None:
        return None if self.is_empty() else self._root._prev

    def is_empty(self) -> bool:
        return self._root._next is self._root

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[ListNode]:
        root = self._root
        node = root._next
        while node is not root:
            following = node._next
            yield node
            if node.linked:
                following = node._next
            node = following

    def __reversed__(self) -> Iterator[ListNode]:
        root = self._root
        node = root._prev
        while node is not root:
            preceding = node._prev
            yield node
            if node.linked:
                preceding = node._prev
            node = preceding

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(n.value) for n in self)}])"