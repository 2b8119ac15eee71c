"""One-shot hand-off of a value between threads.

One thread calls :meth:`Cond.signal` with a value and another receives it
from :meth:`Cond.wait`, which blocks until a value has been signalled.
"""

from __future__ import annotations

import threading
from typing import Any


class Cond:
    """Pass a single value from a signalling thread to a waiting thread.

    A signal made before anyone waits is kept, so the order of the two
    calls does not matter. A later signal made before the wait replaces
    the pending value. After :meth:`wait` returns, the object is ready
    for the next hand-off.
    """

    __slots__ = ("_cond", "_done", "_data")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._done = False
        self._data: Any = None

    def signal(self, data: Any = None) -> None:
        """Hand ``data`` to the thread that waits, waking it if it is blocked."""
        with self._cond:
            self._data = data
            self._done = True
            self._cond.notify()

    def wait(self) -> Any:
        """Block until a value is signalled, then return it and reset."""
        with self._cond:
            self._cond.wait_for(lambda: self._done)
            data = self._data
            self._data = None
            self._done = False
            return data

    def __repr__(self) -> str:
        return f"Cond(pending={self._done})"