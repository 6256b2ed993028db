"""A thread-safe integer cell."""

from __future__ import annotations

import threading


class AtomicValue:
    """An integer whose updates are serialised by a lock."""

    __slots__ = ("_val", "_lock")

    def __init__(self, val: int = 0) -> None:
        self._val = int(val)
        self._lock = threading.Lock()

    def value(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._val

    def set(self, val: int) -> AtomicValue:
        """Replace the value; returns self for chaining."""
        with self._lock:
            self._val = int(val)
        return self

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._val += 1
            return self._val

    def post_increment(self) -> int:
        """Add one and return the previous value."""
        with self._lock:
            old = self._val
            self._val += 1
            return old

    def decrement(self) -> int:
        """Subtract one and return the new value."""
        with self._lock:
            self._val -= 1
            return self._val

    def post_decrement(self) -> int:
        """Subtract one and return the previous value."""
        with self._lock:
            old = self._val
            self._val -= 1
            return old

    def add(self, n: int) -> int:
        """Add ``n`` and return the previous value."""
        with self._lock:
            old = self._val
            self._val += n
            return old

    def subtract(self, n: int) -> int:
        """Subtract ``n`` and return the previous value."""
        with self._lock:
            old = self._val
            self._val -= n
            return old

    def __int__(self) -> int:
        return self.value()

    def __index__(self) -> int:
        return self.value()

    def __copy__(self) -> AtomicValue:
        return AtomicValue(self.value())

    def __repr__(self) -> str:
        return f"AtomicValue({self.value()})"