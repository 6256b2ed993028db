"""Reference-counted handles with an explicit release hook."""

from __future__ import annotations

import copy
from typing import Any, Callable, Optional

from chaosutil.atomic import AtomicValue


class RefCounter:
    """A plain reference count starting at one."""

    __slots__ = ("_cnt",)

    def __init__(self) -> None:
        self._cnt = 1

    def duplicate(self) -> None:
        """Add one reference."""
        self._cnt += 1

    def release(self) -> int:
        """Drop one reference and return how many remain."""
        self._cnt -= 1
        return self._cnt

    def ref_count(self) -> int:
        """Return the current count."""
        return self._cnt


class AtomicRefCounter:
    """A thread-safe reference count starting at one."""

    __slots__ = ("_cnt",)

    def __init__(self) -> None:
        self._cnt = AtomicValue(1)

    def duplicate(self) -> None:
        """Add one reference."""
        self._cnt.increment()

    def release(self) -> int:
        """Drop one reference and return how many remain."""
        return self._cnt.decrement()

    def ref_count(self) -> int:
        """Return the current count."""
        return self._cnt.value()


def _nil(obj: Any) -> str:
    return "(nil)" if obj is None else f"{id(obj):#x}"


class SharedPtr:
    """A counted handle to an object; ``release`` runs when the last handle lets go."""

    __slots__ = ("_counter", "_ptr", "_release_policy", "_counter_type")

    def __init__(
        self,
        obj: Any = None,
        release: Optional[Callable[[Any], None]] = None,
        counter_type: Callable[[], Any] = AtomicRefCounter,
    ) -> None:
        self._counter_type = counter_type
        self._release_policy = release
        self._counter = counter_type()
        self._ptr = obj

    @classmethod
    def _sharing(cls, source: SharedPtr, ptr: Any) -> SharedPtr:
        handle = cls.__new__(cls)
        handle._counter_type = source._counter_type
        handle._release_policy = source._release_policy
        handle._counter = source._counter
        handle._ptr = ptr
        if handle._counter is not None:
            handle._counter.duplicate()
        return handle

    def __copy__(self) -> SharedPtr:
        return self._sharing(self, self._ptr)

    def _release(self) -> None:
        counter = self._counter
        if counter is None:
            return
        if counter.release() == 0:
            if self._ptr is not None:
                if self._release_policy is not None:
                    self._release_policy(self._ptr)
                self._ptr = None
            self._counter = None

    def __del__(self) -> None:
        if getattr(self, "_counter", None) is not None:
            self._release()

    def assign(self, other: Any) -> SharedPtr:
        """Point at ``other``: share another handle, or take a new raw object."""
        if isinstance(other, SharedPtr):
            if other is not self:
                tmp = copy.copy(other)
                self.swap(tmp)
                tmp.reset()
        elif self._ptr is not other:
            counter = self._counter_type()
            self._release()
            self._counter = counter
            self._ptr = other
        return self

    def swap(self, other: SharedPtr) -> None:
        """Exchange targets and counts with ``other``."""
        self._ptr, other._ptr = other._ptr, self._ptr
        self._counter, other._counter = other._counter, self._counter

    def get(self) -> Any:
        """Return the target object, or None."""
        return self._ptr

    def is_null(self) -> bool:
        """True when there is no target."""
        return self._ptr is None

    def ref_count(self) -> int:
        """Number of handles sharing the target; 0 when there is none."""
        if self._counter is None or self._ptr is None:
            return 0
        return self._counter.ref_count()

    def reset(self) -> None:
        """Let go of the target and the count."""
        self._release()
        self._counter = None
        self._ptr = None

    def cast(self, cls: type) -> SharedPtr:
        """Share the target if it is an instance of ``cls``, else return an empty handle."""
        if isinstance(self._ptr, cls):
            return self._sharing(self, self._ptr)
        return SharedPtr(release=self._release_policy, counter_type=self._counter_type)

    def unsafe_cast(self) -> SharedPtr:
        """Share the target without any type check."""
        return self._sharing(self, self._ptr)

    def dump(self) -> str:
        """Print and return a one-line description of the handle."""
        text = (
            "---------- SharedPtr.dump ----------\n"
            f"this:[{id(self):#x}] counter_ptr:[{_nil(self._counter)}] "
            f"data ptr:[{_nil(self._ptr)}] ref count:[{self.ref_count()}]\n\n"
        )
        print(text, end="")
        return text

    def __enter__(self) -> SharedPtr:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset()

    def __bool__(self) -> bool:
        return self._ptr is not None

    @staticmethod
    def _target(other: Any) -> Any:
        return other.get() if isinstance(other, SharedPtr) else other

    def __eq__(self, other: object) -> bool:
        return self._ptr is self._target(other)

    def __ne__(self, other: object) -> bool:
        return self._ptr is not self._target(other)

    def __lt__(self, other: Any) -> bool:
        return id(self._ptr) < id(self._target(other))

    def __le__(self, other: Any) -> bool:
        return id(self._ptr) <= id(self._target(other))

    def __gt__(self, other: Any) -> bool:
        return id(self._ptr) > id(self._target(other))

    def __ge__(self, other: Any) -> bool:
        return id(self._ptr) >= id(self._target(other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SharedPtr({self._ptr!r}, refs={self.ref_count()})"


def swap(p1: SharedPtr, p2: SharedPtr) -> None:
    """Exchange the targets of two handles."""
    p1.swap(p2)