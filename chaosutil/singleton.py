"""Lazily created, process-wide single instances per class."""

from __future__ import annotations

import atexit
import threading
from typing import Any, ClassVar


class Singleton:
    """Mixin giving each subclass one shared, lazily built instance."""

    _instances: ClassVar[dict[type, Any]] = {}
    _registered: ClassVar[set[type]] = set()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def instance(cls):
        """Return the class's single instance, creating it on first use."""
        inst = Singleton._instances.get(cls)
        if inst is not None:
            return inst
        with Singleton._lock:
            inst = Singleton._instances.get(cls)
            if inst is None:
                inst = cls()
                Singleton._instances[cls] = inst
                if cls not in Singleton._registered:
                    Singleton._registered.add(cls)
                    atexit.register(cls.destroy_instance)
        return inst

    @classmethod
    def destroy_instance(cls) -> None:
        """Drop the class's instance; the next ``instance()`` builds a new one."""
        with Singleton._lock:
            Singleton._instances.pop(cls, None)