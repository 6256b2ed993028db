"""Synchronous signal dispatch: block signals and wait for them in a loop."""

from __future__ import annotations

import signal
from typing import Callable, Optional


class SignalRegistrationError(ValueError):
    """Raised when a signal is registered twice."""


class UnexpectedSignalError(RuntimeError):
    """Raised when a waited-for signal has no registration."""

    def __init__(self, signum: int) -> None:
        super().__init__(f"unexpected signal {signum}")
        self.signum = signum


class SignalHandler:
    """Waits for registered signals and runs their callbacks.

    A signal registered without a callback ends :meth:`event_loop`.
    """

    def __init__(self) -> None:
        self._wait_mask: set[int] = set()
        self._callbacks: dict[int, Optional[Callable[[], None]]] = {}

    @property
    def wait_mask(self) -> frozenset[int]:
        """The signals the event loop waits for."""
        return frozenset(self._wait_mask)

    def block_all_signals(self) -> set:
        """Block every signal for the calling thread; returns the previous mask."""
        return signal.pthread_sigmask(signal.SIG_BLOCK, signal.valid_signals())

    def register_quit_signal(self, signum: int) -> None:
        """Register a signal that makes the event loop return."""
        self.register_signal(signum, None)

    def register_signal(self, signum: int, callback: Optional[Callable[[], None]] = None) -> None:
        """Register ``callback`` for ``signum``; None makes it a quit signal."""
        self._wait_mask.add(signum)
        if signum in self._callbacks:
            raise SignalRegistrationError(f"signal {signum} is already registered")
        self._callbacks[signum] = callback

    def event_loop(self) -> int:
        """Block the registered signals and dispatch them until a quit signal arrives.

        Returns the quit signal's number.
        """
        signal.pthread_sigmask(signal.SIG_BLOCK, self._wait_mask)
        while True:
            signum = signal.sigwait(self._wait_mask)
            try:
                callback = self._callbacks[signum]
            except KeyError:
                raise UnexpectedSignalError(signum) from None
            if callback is None:
                return signum
            callback()