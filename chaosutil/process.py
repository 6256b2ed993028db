"""Detaching the current process from its terminal."""

from __future__ import annotations

import os
import sys

_FALLBACK_MAX_FD = 1024


def _max_fd() -> int:
    try:
        limit = os.sysconf("SC_OPEN_MAX")
    except (ValueError, OSError):
        return _FALLBACK_MAX_FD
    return limit if limit > 0 else _FALLBACK_MAX_FD


def daemonize() -> int:
    """Detach from the terminal: start a new session and reset fds to /dev/null.

    The process must not already lead a process group. A failed setsid exits
    with status 1. Returns the descriptor opened on /dev/null.
    """
    try:
        os.setsid()
    except OSError as exc:
        print(f"daemonize: setsid failed: {exc.strerror}")
        sys.exit(1)

    os.umask(0o022)

    os.closerange(0, _max_fd())
    fd = os.open("/dev/null", os.O_RDWR)
    os.dup(fd)
    os.dup(fd)
    return fd