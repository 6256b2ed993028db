"""Utilities for long-running processes: option matching, counted handles, atomic counters, randomness, time and signals."""

__version__ = "0.1.0"

__all__ = [
    "arg_helper",
    "atomic",
    "itoa",
    "memory",
    "misc",
    "process",
    "rand_gen",
    "shared_ptr",
    "signal_handler",
    "singleton",
    "time_util",
]