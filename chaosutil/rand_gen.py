"""A small combined Tausworthe generator and helpers built on it."""

from __future__ import annotations

import threading
import time

MAX_32_BIT_LONG = 0xFFFFFFFF
RANDOM_MAX = MAX_32_BIT_LONG

CCH = "_0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"


class RandGen:
    """Deterministic 32-bit pseudo-random generator seeded by an integer."""

    def __init__(self, seed: int = 0) -> None:
        self._lock = threading.Lock()
        self._seed = [0, 0, 0]
        self.reset(seed)

    def reset(self, seed: int = 0) -> None:
        """Reseed the generator."""
        m = MAX_32_BIT_LONG
        with self._lock:
            s0 = (seed ^ 0xFEA09B9D) & 0xFFFFFFFE
            s0 ^= (((s0 << 7) & m) ^ s0) >> 31
            s1 = (seed ^ 0x9C129511) & 0xFFFFFFF8
            s1 ^= (((s1 << 2) & m) ^ s1) >> 29
            s2 = (seed ^ 0x2512CFB8) & 0xFFFFFFF0
            s2 ^= (((s2 << 9) & m) ^ s2) >> 28
            self._seed = [s0, s1, s2]
        self.rand_uint()

    def rand_uint(self) -> int:
        """Return a value in [0, 0xFFFFFFFF]."""
        m = MAX_32_BIT_LONG
        with self._lock:
            s0, s1, s2 = self._seed
            s0 = (((s0 & 0xFFFFFFFE) << 24) & m) ^ ((s0 ^ ((s0 << 7) & m)) >> 7)
            s1 = (((s1 & 0xFFFFFFF8) << 7) & m) ^ ((s1 ^ ((s1 << 2) & m)) >> 22)
            s2 = (((s2 & 0xFFFFFFF0) << 11) & m) ^ ((s2 ^ ((s2 << 9) & m)) >> 17)
            self._seed = [s0, s1, s2]
            return s0 ^ s1 ^ s2

    def rand_double(self) -> float:
        """Return a float in [0.0, 1.0]."""
        return self.rand_uint() / float(RANDOM_MAX)


rand_gen = RandGen(int(time.time()))


def get_rand(start: int, end: int) -> int:
    """Return a value from [start, end) using the shared generator (unsigned 32-bit)."""
    span = (end - start) & MAX_32_BIT_LONG
    return (int(span * rand_gen.rand_double()) + start) & MAX_32_BIT_LONG


def rand_str(length: int) -> str:
    """Return a random string of ``length`` characters from the identifier alphabet."""
    last = len(CCH) - 1
    return "".join(CCH[min(get_rand(0, len(CCH)), last)] for _ in range(length))


def calc_probability(rate: int) -> bool:
    """Return True with a chance of ``rate`` percent."""
    if rate <= 0:
        return False
    if rate >= 100:
        return True
    return get_rand(1, 100) <= rate