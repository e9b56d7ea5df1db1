# rng.py
# Small seedable xorshift32 stream

from __future__ import annotations

import random
import time

_MASK = 0xFFFFFFFF
_ZERO_SEED = 0x9E3779B9  # xorshift stays at 0 forever, so never seed with it


class XorShift32(random.Random):
    """random.Random driven by a 32-bit xorshift (13, 17, 5).

    Only ``random()`` is replaced; ``randrange``, ``shuffle``, ``sample`` and
    ``choice`` are inherited and therefore reproducible from the seed.
    """

    def __init__(self, seed: int | None = None):
        self._state = _ZERO_SEED
        super().__init__(seed)

    def seed(self, a=None, version: int = 2) -> None:
        if a is None:
            a = time.time_ns()
        self._state = (int(a) & _MASK) or _ZERO_SEED

    def _next(self) -> int:
        s = self._state
        s ^= (s << 13) & _MASK
        s ^= s >> 17
        s ^= (s << 5) & _MASK
        self._state = s
        return s

    def random(self) -> float:
        return self._next() / 4294967296

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        result = 0
        bits = 0
        while bits < k:
            result = (result << 32) | self._next()
            bits += 32
        return result >> (bits - k)

    def getstate(self) -> int:
        return self._state

    def setstate(self, state: int) -> None:
        self._state = int(state) & _MASK
