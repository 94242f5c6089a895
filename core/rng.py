# core/rng.py
from __future__ import annotations
import random
from typing import Iterable, Optional

import numpy as np

from interfaces import RandomSource


class ScriptedRandom(RandomSource):
    """Cycles a canned sequence forever. The default drives the reference boards."""
    DEFAULT = (4, 2, 4, 3, 4, 4)

    def __init__(self, numbers: Iterable[int] = DEFAULT):
        self.numbers = tuple(int(n) for n in numbers)
        if not self.numbers:
            raise ValueError("ScriptedRandom needs at least one number")
        if any(n < 0 for n in self.numbers):
            raise ValueError("ScriptedRandom numbers must be non-negative")
        self.current = 0

    def next(self) -> int:
        result = self.numbers[self.current]
        self.current = (self.current + 1) % len(self.numbers)
        return result


class LcgRandom(RandomSource):
    """Tiny multiplicative generator, x <- 7x mod 11. Cheap enough for a microcontroller."""
    def __init__(self, x: int = 34):
        self.x = x

    def next(self) -> int:
        self.x = (7 * self.x) % 11
        return self.x


class PythonRandom(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next(self) -> int:
        return self.rng.getrandbits(32)


class NumpyRandom(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def next(self) -> int:
        return int(self.rng.integers(0, 2**32))


def make_rng(cfg) -> RandomSource:
    """Build the random source named by cfg.rng."""
    if cfg.rng == "scripted":
        return ScriptedRandom(cfg.rng_script)
    if cfg.rng == "lcg":
        return LcgRandom() if cfg.seed is None else LcgRandom(cfg.seed)
    if cfg.rng == "python":
        return PythonRandom(cfg.seed)
    if cfg.rng == "numpy":
        return NumpyRandom(cfg.seed)
    raise ValueError(f"unknown rng {cfg.rng!r}")
