"""
Gacha Kit - Random Sources
==========================
Every draw pulls its randomness through a ``RandomSource`` so tests and
replays can swap in a seeded or scripted generator without touching draw
logic. ``random.Random`` already satisfies the interface.
"""

from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Uniform random generator used by the engine and the pity layer."""

    def random(self) -> float:
        """Float in [0, 1)."""
        ...

    def randrange(self, n: int) -> int:
        """Integer in [0, n)."""
        ...


class NumpyRandomSource:
    """Default random source backed by a numpy ``Generator`` (PCG64)."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._generator.random())

    def randrange(self, n: int) -> int:
        """
        Return a uniformly chosen integer in [0, n).

        Parameters:
            n (int): Exclusive upper bound, must be >= 1.
        """
        if n <= 0:
            raise ValueError("n must be greater than or equal to 1")
        return int(self._generator.integers(n))

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"


def make_random_source(seed: Optional[int] = None) -> NumpyRandomSource:
    """Build the default random source, seeded for reproducible sequences."""
    return NumpyRandomSource(seed)
