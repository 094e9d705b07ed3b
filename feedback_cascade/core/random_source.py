"""
Thread-safe random number source shared by all stochastic steps.

A seeded source is fully reproducible: the same seed gives the same
sequence of draws and therefore the same cascade.
"""

import threading
import numpy as np
from typing import Optional


class RandomSource:
    """
    Serialized wrapper around numpy's Generator.

    Only single-draw operations are exposed; each one holds the lock for the
    whole draw, so a producer and a concurrent consumer never interleave
    mid-draw.

    Example:
        rng = RandomSource(seed=42)
        d = rng.next_exponential(100.0)
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Parameters:
            seed: Seed for reproducible runs (None = OS entropy)
        """
        self.seed = seed
        self._generator = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def next_uniform(self) -> float:
        """Uniform deviate in [0, 1)."""
        with self._lock:
            return float(self._generator.random())

    def next_exponential(self, mean: float) -> float:
        """
        Exponential deviate with the given mean (inverse transform of one
        uniform draw).
        """
        if mean < 0.0:
            raise ValueError(f"Exponential mean must be non-negative, got {mean}")
        with self._lock:
            u = self._generator.random()
        return float(-mean * np.log1p(-u))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
