"""
Generation snapshots and the lazy generation sequence.

The sequence is an iterator: each generation is computed only when the
consumer asks for it, so an abandoned run simply stops consuming memory.
"""

import enum
import numpy as np
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from feedback_cascade.core.exceptions import ConfigurationError
from feedback_cascade.core.particle import Particle


class Termination(enum.Enum):
    """Why a generation sequence stopped."""

    EXTINCTION = "extinction"   # population died out
    OVERFLOW = "overflow"       # population exceeded the particle limit


@dataclass(frozen=True)
class Generation:
    """One step of the cascade: index and live population."""

    index: int
    particles: Tuple[Particle, ...]

    @property
    def size(self) -> int:
        return len(self.particles)

    @property
    def heights(self) -> np.ndarray:
        """z-coordinates of the population."""
        return np.array([p.height for p in self.particles], dtype=np.float64)

    @property
    def mean_height(self) -> float:
        """Average z-coordinate (NaN for an empty population)."""
        if not self.particles:
            return float('nan')
        return float(np.mean(self.heights))

    def __repr__(self) -> str:
        return f"Generation(index={self.index}, n={self.size}, <z>={self.mean_height:.1f})"


class GenerationSequence:
    """
    Lazily produced generations of one cascade.

    Generation 0 is the seed population, which must lie inside the cloud;
    generation i+1 is atmosphere.step(generation i). Every generation, the
    seed included, is checked before it is returned: an empty population
    ends the run by extinction, one larger than `particle_limit` by
    overflow. The terminal generation is still returned, and `termination`
    is already set when the consumer receives it.

    Not restartable: build a new sequence (with a freshly seeded random
    source) to replay a run.

    Example:
        sequence = GenerationSequence(atmosphere, seed, RandomSource(42))
        for generation in sequence:
            print(generation.index, generation.size)
        print(sequence.termination)
    """

    def __init__(self, atmosphere, seed_particles: Iterable[Particle], rng,
                 particle_limit: int = 10000):
        """
        Parameters:
            atmosphere: Model providing step(particles, rng) and contains(z)
            seed_particles: Population of generation 0
            rng: Random source shared by all steps
            particle_limit: Largest population that keeps the run going

        Raises:
            ConfigurationError: if a seed particle lies outside the cloud
        """
        seed = tuple(seed_particles)
        for particle in seed:
            if not atmosphere.contains(particle.height):
                raise ConfigurationError("seed-photons", particle.height, "outside the cloud")

        self.atmosphere = atmosphere
        self.rng = rng
        self.particle_limit = particle_limit
        self.termination: Optional[Termination] = None

        self._seed = Generation(0, seed)
        self._current: Optional[Generation] = None

    @property
    def running(self) -> bool:
        return self.termination is None

    @property
    def current(self) -> Optional[Generation]:
        """Last generation handed out (None before the first request)."""
        return self._current

    def __iter__(self):
        return self

    def __next__(self) -> Generation:
        if self.termination is not None:
            raise StopIteration

        if self._current is None:
            candidate = self._seed
        else:
            candidate = Generation(
                self._current.index + 1,
                self.atmosphere.step(self._current.particles, self.rng),
            )

        if candidate.size == 0:
            self.termination = Termination.EXTINCTION
        elif candidate.size > self.particle_limit:
            self.termination = Termination.OVERFLOW

        self._current = candidate
        return candidate
