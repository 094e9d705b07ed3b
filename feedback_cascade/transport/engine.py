"""
Cascade engine: the high-level entry point.

Owns the atmosphere, the shared random source and the particle limit,
builds seed populations and runs generation sequences.
"""

import numpy as np
from tqdm import tqdm
from typing import Iterable, List, Optional, Tuple

from feedback_cascade.core.particle import Particle, photons
from feedback_cascade.core.random_source import RandomSource
from feedback_cascade.io.seed import default_seed
from feedback_cascade.physics.atmosphere import Atmosphere
from feedback_cascade.transport.generation import GenerationSequence, Termination


class CascadeEngine:
    """
    Main engine for feedback-cascade simulation.

    Handles:
        - Seed population creation
        - Lazy generation sequences sharing one random source
        - Running a cascade to extinction or overflow

    Example:
        engine = CascadeEngine(Atmosphere(multiplication=1.5), seed=42)
        stats = engine.simulate(engine.default_seed())
        print(stats['termination'], stats['n_generations'])
    """

    def __init__(self, atmosphere: Optional[Atmosphere] = None,
                 particle_limit: int = 10000, seed: Optional[int] = None):
        """
        Initialize engine.

        Parameters:
            atmosphere: Atmosphere model (default parameters if None)
            particle_limit: Population size that stops a run
            seed: Random seed (None = not reproducible)
        """
        if particle_limit < 1:
            raise ValueError(f"particle_limit must be positive, got {particle_limit}")

        self.atmosphere = atmosphere if atmosphere is not None else Atmosphere()
        self.particle_limit = particle_limit
        self.rng = RandomSource(seed)

    @classmethod
    def from_config(cls, config) -> "CascadeEngine":
        """Build from a SimulationConfig."""
        return cls(config.build_atmosphere(), config.particle_limit, config.seed)

    def create_seed(self, position: Tuple[float, float, float],
                    direction: Tuple[float, float, float],
                    energy: float = 1.0, count: int = 1) -> List[Particle]:
        """
        Create `count` identical seed photons.

        Parameters:
            position: (x, y, z) starting position
            direction: (dx, dy, dz) direction (normalized automatically)
            energy: Photon energy
            count: Number of photons
        """
        return photons(position, direction, energy, count)

    def default_seed(self) -> List[Particle]:
        """One downward photon in the middle of the cloud."""
        return default_seed(self.atmosphere.cloud_size)

    def run(self, seed_particles: Optional[Iterable[Particle]] = None) -> GenerationSequence:
        """
        Start a new lazy generation sequence.

        Parameters:
            seed_particles: Generation 0 (default seed if None)

        Raises:
            ConfigurationError: if a seed particle lies outside the cloud
        """
        if seed_particles is None:
            seed_particles = self.default_seed()
        return GenerationSequence(self.atmosphere, seed_particles, self.rng,
                                  self.particle_limit)

    def simulate(self, seed_particles: Optional[Iterable[Particle]] = None,
                 verbose: bool = True) -> dict:
        """
        Run a cascade until it dies out or overflows.

        Parameters:
            seed_particles: Generation 0 (default seed if None)
            verbose: Print progress information

        Returns:
            Dictionary with simulation statistics
        """
        sequence = self.run(seed_particles)

        if verbose:
            print(f"\nSimulating feedback cascade...")
            print(f"  {self.atmosphere}")
            print(f"  Particle limit: {self.particle_limit:,}")
            print(f"  Random seed: {self.rng.seed}")

        history = []
        progress = tqdm(sequence, desc="Generations", unit="gen", disable=not verbose)
        for generation in progress:
            history.append((generation.index, generation.size, generation.mean_height))
            progress.set_postfix(n=generation.size, height=f"{generation.mean_height:.1f}")
        progress.close()

        sizes = np.array([size for _, size, _ in history])
        final = sequence.current

        if verbose:
            print(f"\nCascade complete!")
            if sequence.termination is Termination.OVERFLOW:
                print(f"  Particle limit reached in generation {final.index}")
            else:
                print(f"  Avalanche died out in generation {final.index}")
            print(f"  Peak population: {int(sizes.max()):,}")

        return {
            'n_generations': len(history),
            'termination': sequence.termination,
            'final_population': final.size,
            'peak_population': int(sizes.max()),
            'generations': history,
        }
