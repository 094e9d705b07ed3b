"""
Generation Sequence Test Suite

Tests the lazy generation driver:
    - Index bookkeeping and laziness
    - Extinction and overflow termination
    - Reproducibility for a fixed seed
    - End-to-end scenario with a single seed photon
"""

import math
import sys
from itertools import islice

import numpy as np
import pytest
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from feedback_cascade.core.exceptions import ConfigurationError
from feedback_cascade.core.particle import Photon
from feedback_cascade.core.random_source import RandomSource
from feedback_cascade.core.vector import Vector3
from feedback_cascade.physics.atmosphere import Atmosphere
from feedback_cascade.transport.generation import Generation, GenerationSequence, Termination


def seed_photon(z=500.0):
    return Photon(Vector3(0.0, 0.0, z), Vector3(0.0, 0.0, -1.0), 1.0)


def huge_cloud(multiplication):
    """Cloud so tall that no photon escapes within a few generations."""
    return Atmosphere(multiplication=multiplication, cloud_size=1e7, field_magnitude=0.2)


class CountingAtmosphere:
    """Wraps an atmosphere and counts step calls."""

    def __init__(self, atmosphere):
        self.atmosphere = atmosphere
        self.n_steps = 0

    def contains(self, z):
        return self.atmosphere.contains(z)

    def step(self, particles, rng):
        self.n_steps += 1
        return self.atmosphere.step(particles, rng)


def test_generation_snapshot():
    """Test 1: Generation statistics"""
    generation = Generation(3, (seed_photon(400.0), seed_photon(600.0)))

    assert generation.size == 2
    np.testing.assert_array_equal(generation.heights, [400.0, 600.0])
    assert generation.mean_height == pytest.approx(500.0)

    empty = Generation(4, ())
    assert empty.size == 0
    assert math.isnan(empty.mean_height)
    assert len(empty.heights) == 0


def test_indices_are_consecutive():
    """Test 2: generation[i].index == i"""
    sequence = GenerationSequence(Atmosphere(), [seed_photon()] * 10, RandomSource(seed=11))

    generations = list(islice(sequence, 50))
    assert [g.index for g in generations] == list(range(len(generations)))
    assert generations[0].size == 10


def test_sequence_is_lazy():
    """Test 3: nothing is stepped until the consumer asks"""
    atmosphere = CountingAtmosphere(huge_cloud(2.0))
    sequence = GenerationSequence(atmosphere, [seed_photon(5e6)], RandomSource(seed=1))

    assert atmosphere.n_steps == 0
    assert sequence.current is None

    first = next(sequence)
    assert first.index == 0
    assert atmosphere.n_steps == 0

    next(sequence)
    next(sequence)
    assert atmosphere.n_steps == 2
    assert sequence.current.index == 2
    assert sequence.running


def test_overflow_termination():
    """Test 4: population above the limit ends the run once"""
    # Integral gain, nothing escapes: sizes 1, 3, 9, ..., 729, 2187
    sequence = GenerationSequence(huge_cloud(3.0), [seed_photon(5e6)],
                                  RandomSource(seed=2), particle_limit=1000)

    sizes = [g.size for g in sequence]

    assert sizes == [3 ** i for i in range(8)]
    assert sequence.termination is Termination.OVERFLOW
    assert not sequence.running
    with pytest.raises(StopIteration):
        next(sequence)


def test_limit_is_inclusive():
    """Test 5: a population equal to the limit keeps running"""
    sequence = GenerationSequence(huge_cloud(2.0), [seed_photon(5e6)],
                                  RandomSource(seed=2), particle_limit=4)

    sizes = [g.size for g in sequence]
    assert sizes == [1, 2, 4, 8]
    assert sequence.termination is Termination.OVERFLOW


def test_termination_visible_with_last_generation():
    """Test 6: termination is set when the terminal generation is returned"""
    sequence = GenerationSequence(huge_cloud(2.0), [seed_photon(5e6)],
                                  RandomSource(seed=2), particle_limit=4)

    seen = [(g.size, sequence.termination) for g in sequence]
    assert seen[-1] == (8, Termination.OVERFLOW)
    assert all(t is None for _, t in seen[:-1])


def test_extinction_subcritical():
    """Test 7: sub-critical gain dies out"""
    sequence = GenerationSequence(Atmosphere(multiplication=0.5), [seed_photon()] * 20,
                                  RandomSource(seed=8))

    generations = list(islice(sequence, 1000))

    assert sequence.termination is Termination.EXTINCTION
    assert generations[-1].size == 0
    assert all(g.size > 0 for g in generations[:-1])


def test_empty_seed():
    """Test 8: an empty seed is emitted once and is extinct"""
    sequence = GenerationSequence(Atmosphere(), [], RandomSource(seed=1))

    generations = list(sequence)
    assert len(generations) == 1
    assert generations[0].index == 0
    assert generations[0].size == 0
    assert sequence.termination is Termination.EXTINCTION


def test_seed_above_limit():
    """Test 9: a seed larger than the limit overflows immediately"""
    sequence = GenerationSequence(Atmosphere(), [seed_photon()] * 5,
                                  RandomSource(seed=1), particle_limit=4)

    generations = list(sequence)
    assert len(generations) == 1
    assert sequence.termination is Termination.OVERFLOW


def test_determinism():
    """Test 10: same seed, same cascade"""

    def run(seed):
        sequence = GenerationSequence(Atmosphere(), [seed_photon()] * 5,
                                      RandomSource(seed=seed), particle_limit=2000)
        return [(g.index, g.particles) for g in islice(sequence, 40)]

    first = run(2024)
    second = run(2024)

    assert first == second
    assert len(first) > 1
    assert run(2025) != first


def test_supercritical_overflow():
    """Test 11: growing cascade reaches the limit"""
    atmosphere = Atmosphere(multiplication=3.0, cloud_size=5000.0, field_magnitude=0.0)
    sequence = GenerationSequence(atmosphere, [seed_photon(2500.0)] * 10,
                                  RandomSource(seed=4), particle_limit=5000)

    generations = list(islice(sequence, 200))

    assert sequence.termination is Termination.OVERFLOW
    assert generations[-1].size > 5000


def test_end_to_end_single_photon():
    """Test 12: single photon, unit gain, no field, seed 42"""
    atmosphere = Atmosphere(multiplication=1.0, photon_free_path=100.0, cell_length=100.0,
                            cloud_size=1000.0, field_magnitude=0.0)
    sequence = GenerationSequence(atmosphere, [seed_photon(500.0)],
                                  RandomSource(seed=42), particle_limit=10000)

    generation_0 = next(sequence)
    assert generation_0.size == 1
    assert generation_0.particles[0].origin.z == 500.0

    generation_1 = next(sequence)
    assert generation_1.index == 1
    assert generation_1.size == 1
    assert generation_1.particles[0].origin.z < 500.0

    rest = list(islice(sequence, 100000))
    assert sequence.termination is Termination.EXTINCTION
    assert all(g.size == 1 for g in rest[:-1])
    assert rest[-1].size == 0


@pytest.mark.parametrize("z", [0.0, 1000.0, -5.0, 1500.0])
def test_seed_outside_cloud_rejected(z):
    """Test 13: seed photons must start strictly inside the cloud"""
    atmosphere = CountingAtmosphere(Atmosphere(cloud_size=1000.0))

    with pytest.raises(ConfigurationError) as excinfo:
        GenerationSequence(atmosphere, [seed_photon(500.0), seed_photon(z)], RandomSource(seed=1))

    assert excinfo.value.option == "seed-photons"
    assert excinfo.value.value == z
    assert atmosphere.n_steps == 0


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
