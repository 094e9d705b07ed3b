"""Core module: vectors, particles, random source and errors."""

from feedback_cascade.core.vector import Vector3
from feedback_cascade.core.particle import Particle, Photon, PARTICLE_KINDS
from feedback_cascade.core.random_source import RandomSource
from feedback_cascade.core.exceptions import ConfigurationError, SeedFormatError

__all__ = [
    "Vector3",
    "Particle",
    "Photon",
    "PARTICLE_KINDS",
    "RandomSource",
    "ConfigurationError",
    "SeedFormatError",
]
