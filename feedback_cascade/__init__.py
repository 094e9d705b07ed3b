"""
FEEDBACK_CASCADE: Relativistic feedback avalanche simulation

A generation-stepping Monte Carlo of gamma-photon / runaway-electron
feedback in a planar thundercloud with a uniform accelerating field,
as used in terrestrial gamma-ray flash studies.

Modules:
    core: Vectors, particles, random source
    physics: Atmosphere model and feedback kernels
    transport: Generation sequence and cascade engine
    io: Configuration, seed photons, generation reports
"""

__version__ = "0.1.0"

from feedback_cascade.core.particle import Particle, Photon
from feedback_cascade.core.random_source import RandomSource
from feedback_cascade.physics.atmosphere import Atmosphere
from feedback_cascade.transport.generation import Generation, GenerationSequence, Termination
from feedback_cascade.transport.engine import CascadeEngine

__all__ = [
    "Particle",
    "Photon",
    "RandomSource",
    "Atmosphere",
    "Generation",
    "GenerationSequence",
    "Termination",
    "CascadeEngine",
]
