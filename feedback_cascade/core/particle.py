"""
Particles cascading through the atmosphere.

The set of particle kinds is closed: every class listed in PARTICLE_KINDS
must have a stepping rule in Atmosphere, which refuses anything else.
Particles are values; stepping never mutates them, it creates the next
generation's particles instead.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from feedback_cascade.core.vector import Vector3


@dataclass(frozen=True)
class Particle:
    """Base of all particle kinds: something with a position."""

    origin: Vector3

    @property
    def height(self) -> float:
        """z-coordinate of the particle [model units]."""
        return self.origin.z


@dataclass(frozen=True)
class Photon(Particle):
    """
    Gamma photon.

    Parameters:
        origin: (x, y, z) position
        direction: propagation direction (normalized internally)
        energy: photon energy, must be positive
    """

    direction: Vector3
    energy: float = 1.0

    def __post_init__(self):
        # Accept plain tuples / arrays and normalize the direction
        object.__setattr__(self, 'origin', Vector3.of(self.origin))
        object.__setattr__(self, 'direction', Vector3.of(self.direction).normalized())
        object.__setattr__(self, 'energy', float(self.energy))
        if not self.energy > 0.0:
            raise ValueError(f"Photon energy must be positive, got {self.energy}")

    def moved(self, origin: Vector3, direction: Vector3) -> "Photon":
        """New photon with the same energy at another place/direction."""
        return Photon(origin, direction, self.energy)


# Closed set of kinds handled by the stepping rule
PARTICLE_KINDS: Tuple[type, ...] = (Photon,)


def photons(origin: Iterable[float], direction: Iterable[float],
            energy: float = 1.0, count: int = 1) -> list:
    """`count` identical photons."""
    photon = Photon(Vector3.of(origin), Vector3.of(direction), energy)
    return [photon] * count
