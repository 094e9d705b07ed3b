"""
Planar thundercloud model with a uniform accelerating field.

The cloud is a slab 0 < z < cloud_size. Each generation every photon flies
an exponential free path; if it is still inside the cloud it seeds a
runaway-electron avalanche that re-radiates `multiplication` photons (on
average) one acceleration cell further on.
"""

import numpy as np
from typing import Sequence, Tuple

from feedback_cascade.core.exceptions import ConfigurationError
from feedback_cascade.core.particle import Particle, Photon
from feedback_cascade.core.vector import Vector3
from feedback_cascade.physics.feedback import (
    FIELD_AXIS, isotropic_direction, field_aligned_direction, split_multiplication
)


_AXIS = Vector3(*FIELD_AXIS)

# name -> (default, minimum, minimum allowed?)
ATMOSPHERE_PARAMETERS = {
    'multiplication': (2.0, 0.0, True),
    'photon_free_path': (100.0, 0.0, False),
    'cell_length': (100.0, 0.0, True),
    'cloud_size': (1000.0, 0.0, False),
    'field_magnitude': (0.2, 0.0, True),
}


class Atmosphere:
    """
    Feedback-cascade atmosphere.

    Immutable after construction; `step` is a pure function of the
    particles and the random draws.

    Example:
        atmosphere = Atmosphere(multiplication=2.0, cloud_size=1000.0)
        next_particles = atmosphere.step(particles, RandomSource(seed=42))
    """

    def __init__(self, multiplication: float = 2.0, photon_free_path: float = 100.0,
                 cell_length: float = 100.0, cloud_size: float = 1000.0,
                 field_magnitude: float = 0.2):
        """
        Initialize atmosphere.

        Parameters:
            multiplication: Mean secondaries per interacting photon (gain)
            photon_free_path: Photon mean free path
            cell_length: Acceleration cell length (birth point offset)
            cloud_size: Height of the cloud slab
            field_magnitude: Field strength (spread of secondaries about the axis)

        Raises:
            ConfigurationError: if a parameter is not finite or out of range
        """
        values = {
            'multiplication': multiplication,
            'photon_free_path': photon_free_path,
            'cell_length': cell_length,
            'cloud_size': cloud_size,
            'field_magnitude': field_magnitude,
        }
        for name, value in values.items():
            _, minimum, inclusive = ATMOSPHERE_PARAMETERS[name]
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ConfigurationError(name, value) from None
            if not np.isfinite(value):
                raise ConfigurationError(name, value, "must be finite")
            if value < minimum or (value == minimum and not inclusive):
                bound = ">=" if inclusive else ">"
                raise ConfigurationError(name, value, f"must be {bound} {minimum}")
            values[name] = value

        self._multiplication = values['multiplication']
        self._photon_free_path = values['photon_free_path']
        self._cell_length = values['cell_length']
        self._cloud_size = values['cloud_size']
        self._field_magnitude = values['field_magnitude']

        self._whole, self._fraction = split_multiplication(self._multiplication)

        # Closed dispatch table: one stepping rule per particle kind
        self._rules = {Photon: self._step_photon}

    @property
    def multiplication(self) -> float:
        return self._multiplication

    @property
    def photon_free_path(self) -> float:
        return self._photon_free_path

    @property
    def cell_length(self) -> float:
        return self._cell_length

    @property
    def cloud_size(self) -> float:
        return self._cloud_size

    @property
    def field_magnitude(self) -> float:
        return self._field_magnitude

    def contains(self, z: float) -> bool:
        """Is height z inside the cloud? Both boundaries count as outside."""
        return 0.0 < z < self._cloud_size

    def step(self, particles: Sequence[Particle], rng) -> Tuple[Particle, ...]:
        """
        Advance one generation.

        Parameters:
            particles: Current generation
            rng: Random source (next_uniform / next_exponential)

        Returns:
            Particles of the next generation, parents in input order

        Raises:
            TypeError: for a particle kind without a stepping rule
        """
        if not particles:
            return ()

        next_particles = []
        for particle in particles:
            rule = self._rules.get(type(particle))
            if rule is None:
                raise TypeError(f"No stepping rule for {type(particle).__name__}")
            next_particles.extend(rule(particle, rng))

        return tuple(next_particles)

    def _step_photon(self, photon: Photon, rng) -> list:
        """Free flight, boundary check, then feedback multiplication."""
        distance = rng.next_exponential(self._photon_free_path)
        interaction = photon.origin + distance * photon.direction

        if not self.contains(interaction.z):
            return []

        # Electron runs one cell along the photon, drifting with the field
        birth = (interaction + self._cell_length * photon.direction
                 + (self._field_magnitude * self._cell_length) * _AXIS)

        if not self.contains(birth.z):
            return []

        n_secondaries = self._whole
        if self._fraction > 0.0 and rng.next_uniform() < self._fraction:
            n_secondaries += 1

        secondaries = []
        for _ in range(n_secondaries):
            ux, uy, uz = isotropic_direction(rng.next_uniform(), rng.next_uniform())
            direction = field_aligned_direction(_AXIS.x, _AXIS.y, _AXIS.z, ux, uy, uz,
                                                self._field_magnitude)
            secondaries.append(photon.moved(birth, Vector3.of(direction)))

        return secondaries

    def __repr__(self) -> str:
        return (f"Atmosphere(multiplication={self._multiplication}, "
                f"photon_free_path={self._photon_free_path}, "
                f"cell_length={self._cell_length}, "
                f"cloud_size={self._cloud_size}, "
                f"field_magnitude={self._field_magnitude})")
