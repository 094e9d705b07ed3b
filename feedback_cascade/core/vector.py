"""
Immutable 3-vector used for particle positions and directions.
"""

import numpy as np
from typing import Iterable, NamedTuple


class Vector3(NamedTuple):
    """Immutable (x, y, z) triple with the usual vector arithmetic."""

    x: float
    y: float
    z: float

    @classmethod
    def of(cls, values: Iterable[float]) -> "Vector3":
        """Build from any 3-element iterable (tuple, list, ndarray)."""
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return float(np.sqrt(self.dot(self)))

    def normalized(self) -> "Vector3":
        """
        Unit vector along self.

        Raises:
            ValueError: for a zero-length vector
        """
        n = self.norm()
        if n == 0.0:
            raise ValueError("Cannot normalize zero-length vector")
        return Vector3(self.x / n, self.y / n, self.z / n)
