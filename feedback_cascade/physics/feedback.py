"""
Scalar kernels for the relativistic feedback step.

A photon interacting in the cloud produces a runaway electron which is
accelerated by the field over one cell length and re-radiates. The
secondary photon leaves along the field axis, perturbed by a random
unit vector scaled by the field magnitude.

References:
    - Dwyer, Geophys. Res. Lett. 30, 2055 (2003) (relativistic feedback)
"""

import numpy as np
import numba
from typing import Tuple


# Direction of runaway-electron acceleration (unit vector)
FIELD_AXIS = (0.0, 0.0, 1.0)


@numba.njit(fastmath=True, cache=True)
def isotropic_direction(u_cos: float, u_phi: float) -> Tuple[float, float, float]:
    """
    Map two uniform deviates to a unit vector uniform on the sphere.

    Parameters:
        u_cos: Uniform deviate in [0, 1), sets cos(theta)
        u_phi: Uniform deviate in [0, 1), sets the azimuth

    Returns:
        (x, y, z) unit vector
    """
    cos_theta = 2.0 * u_cos - 1.0
    sin_theta = np.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    phi = 2.0 * np.pi * u_phi
    return sin_theta * np.cos(phi), sin_theta * np.sin(phi), cos_theta


@numba.njit(fastmath=True, cache=True)
def field_aligned_direction(ax: float, ay: float, az: float,
                            ux: float, uy: float, uz: float,
                            magnitude: float) -> Tuple[float, float, float]:
    """
    Normalize a + magnitude * u.

    With magnitude 0 the result is the axis itself. When the sum vanishes
    (u exactly opposite a and magnitude == 1) the axis is returned.

    Parameters:
        ax, ay, az: Field axis (unit vector)
        ux, uy, uz: Random unit perturbation
        magnitude: Field magnitude (0 = exactly along the axis)

    Returns:
        (x, y, z) unit vector
    """
    x = ax + magnitude * ux
    y = ay + magnitude * uy
    z = az + magnitude * uz

    norm = np.sqrt(x * x + y * y + z * z)
    if norm < 1e-12:
        return ax, ay, az

    return x / norm, y / norm, z / norm


def split_multiplication(multiplication: float) -> Tuple[int, float]:
    """
    Split the gain into a guaranteed count and the probability of one more.

    Drawing floor(m) + Bernoulli(m - floor(m)) secondaries gives a mean of
    exactly m, and no randomness at all for integral m.

    Parameters:
        multiplication: Mean number of secondaries per interaction

    Returns:
        (whole, fraction)
    """
    whole = int(np.floor(multiplication))
    return whole, float(multiplication - whole)
