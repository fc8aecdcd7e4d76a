# MIT License (see LICENSE)
"""
Field laws behind the long-range pairwise terms.

A source particle at separation r (pointing from the source to the probe)
produces:

    E = r * q * (1/ε) / (|r|³ 4π)               electric field (planar vector)
    B = μ q (v × r) / (|r|³ 4π)                 magnetic field (z scalar)
    g = -r * G * k2 / |r|³                       gravity-like field

and a probe with charge q' and velocity v' feels the Lorentz force
F = q' (E + v' × B).

None of these guard |r| = 0; coincident particles produce NaN/inf.
"""
from __future__ import annotations

import numpy as np

from ..constants import FOUR_PI
from ..util import add, cross_orthogonal, cross_plane, length, mult


def electric_field(permittivity_inverse: float, r: np.ndarray, charge: float) -> np.ndarray:
    """
    Electric field of a point charge at separation r.

    Args:
        permittivity_inverse: 1/ε. Zero switches the field off.
        r: Separation vector from the source to the probe.
        charge: Charge of the source.
    """
    n = length(r)
    return mult(r, charge * permittivity_inverse / (n * n * n * FOUR_PI))


def magnetic_field(permeability: float, r: np.ndarray, charge: float, v: np.ndarray) -> float:
    """
    Magnetic field of a moving point charge at separation r.

    Returns the z-component; in the plane the field is always perpendicular
    to both v and r.
    """
    n = length(r)
    return (permeability * charge * cross_plane(v, r)) / (n * n * n * FOUR_PI)


def electric_force(charge: float, e: np.ndarray) -> np.ndarray:
    return mult(e, charge)


def magnetic_force(charge: float, v: np.ndarray, b: float) -> np.ndarray:
    """Force q (v × B) on a charge moving with velocity v through field b."""
    return cross_orthogonal(v, b * charge)


def lorentz_force(charge: float, v: np.ndarray, e: np.ndarray, b: float) -> np.ndarray:
    """F = q (E + v × B), see maths of electric_field/magnetic_field."""
    return add(electric_force(charge, e), magnetic_force(charge, v, b))


def gravity_field(gravitational_constant: float, r: np.ndarray, k2: float) -> np.ndarray:
    """
    Attractive field of a source with coupling k2 at separation r.

    Magnitude G k2 / |r|², pointing back toward the source.
    """
    n = length(r)
    return mult(r, -gravitational_constant * k2 / (n * n * n))
