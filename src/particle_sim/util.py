# MIT License (see LICENSE)
"""
2D vector math and small numeric helpers.

Vectors are float64 numpy arrays of shape (2,). Every function here returns
a new array and never writes into its arguments, so a vector handed to a
particle can be shared freely between the rotating buffers.

Division by zero is deliberately not guarded: normalise() and div() yield
NaN/inf (with a numpy RuntimeWarning) for zero-length input, and callers
are expected not to pass one.
"""
from __future__ import annotations
import re

import numpy as np

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets tuples and lists be used for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def vec(x: float, y: float) -> np.ndarray:
    """Build a 2D vector from components."""
    return np.array([x, y], dtype=np.float64)


def zero() -> np.ndarray:
    """A fresh zero vector."""
    return np.zeros(2, dtype=np.float64)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + b


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a - b


def mult(a: np.ndarray, s: float) -> np.ndarray:
    return a * s


def div(a: np.ndarray, s: float) -> np.ndarray:
    # np.float64 keeps s / 0 on the numpy path (inf/nan) instead of ZeroDivisionError
    return a / np.float64(s)


def vec_sum(*vs: np.ndarray) -> np.ndarray:
    """Sum any number of vectors, starting from the origin."""
    out = zero()
    for v in vs:
        out = out + v
    return out


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length_sq(a: np.ndarray) -> float:
    """Squared magnitude. Avoids sqrt for cutoff comparisons."""
    return a[0] * a[0] + a[1] * a[1]


def length(a: np.ndarray) -> float:
    return np.sqrt(length_sq(a))


def normalise(a: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of a.

    Unlike a guarded unit(), the zero vector yields NaN components.
    """
    return div(a, length(a))


def cross_plane(a: np.ndarray, b: np.ndarray) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.

    The z-component of the 3D cross product (a, 0) × (b, 0).
    """
    return a[0] * b[1] - a[1] * b[0]


def cross_orthogonal(v: np.ndarray, z: float) -> np.ndarray:
    """
    Cross product of a planar vector with a z-axis scalar: (vx, vy, 0) × (0, 0, z).

    Result: (vy*z, -vx*z). Used for the magnetic part of the Lorentz force,
    where the field is perpendicular to the simulation plane.
    """
    return np.array([v[1] * z, -v[0] * z], dtype=np.float64)


def random_in_circle(rng: np.random.Generator, radius: float) -> np.ndarray:
    """
    Uniform sample from the disk of the given radius.

    Polar sampling without rejection: angle ~ U[0, 2π), r = radius * sqrt(U).
    The sqrt keeps the density uniform per unit area.
    """
    angle = rng.random() * 2.0 * np.pi
    r = radius * np.sqrt(rng.random())
    return np.array([np.cos(angle) * r, np.sin(angle) * r], dtype=np.float64)


def hex_to_rgb(color: str) -> tuple[int, int, int] | None:
    """
    Parse a '#rrggbb' colour string.

    Returns None for anything that is not exactly a '#' followed by six
    hex digits.
    """
    if not isinstance(color, str) or _HEX_COLOR.fullmatch(color) is None:
        return None
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
