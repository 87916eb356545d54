# MIT License (see LICENSE)
"""
Utility functions for vector math and random sampling.

All vector helpers operate on 3D vectors represented as numpy arrays of
shape (3,). Random helpers take an explicit numpy Generator so callers can
substitute a seeded source.
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions, velocities and colors.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(3, dtype=np.float64)
    return v / n


def rand_range(rng: np.random.Generator, lo: float, hi: float) -> float:
    """Uniform random float in [lo, hi)."""
    return lo + (hi - lo) * float(rng.random())


def random_direction(rng: np.random.Generator) -> np.ndarray:
    """
    Random unit vector built from three uniforms in [-0.5, 0.5).

    Not uniform over the sphere: normalizing a point drawn from a cube
    favors the cube's diagonals.
    """
    v = np.array(
        [rng.random() - 0.5, rng.random() - 0.5, rng.random() - 0.5],
        dtype=np.float64,
    )
    return unit(v)


def env_log_level(default: str = "WARNING") -> str:
    """Log level requested through the SPHERE_SIM_LOG_LEVEL environment variable."""
    return os.environ.get("SPHERE_SIM_LOG_LEVEL", default).upper()
