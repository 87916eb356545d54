# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. Sphere-sphere impulses conserve
linear momentum exactly; walls, drag and restitution < 1 all remove energy,
so total energy should never grow between frames (up to clamp artifacts).
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constants import BOX_SIZE
from ..types import Particle


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """
    Total translational kinetic energy, T = Σ ½ m v².
    """
    ke = 0.0
    for p in particles:
        ke += 0.5 * p.mass * float(np.dot(p.velocity, p.velocity))
    return ke


def potential_energy(
    particles: Sequence[Particle],
    g: np.ndarray,
    box_size: float = BOX_SIZE,
) -> float:
    """
    Total gravitational potential energy relative to the box floor.

    U = Σ -m g·(x - x_floor), where x_floor is the box corner at
    (-L/2, -L/2, -L/2). For g pointing down z this is Σ m |g| (z + L/2).
    """
    floor = np.full(3, -0.5 * box_size, dtype=np.float64)
    u = 0.0
    for p in particles:
        u -= p.mass * float(np.dot(g, p.position - floor))
    return u


def linear_momentum(particles: Sequence[Particle]) -> np.ndarray:
    """
    Total linear momentum, P = Σ m v.

    Returns:
        Momentum vector [Px, Py, Pz].
    """
    total = np.zeros(3, dtype=np.float64)
    for p in particles:
        total += p.mass * p.velocity
    return total
