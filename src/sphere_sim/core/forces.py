# MIT License (see LICENSE)
"""
Velocity-level force and boundary response for particles.

Forces here are applied directly as velocity increments over a frame
(explicit Euler), since every particle has constant mass and no force is
accumulated across steps.

- Gravity:  Δv = g dt
- Air drag: Δv = -c (r²/m) v dt
- Walls:    reflect the normal component with restitution e_wall when a
            sphere touches a wall and is moving further into it.
"""
from __future__ import annotations

import numpy as np

from ..constants import C_AIR, E_WALL
from ..types import Particle


def apply_gravity(p: Particle, g: np.ndarray, dt: float) -> None:
    """
    Accelerate a particle by a uniform gravitational field.

    Args:
        p: Particle to update (velocity modified in-place).
        g: Gravitational acceleration [gx, gy, gz] in m/s².
        dt: Frame duration in seconds.
    """
    p.velocity += g * dt


def apply_air_drag(p: Particle, dt: float, c: float = C_AIR) -> None:
    """
    Damp a particle's velocity in proportion to its cross-section per mass.

    With m = r³ the factor r²/m equals 1/r, so small spheres slow faster.
    Has no effect if c == 0.
    """
    if c != 0.0:
        p.velocity -= c * (p.radius * p.radius / p.mass) * p.velocity * dt


def bounce_walls(p: Particle, box_size: float, e: float = E_WALL) -> int:
    """
    Reflect velocity components that drive a particle into a wall.

    For each axis independently: if the sphere touches the positive wall
    and moves toward it, or touches the negative wall and moves toward it,
    that component becomes -e times itself. Position is not changed.

    Returns:
        Number of axes reflected (0-3).
    """
    half = 0.5 * box_size
    pos, vel, r = p.position, p.velocity, p.radius
    hits = 0
    for i in range(3):
        if (half - pos[i] <= r and vel[i] > 0.0) or (pos[i] + half <= r and vel[i] < 0.0):
            vel[i] = -e * vel[i]
            hits += 1
    return hits
