# MIT License (see LICENSE)
"""
Per-frame time stepping for particles.

A frame is split into two passes over all particles:

1. integrate_position: x += v dt, then clamp x into the box.
2. integrate_velocity: gravity, air drag, then wall reflection.

Every position is updated before any velocity, so the wall test and the
broadphase both see end-of-frame positions. The clamp is a hard clamp:
velocity is left alone, which lets fast spheres stick briefly to a wall
until the reflection in pass 2 turns them around.
"""
from __future__ import annotations

import numpy as np

from ..constants import C_AIR, E_WALL
from ..types import Particle
from .forces import apply_gravity, apply_air_drag, bounce_walls


def integrate_position(p: Particle, dt: float, box_size: float) -> None:
    """
    Advance position by explicit Euler and clamp each axis into the box.

    The clamp range is [-box_size/2, box_size/2] for the center, not the
    center inset by the radius.
    """
    half = 0.5 * box_size
    p.position += p.velocity * dt
    np.clip(p.position, -half, half, out=p.position)


def integrate_velocity(
    p: Particle,
    dt: float,
    g: np.ndarray,
    box_size: float,
    c_air: float = C_AIR,
    e_wall: float = E_WALL,
) -> int:
    """
    Apply gravity and drag for one frame, then bounce off touched walls.

    Returns:
        Number of wall reflections applied to this particle.
    """
    apply_gravity(p, g, dt)
    apply_air_drag(p, dt, c_air)
    return bounce_walls(p, box_size, e_wall)
