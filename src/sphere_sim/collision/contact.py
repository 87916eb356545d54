# MIT License (see LICENSE)
"""
Sphere-sphere contact resolution by instantaneous impulse.

When two spheres overlap and approach each other along the line of
centers, their normal velocities are exchanged as in a 1D collision with
restitution e:

    s   = (v1 - v2) · n          closing speed, n from p1 toward p2
    Δv1 = -m2/(m1+m2) (1+e) s n
    Δv2 = +m1/(m1+m2) (1+e) s n

Momentum is conserved exactly (m1 Δv1 + m2 Δv2 = 0). Tangential velocity
is untouched: there is no friction and no rotation. Overlap is never
corrected positionally; it resolves over later frames as the spheres
separate.

After one resolution the closing speed is -e·s <= 0, so resolving the same
pair again in the same frame is a no-op.
"""
from __future__ import annotations

import numpy as np

from ..constants import E_SPHERE
from ..types import Particle
from ..util import norm, unit


def closing_speed(a: Particle, b: Particle) -> float:
    """
    Relative speed of a toward b along the line of centers.

    Positive means approaching. Coincident centers give 0.
    """
    n = unit(b.position - a.position)
    return float(np.dot(a.velocity, n) - np.dot(b.velocity, n))


def collide(a: Particle, b: Particle, restitution: float = E_SPHERE) -> bool:
    """
    Apply the collision impulse between two particles if they are in contact.

    Args:
        a: First particle (modified in-place).
        b: Second particle (modified in-place).
        restitution: Coefficient of restitution in [0, 1].

    Returns:
        True if an impulse was applied, False for a no-op (same particle,
        not overlapping, or not approaching).
    """
    if a is b:
        return False

    d = b.position - a.position
    if norm(d) > a.radius + b.radius:
        return False

    n = unit(d)
    s = float(np.dot(a.velocity, n) - np.dot(b.velocity, n))
    if s <= 0.0:
        return False

    total = a.mass + b.mass
    wa = b.mass / total
    wb = a.mass / total
    j = (1.0 + restitution) * s * n
    a.velocity -= wa * j
    b.velocity += wb * j
    return True
