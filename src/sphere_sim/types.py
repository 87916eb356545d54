# MIT License (see LICENSE)
"""
Core type definitions for the sphere simulation.

A Particle is a non-rotating rigid sphere of uniform density:
  dx/dt = v
  m     = r³
Only translational state is tracked; spheres carry no angular velocity.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import BOX_SIZE
from .util import f64, rand_range, random_direction


@dataclass(eq=False)
class Particle:
    """
    A rigid sphere with kinematic and visual state.

    Attributes:
        radius: Sphere radius in meters. Fixed at creation.
        mass: Mass, r³ for unit density. Fixed at creation.
        position: Center position [x, y, z] in meters.
        velocity: Linear velocity [vx, vy, vz] in m/s.
        color: RGB color with components in [0, 1]. Cosmetic only.

    Note:
        Equality is identity: two particles with equal state are still
        distinct bodies for collision purposes.
    """
    radius: float
    mass: float
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    color: np.ndarray | tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        """Convert vectors to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.color = f64(self.color)

    @classmethod
    def with_radius(cls, radius: float, **kwargs) -> "Particle":
        """Build a particle whose mass follows the uniform-density rule m = r³."""
        return cls(radius=radius, mass=radius ** 3, **kwargs)

    @classmethod
    def random(
        cls,
        min_radius: float,
        max_radius: float,
        rng: np.random.Generator,
        box_size: float = BOX_SIZE,
    ) -> "Particle":
        """
        Sample a particle somewhere inside the box.

        Draw order from rng is fixed so seeded runs reproduce exactly:
        radius, position magnitude, position direction, velocity
        magnitude, velocity direction, color.

        Position magnitude is up to half the box edge, speed up to five box
        edges per second. Directions come from random_direction() and keep
        its bias toward the cube diagonals.
        """
        radius = rand_range(rng, min_radius, max_radius)
        position = float(rng.random()) * 0.5 * box_size * random_direction(rng)
        velocity = float(rng.random()) * 5.0 * box_size * random_direction(rng)
        color = [rng.random(), rng.random(), rng.random()]
        return cls(
            radius=radius,
            mass=radius ** 3,
            position=position,
            velocity=velocity,
            color=color,
        )
