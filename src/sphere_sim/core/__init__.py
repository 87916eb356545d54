# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Forces: Gravity, air drag, wall reflection (velocity level).
    - Integrators: The two per-frame passes (positions, then velocities).
    - Invariants: Momentum and energy diagnostics.

Typical usage:
    from sphere_sim.core import integrate_position, integrate_velocity

    integrate_position(p, dt, box_size)
    integrate_velocity(p, dt, g, box_size)
"""
from .forces import apply_gravity, apply_air_drag, bounce_walls
from .integrators import integrate_position, integrate_velocity
from .invariants import kinetic_energy, potential_energy, linear_momentum

__all__ = [
    # Forces
    "apply_gravity",
    "apply_air_drag",
    "bounce_walls",
    # Integrators
    "integrate_position",
    "integrate_velocity",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "linear_momentum",
]
