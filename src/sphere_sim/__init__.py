# MIT License (see LICENSE)
"""
sphere_sim - Spheres bouncing inside a closed cubic box.

This package simulates N rigid spheres under gravity and air drag,
colliding inelastically with each other and with the box walls. The
simulation advances once per rendered frame from externally supplied
timestamps.

Main entry points:
    - Simulation: The world; reset(), repeat(), advance(), fps().
    - Particle: A single sphere's kinematic and visual state.
    - Clock: Frame delta and average FPS bookkeeping.

Submodules:
    - collision: Uniform-grid broadphase and impulse resolution.
    - core: Integration passes, forces, and invariants.
    - renderer: Read-only frame consumers.
    - driver: Frame loop and periodic auto-reset.

Example:
    import numpy as np
    from sphere_sim import Simulation

    sim = Simulation(rng=np.random.default_rng(0))
    sim.reset(50)
    for frame in range(1, 601):
        sim.advance(frame / 60)
"""
from .clock import Clock
from .simulation import Simulation
from .types import Particle

__all__ = [
    # Core simulation
    "Simulation",
    "Clock",
    # Bodies
    "Particle",
]
