# MIT License (see LICENSE)
"""
Collision detection and resolution subsystem.

This subpackage provides:
    - Broadphase: Uniform grid over the box for neighbor queries.
    - Contact: Impulse exchange between touching, approaching spheres.

Typical usage:
    from sphere_sim.collision import SpatialGrid, collide

    grid = SpatialGrid(box_size=4.0, cell_size=2 * max_radius)
    grid.build(particles)
    for p in particles:
        for j in grid.neighbors(p.position):
            collide(p, particles[j])
"""
from .broadphase import SpatialGrid
from .contact import closing_speed, collide

__all__ = [
    # Broadphase
    "SpatialGrid",
    # Contact
    "closing_speed",
    "collide",
]
