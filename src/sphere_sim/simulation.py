# MIT License (see LICENSE)
"""
The simulation world and its per-frame pipeline.

The Simulation class owns the particles, the frame clock and the random
source. An external driver calls reset() once, then advance(timestamp)
once per rendered frame, and reads `particles` and fps() to draw.

Each advance() runs, in order:
    1. Position integration with hard clamp into the box.
    2. Velocity integration: gravity, air drag, wall reflection.
    3. Broadphase: rebuild the uniform grid from post-clamp positions.
    4. Narrowphase: resolve every particle against its 27-cell neighborhood.

Structure:
    - User creates a Simulation (optionally with a seeded rng).
    - User calls sim.reset(count).
    - User calls sim.advance(t) in a loop with non-decreasing t.
"""
from __future__ import annotations
import logging
import math
from contextlib import nullcontext
from dataclasses import dataclass, field

import numpy as np

from .clock import Clock
from .collision.broadphase import SpatialGrid
from .collision.contact import collide
from .constants import BOX_SIZE, C_AIR, E_SPHERE, E_WALL, G_GRAVITY
from .core.integrators import integrate_position, integrate_velocity
from .profiler import Profiler
from .types import Particle
from .util import f64

logger = logging.getLogger(__name__)


def radius_range(particle_count: int, box_size: float = BOX_SIZE) -> tuple[float, float]:
    """
    Radius bounds for a given particle count.

    min_radius = 0.15 L / sqrt(n), max_radius = 4 min_radius, which keeps
    the total sphere volume roughly independent of n. For n == 0 both
    bounds are infinite.
    """
    if particle_count == 0:
        return math.inf, math.inf
    min_radius = 0.15 * box_size / math.sqrt(particle_count)
    return min_radius, 4.0 * min_radius


@dataclass
class Simulation:
    """
    Spheres bouncing in a closed cubic box.

    Attributes:
        box_size: Edge length of the box in meters, centered at the origin.
        gravity: Gravitational acceleration vector (default: -9.80665 on z).
        e_sphere: Restitution for sphere-sphere contacts.
        e_wall: Restitution for sphere-wall contacts.
        c_air: Air drag coefficient.
        rng: Random source for particle construction. Pass a seeded
             np.random.default_rng(seed) for reproducible runs.
        profiler: Optional Profiler collecting per-phase timings.
        particles: Live particles; read-only for callers.
        particle_count: Count from the last reset(), kept by repeat().
        min_radius, max_radius: Radius bounds derived from particle_count.
        clock: Frame clock.
        collisions: Sphere-sphere impulses applied during the last advance().
        wall_hits: Wall reflections applied during the last advance().
    """
    box_size: float = BOX_SIZE
    gravity: tuple[float, float, float] = G_GRAVITY
    e_sphere: float = E_SPHERE
    e_wall: float = E_WALL
    c_air: float = C_AIR
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list)
    particle_count: int = 0
    min_radius: float = 0.0
    max_radius: float = 0.0
    clock: Clock = field(default_factory=Clock)
    collisions: int = 0
    wall_hits: int = 0

    def __post_init__(self) -> None:
        """Validate parameters and convert the gravity tuple to an array."""
        if self.box_size <= 0:
            raise ValueError(f"box_size must be positive, got {self.box_size}")
        for name in ("e_sphere", "e_wall"):
            e = getattr(self, name)
            if not 0.0 <= e <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {e}")
        if self.c_air < 0:
            raise ValueError(f"c_air must be non-negative, got {self.c_air}")
        self._g = f64(self.gravity)

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def fps(self) -> float:
        """Average frame rate since the last reset (60.0 before any elapsed time)."""
        return self.clock.fps()

    def reset(self, particle_count: int) -> None:
        """
        Replace all particles with particle_count freshly randomized ones.

        Radius bounds are recomputed from the count and the clock is reset,
        so the next advance() only establishes a time baseline.

        Raises:
            ValueError: If particle_count is negative.
        """
        particle_count = int(particle_count)
        if particle_count < 0:
            raise ValueError(f"particle_count must be non-negative, got {particle_count}")

        self.particle_count = particle_count
        self.min_radius, self.max_radius = radius_range(particle_count, self.box_size)
        self.particles = [
            Particle.random(self.min_radius, self.max_radius, self.rng, self.box_size)
            for _ in range(particle_count)
        ]
        self.clock.reset()
        self.collisions = 0
        self.wall_hits = 0
        logger.debug(
            "reset: %d particles, radius in [%.4f, %.4f]",
            particle_count, self.min_radius, self.max_radius,
        )

    def repeat(self) -> None:
        """Re-randomize the scene keeping the current particle count."""
        self.reset(self.particle_count)

    def _integrate(self, dt: float) -> None:
        """Run both integration passes; all positions move before any velocity changes."""
        with self._section("positions"):
            for p in self.particles:
                integrate_position(p, dt, self.box_size)

        with self._section("velocities"):
            hits = 0
            for p in self.particles:
                hits += integrate_velocity(
                    p, dt, self._g, self.box_size, self.c_air, self.e_wall
                )
            self.wall_hits = hits

    def _collide(self) -> None:
        """
        Resolve sphere-sphere contacts through the uniform grid.

        Every particle is tested against every particle in its neighborhood,
        so a touching pair is visited twice. The second visit is a no-op
        because the first leaves the pair separating.
        """
        particles = self.particles
        with self._section("grid"):
            grid = SpatialGrid(self.box_size, 2.0 * self.max_radius)
            grid.build(particles)

        with self._section("collide"):
            count = 0
            for p in particles:
                for j in grid.neighbors(p.position):
                    if collide(p, particles[j], self.e_sphere):
                        count += 1
            self.collisions = count

    def advance(self, timestamp: float) -> None:
        """
        Advance the simulation to the given timestamp (seconds).

        Timestamps must be finite and non-decreasing within one reset epoch.
        The first call after reset() has dt = 0: no motion, but positions
        are still clamped into the box and contacts are still resolved.

        A NaN timestamp is not detected: it turns positions and velocities
        into NaN, and the grid then raises ValueError when it tries to place
        a NaN position in a cell. Particles stay mutated in that case.
        """
        dt = self.clock.advance(timestamp)
        self._integrate(dt)
        if not self.particles:
            self.collisions = 0
            return
        self._collide()
