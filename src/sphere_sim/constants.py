# MIT License (see LICENSE)
"""
Physical constants and default parameters used throughout the simulation.

Units are SI (meters, seconds). The box is a cube centered at the origin
with edge length BOX_SIZE; z points up.
"""
from __future__ import annotations

# Edge length of the cubic container in meters.
BOX_SIZE: float = 4.0

# Standard gravity, pointing down the z-axis.
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?gn
G_GRAVITY: tuple[float, float, float] = (0.0, 0.0, -9.80665)

# Coefficient of restitution for sphere-sphere contacts.
E_SPHERE: float = 0.9

# Coefficient of restitution for sphere-wall contacts.
E_WALL: float = 0.6

# Air drag coefficient. Deceleration is C_AIR * r² / m * v, so with
# m = r³ small spheres are damped more strongly than large ones.
C_AIR: float = 0.05

# Reported frame rate when no time has elapsed yet.
FPS_FALLBACK: float = 60.0

# Seconds between automatic re-randomizations of the scene.
RESET_DELAY: float = 5.0

# Particle count used when the driver is not told otherwise.
DEFAULT_PARTICLE_COUNT: int = 50
