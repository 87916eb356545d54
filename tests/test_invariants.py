# MIT License (see LICENSE)
import numpy as np
import pytest

from sphere_sim.collision.contact import collide
from sphere_sim.core.invariants import kinetic_energy, linear_momentum, potential_energy
from sphere_sim.types import Particle


def test_collision_conserves_momentum_and_loses_energy():
    rng = np.random.default_rng(17)
    for _ in range(50):
        a = Particle.with_radius(0.3, position=(0.0, 0.0, 0.0), velocity=rng.normal(size=3))
        b = Particle.with_radius(0.2, position=rng.uniform(-0.25, 0.25, size=3),
                                 velocity=rng.normal(size=3))
        p0 = linear_momentum([a, b])
        ke0 = kinetic_energy([a, b])
        if collide(a, b):
            assert kinetic_energy([a, b]) < ke0
        assert np.allclose(linear_momentum([a, b]), p0, atol=1e-12)


def test_potential_energy_reference():
    g = np.array([0.0, 0.0, -9.80665])
    floor = Particle.with_radius(1.0, position=(0.5, -0.3, -2.0))
    top = Particle.with_radius(1.0, position=(0.0, 0.0, 2.0))
    assert potential_energy([floor], g, box_size=4.0) == pytest.approx(0.0)
    assert potential_energy([top], g, box_size=4.0) == pytest.approx(4.0 * 9.80665)


def test_kinetic_energy():
    p = Particle.with_radius(2.0, velocity=(1.0, 2.0, 2.0))
    assert kinetic_energy([p]) == pytest.approx(0.5 * 8.0 * 9.0)
    assert kinetic_energy([]) == 0.0
