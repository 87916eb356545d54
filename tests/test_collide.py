# MIT License (see LICENSE)
import numpy as np
import pytest

from sphere_sim.collision.contact import closing_speed, collide
from sphere_sim.constants import E_SPHERE
from sphere_sim.types import Particle


def _momentum(*ps):
    return sum(p.mass * p.velocity for p in ps)


def test_headon_impulse():
    """
    1D head-on contact with restitution e:
      closing speed s -> -e s
      momentum unchanged
    """
    a = Particle.with_radius(0.5, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Particle.with_radius(0.3, position=(0.7, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0))
    p0 = _momentum(a, b)
    s0 = closing_speed(a, b)
    assert s0 == pytest.approx(2.0)

    assert collide(a, b)

    assert closing_speed(a, b) == pytest.approx(-E_SPHERE * s0)
    assert np.allclose(_momentum(a, b), p0, atol=1e-12)


def test_oblique_impulse_keeps_tangential_velocity():
    a = Particle.with_radius(0.4, position=(0.0, 0.0, 0.0), velocity=(2.0, 1.0, -0.5))
    b = Particle.with_radius(0.2, position=(0.3, 0.3, 0.1), velocity=(-1.0, 0.0, 0.25))
    n = (b.position - a.position) / np.linalg.norm(b.position - a.position)
    va0, vb0 = a.velocity.copy(), b.velocity.copy()

    assert collide(a, b)

    dva = a.velocity - va0
    dvb = b.velocity - vb0
    # Velocity changes lie along the contact normal only.
    assert np.allclose(np.cross(dva, n), 0.0, atol=1e-12)
    assert np.allclose(np.cross(dvb, n), 0.0, atol=1e-12)
    assert np.allclose(a.mass * dva + b.mass * dvb, 0.0, atol=1e-12)
    assert closing_speed(a, b) <= 0.0


def test_same_particle_is_noop():
    a = Particle.with_radius(0.5, velocity=(3.0, -2.0, 1.0))
    v0 = a.velocity.copy()
    assert not collide(a, a)
    assert np.array_equal(a.velocity, v0)


def test_no_contact_cases():
    # Too far apart.
    a = Particle.with_radius(0.1, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Particle.with_radius(0.1, position=(1.0, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0))
    assert not collide(a, b)

    # Overlapping but separating.
    c = Particle.with_radius(0.5, position=(0.0, 0.0, 0.0), velocity=(-1.0, 0.0, 0.0))
    d = Particle.with_radius(0.5, position=(0.5, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    assert not collide(c, d)
    assert np.array_equal(c.velocity, [-1.0, 0.0, 0.0])

    # Distinct particles with identical state: no normal, no impulse.
    e = Particle.with_radius(0.5, position=(0.2, 0.2, 0.2), velocity=(1.0, 1.0, 1.0))
    f = Particle.with_radius(0.5, position=(0.2, 0.2, 0.2), velocity=(1.0, 1.0, 1.0))
    assert not collide(e, f)


def test_second_visit_is_noop():
    """The neighborhood scan reaches each touching pair twice."""
    a = Particle.with_radius(0.5, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.2, 0.0))
    b = Particle.with_radius(0.5, position=(0.9, 0.1, 0.0), velocity=(-0.5, 0.0, 0.0))
    assert collide(a, b)
    va, vb = a.velocity.copy(), b.velocity.copy()
    assert not collide(b, a)
    assert not collide(a, b)
    assert np.array_equal(a.velocity, va)
    assert np.array_equal(b.velocity, vb)


def test_touching_exactly_counts_as_contact():
    a = Particle.with_radius(0.5, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0))
    b = Particle.with_radius(0.5, position=(1.0, 0.0, 0.0), velocity=(0.0, 0.0, 0.0))
    assert collide(a, b)
