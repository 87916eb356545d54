# examples/single_drop.py
import numpy as np

from sphere_sim import Simulation, Particle
from sphere_sim.renderer import DebugRenderer

sim = Simulation(rng=np.random.default_rng(0))
sim.reset(1)
sim.particles[0] = Particle.with_radius(0.5, color=(1.0, 0.2, 0.2))

renderer = DebugRenderer(verbose=True)
dt = 1/60
for k in range(1, 61):
    sim.advance(k * dt)
    if k % 10 == 0:
        renderer.render_simulation(sim)
