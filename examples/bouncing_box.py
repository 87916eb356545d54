# examples/bouncing_box.py
import numpy as np

from sphere_sim import Simulation
from sphere_sim.core import kinetic_energy, linear_momentum
from sphere_sim.driver import Driver
from sphere_sim.logging_setup import setup_logging

setup_logging("INFO")

sim = Simulation(rng=np.random.default_rng(2024))
driver = Driver(sim)
driver.start(50)

t = driver.run(300, frame_dt=1/60)
print("t:", t, "fps:", sim.fps())
print("ke:", kinetic_energy(sim.particles))
print("p:", linear_momentum(sim.particles))

# Changing the count arms the 5 s auto-reset.
driver.set_particle_count(100, now=t)
t = driver.run(400, frame_dt=1/60, start=t + 1/60)
print("t:", t, "particles:", len(sim.particles), "frames since reset:", sim.clock.total_frames)
