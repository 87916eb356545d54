"""
Microbenchmark: time per advance() vs number of particles.
Run:
  python benchmarks/bench_advance.py
"""
import time
import numpy as np
from sphere_sim.simulation import Simulation
from sphere_sim.profiler import Profiler

def run(n: int, frames: int = 120):
    prof = Profiler()
    sim = Simulation(rng=np.random.default_rng(12345), profiler=prof)
    sim.reset(n)

    dt = 1/60
    # warmup (first frame is the clock baseline)
    for k in range(1, 11):
        sim.advance(k * dt)
    prof.stats.clear()

    t0 = time.perf_counter()
    for k in range(11, 11 + frames):
        sim.advance(k * dt)
    t1 = time.perf_counter()

    per_frame = (t1 - t0) / frames
    return per_frame, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500, 1000]:
        per_frame, summary = run(n)
        print(f"N={n:5d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}")
        for k in ["positions", "velocities", "grid", "collide"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
