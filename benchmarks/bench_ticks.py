"""
Microbenchmark: time per tick vs number of particles.
Run:
  python benchmarks/bench_ticks.py
"""
import time
from dataclasses import replace

from particle_sim.simulation import Simulation
from particle_sim.presets import default_scenario
from particle_sim.profiler import Profiler
from particle_sim.renderer import NullRenderer


def run(n: int, ticks: int = 20):
    prof = Profiler()
    base = default_scenario()
    # split n evenly between the species
    per_type = max(1, n // len(base.particles))
    scenario = base.replace(particles=tuple(
        replace(t, particle_count=per_type) for t in base.particles
    ))
    sim = Simulation(scenario, map_radius=200.0, seed=12345, renderer=NullRenderer(), profiler=prof)

    # warmup
    for _ in range(2):
        sim.tick(1.0)

    t0 = time.perf_counter()
    for _ in range(ticks):
        sim.tick(1.0)
    t1 = time.perf_counter()

    per_tick = (t1 - t0) / ticks
    return per_tick, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 200]:
        per_tick, summary = run(n)
        print(f"N={n:4d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
        for k in ["integrate", "diagnostics", "publish"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
