# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

Simulation.tick() reports the "integrate", "diagnostics" and "publish"
sections when constructed with a Profiler, which is usually all that is
needed to see where the O(N²) force sum dominates.

Example:
    profiler = Profiler()
    sim = Simulation(scenario, map_radius=300.0, profiler=profiler)
    for _ in range(100):
        sim.tick(1.0)
    print(profiler.stats.summary()["integrate"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """Raw timing samples per section name, in seconds."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'total_ms': summed time in milliseconds
            - 'mean_ms': average time in milliseconds
            - 'max_ms': slowest sample in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * (total / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """
    Context-manager based section timer.

    Usage:
        profiler = Profiler()
        with profiler.section("forces"):
            compute_forces()
    """

    def __init__(self, clock=time.perf_counter) -> None:
        self.stats = ProfileStats()
        self._clock = clock

    def section(self, name: str):
        """Return a context manager that records the time spent in its body."""
        profiler = self

        class _Section:
            def __enter__(self):
                self.t0 = profiler._clock()

            def __exit__(self, exc_type, exc, tb):
                profiler.stats.add(name, profiler._clock() - self.t0)

        return _Section()
