# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class consuming per-tick Frames.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for headless runs and benchmarks.
    - BufferedRenderer: Records frames for playback or export.

The simulation has no rendering dependency; these adapters are optional.

Typical usage:
    from particle_sim.renderer import DebugRenderer

    sim = Simulation(scenario, map_radius=200.0, renderer=DebugRenderer())
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
