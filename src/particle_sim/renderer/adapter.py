# MIT License (see LICENSE)
"""
Renderer adapters for the particle simulation.

The simulation has no graphics dependency. Each tick it produces a Frame of
flat RenderRecords (position, velocity, colour, radius) plus the
time-scaled dt, and hands it to whatever RendererAdapter it was given.
Shaders, textures and trails are the adapter's business.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..types import Frame, RenderRecord


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(frame.time, frame.dt)
        for record in frame.records:
            renderer.draw_particle(record)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_frame(frame)
    """

    @abstractmethod
    def begin_frame(self, time: float, dt: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Simulation time after the tick.
            dt: Time-scaled delta of the tick, for trail/motion blur effects.
        """
        ...

    @abstractmethod
    def draw_particle(self, record: RenderRecord) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Called after every record of the frame has been drawn."""
        ...

    def render_frame(self, frame: Frame) -> None:
        self.begin_frame(frame.time, frame.dt)
        for record in frame.records:
            self.draw_particle(record)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=1.0000 dt=1.0000 ===
        (12.00, -3.50) v=(0.10, 0.00) r=5.00 rgb=(255, 0, 102)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity, radius and colour.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float, dt: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} dt={dt:.4f} ===\n")

    def draw_particle(self, record: RenderRecord) -> None:
        line = f"({record.x:.2f}, {record.y:.2f})"
        if self.verbose:
            line += (
                f" v=({record.vx:.2f}, {record.vy:.2f})"
                f" r={record.radius:.2f} rgb={record.color}"
            )
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, time: float, dt: float) -> None:
        pass

    def draw_particle(self, record: RenderRecord) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that keeps every frame as plain dicts.

    Example:
        renderer = BufferedRenderer()
        sim = Simulation(scenario, map_radius=100.0, renderer=renderer)
        for _ in range(100):
            sim.tick(1.0)
        for frame in renderer.frames:
            print(frame["time"], len(frame["particles"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float, dt: float) -> None:
        self._current_frame = {
            "time": time,
            "dt": dt,
            "particles": [],
        }

    def draw_particle(self, record: RenderRecord) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "position": [record.x, record.y],
            "velocity": [record.vx, record.vy],
            "color": list(record.color),
            "radius": record.radius,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
