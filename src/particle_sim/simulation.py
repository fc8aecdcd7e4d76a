# MIT License (see LICENSE)
"""
The simulation loop.

The Simulation class owns the particle population and the live Scenario
and performs one advance-and-publish step per external tick:

    1. Snapshot the scenario reference (a swap mid-tick is not observed).
    2. dt = delta_time * shared.time_scale
    3. Leapfrog step t0 -> t_half -> t1.
    4. Swap t0 and t1 (ping-pong, no reallocation).
    5. Kinetic energy and smoothed FPS diagnostics.
    6. Build render records and hand the Frame to the renderer.

Scheduling belongs to the host: something calls tick() once per frame.
The population is only reseeded by restart(), never by set_scenario(),
so changing a type's particle_count has no effect until the next restart.

Structure:
    - User builds a Scenario (see particle_sim.presets / particle_sim.io).
    - User creates Simulation(scenario, map_radius).
    - Host calls sim.tick(delta_time) in its frame loop.
"""
from __future__ import annotations
import logging
import time
from typing import Callable

import numpy as np

from .constants import FALLBACK_RGB, FPS_SMOOTHING, INITIAL_SPEED_RADIUS
from .core.integrators import leapfrog_step
from .core.invariants import kinetic_energy
from .profiler import Profiler
from .renderer.adapter import RendererAdapter
from .types import Frame, Particle, RenderRecord, Scenario
from .util import f64, random_in_circle, zero

logger = logging.getLogger(__name__)


class Simulation:
    """
    Particle simulation world.

    Attributes:
        map_radius: Radius of the circular arena, centred on the origin.
        renderer: Optional adapter that receives every Frame.
        profiler: Optional Profiler instance for timing statistics.
        log_every: Emit a DEBUG diagnostics line every this many ticks.
        time: Accumulated time-scaled simulation time.
        tick_count: Number of ticks performed since the last restart.
        kinetic_energy: Kinetic energy of the live population after the last tick.
        fps: Smoothed frames-per-second estimate.
    """

    def __init__(
        self,
        scenario: Scenario,
        map_radius: float,
        seed: int | None = None,
        renderer: RendererAdapter | None = None,
        profiler: Profiler | None = None,
        clock: Callable[[], float] = time.perf_counter,
        log_every: int = 600,
    ) -> None:
        """
        Args:
            scenario: Initial configuration.
            map_radius: Arena radius; must be positive.
            seed: Seed for the spawn RNG. None draws fresh entropy.
            renderer: Receives a Frame after every tick.
            profiler: Times the phases of every tick.
            clock: Wall clock used for the FPS estimate (seconds).
            log_every: Tick interval of the DEBUG diagnostics line.

        Raises:
            ValueError: If map_radius is not positive.
        """
        if not map_radius > 0:
            raise ValueError(f"map_radius must be positive, got {map_radius}")

        self.map_radius = float(map_radius)
        self.renderer = renderer
        self.profiler = profiler
        self.log_every = log_every
        self.rng = np.random.default_rng(seed)

        self._scenario = scenario
        self._clock = clock
        self._mouse_pos: np.ndarray | None = None

        self.restart()

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    def set_scenario(self, scenario: Scenario) -> None:
        """
        Replace the configuration without respawning.

        Takes effect from the next tick. Particles whose type uid disappears
        are kept but stop moving and exert no force until a restart.
        """
        self._scenario = scenario
        logger.info(
            "Scenario replaced: %d particle types, mouse type %r",
            len(scenario.particles), scenario.mouse_particle.uid,
        )

    def set_mouse_pos(self, pos) -> None:
        """
        Move the pointer-controlled particle.

        Args:
            pos: New [x, y] position, or None to remove the mouse particle
                from the simulation (pointer left the arena).
        """
        self._mouse_pos = None if pos is None else f64(pos)

    @property
    def mouse_pos(self) -> np.ndarray | None:
        return self._mouse_pos

    def restart(self, particles: list[Particle] | None = None) -> None:
        """
        Discard the population and spawn a fresh one.

        Each type spawns particle_count particles uniformly inside the arena
        with a random velocity inside the disk of radius INITIAL_SPEED_RADIUS.
        All three buffers are rebuilt.

        Args:
            particles: Explicit initial population to use instead of random
                spawning (copied, the caller's objects are not kept).
        """
        if particles is not None:
            spawned = [p.copy() for p in particles]
        else:
            spawned = []
            for ptype in self._scenario.particles:
                for _ in range(ptype.particle_count):
                    spawned.append(Particle(
                        pos=random_in_circle(self.rng, self.map_radius),
                        vel=random_in_circle(self.rng, INITIAL_SPEED_RADIUS),
                        type=ptype.uid,
                    ))

        self.t0: list[Particle] = spawned
        self.t_half: list[Particle] = [p.copy() for p in spawned]
        self.t1: list[Particle] = [p.copy() for p in spawned]

        self.time = 0.0
        self.tick_count = 0
        self.fps = 0.0
        self._last_tick_at: float | None = None
        self.kinetic_energy = kinetic_energy(self.t0, self._scenario)

        logger.info(
            "Spawned %d particles of %d types in arena of radius %.1f",
            len(spawned), len(self._scenario.particles), self.map_radius,
        )

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    @property
    def particles(self) -> list[Particle]:
        """The live population (the t0 buffer)."""
        return self.t0

    def mouse_particle(self, scenario: Scenario | None = None) -> Particle | None:
        """The mouse particle at the current pointer position, or None."""
        if self._mouse_pos is None:
            return None
        scenario = scenario or self._scenario
        return Particle(pos=self._mouse_pos, vel=zero(), type=scenario.mouse_particle.uid)

    def _integrate(self, dt: float, scenario: Scenario, mouse: Particle | None) -> None:
        leapfrog_step(
            self.t0, self.t_half, self.t1, dt, self.map_radius, scenario, mouse
        )
        self.t0, self.t1 = self.t1, self.t0

    def _update_fps(self) -> None:
        now = self._clock()
        if self._last_tick_at is not None:
            elapsed = now - self._last_tick_at
            if elapsed > 0:
                self.fps = FPS_SMOOTHING * self.fps + (1.0 - FPS_SMOOTHING) * (1.0 / elapsed)
        self._last_tick_at = now

    def tick(self, delta_time: float) -> Frame:
        """
        Advance the simulation by one external tick and publish it.

        Args:
            delta_time: Host frame delta. Multiplied by shared.time_scale.

        Returns:
            The Frame that was handed to the renderer.
        """
        scenario = self._scenario
        mouse = self.mouse_particle(scenario)
        dt = float(delta_time) * scenario.shared.time_scale
        prof = self.profiler

        if prof:
            with prof.section("integrate"):
                self._integrate(dt, scenario, mouse)
        else:
            self._integrate(dt, scenario, mouse)

        self.time += dt
        self.tick_count += 1

        if prof:
            with prof.section("diagnostics"):
                self.kinetic_energy = kinetic_energy(self.t0, scenario)
                self._update_fps()
        else:
            self.kinetic_energy = kinetic_energy(self.t0, scenario)
            self._update_fps()

        frame = Frame(
            time=self.time,
            dt=dt,
            records=self.render_data(scenario, mouse),
            kinetic_energy=self.kinetic_energy,
            fps=self.fps,
        )

        if self.renderer is not None:
            if prof:
                with prof.section("publish"):
                    self.renderer.render_frame(frame)
            else:
                self.renderer.render_frame(frame)

        if self.log_every and self.tick_count % self.log_every == 0:
            logger.debug(
                "Tick %d | t=%.3f | KE=%.4f | fps=%.1f",
                self.tick_count, self.time, self.kinetic_energy, self.fps,
            )
        return frame

    def render_data(
        self,
        scenario: Scenario | None = None,
        mouse: Particle | None = None,
    ) -> list[RenderRecord]:
        """
        Flat render records for the live population, followed by the mouse.

        Particles of an unresolved type are drawn in FALLBACK_RGB with
        radius 0.
        """
        scenario = scenario or self._scenario
        if mouse is None:
            mouse = self.mouse_particle(scenario)
        population = self.t0 if mouse is None else [*self.t0, mouse]

        records = []
        for p in population:
            ptype = scenario.type_for(p.type)
            if ptype is None:
                color, radius = FALLBACK_RGB, 0.0
            else:
                color, radius = ptype.rgb, ptype.particle_radius
            records.append(RenderRecord(
                x=float(p.pos[0]),
                y=float(p.pos[1]),
                vx=float(p.vel[0]),
                vy=float(p.vel[1]),
                color=color,
                radius=radius,
            ))
        return records
