# MIT License (see LICENSE)
"""
Core type definitions for the particle simulation.

Defines the fundamental data structures:
- ParticleType: a species of particle sharing one set of physical parameters.
- SharedConfig: scenario-wide constants not tied to a particle type.
- Scenario: the full, immutable simulation configuration.
- Particle: the transient simulation entity (position, velocity, type uid).
- RenderRecord / Frame: what a tick publishes to a renderer.

Particles refer to their type by uid only. Types are looked up fresh each
tick through resolve_type(), so a Scenario can be swapped without touching
any particle.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace

import numpy as np

from .constants import FALLBACK_RGB
from .util import f64, hex_to_rgb


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class ParticleType:
    """
    Physical parameters shared by every particle of one species.

    Attributes:
        uid: Stable identifier, unique within a Scenario.
        color: Display colour as '#rrggbb'.
        particle_count: Number of particles spawned on (re)start.
        charge: Charge used by the Lorentz-like term.
        mass: Inertial mass; also scales the gravity-like term.
        particle_radius: Radius used by the overlap test and the renderer.
        r_offset: Additive offset of the near-field distance.
        r_scale: Scale applied to the separation vector before any term.
        k1: Near-field repulsion coefficient.
        k2: Far-field (gravity coupling) coefficient.
        max_abs: Clamp on the magnitude of each pairwise force.
        air_resistance_coeff: Linear drag coefficient.
        spring_damping_coeff: Damping applied along the normal on overlap.
    """
    uid: str
    color: str = "#ffffff"
    particle_count: int = 0
    charge: float = 0.0
    mass: float = 1.0
    particle_radius: float = 1.0
    r_offset: float = 0.0
    r_scale: float = 1.0
    k1: float = 0.0
    k2: float = 0.0
    max_abs: float = 1.0
    air_resistance_coeff: float = 0.0
    spring_damping_coeff: float = 0.0

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Colour as an (r, g, b) tuple; white when the hex string is malformed."""
        return hex_to_rgb(self.color) or FALLBACK_RGB


@dataclass(frozen=True)
class SharedConfig:
    """
    Scenario-wide constants.

    Attributes:
        gravitational_constant: Strength of the gravity-like term.
        permittivity_inverse: 1/ε of the electric field law.
        permeability: μ of the magnetic field law.
        max_force_dist: Pairwise interaction cutoff (scaled distance).
        tail_fade: Trail fade factor, read by renderers only.
        color_strength: Colour intensity, read by renderers only.
        time_scale: Multiplies every tick's delta time. Zero freezes the
            simulation, negative values run it backwards.
    """
    gravitational_constant: float = 0.0
    permittivity_inverse: float = 0.0
    permeability: float = 0.0
    max_force_dist: float = 1000.0
    tail_fade: float = 0.0
    color_strength: float = 1.0
    time_scale: float = 1.0


# =============================================================================
# Type resolution
# =============================================================================

@dataclass(frozen=True)
class Found:
    """The uid names one of the scenario's particle types."""
    type: ParticleType


@dataclass(frozen=True)
class UseMouseParticle:
    """The uid was not among the particle types but names the mouse particle."""
    type: ParticleType


@dataclass(frozen=True)
class Unresolved:
    """The uid names nothing in the scenario."""
    uid: str


TypeResolution = Found | UseMouseParticle | Unresolved


@dataclass(frozen=True)
class Scenario:
    """
    Full simulation configuration: particle types, mouse type, shared constants.

    Immutable. Hot-swapping means handing the simulation a new Scenario,
    typically built with scenario.replace(...).
    """
    particles: tuple[ParticleType, ...] = ()
    mouse_particle: ParticleType = field(
        default_factory=lambda: ParticleType(uid="mouse", color="#ffffff")
    )
    shared: SharedConfig = field(default_factory=SharedConfig)

    def __post_init__(self) -> None:
        """Accept any iterable of types but store a tuple."""
        object.__setattr__(self, "particles", tuple(self.particles))
        object.__setattr__(
            self, "_by_uid", {t.uid: t for t in self.particles}
        )

    def resolve(self, uid: str) -> TypeResolution:
        return resolve_type(self, uid)

    def type_for(self, uid: str) -> ParticleType | None:
        """Resolved type for uid, or None when unresolved."""
        res = resolve_type(self, uid)
        if isinstance(res, Unresolved):
            return None
        return res.type

    def replace(self, **changes) -> "Scenario":
        return replace(self, **changes)


def resolve_type(scenario: Scenario, uid: str) -> TypeResolution:
    """
    Look up the particle type a uid refers to.

    Order: the scenario's particle types, then the mouse particle. Anything
    else is Unresolved, which the force model and integrator treat as a
    zero-force, no-update particle rather than an error.
    """
    t = scenario._by_uid.get(uid)
    if t is not None:
        return Found(t)
    if scenario.mouse_particle.uid == uid:
        return UseMouseParticle(scenario.mouse_particle)
    return Unresolved(uid)


# =============================================================================
# Simulation state
# =============================================================================

@dataclass
class Particle:
    """
    A simulated particle.

    Attributes:
        pos: Position [x, y].
        vel: Velocity [vx, vy].
        type: uid of the ParticleType. A lookup key only; the particle does
            not own its type.
    """
    pos: np.ndarray | tuple[float, float]
    vel: np.ndarray | tuple[float, float]
    type: str

    def __post_init__(self) -> None:
        self.pos = f64(self.pos)
        self.vel = f64(self.vel)

    def copy(self) -> "Particle":
        return Particle(pos=self.pos.copy(), vel=self.vel.copy(), type=self.type)


@dataclass(frozen=True)
class RenderRecord:
    """Flat per-particle data handed to a renderer."""
    x: float
    y: float
    vx: float
    vy: float
    color: tuple[int, int, int]
    radius: float


@dataclass
class Frame:
    """
    Everything one tick publishes.

    Attributes:
        time: Simulation time after the tick.
        dt: Time-scaled delta of the tick (for trail/motion blur effects).
        records: One RenderRecord per live particle, then the mouse particle.
        kinetic_energy: Σ 0.5 m |v|² over the live population.
        fps: Smoothed frames-per-second estimate.
    """
    time: float
    dt: float
    records: list[RenderRecord] = field(default_factory=list)
    kinetic_energy: float = 0.0
    fps: float = 0.0
