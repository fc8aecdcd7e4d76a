# MIT License (see LICENSE)
"""
Force model for the particle simulation.

Pairwise forces are computed for one particle at a time from its own type's
parameters, so they are not equal and opposite: the near-field term uses
this particle's k1/r_scale/r_offset, the Lorentz term this particle's
charge, and the clamp this particle's max_abs. Newton's third law does not
hold and is not meant to.

Key concepts:
- force_from_particle is the pairwise force on one particle from another.
- calculate_force adds the global effects (arena boundary, air resistance)
  and sums over the whole population plus the mouse particle.
- Everything is brute force O(N) per particle, O(N²) per tick.
- Nothing here raises. Unresolved types give zero force, coincident
  positions give NaN/inf, and clip_force bounds everything else.
"""
from __future__ import annotations

import numpy as np

from ..constants import BOUNDARY_STIFFNESS
from ..types import Particle, ParticleType, Scenario
from ..util import dot, length, length_sq, mult, normalise, sub, vec, zero
from .fields import electric_field, gravity_field, lorentz_force, magnetic_field


def clip_force(force: np.ndarray, max_abs: float) -> np.ndarray:
    """
    Clamp the magnitude of a force, preserving its direction.

    Returns the force unchanged when |f| <= max, otherwise the force
    rescaled to length exactly max.
    """
    if length_sq(force) <= max_abs * max_abs:
        return force
    return mult(normalise(force), max_abs)


def near_field_force(r: np.ndarray, this_type: ParticleType) -> np.ndarray:
    """
    Short-range repulsion k1 / (|r| + r_offset)³ along r.

    Negative k1 turns it into an attraction.
    """
    r_plus = length(r) + this_type.r_offset
    return mult(normalise(r), this_type.k1 / (r_plus * r_plus * r_plus))


def damping_force(
    r: np.ndarray,
    this: Particle,
    other: Particle,
    this_type: ParticleType,
) -> np.ndarray:
    """
    Damping along the contact normal for two overlapping particles.

    Opposes the normal component of the relative velocity.
    """
    r_norm = normalise(r)
    dxdt = dot(sub(this.vel, other.vel), r_norm)
    return mult(r_norm, -dxdt * this_type.spring_damping_coeff)


def _resolve_pair(
    this: Particle, other: Particle, scenario: Scenario
) -> tuple[ParticleType, ParticleType] | None:
    this_type = scenario.type_for(this.type)
    other_type = scenario.type_for(other.type)
    if this_type is None or other_type is None:
        return None
    return this_type, other_type


def force_from_particle(this: Particle, other: Particle, scenario: Scenario) -> np.ndarray:
    """
    Force exerted on `this` by `other`.

    Sum of four terms evaluated at the scaled separation
    r = (this.pos - other.pos) * this_type.r_scale:
        near-field:   k1 / (|r| + r_offset)³ along r
        gravity-like: G * other.k2 / |r|² toward other, times this.mass
        damping:      -c (Δv · n̂) n̂, only while |r|² <= radius_a + radius_b
        Lorentz-like: this.charge (E + v × B) from other's charge/velocity
    clipped to this_type.max_abs.

    Args:
        this: The particle the force acts on.
        other: The source particle.
        scenario: Live configuration used to resolve both types.

    Returns:
        Force vector. Zero if either type is unresolved or the pair is
        beyond shared.max_force_dist.
    """
    pair = _resolve_pair(this, other, scenario)
    if pair is None:
        return zero()
    this_type, other_type = pair
    shared = scenario.shared

    r = mult(sub(this.pos, other.pos), this_type.r_scale)
    r2 = length_sq(r)
    if r2 > shared.max_force_dist * shared.max_force_dist:
        return zero()

    force = near_field_force(r, this_type)
    force = force + mult(
        gravity_field(shared.gravitational_constant, r, other_type.k2),
        this_type.mass,
    )

    if r2 <= this_type.particle_radius + other_type.particle_radius:
        force = force + damping_force(r, this, other, this_type)

    e = electric_field(shared.permittivity_inverse, r, other_type.charge)
    b = magnetic_field(shared.permeability, r, other_type.charge, other.vel)
    force = force + lorentz_force(this_type.charge, this.vel, e, b)

    return clip_force(force, this_type.max_abs)


def boundary_force(pos: np.ndarray, map_radius: float) -> np.ndarray:
    """
    Weak containment force for the circular arena.

    Zero inside the disk of radius map_radius; outside, a linear pull toward
    the centre proportional to the distance past the edge.
    """
    to_centre = -pos
    if length_sq(to_centre) > map_radius * map_radius:
        return mult(normalise(to_centre), (length(to_centre) - map_radius) * BOUNDARY_STIFFNESS)
    return zero()


def air_resistance(vel: np.ndarray, coeff: float) -> np.ndarray:
    """Linear drag F = -c * v."""
    return mult(vel, -coeff)


def calculate_force(
    particle: Particle,
    map_radius: float,
    scenario: Scenario,
    particles: list[Particle],
    mouse: Particle | None,
) -> np.ndarray:
    """
    Total force on one particle.

    boundary + air resistance + Σ force_from_particle over every other
    particle in `particles` + the force from the mouse particle.

    Args:
        particle: The particle to evaluate. Skipped in `particles` by identity.
        map_radius: Radius of the arena.
        scenario: Live configuration.
        particles: The population snapshot forces are evaluated against.
        mouse: The mouse particle, or None when there is no pointer.
    """
    force = boundary_force(particle.pos, map_radius)

    own_type = scenario.type_for(particle.type)
    if own_type is not None:
        force = force + air_resistance(particle.vel, own_type.air_resistance_coeff)

    for other in particles:
        if other is particle:
            continue
        force = force + force_from_particle(particle, other, scenario)

    if mouse is not None:
        force = force + force_from_particle(particle, mouse, scenario)

    return force


def force_profile(type_uid: str, scenario: Scenario, distances) -> np.ndarray:
    """
    Sample the pairwise force law of one particle type against itself.

    A resting probe of type `type_uid` is placed at (d, 0) next to a resting
    particle of the same type at the origin; the x-component of the force on
    the probe is recorded for each d. Positive values are repulsive.

    Useful for plotting and for tuning k1/k2/r_offset before running.
    """
    source = Particle(pos=(0.0, 0.0), vel=(0.0, 0.0), type=type_uid)
    out = np.empty(len(distances), dtype=np.float64)
    for i, d in enumerate(distances):
        probe = Particle(pos=vec(d, 0.0), vel=(0.0, 0.0), type=type_uid)
        out[i] = force_from_particle(probe, source, scenario)[0]
    return out
