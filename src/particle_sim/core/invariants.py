# MIT License (see LICENSE)
"""
Diagnostics computed from a particle population.

kinetic_energy() feeds the per-tick Frame. The momentum and potential
energy helpers exist for checking integrator behaviour; with pairwise
forces that depend on each particle's own type, momentum is only
conserved when every particle shares one type.
"""
from __future__ import annotations
import numpy as np

from ..types import Particle, Scenario
from ..util import length, length_sq, sub


def kinetic_energy(particles: list[Particle], scenario: Scenario) -> float:
    """
    T = Σ 0.5 * m * |v|²

    Particles with an unresolved type are skipped.
    """
    ke = 0.0
    for p in particles:
        ptype = scenario.type_for(p.type)
        if ptype is None:
            continue
        ke += 0.5 * ptype.mass * float(length_sq(p.vel))
    return ke


def linear_momentum(particles: list[Particle], scenario: Scenario) -> np.ndarray:
    """P = Σ m * v"""
    out = np.zeros(2, dtype=np.float64)
    for p in particles:
        ptype = scenario.type_for(p.type)
        if ptype is None:
            continue
        out += ptype.mass * p.vel
    return out


def gravitational_potential_energy(particles: list[Particle], scenario: Scenario) -> float:
    """
    Potential of the gravity-like term, U = Σ_{i<j} -G k2 m / |r|.

    Uses particle i's mass and r_scale and particle j's k2, so it is the
    exact potential only for a single-type population; mixed populations
    get an approximation.
    """
    g = scenario.shared.gravitational_constant
    u = 0.0
    n = len(particles)
    for i in range(n):
        ti = scenario.type_for(particles[i].type)
        if ti is None:
            continue
        for j in range(i + 1, n):
            tj = scenario.type_for(particles[j].type)
            if tj is None:
                continue
            # the field acts on the scaled separation s|Δx|, so U carries 1/s²
            d = float(length(sub(particles[i].pos, particles[j].pos)))
            u -= g * tj.k2 * ti.mass / (ti.r_scale * ti.r_scale * d)
    return u
