# MIT License (see LICENSE)
"""
Core physics of the particle simulation.

This subpackage provides:
    - Field laws: electric, magnetic and gravity-like fields, Lorentz force.
    - Force model: pairwise particle forces, boundary and drag, per-particle totals.
    - Integrator: leapfrog step over rotating particle buffers.
    - Invariants: kinetic energy, momentum, gravity-like potential.

Typical usage:
    from particle_sim.core import calculate_force, leapfrog_step

    leapfrog_step(t0, t_half, t1, dt, map_radius, scenario)
"""
from .fields import (
    electric_field,
    magnetic_field,
    gravity_field,
    lorentz_force,
)
from .forces import (
    clip_force,
    force_from_particle,
    boundary_force,
    air_resistance,
    calculate_force,
    force_profile,
)
from .integrators import leapfrog_step
from .invariants import (
    kinetic_energy,
    linear_momentum,
    gravitational_potential_energy,
)

__all__ = [
    # Fields
    "electric_field",
    "magnetic_field",
    "gravity_field",
    "lorentz_force",
    # Forces
    "clip_force",
    "force_from_particle",
    "boundary_force",
    "air_resistance",
    "calculate_force",
    "force_profile",
    # Integrator
    "leapfrog_step",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
    "gravitational_potential_energy",
]
