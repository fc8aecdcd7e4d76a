# MIT License (see LICENSE)
"""
Ready-made scenarios.

default_scenario() is what the examples and benchmarks start from: two
oppositely charged species that repel at short range and attract weakly
at long range, plus a mouse particle whose negative k2 pushes everything
away from the pointer.
"""
from __future__ import annotations

from .types import ParticleType, Scenario, SharedConfig


def default_scenario() -> Scenario:
    positive = ParticleType(
        uid="positive",
        color="#ff0066",
        particle_count=60,
        charge=1.0,
        mass=1.0,
        particle_radius=5.0,
        r_offset=0.0,
        r_scale=0.1,
        k1=0.5,
        k2=1.0,
        max_abs=0.5,
        air_resistance_coeff=0.01,
        spring_damping_coeff=0.05,
    )
    negative = ParticleType(
        uid="negative",
        color="#00ffff",
        particle_count=60,
        charge=-1.0,
        mass=2.0,
        particle_radius=7.0,
        r_offset=0.0,
        r_scale=0.1,
        k1=0.5,
        k2=1.0,
        max_abs=0.5,
        air_resistance_coeff=0.01,
        spring_damping_coeff=0.05,
    )
    mouse = ParticleType(
        uid="mouse",
        color="#ffffff",
        particle_count=0,
        mass=1.0,
        particle_radius=10.0,
        r_scale=0.1,
        k2=-100.0,
        max_abs=1.0,
    )
    shared = SharedConfig(
        gravitational_constant=0.01,
        permittivity_inverse=1.0,
        permeability=0.5,
        max_force_dist=30.0,
        tail_fade=0.9,
        color_strength=1.0,
        time_scale=1.0,
    )
    return Scenario(particles=(positive, negative), mouse_particle=mouse, shared=shared)
