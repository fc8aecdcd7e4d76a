# MIT License (see LICENSE)
"""
Leapfrog (kick-drift-kick) integration over rotating particle buffers.

The population lives in three equally sized lists of Particle:

    t0      state at the start of the tick (read only here)
    t_half  half-step state: v(t+dt/2), and the positions forces are
            re-evaluated at
    t1      state at the end of the tick

One call performs:

    1. a0   = F(t0) / m
       v½   = v0 + a0 dt/2
       x½   = x0 + v½                (positional delta is v½, not v½ dt)
    2. x1   = x0 + v½ dt
       x½   = x1
    3. a½   = F(t_half) / m
       v1   = v½ + a½ dt/2

Step 1's x½ is overwritten by step 2 before anything reads it, so the
scheme is standard velocity Verlet in effect. The caller swaps t0 and t1
afterwards; the buffers are reused every tick and never reallocated.

Reference:
    https://en.wikipedia.org/wiki/Leapfrog_integration
"""
from __future__ import annotations

from ..types import Particle, Scenario
from ..util import add, div, mult
from .forces import calculate_force


def _carry(src: Particle, dst: Particle) -> None:
    """Copy state unchanged into another buffer slot."""
    dst.pos = src.pos
    dst.vel = src.vel
    dst.type = src.type


def leapfrog_step(
    t0: list[Particle],
    t_half: list[Particle],
    t1: list[Particle],
    dt: float,
    map_radius: float,
    scenario: Scenario,
    mouse: Particle | None = None,
) -> None:
    """
    Advance the population by dt, writing into t_half and t1.

    Particles whose type the scenario cannot resolve are carried forward
    unchanged instead of being integrated.

    Args:
        t0: Current state. Not modified.
        t_half: Scratch buffer for the half step (overwritten).
        t1: Output buffer for the next state (overwritten).
        dt: Time-scaled timestep. May be zero or negative.
        map_radius: Arena radius for the boundary force.
        scenario: Configuration snapshot used for the whole step.
        mouse: The pointer-controlled particle, or None.
    """
    half_dt = dt / 2

    # 1. Half-step velocity (and provisional position)
    for p0, ph in zip(t0, t_half):
        ptype = scenario.type_for(p0.type)
        ph.type = p0.type
        if ptype is None:
            _carry(p0, ph)
            continue
        acc = div(calculate_force(p0, map_radius, scenario, t0, mouse), ptype.mass)
        v = add(p0.vel, mult(acc, half_dt))
        ph.vel = v
        ph.pos = add(p0.pos, v)

    # 2. Full-step position, mirrored into the half-step buffer
    for p0, ph, p1 in zip(t0, t_half, t1):
        p1.type = p0.type
        if scenario.type_for(p0.type) is None:
            _carry(p0, p1)
            continue
        p1.pos = add(p0.pos, mult(ph.vel, dt))
        ph.pos = p1.pos

    # 3. Second half-step velocity from forces at the new positions
    for ph, p1 in zip(t_half, t1):
        ptype = scenario.type_for(ph.type)
        if ptype is None:
            continue
        acc = div(calculate_force(ph, map_radius, scenario, t_half, mouse), ptype.mass)
        p1.vel = add(ph.vel, mult(acc, half_dt))
