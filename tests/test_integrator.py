import numpy as np
from particle_sim.simulation import Simulation
from particle_sim.types import Particle, ParticleType, Scenario, SharedConfig
from particle_sim.core.integrators import leapfrog_step
from particle_sim.core.invariants import (
    kinetic_energy, linear_momentum, gravitational_potential_energy,
)


def inert_type(uid="a", **kw):
    """Type with every coupling off."""
    kw.setdefault("max_abs", 1e9)
    kw.setdefault("particle_radius", 0.5)
    return ParticleType(uid=uid, **kw)


def orbit_scenario(time_scale=0.01):
    star = ParticleType(uid="star", k2=1.0, mass=1.0, particle_radius=0.1, max_abs=1e9)
    return Scenario(
        particles=(star,),
        shared=SharedConfig(gravitational_constant=1.0, max_force_dist=1e6, time_scale=time_scale),
    )


def orbit_pair():
    """Two equal masses on a circular orbit of radius 1: v² = G k2 / (4 R)."""
    return [
        Particle(pos=(1.0, 0.0), vel=(0.0, 0.5), type="star"),
        Particle(pos=(-1.0, 0.0), vel=(0.0, -0.5), type="star"),
    ]


def run_buffers(particles, scenario, dt, steps, map_radius=100.0, mouse=None):
    t0 = [p.copy() for p in particles]
    th = [p.copy() for p in particles]
    t1 = [p.copy() for p in particles]
    for _ in range(steps):
        leapfrog_step(t0, th, t1, dt, map_radius, scenario, mouse)
        t0, t1 = t1, t0
    return t0


def test_zero_force_pair_stays_put():
    """No couplings, inside the arena, not overlapping: state is exactly preserved."""
    scenario = Scenario(particles=(inert_type(),), shared=SharedConfig(max_force_dist=1e6))
    start = [
        Particle(pos=(-3.0, 1.0), vel=(0.0, 0.0), type="a"),
        Particle(pos=(4.0, -2.0), vel=(0.0, 0.0), type="a"),
    ]
    out = run_buffers(start, scenario, dt=1.0, steps=200)
    for p, q in zip(start, out):
        assert np.array_equal(p.pos, q.pos)
        assert np.array_equal(p.vel, q.vel)


def test_zero_force_keeps_velocity_exactly():
    scenario = Scenario(particles=(inert_type(),), shared=SharedConfig(max_force_dist=1e6))
    start = [
        Particle(pos=(-3.0, 0.0), vel=(0.25, 0.0), type="a"),
        Particle(pos=(3.0, 0.0), vel=(0.25, 0.0), type="a"),
    ]
    out = run_buffers(start, scenario, dt=0.5, steps=40)
    for p, q in zip(start, out):
        assert np.array_equal(q.vel, p.vel)
        assert np.allclose(q.pos, p.pos + np.array([0.25 * 0.5 * 40, 0.0]))


def test_single_particle_at_origin_is_fixed_point():
    sim = Simulation(Scenario(particles=(inert_type(),)), map_radius=10.0)
    sim.restart([Particle(pos=(0.0, 0.0), vel=(0.0, 0.0), type="a")])
    for _ in range(100):
        sim.tick(1.0)
    assert np.array_equal(sim.particles[0].pos, [0.0, 0.0])
    assert np.array_equal(sim.particles[0].vel, [0.0, 0.0])


def test_orbit_energy_stays_bounded():
    """Kick-drift-kick keeps the energy error bounded over more than one orbit."""
    scenario = orbit_scenario()
    sim = Simulation(scenario, map_radius=100.0)
    sim.restart(orbit_pair())

    def energy():
        return kinetic_energy(sim.particles, scenario) + gravitational_potential_energy(sim.particles, scenario)

    e0 = energy()
    assert abs(e0 - (-0.25)) < 1e-12

    drift = []
    for _ in range(1500):
        sim.tick(1.0)
        drift.append(abs(energy() - e0))

    print("max energy drift", max(drift))
    assert max(drift) < 1e-3 * abs(e0)
    # still orbiting at roughly the initial separation
    sep = np.linalg.norm(sim.particles[0].pos - sim.particles[1].pos)
    assert abs(sep - 2.0) < 1e-3


def test_zero_time_scale_freezes():
    scenario = orbit_scenario(time_scale=0.0)
    sim = Simulation(scenario, map_radius=100.0)
    sim.restart(orbit_pair())
    before = [p.copy() for p in sim.particles]
    for _ in range(10):
        frame = sim.tick(1.0)
    assert frame.dt == 0.0
    for p, q in zip(before, sim.particles):
        assert np.array_equal(p.pos, q.pos)
        assert np.array_equal(p.vel, q.vel)


def test_negative_time_scale_runs_backwards():
    forward = orbit_scenario(time_scale=0.05)
    sim = Simulation(forward, map_radius=100.0)
    sim.restart(orbit_pair())
    for _ in range(200):
        sim.tick(1.0)
    assert not np.allclose(sim.particles[0].pos, [1.0, 0.0])

    sim.set_scenario(orbit_scenario(time_scale=-0.05))
    for _ in range(200):
        sim.tick(1.0)

    for p, q in zip(orbit_pair(), sim.particles):
        assert np.allclose(p.pos, q.pos, atol=1e-8)
        assert np.allclose(p.vel, q.vel, atol=1e-8)
    assert abs(sim.time) < 1e-9


def test_unresolved_particle_is_carried_unchanged():
    scenario = orbit_scenario()
    start = orbit_pair() + [Particle(pos=(0.0, 5.0), vel=(1.0, 1.0), type="ghost")]
    out = run_buffers(start, scenario, dt=0.01, steps=50)

    ghost = out[2]
    assert ghost.type == "ghost"
    assert np.array_equal(ghost.pos, [0.0, 5.0])
    assert np.array_equal(ghost.vel, [1.0, 1.0])

    # the ghost exerts no force: the pair evolves as if it were absent
    alone = run_buffers(orbit_pair(), scenario, dt=0.01, steps=50)
    for p, q in zip(alone, out[:2]):
        assert np.array_equal(p.pos, q.pos)
        assert np.array_equal(p.vel, q.vel)


def test_half_step_buffer_holds_full_step_positions():
    scenario = orbit_scenario()
    t0 = orbit_pair()
    th = [p.copy() for p in t0]
    t1 = [p.copy() for p in t0]
    leapfrog_step(t0, th, t1, 0.1, 100.0, scenario)

    for p0, ph, p1 in zip(t0, th, t1):
        assert np.array_equal(ph.pos, p1.pos)
        assert np.allclose(p1.pos, p0.pos + ph.vel * 0.1)
    # t0 is left untouched
    assert np.array_equal(t0[0].pos, [1.0, 0.0])


def test_single_type_pair_conserves_momentum():
    scenario = orbit_scenario()
    pair = [
        Particle(pos=(1.0, 0.0), vel=(0.3, 0.5), type="star"),
        Particle(pos=(-1.0, 0.5), vel=(0.1, -0.2), type="star"),
    ]
    p0 = linear_momentum(pair, scenario)
    assert np.allclose(p0, [0.4, 0.3])

    out = run_buffers(pair, scenario, dt=0.01, steps=500)
    assert np.allclose(linear_momentum(out, scenario), p0, atol=1e-10)
