# examples/two_body_orbit.py
import numpy as np
from particle_sim import Simulation, Particle, ParticleType, Scenario, SharedConfig
from particle_sim.core import kinetic_energy, gravitational_potential_energy

star = ParticleType(uid="star", color="#ffcc00", k2=1.0, mass=1.0, particle_radius=0.1, max_abs=1e9)
scenario = Scenario(
    particles=(star,),
    shared=SharedConfig(gravitational_constant=1.0, max_force_dist=1e6, time_scale=0.01),
)

sim = Simulation(scenario, map_radius=100.0)
sim.restart([
    Particle(pos=(1.0, 0.0), vel=(0.0, 0.5), type="star"),
    Particle(pos=(-1.0, 0.0), vel=(0.0, -0.5), type="star"),
])

def energy():
    return kinetic_energy(sim.particles, scenario) + gravitational_potential_energy(sim.particles, scenario)

e0 = energy()
for _ in range(1300):
    sim.tick(1.0)

print("t:", sim.time)
print("positions:", [p.pos for p in sim.particles])
print("separation:", float(np.linalg.norm(sim.particles[0].pos - sim.particles[1].pos)))
print("energy drift:", energy() - e0)
