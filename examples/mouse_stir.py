# examples/mouse_stir.py
import logging

import numpy as np
from particle_sim import Simulation
from particle_sim.presets import default_scenario
from particle_sim.renderer import BufferedRenderer

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

renderer = BufferedRenderer()
sim = Simulation(default_scenario(), map_radius=150.0, seed=7, renderer=renderer, log_every=20)

# drag the pointer around a circle while the population settles
for i in range(120):
    angle = 2 * np.pi * i / 120
    sim.set_mouse_pos((60.0 * np.cos(angle), 60.0 * np.sin(angle)))
    frame = sim.tick(1.0)

print("frames recorded:", len(renderer.frames))
print("kinetic energy:", frame.kinetic_energy)
print("last mouse record:", frame.records[-1])
