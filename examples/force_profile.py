# examples/force_profile.py
import numpy as np
from particle_sim.core import force_profile
from particle_sim.presets import default_scenario

scenario = default_scenario()
distances = np.arange(1, 100) / 2

for uid in ("positive", "negative"):
    f = force_profile(uid, scenario, distances)
    crossing = distances[np.argmax(f < 0)] if np.any(f < 0) else None
    print(f"{uid}: F(0.5)={f[0]:+.4f}  F(10)={f[19]:+.4f}  repulsion ends near d={crossing}")
