# MIT License (see LICENSE)
"""
Numeric constants used throughout the simulation.

These are fixed properties of the model, not scenario parameters. Anything
a user is expected to tune lives in SharedConfig / ParticleType instead.
"""
from __future__ import annotations

import math

# 4π, shared denominator of the electric and magnetic field laws.
FOUR_PI: float = 4.0 * math.pi

# Stiffness of the restoring force applied outside the circular arena.
# F = (|x| - R) * BOUNDARY_STIFFNESS, directed toward the centre.
BOUNDARY_STIFFNESS: float = 0.001

# Radius of the disk initial velocities are sampled from on (re)start.
INITIAL_SPEED_RADIUS: float = 1.0

# Exponential moving average weights for the frames-per-second estimate:
# fps = FPS_SMOOTHING * fps + (1 - FPS_SMOOTHING) * instant_fps
FPS_SMOOTHING: float = 0.95

# Colour used for render records whose particle type cannot be resolved.
FALLBACK_RGB: tuple[int, int, int] = (255, 255, 255)
