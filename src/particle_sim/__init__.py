# MIT License (see LICENSE)
"""
particle_sim - A 2D N-body particle simulation.

Particles of configurable species interact through near-field repulsion,
a gravity-like attraction, an electromagnetic-like Lorentz force and spring
damping on overlap, inside a loosely bounded circular arena. The population
is advanced with a leapfrog (kick-drift-kick) integrator.

Main entry points:
    - Simulation: Owns the population and performs one step per tick.
    - Scenario, ParticleType, SharedConfig: Immutable configuration.
    - Particle: Position, velocity and type uid of one particle.

Submodules:
    - core: Field laws, force model, integrator, diagnostics.
    - io: JSON scenario files and the named-scenario list.
    - renderer: Optional visualization adapters.
    - presets: Ready-made scenarios.

Example:
    from particle_sim import Simulation
    from particle_sim.presets import default_scenario

    sim = Simulation(default_scenario(), map_radius=300.0, seed=1)
    sim.set_mouse_pos((0.0, 0.0))
    frame = sim.tick(1.0)
"""
from .simulation import Simulation
from .types import Particle, ParticleType, Scenario, SharedConfig, Frame, RenderRecord

__all__ = [
    # Simulation
    "Simulation",
    "Particle",
    # Configuration
    "ParticleType",
    "Scenario",
    "SharedConfig",
    # Output
    "Frame",
    "RenderRecord",
]
