# MIT License (see LICENSE)
"""
Input/Output utilities for scenarios.

This subpackage provides:
    - JSON serialization of single scenarios (camelCase keys).
    - The named-scenario list: a JSON file holding several scenarios by name.

Typical usage:
    from particle_sim.io import load_scenario, save_scenario_library

    scenario = load_scenario("orbits.json")
    save_scenario_library({"orbits": scenario}, "library.json")
"""
from .json_io import (
    load_scenario,
    save_scenario,
    load_scenario_library,
    save_scenario_library,
    scenario_from_json,
    scenario_to_json,
    particle_type_from_json,
    particle_type_to_json,
)

__all__ = [
    # Files
    "load_scenario",
    "save_scenario",
    "load_scenario_library",
    "save_scenario_library",
    # Serialization
    "scenario_from_json",
    "scenario_to_json",
    "particle_type_from_json",
    "particle_type_to_json",
]
