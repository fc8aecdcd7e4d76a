# MIT License (see LICENSE)
"""
JSON serialization and deserialization for scenarios.

Keys are camelCase, matching what the browser UI stores, so scenario files
can be exchanged with it directly.

JSON Schema Overview:
---------------------
Scenario:
{
  "particles": [ParticleType, ...],
  "mouseParticle": ParticleType,        # Optional, default: inert "mouse" type
  "shared": {                           # Optional, every key has a default
    "gravitationalConstant": float,
    "permittivityInverse": float,
    "permeability": float,
    "maxForceDist": float,
    "tailFade": float,                  # Rendering only
    "colorStrength": float,             # Rendering only
    "timeScale": float
  }
}

ParticleType:
{
  "uid": string,                        # Required, unique within the scenario
  "color": "#rrggbb",
  "particleCount": int,                 # >= 0
  "charge": float, "mass": float,       # mass > 0
  "particleRadius": float,
  "rOffset": float, "rScale": float,
  "k1": float, "k2": float,
  "maxAbs": float,                      # >= 0
  "airResistanceCoeff": float,
  "springDampingCoeff": float
}

Scenario library (the named-scenario list):
{
  "scenarios": [{"name": string, "scenario": Scenario}, ...]
}
"""
from __future__ import annotations
import json
import logging
from dataclasses import fields
from typing import Any

from ..types import ParticleType, Scenario, SharedConfig
from ..util import hex_to_rgb

logger = logging.getLogger(__name__)

# snake_case attribute -> camelCase JSON key
_TYPE_KEYS = {
    "uid": "uid",
    "color": "color",
    "particle_count": "particleCount",
    "charge": "charge",
    "mass": "mass",
    "particle_radius": "particleRadius",
    "r_offset": "rOffset",
    "r_scale": "rScale",
    "k1": "k1",
    "k2": "k2",
    "max_abs": "maxAbs",
    "air_resistance_coeff": "airResistanceCoeff",
    "spring_damping_coeff": "springDampingCoeff",
}

_SHARED_KEYS = {
    "gravitational_constant": "gravitationalConstant",
    "permittivity_inverse": "permittivityInverse",
    "permeability": "permeability",
    "max_force_dist": "maxForceDist",
    "tail_fade": "tailFade",
    "color_strength": "colorStrength",
    "time_scale": "timeScale",
}

_TYPE_DEFAULTS = {f.name: f.default for f in fields(ParticleType) if f.name != "uid"}
_SHARED_DEFAULTS = {f.name: f.default for f in fields(SharedConfig)}


def _require_dict(d: Any, what: str) -> dict[str, Any]:
    if not isinstance(d, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(d).__name__}")
    return d


def _number(d: dict[str, Any], key: str, default: float, owner: str) -> float:
    raw = d.get(key, default)
    if isinstance(raw, bool):
        raise ValueError(f"{owner}: {key} must be a number, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{owner}: {key} must be a number, got {raw!r}") from None


# =============================================================================
# Particle types
# =============================================================================

def particle_type_from_json(d: dict[str, Any]) -> ParticleType:
    """
    Parse a particle type definition.

    Raises:
        ValueError: If d is not an object, uid is missing, the colour is not
            '#rrggbb', a field is not numeric, particleCount is not a
            non-negative integer, or mass/maxAbs is out of range.
    """
    _require_dict(d, "Particle type definition")
    if "uid" not in d:
        raise ValueError("Particle type definition missing required 'uid' field.")
    uid = str(d["uid"])
    owner = f"Particle type {uid!r}"

    color = d.get("color", _TYPE_DEFAULTS["color"])
    if hex_to_rgb(color) is None:
        raise ValueError(f"{owner}: color must be '#rrggbb', got {color!r}")

    count = _number(d, "particleCount", _TYPE_DEFAULTS["particle_count"], owner)
    if not count.is_integer() or count < 0:
        raise ValueError(f"{owner}: particleCount must be a non-negative integer, got {count}")

    values = {}
    for attr, key in _TYPE_KEYS.items():
        if attr in ("uid", "color", "particle_count"):
            continue
        values[attr] = _number(d, key, _TYPE_DEFAULTS[attr], owner)

    if values["mass"] <= 0:
        raise ValueError(f"{owner}: mass must be positive, got {values['mass']}")
    if values["max_abs"] < 0:
        raise ValueError(f"{owner}: maxAbs must be >= 0, got {values['max_abs']}")

    return ParticleType(uid=uid, color=color, particle_count=int(count), **values)


def particle_type_to_json(ptype: ParticleType) -> dict[str, Any]:
    """Serialize a particle type; every field is written."""
    return {key: getattr(ptype, attr) for attr, key in _TYPE_KEYS.items()}


# =============================================================================
# Scenarios
# =============================================================================

def shared_config_from_json(d: dict[str, Any]) -> SharedConfig:
    _require_dict(d, "Shared config")
    return SharedConfig(**{
        attr: _number(d, key, _SHARED_DEFAULTS[attr], "Shared config")
        for attr, key in _SHARED_KEYS.items()
    })


def shared_config_to_json(shared: SharedConfig) -> dict[str, Any]:
    return {key: getattr(shared, attr) for attr, key in _SHARED_KEYS.items()}


def scenario_from_json(d: dict[str, Any]) -> Scenario:
    """
    Build a Scenario from its JSON dictionary.

    Raises:
        ValueError: On a malformed scenario or particle type, or duplicate
            uids.
    """
    _require_dict(d, "Scenario")
    raw_particles = d.get("particles", [])
    if not isinstance(raw_particles, list):
        raise ValueError("Scenario particles must be a JSON array.")
    particles = [particle_type_from_json(p) for p in raw_particles]

    seen = set()
    for p in particles:
        if p.uid in seen:
            raise ValueError(f"Duplicate particle type uid: {p.uid!r}")
        seen.add(p.uid)

    kwargs = {
        "particles": tuple(particles),
        "shared": shared_config_from_json(d.get("shared", {})),
    }
    if "mouseParticle" in d:
        kwargs["mouse_particle"] = particle_type_from_json(d["mouseParticle"])
    return Scenario(**kwargs)


def scenario_to_json(scenario: Scenario) -> dict[str, Any]:
    """Serialize a Scenario to a JSON-compatible dictionary."""
    return {
        "particles": [particle_type_to_json(p) for p in scenario.particles],
        "mouseParticle": particle_type_to_json(scenario.mouse_particle),
        "shared": shared_config_to_json(scenario.shared),
    }


def load_scenario(path: str) -> Scenario:
    """
    Load a Scenario from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the content is not a valid scenario.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    scenario = scenario_from_json(data)
    logger.info("Loaded scenario with %d particle types from %s", len(scenario.particles), path)
    return scenario


def save_scenario(scenario: Scenario, path: str, indent: int = 2) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scenario_to_json(scenario), f, indent=indent)
    logger.info("Saved scenario to %s", path)


# =============================================================================
# Named scenario list
# =============================================================================

def load_scenario_library(path: str) -> dict[str, Scenario]:
    """
    Load a named-scenario list. Order of the file is preserved.

    Raises:
        ValueError: If the file or an entry is malformed, an entry has no
            name, or a name repeats.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    entries = _require_dict(data, "Scenario library").get("scenarios", [])
    if not isinstance(entries, list):
        raise ValueError("Scenario library 'scenarios' must be a JSON array.")

    library: dict[str, Scenario] = {}
    for entry in entries:
        name = _require_dict(entry, "Scenario library entry").get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("Scenario library entry missing 'name'.")
        if name in library:
            raise ValueError(f"Duplicate scenario name: {name!r}")
        library[name] = scenario_from_json(entry.get("scenario", {}))

    logger.info("Loaded %d named scenarios from %s", len(library), path)
    return library


def save_scenario_library(library: dict[str, Scenario], path: str, indent: int = 2) -> None:
    data = {
        "scenarios": [
            {"name": name, "scenario": scenario_to_json(scenario)}
            for name, scenario in library.items()
        ]
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved %d named scenarios to %s", len(library), path)
