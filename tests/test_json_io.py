import json

import pytest
from particle_sim.io import (
    load_scenario, save_scenario, load_scenario_library, save_scenario_library,
    scenario_from_json, scenario_to_json, particle_type_from_json,
)
from particle_sim.presets import default_scenario
from particle_sim.types import ParticleType, SharedConfig


def test_scenario_file_round_trip(tmp_path):
    scenario = default_scenario()
    path = tmp_path / "scenario.json"
    save_scenario(scenario, str(path))
    assert load_scenario(str(path)) == scenario


def test_camel_case_keys():
    data = scenario_to_json(default_scenario())
    ptype = data["particles"][0]
    for key in ("particleCount", "particleRadius", "rOffset", "rScale", "maxAbs",
                "airResistanceCoeff", "springDampingCoeff"):
        assert key in ptype
    assert "timeScale" in data["shared"]
    assert data["mouseParticle"]["uid"] == "mouse"


def test_defaults_fill_missing_fields():
    scenario = scenario_from_json({
        "particles": [{"uid": "a", "k1": 0.5}],
        "shared": {"timeScale": 2.0},
    })
    assert scenario.particles == (ParticleType(uid="a", k1=0.5),)
    assert scenario.shared == SharedConfig(time_scale=2.0)
    assert scenario.mouse_particle.uid == "mouse"


def test_invalid_particle_types_rejected():
    with pytest.raises(ValueError):
        particle_type_from_json({"color": "#ffffff"})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "color": "red"})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "mass": 0})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "particleCount": -1})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "maxAbs": -1.0})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "color": "#-1-1-1"})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "mass": [1.0]})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "k1": "strong"})
    with pytest.raises(ValueError):
        particle_type_from_json({"uid": "a", "particleCount": 2.7})
    with pytest.raises(ValueError):
        particle_type_from_json(["uid", "a"])
    with pytest.raises(ValueError):
        scenario_from_json({"particles": [1]})
    with pytest.raises(ValueError):
        scenario_from_json({"particles": {"uid": "a"}})
    with pytest.raises(ValueError):
        scenario_from_json({"shared": {"timeScale": None}})
    with pytest.raises(ValueError):
        scenario_from_json({"particles": [{"uid": "a"}, {"uid": "a"}]})


def test_scenario_library(tmp_path):
    base = default_scenario()
    slow = base.replace(shared=SharedConfig(time_scale=0.25))
    library = {"default": base, "slow motion": slow}

    path = tmp_path / "library.json"
    save_scenario_library(library, str(path))
    loaded = load_scenario_library(str(path))

    assert list(loaded) == ["default", "slow motion"]
    assert loaded["slow motion"].shared.time_scale == 0.25
    assert loaded == library


def test_library_rejects_duplicate_names(tmp_path):
    entry = {"name": "x", "scenario": {"particles": []}}
    path = tmp_path / "dup.json"
    path.write_text(json.dumps({"scenarios": [entry, entry]}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_scenario_library(str(path))


def test_integral_particle_count_accepted():
    assert particle_type_from_json({"uid": "a", "particleCount": 3.0}).particle_count == 3


def test_library_rejects_malformed_entries(tmp_path):
    path = tmp_path / "bad.json"
    for data in ({"scenarios": ["x"]}, {"scenarios": {"x": {}}}, [], {"scenarios": [{"name": ["x"]}]}):
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ValueError):
            load_scenario_library(str(path))
