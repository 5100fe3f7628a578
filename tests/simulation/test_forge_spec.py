"""Unit tests for ForgeSpec construction and validation."""

from __future__ import annotations

import dataclasses

import pytest

from forgebay.config import Settings
from forgebay.simulation.sandbox import SandboxDrone, SandboxShip
from forgebay.simulation.spec import ForgeSpec


pytestmark = pytest.mark.unit


def _spec(**overrides) -> ForgeSpec:
    values = dict(max_reserve_count=3, max_deployed_drones=2,
                  forge_cooldown=10.0, launch_delay=2.0)
    values.update(overrides)
    return ForgeSpec(**values)


class TestForgeSpec:
    def test_defaults(self):
        spec = _spec()
        assert spec.launch_speed == 0.0
        assert spec.drone_variant == "drone_wing"
        assert spec.can_deploy() is True

    def test_frozen(self):
        spec = _spec()
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.max_reserve_count = 10

    @pytest.mark.parametrize("field,value", [
        ("max_reserve_count", -1),
        ("max_deployed_drones", -1),
        ("forge_cooldown", 0.0),
        ("forge_cooldown", -5.0),
        ("launch_delay", 0.0),
    ])
    def test_rejects_bad_values(self, field, value):
        with pytest.raises(ValueError, match=field):
            _spec(**{field: value})

    def test_zero_counts_allowed(self):
        spec = _spec(max_reserve_count=0, max_deployed_drones=0)
        assert spec.max_reserve_count == 0

    def test_make_control_policy_default_none(self):
        drone = SandboxDrone("d1", 0, "drone_wing", (0.0, 0.0), 0.0, (0.0, 0.0))
        assert _spec().make_control_policy(drone, SandboxShip(unit_id="m")) is None

    def test_make_control_policy_calls_factory(self):
        spec = _spec(control_policy=lambda drone, host: f"{host.unit_id}:{drone.entity_id}")
        drone = SandboxDrone("d1", 0, "drone_wing", (0.0, 0.0), 0.0, (0.0, 0.0))
        assert spec.make_control_policy(drone, SandboxShip(unit_id="m")) == "m:d1"

    def test_from_settings(self):
        s = Settings(forge_max_reserve=6, forge_max_deployed=4, forge_cooldown=12.5,
                     forge_launch_delay=1.5, forge_launch_speed=80.0,
                     drone_variant="wasp_wing")
        spec = ForgeSpec.from_settings(s, can_deploy=lambda: False)
        assert spec.max_reserve_count == 6
        assert spec.max_deployed_drones == 4
        assert spec.forge_cooldown == 12.5
        assert spec.launch_delay == 1.5
        assert spec.launch_speed == 80.0
        assert spec.drone_variant == "wasp_wing"
        assert spec.can_deploy() is False
