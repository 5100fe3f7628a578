"""Tests for the headless forge driver in scripts/run_forge.py."""

from __future__ import annotations

import argparse
import importlib.util
from pathlib import Path

import pytest


pytestmark = pytest.mark.unit

_SCRIPT = Path(__file__).parent.parent / "scripts" / "run_forge.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("run_forge", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def run_forge():
    return _load_script()


def _make_args(**overrides) -> argparse.Namespace:
    values = dict(
        seconds=30.0,
        tick_rate=10.0,
        reserve=2,
        deployed=2,
        cooldown=1.0,
        launch_delay=0.5,
        recall_chance=2.0,
        loss_chance=0.5,
        seed=7,
        log_level="WARNING",
    )
    values.update(overrides)
    return argparse.Namespace(**values)


class TestArguments:
    @pytest.mark.parametrize("rate", ["0", "-1"])
    def test_non_positive_tick_rate_rejected(self, run_forge, rate):
        with pytest.raises(SystemExit) as exc:
            run_forge.main(["--tick-rate", rate])
        assert exc.value.code == 2

    def test_zero_seconds_rejected(self, run_forge):
        with pytest.raises(SystemExit) as exc:
            run_forge.main(["--seconds", "0"])
        assert exc.value.code == 2

    def test_positive_float(self, run_forge):
        assert run_forge._positive_float("2.5") == 2.5
        with pytest.raises(argparse.ArgumentTypeError):
            run_forge._positive_float("0")


class TestSortieTally:
    def test_every_launch_is_accounted_for(self, run_forge):
        tally = run_forge.run(_make_args())
        assert tally["launched"] > 0
        assert tally["launched"] == (
            tally["recovered"] + tally["absorbed"] + tally["lost"] + tally["deployed"]
        )
        assert 0 <= tally["reserve"] <= 2
        assert tally["absorbed"] >= 0

    def test_landings_on_full_reserve_are_absorbed(self, run_forge):
        # Fast regen keeps the pool full, so frequent landings have no room.
        tally = run_forge.run(_make_args(cooldown=0.1, recall_chance=5.0, loss_chance=0.0))
        assert tally["lost"] == 0
        assert tally["absorbed"] > 0
        assert tally["launched"] == (
            tally["recovered"] + tally["absorbed"] + tally["deployed"]
        )

    def test_no_ticks_means_no_launches(self, run_forge):
        tally = run_forge.run(_make_args(seconds=0.05))
        assert tally["launched"] == 0
        assert tally["reserve"] == 2
