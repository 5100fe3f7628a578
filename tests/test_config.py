"""Unit tests for forgebay settings."""

from __future__ import annotations

import pytest

from forgebay.config import Settings


pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("FORGEBAY_FORGE_MAX_RESERVE", "FORGEBAY_RANDOM_SEED", "FORGEBAY_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        s = Settings(_env_file=None)
        assert s.forge_max_reserve == 3
        assert s.forge_max_deployed == 2
        assert s.forge_cooldown == 10.0
        assert s.forge_launch_delay == 2.0
        assert s.random_seed is None
        assert s.status_topic == "forge_status"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("FORGEBAY_FORGE_MAX_RESERVE", "8")
        monkeypatch.setenv("FORGEBAY_RANDOM_SEED", "42")
        monkeypatch.setenv("FORGEBAY_LOG_LEVEL", "debug")
        s = Settings(_env_file=None)
        assert s.forge_max_reserve == 8
        assert s.random_seed == 42
        assert s.log_level == "debug"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.delenv("FORGEBAY_FORGE_COOLDOWN", raising=False)
        monkeypatch.setenv("FORGE_COOLDOWN", "99")
        s = Settings(_env_file=None)
        assert s.forge_cooldown == 10.0
