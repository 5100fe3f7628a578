"""Unit tests for IntervalTimer."""

from __future__ import annotations

import pytest

from forgebay.simulation.interval import IntervalTimer


pytestmark = pytest.mark.unit


class TestIntervalTimer:
    def test_starts_closed(self):
        t = IntervalTimer(2.0)
        assert t.elapsed == 0.0
        assert t.is_elapsed() is False

    def test_opens_at_duration(self):
        t = IntervalTimer(1.0)
        t.advance(0.5)
        assert not t.is_elapsed()
        t.advance(0.5)
        assert t.is_elapsed()

    def test_does_not_wrap(self):
        t = IntervalTimer(1.0)
        t.advance(3.5)
        assert t.elapsed == 3.5
        assert t.is_elapsed()

    def test_force_and_reset(self):
        t = IntervalTimer(2.0)
        t.force_elapsed()
        assert t.elapsed == 2.0
        assert t.is_elapsed()
        t.reset()
        assert t.elapsed == 0.0

    @pytest.mark.parametrize("duration", [0.0, -1.0])
    def test_rejects_non_positive_duration(self, duration):
        with pytest.raises(ValueError):
            IntervalTimer(duration)

    def test_repr(self):
        assert repr(IntervalTimer(2.0)) == "<IntervalTimer 0.00/2.00>"
