"""IntervalTimer — fixed-duration gate advanced by simulation time."""

from __future__ import annotations


class IntervalTimer:
    """Accumulates elapsed time against a fixed duration.

    Unlike a wrapping periodic timer, elapsed time keeps growing past the
    duration until the owner calls ``reset()``; the gate stays open for as
    long as nobody consumes it.
    """

    def __init__(self, duration: float) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be > 0, got {duration}")
        self._duration = duration
        self._elapsed = 0.0

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, amount: float) -> None:
        self._elapsed += amount

    def is_elapsed(self) -> bool:
        return self._elapsed >= self._duration

    def force_elapsed(self) -> None:
        """Open the gate immediately (used so the first launch needs no wait)."""
        self._elapsed = self._duration

    def reset(self) -> None:
        self._elapsed = 0.0

    def __repr__(self) -> str:
        return f"<IntervalTimer {self._elapsed:.2f}/{self._duration:.2f}>"
