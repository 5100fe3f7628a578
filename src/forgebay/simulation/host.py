"""Capability protocols between the forge scheduler and its host simulation.

The scheduler never imports a concrete engine.  Everything it needs from
the outside world is expressed here as a narrow protocol:

  HostUnit       the mothership carrying the forge (liveness, geometry)
  DroneHandle    an entity launched from the forge
  CombatWorld    the simulation (pause state, presence, spawn, removal)
  StatModifiers  multiplicative stat lookups keyed by name
  StatusSink     fire-and-forget receiver for the forge status readout

Angles are degrees, counter-clockwise from +x.  Positions and velocities
are (x, y) tuples in world space.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .status import ForgeStatus

Vec2 = tuple[float, float]

LAUNCH_DELAY_STAT_KEY = "forge_launch_delay"
REGEN_DELAY_STAT_KEY = "forge_regen_delay"


@dataclass(frozen=True)
class MountPoint:
    """An attachment point on a hull, already resolved to world space."""
    position: Vec2
    angle: float
    is_system_mount: bool = False


@dataclass(frozen=True)
class LaunchPoint:
    """Where and in which direction a drone leaves the mothership."""
    position: Vec2
    facing: float


class HostUnit(Protocol):
    unit_id: str
    owner: int
    position: Vec2
    facing: float
    velocity: Vec2

    def is_alive(self) -> bool: ...

    def is_hulk(self) -> bool: ...

    def mount_points(self) -> list[MountPoint]: ...


class DroneHandle(Protocol):
    def is_alive(self) -> bool: ...

    def is_hulk(self) -> bool: ...

    def has_finished_landing(self) -> bool: ...

    def set_animated_launch(self) -> None: ...


class CombatWorld(Protocol):
    def is_paused(self) -> bool: ...

    def is_in_play(self, entity: DroneHandle) -> bool: ...

    def remove_entity(self, entity: DroneHandle) -> None: ...

    def spawn_drone(self, owner: int, variant: str, position: Vec2,
                    facing: float, velocity: Vec2) -> DroneHandle: ...

    def set_control_policy(self, entity: DroneHandle, policy: Any) -> None: ...

    def deployment_messages_suppressed(self, owner: int) -> bool: ...

    def set_deployment_messages_suppressed(self, owner: int, suppressed: bool) -> None: ...


class StatModifiers(Protocol):
    def get_stat_modifier(self, key: str) -> float | None: ...


class StatusSink(Protocol):
    def show_status(self, host: HostUnit, status: ForgeStatus) -> None: ...


class NeutralModifiers:
    """StatModifiers that leave every stat untouched."""

    def get_stat_modifier(self, key: str) -> float | None:
        return 1.0


def effective_modifier(modifiers: StatModifiers, key: str) -> float:
    """Resolve a multiplicative modifier; missing means neutral, never zero."""
    value = modifiers.get_stat_modifier(key)
    if value is None:
        return 1.0
    return max(0.0, float(value))


def rotate(vec: Vec2, angle: float) -> Vec2:
    """Rotate *vec* counter-clockwise by *angle* degrees."""
    rad = math.radians(angle)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return (vec[0] * cos_a - vec[1] * sin_a, vec[0] * sin_a + vec[1] * cos_a)
