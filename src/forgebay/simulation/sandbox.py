"""Sandbox — an in-memory world for running forges without a game engine.

SandboxWorld implements the CombatWorld protocol with plain dataclasses:
SandboxShip as the mothership and SandboxDrone for launched drones.  It
moves drones along their velocity on ``tick()`` and otherwise does only
what a forge asks of it.  Used by ``scripts/run_forge.py`` and by the
integration tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .host import MountPoint, Vec2


@dataclass
class SandboxShip:
    """A mothership.  Also serves as its own StatModifiers source."""

    unit_id: str
    owner: int = 0
    position: Vec2 = (0.0, 0.0)
    facing: float = 0.0
    velocity: Vec2 = (0.0, 0.0)
    alive: bool = True
    hulk: bool = False
    mounts: list[MountPoint] = field(default_factory=list)
    stat_modifiers: dict[str, float] = field(default_factory=dict)

    def is_alive(self) -> bool:
        return self.alive

    def is_hulk(self) -> bool:
        return self.hulk

    def mount_points(self) -> list[MountPoint]:
        return list(self.mounts)

    def get_stat_modifier(self, key: str) -> float | None:
        return self.stat_modifiers.get(key)

    def destroy(self) -> None:
        self.alive = False
        self.hulk = True


@dataclass
class SandboxDrone:
    """A launched drone."""

    entity_id: str
    owner: int
    variant: str
    position: Vec2
    facing: float
    velocity: Vec2
    alive: bool = True
    hulk: bool = False
    landed: bool = False
    animated_launch: bool = False
    policy: Any = None

    def is_alive(self) -> bool:
        return self.alive

    def is_hulk(self) -> bool:
        return self.hulk

    def has_finished_landing(self) -> bool:
        return self.landed

    def set_animated_launch(self) -> None:
        self.animated_launch = True

    def land(self) -> None:
        self.landed = True
        self.velocity = (0.0, 0.0)

    def destroy(self) -> None:
        self.alive = False
        self.hulk = True

    def tick(self, dt: float) -> None:
        if not self.alive or self.landed:
            return
        self.position = (
            self.position[0] + self.velocity[0] * dt,
            self.position[1] + self.velocity[1] * dt,
        )


class SandboxWorld:
    """CombatWorld backed by a dict of SandboxDrone instances."""

    def __init__(self) -> None:
        self.paused = False
        self.reject_spawns = False
        self._drones: dict[str, SandboxDrone] = {}
        self._suppressed: dict[int, bool] = {}
        self._next_id = 0
        self.spawn_log: list[SandboxDrone] = []
        self.removed: list[SandboxDrone] = []

    @property
    def drones(self) -> list[SandboxDrone]:
        return list(self._drones.values())

    # -- CombatWorld --

    def is_paused(self) -> bool:
        return self.paused

    def is_in_play(self, entity: SandboxDrone) -> bool:
        return self._drones.get(entity.entity_id) is entity

    def remove_entity(self, entity: SandboxDrone) -> None:
        if self._drones.pop(entity.entity_id, None) is not None:
            self.removed.append(entity)

    def spawn_drone(self, owner: int, variant: str, position: Vec2,
                    facing: float, velocity: Vec2) -> SandboxDrone:
        if self.reject_spawns:
            raise RuntimeError(f"spawn of {variant} rejected")
        self._next_id += 1
        drone = SandboxDrone(
            entity_id=f"drone-{self._next_id}",
            owner=owner,
            variant=variant,
            position=position,
            facing=facing,
            velocity=velocity,
        )
        self._drones[drone.entity_id] = drone
        self.spawn_log.append(drone)
        return drone

    def set_control_policy(self, entity: SandboxDrone, policy: Any) -> None:
        entity.policy = policy

    def deployment_messages_suppressed(self, owner: int) -> bool:
        return self._suppressed.get(owner, False)

    def set_deployment_messages_suppressed(self, owner: int, suppressed: bool) -> None:
        self._suppressed[owner] = suppressed

    # -- physics --

    def tick(self, dt: float) -> None:
        if self.paused:
            return
        for drone in self._drones.values():
            drone.tick(dt)
