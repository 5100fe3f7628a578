"""ForgeSpec — immutable parameters shared by every drone forge.

A spec is handed to each ReserveForgeScheduler at construction and never
mutated afterwards.  Counts and timings are plain fields; the two pieces
of behaviour a drone system contributes (whether it may deploy right now,
and which control policy a freshly launched drone gets) are callables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from forgebay.config import Settings
    from .host import DroneHandle, HostUnit


def _always_deploy() -> bool:
    return True


def _no_policy(drone: DroneHandle, host: HostUnit) -> Any:
    return None


@dataclass(frozen=True)
class ForgeSpec:
    """Immutable forge profile for one drone system."""

    max_reserve_count: int
    max_deployed_drones: int
    forge_cooldown: float        # seconds per regenerated drone
    launch_delay: float          # seconds between launches
    launch_speed: float = 0.0    # lateral speed added at launch
    drone_variant: str = "drone_wing"
    can_deploy: Callable[[], bool] = _always_deploy
    control_policy: Callable[[DroneHandle, HostUnit], Any] = _no_policy

    def __post_init__(self) -> None:
        if self.max_reserve_count < 0:
            raise ValueError(f"max_reserve_count must be >= 0, got {self.max_reserve_count}")
        if self.max_deployed_drones < 0:
            raise ValueError(f"max_deployed_drones must be >= 0, got {self.max_deployed_drones}")
        if self.forge_cooldown <= 0:
            raise ValueError(f"forge_cooldown must be > 0, got {self.forge_cooldown}")
        if self.launch_delay <= 0:
            raise ValueError(f"launch_delay must be > 0, got {self.launch_delay}")

    def make_control_policy(self, drone: DroneHandle, host: HostUnit) -> Any:
        return self.control_policy(drone, host)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        can_deploy: Callable[[], bool] = _always_deploy,
        control_policy: Callable[[DroneHandle, HostUnit], Any] = _no_policy,
    ) -> ForgeSpec:
        """Build a spec from the ``forge_*`` defaults in *settings*."""
        return cls(
            max_reserve_count=settings.forge_max_reserve,
            max_deployed_drones=settings.forge_max_deployed,
            forge_cooldown=settings.forge_cooldown,
            launch_delay=settings.forge_launch_delay,
            launch_speed=settings.forge_launch_speed,
            drone_variant=settings.drone_variant,
            can_deploy=can_deploy,
            control_policy=control_policy,
        )
