"""DroneSubsystem — binds a ReserveForgeScheduler to its mothership.

A concrete drone system subclasses DroneSubsystem and implements
``init_drone_system()`` to build its scheduler (choosing the spec, world
and stat source).  The host loop then calls ``init()`` once and
``advance()`` every frame.  ``on_activation()`` is what the pilot's
system key triggers: it cycles through the subclass's ``orders``.

DroneSystemRegistry is the lookup other components use to go from a
mothership to the drone systems it carries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from loguru import logger

if TYPE_CHECKING:
    from .forge import ReserveForgeScheduler
    from .host import DroneHandle, HostUnit


class DroneSystemRegistry:
    """Maps host unit IDs to the drone subsystems mounted on them."""

    def __init__(self) -> None:
        self._systems: dict[str, list[DroneSubsystem]] = {}

    def put(self, system: DroneSubsystem, host: HostUnit) -> None:
        systems = self._systems.setdefault(host.unit_id, [])
        if system not in systems:
            systems.append(system)

    def get(self, host: HostUnit) -> DroneSubsystem | None:
        """Return the first drone subsystem on *host*, or None."""
        systems = self._systems.get(host.unit_id)
        if not systems:
            return None
        return systems[0]


class DroneSubsystem(ABC):
    """Base class for a mothership subsystem that carries a drone forge."""

    orders: ClassVar[tuple[str, ...]] = ("defend", "attack", "recall")

    def __init__(self, registry: DroneSystemRegistry | None = None) -> None:
        self._registry = registry
        self._host: HostUnit | None = None
        self._forge_tracker: ReserveForgeScheduler | None = None
        self._order_index = 0

    @abstractmethod
    def init_drone_system(self, host: HostUnit) -> ReserveForgeScheduler:
        """Build the scheduler for *host*.  Called once from ``init()``."""

    def init(self, host: HostUnit) -> None:
        self._host = host
        self._forge_tracker = self.init_drone_system(host)
        if self._registry is not None:
            self._registry.put(self, host)
        logger.debug(f"Drone system ready on {host.unit_id}")

    @property
    def host(self) -> HostUnit | None:
        return self._host

    @property
    def forge_tracker(self) -> ReserveForgeScheduler | None:
        return self._forge_tracker

    @property
    def current_order(self) -> str:
        return self.orders[self._order_index]

    def advance(self, dt: float) -> None:
        if self._forge_tracker is None:
            return
        self._forge_tracker.advance(dt)

    def on_activation(self) -> str:
        return self.cycle_drone_orders()

    def cycle_drone_orders(self) -> str:
        """Switch to the next order, wrapping around.  Returns the new order."""
        self._order_index = (self._order_index + 1) % len(self.orders)
        order = self.orders[self._order_index]
        if self._host is not None:
            logger.info(f"{self._host.unit_id}: drone orders -> {order}")
        return order

    def index_for_drone(self, drone: DroneHandle) -> int:
        if self._forge_tracker is None:
            return -1
        return self._forge_tracker.index_of(drone)
