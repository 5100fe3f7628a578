"""ReserveForgeScheduler — drone reserve, regeneration and launch gating.

Architecture
------------
One scheduler lives on each mothership whose drone system is active.  It
owns four pieces of state:

  1. reserve count: drones stored aboard and ready to launch, bounded by
     ``spec.max_reserve_count``.
  2. forge progress: cooldown *remaining* until the next free drone.
     When it reaches zero and the reserve has room, one drone is granted
     and the countdown restarts from the full (stat-modified) cooldown.
     While the reserve is full the countdown is parked and does not drain.
  3. launch timer: an IntervalTimer that gates how often a drone may
     leave.  It starts already elapsed so the first launch is immediate,
     and it keeps running whether or not a launch happened.
  4. deployed list: handles of drones currently out, in launch order.
     Order is stable so ``index_of()`` can hand out per-drone slots.

Tick order (``advance``):
  host liveness -> stat modifiers -> status readout -> pause check ->
  reclamation -> regeneration -> launch

At most one drone is regenerated per tick, however large ``dt`` is.  A
long frame after a pause does not catch up several cooldown cycles.

Drones that vanish or die are dropped without credit.  Drones that have
finished landing are removed from the world and credited back to the
reserve.  Liveness is checked first, so a dead drone that also reports a
finished landing is treated as lost.  The reserve never exceeds its
capacity: regeneration can refill the pool while drones are out, and a
drone that lands on a full pool is absorbed without credit.

The only randomness is the choice of launch bay among the host's system
mounts; pass a seeded ``random.Random`` for reproducible launches.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from loguru import logger

from .host import (
    LAUNCH_DELAY_STAT_KEY,
    REGEN_DELAY_STAT_KEY,
    LaunchPoint,
    NeutralModifiers,
    effective_modifier,
    rotate,
)
from .interval import IntervalTimer
from .status import FORGE_LABEL, ForgeStatus

if TYPE_CHECKING:
    from .host import CombatWorld, DroneHandle, HostUnit, StatModifiers, StatusSink
    from .spec import ForgeSpec


class ReserveForgeScheduler:
    """Keeps one mothership's drone reserve stocked and launches drones."""

    def __init__(
        self,
        spec: ForgeSpec,
        host: HostUnit | None,
        world: CombatWorld,
        modifiers: StatModifiers | None = None,
        status_sink: StatusSink | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._spec = spec
        self._host = host
        self._world = world
        self._modifiers = modifiers if modifiers is not None else NeutralModifiers()
        self._status_sink = status_sink
        self._rng = rng if rng is not None else random.Random()

        self._deployed: list[DroneHandle] = []
        self._launch_timer = IntervalTimer(spec.launch_delay)
        self._launch_timer.force_elapsed()
        self._reserve_count = spec.max_reserve_count
        self._forge_progress = 0.0

    # -- read-only views --

    @property
    def spec(self) -> ForgeSpec:
        return self._spec

    @property
    def host(self) -> HostUnit | None:
        return self._host

    @property
    def reserve_count(self) -> int:
        return self._reserve_count

    @property
    def forge_progress(self) -> float:
        return self._forge_progress

    @property
    def launch_elapsed(self) -> float:
        return self._launch_timer.elapsed

    @property
    def deployed(self) -> tuple[DroneHandle, ...]:
        return tuple(self._deployed)

    @property
    def deployed_count(self) -> int:
        return len(self._deployed)

    def index_of(self, drone: DroneHandle) -> int:
        """Return *drone*'s launch-order slot, or -1 if it is not deployed."""
        for i, candidate in enumerate(self._deployed):
            if candidate is drone:
                return i
        return -1

    def forge_cooldown(self) -> float:
        """Full cooldown in seconds after the regen stat modifier."""
        regen_mod = effective_modifier(self._modifiers, REGEN_DELAY_STAT_KEY)
        return self._spec.forge_cooldown * regen_mod

    def status(self) -> ForgeStatus:
        """Build the status readout for the current state."""
        return self._build_status(self.forge_cooldown())

    # -- tick --

    def advance(self, dt: float) -> None:
        """Advance the forge by *dt* seconds of simulation time."""
        if not self._host_alive():
            return

        dt = max(0.0, dt)
        forge_cooldown = self.forge_cooldown()
        launch_mod = effective_modifier(self._modifiers, LAUNCH_DELAY_STAT_KEY)

        self._emit_status(forge_cooldown)

        if self._world.is_paused():
            return

        self._reclaim()
        self._regenerate(dt, forge_cooldown)
        self._launch(dt, launch_mod)

    def _host_alive(self) -> bool:
        host = self._host
        return host is not None and host.is_alive() and not host.is_hulk()

    def _build_status(self, forge_cooldown: float) -> ForgeStatus:
        max_reserve = self._spec.max_reserve_count
        if forge_cooldown > 0:
            fill = min(1.0, max(0.0, self._forge_progress / forge_cooldown))
        else:
            fill = 0.0
        reserve_fraction = self._reserve_count / max_reserve if max_reserve > 0 else 0.0
        return ForgeStatus(
            cooldown_fraction=fill,
            reserve_fraction=reserve_fraction,
            label=FORGE_LABEL,
            count_text=f"{self._reserve_count}/{max_reserve}",
        )

    def _emit_status(self, forge_cooldown: float) -> None:
        if self._status_sink is None:
            return
        try:
            self._status_sink.show_status(self._host, self._build_status(forge_cooldown))
        except Exception as e:
            logger.debug(f"Forge status sink failed for {self._host.unit_id}: {e}")

    def _reclaim(self) -> None:
        """Drop lost drones and credit landed ones back to the reserve."""
        max_reserve = self._spec.max_reserve_count
        retained: list[DroneHandle] = []
        for drone in self._deployed:
            if (not self._world.is_in_play(drone)
                    or not drone.is_alive() or drone.is_hulk()):
                logger.debug(f"{self._host.unit_id}: drone lost, no reserve credit")
                continue
            if drone.has_finished_landing():
                self._world.remove_entity(drone)
                if self._reserve_count < max_reserve:
                    self._reserve_count += 1
                    logger.debug(
                        f"{self._host.unit_id}: drone recovered, "
                        f"reserve {self._reserve_count}/{max_reserve}"
                    )
                else:
                    logger.debug(f"{self._host.unit_id}: drone recovered into full reserve")
                continue
            retained.append(drone)
        self._deployed = retained

    def _regenerate(self, dt: float, forge_cooldown: float) -> None:
        max_reserve = self._spec.max_reserve_count
        if self._forge_progress > 0.0:
            if self._reserve_count < max_reserve:
                self._forge_progress = max(0.0, self._forge_progress - dt)
        elif self._reserve_count < max_reserve:
            self._reserve_count += 1
            self._forge_progress = forge_cooldown
            logger.debug(
                f"{self._host.unit_id}: forged drone, "
                f"reserve {self._reserve_count}/{max_reserve}"
            )
        else:
            self._forge_progress = 0.0

    def _launch(self, dt: float, launch_mod: float) -> None:
        if (len(self._deployed) < self._spec.max_deployed_drones
                and self._spec.can_deploy()
                and self._reserve_count > 0
                and self._launch_timer.is_elapsed()):
            self._launch_timer.reset()
            if self._spawn_drone() is not None:
                self._reserve_count -= 1

        if launch_mod > 0.0:
            self._launch_timer.advance(dt / launch_mod)
        else:
            self._launch_timer.force_elapsed()

    # -- spawning --

    def launch_point(self) -> LaunchPoint:
        """Pick a random system mount on the host, or the host itself."""
        host = self._host
        bays = [m for m in host.mount_points() if m.is_system_mount]
        if bays:
            bay = bays[self._rng.randrange(len(bays))]
            return LaunchPoint(position=bay.position, facing=bay.angle)
        return LaunchPoint(position=host.position, facing=host.facing)

    def _spawn_drone(self) -> DroneHandle | None:
        """Spawn one drone at a launch bay.  Returns None if the world refused."""
        host = self._host
        try:
            drone = self._place_drone()
        except Exception as e:
            logger.warning(f"Drone launch from {host.unit_id} failed: {e}")
            return None

        self._deployed.append(drone)
        logger.debug(
            f"{host.unit_id}: launched {self._spec.drone_variant} "
            f"({len(self._deployed)}/{self._spec.max_deployed_drones} deployed)"
        )
        return drone

    def _place_drone(self) -> DroneHandle:
        """Spawn and set up a drone with deployment messages suppressed."""
        host = self._host
        world = self._world
        owner = host.owner
        suppressed = world.deployment_messages_suppressed(owner)
        world.set_deployment_messages_suppressed(owner, True)
        try:
            launch = self.launch_point()
            push = rotate((self._spec.launch_speed, 0.0), launch.facing)
            velocity = (host.velocity[0] + push[0], host.velocity[1] + push[1])
            drone = world.spawn_drone(
                owner, self._spec.drone_variant, launch.position, launch.facing, velocity,
            )
            try:
                drone.set_animated_launch()
                world.set_control_policy(drone, self._spec.make_control_policy(drone, host))
            except Exception:
                world.remove_entity(drone)
                raise
        finally:
            world.set_deployment_messages_suppressed(owner, suppressed)
        return drone
