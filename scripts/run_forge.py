#!/usr/bin/env python3
"""Run a drone forge headless against the sandbox world.

Ticks one mothership with a ReserveForgeScheduler at the configured rate,
randomly recalls or loses deployed drones, and logs the forge status
readout once per simulated second.

Usage:
    python3 scripts/run_forge.py --seconds 60
    python3 scripts/run_forge.py --seconds 30 --seed 7 --recall-chance 0.05
"""

from __future__ import annotations

import argparse
import queue
import random
import sys
from pathlib import Path

from loguru import logger

# Add project src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from forgebay.comms import EventBus
from forgebay.config import settings
from forgebay.simulation import (
    EventBusStatusSink,
    ForgeSpec,
    MountPoint,
    ReserveForgeScheduler,
    SandboxShip,
    SandboxWorld,
)


def build_forge(args: argparse.Namespace, bus: EventBus) -> tuple[ReserveForgeScheduler, SandboxShip, SandboxWorld]:
    """Create a mothership with two launch bays and its forge."""
    ship = SandboxShip(
        unit_id="mothership",
        velocity=(10.0, 0.0),
        mounts=[
            MountPoint(position=(5.0, 12.0), angle=90.0, is_system_mount=True),
            MountPoint(position=(5.0, -12.0), angle=-90.0, is_system_mount=True),
            MountPoint(position=(20.0, 0.0), angle=0.0),
        ],
    )
    world = SandboxWorld()
    spec = ForgeSpec(
        max_reserve_count=args.reserve,
        max_deployed_drones=args.deployed,
        forge_cooldown=args.cooldown,
        launch_delay=args.launch_delay,
        launch_speed=settings.forge_launch_speed,
        drone_variant=settings.drone_variant,
    )
    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    forge = ReserveForgeScheduler(
        spec, ship, world,
        modifiers=ship,
        status_sink=EventBusStatusSink(bus, settings.status_topic),
        rng=rng,
    )
    return forge, ship, world


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number


def run(args: argparse.Namespace) -> dict:
    """Run the forge for ``args.seconds`` and return the sortie tally."""
    bus = EventBus()
    status_q = bus.subscribe(settings.status_topic)
    forge, _, world = build_forge(args, bus)
    events = random.Random(args.seed)
    max_reserve = forge.spec.max_reserve_count

    dt = 1.0 / args.tick_rate
    ticks = int(args.seconds * args.tick_rate)
    report_every = max(1, round(args.tick_rate))
    last_status: dict | None = None
    tally = {"launched": 0, "recovered": 0, "absorbed": 0, "lost": 0}

    for i in range(ticks):
        for drone in forge.deployed:
            roll = events.random()
            if roll < args.loss_chance * dt:
                drone.destroy()
            elif roll < (args.loss_chance + args.recall_chance) * dt:
                drone.land()

        # Reclamation runs first in advance(), so landings are credited
        # against the room the reserve has right now.
        before = len(world.spawn_log)
        landed = sum(1 for d in forge.deployed if d.landed and d.alive)
        credited = min(landed, max_reserve - forge.reserve_count)
        tally["lost"] += sum(1 for d in forge.deployed if not d.alive)
        tally["recovered"] += credited
        tally["absorbed"] += landed - credited
        forge.advance(dt)
        world.tick(dt)
        tally["launched"] += len(world.spawn_log) - before

        while True:
            try:
                last_status = status_q.get_nowait()
            except queue.Empty:
                break

        if (i + 1) % report_every == 0 and last_status is not None:
            logger.info(
                f"t={(i + 1) * dt:5.1f}s {last_status['label']} "
                f"{last_status['count_text']} "
                f"cooldown={last_status['cooldown_fraction']:.2f} "
                f"deployed={forge.deployed_count}"
            )

    tally["deployed"] = forge.deployed_count
    tally["reserve"] = forge.reserve_count
    logger.info(
        f"Done: launched={tally['launched']} recovered={tally['recovered']} "
        f"absorbed={tally['absorbed']} lost={tally['lost']} "
        f"reserve={forge.reserve_count}/{max_reserve}"
    )
    return tally


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Headless drone forge run")
    parser.add_argument("--seconds", type=_positive_float, default=60.0, help="Simulated seconds")
    parser.add_argument("--tick-rate", type=_positive_float, default=settings.tick_rate, help="Ticks per second")
    parser.add_argument("--reserve", type=int, default=settings.forge_max_reserve, help="Reserve capacity")
    parser.add_argument("--deployed", type=int, default=settings.forge_max_deployed, help="Max drones out")
    parser.add_argument("--cooldown", type=float, default=settings.forge_cooldown, help="Seconds per forged drone")
    parser.add_argument("--launch-delay", type=float, default=settings.forge_launch_delay, help="Seconds between launches")
    parser.add_argument("--recall-chance", type=float, default=0.05, help="Per-second landing chance per drone")
    parser.add_argument("--loss-chance", type=float, default=0.03, help="Per-second loss chance per drone")
    parser.add_argument("--seed", type=int, default=settings.random_seed, help="Random seed")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Log level")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
