"""Simulation subsystem — drone forge scheduling, host protocols, sandbox."""
from .forge import ReserveForgeScheduler
from .host import (
    LAUNCH_DELAY_STAT_KEY,
    REGEN_DELAY_STAT_KEY,
    CombatWorld,
    DroneHandle,
    HostUnit,
    LaunchPoint,
    MountPoint,
    NeutralModifiers,
    StatModifiers,
    StatusSink,
)
from .interval import IntervalTimer
from .sandbox import SandboxDrone, SandboxShip, SandboxWorld
from .spec import ForgeSpec
from .status import EventBusStatusSink, ForgeStatus
from .subsystem import DroneSubsystem, DroneSystemRegistry

__all__ = [
    "CombatWorld",
    "DroneHandle",
    "DroneSubsystem",
    "DroneSystemRegistry",
    "EventBusStatusSink",
    "ForgeSpec",
    "ForgeStatus",
    "HostUnit",
    "IntervalTimer",
    "LAUNCH_DELAY_STAT_KEY",
    "LaunchPoint",
    "MountPoint",
    "NeutralModifiers",
    "REGEN_DELAY_STAT_KEY",
    "ReserveForgeScheduler",
    "SandboxDrone",
    "SandboxShip",
    "SandboxWorld",
    "StatModifiers",
    "StatusSink",
]
