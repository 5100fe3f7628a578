"""Forge status readout and the EventBus-backed sink that carries it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from forgebay.comms.event_bus import EventBus
    from .host import HostUnit

FORGE_LABEL = "FORGE"


@dataclass(frozen=True)
class ForgeStatus:
    """What a status bar needs to draw one forge."""

    cooldown_fraction: float  # 0.0-1.0, remaining cooldown over full cooldown
    reserve_fraction: float   # 0.0-1.0, reserve over capacity
    label: str
    count_text: str           # e.g. "2/3"

    def to_dict(self) -> dict:
        return {
            "cooldown_fraction": self.cooldown_fraction,
            "reserve_fraction": self.reserve_fraction,
            "label": self.label,
            "count_text": self.count_text,
        }


class EventBusStatusSink:
    """Publishes each status readout as a ``forge_status`` event."""

    def __init__(self, event_bus: EventBus, topic: str = "forge_status") -> None:
        self._event_bus = event_bus
        self._topic = topic

    def show_status(self, host: HostUnit, status: ForgeStatus) -> None:
        payload = status.to_dict()
        payload["unit_id"] = host.unit_id
        self._event_bus.publish(self._topic, payload)
