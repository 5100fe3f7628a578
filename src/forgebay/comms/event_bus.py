"""EventBus — thread-safe, topic-keyed pub/sub for forge events.

The scheduler itself never touches the bus; ``EventBusStatusSink`` adapts
it to the status-sink protocol.  Subscribers pick a topic (for example
``forge_status``) and only receive that topic's payloads, or subscribe
with no topic to receive every message wrapped as ``{"type", "data"}``.
"""

from __future__ import annotations

import queue
import threading

_ALL = None


class EventBus:
    """Pub/sub with one bounded queue per subscriber, keyed by topic."""

    def __init__(self, maxsize: int = 100) -> None:
        self._lock = threading.Lock()
        self._subscribers: dict[str | None, list[queue.Queue]] = {}
        self._maxsize = maxsize

    def subscribe(self, topic: str | None = _ALL) -> queue.Queue:
        """Return a Queue fed with *topic* payloads, or every message if None."""
        q: queue.Queue = queue.Queue(maxsize=self._maxsize)
        with self._lock:
            self._subscribers.setdefault(topic, []).append(q)
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        with self._lock:
            for queues in self._subscribers.values():
                if q in queues:
                    queues.remove(q)

    def publish(self, topic: str, data: dict | None = None) -> None:
        msg = {"type": topic}
        if data is not None:
            msg["data"] = data
        with self._lock:
            for q in self._subscribers.get(topic, []):
                self._offer(q, data)
            for q in self._subscribers.get(_ALL, []):
                self._offer(q, msg)

    @staticmethod
    def _offer(q: queue.Queue, item: object) -> None:
        # Status arrives every tick; a full queue drops its oldest entry.
        try:
            q.put_nowait(item)
        except queue.Full:
            try:
                q.get_nowait()
            except queue.Empty:
                pass
            try:
                q.put_nowait(item)
            except queue.Full:
                pass
