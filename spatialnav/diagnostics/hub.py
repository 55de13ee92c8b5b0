"""Diagnostics hub collecting virtualization events."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any

from spatialnav.diagnostics.event import DiagnosticEvent, utc_now_iso

Subscriber = Callable[[DiagnosticEvent], None]


class DiagnosticHub:
    """Bounded in-memory event log with synchronous subscribers."""

    def __init__(self, *, capacity: int = 1_000, enabled: bool = True) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._enabled = bool(enabled)
        self._events: deque[DiagnosticEvent] = deque(maxlen=int(capacity))
        self._subscribers: dict[int, Subscriber] = {}
        self._next_subscriber_id = 1

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def capacity(self) -> int:
        return self._events.maxlen or 0

    def emit(
        self,
        *,
        category: str,
        name: str,
        tick: int,
        value: float | int | str | bool | dict[str, Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if not self._enabled:
            return
        event = DiagnosticEvent(
            ts_utc=utc_now_iso(),
            tick=int(tick),
            category=str(category).strip().lower(),
            name=name,
            value=value,
            metadata=dict(metadata or {}),
        )
        self._events.append(event)
        for callback in tuple(self._subscribers.values()):
            callback(event)

    def subscribe(self, callback: Subscriber) -> int:
        token = self._next_subscriber_id
        self._next_subscriber_id += 1
        self._subscribers[token] = callback
        return token

    def unsubscribe(self, token: int) -> None:
        self._subscribers.pop(token, None)

    def snapshot(
        self,
        *,
        limit: int | None = None,
        category: str | None = None,
        name: str | None = None,
    ) -> list[DiagnosticEvent]:
        events = list(self._events)
        if category is not None:
            events = [event for event in events if event.category == category]
        if name is not None:
            events = [event for event in events if event.name == name]
        if limit is None or limit >= len(events):
            return events
        if limit <= 0:
            return []
        return events[-int(limit) :]
