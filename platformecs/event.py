"""Event types and a publish/subscribe event manager."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional

MAX_EVENT_LOG_LENGTH = 100000


@dataclass(frozen=True)
class NoEventData:
    """Payload of events that carry no data."""


class Event(IntEnum):
    """Built-in event types."""

    WindowIsOpen = 0
    WindowCloseEvent = 1
    QuitEvent = 2
    PollEvent = 3
    GetWorldMousePos = 4
    WindowSetView = 5
    SetFpsLimitEvent = 6
    GetTransform = 7
    GetCollision = 8
    GetTexture = 9
    GetControllable = 10
    GetNewEntity = 11
    GetEntity = 12
    GetDestroy = 13
    SendInput = 14
    GetEndGame = 15
    GetStateTexture = 16
    GetScore = 17
    DeleteEntity = 18
    EnemiesSpawnedEvent = 19
    EnemiesMoveEvent = 20
    EnemiesDieEvent = 21
    PlayerMoveEvent = 22
    PlayerSpawnedEvent = 23
    PlayersDieEvent = 24
    PlayerShootEvent = 25


_NAMED_EVENTS = (
    Event.WindowIsOpen,
    Event.WindowCloseEvent,
    Event.PollEvent,
    Event.GetWorldMousePos,
    Event.WindowSetView,
    Event.SetFpsLimitEvent,
    Event.GetTransform,
    Event.GetCollision,
    Event.GetTexture,
    Event.GetControllable,
    Event.GetNewEntity,
    Event.GetEntity,
    Event.SendInput,
    Event.DeleteEntity,
    Event.EnemiesSpawnedEvent,
    Event.EnemiesMoveEvent,
    Event.EnemiesDieEvent,
    Event.PlayerMoveEvent,
    Event.PlayerSpawnedEvent,
    Event.PlayersDieEvent,
    Event.PlayerShootEvent,
)

INTERNAL_EVENT_NAMES: Dict[int, str] = {int(event): event.name for event in _NAMED_EVENTS}


def event_name(event_type: int) -> str:
    """Return the display name of an internal event type.

    Raises KeyError for types that have no registered name.
    """
    return INTERNAL_EVENT_NAMES[int(event_type)]


class EventHandler:
    """Holds the callbacks subscribed to one event type."""

    def __init__(
        self,
        event_type: int,
        event_log: Optional[List[int]] = None,
        max_log_length: int = MAX_EVENT_LOG_LENGTH,
    ) -> None:
        self.event_type = int(event_type)
        self._event_log = event_log
        self._max_log_length = max_log_length
        self._callbacks: List[Callable[[Any], Any]] = []

    def publish(self, data: Any = NoEventData()) -> None:
        """Call every subscribed callback with ``data``, in subscription order."""
        if self._event_log is not None:
            if len(self._event_log) >= self._max_log_length:
                self._event_log.clear()
            self._event_log.append(self.event_type)
        for callback in list(self._callbacks):
            callback(data)

    def subscribe(self, callback: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Register a callback; returns it so this can be used as a decorator."""
        self._callbacks.append(callback)
        return callback


class EventManager:
    """Creates and keeps the event handlers, keyed by event type."""

    def __init__(self, max_log_length: int = MAX_EVENT_LOG_LENGTH) -> None:
        self.event_log: List[int] = []
        self._max_log_length = max_log_length
        self._handlers: Dict[int, EventHandler] = {}

    def add_handler(self, event_type: int) -> EventHandler:
        """Create a handler for the type unless one exists, and return it."""
        key = int(event_type)
        if key not in self._handlers:
            self._handlers[key] = EventHandler(key, self.event_log, self._max_log_length)
        return self._handlers[key]

    def remove_handler(self, event_type: int) -> None:
        """Drop the handler of an event type, if any."""
        self._handlers.pop(int(event_type), None)

    def publish(self, event_type: int, data: Any = NoEventData()) -> None:
        """Publish ``data`` to the handler of an event type."""
        self.get_handler(event_type).publish(data)

    def get_handler(self, event_type: int) -> EventHandler:
        """Return the handler of an event type; raises KeyError if none was added."""
        try:
            return self._handlers[int(event_type)]
        except KeyError:
            raise KeyError(f"no handler for event type {int(event_type)}") from None