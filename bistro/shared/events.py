"""Domain events and an in-process event bus."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Protocol

from bistro.shared.types import new_id, utc_timestamp


@dataclass(frozen=True)
class DomainEvent:
    """Base of every domain event: a unique id and the moment it happened."""

    event_id: str = field(default_factory=new_id, kw_only=True)
    timestamp: str = field(default_factory=utc_timestamp, kw_only=True)

    @property
    def type(self) -> str:
        """The event's name."""
        return type(self).__name__


class EventPublisher(Protocol):
    """Anything that domain events can be published to."""

    def publish(self, event: DomainEvent) -> None:
        """Deliver the event to whoever listens for it."""


Handler = Callable[[DomainEvent], None]


class EventBus:
    """Dispatches each event to the handlers subscribed to its exact type."""

    def __init__(self) -> None:
        self._handlers: defaultdict[type, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Handler) -> None:
        """Call ``handler`` for every published event of ``event_type``."""
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        """Call the handlers for the event's type, in subscription order."""
        for handler in self._handlers.get(type(event), ()):
            handler(event)