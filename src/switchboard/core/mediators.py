"""Mediator registry: named adapters wired to the bus by interest."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from ..patterns.mediator import Mediator
from ..patterns.message import require_name
from ..patterns.observer import SubscriptionHandle
from .bus import NotificationBus

LOGGER = logging.getLogger(__name__)


@dataclass
class _Registration:
    mediator: Mediator
    interests: tuple[str, ...]


class MediatorRegistry:
    """Store mediators by name and subscribe each to its interests.

    Unlike proxies, a taken name is never overwritten: ``register`` returns
    False and leaves the existing mediator in place until it is removed.

    Interests are read once at registration. One handle, whose identity is
    the mediator, is shared by every interest name; removal unsubscribes
    exactly the names captured then.
    """

    def __init__(self, bus: NotificationBus) -> None:
        self._bus = bus
        self._registrations: dict[str, _Registration] = {}

    def register(self, mediator: Mediator) -> bool:
        name = require_name(mediator.name, "mediator")
        if name in self._registrations:
            LOGGER.debug(
                "mediators.register.rejected",
                extra={"event": "mediators.register.rejected", "mediator": name},
            )
            return False

        interests = tuple(mediator.list_notification_interests())
        for interest in interests:
            require_name(interest)
        self._registrations[name] = _Registration(mediator, interests)

        if interests:
            handle = SubscriptionHandle(mediator.handle_notification, mediator)
            for interest in interests:
                self._bus.subscribe(interest, handle)
        LOGGER.debug(
            "mediators.registered",
            extra={
                "event": "mediators.registered",
                "mediator": name,
                "interests": list(interests),
            },
        )
        return True

    def retrieve(self, name: str) -> Mediator | None:
        registration = self._registrations.get(name)
        return registration.mediator if registration else None

    def has(self, name: str) -> bool:
        return name in self._registrations

    def interests_of(self, name: str) -> tuple[str, ...] | None:
        """Return the interests captured when ``name`` was registered."""
        registration = self._registrations.get(name)
        return registration.interests if registration else None

    def remove(self, name: str) -> None:
        if not self.has(name):
            return
        registration = self._registrations[name]
        for interest in registration.interests:
            if self._bus.has_subscribers(interest):
                self._bus.unsubscribe(interest, registration.mediator)
        del self._registrations[name]
        registration.mediator.dispose()
        LOGGER.debug(
            "mediators.removed",
            extra={"event": "mediators.removed", "mediator": name},
        )

    def names(self) -> list[str]:
        return list(self._registrations)

    def clear(self) -> None:
        for name in list(self._registrations):
            self.remove(name)
