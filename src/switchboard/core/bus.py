"""Notification bus: named subscriber lists and synchronous fan-out.

Usage:
    bus = NotificationBus()

    def on_ping(message):
        print(f"ping: {message.body}")

    bus.subscribe("PING", SubscriptionHandle(on_ping))
    bus.dispatch(Message("PING", {"count": 1}))
    bus.unsubscribe("PING", on_ping)
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import SubscriberNotFoundError
from ..patterns.message import Message, require_name
from ..patterns.observer import SubscriptionHandle

LOGGER = logging.getLogger(__name__)


class NotificationBus:
    """Map notification names to ordered subscriber lists.

    Every handle subscribed to a name is notified once per dispatch, in
    subscription order, on the caller's stack. A handler that sends another
    notification runs that dispatch to completion before the outer one moves
    on to its next subscriber.

    With ``snapshot_dispatch`` (the default) each dispatch walks a copy of
    the list taken when it starts, so handlers that subscribe or unsubscribe
    during the call do not change who receives the current message. Without
    it the live list is walked by position: handles appended mid-walk are
    not reached, and a removal shifts the remaining handles down one slot.

    With ``isolate_handler_errors`` a failing handler is logged and the
    remaining handles still run; otherwise the exception propagates to the
    sender and the rest of the list is skipped.
    """

    def __init__(
        self,
        *,
        snapshot_dispatch: bool = True,
        isolate_handler_errors: bool = False,
    ) -> None:
        self._observers: dict[str, list[SubscriptionHandle]] = {}
        self.snapshot_dispatch = snapshot_dispatch
        self.isolate_handler_errors = isolate_handler_errors

    def subscribe(self, name: str, handle: SubscriptionHandle) -> None:
        """Append ``handle`` to the subscriber list for ``name``.

        Duplicates are not filtered; callers that need one handle per
        identity (the router, the mediator registry) enforce it themselves.
        """
        require_name(name)
        if not isinstance(handle, SubscriptionHandle):
            raise TypeError("subscribe() expects a SubscriptionHandle.")
        observers = self._observers.get(name)
        if observers is None:
            self._observers[name] = [handle]
        else:
            observers.append(handle)
        LOGGER.debug(
            "bus.subscribe",
            extra={"event": "bus.subscribe", "notification": name},
        )

    def unsubscribe(self, name: str, identity: Any) -> bool:
        """Remove and dispose the first handle for ``name`` owned by ``identity``.

        Returns True when a handle was removed. Raises
        ``SubscriberNotFoundError`` when ``name`` has no subscriber list at
        all; callers are expected to know the name is subscribed. The name is
        dropped from the bus once its list is empty.
        """
        observers = self._observers.get(name)
        if observers is None:
            raise SubscriberNotFoundError(f"No subscribers registered for {name!r}.")

        removed = False
        for index, handle in enumerate(observers):
            if handle.matches(identity):
                del observers[index]
                handle.dispose()
                removed = True
                break

        if not observers:
            del self._observers[name]
        LOGGER.debug(
            "bus.unsubscribe",
            extra={"event": "bus.unsubscribe", "notification": name, "removed": removed},
        )
        return removed

    def dispatch(self, message: Message) -> None:
        """Deliver ``message`` to every subscriber of ``message.name``."""
        observers = self._observers.get(message.name)
        if observers is None:
            LOGGER.debug(
                "bus.dispatch.unobserved",
                extra={"event": "bus.dispatch.unobserved", "notification": message.name},
            )
            return

        if self.snapshot_dispatch:
            for handle in list(observers):
                self._notify(handle, message)
            return

        # Bound by the starting length; the list may shrink under us.
        for index in range(len(observers)):
            if index >= len(observers):
                break
            self._notify(observers[index], message)

    def _notify(self, handle: SubscriptionHandle, message: Message) -> None:
        if not self.isolate_handler_errors:
            handle.notify(message)
            return
        try:
            handle.notify(message)
        except Exception:  # noqa: BLE001 - isolation requested by configuration.
            LOGGER.exception(
                "bus.dispatch.handler_failed",
                extra={
                    "event": "bus.dispatch.handler_failed",
                    "notification": message.name,
                },
            )

    def has_subscribers(self, name: str) -> bool:
        return name in self._observers

    def subscriber_count(self, name: str) -> int:
        return len(self._observers.get(name, ()))

    def names(self) -> list[str]:
        """Return subscribed notification names in first-subscription order."""
        return list(self._observers)

    def clear(self) -> None:
        """Dispose every handle and forget every name."""
        for observers in self._observers.values():
            for handle in observers:
                handle.dispose()
        self._observers.clear()
        LOGGER.debug("bus.clear", extra={"event": "bus.clear"})
