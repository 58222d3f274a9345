"""Command routing: one bus subscription per bound notification name."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..patterns.command import CommandFactory
from ..patterns.disposable import Disposable
from ..patterns.message import Message, require_name
from ..patterns.notifier import Notifier
from ..patterns.observer import SubscriptionHandle
from .bus import NotificationBus

if TYPE_CHECKING:
    from ..facade import Facade

LOGGER = logging.getLogger(__name__)


class CommandRouter:
    """Bind notification names to command factories.

    The router subscribes itself to the bus the first time a name is bound
    and unsubscribes when the binding is removed, so the factory map and the
    bus subscription always exist together. Rebinding a name swaps the
    factory and leaves the single subscription in place.

    Each routed message gets a brand-new command from the factory; the
    instance is executed once and then disposed.
    """

    def __init__(self, bus: NotificationBus, facade: Facade | None = None) -> None:
        self._bus = bus
        self._facade = facade
        self._commands: dict[str, CommandFactory] = {}

    def register_command(self, name: str, factory: CommandFactory) -> None:
        require_name(name)
        if not callable(factory):
            raise TypeError("Command factory must be callable.")
        if name not in self._commands:
            self._bus.subscribe(name, SubscriptionHandle(self.execute_command, self))
            LOGGER.debug(
                "router.command.registered",
                extra={"event": "router.command.registered", "notification": name},
            )
        else:
            LOGGER.debug(
                "router.command.replaced",
                extra={"event": "router.command.replaced", "notification": name},
            )
        self._commands[name] = factory

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def remove_command(self, name: str) -> None:
        if name not in self._commands:
            return
        # The bus may have been cleared underneath us.
        if self._bus.has_subscribers(name):
            self._bus.unsubscribe(name, self)
        del self._commands[name]
        LOGGER.debug(
            "router.command.removed",
            extra={"event": "router.command.removed", "notification": name},
        )

    def execute_command(self, message: Message) -> None:
        """Build, run and dispose one command for ``message``."""
        factory = self._commands.get(message.name)
        if factory is None:
            return
        command = factory()
        if isinstance(command, Notifier) and self._facade is not None:
            command.initialize_notifier(self._facade)
        try:
            command.execute(message)
        finally:
            if isinstance(command, Disposable):
                command.dispose()

    def names(self) -> list[str]:
        return list(self._commands)

    def clear(self) -> None:
        """Remove every binding and its bus subscription."""
        for name in list(self._commands):
            self.remove_command(name)
