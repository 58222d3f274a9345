"""Stateless units of business logic bound to a notification name."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .message import Message
from .notifier import Notifier


class SupportsExecute(Protocol):
    def execute(self, message: Message) -> Any: ...


CommandFactory = Callable[[], SupportsExecute]


class Command(Notifier):
    """Base command. The router builds a fresh instance for every message.

    A ``Command`` subclass is itself a valid factory; so is any zero-argument
    callable returning an object with ``execute(message)``.
    """

    def execute(self, message: Message) -> None:
        pass
