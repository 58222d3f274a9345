"""Leaf values and base classes shared by the registries and applications."""

from .command import Command, CommandFactory, SupportsExecute
from .disposable import Disposable
from .mediator import Mediator
from .message import Message, require_name
from .notifier import Notifier
from .observer import SubscriptionHandle
from .proxy import Proxy

__all__ = [
    "Command",
    "CommandFactory",
    "Disposable",
    "Mediator",
    "Message",
    "Notifier",
    "Proxy",
    "SubscriptionHandle",
    "SupportsExecute",
    "require_name",
]
