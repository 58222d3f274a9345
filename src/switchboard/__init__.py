"""Top-level package for switchboard, an in-process notification engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import load_config
    from .core import CommandRouter, MediatorRegistry, NotificationBus, ProxyRegistry
    from .exceptions import (
        ConfigValidationError,
        InvalidNameError,
        NotifierNotAttachedError,
        SubscriberNotFoundError,
        SwitchboardError,
    )
    from .facade import Facade
    from .patterns import (
        Command,
        Mediator,
        Message,
        Notifier,
        Proxy,
        SubscriptionHandle,
    )

__all__ = [
    "Command",
    "CommandRouter",
    "ConfigValidationError",
    "Facade",
    "InvalidNameError",
    "Mediator",
    "MediatorRegistry",
    "Message",
    "NotificationBus",
    "Notifier",
    "NotifierNotAttachedError",
    "Proxy",
    "ProxyRegistry",
    "SubscriberNotFoundError",
    "SubscriptionHandle",
    "SwitchboardError",
    "load_config",
]

_CORE = {"CommandRouter", "MediatorRegistry", "NotificationBus", "ProxyRegistry"}
_PATTERNS = {"Command", "Mediator", "Message", "Notifier", "Proxy", "SubscriptionHandle"}
_EXCEPTIONS = {
    "ConfigValidationError",
    "InvalidNameError",
    "NotifierNotAttachedError",
    "SubscriberNotFoundError",
    "SwitchboardError",
}


def __getattr__(name: str) -> Any:
    """Lazily import symbols so ``import switchboard`` stays cheap."""
    if name == "Facade":
        from .facade import Facade

        return Facade
    if name == "load_config":
        from .config import load_config

        return load_config
    if name in _CORE:
        from . import core

        return getattr(core, name)
    if name in _PATTERNS:
        from . import patterns

        return getattr(patterns, name)
    if name in _EXCEPTIONS:
        from . import exceptions

        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
