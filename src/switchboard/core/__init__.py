"""Registries behind the facade: bus, command router, proxies, mediators."""

from .bus import NotificationBus
from .mediators import MediatorRegistry
from .proxies import ProxyRegistry
from .router import CommandRouter

__all__ = ["CommandRouter", "MediatorRegistry", "NotificationBus", "ProxyRegistry"]
