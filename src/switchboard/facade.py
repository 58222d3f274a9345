"""Facade: one application context owning the bus and every registry.

Usage:
    class LoginMediator(Mediator):
        NAME = "Login"

        def list_notification_interests(self):
            return ["GO", "STOP"]

        def handle_notification(self, message):
            ...

    facade = Facade()
    facade.register_command("STARTUP", StartupCommand)
    facade.register_mediator(LoginMediator())
    facade.send_notification("GO", {"user": "ada"})
"""

from __future__ import annotations

from collections.abc import Mapping
import contextlib
import logging
from pathlib import Path
import threading
from typing import Any

from .config import Config, load_config
from .core.bus import NotificationBus
from .core.mediators import MediatorRegistry
from .core.proxies import ProxyRegistry
from .core.router import CommandRouter
from .exceptions import SwitchboardError
from .logging_utils import configure_logging
from .patterns.command import CommandFactory
from .patterns.mediator import Mediator
from .patterns.message import Message
from .patterns.proxy import Proxy

LOGGER = logging.getLogger(__name__)


class Facade:
    """Compose the proxy registry, command router and mediator registry.

    Components are created by ``_initialize_facade`` in a fixed order:
    model (proxies), controller (commands), view (bus and mediators).
    The controller needs the bus, so initializing it creates the view
    first; the later view step then finds it already in place. Subclasses
    extend the ``_initialize_*`` hooks, calling ``super()`` first, to
    register their startup commands, proxies and mediators.

    Every facade is independent; there is no process-wide instance.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.config = Config.model_validate(dict(config or {}))
        self._bus_config = self.config.bus
        self._lock: contextlib.AbstractContextManager[Any] = (
            threading.RLock()
            if self._bus_config.thread_safe
            else contextlib.nullcontext()
        )
        self._proxies: ProxyRegistry | None = None
        self._router: CommandRouter | None = None
        self._bus: NotificationBus | None = None
        self._mediators: MediatorRegistry | None = None
        self._initialize_facade()

    @classmethod
    def from_config(cls, config_path: Path | None = None) -> Facade:
        """Build a facade from a TOML config file.

        The file goes through ``load_config`` (missing or invalid files fall
        back to defaults), its ``logging`` section configures the root
        logger, and the whole mapping is handed to the constructor.
        """
        config = load_config(config_path)
        configure_logging(config["logging"])
        facade = cls(config)
        LOGGER.debug(
            "facade.bootstrap",
            extra={"event": "facade.bootstrap", "config_path": str(config_path)},
        )
        return facade

    def _initialize_facade(self) -> None:
        self._initialize_model()
        self._initialize_controller()
        self._initialize_view()

    def _initialize_model(self) -> None:
        if self._proxies is not None:
            return
        self._proxies = ProxyRegistry()
        LOGGER.debug("facade.init.model", extra={"event": "facade.init.model"})

    def _initialize_controller(self) -> None:
        if self._router is not None:
            return
        self._initialize_view()
        self._router = CommandRouter(self.bus, facade=self)
        LOGGER.debug("facade.init.controller", extra={"event": "facade.init.controller"})

    def _initialize_view(self) -> None:
        if self._bus is not None:
            return
        self._bus = NotificationBus(
            snapshot_dispatch=self._bus_config.snapshot_dispatch,
            isolate_handler_errors=self._bus_config.isolate_handler_errors,
        )
        self._mediators = MediatorRegistry(self._bus)
        LOGGER.debug("facade.init.view", extra={"event": "facade.init.view"})

    @staticmethod
    def _require(component: Any, label: str) -> Any:
        if component is None:
            raise SwitchboardError(
                f"Facade component {label!r} is not initialized; "
                "subclass hooks must call super()."
            )
        return component

    @property
    def bus(self) -> NotificationBus:
        return self._require(self._bus, "bus")

    @property
    def proxies(self) -> ProxyRegistry:
        return self._require(self._proxies, "proxies")

    @property
    def router(self) -> CommandRouter:
        return self._require(self._router, "router")

    @property
    def mediators(self) -> MediatorRegistry:
        return self._require(self._mediators, "mediators")

    # Commands

    def register_command(self, name: str, factory: CommandFactory) -> None:
        with self._lock:
            self.router.register_command(name, factory)

    def has_command(self, name: str) -> bool:
        with self._lock:
            return self.router.has_command(name)

    def remove_command(self, name: str) -> None:
        with self._lock:
            self.router.remove_command(name)

    # Proxies

    def register_proxy(self, proxy: Proxy) -> None:
        with self._lock:
            proxy.initialize_notifier(self)
            self.proxies.register(proxy)

    def retrieve_proxy(self, name: str) -> Proxy | None:
        with self._lock:
            return self.proxies.retrieve(name)

    def has_proxy(self, name: str) -> bool:
        with self._lock:
            return self.proxies.has(name)

    def remove_proxy(self, name: str) -> None:
        with self._lock:
            self.proxies.remove(name)

    # Mediators

    def register_mediator(self, mediator: Mediator) -> bool:
        """Register ``mediator``; return False if its name is already taken."""
        with self._lock:
            if not self.mediators.has(mediator.name):
                mediator.initialize_notifier(self)
            return self.mediators.register(mediator)

    def retrieve_mediator(self, name: str) -> Mediator | None:
        with self._lock:
            return self.mediators.retrieve(name)

    def has_mediator(self, name: str) -> bool:
        with self._lock:
            return self.mediators.has(name)

    def remove_mediator(self, name: str) -> None:
        with self._lock:
            self.mediators.remove(name)

    # Notifications

    def send_notification(
        self, name: str, body: Any = None, kind: str | None = None
    ) -> None:
        """Build a message and dispatch it to every current subscriber."""
        message = Message(name, body, kind)
        with self._lock:
            self.bus.dispatch(message)

    send = send_notification

    def reset(self) -> None:
        """Dispose every registered entry and subscription.

        The facade stays usable: registries are emptied, not replaced.
        """
        with self._lock:
            self.mediators.clear()
            self.router.clear()
            self.proxies.clear()
            self.bus.clear()
        LOGGER.debug("facade.reset", extra={"event": "facade.reset"})
