"""Base for actors that publish notifications through a facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import NotifierNotAttachedError
from .disposable import Disposable

if TYPE_CHECKING:
    from ..facade import Facade


class Notifier(Disposable):
    """Give proxies, mediators and commands a way to send notifications.

    There is no process-wide facade to reach for: the facade attaches itself
    through ``initialize_notifier`` when it registers a proxy or mediator and
    when its router builds a command.
    """

    _facade: Facade | None = None

    def initialize_notifier(self, facade: Facade) -> None:
        self._facade = facade

    @property
    def facade(self) -> Facade:
        if self._facade is None:
            raise NotifierNotAttachedError(
                f"{type(self).__name__} is not attached to a facade."
            )
        return self._facade

    def send_notification(
        self, name: str, body: Any = None, kind: str | None = None
    ) -> None:
        """Build a message and dispatch it through the attached facade."""
        self.facade.send_notification(name, body, kind)

    def _on_dispose(self) -> None:
        self._facade = None
