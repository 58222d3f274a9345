"""Named adapters with a fixed set of notification interests."""

from __future__ import annotations

from typing import Any

from .message import Message, require_name
from .notifier import Notifier


class Mediator(Notifier):
    """Adapt a view component to the notification bus.

    The mediator registry reads ``list_notification_interests`` exactly once,
    at registration; changing the answer afterwards has no effect on which
    notifications reach ``handle_notification``.

    Subclasses react to a new view component by overriding
    ``_apply_view_component``.
    """

    NAME = "Mediator"

    def __init__(self, name: str | None = None, view_component: Any = None) -> None:
        self._name = require_name(name if name is not None else self.NAME, "mediator")
        self._view_component: Any = None
        if view_component is not None:
            self.view_component = view_component

    @property
    def name(self) -> str:
        return self._name

    @property
    def view_component(self) -> Any:
        return self._view_component

    @view_component.setter
    def view_component(self, value: Any) -> None:
        old = self._view_component
        self._view_component = value
        self._apply_view_component(value, old)

    def _apply_view_component(self, value: Any, old: Any) -> None:
        """Called after ``view_component`` is assigned. Default does nothing."""

    def list_notification_interests(self) -> list[str]:
        return []

    def handle_notification(self, message: Message) -> None:
        pass

    def _on_dispose(self) -> None:
        super()._on_dispose()
        # Released without running the hook; the mediator is gone.
        self._view_component = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
