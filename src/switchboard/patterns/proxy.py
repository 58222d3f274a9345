"""Named data holders kept in the proxy registry."""

from __future__ import annotations

from typing import Any

from .message import require_name
from .notifier import Notifier


class Proxy(Notifier):
    """Hold a piece of application data under a registry name.

    Subclasses react to data changes by overriding ``_apply_data``.
    """

    NAME = "Proxy"

    def __init__(self, name: str | None = None, data: Any = None) -> None:
        self._name = require_name(name if name is not None else self.NAME, "proxy")
        self._data: Any = None
        if data is not None:
            self.data = data

    @property
    def name(self) -> str:
        return self._name

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any) -> None:
        old = self._data
        self._data = value
        self._apply_data(value, old)

    def _apply_data(self, value: Any, old: Any) -> None:
        """Called after ``data`` is assigned. Default does nothing."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
