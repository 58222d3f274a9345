"""Notification envelope passed to every subscriber of a dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import InvalidNameError


def require_name(value: Any, what: str = "notification") -> str:
    """Return ``value`` when it is a usable registry key, raise otherwise.

    Names are used verbatim: surrounding whitespace is significant and is
    not stripped, but a name made only of whitespace is rejected.
    """
    if not isinstance(value, str):
        raise InvalidNameError(f"{what} name must be a string, got {type(value).__name__}.")
    if not value.strip():
        raise InvalidNameError(f"{what} name must not be empty.")
    return value


@dataclass(frozen=True)
class Message:
    """A named notification with an optional body and kind.

    A message is built right before a dispatch and belongs to that one
    synchronous call; subscribers should copy what they need rather than
    keep the instance.
    """

    name: str
    body: Any = None
    kind: str | None = None

    def __post_init__(self) -> None:
        require_name(self.name)
        if self.kind is not None and not isinstance(self.kind, str):
            raise TypeError("Message kind must be a string or None.")

    def __str__(self) -> str:
        body = "null" if self.body is None else str(self.body)
        kind = "null" if self.kind is None else self.kind
        return f"Notification Name: {self.name}\nBody:{body}\nType:{kind}"
