"""Subscription handles: a callback bound to a receiver identity."""

from __future__ import annotations

from collections.abc import Callable
import inspect
from typing import Any

from .disposable import Disposable
from .message import Message

MessageCallback = Callable[[Message], Any]

_UNSET: Any = object()


class SubscriptionHandle(Disposable):
    """Bind ``callback`` to the ``identity`` of the object that receives it.

    Removal from the bus matches on identity, never on the handle or the
    callback, so two handles wrapping different callables compare as the
    same subscriber when they share an identity. When ``identity`` is
    omitted the callback itself is the identity.
    """

    def __init__(self, callback: MessageCallback, identity: Any = _UNSET) -> None:
        if not callable(callback):
            raise TypeError("SubscriptionHandle callback must be callable.")
        self._callback = callback
        self._identity = callback if identity is _UNSET else identity
        self._disposed = False

    @property
    def callback(self) -> MessageCallback:
        return self._callback

    @property
    def identity(self) -> Any:
        return self._identity

    def notify(self, message: Message) -> None:
        """Invoke the callback with ``message``."""
        self._callback(message)

    def matches(self, identity: Any) -> bool:
        """Return True when this handle belongs to ``identity``.

        Bound methods are rebuilt on every attribute access, so they match by
        equality (same function, same instance); everything else by identity.
        """
        if identity is self._identity:
            return True
        return inspect.ismethod(identity) and identity == self._identity

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(callback={self._callback!r}, "
            f"identity={type(self._identity).__name__})"
        )
