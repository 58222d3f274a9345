"""Domain exception hierarchy for the switchboard notification engine."""

from __future__ import annotations


class SwitchboardError(RuntimeError):
    """Base class for all switchboard errors."""


class InvalidNameError(SwitchboardError, ValueError):
    """Raised when a notification, proxy or mediator name is empty or not a string."""


class SubscriberNotFoundError(SwitchboardError, KeyError):
    """Raised when unsubscribing from a notification name with no subscriber list."""


class NotifierNotAttachedError(SwitchboardError):
    """Raised when a notifier sends before it has been attached to a facade."""


class ConfigValidationError(SwitchboardError):
    """Raised when configuration cannot be validated safely."""
