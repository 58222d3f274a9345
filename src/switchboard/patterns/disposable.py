"""Explicit release for objects owned by a registry."""

from __future__ import annotations


class Disposable:
    """Mixin giving an idempotent ``dispose()`` and an ``is_disposed`` flag.

    Registries call ``dispose()`` on entries they evict or remove. Subclasses
    release their own references in ``_on_dispose``; it runs at most once.
    """

    _disposed: bool = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._on_dispose()

    def _on_dispose(self) -> None:
        """Release held references. Default does nothing."""
