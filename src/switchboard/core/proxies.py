"""Proxy registry: named data holders with overwrite-on-register."""

from __future__ import annotations

import logging

from ..patterns.message import require_name
from ..patterns.proxy import Proxy

LOGGER = logging.getLogger(__name__)


class ProxyRegistry:
    """Own every registered proxy and dispose it when it leaves.

    Registering a name that is already taken evicts and disposes the
    previous proxy before storing the new one.
    """

    def __init__(self) -> None:
        self._proxies: dict[str, Proxy] = {}

    def register(self, proxy: Proxy) -> None:
        name = require_name(proxy.name, "proxy")
        previous = self._proxies.get(name)
        if previous is proxy:
            return
        if previous is not None:
            self.remove(name)
            LOGGER.debug(
                "proxies.evicted",
                extra={"event": "proxies.evicted", "proxy": name},
            )
        self._proxies[name] = proxy
        LOGGER.debug(
            "proxies.registered",
            extra={"event": "proxies.registered", "proxy": name},
        )

    def retrieve(self, name: str) -> Proxy | None:
        return self._proxies.get(name)

    def has(self, name: str) -> bool:
        return name in self._proxies

    def remove(self, name: str) -> None:
        proxy = self._proxies.pop(name, None)
        if proxy is None:
            return
        proxy.dispose()
        LOGGER.debug(
            "proxies.removed",
            extra={"event": "proxies.removed", "proxy": name},
        )

    def names(self) -> list[str]:
        return list(self._proxies)

    def clear(self) -> None:
        for name in list(self._proxies):
            self.remove(name)
