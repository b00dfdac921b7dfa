"""Named lookup of the Proxy instances of one core."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..domain.ports import MultitonKey, ProxyPort
from .registry import MODEL, CoreRegistry, MultitonActor


class Model(MultitonActor):
    """Multiton Model caching proxies by name."""

    ROLE = MODEL

    def __init__(self, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.proxy_map: Dict[str, ProxyPort] = {}
        super().__init__(key, registry)
        self.initialize_model()

    def initialize_model(self) -> None:
        """Subclass hook called once the Model is registered for its key."""

    @classmethod
    def remove_model(cls, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        model = cls._release(key, registry)
        if model is not None:
            model.proxy_map.clear()

    def register_proxy(self, proxy: ProxyPort) -> None:
        proxy.initialize_notifier(self.multiton_key, self.registry)
        name = proxy.get_proxy_name()
        self.proxy_map[name] = proxy
        self._log.debug("[%s] proxy %r registered", self.multiton_key, name)
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> Optional[ProxyPort]:
        return self.proxy_map.get(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return proxy_name in self.proxy_map

    def remove_proxy(self, proxy_name: str) -> Optional[ProxyPort]:
        proxy = self.proxy_map.pop(proxy_name, None)
        if proxy is not None:
            self._log.debug("[%s] proxy %r removed", self.multiton_key, proxy_name)
            proxy.on_remove()
        return proxy


__all__ = ["Model"]
