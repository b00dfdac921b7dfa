from __future__ import annotations

from typing import Any, Optional

from .notifier import Notifier


class Proxy(Notifier):
    """Named data holder registered with the Model.

    Subclasses typically wrap a remote service or a piece of application
    state and announce changes with :meth:`send_notification`.
    """

    NAME = "Proxy"

    def __init__(self, proxy_name: Optional[str] = None, data: Any = None) -> None:
        self.proxy_name = proxy_name or self.NAME
        self._data = data

    def get_proxy_name(self) -> str:
        return self.proxy_name

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any) -> None:
        self._data = value

    def on_register(self) -> None:
        """Called by the Model after registration."""

    def on_remove(self) -> None:
        """Called by the Model after removal."""


__all__ = ["Proxy"]
