from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Optional, Protocol

from .notification import Notification

if TYPE_CHECKING:  # pragma: no cover - type checking helper
    from ..core.registry import CoreRegistry

MultitonKey = str


# ---- Capability contracts consumed by Model/View/Controller ----
class NotifierPort(Protocol):
    """Anything that can be bound to a core by key."""

    def initialize_notifier(
        self, key: MultitonKey, registry: Optional["CoreRegistry"] = None
    ) -> None: ...


class ProxyPort(NotifierPort, Protocol):
    """Named data holder registered with the Model."""

    def get_proxy_name(self) -> str: ...
    def on_register(self) -> None: ...
    def on_remove(self) -> None: ...


class MediatorPort(NotifierPort, Protocol):
    """Named component registered with the View.

    The View reads ``list_notification_interests`` once at registration and
    routes each of those names to ``handle_notification``.
    """

    def get_mediator_name(self) -> str: ...
    def list_notification_interests(self) -> List[str]: ...
    def handle_notification(self, notification: Notification) -> None: ...
    def on_register(self) -> None: ...
    def on_remove(self) -> None: ...


class CommandPort(NotifierPort, Protocol):
    """Handler created fresh for every notification it is mapped to."""

    def execute(self, notification: Notification) -> Any: ...


CommandFactory = Callable[[], CommandPort]


__all__ = [
    "CommandFactory",
    "CommandPort",
    "MediatorPort",
    "MultitonKey",
    "NotifierPort",
    "ProxyPort",
]
