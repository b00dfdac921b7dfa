from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..core.registry import CoreRegistry
from ..domain.errors import NotifierError
from ..domain.ports import MultitonKey

if TYPE_CHECKING:  # pragma: no cover - type checking helper
    from .facade import Facade


class Notifier:
    """Mixin giving proxies, mediators and commands access to their core.

    The key is not known at construction time; Model, View and Controller
    call :meth:`initialize_notifier` when the object is registered or, for
    commands, right before execution.
    """

    multiton_key: Optional[MultitonKey] = None
    registry: Optional[CoreRegistry] = None

    def initialize_notifier(
        self, key: MultitonKey, registry: Optional[CoreRegistry] = None
    ) -> None:
        self.multiton_key = key
        self.registry = registry

    @property
    def facade(self) -> "Facade":
        if not self.multiton_key:
            raise NotifierError()
        from .facade import Facade

        return Facade.get_instance(self.multiton_key, self.registry)

    def send_notification(
        self, notification_name: str, body: Any = None, type: Optional[str] = None
    ) -> None:
        """Build a notification and dispatch it synchronously through the Facade."""
        self.facade.send_notification(notification_name, body, type)


__all__ = ["Notifier"]
