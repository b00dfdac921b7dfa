from __future__ import annotations

from typing import Any, List, Optional

from ..domain.notification import Notification
from .notifier import Notifier


class Mediator(Notifier):
    """Named component that reacts to notifications on behalf of a view component."""

    NAME = "Mediator"

    def __init__(self, mediator_name: Optional[str] = None, view_component: Any = None) -> None:
        self.mediator_name = mediator_name or self.NAME
        self._view_component = view_component

    def get_mediator_name(self) -> str:
        return self.mediator_name

    @property
    def view_component(self) -> Any:
        return self._view_component

    @view_component.setter
    def view_component(self, value: Any) -> None:
        self._view_component = value

    def list_notification_interests(self) -> List[str]:
        """Names this mediator wants routed to :meth:`handle_notification`.

        Read once by the View at registration time.
        """
        return []

    def handle_notification(self, notification: Notification) -> None:
        """Handle one of the notifications listed as an interest."""

    def on_register(self) -> None:
        """Called by the View after registration."""

    def on_remove(self) -> None:
        """Called by the View after removal."""


__all__ = ["Mediator"]
