from __future__ import annotations

from typing import Any, Callable

from .notification import Notification

NotifyMethod = Callable[[Notification], None]


class Observer:
    """A ``(callback, context)`` pair registered against a notification name.

    Equality is context identity: two observers with the same context are the
    same subscriber, whatever their callbacks.
    """

    __slots__ = ("notify_method", "notify_context")

    def __init__(self, notify_method: NotifyMethod, notify_context: Any) -> None:
        self.notify_method = notify_method
        self.notify_context = notify_context

    def notify_observer(self, notification: Notification) -> None:
        self.notify_method(notification)

    def compare_notify_context(self, obj: Any) -> bool:
        return self.notify_context is obj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Observer):
            return NotImplemented
        return self.notify_context is other.notify_context

    def __hash__(self) -> int:
        return id(self.notify_context)

    def __repr__(self) -> str:
        method = getattr(self.notify_method, "__qualname__", repr(self.notify_method))
        return f"Observer(method={method}, context={type(self.notify_context).__name__})"


__all__ = ["NotifyMethod", "Observer"]
