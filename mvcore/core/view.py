"""Observer registry and notification dispatcher for one core.

The View keeps two maps for its multiton key:

* ``observer_map``: notification name -> observers, in registration order.
* ``mediator_map``: mediator name -> mediator.

Dispatch iterates over a copy of the observer list taken before the first
callback runs, so callbacks may register or remove observers for the name
being dispatched (themselves included) without disturbing the iteration.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..domain.notification import Notification
from ..domain.observer import Observer
from ..domain.ports import MediatorPort, MultitonKey
from .registry import VIEW, CoreRegistry, MultitonActor


class View(MultitonActor):
    """Multiton View: routes notifications to observers and owns mediators."""

    ROLE = VIEW

    def __init__(self, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.observer_map: Dict[str, List[Observer]] = {}
        self.mediator_map: Dict[str, MediatorPort] = {}
        self._interests: Dict[str, List[str]] = {}
        super().__init__(key, registry)
        self.initialize_view()

    def initialize_view(self) -> None:
        """Subclass hook called once the View is registered for its key."""

    @classmethod
    def remove_view(cls, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        """Drop the View for ``key`` together with its observers and mediators."""
        view = cls._release(key, registry)
        if view is None:
            return
        view.observer_map.clear()
        view.mediator_map.clear()
        view._interests.clear()

    # ------------------------------------------------------------------ #
    # Observers
    # ------------------------------------------------------------------ #
    def register_observer(self, notification_name: str, observer: Observer) -> None:
        """Append ``observer`` to the list for ``notification_name``.

        Callers are responsible for not registering the same context twice
        for one name.
        """
        self.observer_map.setdefault(notification_name, []).append(observer)
        self._log.debug("[%s] observer added for %r: %r", self.multiton_key, notification_name, observer)

    def remove_observer(self, notification_name: str, notify_context: object) -> None:
        observers = self.observer_map.get(notification_name)
        if observers is None:
            return
        for index, observer in enumerate(observers):
            if observer.compare_notify_context(notify_context):
                del observers[index]
                break
        if not observers:
            del self.observer_map[notification_name]

    def notify_observers(self, notification: Notification) -> None:
        observers = self.observer_map.get(notification.name)
        if not observers:
            return
        snapshot = list(observers)
        self._log.debug(
            "[%s] dispatching %r to %d observer(s)",
            self.multiton_key,
            notification.name,
            len(snapshot),
        )
        for observer in snapshot:
            observer.notify_observer(notification)

    # ------------------------------------------------------------------ #
    # Mediators
    # ------------------------------------------------------------------ #
    def register_mediator(self, mediator: MediatorPort) -> None:
        name = mediator.get_mediator_name()
        if name in self.mediator_map:
            self._log.warning(
                "[%s] mediator %r already registered; ignoring", self.multiton_key, name
            )
            return

        mediator.initialize_notifier(self.multiton_key, self.registry)
        # read before storing so a failing hook leaves nothing registered
        interests = list(dict.fromkeys(mediator.list_notification_interests()))

        self.mediator_map[name] = mediator
        self._interests[name] = interests
        if interests:
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.register_observer(interest, observer)

        self._log.debug("[%s] mediator %r registered, interests=%s", self.multiton_key, name, interests)
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> Optional[MediatorPort]:
        return self.mediator_map.get(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[MediatorPort]:
        mediator = self.mediator_map.get(mediator_name)
        if mediator is None:
            return None

        # interests as declared at registration time
        for interest in self._interests.pop(mediator_name, []):
            self.remove_observer(interest, mediator)

        del self.mediator_map[mediator_name]
        self._log.debug("[%s] mediator %r removed", self.multiton_key, mediator_name)
        mediator.on_remove()
        return mediator

    def has_mediator(self, mediator_name: str) -> bool:
        return mediator_name in self.mediator_map


__all__ = ["View"]
