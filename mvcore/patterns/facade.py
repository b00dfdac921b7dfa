"""Single entry point to the Model, View and Controller of one core.

Application code normally talks to a core through its Facade only::

    facade = Facade.get_instance("editor")
    facade.register_command(STARTUP, StartupCommand)
    facade.send_notification(STARTUP, app_root)

The Facade adds no routing logic of its own; every call maps one-to-one to
the underlying actor. :meth:`Facade.remove_core` tears down all four actors
of a key so the key can be used again.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.controller import Controller
from ..core.model import Model
from ..core.registry import FACADE, CoreRegistry, MultitonActor
from ..core.view import View
from ..domain.notification import Notification
from ..domain.ports import CommandFactory, MediatorPort, MultitonKey, ProxyPort


class Facade(MultitonActor):
    """Multiton Facade composing the actors of one core."""

    ROLE = FACADE

    def __init__(self, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.model: Optional[Model] = None
        self.view: Optional[View] = None
        self.controller: Optional[Controller] = None
        super().__init__(key, registry)
        self.initialize_facade()

    # ------------------------------------------------------------------ #
    # Initialization hooks
    # ------------------------------------------------------------------ #
    def initialize_facade(self) -> None:
        """Create the actors. Subclasses extending this must call super first."""
        self.initialize_model()
        self.initialize_controller()
        self.initialize_view()
        self._log.debug("Facade initialized for key %r", self.multiton_key)

    def initialize_model(self) -> None:
        if self.model is not None:
            return
        self.model = Model.get_instance(self.multiton_key, self.registry)

    def initialize_controller(self) -> None:
        """Override to register startup commands after calling super."""
        if self.controller is not None:
            return
        self.controller = Controller.get_instance(self.multiton_key, self.registry)

    def initialize_view(self) -> None:
        if self.view is not None:
            return
        self.view = View.get_instance(self.multiton_key, self.registry)

    # ------------------------------------------------------------------ #
    # Core lifecycle
    # ------------------------------------------------------------------ #
    @classmethod
    def has_core(cls, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> bool:
        registry = registry if registry is not None else CoreRegistry.default()
        return registry.contains(FACADE, key)

    @classmethod
    def remove_core(cls, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        """Remove the Model, View, Controller and Facade registered for ``key``."""
        registry = registry if registry is not None else CoreRegistry.default()
        if not registry.contains(FACADE, key):
            return
        Model.remove_model(key, registry)
        Controller.remove_controller(key, registry)
        View.remove_view(key, registry)
        registry.release(FACADE, key)
        logging.getLogger(__name__).info("Core %r removed", key)

    # ------------------------------------------------------------------ #
    # Controller
    # ------------------------------------------------------------------ #
    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        self.controller.register_command(notification_name, factory)

    def remove_command(self, notification_name: str) -> None:
        self.controller.remove_command(notification_name)

    def has_command(self, notification_name: str) -> bool:
        return self.controller.has_command(notification_name)

    # ------------------------------------------------------------------ #
    # Model
    # ------------------------------------------------------------------ #
    def register_proxy(self, proxy: ProxyPort) -> None:
        self.model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> Optional[ProxyPort]:
        return self.model.retrieve_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> Optional[ProxyPort]:
        if self.model is None:
            return None
        return self.model.remove_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return self.model.has_proxy(proxy_name)

    # ------------------------------------------------------------------ #
    # View
    # ------------------------------------------------------------------ #
    def register_mediator(self, mediator: MediatorPort) -> None:
        if self.view is not None:
            self.view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> Optional[MediatorPort]:
        return self.view.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[MediatorPort]:
        if self.view is None:
            return None
        return self.view.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self.view.has_mediator(mediator_name)

    # ------------------------------------------------------------------ #
    # Notifications
    # ------------------------------------------------------------------ #
    def send_notification(
        self, notification_name: str, body: Any = None, type: Optional[str] = None
    ) -> None:
        self.notify_observers(Notification(notification_name, body, type))

    def notify_observers(self, notification: Notification) -> None:
        """Dispatch a prebuilt notification, e.g. a Notification subclass."""
        if self.view is not None:
            self.view.notify_observers(notification)


__all__ = ["Facade"]
