"""Notification-to-command routing for one core.

The Controller subscribes to its View once per mapped notification name with
an observer whose callback is :meth:`Controller.execute_command`. Every
dispatch of a mapped name creates a new command from the registered factory;
command instances are never reused.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..domain.notification import Notification
from ..domain.observer import Observer
from ..domain.ports import CommandFactory, MultitonKey
from .registry import CONTROLLER, CoreRegistry, MultitonActor
from .view import View


class Controller(MultitonActor):
    """Multiton Controller mapping notification names to command factories."""

    ROLE = CONTROLLER

    def __init__(self, key: MultitonKey, registry: Optional[CoreRegistry] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.command_map: Dict[str, CommandFactory] = {}
        self.view: Optional[View] = None
        super().__init__(key, registry)
        self.initialize_controller()

    def initialize_controller(self) -> None:
        """Bind the Controller to the View of the same key.

        Subclasses that need a different View assign ``self.view`` and skip
        the super call.
        """
        self.view = View.get_instance(self.multiton_key, self.registry)

    @classmethod
    def remove_controller(
        cls, key: MultitonKey, registry: Optional[CoreRegistry] = None
    ) -> None:
        controller = cls._release(key, registry)
        if controller is None:
            return
        if controller.view is not None:
            for notification_name in controller.command_map:
                controller.view.remove_observer(notification_name, controller)
        controller.command_map.clear()

    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        """Map ``notification_name`` to ``factory``, replacing any earlier mapping.

        Only the first registration for a name subscribes the Controller to
        the View.
        """
        if notification_name not in self.command_map:
            self.view.register_observer(
                notification_name, Observer(self.execute_command, self)
            )
        self.command_map[notification_name] = factory
        self._log.debug(
            "[%s] command %s mapped to %r",
            self.multiton_key,
            getattr(factory, "__name__", factory),
            notification_name,
        )

    def execute_command(self, notification: Notification) -> None:
        factory = self.command_map.get(notification.name)
        if factory is None:
            return
        command = factory()
        command.initialize_notifier(self.multiton_key, self.registry)
        self._log.debug(
            "[%s] executing %s for %r",
            self.multiton_key,
            type(command).__name__,
            notification.name,
        )
        command.execute(notification)

    def has_command(self, notification_name: str) -> bool:
        return notification_name in self.command_map

    def remove_command(self, notification_name: str) -> None:
        if notification_name not in self.command_map:
            return
        self.view.remove_observer(notification_name, self)
        del self.command_map[notification_name]
        self._log.debug("[%s] command for %r removed", self.multiton_key, notification_name)


__all__ = ["Controller"]
