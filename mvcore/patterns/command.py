"""Base command types executed by the Controller.

A command is created from its factory for every notification it handles and
then discarded, so commands should not keep state between executions.
"""

from __future__ import annotations

import logging
from typing import Any, List, Tuple

from ..domain.errors import CommandExecutionError
from ..domain.notification import Notification
from ..domain.ports import CommandFactory
from .notifier import Notifier


class SimpleCommand(Notifier):
    """Single-step command; override :meth:`execute`."""

    def execute(self, notification: Notification) -> None:
        """Fulfil the use case started by ``notification``."""


class MacroCommand(Notifier):
    """Command that runs a list of sub-commands in FIFO order.

    Subclasses populate the list in :meth:`initialize_macro_command`::

        class StartupCommand(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(PrepModelCommand)
                self.add_sub_command(PrepViewCommand)

    Each sub-command is created fresh and bound to the macro's core. A
    failing sub-command does not stop the ones after it: all of them run,
    then a :class:`~mvcore.domain.errors.CommandExecutionError` listing the
    failures is raised.
    """

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        """Subclass hook; call :meth:`add_sub_command` here."""

    def add_sub_command(self, factory: CommandFactory) -> None:
        self.sub_commands.append(factory)

    def execute(self, notification: Notification) -> None:
        failures: List[Tuple[CommandFactory, Exception]] = []
        while self.sub_commands:
            factory = self.sub_commands.pop(0)
            try:
                command: Any = factory()
                command.initialize_notifier(self.multiton_key, self.registry)
                command.execute(notification)
            except Exception as exc:
                self._log.exception(
                    "[%s] sub-command %s failed for %r",
                    self.multiton_key,
                    getattr(factory, "__name__", factory),
                    notification.name,
                )
                failures.append((factory, exc))
        if failures:
            raise CommandExecutionError(failures)


__all__ = ["MacroCommand", "SimpleCommand"]
