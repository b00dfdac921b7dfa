"""Base classes application code extends: notifier, proxy, mediator, commands, facade."""

from .command import MacroCommand, SimpleCommand
from .facade import Facade
from .mediator import Mediator
from .notifier import Notifier
from .proxy import Proxy

__all__ = ["Facade", "MacroCommand", "Mediator", "Notifier", "Proxy", "SimpleCommand"]
