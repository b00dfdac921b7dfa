"""Multiton MVC framework with notification-based decoupling.

Proxies, mediators and commands talk to each other through named
notifications routed by the View of their core; the Controller maps
notification names to commands. Several cores live side by side in one
process, each identified by a multiton key.
"""

from .core import Controller, CoreRegistry, Model, View
from .domain import (
    CommandExecutionError,
    DuplicateKeyError,
    MvcError,
    Notification,
    NotifierError,
    Observer,
)
from .patterns import Facade, MacroCommand, Mediator, Notifier, Proxy, SimpleCommand

__all__ = [
    "CommandExecutionError",
    "Controller",
    "CoreRegistry",
    "DuplicateKeyError",
    "Facade",
    "MacroCommand",
    "Mediator",
    "Model",
    "MvcError",
    "Notification",
    "Notifier",
    "NotifierError",
    "Observer",
    "Proxy",
    "SimpleCommand",
    "View",
]
