"""Domain package exports for messages, observers, contracts and errors."""

from .errors import CommandExecutionError, DuplicateKeyError, MvcError, NotifierError
from .notification import Notification
from .observer import NotifyMethod, Observer
from .ports import (
    CommandFactory,
    CommandPort,
    MediatorPort,
    MultitonKey,
    NotifierPort,
    ProxyPort,
)

__all__ = [
    "CommandExecutionError",
    "CommandFactory",
    "CommandPort",
    "DuplicateKeyError",
    "MediatorPort",
    "MultitonKey",
    "MvcError",
    "Notification",
    "NotifierError",
    "NotifierPort",
    "NotifyMethod",
    "Observer",
    "ProxyPort",
]
