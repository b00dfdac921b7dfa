"""Error types raised by the multiton actors.

Lookup and removal misses never raise; they return ``None`` or do nothing.
The errors below cover the few situations a caller has to react to.
"""

from __future__ import annotations

from typing import Any, List, Tuple


class MvcError(Exception):
    """Base class for framework errors, carrying a stable code."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class DuplicateKeyError(MvcError):
    """Raised when an actor is constructed directly for a key already in use."""

    def __init__(self, actor: str, key: str):
        super().__init__(
            "DUPLICATE_KEY",
            f"{actor} instance for this Multiton key already constructed!",
        )
        self.actor = actor
        self.key = key


class NotifierError(MvcError):
    """Raised when a notifier is used before it received its multiton key."""

    def __init__(self, message: str = "multitonKey for this Notifier not yet initialized!"):
        super().__init__("NOTIFIER_NOT_INITIALIZED", message)


class CommandExecutionError(MvcError):
    """Raised after a macro command ran all sub-commands and some of them failed.

    Attributes:
        failures: ``(factory, exception)`` pairs in execution order.
    """

    def __init__(self, failures: List[Tuple[Any, BaseException]]):
        names = ", ".join(
            getattr(factory, "__name__", repr(factory)) for factory, _ in failures
        )
        super().__init__(
            "MACRO_COMMAND_FAILED",
            f"{len(failures)} sub-command(s) failed: {names}",
        )
        self.failures = list(failures)


__all__ = ["CommandExecutionError", "DuplicateKeyError", "MvcError", "NotifierError"]
