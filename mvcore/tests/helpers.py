from __future__ import annotations

from typing import List

from mvcore.domain.notification import Notification
from mvcore.patterns.command import SimpleCommand
from mvcore.patterns.mediator import Mediator
from mvcore.patterns.proxy import Proxy


class RecordingMediator(Mediator):
    def __init__(self, name: str, interests: List[str]) -> None:
        super().__init__(name)
        self.interests = list(interests)
        self.received: List[Notification] = []
        self.registered = 0
        self.removed = 0

    def list_notification_interests(self) -> List[str]:
        return self.interests

    def handle_notification(self, notification: Notification) -> None:
        self.received.append(notification)

    def on_register(self) -> None:
        self.registered += 1

    def on_remove(self) -> None:
        self.removed += 1


class RecordingProxy(Proxy):
    def __init__(self, name: str, data=None) -> None:
        super().__init__(name, data)
        self.registered = 0
        self.removed = 0

    def on_register(self) -> None:
        self.registered += 1

    def on_remove(self) -> None:
        self.removed += 1


def make_recording_command(log: List[tuple]):
    """Return a command class appending ``(label, instance, notification)`` to ``log``."""

    class RecordingCommand(SimpleCommand):
        label = "recording"

        def execute(self, notification: Notification) -> None:
            log.append((self.label, self, notification))

    return RecordingCommand


__all__ = ["RecordingMediator", "RecordingProxy", "make_recording_command"]
