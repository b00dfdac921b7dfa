from __future__ import annotations

import logging

import pytest

from mvcore.core.registry import CoreRegistry
from mvcore.domain.errors import CommandExecutionError
from mvcore.domain.notification import Notification
from mvcore.domain.observer import Observer
from mvcore.patterns.command import MacroCommand, SimpleCommand
from mvcore.patterns.facade import Facade


def _macro(sub_commands, key="macro", registry=None) -> MacroCommand:
    class Macro(MacroCommand):
        def initialize_macro_command(self) -> None:
            for factory in sub_commands:
                self.add_sub_command(factory)

    macro = Macro()
    macro.initialize_notifier(key, registry)
    return macro


def test_simple_command_execute_is_noop() -> None:
    SimpleCommand().execute(Notification("anything"))


def test_sub_commands_run_in_order_with_fresh_instances() -> None:
    seen = []

    class First(SimpleCommand):
        def execute(self, notification):
            seen.append(("first", self, notification.body))

    class Second(SimpleCommand):
        def execute(self, notification):
            seen.append(("second", self, notification.body))

    macro = _macro([First, Second, First])
    macro.execute(Notification("go", 7))

    assert [entry[0] for entry in seen] == ["first", "second", "first"]
    assert seen[0][1] is not seen[2][1]
    assert all(entry[2] == 7 for entry in seen)
    assert macro.sub_commands == []


def test_sub_commands_inherit_macro_core() -> None:
    registry = CoreRegistry()
    bound = []

    class Probe(SimpleCommand):
        def execute(self, notification):
            bound.append((self.multiton_key, self.registry))

    _macro([Probe], key="core-a", registry=registry).execute(Notification("go"))

    assert bound == [("core-a", registry)]


def test_failing_sub_command_does_not_stop_the_rest(caplog) -> None:
    seen = []

    class Broken(SimpleCommand):
        def execute(self, notification):
            raise RuntimeError("broken step")

    class After(SimpleCommand):
        def execute(self, notification):
            seen.append("after")

    macro = _macro([Broken, After])
    with caplog.at_level(logging.ERROR, logger="mvcore.patterns.command"):
        with pytest.raises(CommandExecutionError) as excinfo:
            macro.execute(Notification("go"))

    assert seen == ["after"]
    [(factory, exc)] = excinfo.value.failures
    assert factory is Broken
    assert isinstance(exc, RuntimeError)
    assert "Broken" in caplog.text


def test_macro_registered_with_facade_sends_notifications() -> None:
    registry = CoreRegistry()
    facade = Facade.get_instance("macro-app", registry)
    received = []

    class Announce(SimpleCommand):
        def execute(self, notification):
            self.send_notification("announced", notification.body)

    class Startup(MacroCommand):
        def initialize_macro_command(self):
            self.add_sub_command(Announce)

    facade.view.register_observer("announced", Observer(received.append, object()))
    facade.register_command("startup", Startup)
    facade.send_notification("startup", "payload")

    assert [n.body for n in received] == ["payload"]
