from __future__ import annotations

import pytest

from mvcore.core.registry import CoreRegistry
from mvcore.core.view import View
from mvcore.domain.errors import DuplicateKeyError
from mvcore.domain.notification import Notification
from mvcore.domain.observer import Observer


def _view(key: str = "view-test") -> View:
    return View.get_instance(key, CoreRegistry())


def test_notify_without_observers_is_noop() -> None:
    view = _view()
    view.notify_observers(Notification("nobody-listens"))
    assert view.observer_map == {}


def test_observers_are_notified_in_registration_order() -> None:
    view = _view()
    calls = []
    view.register_observer("N", Observer(lambda n: calls.append("first"), object()))
    view.register_observer("N", Observer(lambda n: calls.append("second"), object()))

    view.notify_observers(Notification("N"))

    assert calls == ["first", "second"]


def test_observer_receives_body_and_type() -> None:
    view = _view()
    ctx = object()
    recorded = []
    view.register_observer("greet", Observer(recorded.append, ctx))

    view.notify_observers(Notification("greet", "hello", "info"))

    assert len(recorded) == 1
    assert recorded[0].body == "hello"
    assert recorded[0].type == "info"


def test_observer_removing_itself_does_not_skip_later_observers() -> None:
    view = _view()
    calls = []
    ctx_a, ctx_b = object(), object()

    def first(note: Notification) -> None:
        calls.append("a")
        view.remove_observer("N", ctx_a)

    view.register_observer("N", Observer(first, ctx_a))
    view.register_observer("N", Observer(lambda n: calls.append("b"), ctx_b))

    view.notify_observers(Notification("N"))
    assert calls == ["a", "b"]

    view.notify_observers(Notification("N"))
    assert calls == ["a", "b", "b"]


def test_observer_removing_later_sibling_takes_effect_on_next_dispatch() -> None:
    view = _view()
    calls = []
    ctx_a, ctx_b = object(), object()

    def first(note: Notification) -> None:
        calls.append("a")
        view.remove_observer("N", ctx_b)

    view.register_observer("N", Observer(first, ctx_a))
    view.register_observer("N", Observer(lambda n: calls.append("b"), ctx_b))

    view.notify_observers(Notification("N"))
    view.notify_observers(Notification("N"))

    assert calls == ["a", "b", "a"]
    assert [o.notify_context for o in view.observer_map["N"]] == [ctx_a]


def test_observer_added_during_dispatch_runs_on_next_dispatch_only() -> None:
    view = _view()
    calls = []
    late = Observer(lambda n: calls.append("late"), object())

    def adder(note: Notification) -> None:
        calls.append("adder")
        view.register_observer("N", late)

    view.register_observer("N", Observer(adder, object()))
    view.notify_observers(Notification("N"))
    assert calls == ["adder"]


def test_remove_observer_drops_empty_name() -> None:
    view = _view()
    ctx = object()
    view.register_observer("N", Observer(lambda n: None, ctx))

    view.remove_observer("N", ctx)

    assert "N" not in view.observer_map


def test_remove_observer_keeps_other_contexts() -> None:
    view = _view()
    keep, drop = object(), object()
    view.register_observer("N", Observer(lambda n: None, keep))
    view.register_observer("N", Observer(lambda n: None, drop))

    view.remove_observer("N", drop)

    assert [o.notify_context for o in view.observer_map["N"]] == [keep]


def test_remove_observer_for_unknown_name_is_noop() -> None:
    view = _view()
    view.remove_observer("missing", object())
    assert view.observer_map == {}


def test_observer_exception_propagates() -> None:
    view = _view()

    def explode(note: Notification) -> None:
        raise ValueError("bad observer")

    view.register_observer("N", Observer(explode, object()))
    with pytest.raises(ValueError):
        view.notify_observers(Notification("N"))


def test_direct_construction_for_used_key_raises() -> None:
    registry = CoreRegistry()
    View("dup", registry)
    with pytest.raises(DuplicateKeyError):
        View("dup", registry)


def test_get_instance_returns_same_view_and_none_for_empty_key() -> None:
    registry = CoreRegistry()
    assert View.get_instance("k", registry) is View.get_instance("k", registry)
    assert View.get_instance("", registry) is None


def test_remove_view_frees_key() -> None:
    registry = CoreRegistry()
    view = View("k", registry)
    view.register_observer("N", Observer(lambda n: None, object()))

    View.remove_view("k", registry)

    assert view.observer_map == {}
    assert View("k", registry) is not view
