"""Unit tests for the weakly referencing observer registry."""

import pytest

from orderly import ObserverRegistry
from tests.utils.memory_utils import drop_and_collect


class Owner:
    pass


@pytest.mark.unit
@pytest.mark.collection
def test_registry_accumulates_handlers_per_observer():
    """Adding the same observer twice keeps both handlers in order"""
    registry = ObserverRegistry()
    owner = Owner()

    registry.add(owner, "first")
    registry.add(owner, "second")

    assert len(registry) == 1
    assert registry.live_handlers() == [(owner, "first"), (owner, "second")]


@pytest.mark.unit
@pytest.mark.collection
def test_registry_preserves_registration_order_across_observers():
    """Handlers are gathered in the order observers registered"""
    registry = ObserverRegistry()
    first, second = Owner(), Owner()

    registry.add(second, "b")
    registry.add(first, "a")

    assert [handler for _, handler in registry.live_handlers()] == ["b", "a"]


@pytest.mark.unit
@pytest.mark.collection
def test_registry_remove_reports_unknown_observers():
    """remove() returns False for observers that were never registered"""
    registry = ObserverRegistry()
    owner = Owner()

    assert registry.remove(owner) is False
    registry.add(owner, "h")
    assert owner in registry
    assert registry.remove(owner) is True
    assert owner not in registry


@pytest.mark.unit
@pytest.mark.collection
def test_registry_discard_handler_keeps_remaining_handlers():
    """discard_handler() drops one handler; the observer stays while others remain"""
    transitions = []
    registry = ObserverRegistry(on_has_observers_changed=transitions.append)
    owner = Owner()
    registry.add(owner, "keep")
    registry.add(owner, "drop")

    registry.discard_handler(owner, "drop")
    assert registry.live_handlers() == [(owner, "keep")]

    registry.discard_handler(owner, "keep")
    assert len(registry) == 0
    assert transitions == [True, False]


@pytest.mark.unit
@pytest.mark.collection
@pytest.mark.memory
def test_registry_prunes_collected_observers_lazily():
    """Collected observers stay counted until handlers are next gathered"""
    registry = ObserverRegistry()
    holder = {"observer": Owner()}
    registry.add(holder["observer"], "h")

    drop_and_collect(holder, "observer")

    assert len(registry) == 1
    assert registry.live_handlers() == []
    assert len(registry) == 0


@pytest.mark.unit
@pytest.mark.collection
@pytest.mark.memory
def test_registry_repr_is_available_inside_presence_callback():
    """repr() reports the entry count, including from a callback fired while pruning"""
    seen = []
    registry = None

    def on_presence(has_observers):
        seen.append(repr(registry))

    registry = ObserverRegistry(on_presence)
    holder = {"observer": Owner()}
    registry.add(holder["observer"], "h")
    assert repr(registry) == "ObserverRegistry(entries=1)"

    drop_and_collect(holder, "observer")
    registry.live_handlers()

    assert seen == ["ObserverRegistry(entries=1)", "ObserverRegistry(entries=0)"]
