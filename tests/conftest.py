"""
Shared pytest fixtures and configuration for Orderly tests.
"""

import pytest


class Observer:
    """Weak-referenceable stand-in for a view controller or other owner."""

    pass


class Recorder:
    """Collects ObservableArray notifications as tuples, in delivery order."""

    def __init__(self):
        self.events = []

    def on_insert(self, element, index):
        self.events.append(("insert", element, index))

    def on_update(self, element, index):
        self.events.append(("update", element, index))

    def on_remove(self, element, index):
        self.events.append(("remove", element, index))

    def on_remove_all(self, old_values):
        self.events.append(("remove_all", list(old_values)))

    def on_move(self, element, from_index, to_index):
        self.events.append(("move", element, from_index, to_index))

    def handlers(self):
        """Keyword arguments for ObservableArray.add_observer."""
        return {
            "on_insert": self.on_insert,
            "on_update": self.on_update,
            "on_remove": self.on_remove,
            "on_remove_all": self.on_remove_all,
            "on_move": self.on_move,
        }

    def clear(self):
        self.events.clear()


@pytest.fixture
def observer():
    """Provide a live observer identity that lasts for the whole test."""
    return Observer()


@pytest.fixture
def recorder():
    """Provide a fresh notification Recorder."""
    return Recorder()


@pytest.fixture
def observe(observer, recorder):
    """Subscribe the shared recorder to an array under the shared observer."""

    def _observe(array):
        array.add_observer(observer, **recorder.handlers())
        return recorder

    return _observe
