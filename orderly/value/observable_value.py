"""
Orderly ObservableValue - Single Value with Weakly Held Observers
=================================================================

This module provides ObservableValue, the scalar companion to ObservableArray.
Observers register under an identity object that is held weakly, exactly as
with the collection, and receive a change record whenever the value is set.

Observation options:
- INITIAL: call the callback immediately with the current value
- ONLY_ONCE: drop the callback after its first call (an INITIAL call counts)

Example:
    ```python
    from orderly import ObservableValue, ObservationOptions

    class Label:
        pass

    label = Label()
    title = ObservableValue("Old Value")
    title.add_observer(label, lambda change: print(change.new_value))

    title.value = "New Value"  # prints: New Value
    ```
"""

import weakref
from dataclasses import dataclass
from enum import Flag
from typing import Any, Callable, Generic, Optional, TypeVar

from ..collection.ordering import values_equal
from ..collection.registry import ObserverRegistry
from ..errors import ReentrantMutationError

T = TypeVar("T")


class ObservationOptions(Flag):
    """How an observer callback is scheduled."""

    NONE = 0
    INITIAL = 1
    ONLY_ONCE = 2


@dataclass(frozen=True)
class InitialValue(Generic[T]):
    """Delivered once on registration with ``ObservationOptions.INITIAL``."""

    new_value: T


@dataclass(frozen=True)
class UpdateValue(Generic[T]):
    """Delivered when the value changes."""

    old_value: T
    new_value: T


ChangeCallback = Callable[[Any], None]


class _Observation:
    __slots__ = ("callback", "once")

    def __init__(self, callback: ChangeCallback, once: bool) -> None:
        self.callback = callback
        self.once = once


class ObservableValue(Generic[T]):
    """A value that notifies weakly held observers when it is set."""

    def __init__(
        self,
        value: T,
        on_has_observers_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._value = value
        self._observers: ObserverRegistry[_Observation] = ObserverRegistry(
            on_has_observers_changed
        )
        self._is_notifying = False

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def set(self, new_value: T) -> "ObservableValue[T]":
        """
        Store ``new_value`` and notify observers with an UpdateValue.

        Setting a value equal to the current one stores it without notifying.
        """
        if self._is_notifying:
            raise ReentrantMutationError(
                f"Cannot set {self!r} while it is notifying observers"
            )

        old_value = self._value
        self._value = new_value
        if values_equal(old_value, new_value):
            return self

        self._notify(UpdateValue(old_value, new_value))
        return self

    @property
    def has_observers(self) -> bool:
        return len(self._observers) > 0

    def add_observer(
        self,
        observer: object,
        callback: ChangeCallback,
        options: ObservationOptions = ObservationOptions.NONE,
    ) -> None:
        """
        Register ``callback`` under the weakly held ``observer`` identity.

        Raises:
            TypeError: If ``observer`` cannot be weakly referenced.
        """
        weakref.ref(observer)  # rejects identities that cannot be held weakly
        once = bool(options & ObservationOptions.ONLY_ONCE)
        if options & ObservationOptions.INITIAL:
            callback(InitialValue(self._value))
            if once:
                return

        self._observers.add(observer, _Observation(callback, once))

    def remove_observer(self, observer: object) -> None:
        self._observers.remove(observer)

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r})"

    def _notify(self, change: UpdateValue) -> None:
        self._is_notifying = True
        try:
            for observer, observation in self._observers.live_handlers():
                if observation.once:
                    self._observers.discard_handler(observer, observation)
                observation.callback(change)
        finally:
            self._is_notifying = False
