"""
Orderly Observer Registry - Weakly Held Observer Identities
===========================================================

This module provides ObserverRegistry, the bookkeeping shared by ObservableArray
and ObservableValue.

Each entry maps an observer identity to the list of handlers registered for it:
- The identity is held through ``weakref.ref``; the registry never keeps an
  observer alive.
- Registering an identity again appends another handler instead of replacing
  the existing ones.
- Entries whose identity has been collected are pruned lazily, the next time
  handlers are gathered for a notification.
- ``on_has_observers_changed`` fires only on the 0 -> 1 and 1 -> 0 transitions
  of the entry count.
"""

import logging
import threading
import weakref
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

H = TypeVar("H")


class _Entry(Generic[H]):
    __slots__ = ("ref", "handlers")

    def __init__(self, observer: object, handler: H) -> None:
        self.ref = weakref.ref(observer)
        self.handlers: List[H] = [handler]

    def matches(self, observer: object) -> bool:
        return self.ref() is observer


class ObserverRegistry(Generic[H]):
    """Ordered registry of weakly referenced observers and their handlers."""

    def __init__(
        self, on_has_observers_changed: Optional[Callable[[bool], None]] = None
    ) -> None:
        self._entries: List[_Entry[H]] = []
        self._lock = threading.RLock()
        self._on_has_observers_changed = on_has_observers_changed

    def add(self, observer: object, handler: H) -> None:
        """
        Register ``handler`` for ``observer``.

        Raises:
            TypeError: If ``observer`` cannot be weakly referenced.
        """
        with self._lock:
            entry = self._find(observer)
            if entry is not None:
                entry.handlers.append(handler)
                return
            became_observed = not self._entries
            self._entries.append(_Entry(observer, handler))

        if became_observed:
            self._presence_changed(True)

    def remove(self, observer: object) -> bool:
        """Drop every handler registered for ``observer``. Returns False if it was unknown."""
        with self._lock:
            entry = self._find(observer)
            if entry is None:
                return False
            self._entries.remove(entry)
            became_empty = not self._entries

        if became_empty:
            self._presence_changed(False)
        return True

    def discard_handler(self, observer: object, handler: H) -> None:
        """Drop a single handler; the observer goes away with its last handler."""
        with self._lock:
            entry = self._find(observer)
            if entry is None:
                return
            entry.handlers = [h for h in entry.handlers if h is not handler]
            if entry.handlers:
                return
            self._entries.remove(entry)
            became_empty = not self._entries

        if became_empty:
            self._presence_changed(False)

    def live_handlers(self) -> List[Tuple[Any, H]]:
        """
        Snapshot ``(observer, handler)`` pairs for one notification pass.

        Entries whose observer has been collected are removed here. The
        snapshot holds strong references to the live observers, so none of
        them can disappear midway through the pass.
        """
        pairs: List[Tuple[Any, H]] = []
        with self._lock:
            had_entries = bool(self._entries)
            alive: List[_Entry[H]] = []
            for entry in self._entries:
                observer = entry.ref()
                if observer is None:
                    logging.debug(f"Pruning collected observer from {self!r}")
                    continue
                alive.append(entry)
                pairs.extend((observer, handler) for handler in entry.handlers)
            self._entries = alive
            became_empty = had_entries and not alive

        if became_empty:
            self._presence_changed(False)
        return pairs

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return self._find(observer) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        with self._lock:
            return f"ObserverRegistry(entries={len(self._entries)})"

    def _find(self, observer: object) -> Optional[_Entry[H]]:
        for entry in self._entries:
            if entry.matches(observer):
                return entry
        return None

    def _presence_changed(self, has_observers: bool) -> None:
        logging.debug(f"{self!r} has_observers -> {has_observers}")
        if self._on_has_observers_changed is not None:
            self._on_has_observers_changed(has_observers)
