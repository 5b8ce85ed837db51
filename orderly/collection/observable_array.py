"""
Orderly ObservableArray - Ordered Collection with Structural Notifications
==========================================================================

This module provides ObservableArray, an ordered, mutable collection that tells
its observers about every structural change made through its API.

Notifications:
- insert(element, index): an element now occupies ``index``
- update(element, index): the slot at ``index`` was overwritten in place
- remove(element, index): the element that was at ``index`` is gone
- remove_all(old_values): the collection was cleared in one step
- move(element, from_index, to_index): an element was relocated

Ordering modes:
- Free-form (no comparator): elements stay where callers put them.
- Enforced (comparator set): ``append`` and ``insert`` place new elements in
  sorted position, and ``resort``/``start_sorting`` reorder existing ones with
  a deterministic sequence of moves. Values passed to the constructor are kept
  as given.

Every mutation runs to completion synchronously, firing its notifications
inline and in order, so list and grid adapters can replay them verbatim.

Example:
    ```python
    from orderly import ObservableArray

    class Table:
        pass

    table = Table()
    names = ObservableArray(["A", "B"], enforce_order=lambda a, b: a < b)
    names.add_observer(table, on_insert=lambda name, index: print(name, index))

    names.append("AA")  # prints: AA 1
    ```
"""

import logging
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from ..errors import CollectionIndexError, ReentrantMutationError
from .handlers import (
    HandlerBundle,
    InsertHandler,
    MoveHandler,
    RemoveAllHandler,
    RemoveHandler,
    UpdateHandler,
)
from .ordering import (
    Comparator,
    Equality,
    insertion_index,
    sorted_template,
    sorted_values,
    values_equal,
)
from .registry import ObserverRegistry

T = TypeVar("T")

Predicate = Callable[[Any], bool]


class ObservableArray(Generic[T]):
    """
    An ordered collection that notifies weakly held observers of structural changes.

    Args:
        values: Initial elements, kept in the order given.
        enforce_order: Optional "is ordered before" predicate. When set, new
            elements are inserted in sorted position.
        on_has_observers_changed: Called with True when the first observer is
            registered and with False when the last one goes away.
    """

    def __init__(
        self,
        values: Optional[Iterable[T]] = None,
        enforce_order: Optional[Comparator] = None,
        on_has_observers_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._values: List[T] = list(values) if values is not None else []
        self._is_ordered_before = enforce_order
        self._observers: ObserverRegistry[HandlerBundle] = ObserverRegistry(
            on_has_observers_changed
        )
        self._is_notifying = False

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def values(self) -> List[T]:
        """A copy of the current elements in presentation order."""
        return list(self._values)

    @property
    def comparator(self) -> Optional[Comparator]:
        return self._is_ordered_before

    @property
    def is_sorting(self) -> bool:
        return self._is_ordered_before is not None

    @property
    def has_observers(self) -> bool:
        return len(self._observers) > 0

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __getitem__(self, index: Any) -> Any:
        return self._values[index]

    def __contains__(self, item: Any) -> bool:
        return item in self._values

    def __repr__(self) -> str:
        return f"ObservableArray({self._values!r})"

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def add_observer(
        self,
        observer: object,
        on_insert: Optional[InsertHandler] = None,
        on_update: Optional[UpdateHandler] = None,
        on_remove: Optional[RemoveHandler] = None,
        on_remove_all: Optional[RemoveAllHandler] = None,
        on_move: Optional[MoveHandler] = None,
    ) -> None:
        """
        Register callbacks for ``observer``.

        The observer is held weakly and only identifies the subscription; it
        is dropped the first time a notification finds it collected. Calling
        this again for the same observer adds another, independent set of
        callbacks. A subscription without any of insert, remove, remove_all or
        move is ignored.

        Raises:
            TypeError: If ``observer`` cannot be weakly referenced.
        """
        self.add_observer_bundle(
            observer,
            HandlerBundle(
                on_insert=on_insert,
                on_update=on_update,
                on_remove=on_remove,
                on_remove_all=on_remove_all,
                on_move=on_move,
            ),
        )

    def add_observer_bundle(self, observer: object, handlers: HandlerBundle) -> None:
        """Register a prepared HandlerBundle for ``observer``."""
        if not handlers.is_structural:
            logging.debug(
                f"Ignoring subscription without structural handlers on {self!r}"
            )
            return
        self._observers.add(observer, handlers)

    def remove_observer(self, observer: object) -> None:
        """Drop every callback registered for ``observer``. Unknown observers are ignored."""
        self._observers.remove(observer)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, element: T) -> int:
        """
        Add ``element`` and return the index it landed at.

        Without a comparator the element goes at the end. With one, it goes
        in front of the first element it is ordered before.
        """
        self._ensure_not_notifying("append")
        return self._append(element)

    def insert(self, element: T, index: int) -> int:
        """
        Insert ``element`` at ``index`` and return where it landed.

        While a comparator is active the index is ignored and the element is
        placed as ``append`` would place it.

        Raises:
            CollectionIndexError: If ``index`` is outside ``[0, len]``.
        """
        self._ensure_not_notifying("insert")
        if self._is_ordered_before is not None:
            return self._append(element)
        self._check_index(index, len(self._values), "insert")
        return self._insert_at(element, index)

    def replace(self, index: int, element: T) -> None:
        """
        Overwrite the element at ``index`` in place and notify ``update``.

        The element keeps its position even under a comparator; call
        ``resort`` to reorder.

        Raises:
            CollectionIndexError: If ``index`` is outside ``[0, len)``.
        """
        self._ensure_not_notifying("replace")
        self._check_index(index, len(self._values) - 1, "replace")
        self._replace_at(index, element)

    def remove_at(self, index: int) -> T:
        """
        Remove and return the element at ``index``.

        Raises:
            CollectionIndexError: If ``index`` is outside ``[0, len)``.
        """
        self._ensure_not_notifying("remove_at")
        self._check_index(index, len(self._values) - 1, "remove_at")
        return self._remove_at(index)

    def remove_all(self) -> None:
        """Clear the collection with a single ``remove_all`` notification."""
        self._ensure_not_notifying("remove_all")
        old_values = self._values
        self._values = []
        self._notify("remove_all", list(old_values))

    def start_sorting(self, comparator: Optional[Comparator]) -> None:
        """Replace the active comparator (None turns sorting off) and resort."""
        self._ensure_not_notifying("start_sorting")
        self._is_ordered_before = comparator
        self._resort()

    def resort(self) -> None:
        """
        Reorder the elements to satisfy the active comparator.

        Target slots are filled from the last to the first. For each slot the
        element that belongs there is moved in from wherever it currently
        sits, producing one ``move`` notification. Slots already holding the
        right element are left alone. Does nothing without a comparator.
        """
        self._ensure_not_notifying("resort")
        self._resort()

    def sync(
        self, new_values: Iterable[T], is_equal: Optional[Equality] = None
    ) -> None:
        """
        Transform the collection into ``new_values``.

        Both sequences are walked from the tail toward the head. Matching
        elements are replaced in place silently, elements found further
        toward the head are moved, and missing ones are inserted. Leftover
        current elements are removed afterwards, and leftover targets are
        inserted at the front. With a comparator active, ``new_values`` is
        sorted by it first.

        Syncing to the contents the collection already holds fires nothing.

        Args:
            new_values: The desired contents.
            is_equal: Element identity test. Defaults to ``values_equal``.
        """
        self._ensure_not_notifying("sync")
        is_equal = is_equal or values_equal

        before = self._is_ordered_before
        if before is not None:
            target = sorted_values(list(new_values), before)
        else:
            target = list(new_values)

        new_index = len(target) - 1
        existing_index = len(self._values) - 1

        while new_index >= 0 and existing_index >= 0:
            new = target[new_index]

            if is_equal(new, self._values[existing_index]):
                self._values[existing_index] = new
                new_index -= 1
                existing_index -= 1
                continue

            match = next(
                (i for i in range(existing_index) if is_equal(self._values[i], new)),
                None,
            )
            if match is not None:
                del self._values[match]
                self._values.insert(existing_index, new)
                self._notify("move", new, match, existing_index)
                existing_index -= 1
                new_index -= 1
            else:
                self._insert_at(new, existing_index + 1)
                new_index -= 1

        while existing_index >= 0:
            self._remove_at(existing_index)
            existing_index -= 1

        while new_index >= 0:
            self._insert_at(target[new_index], 0)
            new_index -= 1

    def remove_where(self, predicate: Predicate) -> Optional[int]:
        """Remove the first element matching ``predicate``; return its index or None."""
        self._ensure_not_notifying("remove_where")
        index = self._first_index(predicate)
        if index is None:
            return None
        self._remove_at(index)
        return index

    def remove_all_where(self, predicate: Predicate) -> int:
        """
        Remove every element matching ``predicate``, highest index first.

        Each removal is its own ``remove`` notification. Returns the number
        of elements removed.
        """
        self._ensure_not_notifying("remove_all_where")
        removed = 0
        for index in range(len(self._values) - 1, -1, -1):
            if predicate(self._values[index]):
                self._remove_at(index)
                removed += 1
        return removed

    def replace_where(self, predicate: Predicate, element: T) -> Optional[int]:
        """Replace the first element matching ``predicate``; return its index or None."""
        self._ensure_not_notifying("replace_where")
        index = self._first_index(predicate)
        if index is None:
            return None
        self._replace_at(index, element)
        return index

    def insert_after(self, element: T, predicate: Predicate) -> int:
        """
        Insert ``element`` right after the first element matching ``predicate``.

        Falls back to the end when nothing matches. A comparator, when active,
        still decides the final position. Returns the index it landed at.
        """
        self._ensure_not_notifying("insert_after")
        if self._is_ordered_before is not None:
            return self._append(element)
        index = self._first_index(predicate)
        position = index + 1 if index is not None else len(self._values)
        return self._insert_at(element, position)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _append(self, element: T) -> int:
        if self._is_ordered_before is not None:
            index = insertion_index(self._values, element, self._is_ordered_before)
        else:
            index = len(self._values)
        return self._insert_at(element, index)

    def _insert_at(self, element: T, index: int) -> int:
        self._values.insert(index, element)
        self._notify("insert", element, index)
        return index

    def _replace_at(self, index: int, element: T) -> None:
        self._values[index] = element
        self._notify("update", element, index)

    def _remove_at(self, index: int) -> T:
        element = self._values.pop(index)
        self._notify("remove", element, index)
        return element

    def _resort(self) -> None:
        before = self._is_ordered_before
        if before is None:
            return

        # Original positions serve as identities while elements shuffle.
        unsorted_ids = list(range(len(self._values)))
        ordered = sorted_template(self._values, before)

        to_index = len(self._values) - 1
        for sorted_id, _ in reversed(ordered):
            from_index = unsorted_ids.index(sorted_id)
            if from_index != to_index:
                element = self._values.pop(from_index)
                self._values.insert(to_index, element)
                unsorted_ids.insert(to_index, unsorted_ids.pop(from_index))
                self._notify("move", element, from_index, to_index)
            to_index -= 1

    def _first_index(self, predicate: Predicate) -> Optional[int]:
        for index, value in enumerate(self._values):
            if predicate(value):
                return index
        return None

    def _check_index(self, index: int, upper: int, operation: str) -> None:
        if index < 0 or index > upper:
            raise CollectionIndexError(index, len(self._values), operation)

    def _ensure_not_notifying(self, operation: str) -> None:
        if self._is_notifying:
            raise ReentrantMutationError(
                f"Cannot {operation} on {self!r} while it is notifying observers"
            )

    def _notify(self, event: str, *args: Any) -> None:
        # Gathering handlers may prune the last observer and fire the presence
        # callback, so the guard is raised first.
        self._is_notifying = True
        try:
            for _, bundle in self._observers.live_handlers():
                getattr(bundle, event)(*args)
        finally:
            self._is_notifying = False
