"""
Orderly Handler Bundles - Per-Subscription Callback Records
===========================================================

A HandlerBundle groups the optional callbacks one subscription registers on
an ObservableArray. The set of events is closed, so a bundle is a plain
record of optional callables rather than an interface to subclass.

Callback signatures:
- on_insert(element, index)
- on_update(element, index)
- on_remove(element, index)
- on_remove_all(old_values)
- on_move(element, from_index, to_index)
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

InsertHandler = Callable[[Any, int], None]
UpdateHandler = Callable[[Any, int], None]
RemoveHandler = Callable[[Any, int], None]
RemoveAllHandler = Callable[[List[Any]], None]
MoveHandler = Callable[[Any, int, int], None]


@dataclass(frozen=True)
class HandlerBundle:
    """Optional callbacks for one subscription."""

    on_insert: Optional[InsertHandler] = None
    on_update: Optional[UpdateHandler] = None
    on_remove: Optional[RemoveHandler] = None
    on_remove_all: Optional[RemoveAllHandler] = None
    on_move: Optional[MoveHandler] = None

    @property
    def is_structural(self) -> bool:
        """
        True when the bundle observes at least one structural change.

        An update handler alone does not count: a subscriber that only hears
        about updates cannot keep a view of the collection in step.
        """
        return (
            self.on_insert is not None
            or self.on_remove is not None
            or self.on_move is not None
            or self.on_remove_all is not None
        )

    def insert(self, element: Any, index: int) -> None:
        if self.on_insert is not None:
            self.on_insert(element, index)

    def update(self, element: Any, index: int) -> None:
        if self.on_update is not None:
            self.on_update(element, index)

    def remove(self, element: Any, index: int) -> None:
        if self.on_remove is not None:
            self.on_remove(element, index)

    def remove_all(self, old_values: List[Any]) -> None:
        if self.on_remove_all is not None:
            self.on_remove_all(old_values)

    def move(self, element: Any, from_index: int, to_index: int) -> None:
        if self.on_move is not None:
            self.on_move(element, from_index, to_index)
