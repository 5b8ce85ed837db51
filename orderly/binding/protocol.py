"""
Orderly Binding Protocols - View Surfaces Driven by ObservableArray
===================================================================

Structural interfaces for the list and grid surfaces that binding adapters
drive. Any object with matching methods qualifies; no base class is needed.
"""

from typing import NamedTuple, Protocol, Sequence, runtime_checkable


class IndexPath(NamedTuple):
    """Location of a row or item within a sectioned view."""

    section: int
    item: int


@runtime_checkable
class ListView(Protocol):
    """A sectioned, row-based surface (table-like)."""

    def insert_rows(self, paths: Sequence[IndexPath]) -> None:
        ...

    def delete_rows(self, paths: Sequence[IndexPath]) -> None:
        ...

    def reload_sections(self, sections: Sequence[int]) -> None:
        ...

    def move_row(self, from_path: IndexPath, to_path: IndexPath) -> None:
        ...


@runtime_checkable
class GridView(Protocol):
    """A sectioned, item-based surface (grid-like)."""

    def insert_items(self, paths: Sequence[IndexPath]) -> None:
        ...

    def delete_items(self, paths: Sequence[IndexPath]) -> None:
        ...

    def reload_data(self) -> None:
        ...

    def move_item(self, from_path: IndexPath, to_path: IndexPath) -> None:
        ...
