"""
Orderly Binding Adapters - Replay Collection Changes onto Views
===============================================================

Adapters subscribe a view to an ObservableArray and translate each structural
notification into the matching view call, synchronously and in order.

- insert -> insert rows/items at ``index + index_offset``
- remove -> delete rows/items at ``index + index_offset``
- move -> move a row/item between the offset positions
- remove_all -> reload the section (list) or the whole grid

In-place updates are not forwarded; views refresh their cells on their own.
"""

from typing import Any, List

from ..collection.handlers import HandlerBundle
from ..collection.observable_array import ObservableArray
from .protocol import GridView, IndexPath, ListView


def list_view_handlers(
    view: ListView, section: int, index_offset: int = 0
) -> HandlerBundle:
    """Build the HandlerBundle that drives ``view`` for one section."""

    def on_insert(_element: Any, index: int) -> None:
        view.insert_rows([IndexPath(section, index + index_offset)])

    def on_remove(_element: Any, index: int) -> None:
        view.delete_rows([IndexPath(section, index + index_offset)])

    def on_remove_all(_old_values: List[Any]) -> None:
        view.reload_sections([section])

    def on_move(_element: Any, from_index: int, to_index: int) -> None:
        view.move_row(
            IndexPath(section, from_index + index_offset),
            IndexPath(section, to_index + index_offset),
        )

    return HandlerBundle(
        on_insert=on_insert,
        on_remove=on_remove,
        on_remove_all=on_remove_all,
        on_move=on_move,
    )


def grid_view_handlers(
    view: GridView, section: int, index_offset: int = 0
) -> HandlerBundle:
    """Build the HandlerBundle that drives ``view`` for one section."""

    def on_insert(_element: Any, index: int) -> None:
        view.insert_items([IndexPath(section, index + index_offset)])

    def on_remove(_element: Any, index: int) -> None:
        view.delete_items([IndexPath(section, index + index_offset)])

    def on_remove_all(_old_values: List[Any]) -> None:
        view.reload_data()

    def on_move(_element: Any, from_index: int, to_index: int) -> None:
        view.move_item(
            IndexPath(section, from_index + index_offset),
            IndexPath(section, to_index + index_offset),
        )

    return HandlerBundle(
        on_insert=on_insert,
        on_remove=on_remove,
        on_remove_all=on_remove_all,
        on_move=on_move,
    )


def bind_list_view(
    array: ObservableArray,
    observer: object,
    view: ListView,
    section: int,
    index_offset: int = 0,
) -> HandlerBundle:
    """
    Keep ``view`` in step with ``array`` for as long as ``observer`` lives.

    Args:
        array: The collection to follow.
        observer: Identity that owns the subscription; held weakly.
        view: Surface receiving row calls.
        section: Section the collection is rendered into.
        index_offset: Rows in the section that precede the collection.

    Returns:
        The HandlerBundle that was registered.
    """
    handlers = list_view_handlers(view, section, index_offset)
    array.add_observer_bundle(observer, handlers)
    return handlers


def bind_grid_view(
    array: ObservableArray,
    observer: object,
    view: GridView,
    section: int,
    index_offset: int = 0,
) -> HandlerBundle:
    """Grid counterpart of ``bind_list_view``; remove_all reloads the whole grid."""
    handlers = grid_view_handlers(view, section, index_offset)
    array.add_observer_bundle(observer, handlers)
    return handlers
