"""
Orderly - Observable, Order-Synchronizing Collections

An ordered collection that notifies weakly held observers of every structural
change, keeps itself sorted under an optional comparator, and reconciles its
contents against new snapshots with a deterministic sequence of notifications.
"""

from .binding import (
    GridView,
    IndexPath,
    ListView,
    bind_grid_view,
    bind_list_view,
)
from .collection import (
    HandlerBundle,
    ObservableArray,
    ObserverRegistry,
    values_equal,
)
from .errors import CollectionIndexError, ReentrantMutationError
from .value import (
    InitialValue,
    ObservableValue,
    ObservationOptions,
    UpdateValue,
)

__all__ = [
    # Collection
    "ObservableArray",
    "HandlerBundle",
    "ObserverRegistry",
    "values_equal",
    # Single values
    "ObservableValue",
    "ObservationOptions",
    "InitialValue",
    "UpdateValue",
    # View bindings
    "IndexPath",
    "ListView",
    "GridView",
    "bind_list_view",
    "bind_grid_view",
    # Exceptions
    "CollectionIndexError",
    "ReentrantMutationError",
]
