"""
Orderly Collection Module
=========================

The observable, order-synchronizing collection and the pieces it is built from.
"""

from orderly.collection.handlers import HandlerBundle
from orderly.collection.observable_array import ObservableArray
from orderly.collection.ordering import (
    insertion_index,
    sort_key,
    sorted_values,
    values_equal,
)
from orderly.collection.registry import ObserverRegistry

__all__ = [
    "ObservableArray",
    "HandlerBundle",
    "ObserverRegistry",
    "insertion_index",
    "sort_key",
    "sorted_values",
    "values_equal",
]
