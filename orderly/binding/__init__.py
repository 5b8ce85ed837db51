"""
Orderly Binding Module
======================

Adapters that replay ObservableArray notifications onto list and grid views.
"""

from orderly.binding.adapters import (
    bind_grid_view,
    bind_list_view,
    grid_view_handlers,
    list_view_handlers,
)
from orderly.binding.protocol import GridView, IndexPath, ListView

__all__ = [
    "IndexPath",
    "ListView",
    "GridView",
    "bind_list_view",
    "bind_grid_view",
    "list_view_handlers",
    "grid_view_handlers",
]
