"""
Orderly Value Module
====================

Single observable values with weakly held observers.
"""

from orderly.value.observable_value import (
    InitialValue,
    ObservableValue,
    ObservationOptions,
    UpdateValue,
)

__all__ = [
    "ObservableValue",
    "ObservationOptions",
    "InitialValue",
    "UpdateValue",
]
