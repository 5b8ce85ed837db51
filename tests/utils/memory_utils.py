"""
Memory testing utilities for weakly held observers.

These utilities help verify that registering an observer with an Orderly
collection never keeps that observer alive.

Examples:
    Drop an observer and confirm it was collected:

        >>> from tests.utils.memory_utils import drop_and_collect
        >>> holder = {"observer": Observer()}
        >>> ref = drop_and_collect(holder, "observer")
        >>> assert ref() is None
"""

import gc
import weakref
from typing import Any, Dict


def drop_and_collect(holder: Dict[str, Any], key: str) -> weakref.ref:
    """Remove ``holder[key]``, force a collection and return a weak reference to it.

    The object is passed through a dict so the caller's frame holds no other
    strong reference once it is dropped.

    Args:
        holder: Mapping that owns the only strong reference
        key: Key of the object to drop

    Returns:
        A weak reference that resolves to None if the object was collected
    """
    obj_ref = weakref.ref(holder[key])
    del holder[key]
    gc.collect()
    return obj_ref


def assert_collected(obj_ref: weakref.ref, description: str = "Object should be collected") -> None:
    """Assert that the referent of ``obj_ref`` has been garbage collected."""
    gc.collect()
    assert obj_ref() is None, f"{description}: object is still alive"
