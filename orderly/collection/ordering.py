"""
Orderly Ordering Helpers - Comparator and Equality Utilities
============================================================

Comparators in Orderly are "is ordered before" predicates: ``before(lhs, rhs)``
returns True when ``lhs`` belongs in front of ``rhs``. These helpers turn such
a predicate into the positions and permutations ObservableArray needs.
"""

from functools import cmp_to_key
from typing import Any, Callable, List, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]
Equality = Callable[[Any, Any], bool]


def insertion_index(values: Sequence[T], element: T, before: Comparator) -> int:
    """
    Index at which ``element`` is inserted to respect ``before``.

    The element goes in front of the first existing value it is ordered
    before; if there is none it goes at the end. Equal elements therefore
    land after the ones already present.

    Example:
        ```python
        insertion_index(["A", "B"], "AA", lambda a, b: a < b)  # 1
        ```
    """
    for index, other in enumerate(values):
        if before(element, other):
            return index
    return len(values)


def sort_key(before: Comparator) -> Callable[[Any], Any]:
    """Adapt an "is ordered before" predicate into a ``sorted`` key."""

    def compare(lhs: Any, rhs: Any) -> int:
        if before(lhs, rhs):
            return -1
        if before(rhs, lhs):
            return 1
        return 0

    return cmp_to_key(compare)


def sorted_values(values: Sequence[T], before: Comparator) -> List[T]:
    """Stable sort of ``values`` under ``before``."""
    return sorted(values, key=sort_key(before))


def sorted_template(values: Sequence[T], before: Comparator) -> List[Tuple[int, T]]:
    """
    Pair each value with its original position and sort the pairs by value.

    The positions act as identities while a permutation is applied, so equal
    values are never confused with each other.
    """
    key = sort_key(before)
    return sorted(enumerate(values), key=lambda pair: key(pair[1]))


def values_equal(a: Any, b: Any) -> bool:
    """Default element equality; numpy arrays compare by content."""
    try:
        if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
            if type(a) != type(b):
                return False
            return bool(np.array_equal(a, b))
        return bool(a == b)
    except (ValueError, TypeError):
        return False
