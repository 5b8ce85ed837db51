"""
Orderly Errors - Exception Types
================================

Exceptions raised by Orderly collections when a caller breaks the usage
contract. No-match results from the ``*_where`` family are not errors; they
come back as ``None``.
"""


class CollectionIndexError(IndexError):
    """Raised when an index falls outside the range an operation accepts."""

    def __init__(self, index: int, length: int, operation: str) -> None:
        self.index = index
        self.length = length
        self.operation = operation
        super().__init__(
            f"{operation}: index {index} out of range for collection of length {length}"
        )


class ReentrantMutationError(RuntimeError):
    """Raised when a collection is mutated from inside one of its own notifications."""

    pass
