"""
Custom exceptions for heap operations.
"""


class HeapError(Exception):
    """Base class for all heapkit errors."""


class InvalidArgumentError(HeapError, ValueError):
    """
    Raised when a heap is constructed with invalid arguments.

    No heap state is created when this is raised.
    """


class EmptyHeapError(HeapError, IndexError):
    """
    Raised when the root of an empty heap is requested.

    The heap is left unchanged.
    """

    def __init__(self, operation: str):
        """
        Initialize empty heap error.

        Args:
            operation: Name of the operation that needed a root element.
        """
        self.operation = operation
        super().__init__(f"{operation} from empty heap")
