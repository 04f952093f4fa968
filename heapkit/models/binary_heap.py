"""
Array-backed binary heap ordered by a pluggable comparator.
"""

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from heapkit.models.comparators import Comparator, natural_order, reverse_order
from heapkit.models.exceptions import EmptyHeapError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BinaryHeap(Generic[T]):
    """
    Binary min-heap stored in a flat list of slots.

    The element at index i has children at 2i + 1 and 2i + 2. Every parent
    compares less than or equal to its children under `compare`, so the root
    is always the smallest element. A max-heap is the same structure with an
    inverted comparator.

    Operations:
    - insert(item): O(log N), O(1) amortized growth
    - extract_root(): O(log N)
    - peek(), size(), is_empty(): O(1)
    - from_sequence(items): O(N) bottom-up heapify

    The comparator must be a consistent total preorder for the lifetime of
    the heap. This is not checked; an inconsistent comparator leaves the
    ordering undefined.

    Not safe for concurrent use. Callers sharing a heap across threads must
    serialize access themselves.
    """

    # Slots allocated when no capacity is given
    DEFAULT_CAPACITY = 10

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        comparator: Comparator | None = None,
    ) -> None:
        """
        Initialize an empty heap.

        Args:
            capacity: Initial number of slots. Grows by doubling when full.
            comparator: Ordering function returning <0, 0 or >0. If None,
                        `compare` is used (natural ordering unless overridden).

        Raises:
            InvalidArgumentError: If capacity is not a positive integer.
        """
        if not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgumentError(
                f"Initial capacity must be at least 1, got {capacity!r}"
            )

        self._comparator = comparator
        self._elements: list[T | None] = [None] * capacity
        self._size = 0

    @classmethod
    def from_sequence(
        cls, items: Iterable[T], comparator: Comparator | None = None
    ) -> "BinaryHeap[T]":
        """
        Build a heap from existing elements.

        The input is copied; the caller's sequence is never modified or
        referenced afterwards.

        Args:
            items: Elements to load, in any order.
            comparator: Ordering function, as for the constructor.

        Returns:
            A heap holding every element of items.
        """
        elements: list[T | None] = list(items)
        heap = cls(capacity=len(elements) or cls.DEFAULT_CAPACITY, comparator=comparator)
        heap._elements[: len(elements)] = elements
        heap._size = len(elements)
        heap._heapify()
        return heap

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def compare(self, a: T, b: T) -> int:
        """
        Compare two elements.

        Subclasses may override this instead of passing a comparator.

        Returns:
            Negative if a ranks before b, zero if equal, positive otherwise.
        """
        if self._comparator is None:
            return natural_order(a, b)
        return self._comparator(a, b)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Remove all elements, keeping the allocated capacity."""
        for i in range(self._size):
            self._elements[i] = None
        self._size = 0

    def peek(self) -> T:
        """
        Return the root element without removing it.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        if self._size == 0:
            raise EmptyHeapError("peek")
        return self._elements[0]

    def insert(self, item: T) -> None:
        """Add an element, growing storage if every slot is in use."""
        if self._size == len(self._elements):
            self._grow()

        self._elements[self._size] = item
        self._size += 1
        self._sift_up(self._size - 1)

    def extract_root(self) -> T:
        """
        Remove and return the root element.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        if self._size == 0:
            raise EmptyHeapError("extract_root")

        root = self._elements[0]
        self._size -= 1
        self._elements[0] = self._elements[self._size]
        self._elements[self._size] = None
        self._sift_down(0)
        return root

    def _sift_up(self, index: int) -> None:
        """Move the element at index toward the root until its parent is not larger."""
        elements = self._elements
        while index > 0:
            parent = (index - 1) // 2
            if self.compare(elements[index], elements[parent]) >= 0:
                break
            elements[index], elements[parent] = elements[parent], elements[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        """Move the element at index toward the leaves until no child is smaller."""
        elements = self._elements
        while True:
            child = self._smaller_child(index)
            if child is None:
                break
            if self.compare(elements[index], elements[child]) <= 0:
                break
            elements[index], elements[child] = elements[child], elements[index]
            index = child

    def _smaller_child(self, index: int) -> int | None:
        """Index of the smaller child of index, or None for a leaf."""
        left = 2 * index + 1
        if left >= self._size:
            return None
        right = left + 1
        if right < self._size and self.compare(self._elements[right], self._elements[left]) < 0:
            return right
        return left

    def _heapify(self) -> None:
        """Restore the heap property over all elements, last parent first."""
        for index in range((self._size - 2) // 2, -1, -1):
            self._sift_down(index)
        logger.debug(f"Heapified {self._size} elements")

    def _grow(self) -> None:
        """Double the number of slots."""
        old_capacity = len(self._elements)
        self._elements.extend([None] * old_capacity)
        logger.debug(f"Heap capacity grown from {old_capacity} to {len(self._elements)}")

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, capacity={len(self._elements)})"


class MinHeap(BinaryHeap[T]):
    """Binary heap with the smallest element at the root."""


class MaxHeap(BinaryHeap[T]):
    """Binary heap with the largest element at the root."""

    def __init__(
        self,
        capacity: int = BinaryHeap.DEFAULT_CAPACITY,
        comparator: Comparator | None = None,
    ) -> None:
        """
        Initialize an empty max-heap.

        Args:
            capacity: Initial number of slots.
            comparator: Ordering to invert. Defaults to natural ordering.
        """
        super().__init__(capacity, reverse_order(comparator or natural_order))
