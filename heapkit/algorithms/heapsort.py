"""
Heap sort built on BinaryHeap.
"""

from collections.abc import Iterable
from typing import TypeVar

from heapkit.models.binary_heap import BinaryHeap
from heapkit.models.comparators import Comparator

T = TypeVar("T")


def heapsort(items: Iterable[T], comparator: Comparator | None = None) -> list[T]:
    """
    Return the elements of items sorted non-decreasingly.

    Args:
        items: Elements to sort. Not modified.
        comparator: Ordering function. Defaults to natural ordering.

    Returns:
        A new list in comparator order. Not stable.

    Time complexity: O(N log N)
    """
    heap: BinaryHeap[T] = BinaryHeap.from_sequence(items, comparator=comparator)
    result = []
    while not heap.is_empty():
        result.append(heap.extract_root())
    return result
