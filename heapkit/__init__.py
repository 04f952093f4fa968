"""
Generic heap and sorted-tree data structures.

This package provides:
- BinaryHeap(capacity, comparator) - array-backed heap, O(log N) insert/extract
- BinaryHeap.from_sequence(items) - O(N) bulk construction
- MinHeap / MaxHeap - natural and reversed ordering
- SortedTree - abstract contract for sorted tree containers
- heapsort / merge_sorted - algorithms built on the heap
"""

from heapkit.algorithms import KWayMergeIterator, heapsort, merge_sorted
from heapkit.interfaces import SortedTree, Traversal
from heapkit.models import (
    BinaryHeap,
    EmptyHeapError,
    HeapError,
    InvalidArgumentError,
    MaxHeap,
    MinHeap,
    by_key,
    natural_order,
    reverse_order,
)

__all__ = [
    "BinaryHeap",
    "MinHeap",
    "MaxHeap",
    "HeapError",
    "EmptyHeapError",
    "InvalidArgumentError",
    "natural_order",
    "reverse_order",
    "by_key",
    "SortedTree",
    "Traversal",
    "heapsort",
    "KWayMergeIterator",
    "merge_sorted",
]
