"""
Data structures and their supporting types.
"""

from heapkit.models.binary_heap import BinaryHeap, MaxHeap, MinHeap
from heapkit.models.comparators import Comparator, by_key, natural_order, reverse_order
from heapkit.models.exceptions import EmptyHeapError, HeapError, InvalidArgumentError

__all__ = [
    "BinaryHeap",
    "MinHeap",
    "MaxHeap",
    "Comparator",
    "natural_order",
    "reverse_order",
    "by_key",
    "HeapError",
    "EmptyHeapError",
    "InvalidArgumentError",
]
