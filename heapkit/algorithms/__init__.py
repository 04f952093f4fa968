"""
Algorithms built on the heap.
"""

from heapkit.algorithms.heapsort import heapsort
from heapkit.algorithms.merge_iterator import KWayMergeIterator, merge_sorted

__all__ = ["heapsort", "KWayMergeIterator", "merge_sorted"]
