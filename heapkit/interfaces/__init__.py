"""
Abstract base classes for the data structures.
"""

from heapkit.interfaces.sorted_tree import SortedTree, Traversal

__all__ = ["SortedTree", "Traversal"]
