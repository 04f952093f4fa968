"""
Tests for the SortedTree abstract base class.
"""

import bisect

import pytest

from heapkit.interfaces.sorted_tree import SortedTree, Traversal


class ListTree(SortedTree):
    """Minimal SortedTree backed by a sorted list, for exercising the contract."""

    def __init__(self):
        self._values = []

    def insert(self, value):
        bisect.insort(self._values, value)

    def delete(self, value):
        index = bisect.bisect_left(self._values, value)
        if index < len(self._values) and self._values[index] == value:
            del self._values[index]

    def search(self, value):
        index = bisect.bisect_left(self._values, value)
        if index < len(self._values) and self._values[index] == value:
            return self._values[index]
        return None

    def traverse(self, order):
        return list(self._values)

    def root(self):
        return self._values[len(self._values) // 2] if self._values else None

    def height(self):
        return len(self._values).bit_length()

    def size(self):
        return len(self._values)


class TestSortedTree:
    """Tests for the SortedTree contract."""

    def test_cannot_instantiate_abstract(self):
        """Test the ABC refuses direct instantiation."""
        with pytest.raises(TypeError):
            SortedTree()

    def test_partial_implementation_rejected(self):
        """Test a subclass missing abstract methods cannot be created."""

        class Incomplete(SortedTree):
            def insert(self, value):
                pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_is_empty_follows_size(self):
        """Test the default is_empty uses size."""
        tree = ListTree()
        assert tree.is_empty()
        tree.insert(1)
        assert not tree.is_empty()

    def test_iteration_is_in_order(self):
        """Test the default __iter__ yields the in-order traversal."""
        tree = ListTree()
        for value in [5, 2, 8, 1]:
            tree.insert(value)
        assert list(tree) == [1, 2, 5, 8]

    def test_search_and_delete(self):
        """Test the concrete helper honours search and delete."""
        tree = ListTree()
        tree.insert(3)
        assert tree.search(3) == 3
        tree.delete(3)
        assert tree.search(3) is None

    def test_traversal_members(self):
        """Test the three traversal orders exist."""
        assert {t.name for t in Traversal} == {"PREORDER", "INORDER", "POSTORDER"}
