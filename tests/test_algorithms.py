"""
Tests for algorithms built on the heap: heapsort and k-way merge.
"""

import pytest

from heapkit.algorithms.heapsort import heapsort
from heapkit.algorithms.merge_iterator import KWayMergeIterator, merge_sorted
from heapkit.models.comparators import by_key, reverse_order


class TestHeapsort:
    """Tests for heapsort."""

    def test_sorts_random_values(self, random_values):
        """Test the output matches sorted()."""
        assert heapsort(random_values) == sorted(random_values)

    def test_does_not_modify_input(self):
        """Test the caller's list is left alone."""
        values = [3, 1, 2]
        assert heapsort(values) == [1, 2, 3]
        assert values == [3, 1, 2]

    def test_empty_input(self):
        """Test sorting nothing."""
        assert heapsort([]) == []

    def test_with_comparator(self):
        """Test a reversed comparator sorts descending."""
        assert heapsort([5, 3, 8, 1], comparator=reverse_order()) == [8, 5, 3, 1]


class TestKWayMergeIterator:
    """Tests for KWayMergeIterator and merge_sorted."""

    def test_merges_sorted_sources(self):
        """Test interleaved sources come out fully sorted."""
        sources = [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
        assert merge_sorted(sources) == list(range(1, 10))

    def test_uneven_and_empty_sources(self):
        """Test sources of different lengths, including empty ones."""
        sources = [[], [1, 2, 3, 4], [], [0], [2]]
        assert merge_sorted(sources) == [0, 1, 2, 2, 3, 4]

    def test_no_sources(self):
        """Test merging zero sources."""
        assert merge_sorted([]) == []

    def test_accepts_iterators(self):
        """Test sources may be one-shot iterators."""
        sources = [iter([1, 3]), (x for x in [2, 4])]
        assert merge_sorted(sources) == [1, 2, 3, 4]

    def test_is_lazy(self):
        """Test items are produced one at a time."""
        merge = KWayMergeIterator([[1, 3], [2]])
        assert next(merge) == 1
        assert next(merge) == 2
        assert next(merge) == 3
        with pytest.raises(StopIteration):
            next(merge)

    def test_equal_items_in_source_order(self):
        """Test ties are broken by source index."""
        sources = [
            [("a", 1), ("c", 1)],
            [("b", 1), ("d", 2)],
        ]
        merged = merge_sorted(sources, comparator=by_key(lambda item: item[1]))
        assert merged == [("a", 1), ("c", 1), ("b", 1), ("d", 2)]

    def test_skip_duplicates_keeps_earliest_source(self):
        """Test only the first of a run of equal items survives."""
        sources = [
            [("k1", "new"), ("k3", "new")],
            [("k1", "old"), ("k2", "old"), ("k3", "old")],
        ]
        merged = merge_sorted(
            sources, comparator=by_key(lambda item: item[0]), skip_duplicates=True
        )
        assert merged == [("k1", "new"), ("k2", "old"), ("k3", "new")]

    def test_skip_duplicates_within_one_source(self):
        """Test repeated values inside a single source collapse too."""
        assert merge_sorted([[1, 1, 2], [2, 3]], skip_duplicates=True) == [1, 2, 3]

    def test_descending_sources(self):
        """Test merging sources sorted under a reversed comparator."""
        sources = [[9, 5, 1], [8, 2]]
        assert merge_sorted(sources, comparator=reverse_order()) == [9, 8, 5, 2, 1]
