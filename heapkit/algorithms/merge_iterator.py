"""
K-Way Merge Iterator for merging individually sorted sources.
"""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from heapkit.models.binary_heap import BinaryHeap
from heapkit.models.comparators import Comparator, natural_order

T = TypeVar("T")


class KWayMergeIterator(Generic[T]):
    """
    Lazily merges K sorted iterables using a BinaryHeap.

    Time Complexity: O(M log K) where M = total items, K = number of sources
    Space Complexity: O(K) for the heap

    Equal items are emitted in source order, so the merge is stable.
    With skip_duplicates, only the first of a run of equal items is kept,
    which means earlier sources take precedence.
    """

    def __init__(
        self,
        sources: Iterable[Iterable[T]],
        comparator: Comparator | None = None,
        skip_duplicates: bool = False,
    ) -> None:
        """
        Initialize k-way merge iterator.

        Args:
            sources: Iterables each sorted under comparator, ordered by priority.
            comparator: Ordering shared by every source. Defaults to natural ordering.
            skip_duplicates: If True, drop items equal to the last emitted one.
        """
        self._comparator = comparator or natural_order
        self._skip_duplicates = skip_duplicates
        self._source_iters: list[Iterator[T] | None] = [iter(s) for s in sources]
        # Entries are (item, source_idx); source_idx breaks ties
        self._heap: BinaryHeap[tuple[T, int]] = BinaryHeap(
            capacity=max(len(self._source_iters), 1),
            comparator=self._compare_entries,
        )

        for i in range(len(self._source_iters)):
            self._advance_source(i)

    def _compare_entries(self, a: tuple[T, int], b: tuple[T, int]) -> int:
        result = self._comparator(a[0], b[0])
        if result != 0:
            return result
        return a[1] - b[1]

    def _advance_source(self, source_idx: int) -> None:
        """
        Advance a source iterator and add its next element to the heap.

        Args:
            source_idx: Index of the source to advance.
        """
        source_iter = self._source_iters[source_idx]
        if source_iter is None:
            return

        try:
            item = next(source_iter)
        except StopIteration:
            self._source_iters[source_idx] = None
            return
        self._heap.insert((item, source_idx))

    def __iter__(self) -> "KWayMergeIterator[T]":
        return self

    def __next__(self) -> T:
        """
        Get next item in merged order.

        Raises:
            StopIteration: When all sources are exhausted.
        """
        if self._heap.is_empty():
            raise StopIteration

        current, source_idx = self._heap.extract_root()
        self._advance_source(source_idx)

        if self._skip_duplicates:
            while not self._heap.is_empty():
                item, dup_source_idx = self._heap.peek()
                if self._comparator(item, current) != 0:
                    break
                self._heap.extract_root()
                self._advance_source(dup_source_idx)

        return current


def merge_sorted(
    sources: Iterable[Iterable[T]],
    comparator: Comparator | None = None,
    skip_duplicates: bool = False,
) -> list[T]:
    """
    Merge multiple sorted sources and return the result list.

    Args:
        sources: Iterables each sorted under comparator, ordered by priority.
        comparator: Ordering shared by every source.
        skip_duplicates: If True, keep only the first of each run of equal items.

    Returns:
        All items in comparator order.
    """
    return list(KWayMergeIterator(sources, comparator, skip_duplicates))
