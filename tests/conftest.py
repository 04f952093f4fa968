"""
Shared pytest fixtures for heap tests.
"""

import random

import pytest

from heapkit.models.binary_heap import BinaryHeap


def _assert_heap_property(heap: BinaryHeap) -> None:
    """Check every parent compares <= each of its children."""
    elements = heap._elements
    size = heap.size()
    for i in range(size):
        for child in (2 * i + 1, 2 * i + 2):
            if child < size:
                assert heap.compare(elements[i], elements[child]) <= 0, (
                    f"heap property violated at parent {i}, child {child}"
                )


@pytest.fixture
def assert_heap_property():
    """Provide a checker for the heap property over the live elements."""
    return _assert_heap_property


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible inputs."""
    return random.Random(1234)


@pytest.fixture
def random_values(rng):
    """Provide a list of random integers with duplicates."""
    return [rng.randint(-50, 50) for _ in range(200)]


@pytest.fixture
def sample_heap():
    """Provide a min-heap loaded one insert at a time."""
    heap = BinaryHeap()
    for value in [5, 3, 8, 1, 9, 2]:
        heap.insert(value)
    return heap
