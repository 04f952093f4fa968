"""
Comparator helpers for ordering heap elements.

A comparator takes two elements and returns a negative integer, zero, or a
positive integer as the first is less than, equal to, or greater than the
second (the same convention as functools.cmp_to_key).
"""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two elements using their own < operator."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(comparator: Comparator = natural_order) -> Comparator:
    """
    Return a comparator that inverts the given one.

    Args:
        comparator: The ordering to invert. Defaults to natural ordering.

    Returns:
        A comparator ranking elements in the opposite order.
    """

    def compare(a: Any, b: Any) -> int:
        return comparator(b, a)

    return compare


def by_key(
    key: Callable[[T], K], comparator: Comparator = natural_order
) -> Callable[[T, T], int]:
    """
    Return a comparator that orders elements by a derived key.

    Args:
        key: Function extracting the sort key from an element.
        comparator: Ordering applied to the extracted keys.

    Returns:
        A comparator over the original elements.
    """

    def compare(a: T, b: T) -> int:
        return comparator(key(a), key(b))

    return compare
