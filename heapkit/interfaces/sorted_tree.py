"""
SortedTree abstract base class for comparison-ordered tree containers.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import Generic, TypeVar

V = TypeVar("V")


class Traversal(Enum):
    """Order in which tree nodes are visited."""

    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"


class SortedTree(ABC, Generic[V]):
    """
    Abstract base class for trees that keep their values in sorted order.

    Values are compared with their own ordering operators. No concrete
    implementation ships with this package.
    """

    @abstractmethod
    def insert(self, value: V) -> None:
        """
        Insert a value into the tree.

        Args:
            value: The value to insert.
        """
        pass

    @abstractmethod
    def delete(self, value: V) -> None:
        """
        Remove a value from the tree.

        Args:
            value: The value to remove.
        """
        pass

    @abstractmethod
    def search(self, value: V) -> V | None:
        """
        Find a value equal to the given one.

        Args:
            value: The value to look up.

        Returns:
            The stored value if found, None otherwise.
        """
        pass

    @abstractmethod
    def traverse(self, order: Traversal) -> list[V]:
        """
        Return every value in the given traversal order.

        Args:
            order: Which traversal to perform.

        Returns:
            List of values. INORDER yields sorted order.
        """
        pass

    @abstractmethod
    def root(self) -> V | None:
        """Return the value at the root, or None for an empty tree."""
        pass

    @abstractmethod
    def height(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored values."""
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __iter__(self) -> Iterator[V]:
        return iter(self.traverse(Traversal.INORDER))
