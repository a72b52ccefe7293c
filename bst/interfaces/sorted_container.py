"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import ABC, abstractmethod
from typing import Generic

from bst.interfaces.comparable import K, V


class SortedContainer(ABC, Generic[K, V]):
    """
    Abstract base class for sorted key-value containers.

    Absence is reported by raising, never by returning a default, so any
    value (None included) can be stored.

    Implementations:
    - BinarySearchTree: unbalanced, parent-linked nodes
    """

    @abstractmethod
    def insert(self, key: K, value: V) -> None:
        """
        Insert a key-value pair.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def find(self, key: K) -> V:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value associated with the key.

        Raises:
            KeyNotFoundError: If the key is not in the container.

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def remove(self, key: K) -> None:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Raises:
            KeyNotFoundError: If the key is not in the container.

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def has(self, key: K) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the container holds no keys."""
        pass

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]
