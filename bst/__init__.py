"""
Unbalanced binary search tree for ordered key-value storage.

This package provides an ordered container with:
- insert(key, value) - O(h) where h is the tree height
- find(key) - O(h), raises KeyNotFoundError for absent keys
- remove(key) - O(h), raises KeyNotFoundError for absent keys

No rebalancing is performed: h is whatever the insertion order produces,
up to N for keys inserted in sorted order.
"""

from bst.interfaces import Comparable, SortedContainer
from bst.models.exceptions import DuplicateKeyError, KeyNotFoundError
from bst.models.sortedcontainers import BinarySearchTree, DuplicatePolicy

__all__ = [
    "BinarySearchTree",
    "Comparable",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "KeyNotFoundError",
    "SortedContainer",
]
