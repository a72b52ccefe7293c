"""
Sorted container implementations.
"""

from bst.models.sortedcontainers.binary_search_tree import (
    BinarySearchTree,
    DuplicatePolicy,
)

__all__ = ["BinarySearchTree", "DuplicatePolicy"]
