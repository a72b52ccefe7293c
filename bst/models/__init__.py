"""
Data models for the tree containers.
"""

from bst.models.exceptions import DuplicateKeyError, KeyNotFoundError
from bst.models.sortedcontainers import BinarySearchTree, DuplicatePolicy

__all__ = [
    "BinarySearchTree",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "KeyNotFoundError",
]
