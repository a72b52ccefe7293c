"""
Binary Search Tree implementation for sorted key-value storage.

Every tree object is also a node: the handle callers hold is the root, and
each child is another BinarySearchTree linked back to its parent through a
weak reference. No rebalancing is performed, so the height is set entirely by
insertion order. Keys inserted in sorted order degrade the tree into a list
of N nodes; descents are loops, so the cost of such a tree is time and
memory, not interpreter stack depth.
"""

import logging
import weakref
from enum import IntEnum
from typing import Any

from bst.interfaces.comparable import K, V
from bst.interfaces.sorted_container import SortedContainer
from bst.models.exceptions import DuplicateKeyError, KeyNotFoundError

logger = logging.getLogger(__name__)

# Marks the key and value of an empty tree. None is a legitimate key or value.
_MISSING: Any = object()


class DuplicatePolicy(IntEnum):
    """What insert does when the key is already present."""

    REPLACE = 0  # Overwrite the stored value
    REJECT = 1  # Raise DuplicateKeyError


class BinarySearchTree(SortedContainer[K, V]):
    """
    Unbalanced Binary Search Tree implementation of SortedContainer.

    Properties maintained:
    1. Every key in a node's left subtree is less than the node's key
    2. Every key in a node's right subtree is greater than the node's key
    3. A child's parent is the node holding it as left or right
    4. Keys are unique

    The root object is never replaced. Removing the root's key rewrites the
    root's own fields so that references held by callers stay valid.
    """

    def __init__(
        self,
        key: K = _MISSING,
        value: V = None,
        parent: "BinarySearchTree[K, V] | None" = None,
        duplicates: DuplicatePolicy = DuplicatePolicy.REPLACE,
    ) -> None:
        """
        Initialize a tree, empty unless a key is given.

        Args:
            key: Key to seed the node with. Omit for an empty tree.
            value: Value stored with the seed key.
            parent: Structural parent. Only used when the tree grows a child
                node; external callers build roots.
            duplicates: Behavior of insert for a key that is already present.
        """
        if not isinstance(duplicates, DuplicatePolicy):
            raise TypeError(
                f"duplicates must be a DuplicatePolicy, got {duplicates!r}"
            )

        self.key: K = key
        self.value: V = _MISSING if key is _MISSING else value
        self.left: BinarySearchTree[K, V] | None = None
        self.right: BinarySearchTree[K, V] | None = None
        self._parent: weakref.ref[BinarySearchTree[K, V]] | None = None
        self._duplicates = duplicates

        if parent is not None:
            self._parent = weakref.ref(parent)

    @property
    def parent(self) -> "BinarySearchTree[K, V] | None":
        """Structural parent, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def duplicates(self) -> DuplicatePolicy:
        return self._duplicates

    def is_empty(self) -> bool:
        return self.key is _MISSING

    def insert(self, key: K, value: V) -> None:
        """Insert a key-value pair. O(h)"""
        if self.is_empty():
            self.key = key
            self.value = value
            return

        node = self
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = self._new_child(key, value, node)
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = self._new_child(key, value, node)
                    return
                node = node.right
            else:
                if self._duplicates is DuplicatePolicy.REJECT:
                    raise DuplicateKeyError(key)
                logger.debug("Overwriting value for existing key %r", key)
                node.value = value
                return

    def find(self, key: K) -> V:
        """Retrieve value by key. O(h)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def has(self, key: K) -> bool:
        return self._find_node(key) is not None

    def remove(self, key: K) -> None:
        """Remove a key-value pair. O(h)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)

        if node.left is not None and node.right is not None:
            # The successor has no left child, so removing it takes one of
            # the branches below and never comes back here.
            successor = node.right._find_min()
            node.key = successor.key
            node.value = successor.value
            successor.remove(successor.key)
        elif node.left is not None:
            node._replace_with(node.left)
        elif node.right is not None:
            node._replace_with(node.right)
        else:
            node._replace_with(None)

    def __repr__(self) -> str:
        if self.is_empty():
            return f"{type(self).__name__}(<empty>)"
        return f"{type(self).__name__}(key={self.key!r}, value={self.value!r})"

    def _new_child(
        self, key: K, value: V, parent: "BinarySearchTree[K, V]"
    ) -> "BinarySearchTree[K, V]":
        return type(self)(key, value, parent, duplicates=self._duplicates)

    def _find_node(self, key: K) -> "BinarySearchTree[K, V] | None":
        """Find node by key."""
        if self.is_empty():
            return None

        current = self
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _find_min(self) -> "BinarySearchTree[K, V]":
        """Return the node with the smallest key in this subtree."""
        current = self
        while current.left is not None:
            current = current.left
        return current

    def _replace_with(self, replacement: "BinarySearchTree[K, V] | None") -> None:
        """
        Put replacement in this node's place.

        A child node is spliced out by rewiring its parent's pointer. The
        root cannot be swapped for another object, so it takes over the
        replacement's contents instead, or becomes empty when there is no
        replacement.
        """
        parent = self.parent

        if parent is not None:
            if parent.left is self:
                parent.left = replacement
            elif parent.right is self:
                parent.right = replacement

            if replacement is not None:
                replacement._parent = weakref.ref(parent)

            # Detached
            self._parent = None
            self.left = None
            self.right = None
        elif replacement is not None:
            logger.debug(
                "Root %r takes over contents of %r", self.key, replacement.key
            )
            self.key = replacement.key
            self.value = replacement.value
            self.left = replacement.left
            self.right = replacement.right

            for child in (self.left, self.right):
                if child is not None:
                    child._parent = weakref.ref(self)

            # Detached
            replacement._parent = None
            replacement.left = None
            replacement.right = None
        else:
            logger.debug("Root %r removed, tree is now empty", self.key)
            self.key = _MISSING
            self.value = _MISSING
            self.left = None
            self.right = None
