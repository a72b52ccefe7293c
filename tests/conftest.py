"""
Shared pytest fixtures for tree container tests.
"""

import random

import pytest

from bst import BinarySearchTree, DuplicatePolicy

SAMPLE_KEYS = [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture
def tree():
    """Provide a fresh empty tree."""
    return BinarySearchTree()


@pytest.fixture
def strict_tree():
    """Provide an empty tree that rejects duplicate keys."""
    return BinarySearchTree(duplicates=DuplicatePolicy.REJECT)


@pytest.fixture
def sample_tree():
    """Provide a tree built from SAMPLE_KEYS, each key mapped to f"v{key}"."""
    t = BinarySearchTree()
    for key in SAMPLE_KEYS:
        t.insert(key, f"v{key}")
    return t


@pytest.fixture
def large_sample_entries():
    """Provide a larger shuffled sample for stress testing."""
    keys = list(range(500))
    random.Random(42).shuffle(keys)
    return [(key, f"value{key}") for key in keys]
