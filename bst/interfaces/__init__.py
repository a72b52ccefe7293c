"""
Abstract base classes and protocols for the tree containers.
"""

from bst.interfaces.comparable import Comparable
from bst.interfaces.sorted_container import SortedContainer

__all__ = ["Comparable", "SortedContainer"]
