"""
Comparable protocol for keys that can be placed in a sorted container.
"""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """
    Protocol for mutually orderable keys.

    Keys must support strict less-than and greater-than against each other.
    Equality falls back to object equality, which every type has.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


K = TypeVar("K", bound=Comparable)
V = TypeVar("V")
