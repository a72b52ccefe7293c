"""
Custom exceptions for the tree containers.
"""

from typing import Any


class KeyNotFoundError(KeyError):
    """
    Raised by find and remove when the requested key is not in the tree.

    Subclasses KeyError so callers already handling mapping lookups keep working.
    """

    def __init__(self, key: Any):
        """
        Initialize lookup error.

        Args:
            key: The key that was searched for.
        """
        self.key = key
        super().__init__(f"Key not found: {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message a second time
        return str(self.args[0])

    def __reduce__(self):
        # args holds the message, not the key
        return type(self), (self.key,)


class DuplicateKeyError(ValueError):
    """Raised on insert of an existing key when the tree rejects duplicates."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key already exists: {key!r}")

    def __reduce__(self):
        return type(self), (self.key,)
