"""
Tests for the tree container exceptions.
"""

import copy
import pickle

import pytest

from bst import DuplicateKeyError, KeyNotFoundError


class TestKeyNotFoundError:
    """Tests for KeyNotFoundError."""

    def test_carries_key(self):
        """Test the missing key is kept on the error."""
        err = KeyNotFoundError(42)
        assert err.key == 42

    def test_message(self):
        """Test the message names the key once, without extra quoting."""
        assert str(KeyNotFoundError("abc")) == "Key not found: 'abc'"

    def test_is_key_error(self):
        """Test mapping-style callers can catch it as KeyError."""
        with pytest.raises(KeyError):
            raise KeyNotFoundError(1)

    def test_pickle_and_copy_keep_key(self):
        """Test rebuilt errors carry the original key and message."""
        err = KeyNotFoundError(42)

        for clone in (pickle.loads(pickle.dumps(err)), copy.copy(err)):
            assert isinstance(clone, KeyNotFoundError)
            assert clone.key == 42
            assert str(clone) == "Key not found: 42"


class TestDuplicateKeyError:
    """Tests for DuplicateKeyError."""

    def test_carries_key_and_message(self):
        """Test attributes and message."""
        err = DuplicateKeyError(7)
        assert err.key == 7
        assert str(err) == "Key already exists: 7"

    def test_is_value_error(self):
        """Test it can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise DuplicateKeyError(7)

    def test_pickle_and_copy_keep_key(self):
        """Test rebuilt errors carry the original key and message."""
        err = DuplicateKeyError("k")

        for clone in (pickle.loads(pickle.dumps(err)), copy.deepcopy(err)):
            assert clone.key == "k"
            assert str(clone) == "Key already exists: 'k'"
