"""
Abstract Storage Interface

DESIGN DECISION: The tracker only needs a string key-value store with two
fixed keys. Keeping the interface this small means:
1. A UI can inject whatever persistence it already has
2. Tests run against an in-memory store
3. Serialization stays in the models, not in each backend

Store access is synchronous and assumed to succeed. A failing store is an
environment fault: implementations raise StorageError and nothing retries.
"""

from abc import ABC, abstractmethod
from typing import Optional


# Logical keys of the two persisted records
CURRENT_DAY_KEY = "current-day"
HISTORY_KEY = "history"


class PersistentStore(ABC):
    """
    Abstract interface for the tracker's key-value persistence.

    Any backend (JSON files, browser storage bridge, in-memory dict)
    must implement these methods.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the raw value stored under a key.

        Args:
            key: Logical key (CURRENT_DAY_KEY or HISTORY_KEY)

        Returns:
            The stored string, or None if nothing is stored

        Raises:
            StorageReadError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Replace the value stored under a key.

        Args:
            key: Logical key
            value: Serialized payload

        Raises:
            StorageWriteError: If the backend cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """Could not read from the storage backend."""
    pass


class StorageWriteError(StorageError):
    """Could not write to the storage backend."""
    pass


class CorruptStateError(StorageError):
    """A stored payload could not be parsed."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Stored value for '{key}' is corrupt: {reason}")
