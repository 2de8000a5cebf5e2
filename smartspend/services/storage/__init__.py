"""
Storage Services Package

Provides the abstract key-value interface the tracker persists through,
plus JSON-file and in-memory implementations.
"""

from smartspend.services.storage.interface import (
    CURRENT_DAY_KEY,
    HISTORY_KEY,
    CorruptStateError,
    PersistentStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from smartspend.services.storage.json_file import JsonFileStore
from smartspend.services.storage.memory import InMemoryStore

__all__ = [
    # Interface
    "CURRENT_DAY_KEY",
    "HISTORY_KEY",
    "PersistentStore",
    # Exceptions
    "CorruptStateError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Implementations
    "InMemoryStore",
    "JsonFileStore",
]
