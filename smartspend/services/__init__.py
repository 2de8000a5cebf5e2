"""Services package."""

from smartspend.services.storage import (
    CURRENT_DAY_KEY,
    HISTORY_KEY,
    CorruptStateError,
    InMemoryStore,
    JsonFileStore,
    PersistentStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

__all__ = [
    "CURRENT_DAY_KEY",
    "HISTORY_KEY",
    "CorruptStateError",
    "InMemoryStore",
    "JsonFileStore",
    "PersistentStore",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
]
