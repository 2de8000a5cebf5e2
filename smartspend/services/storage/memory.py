"""In-memory store, for tests and throwaway sessions."""

from typing import Optional

from smartspend.services.storage.interface import PersistentStore


class InMemoryStore(PersistentStore):
    """Dict-backed PersistentStore. Keeps a count of writes per key."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})
        self.write_counts: dict[str, int] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.write_counts[key] = self.write_counts.get(key, 0) + 1

    def keys(self) -> list[str]:
        return list(self._data)
