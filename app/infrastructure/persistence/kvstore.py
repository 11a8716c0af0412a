"""Key-value storage for cached PagerDuty data.

KVStore is the interface a host storage backend implements. The in-memory
implementation is used when no external store is configured.
PagerDutyKVStore adds the typed accessors for the schedules cache.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

SCHEDULES_CACHE_KEY = "pagerduty_schedules_cache"


class KVStoreError(Exception):
    """Raised when the backing key-value store fails."""


class KVStore(ABC):
    """Abstract key-value store holding raw bytes."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass


class InMemoryKVStore(KVStore):
    """Process-local store guarded by a lock."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class PagerDutyKVStore:
    """Typed access to the PagerDuty entries of a KVStore.

    Values are opaque serialized payloads; callers decide the encoding.
    Store failures are raised as KVStoreError.
    """

    def __init__(self, store: KVStore) -> None:
        self._store = store

    def get_cached_schedules(self) -> Optional[bytes]:
        try:
            return self._store.get(SCHEDULES_CACHE_KEY)
        except KVStoreError:
            raise
        except Exception as e:
            raise KVStoreError(f"failed to read {SCHEDULES_CACHE_KEY}: {e}") from e

    def set_cached_schedules(self, data: bytes) -> None:
        try:
            self._store.set(SCHEDULES_CACHE_KEY, data)
        except KVStoreError:
            raise
        except Exception as e:
            raise KVStoreError(f"failed to write {SCHEDULES_CACHE_KEY}: {e}") from e
        logger.debug("schedules_cache_updated", size=len(data))
