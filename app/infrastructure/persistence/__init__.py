"""Persistence layer for cached operational data."""

from infrastructure.persistence.kvstore import (
    SCHEDULES_CACHE_KEY,
    InMemoryKVStore,
    KVStore,
    KVStoreError,
    PagerDutyKVStore,
)

__all__ = [
    "SCHEDULES_CACHE_KEY",
    "KVStore",
    "KVStoreError",
    "InMemoryKVStore",
    "PagerDutyKVStore",
]
