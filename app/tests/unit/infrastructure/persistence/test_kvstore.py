"""Unit tests for the key-value store and the schedules cache accessors."""

import pytest

from infrastructure.persistence.kvstore import (
    SCHEDULES_CACHE_KEY,
    InMemoryKVStore,
    KVStore,
    KVStoreError,
    PagerDutyKVStore,
)


class FailingKVStore(KVStore):
    def get(self, key):
        raise ConnectionError("store unavailable")

    def set(self, key, value):
        raise ConnectionError("store unavailable")

    def delete(self, key):
        raise ConnectionError("store unavailable")


@pytest.mark.unit
class TestInMemoryKVStore:
    def test_missing_key_returns_none(self):
        assert InMemoryKVStore().get("missing") is None

    def test_set_then_get(self):
        store = InMemoryKVStore()

        store.set("key", b"value")

        assert store.get("key") == b"value"

    def test_delete_is_idempotent(self):
        store = InMemoryKVStore()
        store.set("key", b"value")

        store.delete("key")
        store.delete("key")

        assert store.get("key") is None


@pytest.mark.unit
class TestPagerDutyKVStore:
    def test_empty_cache_returns_none(self):
        assert PagerDutyKVStore(InMemoryKVStore()).get_cached_schedules() is None

    def test_schedules_are_stored_under_fixed_key(self):
        backend = InMemoryKVStore()
        cache = PagerDutyKVStore(backend)

        cache.set_cached_schedules(b'{"schedules": []}')

        assert backend.get(SCHEDULES_CACHE_KEY) == b'{"schedules": []}'
        assert cache.get_cached_schedules() == b'{"schedules": []}'

    def test_last_write_wins(self):
        cache = PagerDutyKVStore(InMemoryKVStore())

        cache.set_cached_schedules(b"first")
        cache.set_cached_schedules(b"second")

        assert cache.get_cached_schedules() == b"second"

    def test_backend_write_failure_is_wrapped(self):
        cache = PagerDutyKVStore(FailingKVStore())

        with pytest.raises(KVStoreError, match=SCHEDULES_CACHE_KEY):
            cache.set_cached_schedules(b"data")

    def test_backend_read_failure_is_wrapped(self):
        cache = PagerDutyKVStore(FailingKVStore())

        with pytest.raises(KVStoreError) as exc_info:
            cache.get_cached_schedules()

        assert isinstance(exc_info.value.__cause__, ConnectionError)
