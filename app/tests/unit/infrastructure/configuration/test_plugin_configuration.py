"""Unit tests for the PagerDuty configuration snapshot and its store."""

import threading
import time

import pytest
from pydantic import ValidationError

from infrastructure.configuration.plugin import (
    ConfigurationStore,
    PluginConfiguration,
    ReadWriteLock,
)
from integrations.pagerduty.exceptions import ConfigurationError


@pytest.mark.unit
class TestPluginConfiguration:
    def test_empty_token_is_invalid(self):
        configuration = PluginConfiguration()

        with pytest.raises(ConfigurationError, match="API token is required"):
            configuration.is_valid()
        assert configuration.is_configured is False

    def test_blank_token_is_invalid(self):
        with pytest.raises(ConfigurationError):
            PluginConfiguration(api_token="   ").is_valid()

    def test_token_without_base_url_is_valid(self):
        configuration = PluginConfiguration(api_token="u+token")

        configuration.is_valid()

        assert configuration.is_configured is True
        assert configuration.api_base_url == ""

    def test_snapshot_is_immutable(self):
        configuration = PluginConfiguration(api_token="u+token")

        with pytest.raises(ValidationError):
            configuration.api_token = "other"

    def test_from_settings(self, make_settings):
        settings = make_settings(
            PAGERDUTY_API_TOKEN="u+token",
            PAGERDUTY_API_BASE_URL="https://pd.example.com",
        )

        configuration = PluginConfiguration.from_settings(settings)

        assert configuration.api_token == "u+token"
        assert configuration.api_base_url == "https://pd.example.com"


@pytest.mark.unit
class TestConfigurationStore:
    def test_starts_unconfigured(self):
        store = ConfigurationStore()

        assert store.get_configuration().is_configured is False

    def test_set_configuration_swaps_snapshot(self):
        store = ConfigurationStore()
        before = store.get_configuration()
        new = PluginConfiguration(api_token="u+token")

        store.set_configuration(new)

        assert store.get_configuration() is new
        assert before.api_token == ""

    def test_reload_from_settings(self, make_settings):
        store = ConfigurationStore(PluginConfiguration(api_token="old"))

        result = store.reload(make_settings(PAGERDUTY_API_TOKEN="new"))

        assert result.api_token == "new"
        assert store.get_configuration().api_token == "new"

    def test_concurrent_readers_see_whole_snapshots(self):
        first = PluginConfiguration(
            api_token="a", api_base_url="https://a.example.com"
        )
        second = PluginConfiguration(
            api_token="b", api_base_url="https://b.example.com"
        )
        store = ConfigurationStore(first)
        seen = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                snapshot = store.get_configuration()
                seen.append((snapshot.api_token, snapshot.api_base_url))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for i in range(50):
            store.set_configuration(second if i % 2 == 0 else first)
        stop.set()
        for thread in threads:
            thread.join()

        assert set(seen) <= {
            ("a", "https://a.example.com"),
            ("b", "https://b.example.com"),
        }


@pytest.mark.unit
class TestReadWriteLock:
    def test_multiple_readers_share_the_lock(self):
        lock = ReadWriteLock()
        both_inside = threading.Barrier(2, timeout=2)

        def reader():
            with lock.read_lock():
                both_inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=3)

        assert not both_inside.broken

    def test_writer_waits_for_reader(self):
        lock = ReadWriteLock()
        events = []
        reader_inside = threading.Event()

        def writer():
            reader_inside.wait()
            with lock.write_lock():
                events.append("write")

        thread = threading.Thread(target=writer)
        thread.start()
        with lock.read_lock():
            reader_inside.set()
            time.sleep(0.05)
            events.append("read_done")
        thread.join(timeout=2)

        assert events == ["read_done", "write"]

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            with lock.write_lock():
                raise RuntimeError("boom")

        with lock.read_lock():
            pass
