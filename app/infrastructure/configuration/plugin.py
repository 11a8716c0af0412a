"""Runtime PagerDuty configuration.

The active configuration is an immutable snapshot held by a
ConfigurationStore. Readers take the snapshot under a shared lock and build
their own client from it; reconfiguration swaps the snapshot under an
exclusive lock. Clients never change after construction.
"""

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from pydantic import BaseModel, ConfigDict

from infrastructure.logging import get_module_logger
from integrations.pagerduty.exceptions import ConfigurationError

if TYPE_CHECKING:
    from infrastructure.configuration.settings import Settings

logger = get_module_logger()


class PluginConfiguration(BaseModel):
    """Immutable PagerDuty connection settings."""

    model_config = ConfigDict(frozen=True)

    api_token: str = ""
    api_base_url: str = ""

    def is_valid(self) -> None:
        """Raise ConfigurationError unless an API token is set.

        An empty base URL is valid; the client falls back to its default.
        """
        if not self.api_token.strip():
            raise ConfigurationError("PagerDuty API token is required")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_token.strip())

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PluginConfiguration":
        return cls(
            api_token=settings.pagerduty.PAGERDUTY_API_TOKEN,
            api_base_url=settings.pagerduty.PAGERDUTY_API_BASE_URL,
        )


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Writers wait for active readers to drain; new readers wait while a
    writer holds or is waiting for the lock.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class ConfigurationStore:
    """Holds the active PluginConfiguration snapshot."""

    def __init__(self, configuration: Optional[PluginConfiguration] = None) -> None:
        self._lock = ReadWriteLock()
        self._configuration = configuration or PluginConfiguration()

    def get_configuration(self) -> PluginConfiguration:
        with self._lock.read_lock():
            return self._configuration

    def set_configuration(self, configuration: PluginConfiguration) -> None:
        with self._lock.write_lock():
            self._configuration = configuration
        logger.info(
            "pagerduty_configuration_changed",
            configured=configuration.is_configured,
            base_url=configuration.api_base_url or "default",
        )

    def reload(self, settings: "Settings") -> PluginConfiguration:
        """Replace the snapshot with one built from settings and return it."""
        configuration = PluginConfiguration.from_settings(settings)
        self.set_configuration(configuration)
        return configuration
