"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import (
    ConfigurationStore,
    PluginConfiguration,
    Settings,
)
from infrastructure.persistence import InMemoryKVStore, PagerDutyKVStore
from integrations.pagerduty import PagerDutyClient


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            ...

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_configuration_store() -> ConfigurationStore:
    """
    Get the application-scoped store holding the active PagerDuty configuration.

    Seeded from settings on first use. The server lifespan reloads it at startup.
    """
    return ConfigurationStore(PluginConfiguration.from_settings(get_settings()))


@lru_cache
def get_schedule_cache() -> PagerDutyKVStore:
    """Get the application-scoped schedules cache."""
    return PagerDutyKVStore(InMemoryKVStore())


def get_pagerduty_client() -> PagerDutyClient:
    """
    Build a PagerDuty client from the current configuration snapshot.

    Not cached: each call reads the snapshot once, so a reconfiguration is
    picked up by the next request without locking the client.

    Raises:
        ConfigurationError: If no API token is configured.
    """
    configuration = get_configuration_store().get_configuration()
    configuration.is_valid()
    return PagerDutyClient(
        api_token=configuration.api_token,
        base_url=configuration.api_base_url,
    )
