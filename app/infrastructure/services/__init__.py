"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    ConfigurationStoreDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_configuration_store,
    get_schedule_cache,
    get_pagerduty_client,
)

__all__ = [
    "SettingsDep",
    "ConfigurationStoreDep",
    "get_settings",
    "get_configuration_store",
    "get_schedule_cache",
    "get_pagerduty_client",
]
