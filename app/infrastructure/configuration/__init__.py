"""Infrastructure configuration module - public API.

Centralized configuration for the PagerDuty bot using Pydantic BaseSettings
with domain-based organization, plus the runtime configuration store that
holds the active PagerDuty connection snapshot.

Exports:
    Settings: Main settings class
    PluginConfiguration: Immutable PagerDuty connection snapshot
    ConfigurationStore: Thread-safe holder of the active snapshot

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    token = settings.pagerduty.PAGERDUTY_API_TOKEN
    if settings.is_production:
        ...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.plugin import (
    ConfigurationStore,
    PluginConfiguration,
    ReadWriteLock,
)

__all__ = ["Settings", "PluginConfiguration", "ConfigurationStore", "ReadWriteLock"]
