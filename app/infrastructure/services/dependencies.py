"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import ConfigurationStore, Settings
from infrastructure.services.providers import (
    get_settings,
    get_configuration_store,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Active PagerDuty configuration holder
ConfigurationStoreDep = Annotated[
    ConfigurationStore, Depends(get_configuration_store)
]

__all__ = [
    "SettingsDep",
    "ConfigurationStoreDep",
]
