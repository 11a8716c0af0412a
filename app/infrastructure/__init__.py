"""Infrastructure modules for the PagerDuty bot.

Centralized infrastructure components:
- configuration: Settings and the runtime PagerDuty configuration store
- logging: Structlog configuration (get_module_logger)
- operations: Operation results and error classification
- persistence: Key-value cache for PagerDuty data
- platforms: Platform-agnostic chat command models
- services: Dependency injection providers (get_settings, SettingsDep)
"""

from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "get_module_logger",
    "OperationResult",
    "OperationStatus",
]
