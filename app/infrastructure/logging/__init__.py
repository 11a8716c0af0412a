"""Structured logging infrastructure.

Centralized structlog configuration for the PagerDuty bot.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger bound to the calling module

Formatters:
    - add_app_info(): Processor to add app name/version
    - mask_sensitive_data(): Processor to redact sensitive fields

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("schedules_retrieved", count=3)
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "add_app_info",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
]
