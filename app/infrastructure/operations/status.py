"""Operation status enumeration.

Outcome categories for service-layer operations. Routes and command
handlers map these onto HTTP status codes and user-facing messages.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: May succeed later (network, timeout, rate limit, 5xx)
        PERMANENT_ERROR: Will not succeed as is (bad input, contract mismatch)
        UNAUTHORIZED: PagerDuty rejected the configured credentials
        NOT_FOUND: Resource not found
        NOT_CONFIGURED: No usable PagerDuty configuration
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    NOT_CONFIGURED = "not_configured"
