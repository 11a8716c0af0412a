"""Error classifiers for PagerDuty client exceptions.

Converts the exceptions raised by ``integrations.pagerduty`` into
standardized OperationResult objects so that routes and command handlers
only deal with statuses.

Usage:
    from infrastructure.operations.classifiers import classify_pagerduty_error

    try:
        response = client.get_schedules(limit=100)
    except PagerDutyError as exc:
        return classify_pagerduty_error(exc)
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus
from integrations.pagerduty.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)

NOT_CONFIGURED_MESSAGE = "PagerDuty is not configured"
DECODE_ERROR_MESSAGE = "Received an unexpected response from PagerDuty"


def _classify_status(
    status_code: int, message: str, fallback_code: str
) -> OperationResult:
    """Map an upstream HTTP status onto an OperationResult.

    Status Code Mapping:
    - 401/403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 429: TRANSIENT_ERROR with retry_after
    - 5xx: TRANSIENT_ERROR
    - Other: PERMANENT_ERROR
    """
    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code="UNAUTHORIZED"
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message, error_code="NOT_FOUND"
        )

    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code="RATE_LIMITED",
            retry_after=60,
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(message, error_code="SERVER_ERROR")

    return OperationResult.permanent_error(message, error_code=fallback_code)


def classify_pagerduty_error(exc: Exception) -> OperationResult:
    """Classify a PagerDuty client exception into an OperationResult.

    API error messages are carried verbatim. Decode errors get a generic
    message since their detail is only useful in logs.

    Args:
        exc: Exception raised by PagerDutyClient

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, ConfigurationError):
        return OperationResult.error(
            OperationStatus.NOT_CONFIGURED,
            NOT_CONFIGURED_MESSAGE,
            error_code="NOT_CONFIGURED",
        )

    if isinstance(exc, TransportError):
        return OperationResult.transient_error(
            f"Could not reach PagerDuty: {exc}", error_code="TRANSPORT_ERROR"
        )

    if isinstance(exc, APIError):
        return _classify_status(exc.status_code, exc.message, "PAGERDUTY_API_ERROR")

    if isinstance(exc, HTTPStatusError):
        message = f"PagerDuty returned HTTP {exc.status_code}"
        return _classify_status(exc.status_code, message, "HTTP_STATUS_ERROR")

    if isinstance(exc, DecodeError):
        return OperationResult.permanent_error(
            DECODE_ERROR_MESSAGE, error_code="DECODE_ERROR"
        )

    return OperationResult.permanent_error(
        f"PagerDuty error: {exc}", error_code="UNKNOWN_ERROR"
    )
