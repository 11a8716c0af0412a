"""PagerDuty client exceptions.

The client raises exactly one of these per failed call. Transport, HTTP
status and decode failures never overlap:

- TransportError: the request never produced a response
- APIError: status >= 400 with a parseable PagerDuty error envelope
- HTTPStatusError: status >= 400 without a usable error envelope
- DecodeError: status < 400 but the body did not match the expected shape
"""

from typing import Optional


class PagerDutyError(Exception):
    """Base class for all PagerDuty client errors."""


class ConfigurationError(PagerDutyError):
    """Raised when the client cannot be built from the current configuration."""


class TransportError(PagerDutyError):
    """Raised when the HTTP request failed before a response was received."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class APIError(PagerDutyError):
    """Error reported by PagerDuty in its JSON error envelope."""

    def __init__(
        self,
        message: str,
        code: int = 0,
        status_code: int = 0,
        errors: Optional[list[str]] = None,
    ):
        super().__init__(f"PagerDuty API error: {message} (code: {code})")
        self.message = message
        self.code = code
        self.status_code = status_code
        self.errors = errors or []


class HTTPStatusError(PagerDutyError):
    """Non-success status whose body is not a PagerDuty error envelope."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"PagerDuty API error: HTTP {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(PagerDutyError):
    """Successful response whose body could not be decoded."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
