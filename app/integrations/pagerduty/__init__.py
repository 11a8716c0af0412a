"""PagerDuty REST API integration.

Exports the client, its error taxonomy and the response models.

Example:
    from integrations.pagerduty import PagerDutyClient

    client = PagerDutyClient(api_token="...")
    response = client.get_current_oncalls()
"""

from integrations.pagerduty.client import DEFAULT_BASE_URL, TIMEOUT, PagerDutyClient
from integrations.pagerduty.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    PagerDutyError,
    TransportError,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "TIMEOUT",
    "PagerDutyClient",
    "PagerDutyError",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "HTTPStatusError",
    "DecodeError",
]
