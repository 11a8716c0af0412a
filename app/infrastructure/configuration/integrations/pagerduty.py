"""PagerDuty integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class PagerDutySettings(IntegrationSettings):
    """PagerDuty REST API configuration.

    Environment Variables:
        PAGERDUTY_API_TOKEN: REST API token. The integration is disabled when empty.
        PAGERDUTY_API_BASE_URL: API base URL. Empty means https://api.pagerduty.com

    Example:
        ```python
        from infrastructure.services import get_settings

        token = get_settings().pagerduty.PAGERDUTY_API_TOKEN
        ```
    """

    PAGERDUTY_API_TOKEN: str = Field(default="", alias="PAGERDUTY_API_TOKEN")
    PAGERDUTY_API_BASE_URL: str = Field(default="", alias="PAGERDUTY_API_BASE_URL")
