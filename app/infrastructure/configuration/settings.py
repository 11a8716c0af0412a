"""PagerDuty bot configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    PagerDutySettings,
    SlackSettings,
)

# Feature settings
from infrastructure.configuration.features import PagerDutyFeatureSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """PagerDuty bot configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Integrations**: PagerDuty API credentials, Slack tokens
    - **Features**: schedule window, page size, display time zone
    - **Infrastructure**: HTTP server behaviour

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        token = settings.pagerduty.PAGERDUTY_API_TOKEN
        window = settings.feat_pagerduty.SCHEDULE_WINDOW_DAYS
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    pagerduty: PagerDutySettings
    slack: SlackSettings

    # Feature settings
    feat_pagerduty: PagerDutyFeatureSettings

    # Infrastructure settings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """True when PREFIX is empty."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "pagerduty": PagerDutySettings,
            "slack": SlackSettings,
            "feat_pagerduty": PagerDutyFeatureSettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
