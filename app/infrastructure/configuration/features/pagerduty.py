"""PagerDuty feature settings."""

import pytz
from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class PagerDutyFeatureSettings(FeatureSettings):
    """Behaviour of the schedule, on-call and incident features.

    Environment Variables:
        PAGERDUTY_SCHEDULE_WINDOW_DAYS: Default look-ahead for schedule details
            (default: 7)
        PAGERDUTY_PAGE_LIMIT: Page size for schedule and service listings (default: 100)
        PAGERDUTY_DISPLAY_TIME_ZONE: IANA zone used to render shift times in chat
        PAGERDUTY_CACHE_SCHEDULES: Write fetched schedules to the key-value cache

    Example:
        ```python
        from infrastructure.services import get_settings

        days = get_settings().feat_pagerduty.SCHEDULE_WINDOW_DAYS
        ```
    """

    SCHEDULE_WINDOW_DAYS: int = Field(
        default=7, ge=1, le=90, alias="PAGERDUTY_SCHEDULE_WINDOW_DAYS"
    )
    PAGE_LIMIT: int = Field(default=100, ge=1, le=100, alias="PAGERDUTY_PAGE_LIMIT")
    DISPLAY_TIME_ZONE: str = Field(default="UTC", alias="PAGERDUTY_DISPLAY_TIME_ZONE")
    CACHE_SCHEDULES: bool = Field(default=True, alias="PAGERDUTY_CACHE_SCHEDULES")

    @field_validator("DISPLAY_TIME_ZONE")
    @classmethod
    def validate_display_time_zone(cls, v: str) -> str:
        """Reject zone names pytz cannot resolve."""
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v
