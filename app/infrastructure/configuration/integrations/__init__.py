"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.pagerduty import PagerDutySettings
from infrastructure.configuration.integrations.slack import SlackSettings

__all__ = [
    "PagerDutySettings",
    "SlackSettings",
]
