"""Slack integration settings."""

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack bot configuration.

    The bot is only started when SLACK_TOKEN is set.

    Environment Variables:
        APP_TOKEN: Slack app-level token (xapp-*) used for Socket Mode
        SLACK_TOKEN: Slack bot token (xoxb-*)
    """

    APP_TOKEN: str = ""
    SLACK_TOKEN: str = ""
