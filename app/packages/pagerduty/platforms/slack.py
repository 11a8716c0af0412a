"""Slack platform implementation for the pagerduty package."""

from slack_bolt import Ack, App, Respond

from infrastructure.logging import get_module_logger
from infrastructure.platforms.models import CommandPayload
from infrastructure.services import get_settings
from packages.pagerduty.commands import handle_pagerduty_command

logger = get_module_logger()


def register(bot: App) -> None:
    """Register the /pagerduty slash command on the Bolt app."""
    prefix = get_settings().PREFIX
    bot.command(f"/{prefix}pagerduty")(pagerduty_command)


def pagerduty_command(ack: Ack, command: dict, respond: Respond) -> None:
    ack()

    payload = CommandPayload(
        text=command.get("text", ""),
        user_id=command.get("user_id", ""),
        channel_id=command.get("channel_id"),
        command=command.get("command", ""),
        correlation_id=command.get("trigger_id", ""),
        platform_metadata={"team_id": command.get("team_id")},
    )
    logger.info(
        "slack_command_received",
        command=payload.command,
        user_id=payload.user_id,
        channel_id=payload.channel_id,
    )

    response = handle_pagerduty_command(payload)
    respond(
        text=response.message,
        response_type="ephemeral" if response.ephemeral else "in_channel",
    )
