"""PagerDuty slash command.

Parses the command text, calls the service layer and renders the result.
Platform handlers only translate payloads in and responses out.

Subcommands:
    help                    Show usage
    schedules               List schedules
    oncall [schedule_id]    Show who is currently on call
    schedule <id> [days]    Show upcoming shifts of a schedule
    services                List services
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.platforms.models import CommandPayload, CommandResponse
from infrastructure.services import get_settings
from packages.pagerduty import formatters, service

logger = get_module_logger()

DEFAULT_COMMAND = "/pagerduty"


def get_help_text(command: str = DEFAULT_COMMAND) -> str:
    return "\n".join(
        [
            "*PagerDuty Commands*",
            "",
            f"• `{command} help` - Show this help message",
            f"• `{command} schedules` - List all PagerDuty schedules",
            f"• `{command} oncall [schedule_id]` - Show who's currently on-call",
            f"• `{command} schedule <schedule_id> [days]` - Show upcoming shifts",
            f"• `{command} services` - List PagerDuty services",
        ]
    )


def _error_response(result: OperationResult, action: str) -> CommandResponse:
    if result.status == OperationStatus.NOT_CONFIGURED:
        return CommandResponse(
            message="PagerDuty is not configured. "
            "Ask an administrator to set an API token."
        )
    if result.status == OperationStatus.PERMANENT_ERROR and result.error_code in (
        "INVALID_REQUEST",
        "DECODE_ERROR",
    ):
        return CommandResponse(message=result.message)
    return CommandResponse(message=f"Failed to retrieve {action}: {result.message}")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _handle_help(payload: CommandPayload, args: list[str]) -> CommandResponse:
    return CommandResponse(message=get_help_text(payload.command or DEFAULT_COMMAND))


def _handle_schedules(payload: CommandPayload, args: list[str]) -> CommandResponse:
    result = service.list_schedules()
    if not result.is_success:
        return _error_response(result, "schedules")
    return CommandResponse(
        message=formatters.format_schedules(
            result.data.schedules, command=payload.command or DEFAULT_COMMAND
        )
    )


def _handle_oncall(payload: CommandPayload, args: list[str]) -> CommandResponse:
    schedule_id = args[0] if args else None
    result = service.list_oncalls(schedule_id=schedule_id)
    if not result.is_success:
        return _error_response(result, "on-call users")
    tz_name = get_settings().feat_pagerduty.DISPLAY_TIME_ZONE
    return CommandResponse(
        message=formatters.format_oncalls(result.data.oncalls, _now(), tz_name)
    )


def _handle_schedule(payload: CommandPayload, args: list[str]) -> CommandResponse:
    command = payload.command or DEFAULT_COMMAND
    if not args:
        return CommandResponse(
            message="Schedule ID is required. "
            f"Usage: `{command} schedule <schedule_id> [days]`"
        )
    days: Optional[int] = None
    if len(args) > 1:
        try:
            days = int(args[1])
        except ValueError:
            return CommandResponse(message=f"Invalid number of days: {args[1]}")
        if not 1 <= days <= service.MAX_SCHEDULE_WINDOW_DAYS:
            return CommandResponse(message=f"Invalid number of days: {args[1]}")

    result = service.get_schedule_details(args[0], days=days)
    if not result.is_success:
        return _error_response(result, "schedule")
    tz_name = get_settings().feat_pagerduty.DISPLAY_TIME_ZONE
    return CommandResponse(
        message=formatters.format_schedule_detail(result.data, tz_name)
    )


def _handle_services(payload: CommandPayload, args: list[str]) -> CommandResponse:
    result = service.list_services()
    if not result.is_success:
        return _error_response(result, "services")
    return CommandResponse(message=formatters.format_services(result.data.services))


SUBCOMMANDS: dict[str, Callable[[CommandPayload, list[str]], CommandResponse]] = {
    "help": _handle_help,
    "schedules": _handle_schedules,
    "oncall": _handle_oncall,
    "schedule": _handle_schedule,
    "services": _handle_services,
}


def handle_pagerduty_command(payload: CommandPayload) -> CommandResponse:
    """Dispatch a /pagerduty invocation to its subcommand.

    Empty text shows the help. Unknown subcommands show an error followed
    by the help. All responses are ephemeral.
    """
    fields = payload.text.split()
    if not fields:
        return _handle_help(payload, [])

    subcommand, args = fields[0].lower(), fields[1:]
    log = logger.bind(
        subcommand=subcommand,
        user_id=payload.user_id,
        channel_id=payload.channel_id,
        correlation_id=payload.correlation_id,
    )
    log.info("pagerduty_command_received")

    handler = SUBCOMMANDS.get(subcommand)
    if handler is None:
        log.info("pagerduty_unknown_subcommand")
        return CommandResponse(
            message=f"Unknown subcommand: {fields[0]}\n\n"
            f"{get_help_text(payload.command or DEFAULT_COMMAND)}"
        )
    return handler(payload, args)
