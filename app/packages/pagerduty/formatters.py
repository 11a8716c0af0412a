"""Chat text rendering for PagerDuty data.

Produces Slack mrkdwn strings. Timestamps are shown in a single display
time zone; values that cannot be parsed are shown as sent by the API.
"""

from datetime import datetime
from typing import Optional, Sequence

import pytz

from integrations.pagerduty.models import OnCall, Schedule, ScheduleDetail, Service

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
UNKNOWN_SCHEDULE = "Unknown Schedule"

NO_SCHEDULES = "No PagerDuty schedules found."
NO_ONCALLS = "No one is currently on-call."
NO_SERVICES = "No PagerDuty services found."


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an API timestamp. Returns None when absent or malformed."""
    if not value:
        return None
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def _clock(value: datetime) -> str:
    # 3:04 PM
    return value.strftime("%I:%M %p").lstrip("0")


def format_shift_end(end: datetime, now: datetime, tz_name: str = "UTC") -> str:
    """Render a shift end relative to now, in the display time zone.

    Examples: "3:04 PM today", "9:00 AM tomorrow", "Mon 3:04 PM".
    """
    tz = pytz.timezone(tz_name)
    if now.tzinfo is None:
        now = now.replace(tzinfo=pytz.utc)
    local_end = end.astimezone(tz)
    local_now = now.astimezone(tz)

    days_ahead = (local_end.date() - local_now.date()).days
    if days_ahead == 0:
        return f"{_clock(local_end)} today"
    if days_ahead == 1:
        return f"{_clock(local_end)} tomorrow"
    return f"{local_end.strftime('%a')} {_clock(local_end)}"


def _format_timestamp(value: str, tz_name: str) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    local = parsed.astimezone(pytz.timezone(tz_name))
    return f"{local.strftime('%a %b %d')} {_clock(local)}"


def format_schedules(schedules: Sequence[Schedule], command: str = "/pagerduty") -> str:
    if not schedules:
        return NO_SCHEDULES

    lines = ["*PagerDuty Schedules*", ""]
    for schedule in schedules:
        line = f"*{schedule.name}*"
        if schedule.description:
            line += f" - {schedule.description}"
        lines.append(line)
        lines.append(f"_Timezone: {schedule.time_zone}_")
        lines.append("")
    lines.append(
        f"_Use `{command} oncall` to see who's currently on-call, "
        f"or `{command} schedule <id>` for upcoming shifts._"
    )
    return "\n".join(lines)


def format_oncalls(
    oncalls: Sequence[OnCall],
    now: datetime,
    tz_name: str = "UTC",
) -> str:
    """Render on-calls grouped by schedule name, schedules sorted by name.

    Each entry shows the user, the end of the shift when known, and the
    escalation level when above zero.
    """
    if not oncalls:
        return NO_ONCALLS

    by_schedule: dict[str, list[OnCall]] = {}
    for oncall in oncalls:
        name = oncall.schedule.display_name if oncall.schedule else UNKNOWN_SCHEDULE
        by_schedule.setdefault(name, []).append(oncall)

    lines = ["*Currently On-Call*", ""]
    for name in sorted(by_schedule):
        lines.append(f"*{name}*")
        for oncall in by_schedule[name]:
            line = f"• {oncall.user.display_name}"
            if oncall.user.email:
                line += f" ({oncall.user.email})"
            end = parse_timestamp(oncall.end)
            if end is not None:
                line += f" - until {format_shift_end(end, now, tz_name)}"
            if oncall.escalation_level > 0:
                line += f" _(escalation level {oncall.escalation_level})_"
            lines.append(line)
        lines.append("")
    return "\n".join(lines).rstrip()


def format_schedule_detail(schedule: ScheduleDetail, tz_name: str = "UTC") -> str:
    header = f"*{schedule.name}*"
    if schedule.time_zone:
        header += f" _({schedule.time_zone})_"
    lines = [header]
    if schedule.description:
        lines.append(schedule.description)
    lines.append("")

    if schedule.final_schedule is None:
        lines.append("No on-call schedule available.")
        return "\n".join(lines)

    entries = schedule.rendered_entries
    if not entries:
        lines.append("No on-call entries in this period.")
        return "\n".join(lines)

    for entry in entries:
        lines.append(
            f"• {entry.user.display_name}: "
            f"{_format_timestamp(entry.start, tz_name)} - "
            f"{_format_timestamp(entry.end, tz_name)}"
        )
    return "\n".join(lines)


def format_services(services: Sequence[Service]) -> str:
    if not services:
        return NO_SERVICES

    lines = ["*PagerDuty Services*", ""]
    for service in services:
        line = f"*{service.name}* `{service.id}`"
        if service.status:
            line += f" ({service.status})"
        lines.append(line)
        if service.description:
            lines.append(f"_{service.description}_")
    return "\n".join(lines)
