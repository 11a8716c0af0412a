"""
Business logic for PagerDuty schedules, on-calls, services and incidents.

Platform-agnostic: HTTP routes and chat command handlers both call these
functions. Each one builds a client from the current configuration
snapshot, performs a single PagerDuty call and returns an OperationResult
whose data is the typed response model.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_pagerduty_error
from infrastructure.persistence import KVStoreError
from infrastructure.services import (
    get_pagerduty_client,
    get_schedule_cache,
    get_settings,
)
from integrations.pagerduty import PagerDutyError
from integrations.pagerduty.models import SchedulesResponse

logger = get_module_logger()

MAX_SCHEDULE_WINDOW_DAYS = 90


def _cache_schedules(response: SchedulesResponse) -> None:
    """Store the schedules page in the key-value cache. Failures are only logged."""
    try:
        get_schedule_cache().set_cached_schedules(
            response.model_dump_json(exclude_none=True).encode("utf-8")
        )
    except KVStoreError as e:
        logger.warning("schedules_cache_write_failed", error=str(e))


def list_schedules(limit: Optional[int] = None, offset: int = 0) -> OperationResult:
    """
    List PagerDuty schedules.

    Args:
        limit: Page size. Defaults to the configured page limit.
        offset: Page offset.

    Returns:
        OperationResult with a SchedulesResponse or a classified error
    """
    feature = get_settings().feat_pagerduty
    page_limit = limit or feature.PAGE_LIMIT
    log = logger.bind(operation="list_schedules", limit=page_limit, offset=offset)

    try:
        response = get_pagerduty_client().get_schedules(
            limit=page_limit, offset=offset
        )
    except PagerDutyError as e:
        log.warning("schedules_retrieval_failed", error=str(e))
        return classify_pagerduty_error(e)

    log.info("schedules_retrieved", count=len(response.schedules))
    if feature.CACHE_SCHEDULES:
        _cache_schedules(response)
    return OperationResult.success(data=response)


def get_schedule_details(
    schedule_id: str,
    days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> OperationResult:
    """
    Fetch a schedule with its rendered entries for the coming days.

    Args:
        schedule_id: PagerDuty schedule ID
        days: Window length in days. Defaults to the configured window.
        now: Window start. Defaults to the current time.

    Returns:
        OperationResult with a ScheduleDetail or a classified error
    """
    if not schedule_id or not schedule_id.strip():
        return OperationResult.permanent_error(
            "Schedule ID is required", error_code="INVALID_REQUEST"
        )
    if days is None:
        days = get_settings().feat_pagerduty.SCHEDULE_WINDOW_DAYS
    if days < 0:
        return OperationResult.permanent_error(
            "Schedule window must not be negative", error_code="INVALID_REQUEST"
        )
    if days > MAX_SCHEDULE_WINDOW_DAYS:
        return OperationResult.permanent_error(
            f"Schedule window must be at most {MAX_SCHEDULE_WINDOW_DAYS} days",
            error_code="INVALID_REQUEST",
        )

    since = now or datetime.now(timezone.utc)
    until = since + timedelta(days=days)
    log = logger.bind(
        operation="get_schedule_details", schedule_id=schedule_id, days=days
    )

    try:
        schedule = get_pagerduty_client().get_schedule(schedule_id, since, until)
    except PagerDutyError as e:
        log.warning("schedule_retrieval_failed", error=str(e))
        return classify_pagerduty_error(e)

    log.info("schedule_retrieved", entries=len(schedule.rendered_entries))
    return OperationResult.success(data=schedule)


def list_oncalls(schedule_id: Optional[str] = None) -> OperationResult:
    """
    List current on-calls, for one schedule or across all of them.

    Returns:
        OperationResult with an OnCallsResponse or a classified error
    """
    log = logger.bind(operation="list_oncalls", schedule_id=schedule_id)

    try:
        client = get_pagerduty_client()
        if schedule_id:
            response = client.get_oncalls_for_schedule(schedule_id)
        else:
            response = client.get_current_oncalls()
    except PagerDutyError as e:
        log.warning("oncalls_retrieval_failed", error=str(e))
        return classify_pagerduty_error(e)

    log.info("oncalls_retrieved", count=len(response.oncalls))
    return OperationResult.success(data=response)


def list_services(limit: Optional[int] = None, offset: int = 0) -> OperationResult:
    page_limit = limit or get_settings().feat_pagerduty.PAGE_LIMIT
    log = logger.bind(operation="list_services", limit=page_limit, offset=offset)

    try:
        response = get_pagerduty_client().get_services(
            limit=page_limit, offset=offset
        )
    except PagerDutyError as e:
        log.warning("services_retrieval_failed", error=str(e))
        return classify_pagerduty_error(e)

    log.info("services_retrieved", count=len(response.services))
    return OperationResult.success(data=response)


def create_incident(
    title: str,
    description: str,
    service_id: str,
    assignee_ids: Optional[Sequence[str]] = None,
) -> OperationResult:
    """
    Open an incident on a PagerDuty service.

    Returns:
        OperationResult with the created Incident or a classified error
    """
    if not title or not title.strip():
        return OperationResult.permanent_error(
            "Incident title is required", error_code="INVALID_REQUEST"
        )
    if not service_id or not service_id.strip():
        return OperationResult.permanent_error(
            "Service ID is required", error_code="INVALID_REQUEST"
        )

    assignees = [a for a in (assignee_ids or []) if a]
    log = logger.bind(
        operation="create_incident", service_id=service_id, assignees=len(assignees)
    )

    try:
        incident = get_pagerduty_client().create_incident(
            title=title,
            description=description,
            service_id=service_id,
            assignee_ids=assignees,
        )
    except PagerDutyError as e:
        log.warning("incident_creation_failed", error=str(e))
        return classify_pagerduty_error(e)

    log.info("incident_created", incident_id=incident.id)
    return OperationResult.success(data=incident, message="Incident created")
