"""FastAPI routes for the pagerduty package.

Mounted under /api/v1. Every route requires the authenticated user header.
"""

from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.dependencies.auth import require_user_id
from api.dependencies.rate_limits import get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.services import ConfigurationStoreDep
from integrations.pagerduty import DEFAULT_BASE_URL
from integrations.pagerduty.models import (
    CreateIncidentResponse,
    OnCallsResponse,
    ScheduleResponse,
    SchedulesResponse,
    ServicesResponse,
)
from packages.pagerduty import service
from packages.pagerduty.schemas import ConfigurationStatus, CreateIncidentBody

logger = get_module_logger()
limiter = get_limiter()
router = APIRouter(tags=["PagerDuty"], dependencies=[Depends(require_user_id)])


def _raise_for_result(result: OperationResult, failure: str) -> NoReturn:
    """Translate a failed OperationResult into an HTTPException."""
    log = logger.bind(status=result.status.value, error_code=result.error_code)

    if result.status == OperationStatus.NOT_CONFIGURED:
        log.warning("pagerduty_not_configured")
        raise HTTPException(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            detail="PagerDuty is not configured",
        )
    if result.error_code == "INVALID_REQUEST":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=result.message
        )
    if result.status == OperationStatus.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=result.message
        )
    if result.status == OperationStatus.UNAUTHORIZED:
        log.error("pagerduty_credentials_rejected", error=result.message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"{failure}: {result.message}",
        )
    if result.is_transient:
        log.warning("pagerduty_unavailable", error=result.message)
        headers = None
        if result.retry_after:
            headers = {"Retry-After": str(result.retry_after)}
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{failure}: {result.message}",
            headers=headers,
        )

    log.error("pagerduty_request_failed", error=result.message)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{failure}: {result.message}",
    )


@router.get(
    "/status",
    response_model=ConfigurationStatus,
    summary="PagerDuty configuration status",
)
def get_status(store: ConfigurationStoreDep) -> ConfigurationStatus:
    configuration = store.get_configuration()
    return ConfigurationStatus(
        configured=configuration.is_configured,
        base_url=configuration.api_base_url or DEFAULT_BASE_URL,
    )


@router.get(
    "/schedules",
    response_model=SchedulesResponse,
    response_model_exclude_none=True,
    summary="List schedules",
)
def get_schedules() -> SchedulesResponse:
    result = service.list_schedules()
    if not result.is_success:
        _raise_for_result(result, "Failed to retrieve schedules")
    return result.data


@router.get(
    "/oncalls",
    response_model=OnCallsResponse,
    response_model_exclude_none=True,
    summary="List current on-calls",
)
def get_oncalls(
    schedule_id: Optional[str] = Query(
        None, description="Restrict to a single schedule"
    ),
) -> OnCallsResponse:
    result = service.list_oncalls(schedule_id=schedule_id or None)
    if not result.is_success:
        _raise_for_result(result, "Failed to retrieve on-call users")
    return result.data


@router.get(
    "/schedule",
    response_model=ScheduleResponse,
    response_model_exclude_none=True,
    summary="Get schedule details",
)
def get_schedule(
    schedule_id: str = Query("", alias="id", description="PagerDuty schedule ID"),
    days: Optional[int] = Query(
        None,
        ge=0,
        le=service.MAX_SCHEDULE_WINDOW_DAYS,
        description="Look-ahead window in days",
    ),
) -> ScheduleResponse:
    result = service.get_schedule_details(schedule_id, days=days)
    if not result.is_success:
        _raise_for_result(result, "Failed to retrieve schedule")
    return ScheduleResponse(schedule=result.data)


@router.get(
    "/services",
    response_model=ServicesResponse,
    response_model_exclude_none=True,
    summary="List services",
)
def get_services() -> ServicesResponse:
    result = service.list_services()
    if not result.is_success:
        _raise_for_result(result, "Failed to retrieve services")
    return result.data


@router.post(
    "/incidents",
    response_model=CreateIncidentResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create an incident",
)
@limiter.limit("20/minute")
def post_incident(
    request: Request,  # pylint: disable=unused-argument
    body: CreateIncidentBody,
) -> CreateIncidentResponse:
    result = service.create_incident(
        title=body.title,
        description=body.description,
        service_id=body.service_id,
        assignee_ids=body.assignee_ids,
    )
    if not result.is_success:
        _raise_for_result(result, "Failed to create incident")
    return CreateIncidentResponse(incident=result.data)
