"""PagerDuty REST API v2 client.

Stateless client over a pluggable HTTP transport. Every public method issues
exactly one HTTP request, returns a typed model on success, and raises one
of the exceptions in ``integrations.pagerduty.exceptions`` otherwise.
Requests are never retried.

Example:
    client = PagerDutyClient(api_token=settings.pagerduty.PAGERDUTY_API_TOKEN)
    oncalls = client.get_current_oncalls().oncalls
"""

import json
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Optional, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from infrastructure.logging import get_module_logger
from integrations.pagerduty.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
)
from integrations.pagerduty.models import (
    Assignment,
    AssigneeReference,
    CreateIncidentRequest,
    CreateIncidentResponse,
    ErrorResponse,
    Incident,
    OnCallsResponse,
    ScheduleDetail,
    ScheduleResponse,
    SchedulesResponse,
    ServiceReference,
    ServicesResponse,
)
from integrations.pagerduty.transport import (
    HttpRequest,
    RequestsTransport,
    Transport,
)

logger = get_module_logger()

DEFAULT_BASE_URL = "https://api.pagerduty.com"
API_VERSION = "2"
TIMEOUT = 30

QueryParams = Mapping[str, Union[str, Sequence[str]]]
ModelT = TypeVar("ModelT", bound=BaseModel)


def _flatten_params(params: Optional[QueryParams]) -> list[tuple[str, str]]:
    """Turn a multi-map into ordered (key, value) pairs, keeping repeated keys."""
    pairs: list[tuple[str, str]] = []
    if not params:
        return pairs
    for key, value in params.items():
        if isinstance(value, str):
            pairs.append((key, value))
        else:
            pairs.extend((key, str(v)) for v in value)
    return pairs


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as RFC 3339 in UTC. Naive values are taken as UTC."""
    return _as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


class PagerDutyClient:
    """Client for the PagerDuty REST API.

    Holds only immutable configuration, so one instance may be shared
    between threads. Build a new client when the configuration changes.

    Args:
        api_token: PagerDuty REST API token. Must not be empty.
        base_url: API base URL. Defaults to DEFAULT_BASE_URL when empty.
        transport: HTTP transport. Defaults to a requests-backed transport.
        timeout: Per-request timeout in seconds.

    Raises:
        ConfigurationError: If api_token is empty.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = "",
        transport: Optional[Transport] = None,
        timeout: float = TIMEOUT,
    ) -> None:
        if not api_token or not api_token.strip():
            raise ConfigurationError("PagerDuty API token is required")
        self._api_token = api_token
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport or RequestsTransport()
        self._logger = logger.bind(component="pagerduty_client")

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": f"Token token={self._api_token}",
            "Accept": f"application/vnd.pagerduty+json;version={API_VERSION}",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        payload: Optional[BaseModel] = None,
    ) -> bytes:
        """Send one request and return the body of a successful response.

        Raises:
            TransportError: No response was received.
            APIError: Status >= 400 with a PagerDuty error envelope.
            HTTPStatusError: Status >= 400 without a usable envelope.
        """
        body = None
        if payload is not None:
            body = json.dumps(
                payload.model_dump(mode="json", exclude_none=True)
            ).encode("utf-8")

        request = HttpRequest(
            method=method,
            url=f"{self.base_url}{path}",
            params=_flatten_params(params),
            headers=self._headers(body is not None),
            body=body,
            timeout=self.timeout,
        )
        log = self._logger.bind(method=method, path=path)
        log.debug("pagerduty_request", query=request.query_string)

        response = self._transport.send(request)
        log = log.bind(status_code=response.status_code)

        if response.status_code >= 400:
            try:
                envelope = ErrorResponse.model_validate_json(response.body)
            except ValidationError:
                envelope = None
            if envelope is not None and envelope.error.message:
                log.warning(
                    "pagerduty_api_error",
                    error=envelope.error.message,
                    code=envelope.error.code,
                )
                raise APIError(
                    envelope.error.message,
                    code=envelope.error.code,
                    status_code=response.status_code,
                    errors=envelope.error.errors,
                )
            log.warning("pagerduty_http_error", body=response.text[:200])
            raise HTTPStatusError(response.status_code, response.text)

        log.debug("pagerduty_request_success")
        return response.body

    def _decode(self, body: bytes, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            self._logger.error(
                "pagerduty_decode_error",
                model=model.__name__,
                error_count=e.error_count(),
            )
            raise DecodeError(
                f"Failed to decode PagerDuty {model.__name__}", cause=e
            ) from e

    def get_schedules(self, limit: int = 25, offset: int = 0) -> SchedulesResponse:
        """List one page of schedules."""
        body = self._request(
            "GET", "/schedules", {"limit": str(limit), "offset": str(offset)}
        )
        return self._decode(body, SchedulesResponse)

    def get_schedule(
        self, schedule_id: str, since: datetime, until: datetime
    ) -> ScheduleDetail:
        """Fetch one schedule with its entries rendered between since and until.

        Raises:
            ValueError: If since is after until. No request is sent.
        """
        if _as_utc(since) > _as_utc(until):
            raise ValueError("since must not be after until")
        body = self._request(
            "GET",
            f"/schedules/{quote(schedule_id, safe='')}",
            {"since": format_timestamp(since), "until": format_timestamp(until)},
        )
        return self._decode(body, ScheduleResponse).schedule

    def get_oncalls(self, params: Optional[QueryParams] = None) -> OnCallsResponse:
        """List on-call entries matching the given filter.

        Args:
            params: Query multi-map, e.g. ``{"include[]": ["users", "schedules"]}``.
                None or empty uses the server's default filter.
        """
        body = self._request("GET", "/oncalls", params)
        return self._decode(body, OnCallsResponse)

    def get_current_oncalls(self) -> OnCallsResponse:
        """Current on-calls across all schedules, with users and schedules expanded."""
        return self.get_oncalls(
            {
                "time_zone": "UTC",
                "include[]": ["users", "schedules"],
                "earliest": "true",
            }
        )

    def get_oncalls_for_schedule(self, schedule_id: str) -> OnCallsResponse:
        return self.get_oncalls(
            {
                "schedule_ids[]": [schedule_id],
                "include[]": ["users"],
                "earliest": "true",
            }
        )

    def get_services(self, limit: int = 25, offset: int = 0) -> ServicesResponse:
        body = self._request(
            "GET", "/services", {"limit": str(limit), "offset": str(offset)}
        )
        return self._decode(body, ServicesResponse)

    def create_incident(
        self,
        title: str,
        description: str,
        service_id: str,
        assignee_ids: Optional[Sequence[str]] = None,
    ) -> Incident:
        """Create an incident on a service, optionally assigned to users.

        The ``assignments`` key is omitted entirely when no assignees are given.
        """
        assignments = None
        if assignee_ids:
            assignments = [
                Assignment(assignee=AssigneeReference(id=assignee_id))
                for assignee_id in assignee_ids
            ]
        request = CreateIncidentRequest(
            incident=Incident(
                title=title,
                description=description or None,
                service=ServiceReference(id=service_id),
                assignments=assignments,
            )
        )
        body = self._request("POST", "/incidents", payload=request)
        incident = self._decode(body, CreateIncidentResponse).incident
        self._logger.info(
            "pagerduty_incident_created",
            incident_id=incident.id,
            service_id=service_id,
            assignee_count=len(assignments or []),
        )
        return incident
