"""Pydantic models for PagerDuty API responses and request bodies.

All models are immutable and ignore unknown fields so that additions to the
upstream API never break decoding. Optional nested structures default to
None and are dropped from outbound JSON with ``exclude_none``.
"""

from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PagerDutyModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class UserReference(PagerDutyModel):
    id: str = Field(..., description="PagerDuty user ID")
    type: str = Field("user_reference", description="Reference type")
    summary: str = Field("", description="Short display name")


class ContactMethod(PagerDutyModel):
    id: str = ""
    type: str = ""
    summary: str = ""
    label: str = ""
    address: str = ""


class User(PagerDutyModel):
    """PagerDuty user.

    Only ``id`` is guaranteed. On-call entries fetched without
    ``include[]=users`` carry a bare user reference, in which case the
    display name is only available through ``summary``.
    """

    id: str = Field(..., description="PagerDuty user ID")
    name: str = Field("", description="User full name")
    email: str = Field("", description="User email address")
    type: str = ""
    summary: str = ""
    description: Optional[str] = None
    role: str = ""
    time_zone: str = ""
    color: str = ""
    avatar_url: str = ""
    contact_methods: list[ContactMethod] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.summary or self.id


class ScheduleLayer(PagerDutyModel):
    """A rotation layer of a schedule."""

    id: str = ""
    name: str = ""
    start: datetime
    end: Optional[datetime] = None
    rotation_virtual_start: Optional[datetime] = None
    rotation_turn_length_seconds: int = Field(0, ge=0)
    users: list[UserReference] = Field(default_factory=list)

    @field_validator("users", mode="before")
    @classmethod
    def unwrap_layer_users(cls, v: Any) -> Any:
        """Accept both ``{"user": {...}}`` entries and bare user references."""
        if not isinstance(v, list):
            return v
        return [
            item["user"] if isinstance(item, dict) and "user" in item else item
            for item in v
        ]

    @model_validator(mode="after")
    def check_layer_bounds(self) -> "ScheduleLayer":
        if self.end is not None and self.end < self.start:
            raise ValueError("schedule layer ends before it starts")
        return self


class OverrideSubcycle(PagerDutyModel):
    start: datetime
    end: datetime


class RenderedScheduleEntry(PagerDutyModel):
    """A materialized shift. Timestamps are kept as the strings sent by the API."""

    user: User
    start: str
    end: str


class FinalSchedule(PagerDutyModel):
    name: str = ""
    rendered_schedule_entries: list[RenderedScheduleEntry] = Field(
        default_factory=list
    )


class Schedule(PagerDutyModel):
    id: str = Field(..., description="PagerDuty schedule ID")
    name: str = Field(..., description="Schedule name")
    description: Optional[str] = None
    time_zone: str = ""
    summary: str = ""
    schedule_layers: Optional[list[ScheduleLayer]] = None
    override_subcycle: Optional[OverrideSubcycle] = None
    final_schedule: Optional[FinalSchedule] = None


class ScheduleDetail(Schedule):
    """A single schedule fetched with a time window."""

    @property
    def rendered_entries(self) -> list[RenderedScheduleEntry]:
        if self.final_schedule is None:
            return []
        return self.final_schedule.rendered_schedule_entries


class ScheduleResponse(PagerDutyModel):
    schedule: ScheduleDetail


class ScheduleReference(PagerDutyModel):
    """Schedule attached to an on-call entry.

    Without ``include[]=schedules`` PagerDuty sends a reference carrying only
    ``id``, ``type``, ``summary`` and links, so ``name`` may be empty.
    """

    id: str = Field(..., description="PagerDuty schedule ID")
    type: str = ""
    name: str = ""
    summary: str = ""
    html_url: str = ""
    time_zone: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.summary or self.id


class EscalationPolicy(PagerDutyModel):
    id: str
    name: str = ""
    description: Optional[str] = None
    num_loops: int = 0


class OnCall(PagerDutyModel):
    """A user on call for a schedule or escalation policy.

    ``end`` is None for open-ended shifts. ``schedule`` is None when the
    on-call comes straight from an escalation policy rule, and is only a
    reference when fetched without ``include[]=schedules``.
    """

    user: User
    schedule: Optional[ScheduleReference] = None
    escalation_policy: Optional[EscalationPolicy] = None
    escalation_level: int = Field(0, ge=0)
    start: Optional[str] = None
    end: Optional[str] = None


class Service(PagerDutyModel):
    id: str
    name: str
    description: Optional[str] = None
    type: str = ""
    status: str = ""
    summary: str = ""


class ServiceReference(PagerDutyModel):
    id: str
    type: str = "service_reference"


class AssigneeReference(PagerDutyModel):
    id: str
    type: str = "user_reference"


class Assignment(PagerDutyModel):
    assignee: AssigneeReference


class Incident(PagerDutyModel):
    """Incident as sent to and echoed back by ``POST /incidents``."""

    type: str = "incident"
    title: str
    description: Optional[str] = None
    service: ServiceReference
    assignments: Optional[list[Assignment]] = None
    id: Optional[str] = None
    incident_number: Optional[int] = None
    status: Optional[str] = None
    urgency: Optional[str] = None
    created_at: Optional[str] = None
    html_url: Optional[str] = None


class CreateIncidentRequest(PagerDutyModel):
    incident: Incident


class CreateIncidentResponse(PagerDutyModel):
    incident: Incident


class ListResponse(PagerDutyModel):
    """Classic pagination envelope shared by all list endpoints.

    ``total`` is only reported when the request asked for it. When it is
    reported and ``more`` is false, the items of this page must fit within it.
    """

    items_field: ClassVar[str] = ""

    limit: int = 0
    offset: int = Field(0, ge=0)
    more: bool = False
    total: Optional[int] = None

    @property
    def items(self) -> list[Any]:
        return list(getattr(self, self.items_field, [])) if self.items_field else []

    @model_validator(mode="after")
    def check_page_bounds(self) -> "ListResponse":
        if self.total is not None and not self.more:
            if self.offset + len(self.items) > self.total:
                raise ValueError(
                    f"page exceeds total: offset={self.offset} "
                    f"items={len(self.items)} total={self.total}"
                )
        return self


class SchedulesResponse(ListResponse):
    items_field: ClassVar[str] = "schedules"

    schedules: list[Schedule] = Field(default_factory=list)


class OnCallsResponse(ListResponse):
    items_field: ClassVar[str] = "oncalls"

    oncalls: list[OnCall] = Field(default_factory=list)


class ServicesResponse(ListResponse):
    items_field: ClassVar[str] = "services"

    services: list[Service] = Field(default_factory=list)


class ErrorDetail(PagerDutyModel):
    message: str = ""
    code: int = 0
    errors: list[str] = Field(default_factory=list)


class ErrorResponse(PagerDutyModel):
    """Error envelope returned by PagerDuty for non-success statuses."""

    error: ErrorDetail
