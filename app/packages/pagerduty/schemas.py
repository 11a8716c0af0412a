"""Pydantic schemas for the pagerduty package HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class CreateIncidentBody(BaseModel):
    """Request to open a PagerDuty incident."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Database latency above threshold",
                "description": "p99 over 2s for 10 minutes",
                "service_id": "PSVC123",
                "assignee_ids": ["PUSER1", "PUSER2"],
            }
        }
    )

    title: str = Field(..., min_length=1, description="Incident title")
    description: str = Field("", description="Incident details")
    service_id: str = Field(..., min_length=1, description="PagerDuty service ID")
    assignee_ids: list[str] = Field(
        default_factory=list, description="PagerDuty user IDs to assign"
    )


class ConfigurationStatus(BaseModel):
    """Whether the PagerDuty integration is usable."""

    configured: bool = Field(..., description="True when an API token is set")
    base_url: str = Field(..., description="PagerDuty API base URL in use")
