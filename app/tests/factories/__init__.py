"""Test data factories for deterministic test data generation."""

from tests.factories.pagerduty import (
    make_pd_incident_response,
    make_pd_oncall,
    make_pd_oncalls_response,
    make_pd_schedule_detail,
    make_pd_schedules,
    make_pd_schedules_response,
    make_pd_services,
    make_pd_services_response,
    make_pd_users,
)

__all__ = [
    "make_pd_incident_response",
    "make_pd_oncall",
    "make_pd_oncalls_response",
    "make_pd_schedule_detail",
    "make_pd_schedules",
    "make_pd_schedules_response",
    "make_pd_services",
    "make_pd_services_response",
    "make_pd_users",
]
