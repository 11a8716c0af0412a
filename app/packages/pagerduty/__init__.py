"""PagerDuty package - schedules, on-calls, services and incidents."""

from packages.pagerduty.routes import router as pagerduty_router

__all__ = ["pagerduty_router"]
