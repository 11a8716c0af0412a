"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.pagerduty import PagerDutyFeatureSettings

__all__ = [
    "PagerDutyFeatureSettings",
]
