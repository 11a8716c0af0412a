"""Fixtures for pagerduty package tests."""

import pytest

from infrastructure.persistence import InMemoryKVStore, PagerDutyKVStore
from integrations.pagerduty import ConfigurationError
from packages.pagerduty import commands, service


@pytest.fixture
def pd_settings(make_settings):
    return make_settings(PAGERDUTY_API_TOKEN="test-token")


@pytest.fixture
def schedule_cache():
    return PagerDutyKVStore(InMemoryKVStore())


@pytest.fixture
def pd_service(monkeypatch, pd_client, pd_settings, schedule_cache):
    """Wire the service layer to the fake-transport client."""
    monkeypatch.setattr(service, "get_pagerduty_client", lambda: pd_client)
    monkeypatch.setattr(service, "get_settings", lambda: pd_settings)
    monkeypatch.setattr(service, "get_schedule_cache", lambda: schedule_cache)
    monkeypatch.setattr(commands, "get_settings", lambda: pd_settings)
    return service


@pytest.fixture
def unconfigured_service(monkeypatch, pd_settings):
    def _raise():
        raise ConfigurationError("PagerDuty API token is required")

    monkeypatch.setattr(service, "get_pagerduty_client", _raise)
    monkeypatch.setattr(service, "get_settings", lambda: pd_settings)
    monkeypatch.setattr(commands, "get_settings", lambda: pd_settings)
    return service
