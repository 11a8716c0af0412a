"""Test fixtures for pagerduty integration tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.configuration import ConfigurationStore, PluginConfiguration
from infrastructure.persistence import InMemoryKVStore, PagerDutyKVStore
from infrastructure.services import get_configuration_store, get_settings
from packages.pagerduty import pagerduty_router, service
from utils.tests import create_test_app


@pytest.fixture(autouse=True)
def reset_rate_limits():
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture
def pd_settings(make_settings):
    return make_settings(PAGERDUTY_API_TOKEN="test-token")


@pytest.fixture
def configuration_store():
    return ConfigurationStore(
        PluginConfiguration(
            api_token="test-token", api_base_url="https://pd.example.com"
        )
    )


@pytest.fixture
def app(monkeypatch, pd_client, pd_settings, configuration_store):
    """FastAPI app with the pagerduty router wired to the fake transport."""
    monkeypatch.setattr(service, "get_pagerduty_client", lambda: pd_client)
    monkeypatch.setattr(service, "get_settings", lambda: pd_settings)
    monkeypatch.setattr(
        service, "get_schedule_cache", lambda: PagerDutyKVStore(InMemoryKVStore())
    )

    app = create_test_app(pagerduty_router, prefix="/api/v1")
    app.dependency_overrides[get_settings] = lambda: pd_settings
    app.dependency_overrides[get_configuration_store] = lambda: configuration_store
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as client:
        yield client
