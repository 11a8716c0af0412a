import json

import pytest

from infrastructure.configuration import Settings
from integrations.pagerduty import PagerDutyClient
from integrations.pagerduty.transport import HttpRequest, HttpResponse


class FakeTransport:
    """Records requests and replays queued responses or exceptions."""

    def __init__(self):
        self.requests: list[HttpRequest] = []
        self._responses: list = []

    def queue(self, status_code=200, body=None):
        if body is None:
            raw = b""
        elif isinstance(body, (bytes, str)):
            raw = body.encode("utf-8") if isinstance(body, str) else body
        else:
            raw = json.dumps(body).encode("utf-8")
        self._responses.append(HttpResponse(status_code=status_code, body=raw))
        return self

    def fail_with(self, exc):
        self._responses.append(exc)
        return self

    def send(self, request):
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def pd_client(fake_transport):
    return PagerDutyClient(
        api_token="test-token",
        base_url="https://pd.example.com",
        transport=fake_transport,
    )


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from environment overrides, isolated from the host env."""

    def _make(**env):
        for key in (
            "PAGERDUTY_API_TOKEN",
            "PAGERDUTY_API_BASE_URL",
            "PAGERDUTY_SCHEDULE_WINDOW_DAYS",
            "PAGERDUTY_PAGE_LIMIT",
            "PAGERDUTY_DISPLAY_TIME_ZONE",
            "PAGERDUTY_CACHE_SCHEDULES",
            "USER_ID_HEADER",
            "APP_TOKEN",
            "SLACK_TOKEN",
            "PREFIX",
            "GIT_SHA",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, str(value))
        return Settings()

    return _make
