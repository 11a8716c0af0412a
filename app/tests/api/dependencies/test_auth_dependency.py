import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.auth import UserIdDep
from infrastructure.services import get_settings


@pytest.fixture
def app(make_settings):
    app = FastAPI()
    settings = make_settings()

    @app.get("/whoami")
    def whoami(user_id: UserIdDep) -> dict:
        return {"user_id": user_id}

    app.dependency_overrides[get_settings] = lambda: settings
    return app


def test_user_id_is_returned(app):
    response = TestClient(app).get("/whoami", headers={"X-User-ID": " U123 "})

    assert response.status_code == 200
    assert response.json() == {"user_id": "U123"}


def test_missing_header_is_unauthorized(app):
    response = TestClient(app).get("/whoami")

    assert response.status_code == 401
    assert response.json() == {"detail": "Not authorized"}


def test_configured_header_name(app, make_settings):
    settings = make_settings(USER_ID_HEADER="X-Slack-User")
    app.dependency_overrides[get_settings] = lambda: settings
    client = TestClient(app)

    assert client.get("/whoami", headers={"X-User-ID": "U1"}).status_code == 401
    assert client.get("/whoami", headers={"X-Slack-User": "U1"}).status_code == 200
