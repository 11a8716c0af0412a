"""Unit tests for server.server module."""

import pytest

from server import server


@pytest.mark.unit
def test_handler_is_fastapi_app():
    # Assert
    assert server.handler is not None
    assert server.handler.title == "PagerDuty Bot"
    assert server.handler.state.limiter is not None


@pytest.mark.unit
def test_main_exports_server_app():
    # Arrange
    import main

    # Assert
    assert main.server_app is server.handler


@pytest.mark.unit
def test_cors_middleware_configured():
    # Arrange
    app = server.handler

    # Assert
    middleware_classes = [m.cls.__name__ for m in app.user_middleware]
    assert "CORSMiddleware" in middleware_classes


@pytest.mark.unit
def test_api_router_included():
    """System routes sit at the root, PagerDuty routes under /api/v1."""
    # Arrange
    app = server.handler

    # Act
    route_paths = {str(route.path) for route in app.routes}

    # Assert
    assert {
        "/version",
        "/health",
        "/api/v1/status",
        "/api/v1/schedules",
        "/api/v1/oncalls",
        "/api/v1/schedule",
        "/api/v1/services",
        "/api/v1/incidents",
    } <= route_paths
