"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger context binding
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_without_settings(self):
        """Settings are optional so the module logger can exist before config loads."""
        assert configure_logging() is not None

    def test_configure_logging_accepts_overrides(self, mock_settings):
        logger = configure_logging(
            settings=mock_settings, log_level="DEBUG", is_production=True
        )
        assert logger is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        configure_logging(settings=mock_settings)

        root_logger = logging.getLogger()
        assert root_logger.level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    def test_binds_component_and_module_path(self):
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_logging_methods_dont_raise(self, mock_settings):
        configure_logging(settings=mock_settings)
        log = get_module_logger().bind(schedule_id="PSCHED1")

        log.debug("schedule_requested")
        log.info("schedule_retrieved", entries=2)
        log.warning("schedule_retrieval_failed", error="timeout")
        log.error("pagerduty_request_failed", error_code="SERVER_ERROR")

    def test_exception_logging(self, mock_settings):
        configure_logging(settings=mock_settings)
        logger = get_module_logger()

        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("unexpected_error")
