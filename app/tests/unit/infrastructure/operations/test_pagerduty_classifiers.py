"""Unit tests for classify_pagerduty_error.

Tests cover:
- Configuration and transport failures
- API error envelopes by HTTP status
- Bare HTTP status errors
- Decode errors and unknown exceptions
"""

import pytest

from infrastructure.operations.classifiers import (
    DECODE_ERROR_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    classify_pagerduty_error,
)
from infrastructure.operations.status import OperationStatus
from integrations.pagerduty.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)


@pytest.mark.unit
class TestClassifyPagerDutyError:
    def test_configuration_error_is_not_configured(self):
        result = classify_pagerduty_error(ConfigurationError("no token"))

        assert result.status == OperationStatus.NOT_CONFIGURED
        assert result.error_code == "NOT_CONFIGURED"
        assert result.message == NOT_CONFIGURED_MESSAGE

    def test_transport_error_is_transient(self):
        result = classify_pagerduty_error(TransportError("connection refused"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.is_transient
        assert result.error_code == "TRANSPORT_ERROR"
        assert "connection refused" in result.message

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_api_error_auth_statuses_are_unauthorized(self, status_code):
        exc = APIError("Unauthorized", code=2010, status_code=status_code)

        result = classify_pagerduty_error(exc)

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.message == "Unauthorized"

    def test_api_error_404_is_not_found(self):
        exc = APIError("Not Found", code=2100, status_code=404)

        result = classify_pagerduty_error(exc)

        assert result.status == OperationStatus.NOT_FOUND
        assert result.message == "Not Found"

    def test_api_error_429_is_rate_limited(self):
        exc = APIError("Rate Limit Exceeded", code=2020, status_code=429)

        result = classify_pagerduty_error(exc)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "RATE_LIMITED"
        assert result.retry_after == 60

    def test_api_error_500_is_transient(self):
        exc = APIError("Internal Error", code=0, status_code=500)

        result = classify_pagerduty_error(exc)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "SERVER_ERROR"

    def test_api_error_400_is_permanent_with_verbatim_message(self):
        exc = APIError("Invalid Input Provided", code=2001, status_code=400)

        result = classify_pagerduty_error(exc)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "PAGERDUTY_API_ERROR"
        assert result.message == "Invalid Input Provided"

    def test_http_status_error_uses_status_in_message(self):
        result = classify_pagerduty_error(HTTPStatusError(502, "<html>bad</html>"))

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.message == "PagerDuty returned HTTP 502"
        assert "<html>" not in result.message

    def test_http_status_error_4xx_is_permanent(self):
        result = classify_pagerduty_error(HTTPStatusError(418, "teapot"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "HTTP_STATUS_ERROR"

    def test_decode_error_is_permanent_with_generic_message(self):
        result = classify_pagerduty_error(DecodeError("bad field schedules.0.name"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "DECODE_ERROR"
        assert result.message == DECODE_ERROR_MESSAGE
        assert not result.is_transient

    def test_unknown_exception_is_permanent(self):
        result = classify_pagerduty_error(RuntimeError("boom"))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "UNKNOWN_ERROR"
