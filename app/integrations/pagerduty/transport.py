"""HTTP transport used by the PagerDuty client.

The client builds an ``HttpRequest`` and hands it to a ``Transport``. The
production transport wraps a ``requests.Session``; tests substitute a fake
that records requests and returns canned responses.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol
from urllib.parse import urlencode

import requests

from infrastructure.logging import get_module_logger
from integrations.pagerduty.exceptions import TransportError

logger = get_module_logger()


@dataclass(frozen=True)
class HttpRequest:
    """A single outbound HTTP request.

    Attributes:
        method: HTTP method (GET, POST)
        url: Absolute URL without query string
        params: Ordered query parameters; repeated keys are allowed
        headers: Request headers
        body: Serialized request body, or None when there is no body
        timeout: Request timeout in seconds
    """

    method: str
    url: str
    params: list[tuple[str, str]] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: float = 30

    @property
    def query_string(self) -> str:
        return urlencode(self.params)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Sends an HttpRequest and returns the raw response.

    Implementations raise TransportError when no response was received.
    """

    def send(self, request: HttpRequest) -> HttpResponse: ...


class RequestsTransport:
    """Transport backed by a pooled ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session or requests.Session()
        self._logger = logger.bind(component="pagerduty_transport")

    def send(self, request: HttpRequest) -> HttpResponse:
        log = self._logger.bind(method=request.method, url=request.url)
        try:
            response = self._session.request(
                method=request.method,
                url=request.url,
                params=request.params or None,
                data=request.body,
                headers=request.headers,
                timeout=request.timeout,
            )
        except requests.Timeout as e:
            log.error("pagerduty_request_timeout", timeout=request.timeout)
            raise TransportError(
                f"PagerDuty request timed out after {request.timeout}s", cause=e
            ) from e
        except requests.RequestException as e:
            log.error("pagerduty_connection_error", error=str(e))
            raise TransportError(f"PagerDuty request failed: {e}", cause=e) from e

        return HttpResponse(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        self._session.close()
