"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        USER_ID_HEADER: Header set by the host proxy to identify the
            authenticated chat user (default: X-User-ID)

    Example:
        ```python
        from infrastructure.services import get_settings

        header = get_settings().server.USER_ID_HEADER
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    USER_ID_HEADER: str = Field(default="X-User-ID", alias="USER_ID_HEADER")
