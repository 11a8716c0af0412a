"""Request authentication for the PagerDuty API routes.

The host proxy authenticates chat users and forwards their ID in a header.
Requests without it are rejected.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from infrastructure.logging import get_module_logger
from infrastructure.services import SettingsDep

logger = get_module_logger()


def require_user_id(request: Request, settings: SettingsDep) -> str:
    """Return the authenticated user ID or raise 401."""
    header = settings.server.USER_ID_HEADER
    user_id = request.headers.get(header, "").strip()
    if not user_id:
        logger.warning(
            "unauthenticated_request",
            path=request.url.path,
            method=request.method,
            header=header,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authorized"
        )
    return user_id


UserIdDep = Annotated[str, Depends(require_user_id)]
