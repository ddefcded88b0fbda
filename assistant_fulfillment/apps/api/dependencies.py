"""Shared FastAPI dependencies for token validation and service access."""

import hmac
from typing import Annotated, Optional

from fastapi import Header, HTTPException, status

from assistant_fulfillment.core.config import config
from assistant_fulfillment.services import ServiceContainer, runtime


def _validate_token(
    *,
    expected: Optional[str],
    authorization: Optional[str],
    alternate: Optional[str],
) -> None:
    """Check a bearer token, falling back to a custom header value."""
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not configured",
            headers={"WWW-Authenticate": "Bearer"},
        )

    provided = None
    if authorization and authorization.lower().startswith("bearer "):
        provided = authorization.split(" ", 1)[1].strip()
    elif alternate:
        provided = alternate.strip()

    if not provided:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not hmac.compare_digest(provided, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_webhook_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_webhook_token: Annotated[Optional[str], Header(alias="X-Webhook-Token")] = None,
) -> None:
    """Guard the fulfillment endpoint with the header configured in Dialogflow."""
    if not config.ENABLE_WEBHOOK_AUTH:
        return
    _validate_token(
        expected=config.WEBHOOK_AUTH_TOKEN,
        authorization=authorization,
        alternate=x_webhook_token,
    )


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_admin_token: Annotated[Optional[str], Header(alias="X-Admin-Token")] = None,
) -> None:
    """Token guard for the health and introspection endpoints."""
    if not config.ENABLE_ADMIN_AUTH:
        return
    _validate_token(
        expected=config.HEALTHCHECK_API_TOKEN,
        authorization=authorization,
        alternate=x_admin_token,
    )


def get_service_container() -> ServiceContainer:
    """Resolve the globally configured service container."""
    try:
        return runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc


__all__ = [
    "get_service_container",
    "require_healthcheck_token",
    "require_webhook_token",
]
