"""Health and introspection routes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from assistant_fulfillment import FULFILLMENT_VERSION
from assistant_fulfillment.services import ServiceContainer

from ..dependencies import get_service_container, require_healthcheck_token

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Dialogflow fulfillment webhook. POST requests to /fulfillment."}


@router.get("/alive")
async def alive_check(_: None = Depends(require_healthcheck_token)) -> JSONResponse:
    """Authenticated health check endpoint for infrastructure monitoring."""
    return JSONResponse(
        {"status": "ok", "message": "Fulfillment is alive.", "version": FULFILLMENT_VERSION}
    )


@router.get("/intents")
async def list_intents(
    services: Annotated[ServiceContainer, Depends(get_service_container)],
    _: None = Depends(require_healthcheck_token),
) -> JSONResponse:
    """List the intent names this webhook can fulfill."""
    intent_router = services.intent_router
    names = intent_router.intent_names() if intent_router is not None else []
    return JSONResponse({"intents": names, "count": len(names)})


__all__ = ["router"]
