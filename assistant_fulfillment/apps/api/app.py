"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from assistant_fulfillment import FULFILLMENT_VERSION
from assistant_fulfillment.apps.api.middleware import CorrelationIdMiddleware
from assistant_fulfillment.core.exceptions import ResponseCompositionError
from assistant_fulfillment.core.logging import get_logger
from assistant_fulfillment.services import ServiceContainer, runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the service container and report what the webhook serves."""
    logger.info("Initializing fulfillment webhook...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        if services.intent_router is not None:
            logger.info("%d intents registered.", len(services.intent_router.intent_names()))
        if services.profile_verifier is None:
            logger.info("sign-in token verification disabled (ACTIONS_CLIENT_ID not set).")
    yield
    logger.info("fulfillment webhook stopped.")


async def _composition_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("handler produced an invalid response for %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Invalid response composition"},
    )


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(
        title="Assistant Fulfillment",
        version=FULFILLMENT_VERSION,
        lifespan=lifespan,
    )
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_exception_handler(ResponseCompositionError, _composition_error_handler)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, webhooks  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(webhooks.router)
    return app


__all__ = ["create_app", "lifespan"]
