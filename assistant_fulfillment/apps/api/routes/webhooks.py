"""Dialogflow fulfillment webhook route."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from assistant_fulfillment.core.api_models import DialogflowWebhookRequest
from assistant_fulfillment.core.config import config
from assistant_fulfillment.core.exceptions import ProfileVerificationError
from assistant_fulfillment.core.logging import get_logger, session_context
from assistant_fulfillment.core.models import (
    ConversationContext,
    IntentRequest,
    RequestContext,
    UserProfile,
    extract_arguments,
)
from assistant_fulfillment.core.ports import ProfileVerifierPort
from assistant_fulfillment.services import ServiceContainer
from assistant_fulfillment.services.fulfillment import build_webhook_response
from assistant_fulfillment.services.intent_router import IntentRouter, UnknownIntentError

from ..dependencies import require_webhook_token

router = APIRouter()
logger = get_logger(__name__)


def _get_services(request: Request) -> ServiceContainer:
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise RuntimeError("Service container is not configured on app.state.")
    return services


def _require_intent_router(services: ServiceContainer) -> IntentRouter:
    intent_router = services.intent_router
    if intent_router is None:
        raise RuntimeError("IntentRouter has not been configured.")
    return intent_router


def _request_fields(request: Request) -> dict[str, str]:
    """Path and method recorded by the correlation middleware, for log lines."""
    request_context = getattr(request.state, "request_context", None)
    if not isinstance(request_context, RequestContext):
        return {}
    fields = {"path": request_context.path, "method": request_context.method}
    if request_context.user_agent:
        fields["user_agent"] = request_context.user_agent
    return fields


def build_intent_request(body: DialogflowWebhookRequest) -> IntentRequest:
    """Extract the intent name, slot parameters and helper arguments."""
    return IntentRequest(
        name=body.intent_name,
        parameters=body.query_result.parameters,
        arguments=extract_arguments(body.original_detect_intent_request.payload),
    )


def build_conversation_context(body: DialogflowWebhookRequest) -> ConversationContext:
    """Build the read-only conversation view from the Actions payload."""
    return ConversationContext.from_payload(
        body.original_detect_intent_request.payload,
        session_id=body.session_id,
        locale=body.query_result.language_code,
    )


async def resolve_profile(
    context: ConversationContext, verifier: Optional[ProfileVerifierPort]
) -> ConversationContext:
    """Attach verified sign-in claims to ``context`` when a token is present."""
    id_token = context.user.id_token
    if not id_token or verifier is None:
        return context
    try:
        claims = await run_in_threadpool(verifier.verify, id_token)
    except ProfileVerificationError:
        logger.warning("continuing without a user profile: sign-in token rejected")
        return context
    user = replace(context.user, profile=UserProfile.from_claims(claims))
    return replace(context, user=user)


@router.post("/fulfillment")
@router.post("/", include_in_schema=False)
async def handle_dialogflow_webhook(
    body: DialogflowWebhookRequest,
    request: Request,
    _: None = Depends(require_webhook_token),
) -> JSONResponse:
    """Fulfill one Dialogflow turn: dispatch the intent and render its fragments."""
    services = _get_services(request)
    intent_router = _require_intent_router(services)
    intent_request = build_intent_request(body)

    with session_context(body.session_id, intent_request.name):
        if config.FULFILLMENT_DEBUG:
            logger.info(
                "webhook request received",
                extra={
                    **_request_fields(request),
                    "body": body.model_dump(by_alias=True, mode="json"),
                },
            )
        context = await resolve_profile(
            build_conversation_context(body), services.profile_verifier
        )
        try:
            fragments = intent_router.dispatch(intent_request, context)
        except UnknownIntentError as exc:
            logger.error(
                "no handler registered for intent %s",
                exc.intent_name,
                extra=_request_fields(request),
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Unknown intent", "intent": exc.intent_name},
            )

        response = build_webhook_response(fragments)
        if config.FULFILLMENT_DEBUG:
            logger.info("webhook response built", extra={"body": response})
    return JSONResponse(content=response)


__all__ = [
    "build_conversation_context",
    "build_intent_request",
    "handle_dialogflow_webhook",
    "resolve_profile",
    "router",
]
