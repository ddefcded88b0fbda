"""Unit tests for webhooks router helpers."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping

from assistant_fulfillment.apps.api.routes import webhooks
from assistant_fulfillment.core.api_models import DialogflowWebhookRequest
from assistant_fulfillment.core.exceptions import ProfileVerificationError
from assistant_fulfillment.core.models import ConversationContext, User


class _StaticVerifier:
    def __init__(self, claims: Mapping[str, Any] | None) -> None:
        self._claims = claims
        self.calls = 0

    def verify(self, id_token: str) -> Mapping[str, Any]:
        del id_token
        self.calls += 1
        if self._claims is None:
            raise ProfileVerificationError("bad token")
        return self._claims


def test_body_parses_session_and_intent(webhook_body) -> None:
    """Wire names map onto the snake_case model fields."""
    body = DialogflowWebhookRequest.model_validate(
        webhook_body("Dashboard", parameters={"dashboard": "sleep"})
    )

    assert body.intent_name == "Dashboard"
    assert body.session_id == "session-abc"
    assert body.query_result.language_code == "en"


def test_build_intent_request_collects_arguments(webhook_body) -> None:
    raw = webhook_body(
        "List - OPTION",
        parameters={"option": "ignored"},
        arguments=[{"name": "OPTION", "textValue": "SELECTION_KEY_ONE"}],
    )
    request = webhooks.build_intent_request(DialogflowWebhookRequest.model_validate(raw))

    assert request.name == "List - OPTION"
    assert request.parameters == {"option": "ignored"}
    assert request.argument("OPTION") == "SELECTION_KEY_ONE"


def test_build_conversation_context_uses_query_locale(webhook_body) -> None:
    body = DialogflowWebhookRequest.model_validate(webhook_body("SSML"))

    context = webhooks.build_conversation_context(body)

    assert context.session_id == "session-abc"
    assert context.locale == "en"
    assert context.surface.screen_available is True


def test_body_without_original_request_has_empty_context() -> None:
    body = DialogflowWebhookRequest.model_validate(
        {"queryResult": {"intent": {"displayName": "SSML"}}}
    )

    context = webhooks.build_conversation_context(body)

    assert body.session_id is None
    assert context.surface.capabilities == frozenset()


def test_resolve_profile_skips_without_token() -> None:
    verifier = _StaticVerifier({"name": "Jordan"})
    context = ConversationContext()

    resolved = asyncio.run(webhooks.resolve_profile(context, verifier))

    assert resolved is context
    assert verifier.calls == 0


def test_resolve_profile_attaches_claims() -> None:
    context = ConversationContext(user=User(id_token="token"))

    resolved = asyncio.run(webhooks.resolve_profile(context, _StaticVerifier({"name": "Jordan"})))

    assert resolved.user.profile is not None
    assert resolved.user.profile.name == "Jordan"
    assert resolved.user.id_token == "token"


def test_resolve_profile_ignores_rejected_token() -> None:
    context = ConversationContext(user=User(id_token="token"))

    resolved = asyncio.run(webhooks.resolve_profile(context, _StaticVerifier(None)))

    assert resolved.user.profile is None
