"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real values are used when present.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep auth switches predictable regardless of a developer's .env
os.environ["ENABLE_WEBHOOK_AUTH"] = "false"
os.environ.setdefault("HEALTHCHECK_API_TOKEN", "test-health-token")

from assistant_fulfillment.core.models import (  # noqa: E402  pylint: disable=wrong-import-position
    Capability,
    ConversationContext,
    Surface,
)

PHONE_CAPABILITIES = (
    Capability.SCREEN_OUTPUT.value,
    Capability.AUDIO_OUTPUT.value,
    Capability.MEDIA_RESPONSE_AUDIO.value,
    Capability.WEB_BROWSER.value,
)
SPEAKER_CAPABILITIES = (
    Capability.AUDIO_OUTPUT.value,
    Capability.MEDIA_RESPONSE_AUDIO.value,
)


def build_conversation_payload(
    *,
    capabilities: Iterable[str] = PHONE_CAPABILITIES,
    arguments: Optional[list[dict[str, Any]]] = None,
    user: Optional[Mapping[str, Any]] = None,
    device: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """Return an Actions on Google conversation payload."""
    return {
        "user": dict(user or {"locale": "en-US", "userVerificationStatus": "VERIFIED"}),
        "conversation": {"conversationId": "conv-123", "type": "ACTIVE"},
        "inputs": [
            {
                "intent": "actions.intent.TEXT",
                "rawInputs": [{"inputType": "VOICE", "query": "hello"}],
                "arguments": list(arguments or []),
            }
        ],
        "surface": {"capabilities": [{"name": name} for name in capabilities]},
        "device": dict(device or {}),
    }


def build_webhook_body(
    intent: str,
    *,
    parameters: Optional[Mapping[str, Any]] = None,
    **conversation: Any,
) -> dict[str, Any]:
    """Return a Dialogflow v2 webhook request body for ``intent``."""
    return {
        "responseId": "response-1",
        "session": "projects/health-agent/agent/sessions/session-abc",
        "queryResult": {
            "queryText": intent.lower(),
            "parameters": dict(parameters or {}),
            "allRequiredParamsPresent": True,
            "intent": {
                "name": "projects/health-agent/agent/intents/0000",
                "displayName": intent,
            },
            "languageCode": "en",
        },
        "originalDetectIntentRequest": {
            "source": "google",
            "version": "2",
            "payload": build_conversation_payload(**conversation),
        },
    }


@pytest.fixture
def webhook_body() -> Callable[..., dict[str, Any]]:
    """Factory for Dialogflow webhook bodies."""
    return build_webhook_body


@pytest.fixture
def phone_context() -> ConversationContext:
    """Context for a phone: screen, audio, media playback and a browser."""
    return ConversationContext(surface=Surface.with_capabilities(*PHONE_CAPABILITIES))


@pytest.fixture
def speaker_context() -> ConversationContext:
    """Context for a smart speaker: audio only."""
    return ConversationContext(surface=Surface.with_capabilities(*SPEAKER_CAPABILITIES))


@pytest.fixture
def conversation_payload() -> Callable[..., dict[str, Any]]:
    """Factory for Actions on Google conversation payloads."""
    return build_conversation_payload


@pytest.fixture
def speaker_capabilities() -> tuple[str, ...]:
    return SPEAKER_CAPABILITIES


@pytest.fixture
def phone_capabilities() -> tuple[str, ...]:
    return PHONE_CAPABILITIES
