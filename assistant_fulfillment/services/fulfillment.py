"""Render response fragments into the Dialogflow webhook response body."""

from __future__ import annotations

from typing import Any, Sequence

from assistant_fulfillment.core.fragments import (
    ResponseFragment,
    RichItem,
    Speech,
    Suggestions,
    SystemIntent,
    Text,
)

# Actions on Google rejects a helper request without a simple response.
PLACEHOLDER_SPEECH = "PLACEHOLDER"


def expects_user_response(fragments: Sequence[ResponseFragment]) -> bool:
    """False when any speech or text fragment closes the conversation."""
    return not any(
        isinstance(fragment, (Speech, Text)) and fragment.final for fragment in fragments
    )


def fulfillment_text(fragments: Sequence[ResponseFragment]) -> str:
    """Plain-text rendering for integrations that only read ``fulfillmentText``."""
    return " ".join(
        fragment.plain_text for fragment in fragments if isinstance(fragment, (Speech, Text))
    )


def build_google_payload(fragments: Sequence[ResponseFragment]) -> dict[str, Any]:
    """Build the ``payload.google`` object from ``fragments`` in order."""
    items: list[dict[str, Any]] = []
    rich_response: dict[str, Any] = {"items": items}
    system_intent: dict[str, Any] | None = None

    for fragment in fragments:
        if isinstance(fragment, (Speech, Text, RichItem)):
            items.append(fragment.to_google())
        elif isinstance(fragment, Suggestions):
            rich_response.update(fragment.to_google())
        elif isinstance(fragment, SystemIntent):
            system_intent = fragment.to_google()

    if system_intent is not None and not any("simpleResponse" in item for item in items):
        items.insert(0, {"simpleResponse": {"textToSpeech": PLACEHOLDER_SPEECH}})

    payload: dict[str, Any] = {
        "expectUserResponse": expects_user_response(fragments),
        "richResponse": rich_response,
    }
    if system_intent is not None:
        payload["systemIntent"] = system_intent
    return payload


def build_webhook_response(fragments: Sequence[ResponseFragment]) -> dict[str, Any]:
    """Return the full Dialogflow v2 webhook response for ``fragments``."""
    return {
        "fulfillmentText": fulfillment_text(fragments),
        "payload": {"google": build_google_payload(fragments)},
    }


__all__ = [
    "PLACEHOLDER_SPEECH",
    "build_google_payload",
    "build_webhook_response",
    "expects_user_response",
    "fulfillment_text",
]
