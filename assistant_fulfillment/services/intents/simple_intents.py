"""Speech-first intents: simple response, SSML, suggestion chips, and media."""

from __future__ import annotations

from typing import Mapping

from assistant_fulfillment.core.fragments import (
    MediaObject,
    ResponseFragment,
    Speech,
    Suggestions,
    Text,
)
from assistant_fulfillment.core.logging import get_logger
from assistant_fulfillment.core.models import ConversationContext, IntentRequest
from assistant_fulfillment.services.content import (
    ASSISTANT_LINK,
    MEDIA_ICON,
    MEDIA_SOURCE,
    SSML_EXAMPLE,
)
from assistant_fulfillment.services.intent_router import NEXT_PROMPT

logger = get_logger(__name__)

MEDIA_FINISHED_RESPONSE = "Hope you enjoyed the tune!"
MEDIA_UNKNOWN_RESPONSE = "Unknown media status received."


def simple_response(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Speech(
            "Here's an example of a simple response. "
            "Which type of response would you like to see next?",
            display_text="Here's a simple response. Which response would you like to see next?",
        )
    ]


def ssml(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [Speech(SSML_EXAMPLE, display_text="Here are SSML examples.")]


def suggestion_chips(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Text("These are suggestion chips."),
        Suggestions(
            titles=("Suggestion 1", "Suggestion 2", "Suggestion 3"),
            link_out=ASSISTANT_LINK,
            essential=True,
        ),
        Text("Which type of response would you like to see next?"),
    ]


def media_response(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Text("This is a media response example."),
        MediaObject(
            name="Jazz in Paris",
            url=MEDIA_SOURCE,
            description="A funky Jazz tune",
            icon=MEDIA_ICON,
        ),
        # Media responses need suggestions when the conversation stays open.
        Suggestions(titles=("Basic Card", "List", "Carousel", "Browsing Carousel")),
    ]


def media_status(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    """Acknowledge the MEDIA_STATUS event sent when playback stops."""
    del context
    result = request.argument("MEDIA_STATUS")
    status = result.get("status") if isinstance(result, Mapping) else None
    if status == "FINISHED":
        message = MEDIA_FINISHED_RESPONSE
    else:
        logger.info("unhandled media status: %s", status)
        message = MEDIA_UNKNOWN_RESPONSE
    return [Text(message), Text(NEXT_PROMPT)]


__all__ = [
    "MEDIA_FINISHED_RESPONSE",
    "MEDIA_UNKNOWN_RESPONSE",
    "media_response",
    "media_status",
    "simple_response",
    "ssml",
    "suggestion_chips",
]
