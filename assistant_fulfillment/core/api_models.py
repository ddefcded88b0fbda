"""Pydantic models for the Dialogflow v2 webhook request body."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _DialogflowModel(BaseModel):
    """Accept camelCase wire names and ignore fields we do not read."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MatchedIntent(_DialogflowModel):
    """Intent matched by Dialogflow for this turn."""

    name: str = Field(default="", description="Intent resource name")
    display_name: str = Field(..., alias="displayName", description="Intent display name")


class QueryResult(_DialogflowModel):
    """Result of the conversational query."""

    query_text: str = Field(default="", alias="queryText")
    parameters: dict[str, Any] = Field(default_factory=dict)
    intent: MatchedIntent
    language_code: str | None = Field(default=None, alias="languageCode")
    output_contexts: list[dict[str, Any]] = Field(default_factory=list, alias="outputContexts")


class OriginalDetectIntentRequest(_DialogflowModel):
    """Request forwarded from the integration; ``payload`` is the Actions conversation."""

    source: str | None = None
    version: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)


class DialogflowWebhookRequest(_DialogflowModel):
    """Body POSTed by Dialogflow to the fulfillment webhook."""

    response_id: str | None = Field(default=None, alias="responseId")
    session: str | None = None
    query_result: QueryResult = Field(..., alias="queryResult")
    original_detect_intent_request: OriginalDetectIntentRequest = Field(
        default_factory=OriginalDetectIntentRequest, alias="originalDetectIntentRequest"
    )

    @property
    def intent_name(self) -> str:
        return self.query_result.intent.display_name

    @property
    def session_id(self) -> str | None:
        """Trailing segment of the session resource path."""
        if not self.session:
            return None
        return self.session.rsplit("/", 1)[-1]


__all__ = [
    "DialogflowWebhookRequest",
    "MatchedIntent",
    "OriginalDetectIntentRequest",
    "QueryResult",
]
