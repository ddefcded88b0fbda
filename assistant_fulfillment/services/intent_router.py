"""Intent router: exact-name dispatch plus the surface capability guard."""

from __future__ import annotations

from typing import Callable, Mapping, MutableMapping, Sequence

from assistant_fulfillment.core.fragments import (
    ResponseFragment,
    RichContent,
    Text,
    fragment_kind,
    validate_response,
)
from assistant_fulfillment.core.logging import get_logger
from assistant_fulfillment.core.models import Capability, ConversationContext, IntentRequest

logger = get_logger(__name__)

IntentHandler = Callable[[ConversationContext, IntentRequest], Sequence[ResponseFragment]]

NEXT_PROMPT = "Which response would you like to see next?"

CAPABILITY_FALLBACKS: Mapping[Capability, str] = {
    Capability.SCREEN_OUTPUT: (
        "Sorry, try this on a screen device or select the phone surface in the simulator. "
        + NEXT_PROMPT
    ),
    Capability.MEDIA_RESPONSE_AUDIO: (
        "Sorry, this device does not support audio playback. " + NEXT_PROMPT
    ),
    Capability.WEB_BROWSER: (
        "Sorry, try this on a phone or select the phone surface in the simulator. "
        + NEXT_PROMPT
    ),
}


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class UnknownIntentError(IntentRouterError, LookupError):
    """Raised when no handler is registered for the requested intent."""

    def __init__(self, intent_name: str) -> None:
        super().__init__(f"No handler registered for intent {intent_name!r}")
        self.intent_name = intent_name


def _intent_key(intent_name: str) -> str:
    # Enum members hash by member name, so normalize to the display name.
    return str(getattr(intent_name, "value", intent_name))


def _missing_capability(fragment: RichContent, context: ConversationContext) -> Capability | None:
    for capability in fragment.required_capabilities:
        if not context.surface.has(capability):
            return capability
    return None


def apply_capability_guard(
    fragments: Sequence[ResponseFragment], context: ConversationContext
) -> list[ResponseFragment]:
    """Drop or replace rich content the surface cannot render.

    Accessory elements are dropped. Any other rich element with a missing
    capability replaces the whole response with a single text fallback.
    """
    guarded: list[ResponseFragment] = []
    for fragment in fragments:
        if isinstance(fragment, RichContent):
            missing = _missing_capability(fragment, context)
            if missing is not None:
                if not fragment.is_essential():
                    logger.info("dropping %s: surface lacks %s", fragment.kind, missing.value)
                    continue
                logger.info(
                    "surface lacks %s for %s; sending text fallback",
                    missing.value,
                    fragment.kind,
                )
                return [Text(CAPABILITY_FALLBACKS[missing])]
        guarded.append(fragment)
    return guarded


class IntentRouter:
    """Dispatch intents to registered handlers by exact display name."""

    def __init__(self, handlers: Mapping[str, IntentHandler] | None = None) -> None:
        self._handlers: MutableMapping[str, IntentHandler] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, intent_name: str, handler: IntentHandler) -> None:
        """Register ``handler`` for ``intent_name``; names must be unique."""

        key = _intent_key(intent_name)
        if key in self._handlers:
            raise IntentRouterError(f"Intent {key!r} already has a handler")
        self._handlers[key] = handler

    def unregister(self, intent_name: str) -> None:
        """Remove a handler if present."""

        self._handlers.pop(_intent_key(intent_name), None)

    def dispatch(
        self, request: IntentRequest, context: ConversationContext
    ) -> list[ResponseFragment]:
        """Run the handler for ``request.name`` and return its guarded fragments."""

        try:
            handler = self._handlers[_intent_key(request.name)]
        except KeyError as exc:
            raise UnknownIntentError(request.name) from exc

        fragments = list(handler(context, request))
        validate_response(fragments)
        guarded = apply_capability_guard(fragments, context)
        logger.info(
            "dispatched intent %s",
            request.name,
            extra={"fragments": [fragment_kind(fragment) for fragment in guarded]},
        )
        return guarded

    def handlers(self) -> Mapping[str, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)

    def intent_names(self) -> list[str]:
        """Return the registered intent names in sorted order."""

        return sorted(self._handlers)


def build_default_router() -> IntentRouter:
    """Return a router with every intent handler of this agent registered."""

    from .intents import INTENT_HANDLERS  # pylint: disable=import-outside-toplevel

    return IntentRouter(INTENT_HANDLERS)


__all__ = [
    "CAPABILITY_FALLBACKS",
    "IntentHandler",
    "IntentRouter",
    "IntentRouterError",
    "NEXT_PROMPT",
    "UnknownIntentError",
    "apply_capability_guard",
    "build_default_router",
]
