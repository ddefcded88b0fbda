"""Unit tests for intent dispatch and the surface capability guard."""

from __future__ import annotations

import pytest

from assistant_fulfillment.core.exceptions import ResponseCompositionError
from assistant_fulfillment.core.fragments import (
    BasicCard,
    BrowseCarousel,
    BrowseCarouselItem,
    CarouselSelect,
    ListSelect,
    MediaObject,
    SignInPrompt,
    Suggestions,
    Table,
    Text,
)
from assistant_fulfillment.core.intents import IntentName
from assistant_fulfillment.core.models import (
    Capability,
    ConversationContext,
    IntentRequest,
    Surface,
)
from assistant_fulfillment.services.intent_router import (
    CAPABILITY_FALLBACKS,
    IntentRouter,
    IntentRouterError,
    UnknownIntentError,
    apply_capability_guard,
)


def echo_handler(context: ConversationContext, request: IntentRequest):
    """Simple echo handler used for router tests."""
    del context
    return [Text(f"You asked for {request.name}")]


def _context(*capabilities: Capability) -> ConversationContext:
    return ConversationContext(surface=Surface.with_capabilities(*capabilities))


def test_dispatch_invokes_registered_handler(phone_context):
    """Router calls the registered handler and returns its fragments."""
    router = IntentRouter({"Simple Response": echo_handler})

    fragments = router.dispatch(IntentRequest("Simple Response"), phone_context)

    assert fragments == [Text("You asked for Simple Response")]


def test_enum_and_plain_names_resolve_to_same_handler(phone_context):
    """Enum members and display name strings address the same registration."""
    router = IntentRouter({IntentName.SSML: echo_handler})

    assert router.intent_names() == ["SSML"]
    assert router.dispatch(IntentRequest("SSML"), phone_context)
    with pytest.raises(IntentRouterError):
        router.register("SSML", echo_handler)


def test_dispatch_unknown_intent_raises(phone_context):
    """Router raises when no handler matches the requested intent."""
    router = IntentRouter({"List": echo_handler})

    with pytest.raises(UnknownIntentError) as excinfo:
        router.dispatch(IntentRequest("Not An Intent"), phone_context)

    assert excinfo.value.intent_name == "Not An Intent"
    assert isinstance(excinfo.value, LookupError)


def test_names_are_matched_exactly(phone_context):
    """Display names are case and whitespace sensitive."""
    router = IntentRouter({"Basic Card": echo_handler})

    for name in ("basic card", "Basic Card ", "BasicCard"):
        with pytest.raises(UnknownIntentError):
            router.dispatch(IntentRequest(name), phone_context)


def test_unregister_removes_handler(phone_context):
    router = IntentRouter({"List": echo_handler})
    router.unregister("List")
    router.unregister("List")

    assert router.handlers() == {}
    with pytest.raises(UnknownIntentError):
        router.dispatch(IntentRequest("List"), phone_context)


def test_dispatch_rejects_invalid_composition(phone_context):
    """Handlers returning nothing or two rich elements fail loudly."""
    router = IntentRouter(
        {
            "Empty": lambda context, request: [],
            "Double": lambda context, request: [
                BasicCard(text="one"),
                BasicCard(text="two"),
            ],
        }
    )

    with pytest.raises(ResponseCompositionError):
        router.dispatch(IntentRequest("Empty"), phone_context)
    with pytest.raises(ResponseCompositionError):
        router.dispatch(IntentRequest("Double"), phone_context)


def test_guard_replaces_screen_content_on_speaker(speaker_context):
    """A card on a speaker becomes a single text fallback."""
    fragments = [Text("Here's a card."), BasicCard(text="Body"), Text("Next?")]

    guarded = apply_capability_guard(fragments, speaker_context)

    assert guarded == [Text(CAPABILITY_FALLBACKS[Capability.SCREEN_OUTPUT])]


def test_guard_drops_accessory_suggestions(speaker_context):
    """Accessory chips disappear while the rest of the response survives."""
    fragments = [Text("Hello"), Suggestions(titles=("Basic Card",))]

    assert apply_capability_guard(fragments, speaker_context) == [Text("Hello")]


def test_guard_falls_back_for_essential_suggestions(speaker_context):
    fragments = [Text("Chips"), Suggestions(titles=("A",), essential=True)]

    guarded = apply_capability_guard(fragments, speaker_context)

    assert guarded == [Text(CAPABILITY_FALLBACKS[Capability.SCREEN_OUTPUT])]


def test_guard_reports_first_missing_capability():
    """Browse carousels check the screen before the web browser."""
    carousel = BrowseCarousel(
        items=(
            BrowseCarouselItem("One", "https://example.com/1"),
            BrowseCarouselItem("Two", "https://example.com/2"),
        )
    )

    no_browser = apply_capability_guard(
        [carousel], _context(Capability.SCREEN_OUTPUT, Capability.AUDIO_OUTPUT)
    )
    no_screen = apply_capability_guard([carousel], _context(Capability.AUDIO_OUTPUT))

    assert no_browser == [Text(CAPABILITY_FALLBACKS[Capability.WEB_BROWSER])]
    assert no_screen == [Text(CAPABILITY_FALLBACKS[Capability.SCREEN_OUTPUT])]


def test_guard_requires_media_playback_for_media():
    media = MediaObject(name="Jazz", url="https://example.com/jazz.mp3")

    guarded = apply_capability_guard(
        [Text("Play"), media], _context(Capability.SCREEN_OUTPUT, Capability.AUDIO_OUTPUT)
    )

    assert guarded == [Text(CAPABILITY_FALLBACKS[Capability.MEDIA_RESPONSE_AUDIO])]


def test_guard_keeps_prompts_on_any_surface():
    """Helper prompts need no capability."""
    fragments = [SignInPrompt("To get your account details")]

    assert apply_capability_guard(fragments, _context()) == fragments


def test_fallbacks_cover_exactly_the_declared_capabilities():
    """Every capability a fragment can require has a message, and no other."""
    declared = {
        capability
        for fragment_type in (
            BasicCard,
            BrowseCarousel,
            CarouselSelect,
            ListSelect,
            MediaObject,
            Suggestions,
            Table,
        )
        for capability in fragment_type.required_capabilities
    }

    assert set(CAPABILITY_FALLBACKS) == declared


def test_fallback_messages_offer_next_step():
    for message in CAPABILITY_FALLBACKS.values():
        assert message.endswith("Which response would you like to see next?")
