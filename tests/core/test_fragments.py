"""Tests for response fragments and response composition rules."""

from __future__ import annotations

import pytest

from assistant_fulfillment.core.exceptions import ResponseCompositionError
from assistant_fulfillment.core.fragments import (
    BasicCard,
    BrowseCarousel,
    BrowseCarouselItem,
    Button,
    CarouselSelect,
    ConfirmationPrompt,
    Image,
    LinkOutSuggestion,
    ListSelect,
    MediaObject,
    OptionItem,
    PermissionPrompt,
    SignInPrompt,
    Speech,
    Suggestions,
    Table,
    TableColumn,
    TableRow,
    Text,
    validate_response,
)
from assistant_fulfillment.core.models import Capability


def _options(count: int) -> tuple[OptionItem, ...]:
    return tuple(OptionItem(key=f"KEY_{i}", title=f"Item {i}") for i in range(count))


def test_speech_renders_ssml_with_display_text() -> None:
    speech = Speech("<speak>Hi</speak>", display_text="Hi")
    assert speech.to_google() == {
        "simpleResponse": {"textToSpeech": "<speak>Hi</speak>", "displayText": "Hi"}
    }
    assert speech.plain_text == "Hi"
    assert Text("Hello").to_google() == {"simpleResponse": {"textToSpeech": "Hello"}}


def test_basic_card_requires_text_or_image() -> None:
    with pytest.raises(ResponseCompositionError):
        BasicCard(title="Empty")

    card = BasicCard(
        text="Body",
        title="Title",
        image=Image(url="https://example.com/a.png", alt="A"),
        buttons=(Button("Open", "https://example.com"),),
        display="CROPPED",
    )
    rendered = card.to_google()["basicCard"]
    assert rendered["formattedText"] == "Body"
    assert rendered["image"] == {"url": "https://example.com/a.png", "accessibilityText": "A"}
    assert rendered["buttons"] == [
        {"title": "Open", "openUrlAction": {"url": "https://example.com"}}
    ]
    assert rendered["imageDisplayOptions"] == "CROPPED"
    assert BasicCard.required_capabilities == (Capability.SCREEN_OUTPUT,)


def test_table_rejects_rows_wider_than_columns() -> None:
    with pytest.raises(ResponseCompositionError):
        Table(columns=(TableColumn("A"),), rows=(TableRow(("1", "2")),))


def test_table_dividers_apply_to_every_row() -> None:
    table = Table(
        columns=(TableColumn("A", align="CENTER"), TableColumn("B")),
        rows=(TableRow(("1", "2")), TableRow(("3", "4"))),
        dividers=True,
    )
    card = table.to_google()["tableCard"]
    assert card["columnProperties"][0] == {"header": "A", "horizontalAlignment": "CENTER"}
    assert all(row["dividerAfter"] for row in card["rows"])
    assert card["rows"][0]["cells"] == [{"text": "1"}, {"text": "2"}]


@pytest.mark.parametrize(
    ("factory", "count"),
    [
        (lambda items: ListSelect(items=items), 1),
        (lambda items: ListSelect(items=items), 31),
        (lambda items: CarouselSelect(items=items), 11),
    ],
)
def test_selection_item_bounds(factory, count) -> None:
    with pytest.raises(ResponseCompositionError):
        factory(_options(count))


def test_selection_keys_must_be_unique() -> None:
    items = (OptionItem(key="SAME", title="A"), OptionItem(key="SAME", title="B"))
    with pytest.raises(ResponseCompositionError):
        CarouselSelect(items=items)


def test_list_select_renders_option_system_intent() -> None:
    rendered = ListSelect(items=_options(2), title="List Title").to_google()
    assert rendered["intent"] == "actions.intent.OPTION"
    data = rendered["data"]
    assert data["@type"] == "type.googleapis.com/google.actions.v2.OptionValueSpec"
    assert data["listSelect"]["title"] == "List Title"
    assert data["listSelect"]["items"][1]["optionInfo"] == {"key": "KEY_1", "synonyms": []}


def test_browse_carousel_needs_screen_and_browser() -> None:
    items = tuple(BrowseCarouselItem(f"T{i}", f"https://example.com/{i}") for i in range(2))
    carousel = BrowseCarousel(items=items)
    assert carousel.required_capabilities == (
        Capability.SCREEN_OUTPUT,
        Capability.WEB_BROWSER,
    )
    assert len(carousel.to_google()["carouselBrowse"]["items"]) == 2
    with pytest.raises(ResponseCompositionError):
        BrowseCarousel(items=items[:1])


def test_suggestion_limits() -> None:
    with pytest.raises(ResponseCompositionError):
        Suggestions(titles=tuple(str(i) for i in range(9)))
    with pytest.raises(ResponseCompositionError):
        Suggestions(titles=("x" * 26,))
    with pytest.raises(ResponseCompositionError):
        Suggestions()


def test_suggestions_render_chips_and_link() -> None:
    chips = Suggestions(
        titles=("Basic Card",),
        link_out=LinkOutSuggestion("Assistant", "https://assistant.google.com/"),
    )
    assert chips.to_google() == {
        "suggestions": [{"title": "Basic Card"}],
        "linkOutSuggestion": {
            "destinationName": "Assistant",
            "url": "https://assistant.google.com/",
        },
    }
    assert chips.primary is False
    assert chips.is_essential() is False
    assert Suggestions(titles=("A",), essential=True).is_essential() is True


def test_media_object_renders_audio_response() -> None:
    media = MediaObject(name="Jazz", url="https://example.com/jazz.mp3", description="Song")
    rendered = media.to_google()["mediaResponse"]
    assert rendered["mediaType"] == "AUDIO"
    assert rendered["mediaObjects"][0]["contentUrl"] == "https://example.com/jazz.mp3"
    assert media.required_capabilities == (Capability.MEDIA_RESPONSE_AUDIO,)


def test_prompts_need_no_capability() -> None:
    sign_in = SignInPrompt("To get your account details")
    assert sign_in.required_capabilities == ()
    assert sign_in.to_google() == {
        "intent": "actions.intent.SIGN_IN",
        "data": {
            "@type": "type.googleapis.com/google.actions.v2.SignInValueSpec",
            "optContext": "To get your account details",
        },
    }
    permission = PermissionPrompt("To address you", ("NAME",)).to_google()
    assert permission["data"]["permissions"] == ["NAME"]
    confirmation = ConfirmationPrompt("Can you confirm?").to_google()
    assert confirmation["data"]["dialogSpec"] == {"requestConfirmationText": "Can you confirm?"}


def test_validate_response_rules() -> None:
    card = BasicCard(text="Body")
    validate_response([Text("Hi"), card, Suggestions(titles=("A",))])

    with pytest.raises(ResponseCompositionError):
        validate_response([])
    with pytest.raises(ResponseCompositionError):
        validate_response([card, ListSelect(items=_options(2))])
    with pytest.raises(ResponseCompositionError):
        validate_response([Suggestions(titles=("A",)), Suggestions(titles=("B",))])
    with pytest.raises(ResponseCompositionError):
        validate_response([Text("Hi"), "raw string"])  # type: ignore[list-item]
