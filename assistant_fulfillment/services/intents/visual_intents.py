"""Screen intents: cards, tables, lists, carousels and their selection events."""

from __future__ import annotations

from assistant_fulfillment.core.fragments import (
    BasicCard,
    BrowseCarousel,
    Button,
    CarouselSelect,
    Image,
    ListSelect,
    ResponseFragment,
    Suggestions,
    Table,
    Text,
)
from assistant_fulfillment.core.models import ConversationContext, IntentRequest
from assistant_fulfillment.services.content import (
    ADVANCED_TABLE_BUTTON,
    ADVANCED_TABLE_COLUMNS,
    ADVANCED_TABLE_ROWS,
    ASSISTANT_URL,
    BASIC_CARD_TEXT,
    BROWSE_ITEMS,
    DEMO_SUGGESTIONS,
    IMG_URL_AOG,
    NO_SELECTION_RESPONSE,
    SELECTED_ITEM_RESPONSES,
    SELECTION_ITEMS,
    SIMPLE_TABLE_COLUMNS,
    SIMPLE_TABLE_ROWS,
)
from assistant_fulfillment.services.intent_router import NEXT_PROMPT


def basic_card(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [
        Text("Here's an example of a basic card."),
        BasicCard(
            text=BASIC_CARD_TEXT,
            subtitle="This is a subtitle",
            title="Title: this is a title",
            buttons=(Button(title="This is a button", url=ASSISTANT_URL),),
            image=Image(url=IMG_URL_AOG, alt="Image alternate text"),
            display="CROPPED",
        ),
        Text(NEXT_PROMPT),
        Suggestions(titles=DEMO_SUGGESTIONS),
    ]


def browsing_carousel(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Text('This is an example of a "Browsing Carousel"'),
        BrowseCarousel(items=BROWSE_ITEMS),
        Suggestions(titles=DEMO_SUGGESTIONS),
    ]


def simple_table_card(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Text("This is a simple table example."),
        Table(columns=SIMPLE_TABLE_COLUMNS, rows=SIMPLE_TABLE_ROWS, dividers=True),
        Text(NEXT_PROMPT),
        Suggestions(titles=DEMO_SUGGESTIONS),
    ]


def advanced_table_card(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Text("This is a table with all the possible fields."),
        Table(
            title="Table Title",
            subtitle="Table Subtitle",
            image=Image(url=IMG_URL_AOG, alt="Alt Text"),
            columns=ADVANCED_TABLE_COLUMNS,
            rows=ADVANCED_TABLE_ROWS,
            buttons=(ADVANCED_TABLE_BUTTON,),
        ),
        Text(NEXT_PROMPT),
        Suggestions(titles=DEMO_SUGGESTIONS),
    ]


def list_select(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [
        Text("This is a list example."),
        ListSelect(title="List Title", items=SELECTION_ITEMS),
    ]


def carousel_select(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [
        Text("This is a carousel example."),
        CarouselSelect(items=SELECTION_ITEMS),
    ]


def option_selected(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    """Answer the OPTION event for both the list and the carousel."""
    del context
    option = request.argument("OPTION", request.parameters.get("option"))
    response = NO_SELECTION_RESPONSE
    if isinstance(option, str):
        response = SELECTED_ITEM_RESPONSES.get(option, NO_SELECTION_RESPONSE)
    return [Text(response), Text(NEXT_PROMPT)]


__all__ = [
    "advanced_table_card",
    "basic_card",
    "browsing_carousel",
    "carousel_select",
    "list_select",
    "option_selected",
    "simple_table_card",
]
