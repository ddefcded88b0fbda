"""Response fragments produced by intent handlers.

A response is an ordered sequence of fragments: speech or text segments plus
rich elements. Each rich element knows the Actions on Google JSON it renders
to and which surface capabilities it needs; the dispatcher uses the latter to
swap in a text fallback on surfaces that cannot show it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Sequence, Union

from assistant_fulfillment.core.exceptions import ResponseCompositionError
from assistant_fulfillment.core.models import Capability

_SPEC_TYPE = "type.googleapis.com/google.actions.v2.{}"


@dataclass(frozen=True, slots=True)
class Speech:
    """Spoken output; ``text`` may be SSML wrapped in ``<speak>``."""

    text: str
    display_text: Optional[str] = None
    final: bool = False

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"textToSpeech": self.text}
        if self.display_text:
            payload["displayText"] = self.display_text
        return {"simpleResponse": payload}

    @property
    def plain_text(self) -> str:
        return self.display_text or self.text


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text spoken and shown as-is."""

    text: str
    final: bool = False

    def to_google(self) -> dict[str, Any]:
        return {"simpleResponse": {"textToSpeech": self.text}}

    @property
    def plain_text(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Image:
    url: str
    alt: str
    height: Optional[int] = None
    width: Optional[int] = None

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"url": self.url, "accessibilityText": self.alt}
        if self.height is not None:
            payload["height"] = self.height
        if self.width is not None:
            payload["width"] = self.width
        return payload


@dataclass(frozen=True, slots=True)
class Button:
    title: str
    url: str

    def to_google(self) -> dict[str, Any]:
        return {"title": self.title, "openUrlAction": {"url": self.url}}


class RichContent:
    """Base for every non-speech fragment.

    ``required_capabilities`` is checked in order, so the first missing one
    decides which fallback message the user hears.
    """

    __slots__ = ()

    required_capabilities: ClassVar[tuple[Capability, ...]] = ()
    # Primary elements are limited to one per turn.
    primary: ClassVar[bool] = True

    @property
    def kind(self) -> str:
        return type(self).__name__

    def is_essential(self) -> bool:
        """Whether losing this element means the response is no longer useful."""
        return True


class RichItem(RichContent):
    """Rich element rendered into ``richResponse.items``."""

    __slots__ = ()

    def to_google(self) -> dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError


class SystemIntent(RichContent):
    """Rich element rendered as a ``systemIntent`` helper request."""

    __slots__ = ()

    def to_google(self) -> dict[str, Any]:  # pragma: no cover - abstract
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class BasicCard(RichItem):
    required_capabilities: ClassVar[tuple[Capability, ...]] = (Capability.SCREEN_OUTPUT,)

    text: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image: Optional[Image] = None
    buttons: tuple[Button, ...] = ()
    display: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.text and self.image is None:
            raise ResponseCompositionError("basic card needs text or an image")

    def to_google(self) -> dict[str, Any]:
        card: dict[str, Any] = {}
        if self.title:
            card["title"] = self.title
        if self.subtitle:
            card["subtitle"] = self.subtitle
        if self.text:
            card["formattedText"] = self.text
        if self.image is not None:
            card["image"] = self.image.to_google()
        if self.buttons:
            card["buttons"] = [button.to_google() for button in self.buttons]
        if self.display:
            card["imageDisplayOptions"] = self.display
        return {"basicCard": card}


@dataclass(frozen=True, slots=True)
class TableColumn:
    header: str
    align: Optional[str] = None

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"header": self.header}
        if self.align:
            payload["horizontalAlignment"] = self.align
        return payload


@dataclass(frozen=True, slots=True)
class TableRow:
    cells: tuple[str, ...]
    divider_after: bool = False

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"cells": [{"text": cell} for cell in self.cells]}
        if self.divider_after:
            payload["dividerAfter"] = True
        return payload


@dataclass(frozen=True, slots=True)
class Table(RichItem):
    required_capabilities: ClassVar[tuple[Capability, ...]] = (Capability.SCREEN_OUTPUT,)

    columns: tuple[TableColumn, ...]
    rows: tuple[TableRow, ...]
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image: Optional[Image] = None
    buttons: tuple[Button, ...] = ()
    dividers: bool = False

    def __post_init__(self) -> None:
        width = len(self.columns)
        for row in self.rows:
            if width and len(row.cells) > width:
                raise ResponseCompositionError(
                    f"table row has {len(row.cells)} cells but only {width} columns"
                )

    def to_google(self) -> dict[str, Any]:
        card: dict[str, Any] = {
            "columnProperties": [column.to_google() for column in self.columns],
            "rows": [
                TableRow(row.cells, row.divider_after or self.dividers).to_google()
                for row in self.rows
            ],
        }
        if self.title:
            card["title"] = self.title
        if self.subtitle:
            card["subtitle"] = self.subtitle
        if self.image is not None:
            card["image"] = self.image.to_google()
        if self.buttons:
            card["buttons"] = [button.to_google() for button in self.buttons]
        return {"tableCard": card}


@dataclass(frozen=True, slots=True)
class OptionItem:
    """Selectable entry of a list or carousel, identified by ``key``."""

    key: str
    title: str
    description: Optional[str] = None
    synonyms: tuple[str, ...] = ()
    image: Optional[Image] = None

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "optionInfo": {"key": self.key, "synonyms": list(self.synonyms)},
            "title": self.title,
        }
        if self.description:
            payload["description"] = self.description
        if self.image is not None:
            payload["image"] = self.image.to_google()
        return payload


def _option_spec(select_key: str, select: dict[str, Any]) -> dict[str, Any]:
    return {
        "intent": "actions.intent.OPTION",
        "data": {"@type": _SPEC_TYPE.format("OptionValueSpec"), select_key: select},
    }


def _check_option_count(items: Sequence[OptionItem], minimum: int, maximum: int) -> None:
    if not minimum <= len(items) <= maximum:
        raise ResponseCompositionError(
            f"selection needs between {minimum} and {maximum} items, got {len(items)}"
        )
    keys = [item.key for item in items]
    if len(set(keys)) != len(keys):
        raise ResponseCompositionError("selection item keys must be unique")


@dataclass(frozen=True, slots=True)
class ListSelect(SystemIntent):
    required_capabilities: ClassVar[tuple[Capability, ...]] = (Capability.SCREEN_OUTPUT,)

    items: tuple[OptionItem, ...]
    title: Optional[str] = None

    def __post_init__(self) -> None:
        _check_option_count(self.items, 2, 30)

    def to_google(self) -> dict[str, Any]:
        select: dict[str, Any] = {"items": [item.to_google() for item in self.items]}
        if self.title:
            select["title"] = self.title
        return _option_spec("listSelect", select)


@dataclass(frozen=True, slots=True)
class CarouselSelect(SystemIntent):
    required_capabilities: ClassVar[tuple[Capability, ...]] = (Capability.SCREEN_OUTPUT,)

    items: tuple[OptionItem, ...]

    def __post_init__(self) -> None:
        _check_option_count(self.items, 2, 10)

    def to_google(self) -> dict[str, Any]:
        return _option_spec(
            "carouselSelect", {"items": [item.to_google() for item in self.items]}
        )


@dataclass(frozen=True, slots=True)
class BrowseCarouselItem:
    title: str
    url: str
    description: Optional[str] = None
    image: Optional[Image] = None
    footer: Optional[str] = None

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": self.title, "openUrlAction": {"url": self.url}}
        if self.description:
            payload["description"] = self.description
        if self.image is not None:
            payload["image"] = self.image.to_google()
        if self.footer:
            payload["footer"] = self.footer
        return payload


@dataclass(frozen=True, slots=True)
class BrowseCarousel(RichItem):
    required_capabilities: ClassVar[tuple[Capability, ...]] = (
        Capability.SCREEN_OUTPUT,
        Capability.WEB_BROWSER,
    )

    items: tuple[BrowseCarouselItem, ...]

    def __post_init__(self) -> None:
        if not 2 <= len(self.items) <= 10:
            raise ResponseCompositionError(
                f"browse carousel needs between 2 and 10 items, got {len(self.items)}"
            )

    def to_google(self) -> dict[str, Any]:
        return {"carouselBrowse": {"items": [item.to_google() for item in self.items]}}


@dataclass(frozen=True, slots=True)
class LinkOutSuggestion:
    name: str
    url: str

    def to_google(self) -> dict[str, Any]:
        return {"destinationName": self.name, "url": self.url}


@dataclass(frozen=True, slots=True)
class Suggestions(RichContent):
    """Suggestion chips shown under the response.

    Chips are an accessory unless ``essential`` is set: on a surface without a
    screen they are dropped instead of replacing the whole response.
    """

    required_capabilities: ClassVar[tuple[Capability, ...]] = (Capability.SCREEN_OUTPUT,)
    primary: ClassVar[bool] = False

    titles: tuple[str, ...] = ()
    link_out: Optional[LinkOutSuggestion] = None
    essential: bool = False

    def __post_init__(self) -> None:
        if not self.titles and self.link_out is None:
            raise ResponseCompositionError("suggestions need at least one chip")
        if len(self.titles) > 8:
            raise ResponseCompositionError("at most 8 suggestion chips are allowed")
        too_long = [title for title in self.titles if len(title) > 25]
        if too_long:
            raise ResponseCompositionError(f"suggestion chips over 25 characters: {too_long}")

    def is_essential(self) -> bool:
        return self.essential

    def to_google(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.titles:
            payload["suggestions"] = [{"title": title} for title in self.titles]
        if self.link_out is not None:
            payload["linkOutSuggestion"] = self.link_out.to_google()
        return payload


@dataclass(frozen=True, slots=True)
class MediaObject(RichItem):
    required_capabilities: ClassVar[tuple[Capability, ...]] = (
        Capability.MEDIA_RESPONSE_AUDIO,
    )

    name: str
    url: str
    description: Optional[str] = None
    icon: Optional[Image] = None

    def to_google(self) -> dict[str, Any]:
        media: dict[str, Any] = {"name": self.name, "contentUrl": self.url}
        if self.description:
            media["description"] = self.description
        if self.icon is not None:
            media["icon"] = self.icon.to_google()
        return {"mediaResponse": {"mediaType": "AUDIO", "mediaObjects": [media]}}


@dataclass(frozen=True, slots=True)
class SignInPrompt(SystemIntent):
    context: Optional[str] = None

    def to_google(self) -> dict[str, Any]:
        data: dict[str, Any] = {"@type": _SPEC_TYPE.format("SignInValueSpec")}
        if self.context:
            data["optContext"] = self.context
        return {"intent": "actions.intent.SIGN_IN", "data": data}


@dataclass(frozen=True, slots=True)
class PermissionPrompt(SystemIntent):
    context: str
    permissions: tuple[str, ...]

    def to_google(self) -> dict[str, Any]:
        return {
            "intent": "actions.intent.PERMISSION",
            "data": {
                "@type": _SPEC_TYPE.format("PermissionValueSpec"),
                "optContext": self.context,
                "permissions": list(self.permissions),
            },
        }


@dataclass(frozen=True, slots=True)
class DateTimePrompt(SystemIntent):
    initial: str
    date: Optional[str] = None
    time: Optional[str] = None

    def to_google(self) -> dict[str, Any]:
        dialog_spec: dict[str, Any] = {"requestDatetimeText": self.initial}
        if self.date:
            dialog_spec["requestDateText"] = self.date
        if self.time:
            dialog_spec["requestTimeText"] = self.time
        return {
            "intent": "actions.intent.DATETIME",
            "data": {
                "@type": _SPEC_TYPE.format("DateTimeValueSpec"),
                "dialogSpec": dialog_spec,
            },
        }


@dataclass(frozen=True, slots=True)
class PlacePrompt(SystemIntent):
    prompt: str
    context: str

    def to_google(self) -> dict[str, Any]:
        return {
            "intent": "actions.intent.PLACE",
            "data": {
                "@type": _SPEC_TYPE.format("PlaceValueSpec"),
                "dialogSpec": {
                    "extension": {
                        "@type": _SPEC_TYPE.format("PlaceValueSpec.PlaceDialogSpec"),
                        "permissionContext": self.context,
                        "requestPrompt": self.prompt,
                    }
                },
            },
        }


@dataclass(frozen=True, slots=True)
class ConfirmationPrompt(SystemIntent):
    prompt: str

    def to_google(self) -> dict[str, Any]:
        return {
            "intent": "actions.intent.CONFIRMATION",
            "data": {
                "@type": _SPEC_TYPE.format("ConfirmationValueSpec"),
                "dialogSpec": {"requestConfirmationText": self.prompt},
            },
        }


ResponseFragment = Union[Speech, Text, RichContent]


def fragment_kind(fragment: ResponseFragment) -> str:
    """Short label used in logs."""
    return type(fragment).__name__


def validate_response(fragments: Sequence[ResponseFragment]) -> None:
    """Raise ``ResponseCompositionError`` if ``fragments`` cannot form one turn."""
    if not fragments:
        raise ResponseCompositionError("a response needs at least one fragment")
    primary = [f for f in fragments if isinstance(f, RichContent) and f.primary]
    if len(primary) > 1:
        kinds = ", ".join(fragment_kind(f) for f in primary)
        raise ResponseCompositionError(f"only one rich element is allowed per turn, got {kinds}")
    suggestions = [f for f in fragments if isinstance(f, Suggestions)]
    if len(suggestions) > 1:
        raise ResponseCompositionError("only one set of suggestions is allowed per turn")
    for fragment in fragments:
        if not isinstance(fragment, (Speech, Text, RichContent)):
            raise ResponseCompositionError(f"unsupported fragment type {type(fragment)!r}")


__all__ = [
    "BasicCard",
    "BrowseCarousel",
    "BrowseCarouselItem",
    "Button",
    "CarouselSelect",
    "ConfirmationPrompt",
    "DateTimePrompt",
    "Image",
    "LinkOutSuggestion",
    "ListSelect",
    "MediaObject",
    "OptionItem",
    "PermissionPrompt",
    "PlacePrompt",
    "ResponseFragment",
    "RichContent",
    "RichItem",
    "SignInPrompt",
    "Speech",
    "Suggestions",
    "SystemIntent",
    "Table",
    "TableColumn",
    "TableRow",
    "Text",
    "fragment_kind",
    "validate_response",
]
