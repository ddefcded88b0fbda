"""Core data transfer objects shared across layers.

The Actions on Google conversation payload arrives nested inside the Dialogflow
webhook body (``originalDetectIntentRequest.payload``). The types here are the
read-only view handlers get of it: what the surface can render, who the user
is, and where the device is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class RequestContext:
    """Metadata describing an inbound API request."""

    correlation_id: str
    path: str
    method: str
    user_agent: Optional[str] = None


class Capability(str, Enum):
    """Surface capabilities reported by the Assistant."""

    SCREEN_OUTPUT = "actions.capability.SCREEN_OUTPUT"
    AUDIO_OUTPUT = "actions.capability.AUDIO_OUTPUT"
    MEDIA_RESPONSE_AUDIO = "actions.capability.MEDIA_RESPONSE_AUDIO"
    WEB_BROWSER = "actions.capability.WEB_BROWSER"


_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _frozen(data: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class Surface:
    """Capability set of the device rendering the conversation."""

    capabilities: frozenset[str] = frozenset()

    def has(self, capability: Capability | str) -> bool:
        """Whether the surface reports ``capability``."""
        name = capability.value if isinstance(capability, Capability) else capability
        return name in self.capabilities

    @property
    def screen_available(self) -> bool:
        return self.has(Capability.SCREEN_OUTPUT)

    @property
    def audio_available(self) -> bool:
        return self.has(Capability.AUDIO_OUTPUT)

    @property
    def media_playback_available(self) -> bool:
        return self.has(Capability.MEDIA_RESPONSE_AUDIO)

    @property
    def web_browser_available(self) -> bool:
        return self.has(Capability.WEB_BROWSER)

    @classmethod
    def with_capabilities(cls, *capabilities: Capability | str) -> "Surface":
        """Build a surface from capability enum members or raw names."""
        return cls(
            frozenset(c.value if isinstance(c, Capability) else c for c in capabilities)
        )

    @classmethod
    def from_payload(cls, data: Optional[Mapping[str, Any]]) -> "Surface":
        """Build a Surface from the ``surface`` object of the conversation payload."""
        names: set[str] = set()
        if isinstance(data, Mapping):
            for item in data.get("capabilities") or []:
                if isinstance(item, Mapping) and isinstance(item.get("name"), str):
                    names.add(item["name"])
        return cls(frozenset(names))


@dataclass(frozen=True, slots=True)
class UserName:
    """Name granted through the NAME permission."""

    display: Optional[str] = None
    given: Optional[str] = None
    family: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Optional[Mapping[str, Any]]) -> Optional["UserName"]:
        if not isinstance(data, Mapping):
            return None
        display = data.get("displayName")
        given = data.get("givenName")
        family = data.get("familyName")
        if not any((display, given, family)):
            return None
        return cls(display=display, given=given, family=family)


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Claims decoded from a verified sign-in ID token.

    Which claims are present depends on the account linking scopes, so every
    accessor returns ``None`` when its claim is missing.
    """

    claims: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @property
    def name(self) -> Optional[str]:
        return self.claims.get("name")

    @property
    def given_name(self) -> Optional[str]:
        return self.claims.get("given_name")

    @property
    def email(self) -> Optional[str]:
        return self.claims.get("email")

    @property
    def picture(self) -> Optional[str]:
        return self.claims.get("picture")

    @property
    def email_verified(self) -> Optional[bool]:
        value = self.claims.get("email_verified")
        if isinstance(value, str):
            return value.lower() == "true"
        return value if isinstance(value, bool) else None

    @property
    def audience(self) -> Optional[str]:
        return self.claims.get("aud")

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "UserProfile":
        return cls(claims=_frozen(claims))


@dataclass(frozen=True, slots=True)
class User:
    """User identity as reported by the Assistant."""

    name: Optional[UserName] = None
    profile: Optional[UserProfile] = None
    id_token: Optional[str] = None
    verification: Optional[str] = None
    locale: Optional[str] = None
    last_seen: Optional[str] = None

    @property
    def verified(self) -> bool:
        return self.verification == "VERIFIED"

    @classmethod
    def from_payload(cls, data: Optional[Mapping[str, Any]]) -> "User":
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            name=UserName.from_payload(data.get("profile")),
            id_token=data.get("idToken") or None,
            verification=data.get("userVerificationStatus"),
            locale=data.get("locale"),
            last_seen=data.get("lastSeen"),
        )


@dataclass(frozen=True, slots=True)
class DeviceLocation:
    """Location granted through the DEVICE_PRECISE_LOCATION permission."""

    formatted_address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_payload(cls, data: Optional[Mapping[str, Any]]) -> Optional["DeviceLocation"]:
        if not isinstance(data, Mapping) or not data:
            return None
        coordinates = data.get("coordinates")
        if not isinstance(coordinates, Mapping):
            coordinates = {}
        return cls(
            formatted_address=data.get("formattedAddress"),
            city=data.get("city"),
            zip_code=data.get("zipCode"),
            latitude=coordinates.get("latitude"),
            longitude=coordinates.get("longitude"),
        )


@dataclass(frozen=True, slots=True)
class ConversationContext:
    """Read-only view of the host-managed conversation for one request."""

    surface: Surface = field(default_factory=Surface)
    user: User = field(default_factory=User)
    device_location: Optional[DeviceLocation] = None
    session_id: Optional[str] = None
    conversation_id: Optional[str] = None
    locale: Optional[str] = None

    @classmethod
    def from_payload(
        cls,
        data: Optional[Mapping[str, Any]],
        *,
        session_id: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> "ConversationContext":
        """Build a context from the Actions on Google conversation payload."""
        data = data if isinstance(data, Mapping) else {}
        user = User.from_payload(data.get("user"))
        device = data.get("device") if isinstance(data.get("device"), Mapping) else {}
        conversation = data.get("conversation")
        if not isinstance(conversation, Mapping):
            conversation = {}
        return cls(
            surface=Surface.from_payload(data.get("surface")),
            user=user,
            device_location=DeviceLocation.from_payload(device.get("location")),
            session_id=session_id,
            conversation_id=conversation.get("conversationId"),
            locale=locale or user.locale,
        )


# Typed value fields in the order they are consulted when resolving an argument.
_ARGUMENT_VALUE_FIELDS = (
    "boolValue",
    "datetimeValue",
    "placeValue",
    "extension",
    "structuredValue",
    "textValue",
)


def resolve_argument_value(argument: Mapping[str, Any]) -> Any:
    """Return the resolved value carried by one conversation input argument."""
    for key in _ARGUMENT_VALUE_FIELDS:
        if key not in argument:
            continue
        value = argument[key]
        if key == "extension" and isinstance(value, Mapping):
            return {k: v for k, v in value.items() if k != "@type"}
        return value
    return None


def extract_arguments(data: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Collect named argument values from the conversation ``inputs`` list."""
    arguments: dict[str, Any] = {}
    if not isinstance(data, Mapping):
        return arguments
    for conversation_input in data.get("inputs") or []:
        if not isinstance(conversation_input, Mapping):
            continue
        for argument in conversation_input.get("arguments") or []:
            if not isinstance(argument, Mapping):
                continue
            name = argument.get("name")
            if isinstance(name, str) and name not in arguments:
                arguments[name] = resolve_argument_value(argument)
    return arguments


@dataclass(frozen=True, slots=True)
class IntentRequest:
    """Intent name plus the slot parameters and helper arguments for one turn."""

    name: str
    parameters: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    arguments: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", str(getattr(self.name, "value", self.name)))
        object.__setattr__(self, "parameters", _frozen(self.parameters))
        object.__setattr__(self, "arguments", _frozen(self.arguments))

    def argument(self, name: str, default: Any = None) -> Any:
        """Return the resolved value of argument ``name``."""
        return self.arguments.get(name, default)

    @property
    def resolved_argument(self) -> Any:
        """Value of the first argument, mirroring the helper result slot."""
        for value in self.arguments.values():
            return value
        return None


__all__ = [
    "Capability",
    "ConversationContext",
    "DeviceLocation",
    "IntentRequest",
    "RequestContext",
    "Surface",
    "User",
    "UserName",
    "UserProfile",
    "extract_arguments",
    "resolve_argument_value",
]
