"""Actions on Google helper intents: sign-in, permission, date/time, place, confirmation.

Each helper comes in pairs. The first intent asks the Assistant to run the
helper; the second receives the helper's result as a conversation argument.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from assistant_fulfillment.core.fragments import (
    ConfirmationPrompt,
    DateTimePrompt,
    PermissionPrompt,
    PlacePrompt,
    ResponseFragment,
    SignInPrompt,
    Speech,
    Suggestions,
    Text,
)
from assistant_fulfillment.core.logging import get_logger
from assistant_fulfillment.core.models import ConversationContext, IntentRequest
from assistant_fulfillment.services.content import HELPER_SUGGESTIONS

logger = get_logger(__name__)

TRY_ANOTHER_HELPER = "Would you like to try another helper?"


def _helper_suggestions() -> Suggestions:
    return Suggestions(titles=HELPER_SUGGESTIONS)


def _first_name(context: ConversationContext) -> str:
    profile = context.user.profile
    if profile is not None:
        for candidate in (profile.name, profile.given_name):
            if candidate:
                return candidate
    if context.user.name is not None and context.user.name.display:
        return context.user.name.display
    return "friend"


def sign_in(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [SignInPrompt(context="To get your account details")]


def sign_in_helper(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    """Report the outcome of the SIGN_IN helper."""
    result = request.argument("SIGN_IN")
    status = result.get("status") if isinstance(result, Mapping) else None
    if status == "OK":
        name = _first_name(context)
        return [Text(f"I got your account details, {name}. What do you want to do next?")]
    logger.info("sign-in did not complete: status=%s", status)
    return [Text("I won't be able to save your data, but what do you want to do next?")]


def permission(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [
        PermissionPrompt(
            context="To address you by name and know your location",
            permissions=("NAME", "DEVICE_PRECISE_LOCATION"),
        )
    ]


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() == "true"
    return bool(value)


def permission_handler(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    """Use whatever the user granted through the PERMISSION helper."""
    granted = _as_bool(request.argument("PERMISSION"))
    name = context.user.name.display if context.user.name is not None else None
    location = context.device_location
    address = location.formatted_address if location is not None else None

    if granted and name and address:
        message = f"Okay {name}, I see you're at {address}."
    elif granted and name:
        message = f"Okay {name}, I couldn't get your location, but thanks for sharing your name."
    else:
        message = "Looks like I can't get your information."
    return [Text(message), Text(TRY_ANOTHER_HELPER), _helper_suggestions()]


def date_time(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [
        DateTimePrompt(
            initial="When do you want to come in?",
            date="Which date works best for you?",
            time="What time of day works best for you?",
        )
    ]


def _datetime_parts(value: Any) -> Optional[tuple[int, int, int, int]]:
    if not isinstance(value, Mapping):
        return None
    date = value.get("date")
    time = value.get("time")
    if not isinstance(date, Mapping) or not isinstance(time, Mapping):
        return None
    try:
        return (
            int(date["day"]),
            int(date["month"]),
            int(time.get("hours", 0)),
            int(time.get("minutes", 0)),
        )
    except (KeyError, TypeError, ValueError):
        return None


def date_time_handler(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    """Confirm the appointment slot returned by the DATETIME helper."""
    del context
    parts = _datetime_parts(request.argument("DATETIME"))
    if parts is None:
        return [
            Text(
                "Sorry, I didn't catch when you want to come in. " + TRY_ANOTHER_HELPER
            )
        ]
    day, month, hours, minutes = parts
    ssml = (
        "<speak>"
        "Great, we will see you on "
        f'<say-as interpret-as="date" format="dm">{day}-{month}</say-as> at '
        f'<say-as interpret-as="time" format="hms12" detail="2">{hours}:{minutes:02d}</say-as>'
        "</speak>"
    )
    display = f"Great, we will see you on {day}-{month} at {hours}:{minutes:02d}"
    return [Speech(ssml, display_text=display)]


def place(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    return [
        PlacePrompt(
            prompt="What is the location where you want to be picked up?",
            context="To find a place to pick you up",
        )
    ]


def place_handler(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    """Echo the pickup address returned by the PLACE helper."""
    del context
    result = request.argument("PLACE")
    address = result.get("formattedAddress") if isinstance(result, Mapping) else None
    if not address:
        return [Text("Sorry, I couldn't find where you want to be picked up")]
    return [Text(f"Ah, I see. You want to get picked up at {address}")]


def confirmation(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    return [ConfirmationPrompt(prompt="Can you confirm?")]


def confirmation_handler(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context
    answer = request.argument("CONFIRMATION")
    if answer is None:
        return [Text("Sorry, I didn't get a confirmation.")]
    if _as_bool(answer):
        return [Text("Wonderful, thanks for confirming!")]
    return [Text("That's okay. Let's not do it now.")]


__all__ = [
    "confirmation",
    "confirmation_handler",
    "date_time",
    "date_time_handler",
    "permission",
    "permission_handler",
    "place",
    "place_handler",
    "sign_in",
    "sign_in_helper",
]
