"""Health companion intents: profile, personal record, dashboard, medications, doctor."""

from __future__ import annotations

from typing import Any

from assistant_fulfillment.core.fragments import (
    BasicCard,
    Button,
    Image,
    ResponseFragment,
    Speech,
    Suggestions,
    Table,
    TableRow,
    Text,
)
from assistant_fulfillment.core.models import ConversationContext, IntentRequest, UserProfile
from assistant_fulfillment.services.content import (
    DASHBOARD_IMAGE,
    DASHBOARD_URL,
    DOCTOR,
    HEALTH_SUGGESTIONS,
    MEDICATION_COLUMNS,
    MEDICATIONS,
    PATIENT,
)

# Markdown line break inside basic card text.
LINE_BREAK = "  \n"


def _profile_lines(profile: UserProfile) -> list[str]:
    lines = [f"Email: {profile.email}" if profile.email else "Email: not shared"]
    if profile.email_verified is not None:
        lines.append(f"Email verified: {'yes' if profile.email_verified else 'no'}")
    if profile.audience:
        lines.append(f"Linked to: {profile.audience}")
    return lines


def show_user_profile(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    """Show the signed-in account, or ask the user to sign in first."""
    del request
    profile = context.user.profile
    if profile is None:
        return [
            Text("You need to sign in before I can show your profile. Say sign in to link it."),
            Suggestions(titles=("Sign In",)),
        ]
    name = profile.name or profile.given_name or "Your profile"
    image = None
    if profile.picture:
        image = Image(url=profile.picture, alt=f"Profile picture of {name}")
    return [
        Text(f"Here's the profile for {name}."),
        BasicCard(
            title=name,
            subtitle=profile.email,
            text=LINE_BREAK.join(_profile_lines(profile)),
            image=image,
        ),
        Suggestions(titles=HEALTH_SUGGESTIONS),
    ]


def personal_information(
    context: ConversationContext, request: IntentRequest
) -> list[ResponseFragment]:
    del context, request
    lines = [
        f"Date of birth: {PATIENT['date_of_birth']}",
        f"Blood type: {PATIENT['blood_type']}",
        f"Height: {PATIENT['height']}",
        f"Weight: {PATIENT['weight']}",
        f"Allergies: {PATIENT['allergies']}",
        f"Emergency contact: {PATIENT['emergency_contact']}",
    ]
    return [
        Text(f"Here is the personal information on file for {PATIENT['name']}."),
        BasicCard(
            title=PATIENT["name"],
            subtitle="Personal information",
            text=LINE_BREAK.join(lines),
        ),
        Suggestions(titles=HEALTH_SUGGESTIONS),
    ]


def _dashboard_title(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return f"{value.strip().capitalize()} dashboard"
    return "Health dashboard"


def dashboard(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    """Open the dashboard image and end the conversation."""
    del context
    title = _dashboard_title(request.parameters.get("dashboard"))
    return [
        Speech("Dashboard opening...", final=True),
        BasicCard(
            title=title,
            image=DASHBOARD_IMAGE,
            buttons=(Button(title="Open dashboard", url=DASHBOARD_URL),),
            display="WHITE",
        ),
    ]


def medications(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    count = len(MEDICATIONS)
    return [
        Text(f"You have {count} active medications."),
        Table(
            title="Medications",
            subtitle=PATIENT["name"],
            columns=MEDICATION_COLUMNS,
            rows=tuple(TableRow(row) for row in MEDICATIONS),
            dividers=True,
        ),
        Suggestions(titles=HEALTH_SUGGESTIONS),
    ]


def doctor(context: ConversationContext, request: IntentRequest) -> list[ResponseFragment]:
    del context, request
    lines = [
        DOCTOR["clinic"],
        f"Phone: {DOCTOR['phone']}",
        f"Hours: {DOCTOR['hours']}",
    ]
    return [
        Text(f"Your primary care doctor is {DOCTOR['name']}."),
        BasicCard(
            title=DOCTOR["name"],
            subtitle=DOCTOR["specialty"],
            text=LINE_BREAK.join(lines),
            buttons=(Button(title="Visit clinic website", url=DOCTOR["url"]),),
        ),
        Suggestions(titles=HEALTH_SUGGESTIONS),
    ]


__all__ = [
    "dashboard",
    "doctor",
    "medications",
    "personal_information",
    "show_user_profile",
]
