"""Tests for the health companion intent handlers."""

from __future__ import annotations

from dataclasses import replace

from assistant_fulfillment.core.fragments import BasicCard, Speech, Suggestions, Table, Text
from assistant_fulfillment.core.models import IntentRequest, User, UserProfile
from assistant_fulfillment.services.content import DASHBOARD_IMAGE, MEDICATIONS, PATIENT
from assistant_fulfillment.services.intents import health_intents


def test_show_user_profile_without_sign_in(phone_context):
    request = IntentRequest("Show User Profile")
    fragments = health_intents.show_user_profile(phone_context, request)

    assert isinstance(fragments[0], Text)
    assert "sign in" in fragments[0].text
    assert fragments[1] == Suggestions(titles=("Sign In",))


def test_show_user_profile_renders_claims(phone_context):
    profile = UserProfile.from_claims(
        {
            "name": "Jordan Avery",
            "email": "jordan@example.com",
            "email_verified": True,
            "aud": "client-1",
            "picture": "https://example.com/jordan.png",
        }
    )
    context = replace(phone_context, user=User(profile=profile))

    fragments = health_intents.show_user_profile(context, IntentRequest("Show User Profile"))

    card = fragments[1]
    assert isinstance(card, BasicCard)
    assert card.title == "Jordan Avery"
    assert card.subtitle == "jordan@example.com"
    assert "Email verified: yes" in card.text
    assert "client-1" in card.text
    assert card.image is not None and card.image.url == "https://example.com/jordan.png"


def test_show_user_profile_with_partial_claims(phone_context):
    context = replace(phone_context, user=User(profile=UserProfile.from_claims({})))

    fragments = health_intents.show_user_profile(context, IntentRequest("Show User Profile"))

    card = fragments[1]
    assert card.title == "Your profile"
    assert card.image is None
    assert "Email: not shared" in card.text


def test_personal_information_card(phone_context):
    fragments = health_intents.personal_information(
        phone_context, IntentRequest("Personal Information")
    )

    card = fragments[1]
    assert isinstance(card, BasicCard)
    assert card.title == PATIENT["name"]
    assert PATIENT["blood_type"] in card.text


def test_dashboard_closes_conversation(phone_context):
    request = IntentRequest("Dashboard", parameters={"dashboard": "sleep"})

    speech, card = health_intents.dashboard(phone_context, request)

    assert speech == Speech("Dashboard opening...", final=True)
    assert isinstance(card, BasicCard)
    assert card.title == "Sleep dashboard"
    assert card.image == DASHBOARD_IMAGE


def test_dashboard_default_title(phone_context):
    _, card = health_intents.dashboard(phone_context, IntentRequest("Dashboard"))

    assert card.title == "Health dashboard"


def test_medications_table(phone_context):
    fragments = health_intents.medications(phone_context, IntentRequest("Medications"))

    assert fragments[0] == Text(f"You have {len(MEDICATIONS)} active medications.")
    table = fragments[1]
    assert isinstance(table, Table)
    assert len(table.rows) == len(MEDICATIONS)


def test_doctor_card_has_button(phone_context):
    fragments = health_intents.doctor(phone_context, IntentRequest("Doctor"))

    card = fragments[1]
    assert isinstance(card, BasicCard)
    assert len(card.buttons) == 1
