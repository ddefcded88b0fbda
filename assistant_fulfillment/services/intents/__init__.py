"""Intent handlers keyed by the Dialogflow intent display name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from assistant_fulfillment.core.intents import IntentName

from . import health_intents, helper_intents, simple_intents, visual_intents

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from assistant_fulfillment.services.intent_router import IntentHandler


INTENT_HANDLERS: Mapping[str, "IntentHandler"] = {
    IntentName.SIGN_IN.value: helper_intents.sign_in,
    IntentName.SIGN_IN_HELPER.value: helper_intents.sign_in_helper,
    IntentName.PERMISSION.value: helper_intents.permission,
    IntentName.PERMISSION_HANDLER.value: helper_intents.permission_handler,
    IntentName.DATE_TIME.value: helper_intents.date_time,
    IntentName.DATE_TIME_HANDLER.value: helper_intents.date_time_handler,
    IntentName.PLACE.value: helper_intents.place,
    IntentName.PLACE_HANDLER.value: helper_intents.place_handler,
    IntentName.CONFIRMATION.value: helper_intents.confirmation,
    IntentName.CONFIRMATION_HANDLER.value: helper_intents.confirmation_handler,
    IntentName.SIMPLE_RESPONSE.value: simple_intents.simple_response,
    IntentName.SSML.value: simple_intents.ssml,
    IntentName.SUGGESTION_CHIPS.value: simple_intents.suggestion_chips,
    IntentName.MEDIA_RESPONSE.value: simple_intents.media_response,
    IntentName.MEDIA_STATUS.value: simple_intents.media_status,
    IntentName.BASIC_CARD.value: visual_intents.basic_card,
    IntentName.BROWSING_CAROUSEL.value: visual_intents.browsing_carousel,
    IntentName.SIMPLE_TABLE_CARD.value: visual_intents.simple_table_card,
    IntentName.ADVANCED_TABLE_CARD.value: visual_intents.advanced_table_card,
    IntentName.LIST.value: visual_intents.list_select,
    IntentName.LIST_OPTION.value: visual_intents.option_selected,
    IntentName.CAROUSEL.value: visual_intents.carousel_select,
    IntentName.CAROUSEL_OPTION.value: visual_intents.option_selected,
    IntentName.SHOW_USER_PROFILE.value: health_intents.show_user_profile,
    IntentName.PERSONAL_INFORMATION.value: health_intents.personal_information,
    IntentName.DASHBOARD.value: health_intents.dashboard,
    IntentName.MEDICATIONS.value: health_intents.medications,
    IntentName.DOCTOR.value: health_intents.doctor,
}


__all__ = ["INTENT_HANDLERS"]
