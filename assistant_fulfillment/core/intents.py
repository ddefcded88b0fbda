"""Intent names registered with the Dialogflow agent."""

from enum import Enum


class IntentName(str, Enum):
    """Display names of every intent this webhook fulfills."""

    SIGN_IN = "SignIn"
    SIGN_IN_HELPER = "SignIn Helper"
    PERMISSION = "Permission"
    PERMISSION_HANDLER = "Permission Handler"
    DATE_TIME = "Date Time"
    DATE_TIME_HANDLER = "Date Time Handler"
    PLACE = "Place"
    PLACE_HANDLER = "Place Handler"
    CONFIRMATION = "Confirmation"
    CONFIRMATION_HANDLER = "Confirmation Handler"
    SIMPLE_RESPONSE = "Simple Response"
    SSML = "SSML"
    BASIC_CARD = "Basic Card"
    SHOW_USER_PROFILE = "Show User Profile"
    PERSONAL_INFORMATION = "Personal Information"
    DASHBOARD = "Dashboard"
    MEDICATIONS = "Medications"
    DOCTOR = "Doctor"
    BROWSING_CAROUSEL = "Browsing Carousel"
    SUGGESTION_CHIPS = "Suggestion Chips"
    MEDIA_RESPONSE = "Media Response"
    MEDIA_STATUS = "Media Status"
    SIMPLE_TABLE_CARD = "Simple Table Card"
    ADVANCED_TABLE_CARD = "Advanced Table Card"
    LIST = "List"
    LIST_OPTION = "List - OPTION"
    CAROUSEL = "Carousel"
    CAROUSEL_OPTION = "Carousel - OPTION"


__all__ = ["IntentName"]
