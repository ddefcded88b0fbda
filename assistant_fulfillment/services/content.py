"""Static content shown by the demo and health intents.

Everything here is data: card copy, image URLs, selectable items and the
patient record rendered by the health intents. Handlers assemble fragments
from these values and never modify them.
"""

from __future__ import annotations

from assistant_fulfillment.core.fragments import (
    BrowseCarouselItem,
    Button,
    Image,
    LinkOutSuggestion,
    OptionItem,
    TableColumn,
    TableRow,
)

IMG_URL_AOG = (
    "https://developers.google.com/actions/images/badges/XPM_BADGING_GoogleAssistant_VER.png"
)
IMG_URL_GOOGLE_HOME = (
    "https://lh3.googleusercontent.com/"
    "Nu3a6F80WfixUqf_ec_vgXy_c0-0r4VLJRXjVFF_X_CIilEu8B9fT35qyTEj_PEsKw"
)
IMG_URL_GOOGLE_PIXEL = (
    "https://storage.googleapis.com/madebygoog/v1/Pixel/Pixel_ColorPicker/"
    "Pixel_Device_Angled_Black-720w.png"
)
IMG_URL_MEDIA = "https://storage.googleapis.com/automotive-media/album_art.jpg"
MEDIA_SOURCE = "https://storage.googleapis.com/automotive-media/Jazz_In_Paris.mp3"
ASSISTANT_URL = "https://assistant.google.com/"

# Option keys returned in the OPTION argument when the user picks an item.
SELECTION_KEY_ONE = "SELECTION_KEY_ONE"
SELECTION_KEY_GOOGLE_HOME = "SELECTION_KEY_GOOGLE_HOME"
SELECTION_KEY_GOOGLE_PIXEL = "SELECTION_KEY_GOOGLE_PIXEL"

SELECTED_ITEM_RESPONSES = {
    SELECTION_KEY_ONE: "You selected the first item",
    SELECTION_KEY_GOOGLE_HOME: "You selected the Google Home!",
    SELECTION_KEY_GOOGLE_PIXEL: "You selected the Google Pixel!",
}
NO_SELECTION_RESPONSE = "You did not select any item from the list or carousel"

SELECTION_ITEMS = (
    OptionItem(
        key=SELECTION_KEY_ONE,
        title="Title of First List Item",
        description="This is a description of a list item.",
        synonyms=("synonym 1", "synonym 2", "synonym 3"),
        image=Image(url=IMG_URL_AOG, alt="Image alternate text"),
    ),
    OptionItem(
        key=SELECTION_KEY_GOOGLE_HOME,
        title="Google Home",
        description="Google Home is a voice-activated speaker powered by the Google Assistant.",
        synonyms=("Google Home Assistant", "Assistant on the Google Home"),
        image=Image(url=IMG_URL_GOOGLE_HOME, alt="Google Home"),
    ),
    OptionItem(
        key=SELECTION_KEY_GOOGLE_PIXEL,
        title="Google Pixel",
        description="Pixel. Phone by Google.",
        synonyms=("Google Pixel XL", "Pixel", "Pixel XL"),
        image=Image(url=IMG_URL_GOOGLE_PIXEL, alt="Google Pixel"),
    ),
)

# Two trailing spaces before a newline render a line break in card text.
BASIC_CARD_TEXT = (
    'This is a basic card.  Text in a basic card can include "quotes" and most other '
    "unicode characters including emoji 📱.  Basic cards also support some markdown "
    "formatting like *emphasis* or _italics_, **strong** or __bold__, and ***bold "
    "italic*** or ___strong emphasis___ as well as other things like line  \nbreaks"
)

BROWSE_ITEMS = (
    BrowseCarouselItem(
        title="Title of item 1",
        url="https://example.com",
        description="Description of item 1",
        image=Image(url=IMG_URL_AOG, alt="Image alternate text"),
        footer="Item 1 footer",
    ),
    BrowseCarouselItem(
        title="Google Assistant",
        url="https://developers.google.com/assistant",
        description="Google Assistant on Android and iOS",
        image=Image(url=IMG_URL_AOG, alt="Image alternate text"),
        footer="More information about the Google Assistant",
    ),
)

DEMO_SUGGESTIONS = (
    "Basic Card",
    "Browsing Carousel",
    "Carousel",
    "List",
    "Media",
    "Suggestions",
    "Table",
)
HELPER_SUGGESTIONS = ("Sign In", "Permission", "Date Time", "Place", "Confirmation")
HEALTH_SUGGESTIONS = ("Personal Information", "Medications", "Doctor", "Dashboard")
ASSISTANT_LINK = LinkOutSuggestion(name="Suggestion Link", url=ASSISTANT_URL)

SSML_EXAMPLE = (
    "<speak>"
    'Here are <say-as interpret-as="characters">SSML</say-as> examples. '
    "Here is a buzzing fly "
    '<audio src="https://actions.google.com/sounds/v1/animals/buzzing_fly.ogg"></audio>'
    'and here\'s a short pause <break time="800ms"/>'
    "Which response would you like to see next?"
    "</speak>"
)

SIMPLE_TABLE_COLUMNS = (
    TableColumn("header 1"),
    TableColumn("header 2"),
    TableColumn("header 3"),
)
SIMPLE_TABLE_ROWS = (
    TableRow(("row 1 item 1", "row 1 item 2", "row 1 item 3")),
    TableRow(("row 2 item 1", "row 2 item 2", "row 2 item 3")),
)

ADVANCED_TABLE_COLUMNS = (
    TableColumn("header 1", align="CENTER"),
    TableColumn("header 2", align="LEADING"),
    TableColumn("header 3", align="TRAILING"),
)
ADVANCED_TABLE_ROWS = (
    TableRow(("row 1 item 1", "row 1 item 2", "row 1 item 3"), divider_after=False),
    TableRow(("row 2 item 1", "row 2 item 2", "row 2 item 3"), divider_after=True),
    TableRow(("row 3 item 1", "row 3 item 2", "row 3 item 3")),
)
ADVANCED_TABLE_BUTTON = Button(title="Button Text", url=ASSISTANT_URL)

MEDIA_ICON = Image(url=IMG_URL_MEDIA, alt="Album cover of an ocean view")

# Health demo data.
HEALTH_MEDIA_BASE = "https://raw.githubusercontent.com/rbu1996/HCI-Project4/master/Media"
DASHBOARD_IMAGE = Image(
    url=f"{HEALTH_MEDIA_BASE}/heatlh_dashboard.jpg",
    alt="Health dashboard with heart rate, sleep and activity charts",
)
DASHBOARD_URL = "https://github.com/rbu1996/HCI-Project4/blob/master/Media/heatlh_dashboard.jpg"

PATIENT = {
    "name": "Jordan Avery",
    "date_of_birth": "March 3, 1956",
    "blood_type": "A positive",
    "height": "5 ft 9 in",
    "weight": "172 lb",
    "allergies": "Penicillin",
    "emergency_contact": "Sam Avery, (555) 010-4477",
}

MEDICATION_COLUMNS = (
    TableColumn("Medication", align="LEADING"),
    TableColumn("Dose", align="CENTER"),
    TableColumn("Schedule", align="TRAILING"),
)
MEDICATIONS = (
    ("Lisinopril", "10 mg", "Every morning"),
    ("Metformin", "500 mg", "Twice daily with meals"),
    ("Atorvastatin", "20 mg", "Every evening"),
    ("Vitamin D3", "1000 IU", "Every morning"),
)

DOCTOR = {
    "name": "Dr. Priya Raman",
    "specialty": "Internal Medicine",
    "clinic": "Riverside Family Health",
    "phone": "(555) 010-2300",
    "hours": "Monday to Friday, 8 AM to 5 PM",
    "url": "https://www.example.com/riverside-family-health",
}
