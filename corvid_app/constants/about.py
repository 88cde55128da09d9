"""Static metadata describing Corvid."""

APP_NAME = "Corvid"
APP_VERSION = "0.1"
APP_ID = "org.corvid.Corvid"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Corvid is a small vocabulary flashcard trainer built with Qt. "
    "Pick a topic and a difficulty, then choose the right meaning for each word."
)

HELP_TEXT = (
    "Open Preferences to choose the language you know and the language you are learning.\n\n"
    "Under Vocabulary, pick a topic, a learning direction and a difficulty:\n"
    "Easy shows 3 choices, Medium 5 and Hard 7.\n\n"
    "Normal direction shows the word in the language you are learning and the choices "
    "in the language you know. Reverse swaps them.\n\n"
    "After a wrong answer the same word comes back until you get it right, unless "
    "'Move on after a wrong answer' is enabled in Settings."
)
