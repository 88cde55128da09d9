"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

MISSING_TRANSLATION_TEXT: str = "???"

# Language code -> display name, in the order offered by the preferences page.
SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
}
DEFAULT_KNOWN_LANGUAGE: str = "en"
DEFAULT_LEARNING_LANGUAGE: str = "es"

EASY_CHOICE_COUNT: int = 3
MEDIUM_CHOICE_COUNT: int = 5
HARD_CHOICE_COUNT: int = 7
MAX_CHOICE_COUNT: int = HARD_CHOICE_COUNT

VOCABULARY_DIR: Path = Path(__file__).resolve().parent.parent / "data" / "vocabulary"
VOCABULARY_FILE_SUFFIX: str = ".txt"
