"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Corvid"
DEFAULT_WINDOW_WIDTH: int = 400
DEFAULT_WINDOW_HEIGHT: int = 300

MENU_BUTTON_VOCABULARY: str = "Vocabulary"
MENU_BUTTON_PREFERENCES: str = "Preferences"
MENU_BUTTON_SETTINGS: str = "Settings"
MENU_BUTTON_ABOUT: str = "About Corvid"
MENU_BUTTON_HELP: str = "Help"
BACK_BUTTON: str = "Back"
OK_BUTTON: str = "OK"

PREFS_KNOWN_LANGUAGE_LABEL: str = "Known Language:"
PREFS_LEARNING_LANGUAGE_LABEL: str = "Learning Language:"
PREFS_SAME_LANGUAGE_WARNING: str = "Known and learning language are the same."

DIRECTION_LABEL: str = "Learning Direction:"
DIRECTION_NORMAL: str = "Normal"
DIRECTION_REVERSE: str = "Reverse"
DIFFICULTY_BUTTON_TEMPLATE: str = "{name} ({count} choices)"

SCORE_CORRECT_TEMPLATE: str = "Correct: {count}"
SCORE_WRONG_TEMPLATE: str = "Wrong:   {count}"
SCORE_ACCURACY_TEMPLATE: str = "Accuracy: {percent:.0f}%"
RESULT_CORRECT: str = "Correct!"
RESULT_WRONG: str = "Wrong!"
RESULT_ANSWER_TEMPLATE: str = "The right answer was: {answer}"

TOPIC_UNAVAILABLE_TOOLTIP: str = "This word list could not be loaded."
