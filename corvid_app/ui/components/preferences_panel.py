"""Component for choosing the known and the learning language."""

from __future__ import annotations

from PySide6.QtWidgets import QComboBox, QLabel, QPushButton, QVBoxLayout, QWidget

from corvid_app.constants.quiz_constants import SUPPORTED_LANGUAGES
from corvid_app.constants.ui_constants import (
    BACK_BUTTON,
    PREFS_KNOWN_LANGUAGE_LABEL,
    PREFS_LEARNING_LANGUAGE_LABEL,
    PREFS_SAME_LANGUAGE_WARNING,
)
from corvid_app.core.session_manager import SessionManager
from corvid_app.ui.dialog_helpers import show_warning


class PreferencesPanel(QWidget):
    """UI component holding the language preferences."""

    def __init__(
        self,
        session_manager: SessionManager,
        on_back: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session_manager = session_manager
        self.on_back = on_back

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.known_combo = self._build_language_combo(self.session_manager.known_language)
        self.learning_combo = self._build_language_combo(self.session_manager.learning_language)

        layout.addWidget(QLabel(PREFS_KNOWN_LANGUAGE_LABEL, self))
        layout.addWidget(self.known_combo)
        layout.addWidget(QLabel(PREFS_LEARNING_LANGUAGE_LABEL, self))
        layout.addWidget(self.learning_combo)
        layout.addStretch()

        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self._handle_back_click)
        layout.addWidget(self.back_button)

    def _build_language_combo(self, selected_code: str) -> QComboBox:
        combo = QComboBox(self)
        for code, name in SUPPORTED_LANGUAGES.items():
            combo.addItem(name, code)
        combo.setCurrentIndex(max(0, combo.findData(selected_code)))
        return combo

    def _handle_back_click(self) -> None:
        known = self.known_combo.currentData()
        learning = self.learning_combo.currentData()
        if known == learning:
            show_warning(self, "Languages", PREFS_SAME_LANGUAGE_WARNING)
        self.session_manager.set_languages(known, learning)
        self.on_back()
