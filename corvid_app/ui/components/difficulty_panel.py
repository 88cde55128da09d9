"""Component for picking the learning direction and the difficulty."""

from __future__ import annotations

from PySide6.QtWidgets import QComboBox, QLabel, QPushButton, QVBoxLayout, QWidget

from corvid_app.constants.ui_constants import (
    BACK_BUTTON,
    DIFFICULTY_BUTTON_TEMPLATE,
    DIRECTION_LABEL,
    DIRECTION_NORMAL,
    DIRECTION_REVERSE,
)
from corvid_app.core.session_manager import Difficulty, Direction, SessionManager


class DifficultyPanel(QWidget):
    """UI component starting a game once a difficulty is chosen."""

    def __init__(
        self,
        session_manager: SessionManager,
        on_difficulty_selected: callable,
        on_back: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session_manager = session_manager
        self.on_difficulty_selected = on_difficulty_selected
        self.on_back = on_back

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(lambda: self.on_back())
        layout.addWidget(self.back_button)

        self.topic_label = QLabel("", self)
        layout.addWidget(self.topic_label)

        layout.addWidget(QLabel(DIRECTION_LABEL, self))
        self.direction_combo = QComboBox(self)
        self.direction_combo.addItem(DIRECTION_NORMAL, Direction.NORMAL)
        self.direction_combo.addItem(DIRECTION_REVERSE, Direction.REVERSE)
        layout.addWidget(self.direction_combo)

        for difficulty in Difficulty:
            label = DIFFICULTY_BUTTON_TEMPLATE.format(
                name=difficulty.name.title(), count=difficulty.choice_count
            )
            button = QPushButton(label, self)
            button.clicked.connect(lambda _checked=False, d=difficulty: self._handle_difficulty(d))
            layout.addWidget(button)
        layout.addStretch()

    def refresh_topic(self) -> None:
        self.topic_label.setText(f"Topic: {self.session_manager.topic.title}")

    def _handle_difficulty(self, difficulty: Difficulty) -> None:
        self.session_manager.direction = self.direction_combo.currentData()
        self.on_difficulty_selected(difficulty)
