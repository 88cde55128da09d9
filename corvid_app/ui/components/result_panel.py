"""Component shown after each answer."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from corvid_app.constants.ui_constants import (
    OK_BUTTON,
    RESULT_ANSWER_TEMPLATE,
    RESULT_CORRECT,
    RESULT_WRONG,
)
from corvid_app.core.models import AnswerOutcome
from corvid_app.styling import Styles, Theme


class ResultPanel(QWidget):
    """Tells the user whether the answer was right; OK returns to the quiz."""

    def __init__(self, on_ok: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_ok = on_ok
        self._theme = Theme.LIGHT
        self._game_font_size: int = 14
        self._last_verdict: bool | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.result_label = QLabel("", self)
        self.result_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.result_label)

        self.answer_label = QLabel("", self)
        self.answer_label.setAlignment(Qt.AlignCenter)
        self.answer_label.setWordWrap(True)
        layout.addWidget(self.answer_label)

        self.ok_button = QPushButton(OK_BUTTON, self)
        self.ok_button.setDefault(True)
        self.ok_button.clicked.connect(lambda: self.on_ok())
        layout.addWidget(self.ok_button)
        layout.addStretch()

    def show_outcome(self, outcome: AnswerOutcome, reveal_answer: bool = False) -> None:
        """Show the verdict; the right answer is only revealed when the word will not be asked again."""
        self.result_label.setText(RESULT_CORRECT if outcome.is_correct else RESULT_WRONG)
        self._last_verdict = outcome.is_correct
        self._restyle_result()
        if outcome.is_correct or not reveal_answer:
            self.answer_label.setText("")
        else:
            self.answer_label.setText(RESULT_ANSWER_TEMPLATE.format(answer=outcome.correct_text))

    def apply_theme(self, theme: Theme, game_font_size: int) -> None:
        self._theme = theme
        self._game_font_size = game_font_size
        self._restyle_result()

    def _restyle_result(self) -> None:
        if self._last_verdict is None:
            return
        self.result_label.setStyleSheet(
            Styles.get_result_label_style(self._last_verdict, self._game_font_size, self._theme)
        )
