"""Component showing the presented word, its choices and the running score."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from corvid_app.constants.quiz_constants import MAX_CHOICE_COUNT
from corvid_app.constants.ui_constants import (
    BACK_BUTTON,
    SCORE_ACCURACY_TEMPLATE,
    SCORE_CORRECT_TEMPLATE,
    SCORE_WRONG_TEMPLATE,
)
from corvid_app.core.session_manager import SessionManager
from corvid_app.styling import Styles, Theme


class QuizPanel(QWidget):
    """UI component for a running quiz round."""

    def __init__(
        self,
        session_manager: SessionManager,
        on_answer: callable,
        on_back: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session_manager = session_manager
        self.on_answer = on_answer
        self.on_back = on_back
        self._game_font_size: int = 14

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.back_button = QPushButton(BACK_BUTTON, self)
        self.back_button.clicked.connect(self._handle_back_click)
        layout.addWidget(self.back_button)

        self.word_label = QLabel("", self)
        self.word_label.setAlignment(Qt.AlignCenter)
        self.word_label.setWordWrap(True)
        self.word_label.setStyleSheet(Styles.get_prompt_label_style(self._game_font_size))
        layout.addWidget(self.word_label)

        # Slots beyond the round's choice count stay hidden.
        self.choice_buttons: list[QPushButton] = []
        for idx in range(MAX_CHOICE_COUNT):
            button = QPushButton(f"Choice {idx + 1}", self)
            button.clicked.connect(lambda _checked=False, i=idx: self.on_answer(i))
            button.setVisible(False)
            layout.addWidget(button)
            self.choice_buttons.append(button)

        score_row = QHBoxLayout()
        score_row.addStretch()
        self.correct_label = QLabel(SCORE_CORRECT_TEMPLATE.format(count=0), self)
        self.wrong_label = QLabel(SCORE_WRONG_TEMPLATE.format(count=0), self)
        score_row.addWidget(self.correct_label)
        score_row.addSpacing(16)
        score_row.addWidget(self.wrong_label)
        score_row.addSpacing(16)
        self.accuracy_label = QLabel(SCORE_ACCURACY_TEMPLATE.format(percent=0), self)
        score_row.addWidget(self.accuracy_label)
        score_row.addStretch()
        layout.addLayout(score_row)

    def show_question(self) -> None:
        self.word_label.setText(self.session_manager.get_presented_word())
        choices = self.session_manager.get_display_choices()
        for idx, button in enumerate(self.choice_buttons):
            if idx < len(choices):
                button.setText(choices[idx])
                button.setVisible(True)
            else:
                button.setVisible(False)
        self._update_scores()

    def reset_state(self) -> None:
        self.word_label.setText("")
        for button in self.choice_buttons:
            button.setVisible(False)
        self._update_scores()

    def _update_scores(self) -> None:
        correct, wrong = self.session_manager.get_scores()
        self.correct_label.setText(SCORE_CORRECT_TEMPLATE.format(count=correct))
        self.wrong_label.setText(SCORE_WRONG_TEMPLATE.format(count=wrong))
        self.accuracy_label.setText(
            SCORE_ACCURACY_TEMPLATE.format(percent=self.session_manager.get_accuracy_percentage())
        )

    def _handle_back_click(self) -> None:
        self.session_manager.end_game()
        self.reset_state()
        self.on_back()

    def apply_theme(self, theme: Theme, game_font_size: int) -> None:
        self._game_font_size = game_font_size
        self.word_label.setStyleSheet(Styles.get_prompt_label_style(game_font_size))
        score_style = Styles.get_score_label_style(theme)
        self.correct_label.setStyleSheet(score_style)
        self.wrong_label.setStyleSheet(score_style)
        self.accuracy_label.setStyleSheet(score_style)
