"""Settings dialog for configuring Corvid preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from corvid_app.styling import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        game_font_size: int = 14,
        theme: Theme = Theme.LIGHT,
        advance_after_wrong: bool = False,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._game_font_size = game_font_size
        self._theme = theme
        self._advance_after_wrong = advance_after_wrong
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Appearance
        display_group = QGroupBox("Appearance")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, menus):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        display_layout.addLayout(ui_font_row)

        game_font_row = QHBoxLayout()
        game_font_label = QLabel("Game Font Size (word, result):")
        game_font_label.setToolTip("Font size of the presented word and the answer feedback")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        game_font_row.addWidget(game_font_label)
        game_font_row.addStretch()
        game_font_row.addWidget(self.game_font_spinbox)
        display_layout.addLayout(game_font_row)

        theme_row = QHBoxLayout()
        theme_row.addWidget(QLabel("Theme:"))
        theme_row.addStretch()
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.name.title(), theme)
        self.theme_combo.setCurrentIndex(self.theme_combo.findData(self._theme))
        theme_row.addWidget(self.theme_combo)
        display_layout.addLayout(theme_row)

        layout.addWidget(display_group)

        # Quiz behaviour
        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.advance_checkbox = QCheckBox("Move on after a wrong answer")
        self.advance_checkbox.setToolTip(
            "When disabled, a missed word is asked again until it is answered correctly."
        )
        self.advance_checkbox.setChecked(self._advance_after_wrong)
        quiz_layout.addWidget(self.advance_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed (blank = random):")
        seed_label.setToolTip("A fixed seed repeats the same sequence of words and choices.")
        self.seed_edit = QLineEdit()
        self.seed_edit.setPlaceholderText("random")
        if self._shuffle_seed is not None:
            self.seed_edit.setText(str(self._shuffle_seed))
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_edit)
        quiz_layout.addLayout(seed_row)

        layout.addWidget(quiz_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_game_font_size(self) -> int:
        """Get the selected game font size."""
        return self.game_font_spinbox.value()

    def get_theme(self) -> Theme:
        return self.theme_combo.currentData()

    def get_advance_after_wrong(self) -> bool:
        """Get whether OK should draw a new word after a wrong answer."""
        return self.advance_checkbox.isChecked()

    def get_shuffle_seed(self) -> int | None:
        """Get the shuffle seed, or None when the field is blank or not a number."""
        raw_value = self.seed_edit.text().strip()
        if not raw_value:
            return None
        try:
            return int(raw_value)
        except ValueError:
            return None
