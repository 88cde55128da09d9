"""Qt main window hosting the menu, selection, quiz and result pages."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtWidgets import (
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from corvid_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from corvid_app.constants.ui_constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MENU_BUTTON_ABOUT,
    MENU_BUTTON_HELP,
    MENU_BUTTON_PREFERENCES,
    MENU_BUTTON_SETTINGS,
    MENU_BUTTON_VOCABULARY,
    WINDOW_TITLE,
)
from corvid_app.core.services.game import GameConfigurationError
from corvid_app.core.services.vocabulary_repository import Topic
from corvid_app.core.session_manager import Difficulty, SessionManager
from corvid_app.styling import Styles, Theme
from corvid_app.ui.components.difficulty_panel import DifficultyPanel
from corvid_app.ui.components.preferences_panel import PreferencesPanel
from corvid_app.ui.components.quiz_panel import QuizPanel
from corvid_app.ui.components.result_panel import ResultPanel
from corvid_app.ui.components.topic_panel import TopicPanel
from corvid_app.ui.dialog_helpers import show_error, show_info
from corvid_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class Page(Enum):
    """Pages of the window's stacked layout."""

    MAIN_MENU = auto()
    PREFERENCES = auto()
    TOPIC_SELECTION = auto()
    DIFFICULTY_SELECTION = auto()
    QUIZ = auto()
    RESULT = auto()


class MainWindow(QMainWindow):
    """Main Qt window; every page talks to the engine through one SessionManager."""

    def __init__(self, session_manager: SessionManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.session_manager = session_manager

        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._shuffle_seed: int | None = None

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.page_stack = QStackedWidget(self)

        self.preferences_panel = PreferencesPanel(
            self.session_manager,
            on_back=lambda: self._set_page(Page.MAIN_MENU),
            parent=self,
        )
        self.topic_panel = TopicPanel(
            self.session_manager,
            on_topic_selected=self._handle_topic_selected,
            on_back=lambda: self._set_page(Page.MAIN_MENU),
            parent=self,
        )
        self.difficulty_panel = DifficultyPanel(
            self.session_manager,
            on_difficulty_selected=self._handle_difficulty_selected,
            on_back=lambda: self._set_page(Page.TOPIC_SELECTION),
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            self.session_manager,
            on_answer=self._handle_answer,
            on_back=lambda: self._set_page(Page.TOPIC_SELECTION),
            parent=self,
        )
        self.result_panel = ResultPanel(on_ok=self._handle_ok, parent=self)

        self._pages: dict[Page, QWidget] = {
            Page.MAIN_MENU: self._build_main_menu(),
            Page.PREFERENCES: self.preferences_panel,
            Page.TOPIC_SELECTION: self.topic_panel,
            Page.DIFFICULTY_SELECTION: self.difficulty_panel,
            Page.QUIZ: self.quiz_panel,
            Page.RESULT: self.result_panel,
        }
        for widget in self._pages.values():
            self.page_stack.addWidget(widget)

        root_layout.addWidget(self.page_stack)
        self._set_page(Page.MAIN_MENU)

    def _build_main_menu(self) -> QWidget:
        menu = QWidget(self)
        layout = QVBoxLayout()
        menu.setLayout(layout)

        self.vocabulary_button = QPushButton(MENU_BUTTON_VOCABULARY, menu)
        self.vocabulary_button.clicked.connect(lambda: self._set_page(Page.TOPIC_SELECTION))
        layout.addWidget(self.vocabulary_button)

        self.preferences_button = QPushButton(MENU_BUTTON_PREFERENCES, menu)
        self.preferences_button.clicked.connect(lambda: self._set_page(Page.PREFERENCES))
        layout.addWidget(self.preferences_button)

        self.settings_button = QPushButton(MENU_BUTTON_SETTINGS, menu)
        self.settings_button.clicked.connect(self._handle_settings)
        layout.addWidget(self.settings_button)

        self.about_button = QPushButton(MENU_BUTTON_ABOUT, menu)
        self.about_button.clicked.connect(self._handle_about)
        layout.addWidget(self.about_button)

        self.help_button = QPushButton(MENU_BUTTON_HELP, menu)
        self.help_button.clicked.connect(self._handle_help)
        layout.addWidget(self.help_button)

        layout.addStretch()
        return menu

    def _set_page(self, page: Page) -> None:
        self.page_stack.setCurrentWidget(self._pages[page])

    def _handle_topic_selected(self, topic: Topic) -> None:
        try:
            self.session_manager.select_topic(topic)
        except KeyError as exc:
            show_error(self, "Topic unavailable", str(exc))
            return
        self.difficulty_panel.refresh_topic()
        self._set_page(Page.DIFFICULTY_SELECTION)

    def _handle_difficulty_selected(self, difficulty: Difficulty) -> None:
        try:
            self.session_manager.start_game(difficulty)
        except (GameConfigurationError, KeyError) as exc:
            logger.error("Could not start a game: %s", exc)
            show_error(self, "Cannot start quiz", str(exc))
            return
        self.quiz_panel.show_question()
        self._set_page(Page.QUIZ)

    def _handle_answer(self, choice_index: int) -> None:
        outcome = self.session_manager.submit_answer(choice_index)
        if outcome is None:
            return
        self.result_panel.show_outcome(
            outcome, reveal_answer=self.session_manager.advance_after_wrong
        )
        self._set_page(Page.RESULT)

    def _handle_ok(self) -> None:
        self.session_manager.acknowledge_result()
        self.quiz_panel.show_question()
        self._set_page(Page.QUIZ)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, self._ui_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._theme,
            self.session_manager.advance_after_wrong,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._theme = dialog.get_theme()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.session_manager.advance_after_wrong = dialog.get_advance_after_wrong()
            self.session_manager.set_shuffle_seed(self._shuffle_seed)

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, self._ui_font_size))
        self.quiz_panel.apply_theme(self._theme, self._game_font_size)
        self.result_panel.apply_theme(self._theme, self._game_font_size)
