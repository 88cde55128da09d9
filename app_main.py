"""Application entry point for the Corvid flashcard trainer."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from corvid_app.constants.about import APP_ID, APP_NAME
from corvid_app.core.services.vocabulary_repository import VocabularyRepository
from corvid_app.core.session_manager import SessionManager
from corvid_app.ui.main_window import MainWindow
from corvid_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the word lists, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s…", APP_NAME)

    repository = VocabularyRepository()
    repository.load_default_topics()
    if not repository.topics():
        logger.error("No vocabulary could be loaded; every topic will be disabled.")
    session_manager = SessionManager(repository)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setDesktopFileName(APP_ID)
    window = MainWindow(session_manager=session_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
