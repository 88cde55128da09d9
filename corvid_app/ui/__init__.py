"""Qt UI components for the flashcard application."""

from .dialog_helpers import show_error, show_info, show_warning
from .main_window import MainWindow, Page

__all__ = [
    "MainWindow",
    "Page",
    "show_error",
    "show_info",
    "show_warning",
]
