"""Qt UI components for the quiz application."""

from .dialog_helpers import show_error, show_info
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "show_error",
    "show_info",
]
