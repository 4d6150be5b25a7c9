"""Application entry point for PocketQuiz."""

from __future__ import annotations

from pathlib import Path
import socket
import sys

from PySide6.QtWidgets import QApplication

from pocket_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from pocket_quiz.constants.quiz_constants import DEFAULT_QUESTION_FILE
from pocket_quiz.constants.ui_constants import IMPORT_FAILED_TEMPLATE, IMPORT_FAILED_TITLE
from pocket_quiz.core.quiz_controller import QuizController
from pocket_quiz.core.quiz_importer import load_question_set_or_sample
from pocket_quiz.core.services.session_registry import SessionRegistry
from pocket_quiz.server.api_server import start_api_server
from pocket_quiz.ui.dialog_helpers import show_error
from pocket_quiz.ui.quiz_main_window import QuizMainWindow
from pocket_quiz.utils.logging_config import configure_logging


def _determine_mobile_url(port: int) -> str:
    """Best-effort determination of the local IP for the phone-facing URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting PocketQuiz…")

    question_path = Path(DEFAULT_QUESTION_FILE)
    question_set, import_error = load_question_set_or_sample(question_path)
    start_api_server(SessionRegistry(question_set), host=DEFAULT_HOST, port=DEFAULT_PORT)
    mobile_url = _determine_mobile_url(DEFAULT_PORT)
    logger.info("Mobile quiz page available at %s", mobile_url)

    app = QApplication(sys.argv)
    window = QuizMainWindow(controller=QuizController(question_set), mobile_url=mobile_url)
    window.show()
    if import_error is not None:
        show_error(
            window,
            IMPORT_FAILED_TITLE,
            IMPORT_FAILED_TEMPLATE.format(path=question_path, error=import_error),
        )
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
