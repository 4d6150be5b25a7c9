"""Qt main window switching between the question and summary screens."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pocket_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from pocket_quiz.constants.ui_constants import (
    ABOUT_BUTTON,
    MOBILE_URL_PLACEHOLDER,
    MOBILE_URL_TEMPLATE,
    WINDOW_TITLE,
)
from pocket_quiz.core.quiz_controller import QuizController, QuizSnapshot
from pocket_quiz.styling.styles import Styles
from pocket_quiz.ui.components.question_panel import QuestionPanel
from pocket_quiz.ui.components.summary_panel import SummaryPanel
from pocket_quiz.ui.dialog_helpers import show_info


class QuizScreen(Enum):
    """Screens of the quiz window."""

    QUESTION = auto()
    SUMMARY = auto()


class QuizMainWindow(QMainWindow):
    """Top-level window that owns the quiz controller and routes its snapshots."""

    def __init__(self, controller: QuizController, mobile_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.controller = controller
        self.mobile_url = mobile_url or MOBILE_URL_PLACEHOLDER
        self._screen = QuizScreen.QUESTION
        self._font_size: int = 14

        self._build_ui()
        self._apply_styles()
        self.controller.subscribe(self._handle_snapshot)
        self._handle_snapshot(self.controller.snapshot())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        top_row = QHBoxLayout()
        self.mobile_url_label = QLabel(MOBILE_URL_TEMPLATE.format(url=self.mobile_url), self)
        self.mobile_url_label.setWordWrap(True)
        top_row.addWidget(self.mobile_url_label, stretch=1)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        top_row.addWidget(self.about_button)
        root_layout.addLayout(top_row)

        self.screen_stack = QStackedWidget(self)
        self.question_panel = QuestionPanel(
            on_choice=self.controller.toggle_choice,
            on_next=self._handle_next,
            parent=self,
        )
        self.summary_panel = SummaryPanel(parent=self)
        self.screen_stack.addWidget(self.question_panel)
        self.screen_stack.addWidget(self.summary_panel)
        root_layout.addWidget(self.screen_stack)

    def _set_screen(self, screen: QuizScreen) -> None:
        self._screen = screen
        index_map = {
            QuizScreen.QUESTION: 0,
            QuizScreen.SUMMARY: 1,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])

    def _handle_snapshot(self, snapshot: QuizSnapshot) -> None:
        if snapshot.is_complete:
            if self._screen != QuizScreen.SUMMARY:
                self.summary_panel.show_summary(
                    self.controller.get_score(),
                    self.controller.get_summary_rows(),
                )
                self._set_screen(QuizScreen.SUMMARY)
            return
        self.question_panel.show_snapshot(snapshot)
        self._set_screen(QuizScreen.QUESTION)

    def _handle_next(self) -> None:
        if not self.controller.can_advance():
            return
        self.controller.commit()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.question_panel.apply_font_size(self._font_size)
        self.summary_panel.apply_font_size(self._font_size)

    def closeEvent(self, event) -> None:
        self.controller.unsubscribe(self._handle_snapshot)
        super().closeEvent(event)
