"""Component for the final score summary."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pocket_quiz.constants.ui_constants import SCORE_TEMPLATE
from pocket_quiz.core.question_renderer import render_summary
from pocket_quiz.core.quiz_controller import QuestionSummary
from pocket_quiz.core.models import ScoreSummary
from pocket_quiz.styling.styles import Styles


class SummaryPanel(QWidget):
    """Shows the total score and every question with its marked choices."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._font_size: int = 14
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.summary_view = QWebEngineView(self)
        layout.addWidget(self.summary_view, stretch=1)

    def show_summary(self, summary: ScoreSummary, rows: list[QuestionSummary]) -> None:
        self.score_label.setText(SCORE_TEMPLATE.format(score=summary.format_total()))
        self.summary_view.setHtml(render_summary(summary, rows, self._font_size, include_score=False))

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
