"""Component showing the active question and its choices."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pocket_quiz.constants.ui_constants import (
    FINISH_BUTTON,
    MULTI_CHOICE_HINT,
    NEXT_BUTTON,
    QUESTION_PROGRESS_TEMPLATE,
    SINGLE_CHOICE_HINT,
)
from pocket_quiz.core.question_renderer import choice_letter, render_prompt
from pocket_quiz.core.quiz_controller import QuizSnapshot
from pocket_quiz.styling.styles import Styles


class QuestionPanel(QWidget):
    """UI component for answering one question at a time.

    The panel never changes quiz state itself: taps are forwarded through
    ``on_choice`` and ``on_next`` and the panel redraws from the snapshot it
    is given afterwards.
    """

    def __init__(
        self,
        on_choice: Callable[[int], None],
        on_next: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_choice = on_choice
        self.on_next = on_next
        self._font_size: int = 14
        self._displayed_index: int | None = None
        self.choice_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        self.progress_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.hint_label = QLabel("", self)
        header_row.addWidget(self.hint_label)
        layout.addLayout(header_row)

        self.prompt_view = QWebEngineView(self)
        self.prompt_view.setMinimumHeight(120)
        layout.addWidget(self.prompt_view, stretch=1)

        self.choices_layout = QVBoxLayout()
        layout.addLayout(self.choices_layout)

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.setEnabled(False)
        self.next_button.clicked.connect(self._handle_next_click)
        layout.addWidget(self.next_button)

    def show_snapshot(self, snapshot: QuizSnapshot) -> None:
        """Redraw the panel for the current question and selection."""
        session = snapshot.session
        if snapshot.is_complete:
            self.next_button.setEnabled(False)
            return

        question = session.current_question()
        if self._displayed_index != session.current_index:
            self._displayed_index = session.current_index
            self.progress_label.setText(
                QUESTION_PROGRESS_TEMPLATE.format(
                    number=session.current_index + 1,
                    count=session.question_count,
                )
            )
            self.hint_label.setText(MULTI_CHOICE_HINT if question.type.is_multi else SINGLE_CHOICE_HINT)
            self.prompt_view.setHtml(render_prompt(question, self._font_size))
            self._rebuild_choice_buttons(len(question.choices))
            self.next_button.setText(FINISH_BUTTON if session.is_last_question else NEXT_BUTTON)

        for index, button in enumerate(self.choice_buttons):
            button.setChecked(snapshot.selection.contains(index))
        self.next_button.setEnabled(snapshot.can_advance)

    def _rebuild_choice_buttons(self, choice_count: int) -> None:
        while self.choices_layout.count():
            item = self.choices_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.choice_buttons = []
        for index in range(choice_count):
            button = QPushButton(choice_letter(index), self)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, i=index: self.on_choice(i))
            button.setStyleSheet(f"font-size: {self._font_size}pt;")
            self.choices_layout.addWidget(button)
            self.choice_buttons.append(button)

    def _handle_next_click(self) -> None:
        self.next_button.setEnabled(False)
        self.on_next()

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        game_label_style = f"font-size: {font_size}pt;"
        self.hint_label.setStyleSheet(game_label_style)
        self.next_button.setStyleSheet(game_label_style)
        for button in self.choice_buttons:
            button.setStyleSheet(f"font-size: {font_size}pt;")
