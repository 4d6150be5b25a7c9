"""State container shared by the question and summary screens."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging

from pocket_quiz.core.models import (
    ChoiceMark,
    Question,
    ScoreSummary,
    Selection,
)
from pocket_quiz.core.question_set import QuestionSet
from pocket_quiz.core.selection import can_advance, empty_selection, toggle
from pocket_quiz.core.services.quiz_session import QuizSession, advance
from pocket_quiz.core.services.scoring import mark_choices, score

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """What the presentation layer needs to draw the current screen."""

    session: QuizSession
    selection: Selection

    @property
    def is_complete(self) -> bool:
        return self.session.is_complete

    @property
    def can_advance(self) -> bool:
        if self.session.is_complete:
            return False
        return can_advance(self.session.current_question().type, self.selection)


@dataclass(frozen=True, slots=True)
class QuestionSummary:
    """One row of the summary screen."""

    question: Question
    is_correct: bool
    marks: tuple[ChoiceMark, ...]


SnapshotListener = Callable[[QuizSnapshot], None]


class QuizController:
    """Facade over selection, progression and scoring.

    The controller owns the current :class:`QuizSession` snapshot and the
    in-progress selection. Screens read immutable snapshots and call back
    into the controller; registered listeners are notified after every
    change.
    """

    def __init__(self, question_set: QuestionSet) -> None:
        self._question_set = question_set
        self._session = QuizSession.start(question_set)
        self._selection = empty_selection(self._session.current_question().type)
        self._listeners: list[SnapshotListener] = []

    # --- Listeners ---

    def subscribe(self, listener: SnapshotListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # --- Read access ---

    def snapshot(self) -> QuizSnapshot:
        return QuizSnapshot(session=self._session, selection=self._selection)

    def get_current_question(self) -> Question:
        return self._session.current_question()

    def get_selection(self) -> Selection:
        return self._selection

    def is_complete(self) -> bool:
        return self._session.is_complete

    def can_advance(self) -> bool:
        return self.snapshot().can_advance

    # --- Transitions ---

    def toggle_choice(self, choice_index: int) -> Selection:
        """Apply a tap on ``choice_index`` to the current question."""
        question = self._session.current_question()
        if not 0 <= choice_index < len(question.choices):
            raise ValueError(
                f"Choice index {choice_index} is outside the {len(question.choices)} available choices."
            )
        self._selection = toggle(question.type, self._selection, choice_index)
        self._notify()
        return self._selection

    def commit(self) -> QuizSnapshot:
        """Record the current selection and move to the next question or finish."""
        self._session = advance(self._session, self._selection)
        if self._session.is_complete:
            logger.info("Quiz session complete after %d answers", len(self._session.answers))
        else:
            self._selection = empty_selection(self._session.current_question().type)
        self._notify()
        return self.snapshot()

    # --- Summary ---

    def get_score(self) -> ScoreSummary:
        return score(self._question_set, self._session.answers)

    def get_summary_rows(self) -> list[QuestionSummary]:
        summary = self.get_score()
        return [
            QuestionSummary(
                question=question,
                is_correct=correct,
                marks=tuple(mark_choices(question, answer.selected)),
            )
            for question, answer, correct in zip(
                self._question_set, self._session.answers, summary.per_question
            )
        ]
