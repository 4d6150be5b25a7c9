"""Linear progression through a question set."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from pocket_quiz.core.models import (
    Question,
    RecordedAnswer,
    Selection,
    SelectionRequiredError,
    SessionCompleteError,
)
from pocket_quiz.core.question_set import QuestionSet
from pocket_quiz.core.selection import can_advance

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizSession:
    """Snapshot of one quiz attempt.

    Snapshots are never modified; :func:`advance` returns a new one. While the
    session is running ``len(answers) == current_index``. Once the last
    question has been answered the session is complete and
    ``len(answers) == len(question_set)``.
    """

    question_set: QuestionSet
    current_index: int = 0
    answers: tuple[RecordedAnswer, ...] = field(default_factory=tuple)

    @classmethod
    def start(cls, question_set: QuestionSet) -> "QuizSession":
        logger.info("Starting quiz session with %d questions", len(question_set))
        return cls(question_set=question_set)

    @property
    def is_complete(self) -> bool:
        return len(self.answers) == len(self.question_set)

    @property
    def question_count(self) -> int:
        return len(self.question_set)

    @property
    def is_last_question(self) -> bool:
        return not self.is_complete and self.current_index == self.question_set.last_index()

    def current_question(self) -> Question:
        if self.is_complete:
            raise SessionCompleteError("The quiz is finished; there is no current question.")
        return self.question_set.get_question_at_index(self.current_index)

    def remaining_question_count(self) -> int:
        return len(self.question_set) - len(self.answers)


def advance(session: QuizSession, committed: Selection) -> QuizSession:
    """Record ``committed`` for the current question and move on.

    When the answered question was the last one the returned session is
    complete and keeps its final ``current_index``; callers must check
    :attr:`QuizSession.is_complete` and hand over to scoring instead of
    asking for another question.
    """
    question = session.current_question()
    if not can_advance(question.type, committed):
        raise SelectionRequiredError(
            f"Question {session.current_index + 1} needs a selection before advancing."
        )

    answer = RecordedAnswer(selected=committed.value, correct_reference=question.correct)
    answers = session.answers + (answer,)
    next_index = session.current_index
    if session.current_index < session.question_set.last_index():
        next_index += 1

    logger.debug("Recorded answer %d: %r", session.current_index + 1, answer.selected)
    return QuizSession(
        question_set=session.question_set,
        current_index=next_index,
        answers=answers,
    )
