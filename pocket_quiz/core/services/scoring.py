"""Grading of recorded answers and per-choice summary marks."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from pocket_quiz.core.models import (
    ChoiceMark,
    CorrectAnswer,
    IncompleteAnswersError,
    Question,
    RecordedAnswer,
    ScoreSummary,
)
from pocket_quiz.core.question_set import QuestionSet

logger = logging.getLogger(__name__)


def is_correct(correct_reference: CorrectAnswer, selected: CorrectAnswer | None) -> bool:
    """Return True when ``selected`` matches the answer key exactly.

    A single-index key only matches the same index. An index-set key only
    matches an index set with the same members; order never matters and a
    superset or subset is wrong.
    """
    if isinstance(correct_reference, frozenset):
        if not isinstance(selected, (set, frozenset)):
            return False
        return len(selected) == len(correct_reference) and all(
            index in selected for index in correct_reference
        )
    if isinstance(selected, (set, frozenset)) or selected is None:
        return False
    return selected == correct_reference


def score(question_set: QuestionSet, answers: Sequence[RecordedAnswer]) -> ScoreSummary:
    """Grade a completed session."""
    if len(answers) != len(question_set):
        raise IncompleteAnswersError(
            f"Cannot score {len(answers)} answers against {len(question_set)} questions."
        )

    per_question = tuple(
        is_correct(answer.correct_reference, answer.selected) for answer in answers
    )
    summary = ScoreSummary(total=sum(per_question), per_question=per_question)
    logger.info("Quiz scored %s", summary.format_total())
    return summary


def mark_choices(question: Question, selected: CorrectAnswer | None) -> list[ChoiceMark]:
    """Classify each choice of ``question`` for the summary screen."""
    if isinstance(selected, (set, frozenset)):
        chosen = set(selected)
    elif selected is None:
        chosen = set()
    else:
        chosen = {selected}

    marks: list[ChoiceMark] = []
    for index in range(len(question.choices)):
        if index not in chosen:
            marks.append(ChoiceMark.UNMARKED)
        elif index in question.correct_indices:
            marks.append(ChoiceMark.SELECTED_CORRECT)
        else:
            marks.append(ChoiceMark.SELECTED_INCORRECT)
    return marks
