"""Immutable, ordered collection of quiz questions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pocket_quiz.core.models import Question, QuestionType


class QuestionSet:
    """Read-only sequence of questions shared by every session that uses it."""

    __slots__ = ("_questions",)

    def __init__(self, questions: Iterable[Question]) -> None:
        prepared = tuple(questions)
        if not prepared:
            raise ValueError("Quiz must contain at least one question.")
        for question in prepared:
            if not isinstance(question, Question):
                raise TypeError(f"Expected Question, got {type(question).__name__}.")
        self._questions = prepared

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuestionSet):
            return NotImplemented
        return self._questions == other._questions

    def __hash__(self) -> int:
        return hash(self._questions)

    def __repr__(self) -> str:
        return f"QuestionSet({len(self._questions)} questions)"

    def get_question_at_index(self, index: int) -> Question:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        return self._questions[index]

    def last_index(self) -> int:
        return len(self._questions) - 1


def sample_question_set() -> QuestionSet:
    """Return the built-in questions used when no quiz file is available."""
    return QuestionSet(
        [
            Question(
                prompt="What are the other two primary colours besides Yellow?",
                type=QuestionType.MULTI_CHOICE,
                choices=("Green", "Red", "Blue", "White"),
                correct=frozenset({1, 2}),
            ),
            Question(
                prompt="What is the capital of France?",
                type=QuestionType.SINGLE_CHOICE,
                choices=("Paris", "London", "Rome", "Berlin"),
                correct=0,
            ),
            Question(
                prompt="The earth is flat.",
                type=QuestionType.TRUE_FALSE,
                choices=("True", "False"),
                correct=1,
            ),
        ]
    )
