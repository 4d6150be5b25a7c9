"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class QuestionType(Enum):
    """Kinds of questions a quiz can contain."""

    SINGLE_CHOICE = "single-choice"
    MULTI_CHOICE = "multi-choice"
    TRUE_FALSE = "true-false"

    @property
    def is_multi(self) -> bool:
        return self is QuestionType.MULTI_CHOICE


class ChoiceMark(Enum):
    """How a choice is highlighted on the summary screen."""

    UNMARKED = "unmarked"
    SELECTED_CORRECT = "selected-correct"
    SELECTED_INCORRECT = "selected-incorrect"


class QuizError(Exception):
    """Base class for quiz contract violations."""


class InvalidQuestionError(QuizError, ValueError):
    """Raised when a question record breaks the data-model invariants."""


class SelectionRequiredError(QuizError):
    """Raised when advancing without a committable selection."""


class SessionCompleteError(QuizError):
    """Raised when a finished session is asked for more questions."""


class IncompleteAnswersError(QuizError):
    """Raised when scoring a session that has not answered every question."""


# Either a single choice index or a set of choice indices.
CorrectAnswer = int | frozenset[int]


@dataclass(frozen=True, slots=True)
class Question:
    """Immutable quiz question.

    ``correct`` is a single index for single-choice and true/false questions
    and a non-empty frozenset of indices for multi-choice questions.
    """

    prompt: str
    type: QuestionType
    choices: tuple[str, ...]
    correct: CorrectAnswer

    def __post_init__(self) -> None:
        if not self.prompt.strip():
            raise InvalidQuestionError("Question prompt must not be empty.")
        if len(self.choices) < 2:
            raise InvalidQuestionError("A question needs at least two choices.")
        if self.type is QuestionType.TRUE_FALSE and len(self.choices) != 2:
            raise InvalidQuestionError("True/false questions have exactly two choices.")

        if self.type.is_multi:
            if not isinstance(self.correct, frozenset):
                raise InvalidQuestionError("Multi-choice answers must be a set of indices.")
            if not self.correct:
                raise InvalidQuestionError("Multi-choice questions need at least one correct choice.")
            indices = self.correct
        else:
            if isinstance(self.correct, frozenset) or isinstance(self.correct, bool):
                raise InvalidQuestionError(f"{self.type.value} answers must be a single index.")
            indices = frozenset({self.correct})

        for index in indices:
            if not 0 <= index < len(self.choices):
                raise InvalidQuestionError(
                    f"Correct index {index} is outside the {len(self.choices)} available choices."
                )

    @property
    def correct_indices(self) -> frozenset[int]:
        if isinstance(self.correct, frozenset):
            return self.correct
        return frozenset({self.correct})


@dataclass(frozen=True, slots=True)
class SingleSelection:
    """Radio-button selection; ``index`` is None until a choice is tapped."""

    index: int | None = None

    def is_empty(self) -> bool:
        return self.index is None

    def contains(self, choice_index: int) -> bool:
        return self.index == choice_index

    @property
    def value(self) -> int | None:
        return self.index


@dataclass(frozen=True, slots=True)
class MultiSelection:
    """Checkbox selection over any number of choices."""

    indices: frozenset[int] = field(default_factory=frozenset)

    def is_empty(self) -> bool:
        return not self.indices

    def contains(self, choice_index: int) -> bool:
        return choice_index in self.indices

    @property
    def value(self) -> frozenset[int]:
        return self.indices


Selection = SingleSelection | MultiSelection


@dataclass(frozen=True, slots=True)
class RecordedAnswer:
    """A committed selection together with the answer key it was graded against."""

    selected: CorrectAnswer
    correct_reference: CorrectAnswer


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Result of grading a completed session."""

    total: int
    per_question: tuple[bool, ...]

    @property
    def question_count(self) -> int:
        return len(self.per_question)

    def format_total(self) -> str:
        return f"{self.total} / {self.question_count}"
