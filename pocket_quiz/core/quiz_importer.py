"""Utilities for importing quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    TYPE: single | multi | truefalse   (optional, defaults to single)
    A: First choice
    B: Second choice
    ...                                (at least two choices, A-Z in order)
    CORRECT: B        for single-choice and true/false questions
    CORRECT: B, C     for multi-choice questions

A ``Q:`` line only starts the question text before the first choice, so
``Q`` is also usable as a choice letter.

A ``truefalse`` block may leave out its choices; it then gets "True" and
"False".

Example:

    Q: Which of these are prime?
    TYPE: multi
    A: 2
    B: 4
    C: 7
    CORRECT: A, C
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from string import ascii_uppercase

from pocket_quiz.core.models import InvalidQuestionError, Question, QuestionType
from pocket_quiz.core.question_set import QuestionSet, sample_question_set

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    question_set: QuestionSet


_TYPE_ALIASES = {
    "SINGLE": QuestionType.SINGLE_CHOICE,
    "SINGLE-CHOICE": QuestionType.SINGLE_CHOICE,
    "MULTI": QuestionType.MULTI_CHOICE,
    "MULTI-CHOICE": QuestionType.MULTI_CHOICE,
    "TRUEFALSE": QuestionType.TRUE_FALSE,
    "TRUE-FALSE": QuestionType.TRUE_FALSE,
}
_TRUE_FALSE_CHOICES = ("True", "False")


def load_question_set_or_sample(file_path: Path) -> tuple[QuestionSet, str | None]:
    """Load ``file_path`` when it exists, otherwise use the built-in questions.

    The second item is the import error message when the file exists but
    could not be read; the caller decides how to report it.
    """
    if not file_path.exists():
        logger.info("No %s found; using the built-in sample questions", file_path)
        return sample_question_set(), None
    try:
        return load_quiz_from_file(file_path).question_set, None
    except (OSError, QuizImportError) as exc:
        logger.warning("Could not load %s (%s); using the built-in sample questions", file_path, exc)
        return sample_question_set(), str(exc)


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    logger.info("Loaded %d questions from %s", len(questions), file_path)
    return ImportedQuiz(source_path=file_path, question_set=QuestionSet(questions))


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions: list[Question] = []
    for number, block in enumerate(blocks, start=1):
        try:
            questions.append(_parse_block(block))
        except QuizImportError as exc:
            raise QuizImportError(f"Question {number}: {exc}") from exc
    return questions


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    choices: dict[str, str] = {}
    correct_letters: list[str] | None = None
    question_type = QuestionType.SINGLE_CHOICE
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:") and not choices:
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("TYPE:"):
            raw_type = line.split(":", 1)[1].strip().upper()
            if raw_type not in _TYPE_ALIASES:
                raise QuizImportError(f"Unknown question TYPE '{raw_type.lower()}'.")
            question_type = _TYPE_ALIASES[raw_type]
            current_section = None
            continue

        if upper.startswith("CORRECT:"):
            raw_value = line.split(":", 1)[1]
            correct_letters = [part.strip().upper() for part in raw_value.split(",") if part.strip()]
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in ascii_uppercase and line[1] == ":":
            letter = line[0].upper()
            if letter in choices:
                raise QuizImportError(f"Choice {letter} is defined twice.")
            choices[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in choices:
            choices[current_section] = choices[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    prompt = "\n".join(question_lines).strip()
    if not prompt:
        raise QuizImportError("Question text missing (Q: ...)")

    choice_list = _ordered_choices(choices, question_type)
    if not correct_letters:
        raise QuizImportError("CORRECT must name the correct choice.")
    indices = [_letter_index(letter, len(choice_list)) for letter in correct_letters]

    if question_type.is_multi:
        if len(set(indices)) != len(indices):
            raise QuizImportError("CORRECT lists the same choice more than once.")
        correct: int | frozenset[int] = frozenset(indices)
    else:
        if len(indices) != 1:
            raise QuizImportError("Only multi questions may have several CORRECT choices.")
        correct = indices[0]

    try:
        return Question(
            prompt=prompt,
            type=question_type,
            choices=tuple(choice_list),
            correct=correct,
        )
    except InvalidQuestionError as exc:
        raise QuizImportError(str(exc)) from exc


def _ordered_choices(choices: dict[str, str], question_type: QuestionType) -> list[str]:
    if not choices and question_type is QuestionType.TRUE_FALSE:
        return list(_TRUE_FALSE_CHOICES)
    expected = list(ascii_uppercase[: len(choices)])
    if sorted(choices) != expected:
        raise QuizImportError("Choices must use consecutive letters starting at A.")
    if len(choices) < 2:
        raise QuizImportError("Each question must define at least two choices.")
    ordered = [choices[letter].strip() for letter in expected]
    if any(not choice for choice in ordered):
        raise QuizImportError("Choice text cannot be empty.")
    return ordered


def _letter_index(letter: str, choice_count: int) -> int:
    if len(letter) != 1 or letter not in ascii_uppercase[:choice_count]:
        valid = ", ".join(ascii_uppercase[:choice_count])
        raise QuizImportError(f"CORRECT must be one of {valid}.")
    return ascii_uppercase.index(letter)
