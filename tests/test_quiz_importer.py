"""
Tests for the plain-text question file importer.
"""

from pathlib import Path
from string import ascii_uppercase

import pytest

from pocket_quiz.core.models import QuestionType
from pocket_quiz.core.question_set import sample_question_set
from pocket_quiz.core.quiz_importer import (
    QuizImportError,
    load_question_set_or_sample,
    load_quiz_from_file,
    parse_quiz_text,
)

EXAMPLE_FILE = Path(__file__).resolve().parent.parent / "quiz_questions.example.txt"


class TestParseQuizText:
    def test_example_file_matches_sample_set(self):
        imported = load_quiz_from_file(EXAMPLE_FILE)
        assert imported.question_set == sample_question_set()
        assert imported.source_path == EXAMPLE_FILE

    def test_blank_line_separates_blocks(self):
        questions = parse_quiz_text("Q: One?\nA: x\nB: y\nCORRECT: A\n\nQ: Two?\nA: x\nB: y\nCORRECT: B\n")
        assert [q.prompt for q in questions] == ["One?", "Two?"]
        assert questions[1].correct == 1

    def test_multiline_prompt_and_choice(self):
        questions = parse_quiz_text("Q: First line\nsecond line\nA: alpha\nmore alpha\nB: beta\nCORRECT: A")
        assert questions[0].prompt == "First line\nsecond line"
        assert questions[0].choices[0] == "alpha\nmore alpha"

    def test_default_type_is_single_choice(self):
        questions = parse_quiz_text("Q: Pick\nA: x\nB: y\nC: z\nCORRECT: c")
        assert questions[0].type is QuestionType.SINGLE_CHOICE
        assert questions[0].correct == 2

    def test_multi_choice_answer_list(self):
        questions = parse_quiz_text("Q: Pick\nTYPE: multi\nA: x\nB: y\nC: z\nCORRECT: C, A")
        assert questions[0].correct == frozenset({0, 2})

    def test_true_false_defaults_choices(self):
        questions = parse_quiz_text("Q: Sky is blue\nTYPE: truefalse\nCORRECT: A")
        assert questions[0].choices == ("True", "False")
        assert questions[0].correct == 0

    def test_more_than_four_choices(self):
        questions = parse_quiz_text("Q: Pick\nA: 1\nB: 2\nC: 3\nD: 4\nE: 5\nF: 6\nCORRECT: F")
        assert len(questions[0].choices) == 6
        assert questions[0].correct == 5

    def test_q_is_a_choice_letter_after_first_choice(self):
        letters = ascii_uppercase[:17]
        lines = ["Q: Which letter comes seventeenth?"]
        lines += [f"{letter}: option {letter}" for letter in letters]
        lines.append("CORRECT: Q")
        questions = parse_quiz_text("\n".join(lines))
        assert questions[0].prompt == "Which letter comes seventeenth?"
        assert len(questions[0].choices) == 17
        assert questions[0].choices[16] == "option Q"
        assert questions[0].correct == 16

    def test_empty_text_has_no_questions(self):
        assert parse_quiz_text("\n\n---\n") == []


class TestImportErrors:
    @pytest.mark.parametrize(
        "text, message",
        [
            ("A: x\nB: y\nCORRECT: A", "Question text missing"),
            ("Q: Pick\nA: x\nCORRECT: A", "at least two choices"),
            ("Q: Pick\nA: x\nC: y\nCORRECT: A", "consecutive letters"),
            ("Q: Pick\nA: x\nB: y", "CORRECT must name"),
            ("Q: Pick\nA: x\nB: y\nCORRECT: C", "CORRECT must be one of A, B"),
            ("Q: Pick\nA: x\nB: y\nCORRECT: A, B", "Only multi questions"),
            ("Q: Pick\nTYPE: multi\nA: x\nB: y\nCORRECT: A, A", "more than once"),
            ("Q: Pick\nTYPE: essay\nA: x\nB: y\nCORRECT: A", "Unknown question TYPE"),
            ("Q: Pick\nTYPE: truefalse\nA: x\nB: y\nC: z\nCORRECT: A", "exactly two choices"),
            ("Q: Pick\nA: x\nA: again\nCORRECT: A", "defined twice"),
        ],
    )
    def test_malformed_block(self, text, message):
        with pytest.raises(QuizImportError, match=message):
            parse_quiz_text(text)

    def test_error_names_question_number(self):
        text = "Q: Fine\nA: x\nB: y\nCORRECT: A\n\n---\n\nQ: Broken\nA: x\nB: y\nCORRECT: Z"
        with pytest.raises(QuizImportError, match="Question 2"):
            parse_quiz_text(text)

    def test_file_without_questions(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n\n", encoding="utf-8")
        with pytest.raises(QuizImportError):
            load_quiz_from_file(path)


class TestLoadQuestionSetOrSample:
    def test_missing_file_uses_sample_without_error(self, tmp_path):
        question_set, error = load_question_set_or_sample(tmp_path / "absent.txt")
        assert question_set == sample_question_set()
        assert error is None

    def test_valid_file_is_loaded(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text("Q: Pick\nA: x\nB: y\nCORRECT: B\n", encoding="utf-8")
        question_set, error = load_question_set_or_sample(path)
        assert error is None
        assert len(question_set) == 1
        assert question_set[0].correct == 1

    def test_broken_file_falls_back_and_reports(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text("Q: Pick\nA: x\nB: y\nCORRECT: Z\n", encoding="utf-8")
        question_set, error = load_question_set_or_sample(path)
        assert question_set == sample_question_set()
        assert error is not None
        assert "Question 1" in error
