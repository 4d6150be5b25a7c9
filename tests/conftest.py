"""
Pytest configuration and shared fixtures for PocketQuiz tests.
"""

import pytest

from pocket_quiz.core.question_set import sample_question_set
from pocket_quiz.core.quiz_controller import QuizController


@pytest.fixture
def sample_set():
    """Fixture providing the built-in three-question set."""
    return sample_question_set()


@pytest.fixture
def controller(sample_set):
    """Fixture providing a fresh controller over the sample questions."""
    return QuizController(sample_set)


@pytest.fixture
def answer_all():
    """Fixture returning a helper that taps choices on each question and commits."""

    def _answer_all(controller, taps_per_question):
        for taps in taps_per_question:
            for index in taps:
                controller.toggle_choice(index)
            controller.commit()
        return controller

    return _answer_all
