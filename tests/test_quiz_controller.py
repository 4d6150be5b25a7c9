"""
Tests for the controller shared by the question and summary screens.
"""

import pytest

from pocket_quiz.core.models import (
    ChoiceMark,
    IncompleteAnswersError,
    MultiSelection,
    SelectionRequiredError,
    SessionCompleteError,
    SingleSelection,
)


class TestScenarios:
    """End-to-end runs over the sample questions."""

    def test_all_correct(self, controller, answer_all):
        answer_all(controller, [[1, 2], [0], [1]])
        summary = controller.get_score()
        assert summary.total == 3
        assert summary.per_question == (True, True, True)
        assert summary.format_total() == "3 / 3"

    def test_all_wrong(self, controller, answer_all):
        answer_all(controller, [[1], [1], [0]])
        assert controller.get_score().total == 0

    def test_superset_multi_answer(self, controller, answer_all):
        answer_all(controller, [[1, 2, 0], [0], [1]])
        summary = controller.get_score()
        assert summary.per_question[0] is False
        assert summary.total == 2

    def test_toggling_off_before_commit(self, controller, answer_all):
        answer_all(controller, [[1, 3, 2, 3], [2, 0], [0, 1]])
        assert controller.get_score().total == 3


class TestTransitions:
    def test_initial_snapshot(self, controller):
        snapshot = controller.snapshot()
        assert snapshot.selection == MultiSelection()
        assert snapshot.can_advance is False
        assert snapshot.is_complete is False

    def test_toggle_enables_advance(self, controller):
        controller.toggle_choice(2)
        assert controller.can_advance() is True
        controller.toggle_choice(2)
        assert controller.can_advance() is False

    def test_commit_resets_selection_for_next_type(self, controller):
        controller.toggle_choice(1)
        controller.commit()
        assert controller.get_selection() == SingleSelection()
        assert controller.get_current_question().prompt == "What is the capital of France?"

    def test_commit_without_selection_rejected(self, controller):
        with pytest.raises(SelectionRequiredError):
            controller.commit()
        assert controller.snapshot().session.answers == ()

    def test_out_of_range_choice_rejected(self, controller):
        with pytest.raises(ValueError):
            controller.toggle_choice(4)
        with pytest.raises(ValueError):
            controller.toggle_choice(-1)

    def test_complete_session_rejects_more_taps(self, controller, answer_all):
        answer_all(controller, [[1, 2], [0], [1]])
        assert controller.is_complete()
        assert controller.can_advance() is False
        with pytest.raises(SessionCompleteError):
            controller.toggle_choice(0)

    def test_score_before_completion_rejected(self, controller, answer_all):
        answer_all(controller, [[1, 2]])
        with pytest.raises(IncompleteAnswersError):
            controller.get_score()

    def test_snapshots_are_not_changed_by_later_commits(self, controller):
        controller.toggle_choice(1)
        before = controller.snapshot()
        controller.commit()
        assert before.session.current_index == 0
        assert before.selection == MultiSelection(frozenset({1}))


class TestListeners:
    def test_listener_receives_every_change(self, controller):
        received = []
        controller.subscribe(received.append)
        controller.toggle_choice(1)
        controller.commit()
        assert len(received) == 2
        assert received[0].selection == MultiSelection(frozenset({1}))
        assert received[1].session.current_index == 1

    def test_unsubscribe_stops_updates(self, controller):
        received = []
        controller.subscribe(received.append)
        controller.unsubscribe(received.append)
        controller.toggle_choice(0)
        assert received == []

    def test_last_commit_notifies_completion(self, controller, answer_all):
        received = []
        answer_all(controller, [[1, 2], [0]])
        controller.subscribe(received.append)
        controller.toggle_choice(1)
        controller.commit()
        assert received[-1].is_complete is True


class TestSummaryRows:
    def test_rows_mark_choices(self, controller, answer_all):
        answer_all(controller, [[0, 1], [0], [0]])
        rows = controller.get_summary_rows()
        assert [row.is_correct for row in rows] == [False, True, False]
        assert rows[0].marks == (
            ChoiceMark.SELECTED_INCORRECT,
            ChoiceMark.SELECTED_CORRECT,
            ChoiceMark.UNMARKED,
            ChoiceMark.UNMARKED,
        )
        assert rows[2].marks == (ChoiceMark.SELECTED_INCORRECT, ChoiceMark.UNMARKED)
