"""
Tests for choice toggling and the commit guard.
"""

import pytest

from pocket_quiz.core.models import MultiSelection, QuestionType, SingleSelection
from pocket_quiz.core.selection import can_advance, empty_selection, toggle


class TestEmptySelection:
    def test_multi_choice_gets_index_set(self):
        assert empty_selection(QuestionType.MULTI_CHOICE) == MultiSelection()

    @pytest.mark.parametrize("question_type", [QuestionType.SINGLE_CHOICE, QuestionType.TRUE_FALSE])
    def test_single_answer_types_get_unset_index(self, question_type):
        assert empty_selection(question_type) == SingleSelection()


class TestToggle:
    """Radio semantics for single answers, checkbox semantics for multi-choice."""

    @pytest.mark.parametrize("question_type", [QuestionType.SINGLE_CHOICE, QuestionType.TRUE_FALSE])
    def test_single_choice_replaces_previous(self, question_type):
        selection = toggle(question_type, SingleSelection(), 0)
        selection = toggle(question_type, selection, 1)
        assert selection == SingleSelection(1)

    def test_single_choice_tapping_same_index_keeps_it(self):
        selection = toggle(QuestionType.SINGLE_CHOICE, SingleSelection(2), 2)
        assert selection == SingleSelection(2)

    def test_multi_choice_adds_index(self):
        selection = toggle(QuestionType.MULTI_CHOICE, MultiSelection(frozenset({1})), 2)
        assert selection == MultiSelection(frozenset({1, 2}))

    def test_multi_choice_removes_present_index(self):
        selection = toggle(QuestionType.MULTI_CHOICE, MultiSelection(frozenset({1, 2})), 1)
        assert selection == MultiSelection(frozenset({2}))

    @pytest.mark.parametrize("start", [frozenset(), frozenset({0}), frozenset({0, 3})])
    @pytest.mark.parametrize("index", [0, 1, 3])
    def test_multi_choice_double_toggle_is_identity(self, start, index):
        before = MultiSelection(start)
        once = toggle(QuestionType.MULTI_CHOICE, before, index)
        assert toggle(QuestionType.MULTI_CHOICE, once, index) == before

    def test_multi_choice_has_no_upper_bound(self):
        selection = MultiSelection()
        for index in range(4):
            selection = toggle(QuestionType.MULTI_CHOICE, selection, index)
        assert selection.indices == frozenset({0, 1, 2, 3})

    def test_toggle_does_not_mutate_input(self):
        before = MultiSelection(frozenset({1}))
        toggle(QuestionType.MULTI_CHOICE, before, 3)
        assert before.indices == frozenset({1})


class TestCanAdvance:
    def test_empty_multi_selection_blocks(self):
        assert can_advance(QuestionType.MULTI_CHOICE, MultiSelection()) is False

    def test_non_empty_multi_selection_allows(self):
        assert can_advance(QuestionType.MULTI_CHOICE, MultiSelection(frozenset({2}))) is True

    def test_unset_single_selection_blocks(self):
        assert can_advance(QuestionType.SINGLE_CHOICE, SingleSelection()) is False

    def test_index_zero_counts_as_set(self):
        assert can_advance(QuestionType.TRUE_FALSE, SingleSelection(0)) is True

    def test_mismatched_shape_blocks(self):
        assert can_advance(QuestionType.MULTI_CHOICE, SingleSelection(1)) is False
