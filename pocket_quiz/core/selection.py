"""Per-question selection logic: toggling choices and the commit guard."""

from __future__ import annotations

from pocket_quiz.core.models import MultiSelection, QuestionType, Selection, SingleSelection


def empty_selection(question_type: QuestionType) -> Selection:
    """Return the initial selection for a question of the given type."""
    if question_type.is_multi:
        return MultiSelection()
    return SingleSelection()


def toggle(question_type: QuestionType, current: Selection, choice_index: int) -> Selection:
    """Return the selection that results from tapping ``choice_index``.

    Single-choice and true/false questions replace whatever was selected.
    Multi-choice questions add the index, or remove it when already present.
    """
    if question_type.is_multi:
        indices = current.indices if isinstance(current, MultiSelection) else frozenset()
        return MultiSelection(indices ^ {choice_index})
    return SingleSelection(choice_index)


def can_advance(question_type: QuestionType, current: Selection) -> bool:
    """Whether ``current`` may be committed for a question of ``question_type``."""
    if question_type.is_multi:
        return isinstance(current, MultiSelection) and not current.is_empty()
    return isinstance(current, SingleSelection) and not current.is_empty()
