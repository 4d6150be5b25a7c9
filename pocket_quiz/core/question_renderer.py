"""HTML rendering for the question prompt and the score summary."""

from __future__ import annotations

from html import escape

from pocket_quiz.constants.ui_constants import SCORE_TEMPLATE
from pocket_quiz.core.markdown_math_renderer import renderer
from pocket_quiz.core.models import ChoiceMark, Question, ScoreSummary
from pocket_quiz.core.quiz_controller import QuestionSummary
from pocket_quiz.styling.styles import Styles


def choice_letter(index: int) -> str:
    return chr(ord("A") + index)


def render_prompt(question: Question, font_size: int = 14) -> str:
    """Render a question and its lettered choices for QWebEngineView.

    Choice labels go through the same Markdown and MathJax pipeline as the
    prompt; the Qt buttons underneath only carry the letters.
    """
    parts = [renderer.render_fragment(question.prompt)]
    parts.append('<ol class="choices">')
    for index, choice in enumerate(question.choices):
        parts.append(
            f'<li><strong>{choice_letter(index)}.</strong> {renderer.render_inline(choice)}</li>'
        )
    parts.append("</ol>")
    return renderer.wrap_with_mathjax(
        "\n".join(parts),
        font_size=font_size,
        extra_css=Styles.get_prompt_css(),
    )


def render_summary_fragment(
    summary: ScoreSummary,
    rows: list[QuestionSummary],
    include_score: bool = True,
) -> str:
    """Render the score line and every question with its marked choices."""
    parts: list[str] = []
    if include_score:
        parts.append(f'<p class="score">{escape(SCORE_TEMPLATE.format(score=summary.format_total()))}</p>')
    for row in rows:
        parts.append('<div class="question-block">')
        parts.append(f'<div class="prompt">{renderer.render_fragment(row.question.prompt)}</div>')
        for choice, mark in zip(row.question.choices, row.marks):
            css_class = "choice" if mark is ChoiceMark.UNMARKED else f"choice {mark.value}"
            parts.append(f'<div class="{css_class}">{renderer.render_inline(choice)}</div>')
        parts.append("</div>")
    return "\n".join(parts)


def render_summary(
    summary: ScoreSummary,
    rows: list[QuestionSummary],
    font_size: int = 14,
    include_score: bool = True,
) -> str:
    """Render the summary screen as a full HTML document."""
    fragment = render_summary_fragment(summary, rows, include_score=include_score)
    return renderer.wrap_with_mathjax(
        fragment,
        title="Quiz summary",
        font_size=font_size,
        extra_css=Styles.get_summary_css(),
    )
