"""Markdown rendering that leaves TeX math for MathJax.

Prompts and choice labels are Markdown. Math spans (``$...$`` and
``$$...$$``) are lifted out before Markdown runs, so underscores and
asterisks inside a formula are not turned into emphasis, and are put back
verbatim (HTML-escaped) for MathJax to typeset in QWebEngineView or the
phone browser.
"""

from __future__ import annotations

from html import escape
import re

from markdown_it import MarkdownIt

from pocket_quiz.styling.color_palette import ColorPalette

MATHJAX_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
EMPTY_TEXT_HTML = "<p><em>No content provided.</em></p>"

_MATH_SPAN = re.compile(r"(?<!\\)\$\$.+?(?<!\\)\$\$|(?<!\\)\$[^$\n]+?(?<!\\)\$", re.DOTALL)
# Private-use code points pass through markdown-it untouched.
_PLACEHOLDER = re.compile("\ue000(\\d+)\ue001")

_DOCUMENT_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: {text_color}; }}
      .question-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      .question-html p {{ margin: 0.4rem 0; }}
      {extra_css}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src="{script_url}"></script>
  </head>
  <body>
    <div class="question-html">{body}</div>
  </body>
</html>"""


class MarkdownMathRenderer:
    """Renders quiz text to HTML fragments and MathJax-enabled documents."""

    def __init__(self, allow_html: bool = False) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": allow_html}).enable(
            ["table", "strikethrough"]
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render block Markdown (paragraphs, lists, tables)."""
        text = markdown_text.strip()
        if not text:
            return EMPTY_TEXT_HTML
        protected, spans = _protect_math(text)
        return _restore_math(self._markdown.render(protected), spans)

    def render_inline(self, markdown_text: str) -> str:
        """Render a one-line label, such as a choice, without a ``<p>`` wrapper."""
        protected, spans = _protect_math(markdown_text.strip())
        return _restore_math(self._markdown.renderInline(protected), spans)

    def wrap_with_mathjax(
        self,
        body_html: str,
        title: str = "PocketQuiz",
        font_size: int = 14,
        extra_css: str = "",
    ) -> str:
        return _DOCUMENT_TEMPLATE.format(
            title=escape(title),
            text_color=ColorPalette.TEXT_PRIMARY,
            font_size=font_size,
            extra_css=extra_css,
            script_url=MATHJAX_SCRIPT_URL,
            body=body_html,
        )

    def render_full_document(self, markdown_text: str, title: str = "PocketQuiz", font_size: int = 14) -> str:
        return self.wrap_with_mathjax(self.render_fragment(markdown_text), title=title, font_size=font_size)


def _protect_math(text: str) -> tuple[str, list[str]]:
    spans: list[str] = []

    def stash(match: re.Match[str]) -> str:
        spans.append(match.group(0))
        return f"\ue000{len(spans) - 1}\ue001"

    return _MATH_SPAN.sub(stash, text), spans


def _restore_math(html: str, spans: list[str]) -> str:
    if not spans:
        return html
    return _PLACEHOLDER.sub(lambda match: escape(spans[int(match.group(1))], quote=False), html)


# Shared by the Qt thread and the API worker threads; rendering is read-only.
renderer = MarkdownMathRenderer()
