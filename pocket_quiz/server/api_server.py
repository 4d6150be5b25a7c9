"""FastAPI server that exposes the quiz to phone browsers."""

from __future__ import annotations

from threading import Thread
import logging

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
import uvicorn

from pocket_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from pocket_quiz.constants.quiz_constants import (
    SESSION_COOKIE_MAX_AGE_SECONDS,
    SESSION_COOKIE_NAME,
)
from pocket_quiz.core.markdown_math_renderer import renderer
from pocket_quiz.core.models import (
    IncompleteAnswersError,
    MultiSelection,
    SelectionRequiredError,
    SessionCompleteError,
)
from pocket_quiz.core.question_renderer import render_summary_fragment
from pocket_quiz.core.quiz_controller import QuizController
from pocket_quiz.core.services.session_registry import SessionRegistry

logger = logging.getLogger(__name__)

_MOBILE_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>PocketQuiz</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body { font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: #f5f5f5; color: #111; }
      .card { background: #fff; border-radius: 0.75rem; padding: 1rem; box-shadow: 0 1px 4px rgba(0,0,0,0.1); }
      .hidden { display: none; }
      #progress, #hint { color: #666; font-size: 0.9rem; }
      #prompt { font-size: 1.15rem; font-weight: bold; margin: 0.75rem 0; }
      .choices { display: flex; flex-direction: column; gap: 0.5rem; }
      .choice-button { border: 1px solid #d1d1d1; border-radius: 0.5rem; padding: 0.85rem; font-size: 1rem; background: #f5f5f5; text-align: left; }
      .choice-button.selected { background: #0078d4; color: #fff; border-color: #0078d4; }
      #next-button { margin-top: 1rem; width: 100%; padding: 0.85rem; font-size: 1rem; border: none; border-radius: 0.5rem; background: #0078d4; color: #fff; }
      #next-button:disabled { opacity: 0.4; }
      .score { font-size: 1.3rem; margin-bottom: 1rem; }
      .question-block { margin-bottom: 1.25rem; }
      .prompt { font-weight: bold; margin: 0.75rem 0 0.25rem 0; }
      .choice { margin: 0.15rem 0; }
      .selected-correct { font-weight: bold; color: #107c10; }
      .selected-incorrect { text-decoration: line-through; color: #d13438; }
      #status { color: #d13438; min-height: 1.25rem; }
    </style>
    <script>
      window.MathJax = { tex: { inlineMath: [['$','$']], displayMath: [['$$','$$']] }, svg: { fontCache: 'global' } };
    </script>
    <script defer src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"></script>
  </head>
  <body>
    <section class="card" id="question-card">
      <div id="progress"></div>
      <div id="prompt"></div>
      <div id="hint"></div>
      <div id="choices" class="choices"></div>
      <button id="next-button" disabled>Next</button>
      <p id="status"></p>
    </section>
    <section class="card hidden" id="summary-card">
      <div id="summary"></div>
    </section>
    <script>
      const progressEl = document.getElementById('progress');
      const promptEl = document.getElementById('prompt');
      const hintEl = document.getElementById('hint');
      const choicesEl = document.getElementById('choices');
      const nextButton = document.getElementById('next-button');
      const statusEl = document.getElementById('status');
      const questionCard = document.getElementById('question-card');
      const summaryCard = document.getElementById('summary-card');
      const summaryEl = document.getElementById('summary');

      async function typesetMath(targets) {
        if (window.MathJax && window.MathJax.typesetPromise) {
          try {
            await window.MathJax.typesetPromise(targets);
          } catch (err) {
            console.warn('MathJax typeset error:', err);
          }
        }
      }

      async function send(method, url, body) {
        const options = { method, headers: { 'Content-Type': 'application/json' } };
        if (body !== undefined) {
          options.body = JSON.stringify(body);
        }
        const response = await fetch(url, options);
        const payload = await response.json().catch(() => ({}));
        if (!response.ok) {
          throw new Error(payload.detail || 'Request failed');
        }
        return payload;
      }

      function renderState(state) {
        if (state.complete) {
          loadSummary();
          return;
        }
        statusEl.textContent = '';
        progressEl.textContent = `Question ${state.question_number} of ${state.question_count}`;
        promptEl.innerHTML = state.prompt_html;
        hintEl.textContent = state.question_type === 'multi-choice' ? 'Select all that apply.' : 'Select one answer.';
        choicesEl.innerHTML = '';
        state.choices.forEach((choiceHtml, index) => {
          const button = document.createElement('button');
          button.className = 'choice-button';
          if (state.selected.includes(index)) {
            button.classList.add('selected');
          }
          button.innerHTML = choiceHtml;
          button.addEventListener('click', () => toggleChoice(index));
          choicesEl.appendChild(button);
        });
        nextButton.textContent = state.is_last_question ? 'Finish' : 'Next';
        nextButton.disabled = !state.can_advance;
        typesetMath([promptEl, choicesEl]);
      }

      async function loadState() {
        try {
          renderState(await send('GET', '/state'));
        } catch (error) {
          statusEl.textContent = error.message;
        }
      }

      async function toggleChoice(index) {
        try {
          renderState(await send('POST', '/toggle', { choice_index: index }));
        } catch (error) {
          statusEl.textContent = error.message;
        }
      }

      async function nextQuestion() {
        nextButton.disabled = true;
        try {
          renderState(await send('POST', '/next'));
        } catch (error) {
          statusEl.textContent = error.message;
        }
      }

      async function loadSummary() {
        try {
          const summary = await send('GET', '/summary');
          summaryEl.innerHTML = summary.summary_html;
          questionCard.classList.add('hidden');
          summaryCard.classList.remove('hidden');
          typesetMath([summaryEl]);
        } catch (error) {
          statusEl.textContent = error.message;
        }
      }

      nextButton.addEventListener('click', nextQuestion);
      loadState();
    </script>
  </body>
</html>
"""


class TogglePayload(BaseModel):
    """Payload schema for a tap on a choice."""

    choice_index: int


def _get_registry_dependency(registry: SessionRegistry):
    def dependency() -> SessionRegistry:
        return registry

    return dependency


def _remember_session(request: Request, response: Response, session_id: str) -> None:
    if request.cookies.get(SESSION_COOKIE_NAME) == session_id:
        return
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session_id,
        max_age=SESSION_COOKIE_MAX_AGE_SECONDS,
        samesite="lax",
    )


def _selected_indices(controller: QuizController) -> list[int]:
    selection = controller.get_selection()
    if isinstance(selection, MultiSelection):
        return sorted(selection.indices)
    return [] if selection.index is None else [selection.index]


def _state_payload(controller: QuizController) -> dict[str, object]:
    snapshot = controller.snapshot()
    session = snapshot.session
    if snapshot.is_complete:
        return {
            "complete": True,
            "question_number": session.question_count,
            "question_count": session.question_count,
        }

    question = session.current_question()
    return {
        "complete": False,
        "question_number": session.current_index + 1,
        "question_count": session.question_count,
        "question_type": question.type.value,
        "prompt_html": renderer.render_fragment(question.prompt),
        "choices": [renderer.render_inline(choice) for choice in question.choices],
        "selected": _selected_indices(controller),
        "can_advance": snapshot.can_advance,
        "is_last_question": session.is_last_question,
    }


def _summary_payload(controller: QuizController) -> dict[str, object]:
    summary = controller.get_score()
    rows = controller.get_summary_rows()
    return {
        "total": summary.total,
        "question_count": summary.question_count,
        "score": summary.format_total(),
        "per_question": list(summary.per_question),
        "questions": [
            {
                "prompt": row.question.prompt,
                "correct": row.is_correct,
                "choices": [
                    {"label": choice, "mark": mark.value}
                    for choice, mark in zip(row.question.choices, row.marks)
                ],
            }
            for row in rows
        ],
        "summary_html": render_summary_fragment(summary, rows),
    }


def _error_response(
    request: Request,
    session_id: str,
    status_code: int,
    exc: Exception,
) -> JSONResponse:
    """Build an error response that still carries the session cookie."""
    response = JSONResponse(status_code=status_code, content={"detail": str(exc)})
    _remember_session(request, response, session_id)
    return response


def create_api_app(registry: SessionRegistry) -> FastAPI:
    """Create a FastAPI application serving quizzes from ``registry``."""

    app = FastAPI(title="PocketQuiz API", version="0.1.0")
    registry_dep = _get_registry_dependency(registry)

    @app.get("/", response_class=HTMLResponse)
    def serve_mobile_page() -> str:
        return _MOBILE_PAGE_HTML

    @app.get("/state")
    def get_state(
        request: Request,
        response: Response,
        sessions: SessionRegistry = Depends(registry_dep),
    ) -> dict[str, object]:
        with sessions.use(request.cookies.get(SESSION_COOKIE_NAME)) as (session_id, controller):
            _remember_session(request, response, session_id)
            return _state_payload(controller)

    @app.post("/toggle", response_model=None)
    def toggle_choice(
        payload: TogglePayload,
        request: Request,
        response: Response,
        sessions: SessionRegistry = Depends(registry_dep),
    ) -> dict[str, object] | JSONResponse:
        with sessions.use(request.cookies.get(SESSION_COOKIE_NAME)) as (session_id, controller):
            try:
                controller.toggle_choice(payload.choice_index)
            except SessionCompleteError as exc:
                return _error_response(request, session_id, 409, exc)
            except ValueError as exc:
                return _error_response(request, session_id, 422, exc)
            _remember_session(request, response, session_id)
            return _state_payload(controller)

    @app.post("/next", response_model=None)
    def next_question(
        request: Request,
        response: Response,
        sessions: SessionRegistry = Depends(registry_dep),
    ) -> dict[str, object] | JSONResponse:
        with sessions.use(request.cookies.get(SESSION_COOKIE_NAME)) as (session_id, controller):
            try:
                controller.commit()
            except (SelectionRequiredError, SessionCompleteError) as exc:
                return _error_response(request, session_id, 409, exc)
            _remember_session(request, response, session_id)
            return _state_payload(controller)

    @app.get("/summary", response_model=None)
    def get_summary(
        request: Request,
        response: Response,
        sessions: SessionRegistry = Depends(registry_dep),
    ) -> dict[str, object] | JSONResponse:
        with sessions.use(request.cookies.get(SESSION_COOKIE_NAME)) as (session_id, controller):
            try:
                payload = _summary_payload(controller)
            except IncompleteAnswersError as exc:
                return _error_response(request, session_id, 409, exc)
            _remember_session(request, response, session_id)
            return payload

    return app


def start_api_server(
    registry: SessionRegistry,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""

    app = create_api_app(registry)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    logger.info("Mobile quiz server listening on %s:%d", host, port)
    return thread
