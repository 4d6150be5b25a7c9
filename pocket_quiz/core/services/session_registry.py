"""Keeps one quiz controller per connected browser."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import logging
from threading import Lock
import time
from uuid import uuid4

from pocket_quiz.constants.quiz_constants import (
    MAX_WEB_SESSIONS,
    SESSION_COOKIE_MAX_AGE_SECONDS,
)
from pocket_quiz.core.question_set import QuestionSet
from pocket_quiz.core.quiz_controller import QuizController

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _SessionEntry:
    controller: QuizController
    last_used: float


class SessionRegistry:
    """Maps opaque session ids to independent quiz controllers.

    Every controller shares the same read-only question set. The API server
    handles requests on worker threads, so controllers are only handed out
    while the registry lock is held.

    Sessions idle for longer than ``max_idle_seconds`` are dropped, and once
    ``max_sessions`` are stored the least recently used one makes room for a
    new browser.
    """

    def __init__(
        self,
        question_set: QuestionSet,
        *,
        max_sessions: int = MAX_WEB_SESSIONS,
        max_idle_seconds: float = SESSION_COOKIE_MAX_AGE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._question_set = question_set
        self._max_sessions = max_sessions
        self._max_idle_seconds = max_idle_seconds
        self._clock = clock
        # Ordered from least to most recently used.
        self._entries: OrderedDict[str, _SessionEntry] = OrderedDict()
        self._lock = Lock()

    @contextmanager
    def use(self, session_id: str | None) -> Iterator[tuple[str, QuizController]]:
        """Yield the controller for ``session_id``; unknown ids start a new quiz."""
        with self._lock:
            yield self._get_or_create(session_id)

    def _get_or_create(self, session_id: str | None) -> tuple[str, QuizController]:
        now = self._clock()
        self._evict_idle(now)

        if session_id is not None:
            entry = self._entries.get(session_id)
            if entry is not None:
                entry.last_used = now
                self._entries.move_to_end(session_id)
                return session_id, entry.controller

        while len(self._entries) >= self._max_sessions:
            dropped_id, _ = self._entries.popitem(last=False)
            logger.info("Dropped web quiz session %s to make room", dropped_id)

        new_id = uuid4().hex
        controller = QuizController(self._question_set)
        self._entries[new_id] = _SessionEntry(controller=controller, last_used=now)
        logger.info("Started web quiz session %s", new_id)
        return new_id, controller

    def _evict_idle(self, now: float) -> None:
        while self._entries:
            oldest_id, oldest = next(iter(self._entries.items()))
            if now - oldest.last_used <= self._max_idle_seconds:
                break
            del self._entries[oldest_id]
            logger.info("Expired idle web quiz session %s", oldest_id)

    def session_count(self) -> int:
        with self._lock:
            return len(self._entries)

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._entries
