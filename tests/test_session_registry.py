"""
Tests for the per-browser session store.
"""

import pytest

from pocket_quiz.core.services.session_registry import SessionRegistry


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


class TestSessionRegistry:
    def test_unknown_id_starts_new_session(self, sample_set):
        registry = SessionRegistry(sample_set)
        with registry.use("not-a-session") as (session_id, _):
            assert session_id != "not-a-session"
        assert registry.has_session(session_id)

    def test_known_id_returns_same_controller(self, sample_set):
        registry = SessionRegistry(sample_set)
        with registry.use(None) as (session_id, first):
            first.toggle_choice(1)
        with registry.use(session_id) as (same_id, second):
            assert same_id == session_id
            assert second is first
        assert registry.session_count() == 1

    def test_session_count_is_capped(self, sample_set):
        registry = SessionRegistry(sample_set, max_sessions=5)
        for _ in range(200):
            with registry.use(None):
                pass
        assert registry.session_count() == 5

    def test_least_recently_used_is_dropped_first(self, sample_set, clock):
        registry = SessionRegistry(sample_set, max_sessions=2, clock=clock)
        with registry.use(None) as (first_id, _):
            pass
        with registry.use(None) as (second_id, _):
            pass
        with registry.use(first_id):
            pass
        with registry.use(None) as (third_id, _):
            pass
        assert registry.has_session(first_id)
        assert not registry.has_session(second_id)
        assert registry.has_session(third_id)

    def test_idle_sessions_expire(self, sample_set, clock):
        registry = SessionRegistry(sample_set, max_idle_seconds=60, clock=clock)
        with registry.use(None) as (stale_id, _):
            pass
        clock.now = 30
        with registry.use(None) as (fresh_id, _):
            pass

        clock.now = 61
        with registry.use(fresh_id):
            pass
        assert not registry.has_session(stale_id)
        assert registry.has_session(fresh_id)

    def test_expired_cookie_starts_over(self, sample_set, clock):
        registry = SessionRegistry(sample_set, max_idle_seconds=60, clock=clock)
        with registry.use(None) as (session_id, controller):
            controller.toggle_choice(1)
        clock.now = 120
        with registry.use(session_id) as (new_id, new_controller):
            assert new_id != session_id
            assert new_controller is not controller
        assert registry.session_count() == 1

    def test_invalid_capacity(self, sample_set):
        with pytest.raises(ValueError):
            SessionRegistry(sample_set, max_sessions=0)
