"""Quiz-related constants shared across UI, server and core layers."""

DEFAULT_QUESTION_FILE: str = "quiz_questions.txt"
SESSION_COOKIE_NAME: str = "pocketquiz_session"
SESSION_COOKIE_MAX_AGE_SECONDS: int = 60 * 60 * 24
MAX_WEB_SESSIONS: int = 500
