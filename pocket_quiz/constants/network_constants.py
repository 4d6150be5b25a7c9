"""Network configuration constants for the mobile quiz page."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
