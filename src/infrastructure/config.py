"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_SESSION_FILE = Path.home() / ".config" / "atcoder-session-client" / "session.json"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """Client configuration."""

    session_file: Path | None = field(default_factory=lambda: DEFAULT_SESSION_FILE)
    submit_language: str = "rust"
    http_timeout: float = 30.0
    impersonate: str = "chrome"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Build settings from ATCODER_* environment variables.

        Args:
            dotenv: Load a .env file first

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        if dotenv:
            load_dotenv()

        session_file = os.getenv("ATCODER_SESSION_FILE")
        return cls(
            session_file=Path(session_file).expanduser() if session_file else DEFAULT_SESSION_FILE,
            submit_language=os.getenv("ATCODER_SUBMIT_LANGUAGE") or "rust",
            http_timeout=_float_env("ATCODER_HTTP_TIMEOUT", 30.0),
            impersonate=os.getenv("ATCODER_IMPERSONATE") or "chrome",
            log_level=(os.getenv("ATCODER_LOG_LEVEL") or "INFO").upper(),
        )
