"""Centralized configuration with environment-variable overrides."""
from __future__ import annotations
from dataclasses import dataclass
import os

from curl_remote.utils.constants import DEFAULT_USER_AGENT

def _env(key: str, default: str) -> str:
    """Read an environment variable with a fallback."""
    return os.getenv(key, default)

def _env_int(key: str, default: int) -> int:
    """Read an integer env var with fallback."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default

@dataclass(frozen=True)
class Settings:
    """Client settings (override via env vars)."""
    app_name: str = "curl-remote"
    log_level: str = "INFO"
    # 0 disables the timeout: requests block until the server answers.
    request_timeout_seconds: int = 0
    default_user_agent: str = DEFAULT_USER_AGENT

    @property
    def timeout(self) -> float | None:
        """Timeout to hand to requests, or None when disabled."""
        return self.request_timeout_seconds if self.request_timeout_seconds > 0 else None

    @staticmethod
    def from_env() -> "Settings":
        """Build settings from environment variables."""
        return Settings(
            app_name=_env("APP_NAME", "curl-remote"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            request_timeout_seconds=_env_int("REQUEST_TIMEOUT_SECONDS", 0),
            default_user_agent=_env("DEFAULT_USER_AGENT", DEFAULT_USER_AGENT) or DEFAULT_USER_AGENT,
        )
